"""Core draw poker engine: cards, deck, hand evaluation and payouts."""

from poker.cards import Card, Deck, Rank, Suit
from poker.errors import (
    GameStateError,
    InsufficientCards,
    InvalidBet,
    InvalidCard,
    InvalidDeckCount,
    InvalidHandSize,
    InvalidHoldPositions,
    PlayingCardError,
)
from poker.hand_evaluator import EvaluationResult, HandCategory, HandEvaluator, evaluate
from poker.payouts import PayoutTable

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "EvaluationResult",
    "HandCategory",
    "HandEvaluator",
    "evaluate",
    "PayoutTable",
    "PlayingCardError",
    "InvalidCard",
    "InvalidDeckCount",
    "InsufficientCards",
    "InvalidHandSize",
    "InvalidBet",
    "InvalidHoldPositions",
    "GameStateError",
]
