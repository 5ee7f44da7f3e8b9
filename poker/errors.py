"""Exceptions raised by the card, deck, evaluator and session layers."""


class PlayingCardError(ValueError):
    """Base class for errors related to cards, decks and hands."""


class InvalidCard(PlayingCardError):
    """Rank or suit outside the valid range."""


class InvalidDeckCount(PlayingCardError):
    """A deck was requested with fewer than one 52-card set."""


class InsufficientCards(PlayingCardError):
    """More cards were requested than remain in the draw pile."""


class InvalidHandSize(PlayingCardError):
    """A hand passed to the evaluator did not have exactly five cards."""


class InvalidBet(PlayingCardError):
    """Wager is not positive or exceeds the current balance."""


class InvalidHoldPositions(PlayingCardError):
    """Hold selection text could not be parsed into positions 1-5."""


class GameStateError(RuntimeError):
    """Session method called out of order (e.g. draw before deal)."""
