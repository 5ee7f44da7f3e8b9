"""Single-player video poker session: bet, deal, hold, draw, pay."""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from config.settings import Config
from poker.cards import Card, Deck
from poker.errors import GameStateError, InvalidBet, InvalidHoldPositions
from poker.hand_evaluator import HAND_SIZE, EvaluationResult, HandEvaluator
from poker.payouts import PayoutTable

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    """Where a session is within a round."""

    BETTING = auto()  # Waiting for a wager
    BET_PLACED = auto()  # Wager taken, cards not dealt yet
    DEALT = auto()  # Five cards out, waiting for holds


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one completed round."""

    hand: tuple[Card, ...]
    held: tuple[int, ...]
    evaluation: EvaluationResult
    bet: int
    multiplier: int
    winnings: int
    balance: int

    @property
    def won(self) -> bool:
        return self.winnings > 0


def parse_hold_positions(text: str) -> list[int]:
    """Parse 1-based hold positions such as '1 4 5', '1,4,5' or '145'.

    Duplicates are dropped and the result is sorted. Empty input holds nothing.
    """
    cleaned = text.strip()
    if not cleaned:
        return []
    if not re.fullmatch(r"[\d\s,]+", cleaned):
        raise InvalidHoldPositions(f"Positions must be digits 1-{HAND_SIZE}: {text!r}")

    positions = set()
    for token in re.split(r"[\s,]+", cleaned):
        if not token:
            continue
        # A run like "145" means positions 1, 4 and 5
        for digit in token:
            position = int(digit)
            if not 1 <= position <= HAND_SIZE:
                raise InvalidHoldPositions(f"Position out of range 1-{HAND_SIZE}: {position}")
            positions.add(position)
    return sorted(positions)


class GameSession:
    """One player's balance and deck across rounds.

    Each session owns its deck; nothing is shared between sessions.
    """

    def __init__(
        self,
        config: Config | None = None,
        deck: Deck | None = None,
        payouts: PayoutTable | None = None,
    ) -> None:
        self.config = config or Config()
        game = self.config.game
        self.deck = deck or Deck(num_decks=game.num_decks, seed=game.seed)
        self.payouts = payouts or PayoutTable.from_overrides(self.config.payouts)
        self.balance = game.starting_balance
        self.bet = 0
        self.hand: list[Card] = []
        self.phase = SessionPhase.BETTING
        self.rounds_played = 0

    @property
    def is_broke(self) -> bool:
        return self.balance <= 0

    def place_bet(self, amount: int) -> None:
        """Take a wager of 0 < amount <= balance out of the balance."""
        if self.phase != SessionPhase.BETTING:
            raise GameStateError(f"Cannot bet during {self.phase.name}")
        if amount <= 0 or amount > self.balance:
            raise InvalidBet(f"Bet must be between 1 and {self.balance}, got {amount}")
        self.bet = amount
        self.balance -= amount
        self.phase = SessionPhase.BET_PLACED
        logger.info("Bet %d, balance now %d", amount, self.balance)

    def deal(self) -> list[Card]:
        """Reset and shuffle the deck, then deal a fresh five-card hand."""
        if self.phase != SessionPhase.BET_PLACED:
            raise GameStateError(f"Cannot deal during {self.phase.name}")
        self.deck.reset()
        self.deck.shuffle()
        self.hand = self.deck.deal(HAND_SIZE)
        self.phase = SessionPhase.DEALT
        logger.debug("Dealt %s", " ".join(str(c) for c in self.hand))
        return list(self.hand)

    def draw(self, hold_positions: list[int] | None = None) -> RoundResult:
        """Replace every card not held, evaluate, and pay out.

        Held cards keep their slots; positions are 1-based.
        """
        if self.phase != SessionPhase.DEALT:
            raise GameStateError(f"Cannot draw during {self.phase.name}")
        held = set(hold_positions or [])
        if any(not 1 <= p <= HAND_SIZE for p in held):
            raise InvalidHoldPositions(f"Positions must be in 1-{HAND_SIZE}: {sorted(held)}")

        replace_slots = [i for i in range(HAND_SIZE) if i + 1 not in held]
        replacements = self.deck.deal(len(replace_slots))
        for slot, card in zip(replace_slots, replacements):
            self.hand[slot] = card

        evaluation = HandEvaluator.evaluate(self.hand)
        multiplier = self.payouts.multiplier(evaluation)
        winnings = self.bet * multiplier
        self.balance += winnings
        self.rounds_played += 1

        result = RoundResult(
            hand=tuple(self.hand),
            held=tuple(sorted(held)),
            evaluation=evaluation,
            bet=self.bet,
            multiplier=multiplier,
            winnings=winnings,
            balance=self.balance,
        )
        logger.info(
            "Round %d: %s (held %s) -> %s x%d, won %d, balance %d",
            self.rounds_played,
            " ".join(str(c) for c in result.hand),
            list(result.held) or "none",
            evaluation.description,
            multiplier,
            winnings,
            self.balance,
        )

        self.bet = 0
        self.phase = SessionPhase.BETTING
        return result

    def cancel_round(self) -> int:
        """Abandon an unfinished round and return its stake to the balance.

        Returns the refunded amount; 0 when no round is in progress.
        """
        refund = self.bet
        if self.phase != SessionPhase.BETTING:
            self.balance += refund
            logger.info("Round abandoned, refunded %d, balance %d", refund, self.balance)
        self.bet = 0
        self.hand = []
        self.phase = SessionPhase.BETTING
        return refund
