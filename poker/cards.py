"""Card, Deck, Suit, and Rank definitions for draw poker."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterator

from poker.errors import InsufficientCards, InvalidCard, InvalidDeckCount

logger = logging.getLogger(__name__)

CARDS_PER_DECK = 52


class Suit(IntEnum):
    """Card suits. Order carries no meaning in play."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}
        return symbols[self.value]

    @property
    def display_name(self) -> str:
        return self.name.title()

    @property
    def code(self) -> str:
        return "cdhs"[self.value]


class Rank(IntEnum):
    """Card ranks (1-13, where 1 is Ace)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return RANK_LABELS[self.value]

    @property
    def high_value(self) -> int:
        """Value with the ace counted above the king (2-14)."""
        return 14 if self is Rank.ACE else int(self)


RANK_LABELS = ("", "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


def rank_label(value: int) -> str:
    """Label for a rank on either scale, so 1 and 14 both render as 'A'."""
    if value == 14:
        value = 1
    return RANK_LABELS[value]


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # bool is an int subclass but never a card value
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or not 1 <= self.rank <= 13:
            raise InvalidCard(f"Invalid rank: {self.rank}")
        if isinstance(self.suit, bool) or not isinstance(self.suit, int) or not 0 <= self.suit <= 3:
            raise InvalidCard(f"Invalid suit: {self.suit}")
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        return str(self.rank) + str(self.suit)

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def display(self) -> str:
        """Long form, e.g. 'A Spades' or '10 Clubs'."""
        return f"{self.rank!s} {self.suit.display_name}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td' or '10d'."""
        rank_map = {
            "A": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "T": Rank.TEN,
            "10": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }
        suit_map = {
            "c": Suit.CLUBS,
            "d": Suit.DIAMONDS,
            "h": Suit.HEARTS,
            "s": Suit.SPADES,
        }
        s = s.strip()
        if len(s) not in (2, 3):
            raise InvalidCard(f"Invalid card string: {s}")
        rank_text = s[:-1].upper()
        suit_char = s[-1].lower()
        if rank_text not in rank_map:
            raise InvalidCard(f"Invalid rank: {rank_text}")
        if suit_char not in suit_map:
            raise InvalidCard(f"Invalid suit: {suit_char}")
        return cls(rank=rank_map[rank_text], suit=suit_map[suit_char])


class Deck:
    """One or more 52-card decks with a draw pile that is dealt without replacement.

    The original sequence is built once, suit by suit and ace to king within
    each suit. ``reset`` restores the draw pile to exactly that sequence.
    Each instance owns its random generator; decks are not meant to be shared
    between game sessions.
    """

    def __init__(self, num_decks: int = 1, seed: int | None = None) -> None:
        if isinstance(num_decks, bool) or not isinstance(num_decks, int) or num_decks < 1:
            raise InvalidDeckCount(f"Number of decks must be at least 1, got {num_decks}")
        self.num_decks = num_decks
        self._rng = Random(seed)
        self._original: tuple[Card, ...] = tuple(
            Card(rank, suit)
            for _ in range(num_decks)
            for suit in Suit
            for rank in Rank
        )
        self._cards: list[Card] = []
        self.reset()

    @property
    def original(self) -> tuple[Card, ...]:
        """Every card this deck holds, in construction order."""
        return self._original

    def reset(self) -> None:
        """Refill the draw pile from the original sequence."""
        self._cards = list(self._original)
        logger.debug("Deck reset to %d cards", len(self._cards))

    def shuffle(self) -> None:
        """Shuffle the draw pile in place."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled %d cards", len(self._cards))

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the draw pile.

        Nothing is removed when the pile holds fewer than n cards.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCards(f"Cannot deal {n} cards, only {len(self._cards)} remaining")
        dealt = self._cards[:n]
        del self._cards[:n]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def remain(self) -> int:
        """Number of cards remaining in the draw pile."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(card.display() for card in self._cards) + "]"
