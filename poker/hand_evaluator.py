"""Hand evaluation for five-card draw poker."""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Sequence

from poker.cards import Card, Rank, rank_label
from poker.errors import InvalidHandSize

HAND_SIZE = 5
ACE_HIGH = 14

# Ranks that make a paying pair (jacks or better)
ROYAL_PAIR_RANKS = frozenset({11, 12, 13, ACE_HIGH})


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    NO_PAIR = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        names = {
            1: "No Pair",
            2: "One Pair",
            3: "Two Pair",
            4: "Three of a Kind",
            5: "Straight",
            6: "Flush",
            7: "Full House",
            8: "Four of a Kind",
            9: "Straight Flush",
            10: "Royal Flush",
        }
        return names[self.value]


@dataclass(frozen=True, slots=True)
class HandFeatures:
    """Rank groups, flush and straight facts extracted from five cards.

    Rank values are on the ace-high scale (2-14). ``large_group`` is the
    largest multiplicity and ``small_group`` the next largest; a group of 1
    means no repeated rank. Ties between equal-sized groups put the higher
    rank in ``large_rank``.
    """

    counts: tuple[tuple[int, int], ...]  # (rank, count), largest group first
    large_group: int
    large_rank: int
    small_group: int
    small_rank: int | None
    is_flush: bool
    straight_top: int | None  # 5 for the wheel, 14 for ace-high

    @property
    def is_straight(self) -> bool:
        return self.straight_top is not None

    @property
    def singles(self) -> tuple[int, ...]:
        """Unpaired rank values, high to low."""
        return tuple(rank for rank, count in self.counts if count == 1)


def extract_features(cards: Sequence[Card]) -> HandFeatures:
    """Count ranks and detect flush/straight for exactly five cards."""
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(f"Expected {HAND_SIZE} cards, got {len(cards)}")

    rank_counts = Counter(card.rank for card in cards)
    counts = tuple(
        sorted(
            ((Rank(rank).high_value, count) for rank, count in rank_counts.items()),
            key=lambda rc: (rc[1], rc[0]),
            reverse=True,
        )
    )

    # Two groups are enough: five cards can't hold three pairs
    large_rank, large_group = counts[0]
    if len(counts) > 1:
        small_rank, small_group = counts[1]
    else:
        small_rank, small_group = None, 0

    reference_suit = cards[0].suit
    is_flush = all(card.suit == reference_suit for card in cards)

    return HandFeatures(
        counts=counts,
        large_group=large_group,
        large_rank=large_rank,
        small_group=small_group,
        small_rank=small_rank,
        is_flush=is_flush,
        straight_top=_straight_top(rank_counts),
    )


def _straight_top(rank_counts: Counter) -> int | None:
    """Top rank of a five-card straight, or None.

    Every rank in the window must appear exactly once. The ace counts low
    for A-2-3-4-5 (top 5) and high for 10-J-Q-K-A (top 14).
    """
    if len(rank_counts) != HAND_SIZE:
        return None
    for low in range(1, 10):
        if all(rank_counts[rank] == 1 for rank in range(low, low + 5)):
            return low + 4
    if all(rank_counts[rank] == 1 for rank in (10, 11, 12, 13, 1)):
        return ACE_HIGH
    return None


# Category predicates, each testable on its own

def is_royal_flush(f: HandFeatures) -> bool:
    return f.is_flush and f.straight_top == ACE_HIGH


def is_straight_flush(f: HandFeatures) -> bool:
    return f.is_flush and f.is_straight


def is_four_of_a_kind(f: HandFeatures) -> bool:
    # Five of one rank only occurs with several decks and counts here
    return f.large_group >= 4


def is_full_house(f: HandFeatures) -> bool:
    return f.large_group == 3 and f.small_group == 2


def is_flush(f: HandFeatures) -> bool:
    return f.is_flush


def is_straight(f: HandFeatures) -> bool:
    return f.is_straight


def is_three_of_a_kind(f: HandFeatures) -> bool:
    return f.large_group == 3 and f.small_group != 2


def is_two_pair(f: HandFeatures) -> bool:
    return f.large_group == 2 and f.small_group == 2


def is_one_pair(f: HandFeatures) -> bool:
    return f.large_group == 2 and f.small_group != 2


def is_no_pair(f: HandFeatures) -> bool:
    return f.large_group == 1


# Best first; the first matching rule decides the category
CATEGORY_RULES: tuple[tuple[HandCategory, Callable[[HandFeatures], bool]], ...] = (
    (HandCategory.ROYAL_FLUSH, is_royal_flush),
    (HandCategory.STRAIGHT_FLUSH, is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandCategory.FULL_HOUSE, is_full_house),
    (HandCategory.FLUSH, is_flush),
    (HandCategory.STRAIGHT, is_straight),
    (HandCategory.THREE_OF_A_KIND, is_three_of_a_kind),
    (HandCategory.TWO_PAIR, is_two_pair),
    (HandCategory.ONE_PAIR, is_one_pair),
    (HandCategory.NO_PAIR, is_no_pair),
)


def classify(features: HandFeatures) -> HandCategory:
    """Return the best category whose rule matches."""
    for category, rule in CATEGORY_RULES:
        if rule(features):
            return category
    raise AssertionError(f"No hand category matched {features}")


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Result of evaluating a five-card hand.

    ``rank`` and ``second_rank`` are on the ace-high scale (2-14):
    the pair/trips/quads rank, the higher and lower pair of two pair,
    trips then pair for a full house, or the top card of a straight or flush.
    """

    category: HandCategory
    rank: int | None
    second_rank: int | None
    kickers: tuple[int, ...]  # Unpaired values for tie-breaks (high to low)
    cards: tuple[Card, ...]

    @property
    def is_royal_pair(self) -> bool:
        """A pair of jacks, queens, kings or aces."""
        return self.category == HandCategory.ONE_PAIR and self.rank in ROYAL_PAIR_RANKS

    @property
    def is_winning(self) -> bool:
        """Whether the hand pays under jacks-or-better rules."""
        if self.category == HandCategory.ONE_PAIR:
            return self.is_royal_pair
        return self.category > HandCategory.ONE_PAIR

    @property
    def description(self) -> str:
        if self.category == HandCategory.ONE_PAIR:
            return f"Pair of {rank_label(self.rank)}'s"
        if self.category == HandCategory.THREE_OF_A_KIND:
            return f"Three {rank_label(self.rank)}'s"
        if self.category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {rank_label(self.rank)}'s"
        return str(self.category)

    def _sort_key(self) -> tuple:
        return (self.category, self.rank or 0, self.second_rank or 0, self.kickers)

    def __lt__(self, other: "EvaluationResult") -> bool:
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "EvaluationResult") -> bool:
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "EvaluationResult") -> bool:
        return other < self

    def __ge__(self, other: "EvaluationResult") -> bool:
        return other <= self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.description}: {cards_str}"


class HandEvaluator:
    """Evaluate five-card poker hands. Stateless."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> EvaluationResult:
        """Evaluate exactly 5 cards."""
        features = extract_features(cards)
        category = classify(features)
        rank, second_rank = HandEvaluator._category_ranks(category, features)
        return EvaluationResult(
            category=category,
            rank=rank,
            second_rank=second_rank,
            kickers=features.singles,
            cards=tuple(cards),
        )

    @staticmethod
    def _category_ranks(
        category: HandCategory, f: HandFeatures
    ) -> tuple[int | None, int | None]:
        if category in (HandCategory.ROYAL_FLUSH, HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
            return f.straight_top, None
        if category in (HandCategory.TWO_PAIR, HandCategory.FULL_HOUSE):
            return f.large_rank, f.small_rank
        if category in (
            HandCategory.FOUR_OF_A_KIND,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.ONE_PAIR,
        ):
            return f.large_rank, None
        # Flush and no pair report the highest card
        return max(rank for rank, _ in f.counts), None


def evaluate(cards: Sequence[Card]) -> EvaluationResult:
    """Module-level shortcut for HandEvaluator.evaluate."""
    return HandEvaluator.evaluate(cards)
