"""Jacks-or-better payout table."""

from dataclasses import dataclass, field
from typing import Mapping

from poker.hand_evaluator import EvaluationResult, HandCategory

# Bet multipliers; ONE_PAIR applies to royal pairs only
DEFAULT_MULTIPLIERS: dict[HandCategory, int] = {
    HandCategory.NO_PAIR: 0,
    HandCategory.ONE_PAIR: 1,
    HandCategory.TWO_PAIR: 2,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.STRAIGHT: 5,
    HandCategory.FLUSH: 6,
    HandCategory.FULL_HOUSE: 9,
    HandCategory.FOUR_OF_A_KIND: 25,
    HandCategory.STRAIGHT_FLUSH: 50,
    HandCategory.ROYAL_FLUSH: 250,
}

ROYAL_PAIR_LABEL = "Royal Pair"


def category_from_name(name: str) -> HandCategory:
    """Look up a category by enum name or label ('FULL_HOUSE', 'full house')."""
    key = name.strip().upper().replace(" ", "_").replace("-", "_")
    try:
        return HandCategory[key]
    except KeyError:
        raise ValueError(f"Unknown hand category: {name}") from None


@dataclass
class PayoutTable:
    """Map hand categories to bet multipliers."""

    multipliers: dict[HandCategory, int] = field(default_factory=lambda: dict(DEFAULT_MULTIPLIERS))

    def __post_init__(self) -> None:
        self.multipliers = dict(self.multipliers)
        for category, value in self.multipliers.items():
            if value < 0:
                raise ValueError(f"Multiplier for {category.name} must be >= 0, got {value}")
        missing = set(HandCategory) - set(self.multipliers)
        for category in missing:
            self.multipliers[category] = DEFAULT_MULTIPLIERS[category]

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, int] | None) -> "PayoutTable":
        """Default table with selected categories replaced by name."""
        multipliers = dict(DEFAULT_MULTIPLIERS)
        for name, value in (overrides or {}).items():
            multipliers[category_from_name(name)] = int(value)
        return cls(multipliers=multipliers)

    def multiplier(self, result: EvaluationResult) -> int:
        """Bet multiplier for an evaluated hand. Low pairs pay nothing."""
        if result.category == HandCategory.ONE_PAIR and not result.is_royal_pair:
            return 0
        return self.multipliers[result.category]

    def payout(self, result: EvaluationResult, bet: int) -> int:
        """Amount returned to the player for ``bet``."""
        return bet * self.multiplier(result)

    def rows(self) -> list[tuple[str, int]]:
        """(label, multiplier) pairs, best hand first, for the paying hands."""
        rows = []
        for category in sorted(HandCategory, reverse=True):
            if category == HandCategory.NO_PAIR:
                continue
            label = ROYAL_PAIR_LABEL if category == HandCategory.ONE_PAIR else str(category)
            rows.append((label, self.multipliers[category]))
        return rows


DEFAULT_PAYOUTS = PayoutTable()
