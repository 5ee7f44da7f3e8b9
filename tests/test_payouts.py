"""Tests for the payout table (poker/payouts.py)."""

import pytest

from poker.hand_evaluator import HandCategory, HandEvaluator
from poker.payouts import DEFAULT_MULTIPLIERS, PayoutTable, category_from_name
from tests.helpers.card_utils import make_cards_from_strings


def multiplier_for(cards: list[str], table: PayoutTable | None = None) -> int:
    table = table or PayoutTable()
    return table.multiplier(HandEvaluator.evaluate(make_cards_from_strings(cards)))


class TestDefaultPayouts:
    @pytest.mark.parametrize(
        "cards,expected",
        [
            (["As", "3d", "Qd", "Js", "9d"], 0),  # No pair
            (["3s", "3d", "Qd", "Js", "9d"], 0),  # Low pair
            (["Ts", "Td", "Qd", "Js", "9d"], 0),
            (["Js", "Jd", "Qd", "2s", "9d"], 1),  # Royal pair
            (["As", "Ad", "Qd", "2s", "9d"], 1),
            (["8s", "8c", "Jd", "Js", "9d"], 2),
            (["8s", "8c", "8d", "Qs", "Js"], 3),
            (["9s", "Ts", "Jc", "Qs", "Ks"], 5),
            (["Ac", "2d", "3h", "4s", "5c"], 5),
            (["9s", "Ts", "Js", "Qs", "5s"], 6),
            (["8s", "8c", "8d", "Js", "Jd"], 9),
            (["8s", "8c", "8d", "8h", "Qs"], 25),
            (["9s", "Ts", "Js", "Qs", "Ks"], 50),
            (["As", "Ts", "Js", "Qs", "Ks"], 250),
        ],
    )
    def test_multiplier(self, cards, expected):
        assert multiplier_for(cards) == expected

    def test_payout_is_bet_times_multiplier(self):
        table = PayoutTable()
        result = HandEvaluator.evaluate(make_cards_from_strings(["8s", "8c", "8d", "Js", "Jd"]))
        assert table.payout(result, 10) == 90

    def test_losing_hand_pays_zero(self):
        table = PayoutTable()
        result = HandEvaluator.evaluate(make_cards_from_strings(["3s", "3d", "Qd", "Js", "9d"]))
        assert table.payout(result, 50) == 0

    def test_rows_best_first(self):
        rows = PayoutTable().rows()
        assert rows[0] == ("Royal Flush", 250)
        assert rows[-1] == ("Royal Pair", 1)
        assert len(rows) == 9
        assert [m for _, m in rows] == sorted((m for _, m in rows), reverse=True)


class TestCustomPayouts:
    def test_overrides_by_name(self):
        table = PayoutTable.from_overrides({"full house": 8, "FLUSH": 5})
        assert table.multipliers[HandCategory.FULL_HOUSE] == 8
        assert table.multipliers[HandCategory.FLUSH] == 5
        assert table.multipliers[HandCategory.ROYAL_FLUSH] == 250

    def test_low_pair_never_pays_even_if_pair_overridden(self):
        table = PayoutTable.from_overrides({"one_pair": 2})
        assert multiplier_for(["3s", "3d", "Qd", "Js", "9d"], table) == 0
        assert multiplier_for(["Qs", "Qd", "3d", "Js", "9d"], table) == 2

    def test_missing_categories_use_defaults(self):
        table = PayoutTable(multipliers={HandCategory.FLUSH: 7})
        assert table.multipliers[HandCategory.FLUSH] == 7
        assert table.multipliers[HandCategory.STRAIGHT] == DEFAULT_MULTIPLIERS[HandCategory.STRAIGHT]

    def test_caller_dict_not_modified(self):
        multipliers = {HandCategory.FLUSH: 7}
        table = PayoutTable(multipliers=multipliers)
        assert multipliers == {HandCategory.FLUSH: 7}
        table.multipliers[HandCategory.FLUSH] = 1
        assert multipliers[HandCategory.FLUSH] == 7

    def test_negative_multiplier_rejected(self):
        with pytest.raises(ValueError, match=">= 0"):
            PayoutTable.from_overrides({"straight": -1})

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown hand category"):
            category_from_name("five of a kind")

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("royal flush", HandCategory.ROYAL_FLUSH),
            ("Four-of-a-Kind", HandCategory.FOUR_OF_A_KIND),
            ("TWO_PAIR", HandCategory.TWO_PAIR),
        ],
    )
    def test_category_from_name(self, name, expected):
        assert category_from_name(name) == expected
