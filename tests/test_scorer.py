"""Tests for niuniu/engine/scorer.py — subset search, wildcard expansion, scoring."""

from __future__ import annotations

import pytest

import niuniu.engine.scorer as scorer
from niuniu.engine.outcome import Bull, HandError, NoBull
from niuniu.engine.scorer import (
    base_outcome,
    correct_card,
    remainder_score,
    score_hand,
    score_with_wildcards,
    solve,
)
from niuniu.engine.wildcards import DEFAULT_WILDCARDS, NO_WILDCARDS, WildcardRules
from tests.conftest import hand


# ─── remainder_score ──────────────────────────────────────────────────────────


class TestRemainderScore:
    def test_single_digit(self):
        assert remainder_score(7) == 7

    def test_teens_wrap(self):
        assert remainder_score(15) == 5

    def test_multiple_of_ten_is_bull_bull(self):
        assert remainder_score(10) == 10
        assert remainder_score(20) == 10

    def test_zero_is_bull_bull(self):
        assert remainder_score(0) == 10


# ─── solve ────────────────────────────────────────────────────────────────────


class TestSolve:
    def test_three_tens_combo(self):
        cards = hand('10 10 10 2 5')
        result = solve((10, 10, 10, 2, 5), cards)
        assert result == Bull(
            score=7,
            combo=('10', '10', '10'),
            remainder=('2', '5'),
            combo_indices=(0, 1, 2),
            remainder_indices=(3, 4),
            values=(10, 10, 10, 2, 5),
        )

    def test_no_bull(self):
        assert solve((1, 1, 1, 2, 4), hand('A A A 2 4')) == NoBull()

    def test_first_combination_wins_ties(self):
        # (0,2,4) and (0,3,4) both sum to 20; the earlier one is kept.
        result = solve((6, 7, 10, 10, 4), hand('3 7 K K 4'))
        assert result.combo_indices == (0, 2, 4)
        assert result.remainder_indices == (1, 3)
        assert result.score == 7

    def test_combo_not_at_front(self):
        # 1+3+6 is the first triple summing to a multiple of ten.
        result = solve((1, 2, 3, 4, 6), hand('A 2 3 4 6'))
        assert result.combo_indices == (0, 2, 4)
        assert result.combo == ('A', '3', '6')
        assert result.remainder == ('2', '4')
        assert result.score == 6

    def test_labels_reported_not_values(self):
        # Values say the '3' is a 6; the combo still shows '3'.
        result = solve((10, 10, 10, 6, 2), hand('10 10 10 3 2'))
        assert result.remainder == ('3', '2')
        assert result.score == 8


# ─── score_with_wildcards ─────────────────────────────────────────────────────


class TestScoreWithWildcards:
    def test_substitution_improves_score(self):
        result = score_with_wildcards(hand('10 10 10 3 2'))
        assert isinstance(result, Bull)
        assert result.score == 8
        assert result.remainder == ('3', '2')
        assert result.values == (10, 10, 10, 6, 2)

    def test_no_wildcards_rule_keeps_face_values(self):
        result = score_with_wildcards(hand('10 10 10 3 2'), NO_WILDCARDS)
        assert result.score == 5
        assert result.values == (10, 10, 10, 3, 2)

    def test_substitution_creates_bull(self):
        assert base_outcome(hand('3 2 2 A A')) == NoBull()
        result = score_with_wildcards(hand('3 2 2 A A'))
        assert isinstance(result, Bull)
        assert result.score == 2
        assert result.combo == ('3', '2', '2')
        assert result.remainder == ('A', 'A')

    def test_no_bull_under_any_assignment(self):
        assert score_with_wildcards(hand('3 A A A 4')) == NoBull()

    def test_identity_kept_when_already_best(self):
        # Identity already gives Bull Bull; later assignments cannot beat it.
        result = score_with_wildcards(hand('3 3 4 K K'))
        assert result.score == 10
        assert result.values == (3, 3, 4, 10, 10)
        assert result.combo_indices == (0, 1, 2)

    def test_six_can_be_scored_as_three(self):
        # 6+6 gives 2; either 6 read as 3 gives 9.  The earlier assignment
        # (second 6 substituted) is reported.
        result = score_with_wildcards(hand('10 10 10 6 6'))
        assert result.score == 9
        assert result.values == (10, 10, 10, 6, 3)
        assert result.remainder == ('6', '6')

    def test_one_way_rule(self):
        one_way = WildcardRules.from_mapping({'3': '6'})
        assert score_with_wildcards(hand('10 10 10 3 2'), one_way).score == 8
        # A 6 is not a wildcard under a 3 -> 6 rule.
        assert score_with_wildcards(hand('10 10 10 6 A'), one_way).score == 7

    def test_custom_rule_table(self):
        ace_king = WildcardRules.symmetric('A', 'K')
        result = score_with_wildcards(hand('A A A 2 4'), ace_king)
        assert result.score == 6
        assert result.combo == ('A', 'A', 'A')
        assert result.values == (10, 10, 10, 2, 4)

    def test_short_hand_returns_error(self):
        assert score_with_wildcards(hand('10 10')) == HandError("Found only 2 cards.", 2)

    def test_short_hand_skips_subset_search(self, monkeypatch):
        calls = []
        monkeypatch.setattr(scorer, "solve", lambda v, c: calls.append(v))
        score_with_wildcards(hand('3 6 3'))
        assert calls == []

    def test_every_assignment_is_searched(self, monkeypatch):
        seen: list[tuple[int, ...]] = []
        real_solve = scorer.solve

        def counting_solve(values, cards):
            seen.append(tuple(values))
            return real_solve(values, cards)

        monkeypatch.setattr(scorer, "solve", counting_solve)
        score_with_wildcards(hand('2 3 4 5 6'))
        assert seen == [
            (2, 3, 4, 5, 6),
            (2, 3, 4, 5, 3),
            (2, 6, 4, 5, 3),
            (2, 6, 4, 5, 6),
        ]

    def test_tied_assignments_keep_earliest_in_counter_order(self):
        # Reading either 3 as a 6 gives Bull 8; the first 3 flips first.
        result = score_with_wildcards(hand('2 2 3 5 3'))
        assert result.score == 8
        assert result.values == (2, 2, 6, 5, 3)
        assert result.combo == ('2', '2', '3')
        assert result.combo_indices == (0, 1, 2)
        assert result.remainder == ('5', '3')

    def test_upgrade_reported_from_first_best_assignment(self):
        # Face values give Bull 6; the first Bull 9 reads both 3s as 6 and the
        # 6 as 3.
        result = score_with_wildcards(hand('2 2 3 6 3'))
        assert result.score == 9
        assert result.values == (2, 2, 6, 3, 6)
        assert result.combo == ('2', '2', '3')
        assert result.remainder == ('6', '3')


# ─── score_hand ───────────────────────────────────────────────────────────────


class TestScoreHand:
    def test_two_cards_is_error(self):
        result = score_hand(['K', 'Q'])
        assert isinstance(result, HandError)
        assert result.count == 2
        assert result.message == "Found only 2 cards."

    def test_empty_is_error(self):
        assert score_hand([]) == HandError("Found only 0 cards.", 0)

    def test_six_cards_is_error(self):
        result = score_hand(hand('10 10 10 2 5 7'))
        assert result == HandError("Expected 5 cards, found 6.", 6)

    def test_unknown_label_is_error(self):
        result = score_hand(hand('10 10 10 2 X'))
        assert isinstance(result, HandError)
        assert result.count == 5
        assert "'X'" in result.message

    def test_lowercase_label_is_error(self):
        assert isinstance(score_hand(hand('j q k j q')), HandError)

    def test_count_is_supplied_not_valid(self):
        result = score_hand(['X', 'Y', '3'])
        assert result.count == 3

    def test_accepts_list_and_tuple(self):
        assert score_hand(['10', '10', '10', '2', '5']) == score_hand(hand('10 10 10 2 5'))

    def test_never_raises_on_bad_input(self):
        for bad in ([], ['?'] * 5, ['A'] * 7, ['10', None, 'J', 'Q', 'K']):
            assert isinstance(score_hand(bad), HandError)

    def test_rules_passed_through(self):
        assert score_hand(hand('10 10 10 3 2'), NO_WILDCARDS).score == 5
        assert score_hand(hand('10 10 10 3 2'), DEFAULT_WILDCARDS).score == 8


# ─── correct_card ─────────────────────────────────────────────────────────────


class TestCorrectCard:
    def test_replaces_and_rescores(self):
        new_hand, outcome = correct_card(hand('10 10 10 2 4'), 4, '5')
        assert new_hand == ('10', '10', '10', '2', '5')
        assert outcome.score == 7

    def test_input_not_mutated(self):
        original = ['10', '10', '10', '2', '4']
        correct_card(original, 0, 'A')
        assert original == ['10', '10', '10', '2', '4']

    def test_matches_fresh_scoring(self):
        before = hand('10 10 10 3 2')
        score_hand(before)
        new_hand, outcome = correct_card(before, 3, '4')
        assert outcome == score_hand(new_hand)
        assert outcome.score == 6

    def test_correction_to_invalid_label_is_error(self):
        _, outcome = correct_card(hand('10 10 10 2 4'), 1, '11')
        assert outcome == HandError("Unrecognised card rank: '11'.", 5)

    def test_correction_on_short_hand(self):
        new_hand, outcome = correct_card(['K', 'Q'], 1, 'J')
        assert new_hand == ('K', 'J')
        assert outcome.count == 2

    @pytest.mark.parametrize("index", [5, -1, 99])
    def test_out_of_range_raises(self, index):
        with pytest.raises(IndexError):
            correct_card(hand('10 10 10 2 4'), index, '5')
