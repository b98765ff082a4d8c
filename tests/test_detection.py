"""Tests for niuniu/engine/detection.py — detector predictions to scored hands."""

from __future__ import annotations

from niuniu.engine.outcome import Bull, HandError
from niuniu.engine.detection import ranks_from_predictions, score_predictions
from niuniu.engine.wildcards import NO_WILDCARDS


def _pred(label: str, confidence: float) -> dict:
    return {"class": label, "confidence": confidence, "x": 0, "y": 0}


class TestRanksFromPredictions:
    def test_sorted_by_confidence(self):
        preds = [_pred("2C", 0.5), _pred("KS", 0.9), _pred("7d", 0.7)]
        assert ranks_from_predictions(preds) == ('K', '7', '2')

    def test_cut_to_five(self):
        preds = [_pred(f"{r}H", 0.1 * i) for i, r in enumerate("23456789", start=1)]
        # Confidence rises with rank here, so the top five are 9..5.
        assert ranks_from_predictions(preds) == ('9', '8', '7', '6', '5')

    def test_custom_limit(self):
        preds = [_pred("AS", 0.9), _pred("KS", 0.8), _pred("QS", 0.7)]
        assert ranks_from_predictions(preds, limit=2) == ('A', 'K')

    def test_unrecognised_labels_dropped_after_cut(self):
        preds = [
            _pred("JOKER", 0.99),
            _pred("10H", 0.9),
            _pred("JH", 0.8),
            _pred("QH", 0.7),
            _pred("KH", 0.6),
            _pred("AH", 0.5),
        ]
        # 'JOKER' reads as a jack; '1C' would not.
        assert ranks_from_predictions(preds) == ('J', '10', 'J', 'Q', 'K')
        preds[0] = _pred("1C", 0.99)
        assert ranks_from_predictions(preds) == ('10', 'J', 'Q', 'K')

    def test_missing_confidence_sorts_last(self):
        preds = [{"class": "AS"}, _pred("KS", 0.2)]
        assert ranks_from_predictions(preds) == ('K', 'A')

    def test_equal_confidence_keeps_input_order(self):
        preds = [_pred("3S", 0.5), _pred("4S", 0.5), _pred("5S", 0.5)]
        assert ranks_from_predictions(preds) == ('3', '4', '5')

    def test_empty(self):
        assert ranks_from_predictions([]) == ()


class TestScorePredictions:
    def test_full_hand(self):
        preds = [_pred(label, 0.9) for label in ("10H", "10S", "10D", "3C", "2C")]
        ranks, outcome = score_predictions(preds)
        assert ranks == ('10', '10', '10', '3', '2')
        assert isinstance(outcome, Bull)
        assert outcome.score == 8

    def test_rules_passed_through(self):
        preds = [_pred(label, 0.9) for label in ("10H", "10S", "10D", "3C", "2C")]
        _, outcome = score_predictions(preds, NO_WILDCARDS)
        assert outcome.score == 5

    def test_nothing_detected(self):
        assert score_predictions([]) == ((), HandError("No cards detected.", 0))

    def test_only_unrecognised_labels(self):
        _, outcome = score_predictions([_pred("1C", 0.9)])
        assert outcome == HandError("No cards detected.", 0)

    def test_three_cards_detected(self):
        preds = [_pred("KH", 0.9), _pred("QH", 0.8), _pred("JH", 0.7)]
        ranks, outcome = score_predictions(preds)
        assert ranks == ('K', 'Q', 'J')
        assert outcome == HandError("Found only 3 cards.", 3)
