"""
Hand tier classification for Niu Niu.

Tier hierarchy (strongest to weakest):
    1. five_face_bull — a Bull whose five cards are all J/Q/K
    2. bull_bull      — a Bull scoring 10
    3. bull           — a Bull scoring 1–9
    4. no_bull        — no 3-card combo sums to a multiple of ten
    5. error          — the hand could not be scored

A five-face hand always scores 10 as well; the tier only separates it out
for display and comparison.
"""

from __future__ import annotations

from collections.abc import Sequence

from .cards import FACE_RANKS
from .outcome import Bull, HandError, Outcome

# ─── Tier string constants ────────────────────────────────────────────────────

HAND_FIVE_FACE_BULL: str = "five_face_bull"
HAND_BULL_BULL: str = "bull_bull"
HAND_BULL: str = "bull"
HAND_NO_BULL: str = "no_bull"
HAND_ERROR: str = "error"

# Hierarchy rank: lower number = stronger hand
_HIERARCHY: dict[str, int] = {
    HAND_FIVE_FACE_BULL: 1,
    HAND_BULL_BULL: 2,
    HAND_BULL: 3,
    HAND_NO_BULL: 4,
    HAND_ERROR: 5,
}


# ─── Detection ────────────────────────────────────────────────────────────────


def is_five_face(hand: Sequence[str]) -> bool:
    """Return True if the hand is exactly five J/Q/K cards.

    Examples:
        >>> is_five_face(('J', 'Q', 'K', 'J', 'Q'))
        True
        >>> is_five_face(('J', 'Q', 'K', 'J', '10'))
        False
    """
    return len(hand) == 5 and all(r in FACE_RANKS for r in hand)


# ─── Classification ───────────────────────────────────────────────────────────


def classify_outcome(hand: Sequence[str], outcome: Outcome) -> str:
    """Classify a scored hand into its tier string.

    Args:
        hand:    The rank labels that were scored.
        outcome: The outcome ``score_hand`` returned for them.

    Returns:
        One of 'five_face_bull', 'bull_bull', 'bull', 'no_bull', 'error'.
    """
    if isinstance(outcome, HandError):
        return HAND_ERROR
    if not isinstance(outcome, Bull):
        return HAND_NO_BULL
    if is_five_face(hand):
        return HAND_FIVE_FACE_BULL
    if outcome.is_bull_bull:
        return HAND_BULL_BULL
    return HAND_BULL


def hand_hierarchy_rank(hand_type: str) -> int:
    """Return the numeric hierarchy rank for a tier (lower = stronger).

    Examples:
        >>> hand_hierarchy_rank('five_face_bull')
        1
        >>> hand_hierarchy_rank('no_bull')
        4
    """
    return _HIERARCHY[hand_type]


def compare_outcomes(
    hand_a: Sequence[str],
    outcome_a: Outcome,
    hand_b: Sequence[str],
    outcome_b: Outcome,
) -> int:
    """Compare two scored hands: 1 if A is stronger, -1 if B is, 0 if equal.

    Tiers are compared first; two Bulls in the same tier then compare by
    score.  Two no-bull hands, or two error results, are equal.
    """
    rank_a = hand_hierarchy_rank(classify_outcome(hand_a, outcome_a))
    rank_b = hand_hierarchy_rank(classify_outcome(hand_b, outcome_b))
    if rank_a != rank_b:
        return 1 if rank_a < rank_b else -1

    if isinstance(outcome_a, Bull) and isinstance(outcome_b, Bull):
        if outcome_a.score != outcome_b.score:
            return 1 if outcome_a.score > outcome_b.score else -1
    return 0
