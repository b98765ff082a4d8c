"""
Niu Niu hand scoring.

A hand of five cards is a Bull when some three of them sum to a multiple of
ten.  The other two cards give the score: their sum mod 10, with 0 counted
as 10 ("Bull Bull").

Scoring pipeline:
    score_hand(cards)            — validate labels, then ...
    score_with_wildcards(hand)   — try every wildcard value assignment, then ...
    solve(values, cards)         — scan the ten 3-of-5 combinations

All functions are pure: no state survives between calls, and bad input is
reported as a ``HandError`` result rather than raised.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from .cards import hand_values, is_valid_rank
from .outcome import BULL_BULL_SCORE, Bull, HandError, NoBull, Outcome
from .wildcards import DEFAULT_WILDCARDS, WildcardRules

HAND_SIZE: int = 5
COMBO_SIZE: int = 3

# (i, j, k) with i < j < k in lexicographic order; earlier triples win ties.
_COMBOS: tuple[tuple[int, int, int], ...] = tuple(
    itertools.combinations(range(HAND_SIZE), COMBO_SIZE)  # type: ignore[arg-type]
)


def remainder_score(remainder_sum: int) -> int:
    """Convert a remainder point total into a score in [1, 10].

    Examples:
        >>> remainder_score(7)
        7
        >>> remainder_score(20)
        10
        >>> remainder_score(0)
        10
    """
    score = remainder_sum % 10
    return BULL_BULL_SCORE if score == 0 else score


# ─── Subset search ────────────────────────────────────────────────────────────


def solve(values: Sequence[int], cards: Sequence[str]) -> Bull | NoBull:
    """Find the best-scoring 3-card combo for fixed per-card values.

    All ten combinations are checked.  A strictly higher score replaces the
    current best, so on equal scores the first combination in ``(i, j, k)``
    lexicographic order is kept.

    Args:
        values: Point value for each of the five positions.
        cards:  Rank labels for the same positions; used for reporting only.

    Returns:
        The best Bull, or NoBull if no combination sums to a multiple of ten.

    Examples:
        >>> solve((10, 10, 10, 2, 5), ('10', '10', '10', '2', '5')).score
        7
        >>> solve((1, 1, 1, 2, 4), ('A', 'A', 'A', '2', '4'))
        NoBull()
    """
    total = sum(values)
    best: Bull | None = None

    for i, j, k in _COMBOS:
        sub_sum = values[i] + values[j] + values[k]
        if sub_sum % 10 != 0:
            continue
        score = remainder_score(total - sub_sum)
        if best is not None and score <= best.score:
            continue
        rest = tuple(idx for idx in range(HAND_SIZE) if idx not in (i, j, k))
        best = Bull(
            score=score,
            combo=(cards[i], cards[j], cards[k]),
            remainder=(cards[rest[0]], cards[rest[1]]),
            combo_indices=(i, j, k),
            remainder_indices=(rest[0], rest[1]),
            values=tuple(values),
        )

    return NoBull() if best is None else best


# ─── Wildcard expansion ───────────────────────────────────────────────────────


def score_with_wildcards(
    hand: Sequence[str],
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> Outcome:
    """Score a hand, letting wildcard ranks take any value the rules allow.

    Every value assignment (identity first) is passed to ``solve``; the Bull
    with the highest score wins and the earliest assignment wins ties.  The
    reported combo and remainder always carry the original labels.

    A hand that is not exactly five cards long short-circuits to HandError.
    Labels are assumed valid; ``score_hand`` checks them.

    Examples:
        >>> score_with_wildcards(['10', '10', '10', '3', '2']).score
        8
    """
    cards = tuple(hand)
    if len(cards) != HAND_SIZE:
        return _count_error(len(cards))

    best: Bull | None = None
    for values in rules.iter_value_assignments(cards):
        outcome = solve(values, cards)
        if isinstance(outcome, Bull) and (best is None or outcome.score > best.score):
            best = outcome

    return NoBull() if best is None else best


def score_hand(
    cards: Sequence[str],
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> Outcome:
    """Score five rank labels.  This is the public entry point.

    Returns HandError when the count is not five or any label falls outside
    the rank alphabet; ``count`` is always the number of labels supplied.

    Examples:
        >>> score_hand(['K', 'Q'])
        HandError(message='Found only 2 cards.', count=2)
        >>> score_hand(['J', 'Q', 'K', 'J', 'Q']).score
        10
    """
    cards = tuple(cards)
    if len(cards) != HAND_SIZE:
        return _count_error(len(cards))

    invalid = [c for c in cards if not is_valid_rank(c)]
    if invalid:
        return HandError(
            message=f"Unrecognised card rank: {invalid[0]!r}.",
            count=len(cards),
        )

    return score_with_wildcards(cards, rules)


def base_outcome(hand: Sequence[str]) -> Outcome:
    """Score a hand by face values only, with no wildcard substitution."""
    cards = tuple(hand)
    if len(cards) != HAND_SIZE:
        return _count_error(len(cards))
    return solve(hand_values(cards), cards)


# ─── Correction ───────────────────────────────────────────────────────────────


def correct_card(
    hand: Sequence[str],
    index: int,
    rank: str,
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> tuple[tuple[str, ...], Outcome]:
    """Replace one card and rescore.

    The input hand is left untouched; the corrected copy is returned together
    with its fresh outcome.

    Raises:
        IndexError: If *index* is not a position in *hand*.

    Examples:
        >>> new_hand, outcome = correct_card(('10', '10', '10', '2', '4'), 4, '5')
        >>> new_hand
        ('10', '10', '10', '2', '5')
        >>> outcome.score
        7
    """
    cards = list(hand)
    if not 0 <= index < len(cards):
        raise IndexError(f"Card position {index} out of range for {len(cards)} cards.")
    cards[index] = rank
    corrected = tuple(cards)
    return corrected, score_hand(corrected, rules)


def _count_error(count: int) -> HandError:
    if count < HAND_SIZE:
        return HandError(message=f"Found only {count} cards.", count=count)
    return HandError(message=f"Expected {HAND_SIZE} cards, found {count}.", count=count)
