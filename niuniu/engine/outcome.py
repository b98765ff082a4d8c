"""
Scoring outcomes.

Every scoring call returns exactly one of three frozen result types:

    Bull       — a 3-card combo sums to a multiple of ten; score in [1, 10]
    NoBull     — no 3-card subset qualifies (a legitimate result, not an error)
    HandError  — the input was not five valid cards

Callers dispatch on the type (``isinstance`` or ``outcome.kind``); nothing
is signalled by raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

BULL_BULL_SCORE: int = 10


class OutcomeKind(Enum):
    BULL = auto()
    NO_BULL = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Bull:
    """A scored hand.

    Attributes:
        score:             Remainder points, 1–10 (10 = Bull Bull).
        combo:             The three rank labels summing to a multiple of ten.
        remainder:         The other two rank labels, in hand order.
        combo_indices:     Hand positions of the combo cards.
        remainder_indices: Hand positions of the remainder cards.
        values:            Point value used for each hand position. Differs
                           from the face values when a wildcard was substituted.
    """

    score: int
    combo: tuple[str, str, str]
    remainder: tuple[str, str]
    combo_indices: tuple[int, int, int]
    remainder_indices: tuple[int, int]
    values: tuple[int, ...]

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.BULL

    @property
    def is_bull_bull(self) -> bool:
        return self.score == BULL_BULL_SCORE


@dataclass(frozen=True)
class NoBull:
    """No 3-card subset sums to a multiple of ten."""

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.NO_BULL


@dataclass(frozen=True)
class HandError:
    """The hand could not be scored.

    Attributes:
        message: Human-readable reason.
        count:   Number of card labels actually supplied.
    """

    message: str
    count: int

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.ERROR


Outcome = Union[Bull, NoBull, HandError]


# ─── Text rendering ───────────────────────────────────────────────────────────


def outcome_to_str(outcome: Outcome) -> str:
    """Return the headline text for an outcome.

    Examples:
        >>> outcome_to_str(NoBull())
        'No Bull'
        >>> outcome_to_str(HandError('Found only 2 cards.', 2))
        'Found only 2 cards.'
    """
    if isinstance(outcome, HandError):
        return outcome.message
    if isinstance(outcome, NoBull):
        return "No Bull"
    if outcome.is_bull_bull:
        return "BULL BULL!"
    return f"Bull {outcome.score}"


def calculation_lines(outcome: Outcome) -> list[str]:
    """Return the lines explaining how an outcome was reached.

    A Bull shows its combo and remainder ('Combo: 10+10+10', 'Points: 2+5');
    a NoBull gets a one-line explanation; errors have nothing to explain.
    """
    if isinstance(outcome, Bull):
        return [
            f"Combo: {'+'.join(outcome.combo)}",
            f"Points: {'+'.join(outcome.remainder)}",
        ]
    if isinstance(outcome, NoBull):
        return ["No combination sums to a multiple of 10."]
    return []
