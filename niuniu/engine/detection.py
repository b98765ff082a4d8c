"""
Card detector predictions -> hand.

A detector returns predictions shaped like
``{"class": "10H", "confidence": 0.93, ...}``.  Only the class label and the
confidence are read here; boxes and image data stay with the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .cards import normalize_rank
from .outcome import HandError, Outcome
from .scorer import HAND_SIZE, score_hand
from .wildcards import DEFAULT_WILDCARDS, WildcardRules


def ranks_from_predictions(
    predictions: Iterable[Mapping[str, object]],
    limit: int = HAND_SIZE,
) -> tuple[str, ...]:
    """Return rank labels for the most confident predictions.

    Predictions are sorted by confidence (highest first), cut to *limit*,
    and then reduced to their rank labels.  Labels with no recognisable rank
    are dropped after the cut, so fewer than *limit* ranks may come back.

    Examples:
        >>> ranks_from_predictions([
        ...     {"class": "KS", "confidence": 0.7},
        ...     {"class": "10h", "confidence": 0.9},
        ... ])
        ('10', 'K')
    """
    ordered = sorted(
        predictions,
        key=lambda p: float(p.get("confidence", 0.0)),  # type: ignore[arg-type]
        reverse=True,
    )
    ranks = (normalize_rank(str(p.get("class", ""))) for p in ordered[:limit])
    return tuple(r for r in ranks if r is not None)


def score_predictions(
    predictions: Iterable[Mapping[str, object]],
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> tuple[tuple[str, ...], Outcome]:
    """Parse detector predictions and score the resulting hand.

    Returns:
        (ranks, outcome).  An empty detection gives
        ``HandError("No cards detected.", 0)``.
    """
    ranks = ranks_from_predictions(predictions)
    if not ranks:
        return ranks, HandError(message="No cards detected.", count=0)
    return ranks, score_hand(ranks, rules)
