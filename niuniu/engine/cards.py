"""
Rank alphabet, point values, label parsing and the deck card encoding.

Niu Niu point values:
    2-10    -> face value
    J, Q, K -> 10
    A       -> 1

Scoring works on rank labels only ('2'..'10', 'J', 'Q', 'K', 'A').  Suits
matter only to the deck used by the simulator, which encodes a card as an
integer 0–51:

    rank_index = card // 4  ->  0=2, 1=3, ..., 8=10, 9=J, 10=Q, 11=K, 12=A
    suit_index = card % 4   ->  0=C, 1=D, 2=H, 3=S
"""

from __future__ import annotations

import re

RANK_NAMES: list[str] = ['2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A']

# Point value lookup: index matches rank_index.
RANK_VALUES: list[int] = [2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10, 10, 1]

FACE_RANKS: frozenset[str] = frozenset({'J', 'Q', 'K'})

_VALUE_BY_RANK: dict[str, int] = dict(zip(RANK_NAMES, RANK_VALUES))

# Detector class names look like "10H", "AS", "qd": rank first, suit after.
_LEADING_RANK = re.compile(r'^(10|[2-9]|[JQKA])', re.IGNORECASE)


# ─── Rank labels ──────────────────────────────────────────────────────────────


def is_valid_rank(label: str) -> bool:
    """Return True if *label* is exactly one of the thirteen rank labels.

    Examples:
        >>> is_valid_rank('10')
        True
        >>> is_valid_rank('j')
        False
        >>> is_valid_rank('1')
        False
    """
    return label in _VALUE_BY_RANK


def rank_value(rank: str) -> int:
    """Return the Niu Niu point value of a rank label.

    Raises:
        ValueError: If *rank* is not a valid rank label.

    Examples:
        >>> rank_value('K')
        10
        >>> rank_value('A')
        1
        >>> rank_value('7')
        7
    """
    try:
        return _VALUE_BY_RANK[rank]
    except KeyError:
        raise ValueError(f"Unknown card rank: {rank!r}") from None


def normalize_rank(label: str) -> str | None:
    """Extract the rank label from a raw card label, or None if there is none.

    Accepts bare ranks in any case ('q', '10') and detector class names
    with a trailing suit ('10H', 'ad').

    Examples:
        >>> normalize_rank('10H')
        '10'
        >>> normalize_rank(' qd ')
        'Q'
        >>> normalize_rank('1C') is None
        True
    """
    match = _LEADING_RANK.match(label.strip())
    if match is None:
        return None
    return match.group(0).upper()


def hand_values(hand: tuple[str, ...] | list[str]) -> tuple[int, ...]:
    """Map every rank in a hand to its point value.

    Examples:
        >>> hand_values(('10', 'J', 'A', '3', '6'))
        (10, 10, 1, 3, 6)
    """
    return tuple(rank_value(r) for r in hand)


# ─── Integer card encoding ────────────────────────────────────────────────────


def card_label(card: int) -> str:
    """Return the rank label of a card integer, without its suit.

    Examples:
        >>> card_label(32)  # 10 of Clubs
        '10'
        >>> card_label(45)  # King of Diamonds
        'K'
    """
    return RANK_NAMES[card // 4]
