"""
Wildcard rule tables.

A wildcard rule lets a card of one rank be scored as if it carried another
rank.  The house rule shipped by default makes 3 and 6 interchangeable in
both directions; ``NO_WILDCARDS`` gives standard Niu Niu.

Only the point value changes under substitution; the displayed card label
never does.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from .cards import is_valid_rank, rank_value


@dataclass(frozen=True)
class WildcardRules:
    """Immutable table mapping a rank to the ranks it may be scored as.

    Attributes:
        substitutes: rank -> tuple of alternative ranks (own rank excluded).
        pairs:       Two-way (first, second) swaps built by ``symmetric``.
                     They fix the order assignments are tried in, and so
                     which of two equal-scoring Bulls gets reported.
    """

    substitutes: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    pairs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> WildcardRules:
        """Build a rule table from ``{rank: rank | iterable of ranks}``.

        Raises:
            ValueError: If any rank is unknown or a rank is paired with itself.

        Examples:
            >>> WildcardRules.from_mapping({'3': '6'}).alternatives('3')
            ('6',)
        """
        table: dict[str, tuple[str, ...]] = {}
        for rank, alts in mapping.items():
            if not is_valid_rank(rank):
                raise ValueError(f"Unknown wildcard rank: {rank!r}")
            alt_list = (alts,) if isinstance(alts, str) else tuple(alts)  # type: ignore[arg-type]
            for alt in alt_list:
                if not is_valid_rank(alt):
                    raise ValueError(f"Unknown substitute rank for {rank!r}: {alt!r}")
                if alt == rank:
                    raise ValueError(f"Rank {rank!r} cannot substitute for itself")
            if alt_list:
                # dict.fromkeys drops duplicates but keeps order
                table[rank] = tuple(dict.fromkeys(alt_list))
        return cls(substitutes=table)

    @classmethod
    def symmetric(cls, a: str, b: str) -> WildcardRules:
        """Two ranks that may each be scored as the other.

        Examples:
            >>> rules = WildcardRules.symmetric('3', '6')
            >>> rules.alternatives('6')
            ('3',)
        """
        table = cls.from_mapping({a: (b,), b: (a,)})
        return cls(substitutes=table.substitutes, pairs=((a, b),))

    def alternatives(self, rank: str) -> tuple[str, ...]:
        """Ranks *rank* may be scored as, excluding itself."""
        return self.substitutes.get(rank, ())

    def is_wildcard(self, rank: str) -> bool:
        return rank in self.substitutes

    def wildcard_positions(self, hand: tuple[str, ...]) -> tuple[int, ...]:
        """Hand positions holding a wildcard rank, in hand order.

        Examples:
            >>> DEFAULT_WILDCARDS.wildcard_positions(('2', '3', '4', '5', '6'))
            (1, 4)
        """
        return tuple(i for i, r in enumerate(hand) if self.is_wildcard(r))

    def assignment_count(self, hand: tuple[str, ...]) -> int:
        """Number of value assignments ``iter_value_assignments`` will yield."""
        count = 1
        for rank in hand:
            count *= 1 + len(self.alternatives(rank))
        return count

    def iter_value_assignments(self, hand: tuple[str, ...]) -> Iterator[tuple[int, ...]]:
        """Yield every per-position value tuple the rules allow for *hand*.

        The identity assignment (face values) always comes first.

        For rules built with ``symmetric`` the rest follow a binary counter.
        The counter's bits are the wildcard positions, those holding the
        pair's first rank before those holding its second, each group in
        hand order.  The lowest bit flips fastest; a clear bit scores the
        card as the first rank, a set bit as the second.  The identity is
        not repeated.

        Any other table falls back to ``itertools.product`` over positions
        in hand order, each position trying its own rank before its
        alternatives.

        Examples:
            >>> list(DEFAULT_WILDCARDS.iter_value_assignments(('10', '3')))
            [(10, 3), (10, 6)]
            >>> list(DEFAULT_WILDCARDS.iter_value_assignments(('3', '6')))
            [(3, 6), (3, 3), (6, 3), (6, 6)]
        """
        if not self.pairs:
            options = [
                tuple(rank_value(r) for r in (rank, *self.alternatives(rank)))
                for rank in hand
            ]
            yield from itertools.product(*options)
            return

        identity = tuple(rank_value(r) for r in hand)
        yield identity

        pair_of = {rank: pair for pair in self.pairs for rank in pair}
        positions = [
            i
            for pair in self.pairs
            for rank in pair
            for i, r in enumerate(hand)
            if r == rank
        ]
        identity_mask = sum(
            1 << bit
            for bit, pos in enumerate(positions)
            if hand[pos] == pair_of[hand[pos]][1]
        )
        for mask in range(1 << len(positions)):
            if mask == identity_mask:
                continue
            values = list(identity)
            for bit, pos in enumerate(positions):
                values[pos] = rank_value(pair_of[hand[pos]][(mask >> bit) & 1])
            yield tuple(values)


NO_WILDCARDS: WildcardRules = WildcardRules()
DEFAULT_WILDCARDS: WildcardRules = WildcardRules.symmetric('3', '6')
