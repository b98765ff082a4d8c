"""
Score distributions for Niu Niu hands.

Two ways to get the distribution of scores over random 5-card deals:

    simulate_hands(n_hands, seed, rules)   — Monte Carlo on a real 52-card deck
    exact_score_distribution(rules)        — full enumeration of rank multisets

Both report counts per score slot, where slot 0 is "no bull" and slots
1–10 are Bull scores.  Monte Carlo scores every dealt hand twice, by face
values and with the given wildcard rules, so the two histograms come from
the same hands and the wildcard upgrade count is exact for the sample.

Exact enumeration works on rank multisets rather than the 2,598,960
suited hands: suits never affect scoring, so each multiset
{r1: k1, r2: k2, ...} stands for prod(C(4, k)) suited hands.
"""

from __future__ import annotations

import itertools
import math
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from niuniu.engine.cards import RANK_NAMES
from niuniu.engine.deck import create_deck, deal_hand, hand_labels
from niuniu.engine.outcome import Bull, Outcome
from niuniu.engine.scorer import HAND_SIZE, base_outcome, score_with_wildcards
from niuniu.engine.wildcards import DEFAULT_WILDCARDS, WildcardRules

N_SCORE_SLOTS: int = 11  # 0 = no bull, 1..10 = Bull score
TOTAL_HANDS: int = math.comb(52, HAND_SIZE)

# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass
class SimulationResult:
    """Aggregate statistics from a Monte Carlo run.

    Attributes:
        n_hands:      Number of hands dealt.
        base_counts:  int64 array (11,) — score slot counts by face values.
        wild_counts:  int64 array (11,) — score slot counts with wildcard rules.
        n_upgraded:   Hands whose wildcard score beat the face-value score
                      (a no-bull hand turned Bull counts as upgraded).
        seed:         NumPy seed used, or None.
    """

    n_hands: int
    base_counts: np.ndarray
    wild_counts: np.ndarray
    n_upgraded: int
    seed: int | None = None

    @property
    def base_no_bull_rate(self) -> float:
        return float(self.base_counts[0]) / self.n_hands

    @property
    def wild_no_bull_rate(self) -> float:
        return float(self.wild_counts[0]) / self.n_hands

    @property
    def mean_base_score(self) -> float:
        """Mean score by face values, counting no bull as 0."""
        return _mean_score(self.base_counts)

    @property
    def mean_wild_score(self) -> float:
        """Mean score with wildcards, counting no bull as 0."""
        return _mean_score(self.wild_counts)

    def __str__(self) -> str:
        return (
            f"Hands: {self.n_hands:,} | "
            f"No bull: {self.base_no_bull_rate * 100:.2f}% -> "
            f"{self.wild_no_bull_rate * 100:.2f}% | "
            f"Mean score: {self.mean_base_score:.3f} -> {self.mean_wild_score:.3f} | "
            f"Upgraded: {self.n_upgraded:,}"
        )


def _mean_score(counts: np.ndarray) -> float:
    total = counts.sum()
    if total == 0:
        return 0.0
    return float((counts * np.arange(N_SCORE_SLOTS)).sum() / total)


def score_slot(outcome: Outcome) -> int:
    """Map an outcome to its histogram slot: the Bull score, or 0 otherwise.

    Examples:
        >>> from niuniu.engine.outcome import NoBull
        >>> score_slot(NoBull())
        0
    """
    return outcome.score if isinstance(outcome, Bull) else 0


# ─── Monte Carlo ──────────────────────────────────────────────────────────────


def simulate_hands(
    n_hands: int = 100_000,
    seed: int | None = 42,
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> SimulationResult:
    """Deal n_hands fresh 5-card hands and histogram their scores.

    Args:
        n_hands: Number of hands to deal; each from a freshly shuffled deck.
        seed:    NumPy random seed for reproducibility. None for a
                 non-deterministic run.
        rules:   Wildcard rules for the ``wild_counts`` histogram.

    Returns:
        SimulationResult for the run.
    """
    if n_hands <= 0:
        raise ValueError(f"n_hands must be positive, got {n_hands}.")
    if seed is not None:
        np.random.seed(seed)

    base_counts = np.zeros(N_SCORE_SLOTS, dtype=np.int64)
    wild_counts = np.zeros(N_SCORE_SLOTS, dtype=np.int64)
    n_upgraded = 0

    for _ in range(n_hands):
        labels = hand_labels(deal_hand(create_deck()))

        base = score_slot(base_outcome(labels))
        wild = score_slot(score_with_wildcards(labels, rules))

        base_counts[base] += 1
        wild_counts[wild] += 1
        if wild > base:
            n_upgraded += 1

    return SimulationResult(
        n_hands=n_hands,
        base_counts=base_counts,
        wild_counts=wild_counts,
        n_upgraded=n_upgraded,
        seed=seed,
    )


# ─── Exact enumeration ────────────────────────────────────────────────────────


def iter_rank_multisets() -> Iterator[tuple[tuple[str, ...], int]]:
    """Yield (hand_labels, n_suited_hands) for every dealable 5-card rank multiset.

    Hands come out in ascending rank order.  Multisets needing five of one
    rank are skipped — a deck has only four.
    """
    for combo in itertools.combinations_with_replacement(range(len(RANK_NAMES)), HAND_SIZE):
        multiplicity = Counter(combo)
        if max(multiplicity.values()) > 4:
            continue
        weight = 1
        for k in multiplicity.values():
            weight *= math.comb(4, k)
        yield tuple(RANK_NAMES[r] for r in combo), weight


def exact_score_distribution(rules: WildcardRules = DEFAULT_WILDCARDS) -> np.ndarray:
    """Return exact suited-hand counts per score slot.

    Returns:
        int64 array of shape (11,); slot 0 = no bull.  Sums to C(52, 5).
    """
    counts = np.zeros(N_SCORE_SLOTS, dtype=np.int64)
    for labels, weight in iter_rank_multisets():
        counts[score_slot(score_with_wildcards(labels, rules))] += weight
    return counts


def exact_score_probabilities(rules: WildcardRules = DEFAULT_WILDCARDS) -> np.ndarray:
    """Exact probability of each score slot for a random 5-card deal."""
    return exact_score_distribution(rules) / TOTAL_HANDS


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from niuniu.engine.wildcards import NO_WILDCARDS

    print("Niu Niu Monte Carlo — 100,000 hands, 3<->6 wildcards\n")
    print(simulate_hands(n_hands=100_000))

    print("\nExact distribution (slot 0 = no bull):")
    standard = exact_score_probabilities(NO_WILDCARDS)
    wild = exact_score_probabilities(DEFAULT_WILDCARDS)
    for slot in range(N_SCORE_SLOTS):
        label = "none" if slot == 0 else str(slot)
        print(f"  {label:>4}  {standard[slot] * 100:6.2f}%  {wild[slot] * 100:6.2f}%")
