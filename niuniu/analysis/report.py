"""Printed reports for Niu Niu scoring.

Public functions format scoring results into human-readable text:

    print_outcome(hand, outcome)          — one scored hand
    print_simulation_report(result)       — Monte Carlo histogram
    print_exact_distribution(rules)       — exact score probabilities
    main(argv)                            — command-line entry point

Usage:
    python -m niuniu.analysis.report 10 10 10 3 2
    python -m niuniu.analysis.report --no-wildcards 10 10 10 3 2
    python -m niuniu.analysis.report --simulate 20000
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from niuniu.analysis.simulator import (
    N_SCORE_SLOTS,
    SimulationResult,
    exact_score_probabilities,
    simulate_hands,
)
from niuniu.engine.cards import normalize_rank, rank_value
from niuniu.engine.outcome import Bull, Outcome, calculation_lines, outcome_to_str
from niuniu.engine.scorer import score_hand
from niuniu.engine.special_hands import HAND_ERROR, classify_outcome
from niuniu.engine.wildcards import DEFAULT_WILDCARDS, NO_WILDCARDS, WildcardRules

_WIDTH: int = 48


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def _slot_label(slot: int) -> str:
    if slot == 0:
        return "No bull"
    if slot == 10:
        return "Bull Bull"
    return f"Bull {slot}"


# ─── Public report functions ──────────────────────────────────────────────────


def print_outcome(hand: Sequence[str], outcome: Outcome) -> None:
    """Print a scored hand: the cards, the headline and how it was reached.

    Args:
        hand:    The rank labels that were scored.
        outcome: The outcome returned by score_hand().
    """
    print("=" * _WIDTH)
    print(f"  Cards:   {' '.join(hand) if hand else '(none)'}")
    print(f"  Result:  {outcome_to_str(outcome)}")
    print(f"  Tier:    {classify_outcome(hand, outcome)}")
    for line in calculation_lines(outcome):
        print(f"  {line}")
    if isinstance(outcome, Bull):
        subs = [
            f"{hand[i]}->{outcome.values[i]}"
            for i in range(len(hand))
            if outcome.values[i] != rank_value(hand[i])
        ]
        if subs:
            print(f"  Wildcards: {', '.join(subs)}")
    print("=" * _WIDTH)


def print_simulation_report(result: SimulationResult) -> None:
    """Print a Monte Carlo histogram, face values beside wildcard scoring.

    Args:
        result: SimulationResult returned by simulate_hands().
    """
    print("=" * _WIDTH)
    print(f"Monte Carlo Score Distribution  ({result.n_hands:,} hands)")
    print("=" * _WIDTH)
    print(f"  {'Score':<10}  {'Standard':>10}  {'Wildcards':>10}")
    print(f"  {'-' * 10}  {'-' * 10}  {'-' * 10}")
    for slot in range(N_SCORE_SLOTS):
        base_pct = result.base_counts[slot] / result.n_hands * 100
        wild_pct = result.wild_counts[slot] / result.n_hands * 100
        print(f"  {_slot_label(slot):<10}  {base_pct:>9.2f}%  {wild_pct:>9.2f}%")
    print()
    print(f"  Mean score:  {result.mean_base_score:.3f} -> {result.mean_wild_score:.3f}")
    print(f"  Upgraded:    {result.n_upgraded:,} hands "
          f"({result.n_upgraded / result.n_hands * 100:.2f}%)")
    print()


def print_exact_distribution(rules: WildcardRules = DEFAULT_WILDCARDS) -> None:
    """Print exact score probabilities over all 2,598,960 five-card deals."""
    standard = exact_score_probabilities(NO_WILDCARDS)
    wild = exact_score_probabilities(rules)

    print("=" * _WIDTH)
    print("Exact Score Distribution  (all 5-card deals)")
    print("=" * _WIDTH)
    print(f"  {'Score':<10}  {'Standard':>10}  {'Wildcards':>10}")
    print(f"  {'-' * 10}  {'-' * 10}  {'-' * 10}")
    for slot in range(N_SCORE_SLOTS):
        print(f"  {_slot_label(slot):<10}  {standard[slot] * 100:>9.2f}%  {wild[slot] * 100:>9.2f}%")
    print()


# ─── Command line ─────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    """Score a hand given on the command line, or run a simulation report.

    Card labels are normalised first, so 'q', '10h' and 'Q' all read as Q.
    Returns a process exit code: 0 when a hand was scored (Bull or no bull)
    or a report was printed, 1 when the hand could not be scored.
    """
    parser = argparse.ArgumentParser(description="Niu Niu (Bull Bull) hand scorer")
    parser.add_argument("cards", nargs="*", help="Five card ranks, e.g. 10 J 3 6 A")
    parser.add_argument(
        "--no-wildcards",
        action="store_true",
        help="Score by face values only (disable the 3<->6 rule)",
    )
    parser.add_argument(
        "--simulate",
        type=_positive_int,
        metavar="N",
        help="Deal N random hands and print the score distribution",
    )
    parser.add_argument("--seed", type=int, default=42, help="Simulation seed")
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Print the exact score distribution over all deals",
    )
    args = parser.parse_args(argv)

    rules = NO_WILDCARDS if args.no_wildcards else DEFAULT_WILDCARDS

    if args.simulate is not None:
        print_simulation_report(simulate_hands(n_hands=args.simulate, seed=args.seed, rules=rules))
    if args.exact:
        print_exact_distribution(rules)
    if args.simulate is not None or args.exact:
        return 0

    hand = tuple(normalize_rank(c) or c for c in args.cards)
    outcome = score_hand(hand, rules)
    print_outcome(hand, outcome)
    return 1 if classify_outcome(hand, outcome) == HAND_ERROR else 0


if __name__ == "__main__":
    raise SystemExit(main())
