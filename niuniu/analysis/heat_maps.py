"""Remainder-pair tables and score charts for Niu Niu.

Data builders return NumPy arrays that can be used programmatically or
passed to the plot helpers:

    build_remainder_table(rules)        — (13, 13) best score per remainder pair
    build_distribution_data()           — (standard, wildcard) exact probabilities

Plot functions render matplotlib figures:

    plot_remainder_heatmap(table, title, ...)     — one 13×13 panel
    plot_remainder_comparison(...)                — standard vs wildcard, 1×2
    plot_score_distribution(standard, wild, ...)  — grouped bar chart

Matrix convention (remainder table):
    Shape  : (13, 13) — rows and cols = ranks 2..10, J, Q, K, A
    Values : score 1–10 a Bull with that remainder pair would get
"""

from __future__ import annotations

import matplotlib
import matplotlib.colors
import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np

from niuniu.analysis.simulator import N_SCORE_SLOTS, exact_score_probabilities
from niuniu.engine.cards import RANK_NAMES, rank_value
from niuniu.engine.scorer import remainder_score
from niuniu.engine.wildcards import DEFAULT_WILDCARDS, NO_WILDCARDS, WildcardRules

# ─── Constants ────────────────────────────────────────────────────────────────

_N_RANKS: int = len(RANK_NAMES)
_SLOT_LABELS: list[str] = ["none"] + [str(s) for s in range(1, N_SCORE_SLOTS)]


def _make_score_cmap() -> matplotlib.colors.Colormap:
    """YlOrRd gradient: pale = low score, deep red = Bull Bull."""
    return matplotlib.colormaps["YlOrRd"].copy()


_SCORE_CMAP: matplotlib.colors.Colormap = _make_score_cmap()


# ─── Data builders ────────────────────────────────────────────────────────────


def best_pair_score(rank_a: str, rank_b: str, rules: WildcardRules = NO_WILDCARDS) -> int:
    """Best score a remainder pair can give when either card may be substituted.

    Examples:
        >>> best_pair_score('3', '2')
        5
        >>> best_pair_score('3', '2', DEFAULT_WILDCARDS)
        8
    """
    options_a = (rank_a, *rules.alternatives(rank_a))
    options_b = (rank_b, *rules.alternatives(rank_b))
    return max(
        remainder_score(rank_value(a) + rank_value(b))
        for a in options_a
        for b in options_b
    )


def build_remainder_table(rules: WildcardRules = NO_WILDCARDS) -> np.ndarray:
    """Return the (13, 13) remainder-pair score table.

    Entry [r, c] is the score for a remainder of RANK_NAMES[r] and
    RANK_NAMES[c].  The table is symmetric.

    Returns:
        int64 array of shape (13, 13), values in [1, 10].
    """
    table = np.zeros((_N_RANKS, _N_RANKS), dtype=np.int64)
    for r, rank_a in enumerate(RANK_NAMES):
        for c, rank_b in enumerate(RANK_NAMES):
            table[r, c] = best_pair_score(rank_a, rank_b, rules)
    return table


def build_distribution_data(
    rules: WildcardRules = DEFAULT_WILDCARDS,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (standard, wildcard) exact score-slot probabilities, each (11,)."""
    return exact_score_probabilities(NO_WILDCARDS), exact_score_probabilities(rules)


# ─── Rendering helper ─────────────────────────────────────────────────────────


def _render_panel(
    ax: matplotlib.axes.Axes,
    table: np.ndarray,
) -> matplotlib.image.AxesImage:
    """Render one 13×13 remainder panel onto *ax* and return the AxesImage."""
    im = ax.imshow(table, cmap=_SCORE_CMAP, vmin=1, vmax=10, aspect="equal")

    ax.set_xticks(range(_N_RANKS))
    ax.set_xticklabels(RANK_NAMES, fontsize=8)
    ax.set_yticks(range(_N_RANKS))
    ax.set_yticklabels(RANK_NAMES, fontsize=8)

    for r in range(table.shape[0]):
        for c in range(table.shape[1]):
            val = int(table[r, c])
            ax.text(
                c,
                r,
                "BB" if val == 10 else str(val),
                ha="center",
                va="center",
                fontsize=7,
                color="white" if val >= 7 else "black",
                fontweight="bold",
            )

    return im


# ─── Public plot functions ────────────────────────────────────────────────────


def plot_remainder_heatmap(
    table: np.ndarray,
    title: str,
    *,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Plot a remainder-pair score table as a single heat map.

    Args:
        table:     (13, 13) score table from build_remainder_table().
        title:     Figure title.
        show:      If True, call plt.show() after rendering.
        save_path: If not None, save the figure to this path before showing.

    Returns:
        matplotlib.figure.Figure.
    """
    fig, ax = plt.subplots(figsize=(7, 6))
    im = _render_panel(ax, table)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_xlabel("Second remainder card", fontsize=9)
    ax.set_ylabel("First remainder card", fontsize=9)
    plt.colorbar(im, ax=ax, label="Score", fraction=0.046, pad=0.04)
    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


def plot_remainder_comparison(
    rules: WildcardRules = DEFAULT_WILDCARDS,
    *,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Side-by-side remainder tables: face values vs. the given wildcard rules."""
    tables = [build_remainder_table(NO_WILDCARDS), build_remainder_table(rules)]
    titles = ["Standard", "With wildcards"]

    fig, axes = plt.subplots(1, 2, figsize=(13, 6))
    fig.suptitle("Niu Niu Remainder Scores", fontsize=14, fontweight="bold")

    for ax, table, title in zip(axes, tables, titles):
        im = _render_panel(ax, table)
        ax.set_title(title, fontsize=10, fontweight="bold")
        ax.set_xlabel("Second remainder card", fontsize=9)
    axes[0].set_ylabel("First remainder card", fontsize=9)
    plt.colorbar(im, ax=axes[1], label="Score", fraction=0.046, pad=0.04)
    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


def plot_score_distribution(
    standard: np.ndarray,
    wild: np.ndarray,
    title: str = "Niu Niu Score Distribution",
    *,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Grouped bar chart of score-slot probabilities.

    Args:
        standard:  (11,) probabilities by face values.
        wild:      (11,) probabilities with wildcard rules.
        title:     Figure title.
        show:      If True, call plt.show().
        save_path: If not None, save to path.

    Returns:
        matplotlib.figure.Figure.
    """
    x = np.arange(N_SCORE_SLOTS)
    width = 0.4

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.bar(x - width / 2, standard * 100, width, label="Standard", color="#1f77b4")
    ax.bar(x + width / 2, wild * 100, width, label="With wildcards", color="#ff7f0e")
    ax.set_xticks(x)
    ax.set_xticklabels(_SLOT_LABELS)
    ax.set_xlabel("Score", fontsize=9)
    ax.set_ylabel("Probability (%)", fontsize=9)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.legend()
    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    print("Generating remainder tables and score distribution …")
    plot_remainder_heatmap(
        build_remainder_table(),
        "Remainder Scores (standard)",
        show=False,
        save_path="remainder_standard.png",
    )
    plot_remainder_comparison(show=False, save_path="remainder_comparison.png")
    standard, wild = build_distribution_data()
    plot_score_distribution(standard, wild, show=False, save_path="score_distribution.png")
    print("Saved: remainder_standard.png, remainder_comparison.png, score_distribution.png")
