"""Interactive Plotly lookups for Niu Niu scoring.

Three public functions:

    build_remainder_lookup_figure(rules)
        — Standard vs. wildcard remainder-pair heatmaps, side by side.
    build_distribution_figure(rules)
        — Grouped bar chart of exact score probabilities.
    save_lookup_html(fig, path)
        — Export any figure to a self-contained HTML file.

Hover over a remainder cell to see both cards, their point sum and the
resulting score; wildcard cells also name the substitution used.
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from niuniu.analysis.heat_maps import build_distribution_data, build_remainder_table
from niuniu.analysis.simulator import N_SCORE_SLOTS
from niuniu.engine.cards import RANK_NAMES, rank_value
from niuniu.engine.scorer import remainder_score
from niuniu.engine.wildcards import DEFAULT_WILDCARDS, NO_WILDCARDS, WildcardRules

# ─── Constants ────────────────────────────────────────────────────────────────

_SCORE_COLORSCALE: str = "YlOrRd"
_SLOT_LABELS: list[str] = ["No bull"] + [f"Bull {s}" for s in range(1, N_SCORE_SLOTS - 1)] + ["Bull Bull"]


# ─── Hover text builders ──────────────────────────────────────────────────────


def _best_substitution(rank_a: str, rank_b: str, rules: WildcardRules) -> tuple[str, str]:
    """Return the (a, b) ranks that give the pair its best score.

    Face ranks are tried first so a substitution is only reported when it
    actually improves the score.
    """
    best = (rank_a, rank_b)
    best_score = remainder_score(rank_value(rank_a) + rank_value(rank_b))
    for a in (rank_a, *rules.alternatives(rank_a)):
        for b in (rank_b, *rules.alternatives(rank_b)):
            score = remainder_score(rank_value(a) + rank_value(b))
            if score > best_score:
                best, best_score = (a, b), score
    return best


def _build_remainder_hover(table: np.ndarray, rules: WildcardRules) -> list[list[str]]:
    """Return a 13×13 list of hover strings for a remainder panel."""
    rows: list[list[str]] = []
    for r, rank_a in enumerate(RANK_NAMES):
        row: list[str] = []
        for c, rank_b in enumerate(RANK_NAMES):
            score = int(table[r, c])
            used_a, used_b = _best_substitution(rank_a, rank_b, rules)
            lines = [
                f"Remainder: <b>{rank_a} + {rank_b}</b>",
                f"Points: {rank_value(used_a) + rank_value(used_b)}",
                f"Score: <b>{'Bull Bull' if score == 10 else score}</b>",
            ]
            if (used_a, used_b) != (rank_a, rank_b):
                lines.append(f"Scored as: {used_a} + {used_b}")
            row.append("<br>".join(lines))
        rows.append(row)
    return rows


# ─── Trace builder ─────────────────────────────────────────────────────────────


def _make_heatmap_trace(
    table: np.ndarray,
    hover_text: list[list[str]],
    *,
    name: str,
    showscale: bool = True,
) -> go.Heatmap:
    """Build one go.Heatmap trace for a 13×13 remainder panel."""
    return go.Heatmap(
        z=table.tolist(),
        x=RANK_NAMES,
        y=RANK_NAMES,
        colorscale=_SCORE_COLORSCALE,
        zmin=1,
        zmax=10,
        text=hover_text,
        hovertemplate="%{text}<extra></extra>",
        showscale=showscale,
        colorbar={"title": "Score", "x": 1.02},
        name=name,
    )


# ─── Public figure builders ───────────────────────────────────────────────────


def build_remainder_lookup_figure(rules: WildcardRules = DEFAULT_WILDCARDS) -> go.Figure:
    """Build an interactive standard-vs-wildcard remainder lookup.

    Returns:
        go.Figure with two heatmap traces in a 1×2 subplot layout.
    """
    standard = build_remainder_table(NO_WILDCARDS)
    wild = build_remainder_table(rules)

    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=["Standard", "With wildcards"],
        horizontal_spacing=0.10,
    )
    fig.add_trace(
        _make_heatmap_trace(
            standard,
            _build_remainder_hover(standard, NO_WILDCARDS),
            name="Standard",
            showscale=False,
        ),
        row=1,
        col=1,
    )
    fig.add_trace(
        _make_heatmap_trace(
            wild,
            _build_remainder_hover(wild, rules),
            name="Wildcards",
            showscale=True,
        ),
        row=1,
        col=2,
    )

    fig.update_layout(
        title_text="Niu Niu Remainder Lookup",
        title_font_size=15,
        height=520,
        width=1000,
    )
    fig.update_yaxes(title_text="First remainder card", col=1, autorange="reversed")
    fig.update_yaxes(autorange="reversed", col=2)
    fig.update_xaxes(title_text="Second remainder card")
    return fig


def build_distribution_figure(rules: WildcardRules = DEFAULT_WILDCARDS) -> go.Figure:
    """Build a grouped bar chart of exact score probabilities.

    Returns:
        go.Figure with two bar traces (standard, wildcards).
    """
    standard, wild = build_distribution_data(rules)

    fig = go.Figure()
    for name, probs in (("Standard", standard), ("With wildcards", wild)):
        fig.add_trace(
            go.Bar(
                x=_SLOT_LABELS,
                y=(probs * 100).tolist(),
                name=name,
                hovertemplate="%{x}: %{y:.2f}%<extra>" + name + "</extra>",
            )
        )

    fig.update_layout(
        title_text="Niu Niu Score Distribution (exact)",
        title_font_size=15,
        barmode="group",
        yaxis_title="Probability (%)",
        height=420,
        width=820,
    )
    return fig


# ─── HTML export ───────────────────────────────────────────────────────────────


def save_lookup_html(fig: go.Figure, path: str) -> None:
    """Save a Plotly figure to a self-contained HTML file.

    Plotly JS is loaded from the CDN so the file itself remains compact.
    """
    fig.write_html(path, include_plotlyjs="cdn")


# ─── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    print("Building interactive lookup figures …")
    save_lookup_html(build_remainder_lookup_figure(), "remainder_lookup.html")
    save_lookup_html(build_distribution_figure(), "score_distribution.html")
    print("Saved: remainder_lookup.html, score_distribution.html")
