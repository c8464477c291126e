"""Plotly figure builders for allocations and budget progress.

Each function accepts objects produced elsewhere in the package and returns
a ``plotly.graph_objects.Figure``. Empty inputs yield an empty figure with
the title "No data to display".
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import plotly.express as px
import plotly.graph_objects as go

from .models import CategoryAllocation
from .progress.evaluator import CategoryBudgetProgress
from .registry import CategoryRegistry


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def allocation_pie_chart(
    allocations: Sequence[CategoryAllocation],
    registry: Optional[CategoryRegistry] = None,
    title: str | None = None,
) -> go.Figure:
    """Donut chart of category allocations.

    Parameters
    ----------
    allocations : sequence of CategoryAllocation
        Allocations to plot; zero amounts are left out.
    registry : CategoryRegistry, optional
        Supplies display names and colours. Without it, category keys are
        shown and Plotly's default palette is used.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart with a hole in the middle.
    """
    visible = [a for a in allocations if a.amount > 0]
    if not visible:
        return _empty_figure()

    names = [registry.display_name(a.category) if registry else a.category for a in visible]
    fig = px.pie(
        names=names,
        values=[a.amount for a in visible],
        hole=0.6,
    )
    if registry is not None:
        fig.update_traces(marker=dict(colors=[registry.color_hex(a.category) for a in visible]))
    fig.update_layout(title=title or "Budget allocation")
    return fig


def category_progress_chart(
    progress: Sequence[CategoryBudgetProgress],
    title: str | None = None,
) -> go.Figure:
    """Horizontal bars showing how much of each category budget is used.

    Bar length is the fill ratio clamped to [0, 1]; the label carries the
    unclamped percentage and the colour follows the status tier.
    """
    if not progress:
        return _empty_figure()

    ratios = np.array([item.spend_ratio for item in progress], dtype=float)
    fills = np.clip(ratios, 0.0, 1.0)
    fig = go.Figure(
        go.Bar(
            x=fills,
            y=[item.category for item in progress],
            orientation='h',
            marker_color=[item.status.color for item in progress],
            text=[f"{item.displayed_percent}%" for item in progress],
            textposition='auto',
        )
    )
    fig.update_layout(
        title=title or "Category budgets",
        xaxis=dict(range=[0, 1], tickformat='.0%', title="Used"),
        yaxis=dict(autorange='reversed'),
    )
    return fig
