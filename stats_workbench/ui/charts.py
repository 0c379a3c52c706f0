"""Plotly chart builders for the workbench."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from core.export.tables import ChartPayload


# Consistent color palette
COLORS = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]


def plot_chart_payload(payload: ChartPayload, height: int = 450) -> go.Figure:
    """Render a line chart payload, one trace per subcategory."""
    frame = payload.to_frame()
    labels = [str(label) for label in frame.index]
    # positions on the axis when labels repeat
    x = labels if len(set(labels)) == len(labels) else list(range(1, len(labels) + 1))
    fig = go.Figure()
    for i, name in enumerate(payload.subcategories):
        fig.add_trace(go.Scatter(
            x=x,
            text=labels,
            y=frame[name],
            name=name,
            line=dict(color=COLORS[i % len(COLORS)]),
            connectgaps=False,
        ))
    fig.update_layout(
        title=payload.title,
        xaxis_title=payload.category.title(),
        yaxis_title="Value",
        hovermode="x unified",
        template="plotly_white",
        height=height,
    )
    return fig


def plot_decomposition(
    labels: Sequence[str],
    observed: Sequence[float | None],
    trend: Sequence[float | None],
    seasonal: Sequence[float | None],
    irregular: Sequence[float | None],
    title: str = "Time Series Decomposition",
) -> go.Figure:
    """Plot 4-panel decomposition chart."""
    fig = make_subplots(
        rows=4, cols=1,
        shared_xaxes=True,
        subplot_titles=("Observed", "Trend", "Seasonal", "Irregular"),
        vertical_spacing=0.06,
    )
    x = list(labels)
    fig.add_trace(go.Scatter(x=x, y=list(observed), name="Observed", line=dict(color=COLORS[0])), row=1, col=1)
    fig.add_trace(go.Scatter(x=x, y=list(trend), name="Trend", line=dict(color=COLORS[1])), row=2, col=1)
    fig.add_trace(go.Scatter(x=x, y=list(seasonal), name="Seasonal", line=dict(color=COLORS[2])), row=3, col=1)
    fig.add_trace(go.Scatter(x=x, y=list(irregular), name="Irregular", line=dict(color=COLORS[3])), row=4, col=1)

    fig.update_layout(
        title=title,
        height=700,
        showlegend=False,
        template="plotly_white",
    )
    return fig


def plot_seasonal_indices(indices: Sequence[float], mode: str, title: str = "Seasonal Indices") -> go.Figure:
    """Plot seasonal indices as a bar chart around their neutral level."""
    baseline = 1.0 if mode == "multiplicative" else 0.0
    values = [float(v) for v in indices]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=list(range(1, len(values) + 1)),
        y=values,
        marker_color=[COLORS[0] if v >= baseline else COLORS[3] for v in values],
    ))
    fig.add_hline(y=baseline, line_dash="dash", line_color="gray")
    fig.update_layout(
        title=title,
        xaxis_title="Period",
        yaxis_title="Seasonal Index",
        template="plotly_white",
        height=350,
    )
    return fig


def plot_runs_sequence(values: Sequence[float], cut_point: float, title: str = "Runs Sequence") -> go.Figure:
    """Observations in order, colored by side of the cut point."""
    x = list(range(1, len(values) + 1))
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=x, y=list(values), mode="lines", line=dict(color=COLORS[7], width=1), showlegend=False))
    fig.add_trace(go.Scatter(
        x=x,
        y=list(values),
        mode="markers",
        marker=dict(color=[COLORS[3] if v < cut_point else COLORS[0] for v in values], size=8),
        showlegend=False,
    ))
    fig.add_hline(y=cut_point, line_dash="dash", line_color="gray", annotation_text=f"cut point {cut_point:.3f}")
    fig.update_layout(
        title=title,
        xaxis_title="Case",
        yaxis_title="Value",
        template="plotly_white",
        height=350,
    )
    return fig
