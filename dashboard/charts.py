"""All Plotly chart-builder functions."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from dashboard.config import (
    COLOR_ADD, COLOR_COMMITS, COLOR_DEL, COLOR_LINES, COLOR_PRS,
    PIE_PALETTE, TOP_N_CHART,
)


def _empty_figure(text: str, height: int = 320) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[dict(text=text, xref="paper", yref="paper",
                          x=0.5, y=0.5, showarrow=False, font_size=14)],
        height=height, paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


# ── Contribution activity (commits vs merged PRs) ─────────────────────────────

def make_activity_bar(contrib_df: pd.DataFrame, top_n: int = TOP_N_CHART) -> go.Figure:
    df = contrib_df.head(top_n)
    if df.empty:
        return _empty_figure("No contributors")
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=df["contributor"], y=df["commits"],
        name="Commits", marker_color=COLOR_COMMITS,
        hovertemplate="Commits: %{y:,}<extra>%{x}</extra>",
    ))
    fig.add_trace(go.Bar(
        x=df["contributor"], y=df["prs"],
        name="Merged PRs", marker_color=COLOR_PRS,
        hovertemplate="Merged PRs: %{y:,}<extra>%{x}</extra>",
    ))
    fig.update_layout(
        barmode="group",
        legend=dict(orientation="h", y=1.08, x=0),
        margin=dict(t=30, b=40, l=40, r=20),
        height=350,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        yaxis_gridcolor="#334155",
    )
    return fig


# ── Code volume share ─────────────────────────────────────────────────────────

def make_additions_pie(contrib_df: pd.DataFrame, top_n: int = TOP_N_CHART) -> go.Figure:
    df = contrib_df.head(top_n)
    if df.empty or df["additions"].sum() == 0:
        return _empty_figure("No line statistics")
    fig = px.pie(
        df, names="contributor", values="additions",
        hole=0.55, color_discrete_sequence=PIE_PALETTE,
    )
    fig.update_traces(
        textinfo="percent",
        hovertemplate="<b>%{label}</b><br>Additions: %{value:,}<extra></extra>",
    )
    fig.update_layout(
        legend=dict(orientation="v", x=1.02, y=0.5),
        margin=dict(t=20, b=20, l=20, r=20),
        height=350,
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


# ── Score breakdown ───────────────────────────────────────────────────────────

def make_score_breakdown(breakdown_df: pd.DataFrame) -> go.Figure:
    if breakdown_df.empty:
        return _empty_figure("No contributors")
    df = breakdown_df.sort_values("impact")
    fig = go.Figure()
    for col, name, color in [
        ("commit_pts", "Commits ×2",        COLOR_COMMITS),
        ("pr_pts",     "Merged PRs ×5",     COLOR_PRS),
        ("lines_pts",  "Lines (capped)/100", COLOR_LINES),
    ]:
        fig.add_trace(go.Bar(
            y=df["contributor"], x=df[col],
            name=name, orientation="h",
            marker_color=color, opacity=0.85,
            hovertemplate=f"{name}: %{{x:.1f}}<extra>%{{y}}</extra>",
        ))
    fig.update_layout(
        barmode="stack",
        xaxis=dict(title="Impact score (stacked)"),
        yaxis=dict(title="", tickfont_size=11),
        legend=dict(orientation="h", y=1.05, x=0),
        margin=dict(t=40, b=40, l=120, r=20),
        height=max(300, len(df) * 28),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis_gridcolor="#2a2a3a",
    )
    return fig


# ── Net lines ─────────────────────────────────────────────────────────────────

def make_net_lines_bar(contrib_df: pd.DataFrame, top_n: int = TOP_N_CHART) -> go.Figure:
    df = contrib_df.head(top_n)
    if df.empty:
        return _empty_figure("No contributors")
    colors = [COLOR_ADD if v >= 0 else COLOR_DEL for v in df["net_lines"]]
    fig = go.Figure(go.Bar(
        x=df["contributor"], y=df["net_lines"],
        marker_color=colors,
        hovertemplate="Net lines: %{y:+,}<extra>%{x}</extra>",
    ))
    fig.update_layout(
        margin=dict(t=20, b=40, l=50, r=20),
        height=300,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        yaxis_gridcolor="#2a2a3a",
    )
    return fig
