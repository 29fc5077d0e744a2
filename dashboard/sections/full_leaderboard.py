"""Full leaderboard table — every contributor, every column."""

from __future__ import annotations

import pandas as pd
import streamlit as st


def render_full_leaderboard(contrib_df: pd.DataFrame) -> None:
    st.markdown("---")
    st.markdown("## 📋 Full Leaderboard")

    full_display = contrib_df[[
        "contributor", "impact", "commits", "prs", "additions",
        "deletions", "net_lines", "velocity", "consistency",
    ]].copy()
    full_display["consistency"] = full_display["consistency"] * 100
    full_display.index = range(1, len(full_display) + 1)
    full_display.columns = [
        "Contributor", "Impact ⚡", "Commits", "PRs", "Additions",
        "Deletions", "Net Lines", "Commits/Active Wk", "Consistency %",
    ]

    st.dataframe(
        full_display.style
        .background_gradient(subset=["Impact ⚡"], cmap="YlOrRd")
        .background_gradient(subset=["Commits", "PRs"], cmap="Blues")
        .format({
            "Impact ⚡":         "{:.1f}",
            "Additions":         "{:,}",
            "Deletions":         "{:,}",
            "Net Lines":         "{:+,}",
            "Commits/Active Wk": "{:.2f}",
            "Consistency %":     "{:.0f}",
        }),
        use_container_width=True,
        height=600,
    )

    st.markdown("---")
    st.caption(
        "Built with Streamlit · Data: GitHub REST API · "
        "Scoring defined in `impact/rank.py`"
    )
