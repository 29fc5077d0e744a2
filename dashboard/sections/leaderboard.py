"""Top-3 podium and contribution charts."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from dashboard.charts import (
    make_activity_bar,
    make_additions_pie,
    make_net_lines_bar,
    make_score_breakdown,
)
from dashboard.config import PODIUM_SIZE, TOP_N_CHART
from dashboard.data import score_breakdown_df

MEDALS = ["🥇", "🥈", "🥉"]


def render_leaderboard(contrib_df: pd.DataFrame) -> None:
    st.markdown("---")
    st.markdown("## 🏆 Top Contributors")

    podium = contrib_df.head(PODIUM_SIZE).reset_index(drop=True)
    if podium.empty:
        st.info("No contributors found for this repository.")
        return

    cols = st.columns(PODIUM_SIZE)
    for i, (_, row) in enumerate(podium.iterrows()):
        with cols[i]:
            if row.avatar_url:
                st.image(row.avatar_url, width=72)
            st.metric(
                label=f"{MEDALS[i]} {row.contributor}",
                value=f"{row.impact:.1f}",
                delta=f"{row.net_lines:+,} net lines",
                delta_color="normal" if row.net_lines >= 0 else "inverse",
            )
            st.caption(
                f"{row.commits:,} commits · {row.prs} PRs · "
                f"{row.consistency * 100:.0f}% consistent"
            )

    st.markdown("### 📊 Contribution Activity")
    left, right = st.columns(2)
    with left:
        st.plotly_chart(
            make_activity_bar(contrib_df), use_container_width=True, key="activity_bar"
        )
    with right:
        st.plotly_chart(
            make_additions_pie(contrib_df), use_container_width=True, key="additions_pie"
        )

    tab_breakdown, tab_net = st.tabs(["⚡ Score Breakdown", "± Net Lines"])
    with tab_breakdown:
        st.plotly_chart(
            make_score_breakdown(score_breakdown_df(contrib_df, top_n=TOP_N_CHART)),
            use_container_width=True,
            key="score_breakdown",
        )
    with tab_net:
        st.plotly_chart(
            make_net_lines_bar(contrib_df), use_container_width=True, key="net_lines"
        )
