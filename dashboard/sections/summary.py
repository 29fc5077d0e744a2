"""Headline metric row."""

from __future__ import annotations

import streamlit as st

from impact.models import AnalysisReport


def render_summary(report: AnalysisReport) -> None:
    st.markdown("---")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Total Commits",   f"{report.total_commits:,}", help="Recorded history")
    m2.metric("PRs Analyzed",    f"{report.merged_request_count:,}", help="Recent merged PRs")
    m3.metric("Lines Changed",   f"{report.total_lines_changed:,}", help="Additions + deletions")
    m4.metric("Contributors",    f"{len(report.contributors):,}")

    if report.activity_degraded:
        st.warning(
            "Merged PR data could not be fetched; PR counts are shown as zero "
            "and rankings use commit statistics only."
        )
