"""
Repository Impact Dashboard — thin orchestrator
"""

from __future__ import annotations

import streamlit as st

st.set_page_config(
    page_title="Repo Impact Dashboard",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded",
)

from dashboard.data import build_contributors_df, parse_repo_url
from dashboard.sections.sidebar import render_sidebar
from dashboard.sections.summary import render_summary
from dashboard.sections.leaderboard import render_leaderboard
from dashboard.sections.full_leaderboard import render_full_leaderboard
from impact.analysis import analyze_repository
from impact.errors import AnalysisError


def run_analysis(repo_url: str, token: str) -> None:
    parsed = parse_repo_url(repo_url)
    if parsed is None:
        st.error("Invalid GitHub URL format. Expected: https://github.com/owner/repo")
        return
    owner, repo = parsed
    with st.spinner(f"Analyzing {owner}/{repo}… GitHub may need a few seconds to compute stats."):
        try:
            st.session_state["report"] = analyze_repository(owner, repo, token or None)
        except AnalysisError as exc:
            st.session_state.pop("report", None)
            st.error(str(exc))


def main() -> None:
    repo_url, token, submitted = render_sidebar()

    st.title("⚡ Repository Impact Dashboard")

    if submitted:
        run_analysis(repo_url, token)

    report = st.session_state.get("report")
    if report is None:
        st.caption("Enter a GitHub repository URL in the sidebar and press **Analyze**.")
        return

    st.caption(
        f"{report.owner}/{report.repo} · {len(report.contributors)} contributors · "
        f"{report.merged_request_count} recent merged PRs"
    )

    contrib_df = build_contributors_df(report)

    # Sections
    render_summary(report)
    render_leaderboard(contrib_df)
    render_full_leaderboard(contrib_df)


if __name__ == "__main__":
    main()
