"""Sidebar controls — repository URL, optional token, analyze button."""

from __future__ import annotations

import streamlit as st


def render_sidebar() -> tuple[str, str, bool]:
    """
    Render the sidebar and return:
        repo_url  – raw URL as typed
        token     – GitHub token, '' when not given
        submitted – True on the run where Analyze was clicked
    """
    with st.sidebar:
        st.markdown("## ⚙️ Repository")
        repo_url = st.text_input(
            "GitHub URL",
            placeholder="https://github.com/owner/repo",
            key="repo_url",
        )
        token = st.text_input(
            "GitHub token (optional)",
            type="password",
            help="Raises the rate limit and unlocks private repositories. "
                 "Only sent to api.github.com for this analysis.",
            key="gh_token",
        )
        submitted = st.button("Analyze", type="primary", use_container_width=True)

        st.markdown("---")
        st.caption(
            "**Impact score** = commits × 2 + merged PRs × 5 "
            "+ min(lines changed, 100k) / 100"
        )
        st.caption("Merged PRs come from the 100 most recently updated closed PRs.")

    return repo_url, token, submitted
