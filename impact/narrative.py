"""
Narrative boundary: the payload and prompt handed to an external text
generator. Calling the generator is the caller's business.
"""

from __future__ import annotations

import json

from impact.models import AnalysisReport


def build_summary_payload(report: AnalysisReport, top_n: int = 10) -> dict:
    return {
        "owner":                report.owner,
        "repo":                 report.repo,
        "total_commits":        report.total_commits,
        "total_lines_changed":  report.total_lines_changed,
        "merged_request_count": report.merged_request_count,
        "top_contributors": [
            {
                "name":      c.login,
                "commits":   c.total_commits,
                "additions": c.total_additions,
                "deletions": c.total_deletions,
                "prs":       c.total_merged_requests,
            }
            for c in report.contributors[:top_n]
        ],
    }


def build_prompt(report: AnalysisReport, top_n: int = 10) -> str:
    payload = build_summary_payload(report, top_n=top_n)
    top = json.dumps(payload["top_contributors"], indent=2)
    return (
        f"Analyze the following GitHub repository statistics for {report.owner}/{report.repo}.\n\n"
        f"Total Commits: {report.total_commits}\n"
        f"Total Lines Changed (approx): {report.total_lines_changed}\n"
        f"Recent Merged PRs Analyzed: {report.merged_request_count}\n\n"
        f"Top {len(payload['top_contributors'])} Contributors Data:\n{top}\n\n"
        "Please provide a concise, professional, and insightful summary of the team's "
        "development dynamics.\n"
        '1. Identify the "Heavy Lifters" (most lines of code).\n'
        '2. Identify the "Maintainers" (high commit counts and PR activity).\n'
        "3. Comment on the balance of the team (is it a one-person show or well-distributed?).\n"
        '4. Provide a fun "Team Award" for the top contributor based on their stats.\n\n'
        "Format the output in Markdown. Keep it under 300 words.\n"
    )
