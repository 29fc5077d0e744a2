"""
Tests for impact.narrative — summary payload and prompt text.
"""
from impact.models import AggregatedContributor
from impact.narrative import build_prompt, build_summary_payload
from impact.rank import build_report


def make_report(n=12):
    contributors = [
        AggregatedContributor(login=f"dev{i}", total_commits=100 - i, total_additions=10 * i)
        for i in range(n)
    ]
    return build_report("octo", "cat", contributors, merged_request_count=7)


def test_payload_caps_top_contributors():
    payload = build_summary_payload(make_report(), top_n=10)
    assert len(payload["top_contributors"]) == 10
    assert payload["top_contributors"][0]["name"] == "dev0"
    assert payload["merged_request_count"] == 7
    assert set(payload["top_contributors"][0]) == {"name", "commits", "additions", "deletions", "prs"}


def test_prompt_mentions_repo_and_rollups():
    prompt = build_prompt(make_report(3))
    assert "octo/cat" in prompt
    assert "Recent Merged PRs Analyzed: 7" in prompt
    assert '"name": "dev2"' in prompt
    assert "under 300 words" in prompt
