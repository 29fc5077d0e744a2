"""
Tests for the generate_report command-line entry point.

analyze_repository is monkeypatched; nothing touches the network.
"""
import json

import pytest

import generate_report
from impact.errors import RateLimitedError
from impact.models import AggregatedContributor
from impact.rank import build_report


def fake_report():
    return build_report(
        "octo", "cat",
        [AggregatedContributor(login="a", total_commits=10, total_additions=100,
                               total_deletions=20, net_lines=80, total_merged_requests=1)],
        merged_request_count=1,
    )


def test_writes_snapshot_and_prints_table(tmp_path, monkeypatch, capsys):
    seen = {}

    def fake_analyze(owner, repo, config=None):
        seen.update(owner=owner, repo=repo, token=config.token)
        return fake_report()

    monkeypatch.setenv("GITHUB_TOKEN", "tok")
    monkeypatch.setattr(generate_report, "analyze_repository", fake_analyze)
    out = tmp_path / "report.json"

    assert generate_report.main(["octo/cat", "--out", str(out), "--prompt"]) == 0

    assert seen == {"owner": "octo", "repo": "cat", "token": "tok"}
    data = json.loads(out.read_text())
    assert data["total_commits"] == 10
    assert data["contributors"][0]["impact_score"] == pytest.approx(26.2)
    assert "generated_at" in data
    printed = capsys.readouterr().out
    assert "Impact Rankings" in printed
    assert "Narrative Prompt" in printed


def test_analysis_error_exits_non_zero(tmp_path, monkeypatch):
    def failing(owner, repo, config=None):
        raise RateLimitedError(403, "u")

    monkeypatch.setattr(generate_report, "analyze_repository", failing)
    assert generate_report.main(["octo/cat", "--out", str(tmp_path / "x.json")]) == 1
    assert not (tmp_path / "x.json").exists()


def test_bad_repository_argument():
    assert generate_report.main(["just-a-name"]) == 2
