#!/usr/bin/env python3
"""
generate_report.py

Pulls contributor statistics and the latest page of merged PRs for one
GitHub repository, ranks contributors by impact score and writes the
report to a JSON snapshot.

Output: impact_report.json

Usage:
    export GITHUB_TOKEN=ghp_...     # optional, raises the rate limit
    python generate_report.py PostHog/posthog
    python generate_report.py PostHog/posthog --prompt
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from impact.analysis import analyze_repository
from impact.config import ClientConfig
from impact.errors import AnalysisError
from impact.narrative import build_prompt

OUTPUT_FILE = "impact_report.json"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank a repository's contributors by impact")
    parser.add_argument("repository", help="Repository as OWNER/REPO")
    parser.add_argument("--out", default=OUTPUT_FILE, help=f"Output path (default: {OUTPUT_FILE})")
    parser.add_argument(
        "--prompt", action="store_true",
        help="Also print the narrative prompt for an external text generator",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    owner, _, repo = args.repository.partition("/")
    if not owner or not repo:
        log.error(f"Expected OWNER/REPO, got '{args.repository}'")
        return 2

    config = ClientConfig.from_env()
    if config.token is None:
        log.info("GITHUB_TOKEN not set; using unauthenticated requests (60 req/h)")

    try:
        report = analyze_repository(owner, repo, config=config)
    except AnalysisError as exc:
        log.error(str(exc))
        return 1

    if report.activity_degraded:
        log.warning("Merged PR data unavailable; PR counts are zero for everyone")

    # ── Save output ──────────────────────────────────────────────────────────
    snapshot = {"generated_at": datetime.now(timezone.utc).isoformat(), **report.to_dict()}
    output_path = Path(args.out)
    with output_path.open("w") as f:
        json.dump(snapshot, f, indent=2, default=str)

    log.info(f"✓ Saved {output_path} ({output_path.stat().st_size / 1024:.1f} KB)")
    log.info(f"  Contributors ranked: {len(report.contributors)}")
    log.info(f"  Lines changed:       {report.total_lines_changed}")

    # ── Quick summary table ──────────────────────────────────────────────────
    rows = [
        {
            "contributor": c.login,
            "impact":      c.impact_score,
            "commits":     c.total_commits,
            "prs":         c.total_merged_requests,
            "additions":   c.total_additions,
            "deletions":   c.total_deletions,
            "net":         c.net_lines,
        }
        for c in report.contributors
    ]
    if rows:
        df = pd.DataFrame(rows)
        print("\n── Impact Rankings ──────────────────────────────────────────────────────")
        print(df.to_string(index=False, float_format="%.1f"))

    if args.prompt:
        print("\n── Narrative Prompt ─────────────────────────────────────────────────────")
        print(build_prompt(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
