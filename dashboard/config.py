"""Shared constants: colours, chart sizes."""

from __future__ import annotations

COLOR_COMMITS   = "#6366F1"   # Commits
COLOR_PRS       = "#EC4899"   # Merged PRs
COLOR_ADD       = "#10B981"   # Additions
COLOR_DEL       = "#F43F5E"   # Deletions
COLOR_LINES     = "#F59E0B"   # Capped lines term

PIE_PALETTE = [
    "#6366F1", "#8B5CF6", "#EC4899", "#F43F5E",
    "#10B981", "#06B6D4", "#3B82F6", "#F59E0B",
]

TOP_N_CHART = 10
PODIUM_SIZE = 3
