"""
I/O utilities for search runs.

Responsibilities:
- write_csv:     one row per solve result (used to compare strategies).
- write_manifest:dump a JSON manifest with config, word-list summary, result.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

STAT_FIELDS = ["visited", "pruned", "matches", "rejected", "peak_frontier"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize solve results (as returned by harness.solve) to CSV.

    Schema (columns):
      solver, found, phrase, words_total, candidates, time_ms,
      visited, pruned, matches, rejected, peak_frontier

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "found", "phrase", "words_total", "candidates", "time_ms"] + STAT_FIELDS

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver", "?"),
                "found": r["found"],
                "phrase": r["phrase"] or "",
                "words_total": r["words_total"],
                "candidates": r["candidates"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            stats = r.get("stats", {})
            for k in STAT_FIELDS:
                row[k] = stats.get(k, "")
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for one run.

    Typical keys:
      - run_id, git_commit
      - config: PuzzleConfig fields plus CLI choices (solver, progress, ...)
      - wordlist: output of datasets.summarize_wordlist(...)
      - result: output of harness.solve(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
