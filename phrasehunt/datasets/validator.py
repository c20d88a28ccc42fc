"""
Word-list summary for phrasehunt.

What this module does:
- Describe a raw word list before it is searched: line count, blank lines,
  lines with surrounding whitespace, unique words, and how many words
  survive the candidate filter for the current target.
- Compute the SHA-256 of the raw text so a run manifest pins the exact
  input that was searched.
- Return a machine-readable dict (for manifests) and provide a pretty
  one-line summary.

An empty or junk word list is not an error: it simply yields zero usable
candidates, and the search then reports "not found".

Typical use:
    from phrasehunt.datasets import summarize_wordlist, pretty_summary
    rep = summarize_wordlist(text, Target.from_phrase("poultry outwits ants"))
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, List
import hashlib

from phrasehunt.engine.candidates import filter_candidates
from phrasehunt.engine.histogram import Target
from .io import split_wordlist


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics for one raw word list against one target."""
    sha256: str          # SHA-256 of the raw text (UTF-8)
    lines: int           # entries after splitting on newlines
    blank_lines: int     # empty entries (trailing newline included)
    padded_lines: int    # entries with leading/trailing whitespace
    unique_count: int    # distinct non-empty entries
    usable_count: int    # entries that fit inside the target letters
    target_length: int   # letters in the target (whitespace removed)
    issues: List[str]    # human-friendly notes (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_text(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _as_dict(rep: WordlistReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def summarize_wordlist(text: str, target: Target) -> Dict:
    """
    Summarize raw word-list text for the given target.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema).
    """
    words = split_wordlist(text)
    non_blank = [w for w in words if w]
    unique = set(non_blank)
    padded = sum(1 for w in non_blank if w != w.strip())
    usable = filter_candidates(unique, target)

    issues: List[str] = []
    if not unique:
        issues.append("word list contains 0 words")
    elif not usable:
        issues.append("no word fits inside the target letters")
    if len(non_blank) != len(unique):
        issues.append(f"word list contains {len(non_blank) - len(unique)} duplicate line(s)")
    if padded:
        # words are compared as-is, so padded entries can never match
        issues.append(f"{padded} line(s) carry surrounding whitespace")

    rep = WordlistReport(
        sha256=_sha256_text(text),
        lines=len(words),
        blank_lines=len(words) - len(non_blank),
        padded_lines=padded,
        unique_count=len(unique),
        usable_count=len(usable),
        target_length=target.length,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=99175 (uniq=99175, blank=1, sha=abc123...) | usable=1659 | target=18 letters | OK
    """
    sha = (report.get("sha256") or "")[:12]
    status = "OK" if report["usable_count"] > 0 else "EMPTY"
    return (
        f"words={report['lines']} (uniq={report['unique_count']}, "
        f"blank={report['blank_lines']}, sha={sha}) "
        f"| usable={report['usable_count']} | target={report['target_length']} letters | {status}"
    )
