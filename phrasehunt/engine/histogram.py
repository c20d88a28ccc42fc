"""
Character histograms (letter multisets) and the puzzle target.

Conventions:
  - A histogram is a collections.Counter mapping character -> count.
  - Every character counts, including spaces and punctuation. No case
    folding happens here; callers decide what to strip before counting.
  - Histograms are only ever built by counting (or by Counter addition),
    so they never carry a zero-count entry.

Example:
  histogram("abac") -> Counter({"a": 2, "b": 1, "c": 1})
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

WHITESPACE_RE = re.compile(r"\s+")


def histogram(text: str) -> Counter:
    """Count occurrences of every character in `text`."""
    return Counter(text)


def is_subset(a: Counter, b: Counter) -> bool:
    """
    True iff every character in `a` also appears in `b` at least as often.

    A word with a character absent from `b`, or with too many repeats of a
    character, is not a subset.
    """
    for ch, n in a.items():
        if b.get(ch, 0) < n:
            return False
    return True


def equals(a: Counter, b: Counter) -> bool:
    """
    True iff `a` and `b` hold exactly the same characters with the same counts.

    Checked in both directions, so the result does not depend on which
    histogram is passed first.
    """
    if len(a) != len(b):
        return False
    for ch, n in a.items():
        if b.get(ch, 0) != n:
            return False
    for ch, n in b.items():
        if a.get(ch, 0) != n:
            return False
    return True


def strip_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


@dataclass(frozen=True)
class Target:
    """The fixed letter multiset every full combination must match."""
    phrase: str                     # the known anagram, spaces included
    letters: str                    # phrase with all whitespace removed
    histogram: Counter = field(compare=False, repr=False)
    length: int = 0                 # total character count (e.g. 18)

    @classmethod
    def from_phrase(cls, phrase: str) -> "Target":
        letters = strip_whitespace(phrase)
        return cls(phrase=phrase, letters=letters, histogram=histogram(letters), length=len(letters))
