"""
Candidate filtering against the target letter multiset.

Given:
  - a raw word list (may contain duplicates and empty strings)
  - the puzzle Target

Return:
  - the set of words whose letters fit inside the target histogram.

This is the step that turns a dictionary of tens of thousands of words into
the few hundred that can take part in a combination. The search then walks
the survivors in `order_candidates` order: longest words first, because a
long word consumes more of the target and cuts more branches early.
"""

from __future__ import annotations

from typing import Iterable, List, Set

import numpy as np

from .histogram import Target


def filter_candidates(words: Iterable[str], target: Target) -> Set[str]:
    """
    Keep non-empty words whose histogram is a subset of `target.histogram`.

    Vectorised: each word becomes a row of letter counts over the target's
    alphabet plus one overflow column for letters the target lacks. A row
    survives iff it never exceeds the target's counts (overflow limit 0).

    The empty string is dropped explicitly; it is vacuously a subset and
    would otherwise become a zero-length combination element.
    """
    pool: List[str] = [w for w in dict.fromkeys(words) if w]
    if not pool:
        return set()

    alphabet = sorted(target.histogram)
    column = {ch: i for i, ch in enumerate(alphabet)}
    overflow = len(alphabet)

    counts = np.zeros((len(pool), overflow + 1), dtype=np.int32)
    for row, w in enumerate(pool):
        for ch in w:
            counts[row, column.get(ch, overflow)] += 1

    limits = np.array([target.histogram[ch] for ch in alphabet] + [0], dtype=np.int32)
    keep = np.all(counts <= limits, axis=1)
    return {w for w, ok in zip(pool, keep) if ok}


def order_candidates(words: Iterable[str]) -> List[str]:
    """
    Longest first; equal lengths in ascending string order.

    The secondary key makes the order independent of set iteration order,
    so two runs over the same input always search in the same sequence.
    """
    return sorted(words, key=lambda w: (-len(w), w))
