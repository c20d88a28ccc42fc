"""
Nested search (bounded, exactly three words).

Strategy:
  - Three nested passes over the ordered candidate list.
  - Outer word X is admitted only if X alone fits the target.
  - Middle word Y is admitted only if X+Y still fits.
  - Inner word Z completes the combination; X+Y+Z must have exactly the
    target's histogram before it goes to the verifier.
  - First verified phrase wins. Search order: outer, middle, inner, each
    ascending over the list, so results are deterministic.

Notes:
  - A word may be used more than once in a combination (X == Y is allowed).
  - Per-word histograms are computed once and added together; the result is
    the same as counting the concatenated string.
  - Fixed at three words regardless of max_depth; use `frontier` for other
    depths.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List

from phrasehunt.engine.histogram import Target, equals, histogram, is_subset
from phrasehunt.engine.verify import DigestFn, md5_hex, verify
from .base import BaseSearch, ProgressFn, SearchResult, SearchStats, register

logger = logging.getLogger(__name__)


@register
class NestedSearch(BaseSearch):
    id = "nested"
    name = "Nested (three words)"
    version = "1.0.0"

    DEPTH = 3

    def search(self, words: List[str], target: Target, digest: str, *,
               digest_fn: DigestFn = md5_hex,
               progress: ProgressFn | None = None) -> SearchResult:
        stats = SearchStats()
        hists: Dict[str, Counter] = {w: histogram(w) for w in words}
        total = len(words)

        for done, x in enumerate(words, 1):
            hx = hists[x]
            stats.visited += 1
            if not is_subset(hx, target.histogram):
                stats.pruned += 1
            else:
                for y in words:
                    hxy = hx + hists[y]
                    stats.visited += 1
                    if not is_subset(hxy, target.histogram):
                        stats.pruned += 1
                        continue
                    for z in words:
                        stats.visited += 1
                        if not equals(hxy + hists[z], target.histogram):
                            continue
                        stats.matches += 1
                        combination = (x, y, z)
                        phrase = verify(combination, digest, digest_fn)
                        if phrase is not None:
                            logger.debug("nested: verified %r after %d visits", phrase, stats.visited)
                            return SearchResult(phrase=phrase, combination=combination, stats=stats)
                        stats.rejected += 1

            if progress:
                progress(done, total, x)

        return SearchResult(stats=stats)
