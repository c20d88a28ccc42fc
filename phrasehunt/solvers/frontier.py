"""
Frontier search (iterative depth-first, up to max_depth words).

Strategy:
  - An explicit work list holds combinations still to be examined. It is
    seeded with one single-word combination per candidate.
  - Each step takes one combination off the list and:
      1) computes its histogram,
      2) prunes it if it no longer fits the target or is too long,
      3) if it is exactly the target's histogram, hands it to the verifier
         (success ends the search; failure drops only this combination),
      4) otherwise, below max_depth, pushes `combination + w` for every
         candidate w.
  - Ends with "not found" when the work list is empty.

Traversal policy:
  - The work list is a stack (Python list, pop from the end). Seeds are
    pushed in reverse so the first candidate is examined first; children are
    pushed in list order so the last candidate's child is examined first.
    This is the same visiting order as taking items from the front of a
    deque and putting new ones back at the front, and keeps peak memory at
    roughly depth * len(words) entries instead of a breadth-first level.

Notes:
  - Each stack entry carries its parent's histogram (shared, not copied by
    siblings) so a step adds one cached word histogram instead of
    recounting the whole concatenation.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from phrasehunt.engine.histogram import Target, equals, histogram, is_subset
from phrasehunt.engine.verify import DigestFn, md5_hex, verify
from .base import BaseSearch, ProgressFn, SearchResult, SearchStats, register

logger = logging.getLogger(__name__)

# (combination, parent histogram, parent length)
Entry = Tuple[Tuple[str, ...], Counter, int]


def walk(
        seeds: Sequence[str],
        words: Sequence[str],
        target: Target,
        digest: str,
        *,
        max_depth: int,
        digest_fn: DigestFn = md5_hex,
        stats: SearchStats,
        progress: ProgressFn | None = None,
) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """
    Depth-first walk below each seed word, in seed order.

    Returns (phrase, combination) for the first verified match, else None.
    `stats` is updated in place.
    """
    hists: Dict[str, Counter] = {w: histogram(w) for w in words}
    for s in seeds:
        if s not in hists:
            hists[s] = histogram(s)

    empty: Counter = Counter()
    stack: List[Entry] = [((s,), empty, 0) for s in reversed(seeds)]
    stats.peak_frontier = max(stats.peak_frontier, len(stack))

    total = len(seeds)
    done = 0
    current_seed: str | None = None

    while stack:
        combination, parent_hist, parent_len = stack.pop()
        stats.visited += 1

        if len(combination) == 1:
            if progress and current_seed is not None:
                done += 1
                progress(done, total, current_seed)
            current_seed = combination[0]

        last = combination[-1]
        length = parent_len + len(last)
        hist = parent_hist + hists[last]

        # Step 2: prune anything that no longer fits
        if length > target.length or not is_subset(hist, target.histogram):
            stats.pruned += 1
            continue

        # Step 3: full-length and histogram-equal -> try every word order
        if length == target.length and equals(hist, target.histogram):
            stats.matches += 1
            phrase = verify(combination, digest, digest_fn)
            if phrase is not None:
                return phrase, combination
            stats.rejected += 1
            continue

        # Step 4: go one word deeper
        if len(combination) < max_depth:
            for w in words:
                stack.append((combination + (w,), hist, length))
            if len(stack) > stats.peak_frontier:
                stats.peak_frontier = len(stack)

    if progress and current_seed is not None:
        progress(done + 1, total, current_seed)
    return None


@register
class FrontierSearch(BaseSearch):
    id = "frontier"
    name = "Frontier (iterative depth-first)"
    version = "1.0.0"

    def search(self, words: List[str], target: Target, digest: str, *,
               digest_fn: DigestFn = md5_hex,
               progress: ProgressFn | None = None) -> SearchResult:
        stats = SearchStats()
        hit = walk(words, words, target, digest, max_depth=self.max_depth,
                   digest_fn=digest_fn, stats=stats, progress=progress)
        if hit is None:
            return SearchResult(stats=stats)
        phrase, combination = hit
        logger.debug("frontier: verified %r after %d visits (peak frontier %d)",
                     phrase, stats.visited, stats.peak_frontier)
        return SearchResult(phrase=phrase, combination=combination, stats=stats)
