"""
Parallel frontier search (one branch per first-level word).

Idea:
  - Below a fixed first word, the depth-first walk never touches another
    first word's subtree, and the word list and target are read-only. So
    each first-level word is an independent branch and can run in its own
    process.
  - Results are collected in branch order. The earliest branch that finds a
    phrase wins; later branches are cancelled. Because the sequential
    frontier finishes branch i before starting branch i+1, the answer is
    the same one `frontier` returns. Running branches are not waited for
    once a phrase is in hand.

Notes:
  - Worker state (words, target, digest settings) is installed once per
    process by the pool initializer rather than pickled with every branch.
  - digest_fn must be picklable (md5_hex or make_digest_fn(...) are).
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

from phrasehunt.engine.histogram import Target
from phrasehunt.engine.verify import DigestFn, md5_hex
from .base import BaseSearch, ProgressFn, SearchResult, SearchStats, register
from .frontier import walk

logger = logging.getLogger(__name__)

_BRANCH: dict = {}


def _init_worker(words: List[str], target: Target, digest: str, max_depth: int,
                 digest_fn: DigestFn) -> None:
    _BRANCH.update(words=words, target=target, digest=digest, max_depth=max_depth,
                   digest_fn=digest_fn)


def _walk_branch(seed: str) -> Tuple[Optional[Tuple[str, Tuple[str, ...]]], SearchStats]:
    stats = SearchStats()
    hit = walk([seed], _BRANCH["words"], _BRANCH["target"], _BRANCH["digest"],
               max_depth=_BRANCH["max_depth"], digest_fn=_BRANCH["digest_fn"], stats=stats)
    return hit, stats


@register
class ParallelFrontierSearch(BaseSearch):
    id = "parallel"
    name = "Frontier (process pool per first word)"
    version = "1.0.0"

    def __init__(self, max_depth: int = 3, max_workers: int | None = None):
        super().__init__(max_depth=max_depth)
        self.max_workers = max_workers

    def search(self, words: List[str], target: Target, digest: str, *,
               digest_fn: DigestFn = md5_hex,
               progress: ProgressFn | None = None) -> SearchResult:
        stats = SearchStats()
        if not words:
            return SearchResult(stats=stats)

        total = len(words)
        pool = ProcessPoolExecutor(
            max_workers=self.max_workers,
            initializer=_init_worker,
            initargs=(list(words), target, digest, self.max_depth, digest_fn),
        )
        hit = None
        try:
            futures = [pool.submit(_walk_branch, w) for w in words]
            for done, (seed, fut) in enumerate(zip(words, futures), 1):
                hit, branch_stats = fut.result()
                stats.merge(branch_stats)
                if hit is not None:
                    logger.debug("parallel: verified %r in branch %d/%d (%r)",
                                 hit[0], done, total, seed)
                    break
                if progress:
                    progress(done, total, seed)
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise

        # After a hit: drop queued branches and return without waiting for
        # running ones; their results are never read.
        pool.shutdown(wait=hit is None, cancel_futures=True)
        if hit is None:
            return SearchResult(stats=stats)
        phrase, combination = hit
        return SearchResult(phrase=phrase, combination=combination, stats=stats)
