"""
Pipeline core: word list in, verified phrase (or nothing) out.

- solve: filter -> order -> search -> verify, with timing and stats.

Steps:
  1) Drop every word that does not fit inside the target letters
     (duplicates and empty strings go too).
  2) Order the survivors longest-first so big words prune early.
  3) Run the chosen search strategy; it hands histogram-equal combinations
     to the verifier and stops at the first digest match.

This function is UI-agnostic so it can be reused by the CLI apps, a
notebook, or tests without changes. Fetching and printing live elsewhere.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Dict, Iterable

from phrasehunt.engine import filter_candidates, order_candidates
from phrasehunt.solvers import create_solver
from phrasehunt.solvers.base import ProgressFn
from .config import PuzzleConfig

logger = logging.getLogger(__name__)

DEFAULT_SOLVER = "frontier"


def solve(
        words: Iterable[str],
        config: PuzzleConfig | None = None,
        *,
        solver_id: str = DEFAULT_SOLVER,
        progress: ProgressFn | None = None,
        **solver_kwargs,
) -> Dict:
    """
    Find the secret phrase among `words`.

    Args:
        words:        raw word list (already split into entries)
        config:       puzzle settings; defaults to PuzzleConfig()
        solver_id:    registered search strategy ("frontier", "nested", ...)
        progress:     optional callback(done, total, word) per first-level word
        solver_kwargs: extra constructor arguments (e.g. max_workers)

    Returns:
        dict with keys:
            found (bool), phrase (str | None), combination (list | None),
            solver (str), words_total (int), candidates (int),
            time_ms (float), stats (dict)

    Raises:
        ValueError if `words` is None (the caller failed to obtain input)
        or the config is invalid.
    """
    if words is None:
        raise ValueError("no word list supplied; fetch or read it before solving")
    config = (config or PuzzleConfig()).validate()
    target = config.target()

    t0 = time.perf_counter()
    raw = list(words)
    candidates = order_candidates(filter_candidates(raw, target))
    logger.info("words before filtering: %d, after: %d", len(raw), len(candidates))

    solver = create_solver(solver_id, max_depth=config.max_depth, **solver_kwargs)
    result = solver.search(candidates, target, config.digest,
                           digest_fn=config.digest_fn(), progress=progress)
    dt = (time.perf_counter() - t0) * 1000.0

    logger.info("%s search finished in %.1f ms: %s", solver.id, dt,
                result.phrase if result.found else "not found")
    return {
        "found": result.found,
        "phrase": result.phrase,
        "combination": list(result.combination) if result.combination else None,
        "solver": solver.id,
        "words_total": len(raw),
        "candidates": len(candidates),
        "time_ms": dt,
        "stats": asdict(result.stats),
    }
