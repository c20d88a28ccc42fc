from __future__ import annotations
from typing import List
from .base import BaseSearch, REGISTRY, register, SearchResult, SearchStats

from . import nested  # noqa: F401
from . import frontier  # noqa: F401
from . import parallel  # noqa: F401


def create_solver(solver_id: str, **kwargs) -> BaseSearch:
    """
    Factory: instantiate a registered search strategy by id.

    Keyword arguments (e.g. max_depth) go to the strategy's constructor.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
