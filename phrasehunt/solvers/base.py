from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Type

from phrasehunt.engine.histogram import Target
from phrasehunt.engine.verify import DigestFn, md5_hex

# progress(done, total, word): called as each first-level word is finished
ProgressFn = Callable[[int, int, str], None]

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSearch"]] = {}


def register(cls: Type["BaseSearch"]) -> Type["BaseSearch"]:
    """
    Decorator: @register on a search class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass
class SearchStats:
    """Counters collected while walking the combination space."""
    visited: int = 0         # combinations taken off the work list / loop bodies run
    pruned: int = 0          # rejected by the subset or length check
    matches: int = 0         # histogram-equal combinations handed to the verifier
    rejected: int = 0        # matches where no word order had the expected digest
    peak_frontier: int = 0   # largest work-list size seen (frontier strategies)

    def merge(self, other: "SearchStats") -> None:
        self.visited += other.visited
        self.pruned += other.pruned
        self.matches += other.matches
        self.rejected += other.rejected
        self.peak_frontier = max(self.peak_frontier, other.peak_frontier)


@dataclass
class SearchResult:
    phrase: Optional[str] = None
    combination: Optional[Tuple[str, ...]] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.phrase is not None


# ---- Base class that search strategies inherit ----
class BaseSearch:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, max_depth: int = 3):
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1; got {max_depth}")
        self.max_depth = int(max_depth)

    def search(self, words: List[str], target: Target, digest: str, *,
               digest_fn: DigestFn = md5_hex,
               progress: ProgressFn | None = None) -> SearchResult:
        raise NotImplementedError("Override in subclass")
