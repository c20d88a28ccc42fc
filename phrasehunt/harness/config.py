"""Puzzle configuration: target phrase, expected digest, search depth."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

from phrasehunt.datasets.fetch import URL
from phrasehunt.engine.histogram import Target
from phrasehunt.engine.verify import DigestFn, make_digest_fn

logger = logging.getLogger(__name__)

HEX_RE = re.compile(r"^[0-9a-f]+$")


@dataclass(slots=True)
class PuzzleConfig:
    """Everything one run needs besides the word list itself."""

    phrase: str = "poultry outwits ants"
    digest: str = "4624d200580677270a54ccff86b9610e"
    max_depth: int = 3
    digest_algorithm: str = "md5"
    wordlist_url: str = URL
    timeout: float = 30.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleConfig":
        """Build from a mapping, ignoring keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("ignoring unknown config keys: %s", unknown)
        return cls(**{k: v for k, v in data.items() if k in known})

    def validate(self) -> "PuzzleConfig":
        # JSON files can carry any type; reject before comparing values
        for name in ("phrase", "digest", "digest_algorithm", "wordlist_url"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string; got {value!r}")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer; got {self.max_depth!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) \
                or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number; got {self.timeout!r}")
        if not self.phrase.strip():
            raise ValueError("phrase must contain at least one non-whitespace character")
        if not HEX_RE.match(self.digest):
            raise ValueError(f"digest must be a lowercase hex string; got {self.digest!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1; got {self.max_depth}")
        make_digest_fn(self.digest_algorithm)
        return self

    def target(self) -> Target:
        return Target.from_phrase(self.phrase)

    def digest_fn(self) -> DigestFn:
        return make_digest_fn(self.digest_algorithm)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Path | str) -> PuzzleConfig:
    """Load a JSON config file; missing keys keep their defaults."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"config file must hold a JSON object: {p}")
    return PuzzleConfig.from_dict(data).validate()
