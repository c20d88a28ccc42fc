"""
Match verification: find the word order whose digest is the published one.

A histogram-equal combination only proves the letters are right. The exact
phrase (which words, in which order) is confirmed by hashing every ordering
and comparing against the known hex digest. The answer key publishes an MD5
digest, so MD5 is the default; any hashlib algorithm can be plugged in.
"""

from __future__ import annotations

import hashlib
from functools import partial
from itertools import permutations
from typing import Callable, Optional, Sequence

DigestFn = Callable[[str], str]


def _hexdigest(algorithm: str, text: str) -> str:
    return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()


def md5_hex(text: str) -> str:
    """Lowercase hex MD5 of the UTF-8 encoded text."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def make_digest_fn(algorithm: str) -> DigestFn:
    """
    Return a digest function for any hashlib algorithm name.

    The result is a functools.partial over a module-level function so it can
    be shipped to worker processes.
    """
    name = algorithm.strip().lower()
    if name == "md5":
        return md5_hex
    if name not in hashlib.algorithms_available:
        raise ValueError(
            f"Unknown digest algorithm: {algorithm}. Available: {sorted(hashlib.algorithms_guaranteed)}")
    return partial(_hexdigest, name)


def verify(
        combination: Sequence[str],
        expected_digest: str,
        digest_fn: DigestFn = md5_hex,
) -> Optional[str]:
    """
    Return the first space-joined ordering of `combination` whose digest
    equals `expected_digest`, or None if no ordering matches.

    n words give n! orderings (6 for the usual three). Repeated words give
    repeated orderings; each distinct phrase is hashed once.
    """
    expected = expected_digest.strip().lower()
    seen = set()
    for order in permutations(combination):
        phrase = " ".join(order)
        if phrase in seen:
            continue
        seen.add(phrase)
        if digest_fn(phrase) == expected:
            return phrase
    return None
