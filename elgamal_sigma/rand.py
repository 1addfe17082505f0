"""
Randomness sources for proof generation.

``prove`` takes its randomness as an explicit argument instead of
reaching for process-global state, so a test can pin the transcript with
a seed while production code uses the OS CSPRNG.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can hand out *n* random bytes."""

    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """OS CSPRNG via ``secrets``; safe to share between threads."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource:
    """
    Deterministic source backed by ``random.Random``.

    For tests and reproducible benchmarks only: the output is predictable
    and the generator is not thread-safe.
    """

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    def token_bytes(self, n: int) -> bytes:
        return self._rng.getrandbits(8 * n).to_bytes(n, "big")

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed})"
