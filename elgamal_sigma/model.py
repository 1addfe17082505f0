"""
Values exchanged between prover and verifier.

All of them are immutable.  Nothing here outlives a single
prove/verify exchange except ``Params``, which is fixed per session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .curve import Scalar, Point, G
from .rand import RandomSource

# c = s·g + s·h  (same exponent on both bases, there is no blinding term)
Commitment = Point


@dataclass(frozen=True)
class Params:
    """
    Public bases  (g, h)  shared by prover and verifier.

    ``h`` is normally a public key  h = x·g, but nothing checks that, and
    nothing checks that either base is a generator of the prime-order
    group.  See ``validation.check_params``.
    """

    g: Point
    h: Point

    @classmethod
    def setup(cls, rng: Optional[RandomSource] = None) -> Tuple[Params, Scalar]:
        """Fresh key pair: returns ``(Params(G, x·G), x)``."""
        x = Scalar.random(rng)
        return cls(g=G, h=x * G), x


@dataclass(frozen=True)
class Ciphertext:
    """
    One-shot ElGamal-style ciphertext of a secret *s*.

        c1 = r·g,    c2 = (s·r)·h

    *r* is drawn fresh for every proof; reusing it leaks *s*-relations
    between ciphertexts.
    """

    c1: Point
    c2: Point

    def serialize_compressed(self) -> Tuple[bytes, bytes]:
        return self.c1.to_bytes_compressed(), self.c2.to_bytes_compressed()


@dataclass(frozen=True)
class PoK:
    """
    Non-interactive proof that a commitment and a ciphertext share *s*.

    Transcript:  t = k·g,  a = k·h,  z = k + e·s.
    """

    t: Point
    a: Point
    z: Scalar
