"""
Fiat-Shamir challenge derivation.

The verifier's random challenge is replaced by a hash of the prover's
first message and the public statement:

    e = OS2IP( SHAKE128( t ‖ a ‖ c1 ‖ c2 )[0:32] )  mod q

Every absorbed item is a fixed-width (33 byte) compressed point, so the
concatenation is unambiguous without length prefixes.  Order matters:
prover and verifier must absorb exactly ``t, a, c1, c2``.
"""

from __future__ import annotations

import hashlib
from typing import Iterable

from .curve import Scalar

# digest length squeezed from the XOF
CHALLENGE_BYTES = 32


def shake128(parts: Iterable[bytes], length: int = CHALLENGE_BYTES) -> bytes:
    """Absorb *parts* in order and squeeze *length* bytes."""
    h = hashlib.shake_128()
    for part in parts:
        h.update(part)
    return h.digest(length)


def hash_challenge(
    t_bytes: bytes,
    a_bytes: bytes,
    c1_bytes: bytes,
    c2_bytes: bytes,
) -> Scalar:
    """
    Challenge  e = H(t, a, c1, c2)  as an element of  Z_q.

    The 256-bit digest is reduced modulo the group order; the resulting
    bias is below 2^-127 for secp256k1.
    """
    digest = shake128((t_bytes, a_bytes, c1_bytes, c2_bytes))
    return Scalar.from_bytes_reduce(digest)
