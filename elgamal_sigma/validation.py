"""
Optional input hardening.

``prove`` and ``verify`` accept any points they are handed.  Callers who
receive bases or transcripts from an untrusted party can run these
checks first.  secp256k1 has cofactor 1, so every point ``coincurve``
will decode already lies in the prime-order group; what remains to
reject is the identity.
"""

from __future__ import annotations

import logging

from .curve import Point
from .model import Params, Commitment, Ciphertext, PoK

logger = logging.getLogger(__name__)


def check_point(p: object) -> bool:
    """True iff *p* is a non-identity group element."""
    return isinstance(p, Point) and not p.is_inf()


def check_params(params: Params) -> bool:
    ok = check_point(params.g) and check_point(params.h)
    if not ok:
        logger.debug("rejecting params with an identity or foreign base")
    return ok


def check_transcript(
    commitment: Commitment,
    ciphertext: Ciphertext,
    proof: PoK,
) -> bool:
    """Every point of a (commitment, ciphertext, proof) triple is usable."""
    points = (commitment, ciphertext.c1, ciphertext.c2, proof.t, proof.a)
    ok = all(check_point(p) for p in points)
    if not ok:
        logger.debug("rejecting transcript containing an identity point")
    return ok
