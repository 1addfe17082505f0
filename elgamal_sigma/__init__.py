"""
elgamal_sigma: proof that a commitment and an ElGamal ciphertext hide
the same secret.

A Fiat-Shamir transformed sigma protocol over secp256k1.  The prover
holds a scalar *s* and publishes

- a commitment  c = s·g + s·h,
- a ciphertext  (c1, c2) = (r·g, (s·r)·h),
- a proof  (t, a, z)

that the verifier checks without learning *s*.

Security: special soundness of the underlying sigma protocol in the
Random Oracle Model; soundness error 1/q.

Quick start
-----------
::

    from elgamal_sigma import Params, prove, verify

    params, x = Params.setup()
    commitment, ciphertext, proof = prove(x, params)
    assert verify(commitment, ciphertext, proof, params)
"""

import logging

__version__ = "0.1.0"

# ── core types ──────────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER

# ── protocol ────────────────────────────────────────────────────────────
from .model import Params, Commitment, Ciphertext, PoK
from .protocol import ElGamalSigmaProtocol, prove, verify

# ── building blocks ─────────────────────────────────────────────────────
from .hash import hash_challenge, shake128
from .rand import RandomSource, SystemRandomSource, SeededRandomSource
from .errors import ElGamalSigmaError, SerializationFailure
from .validation import check_point, check_params, check_transcript

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # version
    "__version__",
    # core
    "Scalar", "Point", "G", "ORDER",
    # protocol
    "Params", "Commitment", "Ciphertext", "PoK",
    "ElGamalSigmaProtocol", "prove", "verify",
    # building blocks
    "hash_challenge", "shake128",
    "RandomSource", "SystemRandomSource", "SeededRandomSource",
    "ElGamalSigmaError", "SerializationFailure",
    "check_point", "check_params", "check_transcript",
]
