"""
Proof that a commitment is to the preimage of an ElGamal ciphertext.

Statement, for public  (g, h),  commitment  c  and ciphertext  (c1, c2):

    ∃ s, r :   c = s·g + s·h,   c1 = r·g,   c2 = (s·r)·h

Protocol (Fiat-Shamir):

    k ←$ Z_q
    t  = k·g,   a = k·h
    e  = H(t, a, c1, c2)
    z  = k + e·s

Verify:

    z·g + z·h  ==  t + a + e·c

which holds for an honest prover since
z·g + z·h = (k·g + k·h) + e·(s·g + s·h).

Usage
-----
::

    from elgamal_sigma import Params, prove, verify

    params, x = Params.setup()
    commitment, ciphertext, proof = prove(x, params)
    assert verify(commitment, ciphertext, proof, params)
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .curve import Scalar, Point
from .hash import hash_challenge
from .model import Params, Commitment, Ciphertext, PoK
from .rand import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


def _challenge(t: Point, a: Point, ciphertext: Ciphertext) -> Scalar:
    """Absorb  t, a, c1, c2  (in that order) and hash to a scalar."""
    c1_bytes, c2_bytes = ciphertext.serialize_compressed()
    return hash_challenge(
        t.to_bytes_compressed(),
        a.to_bytes_compressed(),
        c1_bytes,
        c2_bytes,
    )


class ElGamalSigmaProtocol:
    """
    Stateless namespace for the two protocol operations.

    Nothing is ever instantiated; the group is fixed by the ``Point`` and
    ``Scalar`` types carried in ``Params``.
    """

    @staticmethod
    def prove(
        secret: Scalar,
        params: Params,
        rng: Optional[RandomSource] = None,
    ) -> Tuple[Commitment, Ciphertext, PoK]:
        """
        Encrypt and commit to *secret*, and prove both hold the same value.

        Parameters
        ----------
        secret : Scalar
            The witness *s*.
        params : Params
            Shared bases  (g, h).
        rng : RandomSource, optional
            Source for the encryption randomness *r* and the nonce *k*.
            Defaults to the OS CSPRNG.

        Raises
        ------
        SerializationFailure
            The group backend could not encode one of its own points.
        """
        if rng is None:
            rng = SystemRandomSource()
        g, h = params.g, params.h

        # encryption
        r = Scalar.random(rng)
        ciphertext = Ciphertext(c1=r * g, c2=(secret * r) * h)

        commitment: Commitment = (secret * g) + (secret * h)

        k = Scalar.random(rng)
        t = k * g
        a = k * h

        e = _challenge(t, a, ciphertext)
        z = k + e * secret

        logger.debug("proof generated, challenge %s", e.to_bytes()[:4].hex())
        return commitment, ciphertext, PoK(t=t, a=a, z=z)

    @staticmethod
    def verify(
        commitment: Commitment,
        ciphertext: Ciphertext,
        proof: PoK,
        params: Params,
    ) -> bool:
        """
        Check a proof produced by ``prove``.

        Returns False for any invalid or malformed proof; rejection is an
        ordinary outcome, not an error.

        Check:  z·g + z·h  ==  t + a + e·c.
        """
        if not (
            isinstance(commitment, Point)
            and isinstance(ciphertext, Ciphertext)
            and isinstance(proof, PoK)
            and isinstance(proof.t, Point)
            and isinstance(proof.a, Point)
            and isinstance(proof.z, Scalar)
            and isinstance(ciphertext.c1, Point)
            and isinstance(ciphertext.c2, Point)
            and isinstance(params, Params)
            and isinstance(params.g, Point)
            and isinstance(params.h, Point)
        ):
            logger.debug("proof rejected: malformed input")
            return False

        e = _challenge(proof.t, proof.a, ciphertext)

        lhs = (proof.z * params.g) + (proof.z * params.h)
        rhs = Point.sum_points([proof.t, proof.a, e * commitment])

        if lhs != rhs:
            logger.debug("proof rejected: verification equation failed")
            return False
        return True


def prove(
    secret: Scalar,
    params: Params,
    rng: Optional[RandomSource] = None,
) -> Tuple[Commitment, Ciphertext, PoK]:
    """Shortcut for ``ElGamalSigmaProtocol.prove``."""
    return ElGamalSigmaProtocol.prove(secret, params, rng)


def verify(
    commitment: Commitment,
    ciphertext: Ciphertext,
    proof: PoK,
    params: Params,
) -> bool:
    """Shortcut for ``ElGamalSigmaProtocol.verify``."""
    return ElGamalSigmaProtocol.verify(commitment, ciphertext, proof, params)
