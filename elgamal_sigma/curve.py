"""
secp256k1 group and scalar field used by the ElGamal sigma protocol.

Group operations go through ``coincurve`` (libsecp256k1).  Scalars are
plain integers reduced modulo the group order.

Only what the protocol touches is provided:

- ``Point``: ``+``, ``Scalar * Point``, ``==``, compressed encoding and
  decoding;
- ``Scalar``: ``random(rng)``, ``from_bytes_reduce()``, ``+`` and ``*``.

References
----------
- SEC 1 v2 §2.3.3   compressed point encoding
- SEC 2 v2 §2.4.1   secp256k1 domain parameters
"""

from __future__ import annotations

import logging
from typing import List, Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

from .errors import SerializationFailure
from .rand import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33

# encoding of the point at infinity (libsecp256k1 has none)
_IDENTITY_BYTES = b"\x00" * COMPRESSED_BYTES


# ── Scalar  (Z_q) ───────────────────────────────────────────────────────
class Scalar:
    """Element of  Z_q,  q = ``ORDER``."""

    __slots__ = ("_v",)

    def __init__(self, value: int) -> None:
        self._v = value % ORDER

    @classmethod
    def random(cls, rng: Optional[RandomSource] = None) -> Scalar:
        """Uniform in [1, q-1], rejection sampled from *rng* (default: OS)."""
        source = rng if rng is not None else SystemRandomSource()
        while True:
            c = int.from_bytes(source.token_bytes(SCALAR_BYTES), "big")
            if 0 < c < ORDER:
                return cls(c)

    @classmethod
    def from_bytes_reduce(cls, data: bytes) -> Scalar:
        """Big-endian integer of any length, reduced modulo *q*."""
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    def __add__(self, o):
        if isinstance(o, Scalar):
            return Scalar(self._v + o._v)
        if isinstance(o, int):
            return Scalar(self._v + o)
        return NotImplemented

    def __mul__(self, o):
        if isinstance(o, Scalar):
            return Scalar(self._v * o._v)
        if isinstance(o, Point):
            return o._smul(self)
        return NotImplemented

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            return self._v == o._v
        if isinstance(o, int):
            return self._v == o % ORDER
        return False

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        # top 32 bits only, scalars here are secrets or nonces
        return f"Scalar(0x{self._v >> 224:08x}…)"


# ── Point  (secp256k1 group element) ────────────────────────────────────
class Point:
    """
    Affine point on secp256k1.

    ``coincurve`` keys are always affine.  The identity is carried as a
    flag because libsecp256k1 cannot represent it.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        if not infinity and not isinstance(pk, _PK):
            raise ValueError("a point needs a coincurve PublicKey or infinity=True")
        self._pk: Optional[_PK] = None if infinity else pk
        self._inf: bool = infinity

    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK((1).to_bytes(SCALAR_BYTES, "big")).public_key)

    @classmethod
    def identity(cls) -> Point:
        return cls(infinity=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode SEC 1 bytes, or the all-zero identity encoding."""
        if data == _IDENTITY_BYTES:
            return cls.identity()
        try:
            return cls(pk=_PK(data))
        except ValueError as exc:
            raise ValueError(f"invalid point encoding: {data.hex()}") from exc

    def to_bytes_compressed(self) -> bytes:
        """
        Canonical 33-byte encoding.

        Raises ``SerializationFailure`` if libsecp256k1 refuses to encode
        a key it handed out; that means the backend is broken.
        """
        if self._inf:
            return _IDENTITY_BYTES
        try:
            return self._pk.format(compressed=True)  # type: ignore[union-attr]
        except ValueError as exc:
            logger.error("libsecp256k1 failed to encode a group element: %s", exc)
            raise SerializationFailure(
                "could not serialise group element"
            ) from exc

    def is_inf(self) -> bool:
        return self._inf

    def _smul(self, s: Scalar) -> Point:
        if self._inf or s.is_zero():
            return Point.identity()
        return Point(pk=self._pk.multiply(s.to_bytes()))  # type: ignore[union-attr]

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        return Point.sum_points([self, o])

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf or o._inf:
            return self._inf and o._inf
        return self._pk.format() == o._pk.format()  # type: ignore

    def __hash__(self) -> int:
        return hash(self.to_bytes_compressed())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self.to_bytes_compressed()[:8].hex()}…)"

    @staticmethod
    def sum_points(points: List[Point]) -> Point:
        """Add many points with a single libsecp256k1 call."""
        real = [p for p in points if not p._inf]
        if not real:
            return Point.identity()
        if len(real) == 1:
            return real[0]
        try:
            return Point(pk=_PK.combine_keys([p._pk for p in real]))  # type: ignore
        except ValueError:
            # combine only fails when the sum is the point at infinity
            return Point.identity()


# ── module-level generator ──────────────────────────────────────────────
G = Point.generator()
