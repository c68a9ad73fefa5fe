"""
secp256k1 scalars and points for the Schnorr identification protocol.

Group operations go through ``coincurve`` (bindings to libsecp256k1);
scalar arithmetic mod the group order is plain Python integers.  Only
the operations the identification protocol needs are provided:
sampling, addition and multiplication of scalars, point addition,
scalar multiplication and SEC 1 serialisation.

Install
-------
    pip install coincurve>=18.0.0

References
----------
- SEC 2 v2 §2.4.1  secp256k1 domain parameters
"""

from __future__ import annotations

from random import Random
from typing import Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

from .roles import DEFAULT_RNG

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33


# ── Scalar  (integers mod ORDER) ────────────────────────────────────────
class Scalar:
    """Element of  Z_q,  q = ``ORDER``."""

    __slots__ = ("_v",)

    def __init__(self, value: int) -> None:
        self._v = value % ORDER

    @classmethod
    def random(cls, rng: Optional[Random] = None) -> Scalar:
        """Uniform in [1, q-1], rejection-sampled from *rng*."""
        rng = rng if rng is not None else DEFAULT_RNG
        while True:
            c = rng.getrandbits(SCALAR_BYTES * 8)
            if 0 < c < ORDER:
                return cls(c)

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar(self._v + o._v)

    def __sub__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar(self._v - o._v)

    def __mul__(self, o):
        """Scalar · Scalar in Z_q, or Scalar · Point on the curve."""
        if isinstance(o, Scalar):
            return Scalar(self._v * o._v)
        if isinstance(o, Point):
            return o.multiply(self)
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
        return f"Scalar({self._v:#x})"


# ── Point  (secp256k1 group element) ────────────────────────────────────
_INFINITY_BYTES = b"\x00" * COMPRESSED_BYTES


class Point:
    """
    Point on secp256k1, wrapping a ``coincurve.PublicKey``.

    ``None`` stands for the point at infinity; libsecp256k1 cannot
    represent it as a public key.
    """

    __slots__ = ("_pk",)

    def __init__(self, pk: Optional[_PK] = None) -> None:
        self._pk = pk

    @classmethod
    def identity(cls) -> Point:
        return cls(None)

    @classmethod
    def from_scalar(cls, s: Scalar) -> Point:
        """s·G, computed directly as the public key of *s*."""
        if s.is_zero():
            return cls(None)
        return cls(_SK(s.to_bytes()).public_key)

    def is_inf(self) -> bool:
        return self._pk is None

    def to_bytes_compressed(self) -> bytes:
        """SEC 1 compressed form; infinity encodes as 33 zero bytes."""
        if self._pk is None:
            return _INFINITY_BYTES
        return self._pk.format(compressed=True)

    def multiply(self, s: Scalar) -> Point:
        if self._pk is None or s.is_zero():
            return Point(None)
        # multiply() may mutate the key in older coincurve releases
        fresh = _PK(self._pk.format())
        return Point(fresh.multiply(s.to_bytes()))

    def __neg__(self) -> Point:
        if self._pk is None:
            return self
        raw = bytearray(self._pk.format(compressed=True))
        raw[0] ^= 0x01            # even ↔ odd y
        return Point(_PK(bytes(raw)))

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._pk is None:
            return o
        if o._pk is None:
            return self
        # combine_keys rejects a sum equal to infinity
        if self == -o:
            return Point(None)
        return Point(_PK.combine_keys([self._pk, o._pk]))

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        return self.to_bytes_compressed() == o.to_bytes_compressed()

    def __hash__(self) -> int:
        return hash(self.to_bytes_compressed())

    def __repr__(self) -> str:
        if self._pk is None:
            return "Point(∞)"
        return f"Point({self.to_bytes_compressed().hex()[:18]}…)"


G = Point.from_scalar(Scalar(1))
