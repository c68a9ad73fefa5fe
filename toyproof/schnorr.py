"""
Interactive Schnorr identification over secp256k1.

A sound counterpart to the toy protocol, expressed through the same
three roles so the trial runner can drive either one.

Statement:  Y = x·G.  Witness:  x.

    prover    k ←$ Z_q,   R = k·G            commit
    verifier  c ←$ Z_q                       challenge
    prover    z = k + c·x                    respond
    verifier  z·G  ==  R + c·Y               verify

Completeness: an honest prover is accepted with probability 1.
Special soundness: two accepting transcripts (R, c, z), (R, c', z')
with c ≠ c' give  x = (z − z') / (c − c').

Unlike the toy protocol, the response depends on the challenge and
verification needs no secret.

References
----------
- Schnorr (1989). "Efficient Identification and Signatures for Smart
  Cards."  CRYPTO 1989.
"""

from __future__ import annotations

from random import Random
from typing import Optional, Tuple

from .curve import Scalar, Point, G
from .roles import DEFAULT_RNG, ProofSystem


class SchnorrIdentification(ProofSystem):
    """
    Prover and verifier for knowledge of  log_G(Y).

    The instance is stateful on the prover side: ``commit`` stores a
    fresh nonce which the next ``respond`` consumes.  A nonce MUST be
    used exactly once; reuse across two challenges leaks *x*.
    """

    name = "schnorr"

    def __init__(self, public_key: Point, rng: Optional[Random] = None) -> None:
        if public_key.is_inf():
            raise ValueError("public key must not be the identity")
        self.public_key = public_key
        self._rng = rng if rng is not None else DEFAULT_RNG
        self._nonce: Optional[Scalar] = None

    @classmethod
    def keygen(
        cls, rng: Optional[Random] = None,
    ) -> Tuple[Scalar, SchnorrIdentification]:
        """Sample  x  and return  (x, instance for Y = x·G)."""
        x = Scalar.random(rng)
        return x, cls(Point.from_scalar(x), rng=rng)

    # ── commitment ─────────────────────────────────────────────────────

    def commit(self, value: Scalar) -> Point:
        """R = k·G for a fresh nonce k.  *value* is the witness x."""
        if self._nonce is not None:
            raise RuntimeError("previous commitment was never answered")
        self._nonce = Scalar.random(self._rng)
        return self._nonce * G

    def open(self, commitment: Point) -> Optional[Point]:
        # R is sent in the clear; there is nothing further to reveal.
        return commitment

    # ── challenge ──────────────────────────────────────────────────────

    def challenge(self, commitment: Point, rng: Optional[Random] = None) -> Scalar:
        return Scalar.random(rng)

    # ── response ───────────────────────────────────────────────────────

    def respond(self, value: Scalar, challenge: Scalar) -> Scalar:
        """z = k + c·x, consuming the pending nonce."""
        if self._nonce is None:
            raise RuntimeError("respond() called without a pending commitment")
        k, self._nonce = self._nonce, None
        return k + challenge * value

    def verify(self, commitment: Point, challenge: Scalar, response: Scalar) -> bool:
        """Check  z·G  ==  R + c·Y."""
        lhs = response * G
        rhs = commitment + (challenge * self.public_key)
        return lhs == rhs
