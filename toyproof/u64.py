"""
The toy protocol over unsigned 64-bit integers.

Every message is a u64:

    C = trunc64( SHA-256( le64(v) ) )         commitment
    c ←$ [0, 2^64)                            challenge
    r = (v & 1) ⊕ 1                           response (inverted parity)

Verification recomputes the response from the **commitment** instead of
the secret:

    accept  iff  r == (C & 1) ⊕ 1

so a trial succeeds exactly when the secret and its commitment share
the same parity.  The challenge never enters the arithmetic; this is
not a sound proof of anything and is kept that way on purpose.
"""

from __future__ import annotations

from random import Random
from typing import Optional

from .hash import commitment_digest, truncate_u64
from .roles import DEFAULT_RNG, ProofSystem
from .word import U64_BITS, check_u64


class U64Protocol(ProofSystem):
    """Commitment, challenge and response roles for u64 values."""

    name = "u64"

    # ── commitment ─────────────────────────────────────────────────────

    def commit(self, value: int) -> int:
        """Commit(v) → first 8 bytes of SHA-256(le64(v)) as a u64."""
        check_u64(value)
        return truncate_u64(commitment_digest(value))

    def open(self, commitment: int) -> Optional[int]:
        # No hiding or binding is enforced, so opening always succeeds.
        return commitment

    # ── challenge ──────────────────────────────────────────────────────

    def challenge(self, commitment: int, rng: Optional[Random] = None) -> int:
        """Uniform u64; *commitment* is accepted but not used."""
        rng = rng if rng is not None else DEFAULT_RNG
        return rng.getrandbits(U64_BITS)

    # ── response ───────────────────────────────────────────────────────

    def respond(self, value: int, challenge: int) -> int:
        return (check_u64(value) & 1) ^ 1

    def verify(self, commitment: int, challenge: int, response: int) -> bool:
        """
        Accept iff *response* equals ``respond(commitment, challenge)``.

        The expected response is derived from the commitment, not the
        secret; the verifier never learns the secret.
        """
        expected = self.respond(commitment, challenge)
        return response == expected
