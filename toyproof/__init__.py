"""
toyproof: a toy commitment / challenge / response proof.

An educational sketch of a three-move interactive proof:

- **Roles** as abstract classes: commitment, challenge, response
- **A u64 implementation** with a truncated SHA-256 commitment and a
  parity response that ignores the challenge
- **A trial runner** estimating the empirical success probability
- **Schnorr identification** over secp256k1 as a sound comparison

The u64 protocol is NOT sound and proves nothing; it exists to show the
shape of the conversation.

Quick start
-----------
::

    from random import Random
    from toyproof import U64Protocol, run_trials

    report = run_trials(U64Protocol(), 59, iterations=10, rng=Random(1))
    print(report.summary())
    # The probability of a successful proof is 1.00.
"""

__version__ = "0.1.0"

# ── roles ───────────────────────────────────────────────────────────────
from .roles import Commitment, Challenge, Response, ProofSystem

# ── protocols ───────────────────────────────────────────────────────────
from .u64 import U64Protocol
from .schnorr import SchnorrIdentification

# ── transcripts & runner ────────────────────────────────────────────────
from .proof import Proof
from .runner import (
    DEFAULT_ITERATIONS,
    DEFAULT_SECRET,
    TrialConfig,
    TrialOutcome,
    TrialReport,
    run_trial,
    run_trials,
    simulate,
)

# ── building blocks ─────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER
from .hash import commitment_digest, truncate_u64, transcript_hash
from .word import U64_MAX, check_u64

__all__ = [
    # version
    "__version__",
    # roles
    "Commitment", "Challenge", "Response", "ProofSystem",
    # protocols
    "U64Protocol", "SchnorrIdentification",
    # runner
    "Proof", "DEFAULT_ITERATIONS", "DEFAULT_SECRET",
    "TrialConfig", "TrialOutcome", "TrialReport",
    "run_trial", "run_trials", "simulate",
    # building blocks
    "Scalar", "Point", "G", "ORDER",
    "commitment_digest", "truncate_u64", "transcript_hash",
    "U64_MAX", "check_u64",
]
