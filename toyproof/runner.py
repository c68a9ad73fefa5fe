"""
Repeated protocol runs and the empirical success probability.

Each trial performs the full three-move conversation from scratch:

    C = commit(v)
    c = challenge(C, rng)
    r = respond(v, c)
    ok = verify(C, c, r)

and the report is the fraction of accepted trials.  Nothing but the
success counter (and the recorded transcripts) survives between trials.

Usage
-----
::

    from random import Random
    from toyproof import U64Protocol, run_trials

    report = run_trials(U64Protocol(), 59, iterations=10, rng=Random(0))
    print(report.summary())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Any, List, Optional, Tuple

from .curve import Scalar, Point
from .proof import Proof
from .roles import DEFAULT_RNG, ProofSystem
from .schnorr import SchnorrIdentification
from .u64 import U64Protocol
from .word import check_u64

logger = logging.getLogger(__name__)

# ── reference run ───────────────────────────────────────────────────────
DEFAULT_SECRET = 59
DEFAULT_ITERATIONS = 10

PROTOCOLS = ("u64", "schnorr")


# ── configuration ───────────────────────────────────────────────────────

def check_iterations(iterations: int) -> int:
    """Return *iterations* unchanged if it is a positive int."""
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise TypeError(
            f"iterations must be an int, got {type(iterations).__name__}"
        )
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    return iterations


@dataclass(frozen=True)
class TrialConfig:
    """
    Parameters of a simulation.

    Attributes
    ----------
    secret : int
        The prover's u64 secret.  For ``schnorr`` it is the witness *x*
        and must be non-zero.
    iterations : int
        Number of independent trials, at least 1.
    seed : int or None
        Seed for a private ``random.Random``; ``None`` draws from the
        system generator.
    protocol : str
        One of ``PROTOCOLS``.
    """

    secret: int = DEFAULT_SECRET
    iterations: int = DEFAULT_ITERATIONS
    seed: Optional[int] = None
    protocol: str = "u64"

    def __post_init__(self) -> None:
        check_u64(self.secret, "secret")
        check_iterations(self.iterations)
        if self.protocol not in PROTOCOLS:
            raise ValueError(
                f"unknown protocol {self.protocol!r}; "
                f"expected one of {', '.join(PROTOCOLS)}"
            )
        if self.protocol == "schnorr" and self.secret == 0:
            raise ValueError("schnorr witness must be non-zero")

    def make_rng(self) -> Random:
        if self.seed is None:
            return DEFAULT_RNG
        return Random(self.seed)


# ── results ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TrialOutcome:
    """One trial: its transcript and the verifier's verdict."""

    index: int
    proof: Proof
    accepted: bool


@dataclass
class TrialReport:
    """Tally of a batch of trials."""

    protocol: str
    iterations: int
    successes: int = 0
    outcomes: List[TrialOutcome] = field(default_factory=list, repr=False)

    @property
    def failures(self) -> int:
        return self.iterations - self.successes

    @property
    def probability(self) -> float:
        """successes / iterations."""
        return self.successes / self.iterations

    def summary(self) -> str:
        return f"The probability of a successful proof is {self.probability:.2f}."


# ── trial loop ──────────────────────────────────────────────────────────

def run_trial(
    system: ProofSystem,
    secret: Any,
    rng: Optional[Random] = None,
) -> Tuple[Proof, bool]:
    """Run the three moves once and return (transcript, verdict)."""
    commitment = system.commit(secret)
    challenge = system.challenge(commitment, rng)
    response = system.respond(secret, challenge)
    accepted = system.verify(commitment, challenge, response)
    return Proof(commitment, challenge, response), accepted


def run_trials(
    system: ProofSystem,
    secret: Any,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[Random] = None,
    record: bool = True,
) -> TrialReport:
    """
    Run *iterations* independent trials of *system* for *secret*.

    Parameters
    ----------
    system : ProofSystem
        Provides commit / challenge / respond / verify.
    secret : Any
        The prover's secret, in whatever type *system* expects.
    iterations : int
        Number of trials; must be positive.
    rng : random.Random or None
        Source of challenges.  Inject a seeded generator for
        reproducible runs.
    record : bool
        Keep every ``TrialOutcome`` in ``report.outcomes``.  With
        ``False`` only the counter is kept, so memory stays constant.
    """
    check_iterations(iterations)
    rng = rng if rng is not None else DEFAULT_RNG

    report = TrialReport(protocol=system.name, iterations=iterations)
    for i in range(iterations):
        proof, accepted = run_trial(system, secret, rng)
        if accepted:
            report.successes += 1
        if record:
            report.outcomes.append(TrialOutcome(index=i, proof=proof, accepted=accepted))
        logger.debug(
            "trial %d/%d transcript=%s accepted=%s",
            i + 1, iterations, proof.digest().hex()[:16], accepted,
        )

    logger.info(
        "%s: %d/%d trials accepted", system.name, report.successes, iterations,
    )
    return report


def build_system(config: TrialConfig, rng: Optional[Random] = None) -> Tuple[ProofSystem, Any]:
    """Return (system, secret-in-the-system's-type) for *config*."""
    if config.protocol == "schnorr":
        x = Scalar(config.secret)
        return SchnorrIdentification(Point.from_scalar(x), rng=rng), x
    return U64Protocol(), config.secret


def simulate(
    config: Optional[TrialConfig] = None,
    record: bool = True,
) -> TrialReport:
    """Run the simulation described by *config* (the reference run by default)."""
    config = config if config is not None else TrialConfig()
    rng = config.make_rng()
    system, secret = build_system(config, rng)
    logger.info(
        "running %d %s trials (seed=%s)",
        config.iterations, config.protocol, config.seed,
    )
    return run_trials(system, secret, config.iterations, rng, record=record)
