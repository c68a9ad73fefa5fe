"""
The three roles of an interactive proof.

A run of the protocol is a three-move conversation:

    prover    → verifier :  commitment  = commit(secret)
    verifier  → prover   :  challenge   = challenge(commitment, rng)
    prover    → verifier :  response    = respond(secret, challenge)

after which the verifier decides  verify(commitment, challenge, response).

Each move is a separate abstract role so that a concrete system can be
assembled from them.  ``ProofSystem`` is the combination the trial
runner drives.
"""

from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from random import Random
from typing import Any, Optional

# Process-wide fallback when the caller does not inject a generator.
DEFAULT_RNG: Random = secrets.SystemRandom()


class Commitment(ABC):
    """Binds the prover to a secret before the challenge is known."""

    @abstractmethod
    def commit(self, value: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def open(self, commitment: Any) -> Optional[Any]:
        """Reveal what a commitment stands for, or ``None`` if it cannot."""
        raise NotImplementedError


class Challenge(ABC):
    """The verifier's (ideally unpredictable) move."""

    @abstractmethod
    def challenge(self, commitment: Any, rng: Optional[Random] = None) -> Any:
        raise NotImplementedError


class Response(ABC):
    """The prover's answer and the verifier's decision on it."""

    @abstractmethod
    def respond(self, value: Any, challenge: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def verify(self, commitment: Any, challenge: Any, response: Any) -> bool:
        raise NotImplementedError


class ProofSystem(Commitment, Challenge, Response):
    """A type implementing all three roles."""

    name: str = "abstract"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
