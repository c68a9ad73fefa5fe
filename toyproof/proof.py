"""
The transcript of one protocol run.

A ``Proof`` plays no part in verification; it only groups the three
messages so that runs can be recorded, fingerprinted and compared.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .hash import encode_item, transcript_hash
from .word import U64_BYTES, from_le_bytes


@dataclass(frozen=True)
class Proof:
    """Transcript  (commitment, challenge, response)."""

    commitment: Any
    challenge: Any
    response: Any

    def to_bytes(self) -> bytes:
        return (
            encode_item(self.commitment)
            + encode_item(self.challenge)
            + encode_item(self.response)
        )

    def digest(self) -> bytes:
        """Tagged SHA-256 over the three messages."""
        return transcript_hash(self.commitment, self.challenge, self.response)

    @classmethod
    def from_u64_bytes(cls, data: bytes) -> Proof:
        """Inverse of ``to_bytes`` for an all-u64 transcript (24 bytes)."""
        if len(data) != 3 * U64_BYTES:
            raise ValueError(f"need {3 * U64_BYTES} bytes, got {len(data)}")
        words = [
            from_le_bytes(data[i:i + U64_BYTES])
            for i in range(0, len(data), U64_BYTES)
        ]
        return cls(commitment=words[0], challenge=words[1], response=words[2])
