"""
Hash functions for toyproof.

Two unrelated uses of SHA-256 live here:

1. The **commitment digest** of the toy protocol: plain SHA-256 over the
   secret's 8-byte little-endian encoding, truncated to its first 8
   bytes.  No domain tag, so the value matches any other SHA-256
   implementation byte for byte.

2. A **transcript hash** for recorded proofs, used to fingerprint a
   trial in logs.  It follows the BIP-340 tagged-hash convention:

       H_tag(x) = SHA-256( SHA-256(tag) ‖ SHA-256(tag) ‖ x )
"""

from __future__ import annotations

import hashlib
from typing import Any

from .curve import Scalar, Point
from .word import U64_BYTES, check_u64, from_le_bytes, to_le_bytes


_TAG_TRANSCRIPT = b"toyproof/v1/transcript"


# ── commitment digest ───────────────────────────────────────────────────
def commitment_digest(value: int) -> bytes:
    """SHA-256 of the 8-byte little-endian encoding of *value*."""
    return hashlib.sha256(to_le_bytes(value)).digest()


def truncate_u64(digest: bytes) -> int:
    """First 8 bytes of *digest* read as a little-endian u64."""
    return from_le_bytes(digest[:U64_BYTES])


# ── transcript encoding ─────────────────────────────────────────────────
def encode_item(item: Any) -> bytes:
    """
    Canonical encoding of a transcript element.

    Plain ints are u64 words; curve elements use their fixed-size
    serialisation.  Anything else is rejected rather than stringified.
    """
    if isinstance(item, Scalar):
        return item.to_bytes()
    if isinstance(item, Point):
        return item.to_bytes_compressed()
    if isinstance(item, int) and not isinstance(item, bool):
        return to_le_bytes(check_u64(item, "transcript item"))
    if isinstance(item, bytes):
        return len(item).to_bytes(4, "big") + item
    raise ValueError(f"cannot encode {type(item).__name__} in a transcript")


def transcript_hash(*items: Any) -> bytes:
    tag_hash = hashlib.sha256(_TAG_TRANSCRIPT).digest()
    h = hashlib.sha256()
    h.update(tag_hash)
    h.update(tag_hash)
    for item in items:
        h.update(encode_item(item))
    return h.digest()
