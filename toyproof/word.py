"""
Unsigned 64-bit words.

Python integers are unbounded, so every value that crosses a protocol
boundary is range-checked here and encoded with a fixed width.  All
encodings are little-endian, matching the byte order fed to the
commitment hash.
"""

from __future__ import annotations

# ── u64 constants ───────────────────────────────────────────────────────
U64_BITS = 64
U64_BYTES = 8
U64_MAX = (1 << U64_BITS) - 1


def check_u64(value: int, name: str = "value") -> int:
    """Return *value* unchanged if it fits in 64 unsigned bits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} out of u64 range: {value}")
    return value


def to_le_bytes(value: int) -> bytes:
    """8-byte little-endian encoding."""
    return check_u64(value).to_bytes(U64_BYTES, "little")


def from_le_bytes(data: bytes) -> int:
    if len(data) != U64_BYTES:
        raise ValueError(f"need {U64_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, "little")
