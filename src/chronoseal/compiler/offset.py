"""
Timestamp offset derivation.

The stored timestamp is the current Unix time shifted forward by a
position-weighted checksum of the message, kept under one hour.  Existing
on-chain records were produced by weighting UTF-16 code units, so astral
characters contribute both halves of their surrogate pair.
"""

from __future__ import annotations

MAX_OFFSET = 3600


def _utf16_units(message: str) -> list[int]:
    raw = message.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "big") for i in range(0, len(raw), 2)]


def message_offset(message: str) -> int:
    """Return `sum(unit * position) mod 3600`, positions starting at 1."""
    total = sum(unit * position for position, unit in enumerate(_utf16_units(message), 1))
    return total % MAX_OFFSET


def derive_timestamp(message: str, now: int) -> int:
    """Shift `now` by the message offset; result lies in `[now, now + 3599]`."""
    return now + message_offset(message)
