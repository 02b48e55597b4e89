"""UUID helpers: generation, parsing and conversion to and from 64-bit halves."""

from __future__ import annotations

import struct
import uuid

_MASK64 = 0xFFFFFFFFFFFFFFFF


def new_uuid() -> uuid.UUID:
    """A fresh random (version 4) UUID."""
    return uuid.uuid4()


def text_to_uuid(text: str) -> uuid.UUID:
    """Parse a UUID from text; raises ValueError when the text is not a UUID."""
    return uuid.UUID(text)


def bits_to_uuid(msb: int, lsb: int) -> uuid.UUID:
    """Build a UUID from its most and least significant 64-bit halves."""
    return uuid.UUID(bytes=struct.pack(">QQ", msb & _MASK64, lsb & _MASK64))


def uuid_to_text(value: uuid.UUID) -> str:
    """Canonical hyphenated lower-case text of a UUID."""
    return str(value)


def sig_bits(value: uuid.UUID) -> tuple[int, int]:
    """The most and least significant halves of a UUID as signed 64-bit integers."""
    msb, lsb = struct.unpack(">qq", value.bytes)
    return msb, lsb