"""Small shared helpers: string joining, panic-style guards, Java hashes, durations."""

from __future__ import annotations

import hashlib
import struct
from typing import Any, Callable

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_UNITS = ("years", "weeks", "days", "hours", "minutes", "seconds")


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def convert_to_string(*args: Any) -> str:
    """Join the textual forms of all arguments with no separator."""
    return "".join(_format_value(arg) for arg in args)


def attempt(function: Callable[[], Any]) -> Exception | None:
    """Run ``function``; return None on success or an error describing what it raised."""
    try:
        function()
    except Exception as exc:  # noqa: BLE001 - every failure is reported back
        error = RuntimeError(f"caught: {exc}")
        error.__cause__ = exc
        return error
    return None


def java_string_hash_code(value: str) -> int:
    """Java's ``String.hashCode`` over the code points of ``value`` (signed 32-bit)."""
    h = 0
    for char in value:
        h = _to_int32(31 * h + ord(char))
    return h


def java_sha256_hash_long(value: int) -> bytes:
    """SHA-256 of ``value`` written as a little-endian 64-bit integer."""
    return hashlib.sha256(struct.pack("<Q", value & _MASK64)).digest()


def default_world_hashed_seed() -> int:
    """The hashed seed sent to clients for the default world."""
    digest = java_sha256_hash_long(java_string_hash_code("North Carolina"))
    return int.from_bytes(digest[:8], "little", signed=True)


def format_time(duration_in_seconds: int) -> str:
    """Render a number of seconds as words, e.g. ``2 hours 5 seconds``."""
    if duration_in_seconds == 0:
        return "0 seconds"

    prefix = "-" if duration_in_seconds < 0 else ""
    total = abs(duration_in_seconds)

    seconds = total % 60
    minutes = (total // 60) % 60
    hours = (total // 3600) % 24
    total_days = total // 86400
    days = total_days % 365 % 7
    left_year_days = total_days % 365
    weeks = 52 if left_year_days == 364 else left_year_days // 7
    years = total_days // 365

    amounts = dict(zip(_UNITS, (years, weeks, days, hours, minutes, seconds)))
    parts = []
    for unit, amount in amounts.items():
        if amount > 1:
            parts.append(f"{amount} {unit}")
        elif amount == 1:
            parts.append(f"1 {unit.rstrip('s')}")
    return prefix + " ".join(parts)