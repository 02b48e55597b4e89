"""Bit-flag helpers for packed boolean fields."""

from __future__ import annotations


def has_flag(mask: int, field: int) -> bool:
    """Whether any bit of ``field`` is set in ``mask``."""
    return mask & field != 0


def set_flag(mask: int, field: int, when: bool) -> int:
    """Return ``mask`` with ``field`` set if ``when``; an unset flag is left as it was."""
    return (mask | field) & 0xFF if when else mask