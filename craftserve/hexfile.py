"""Reading byte dumps written as space-separated hexadecimal values."""

from __future__ import annotations

import re
from pathlib import Path

_HEX = re.compile(r"[0-9a-fA-F]+")


def parse_hex_bytes(text: str) -> bytes:
    """Parse tokens such as ``0xa1`` separated by single spaces.

    Tokens that are not a hexadecimal byte are reported and skipped.
    """
    out = bytearray()
    for token in text.strip().split(" "):
        digits = token[2:] if token.startswith("0x") else token
        if not _HEX.fullmatch(digits) or int(digits, 16) > 0xFF:
            print(f"error parsing: {token!r} is not a hexadecimal byte")
            continue
        out.append(int(digits, 16))
    return bytes(out)


def read_hex_file(filename: str | Path) -> bytes:
    """Read and parse a hex dump file; raises OSError when it cannot be read."""
    return parse_hex_bytes(Path(filename).read_text())