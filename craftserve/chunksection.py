"""A chunk section storing four-bit block values, two per byte."""

from __future__ import annotations

from craftserve.buffer import ConnBuffer

_SIZE = 16
_ROW_BYTES = 8


def _check(name: str, value: int, upper: int) -> None:
    if not 0 <= value < upper:
        raise IndexError(f"{name} {value} out of range [0:{upper - 1}]")


class ChunkSection:
    """16 layers of 16 rows, each row 8 bytes of packed four-bit blocks."""

    def __init__(self) -> None:
        self.blocks: list[list[bytearray]] = [
            [bytearray(_ROW_BYTES) for _ in range(_SIZE)] for _ in range(_SIZE)
        ]

    def get_block(self, x: int, y: int, z: int) -> int:
        """The raw byte at layer ``y``, row ``x``, byte ``7 - z``."""
        _check("y", y, _SIZE)
        _check("x", x, _SIZE)
        _check("z", z, _ROW_BYTES)
        return self.blocks[y][x][7 - z]

    def set_block(self, x: int, y: int, z: int, block: int) -> None:
        """Store the low four bits of ``block``; x is mirrored and packed two per byte."""
        _check("x", x, _SIZE)
        _check("y", y, _SIZE)
        _check("z", z, _SIZE)
        x = 15 - x
        row = self.blocks[y][z]
        index = x // 2
        if x % 2 == 1:
            row[index] = (row[index] & 0xF0) | (block & 0x0F)
        else:
            row[index] = (row[index] & 0x0F) | ((block & 0x0F) << 4)

    def push(self, buf: ConnBuffer) -> None:
        """Write the count of rows followed by every packed byte, layer by layer."""
        buf.push_varint(256)
        for layer in self.blocks:
            for row in layer:
                buf.push_bytes(bytes(row), False)