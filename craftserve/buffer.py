"""A growable byte buffer that reads and writes the game's wire types."""

from __future__ import annotations

import struct
import uuid
from typing import Iterable

from craftserve.game import PositionI
from craftserve.uuids import bits_to_uuid, sig_bits

MAX_BUFFER_SIZE = 1024 * 1024 * 1024

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _s32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _s64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value & (1 << 63) else value


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


class ConnBuffer:
    """Bytes with a read position; reads past the end yield zero bytes.

    The write counter tracks how many bytes were pushed; every byte read
    while it is positive counts it down by one.
    """

    def __init__(self, data: bytes | bytearray | Iterable[int] = b"") -> None:
        self._data = bytearray(data)
        self._read = 0
        self._written = 0

    # state

    @property
    def data(self) -> bytes:
        """The whole content of the buffer."""
        return bytes(self._data)

    @property
    def read_index(self) -> int:
        return self._read

    @property
    def write_index(self) -> int:
        return self._written

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        content = " ".join(str(byte) for byte in self._data)
        return f"Buffer[{len(self)}](i: {self._read}, o: {self._written})[{content}]"

    def reset(self) -> None:
        """Empty the buffer and rewind both positions."""
        self._read = 0
        self._written = 0
        self._data = bytearray()

    def write(self, data: bytes) -> int:
        """Append raw bytes, file-style; returns how many were written."""
        self._data.extend(data)
        return len(data)

    def set_index(self, index: int) -> None:
        self._read = index

    def hex_string(self) -> str:
        return self._data.hex()

    def signed(self) -> list[int]:
        """The content as signed 8-bit values."""
        return [_s8(byte) for byte in self._data]

    def skip_all(self) -> None:
        self.skip(len(self) - 1)

    def skip(self, delta: int) -> None:
        self._read += delta

    def copy(self) -> ConnBuffer:
        """A fresh buffer over the same content, with both positions at zero."""
        return ConnBuffer(self._data)

    def copy_from_index(self) -> ConnBuffer:
        """A fresh buffer over the content from the read position onwards."""
        return ConnBuffer(self._data[self._read:])

    # internals

    def _pull_next(self) -> int:
        if self._read >= len(self._data):
            return 0
        if self._read < 0:
            raise IndexError(f"read index {self._read} is negative")
        value = self._data[self._read]
        self._read += 1
        if self._written > 0:
            self._written -= 1
        return value

    def _pull_size(self, count: int) -> bytes:
        return bytes(self._pull_next() for _ in range(count))

    def _push_next(self, data: bytes | bytearray) -> None:
        if self._written + len(data) > MAX_BUFFER_SIZE:
            raise OverflowError(
                f"buffer overflow at index {self._written} with length {len(data)}"
            )
        self._written += len(data)
        self._data.extend(data)

    def _pull_variable(self, limit: int) -> int:
        count = 0
        result = 0
        while True:
            byte = self._pull_next()
            result |= (byte & 0x7F) << (count * 7)
            count += 1
            if count > limit:
                raise ValueError(f"VarInt > {limit}")
            if not byte & 0x80:
                break
        return _s64(result)

    def _push_unsigned_variable(self, value: int) -> None:
        out = bytearray()
        while True:
            temp = value & 0x7F
            value >>= 7
            if value:
                temp |= 0x80
            out.append(temp)
            if not value:
                break
        self._push_next(out)

    # pull

    def pull_bit(self) -> bool:
        return self._pull_next() != 0

    def pull_byte(self) -> int:
        return self._pull_next()

    def pull_i16(self) -> int:
        # Four bytes are consumed; the first two hold the value.
        return struct.unpack(">h", self._pull_size(4)[:2])[0]

    def pull_i24(self) -> int:
        first, second, third = self._pull_size(3)
        return first << 16 | second << 8 | third

    def pull_u16(self) -> int:
        high = self._pull_next()
        low = self._pull_next()
        return high << 8 | low

    def pull_i32(self) -> int:
        return struct.unpack(">i", self._pull_size(4))[0]

    def pull_i64(self) -> int:
        return _s64(self.pull_u64())

    def pull_u64(self) -> int:
        return struct.unpack(">Q", self._pull_size(8))[0]

    def pull_f32(self) -> float:
        return struct.unpack(">f", self._pull_size(4))[0]

    def pull_f64(self) -> float:
        return struct.unpack(">d", self._pull_size(8))[0]

    def pull_varint(self) -> int:
        return _s32(self._pull_variable(5))

    def pull_varlong(self) -> int:
        return self._pull_variable(10)

    def pull_text(self) -> str:
        return self.pull_bytes().decode("utf-8", errors="replace")

    def pull_bytes(self) -> bytes:
        """A length-prefixed byte string."""
        size = self.pull_varint()
        start = self._read
        end = start + size
        if size < 0 or start < 0 or end > len(self._data):
            raise IndexError(
                f"cannot read {size} bytes at index {start} of {len(self._data)}"
            )
        self._read = end
        return bytes(self._data[start:end])

    def pull_signed_bytes(self) -> list[int]:
        return [_s8(byte) for byte in self.pull_bytes()]

    def pull_uuid(self) -> uuid.UUID:
        msb = self.pull_i64()
        lsb = self.pull_i64()
        return bits_to_uuid(msb, lsb)

    def pull_position(self) -> PositionI:
        value = _s64(self.pull_u64())
        x = value >> 38
        y = value & 0xFFF
        z = _s64(value << 26) >> 38
        return PositionI(x, y, z)

    # push

    def push_bit(self, value: bool) -> None:
        self._push_next(b"\x01" if value else b"\x00")

    def push_byte(self, value: int) -> None:
        self._push_next(bytes([value & 0xFF]))

    def push_i16(self, value: int) -> None:
        self._push_next(struct.pack(">H", value & 0xFFFF))

    def push_i32(self, value: int) -> None:
        self._push_next(struct.pack(">I", value & _MASK32))

    def push_i64(self, value: int) -> None:
        self._push_next(struct.pack(">Q", value & _MASK64))

    def push_f32(self, value: float) -> None:
        self._push_next(struct.pack(">f", value))

    def push_f64(self, value: float) -> None:
        self._push_next(struct.pack(">d", value))

    def push_varint(self, value: int) -> None:
        self._push_unsigned_variable(value & _MASK32)

    def push_varlong(self, value: int) -> None:
        self._push_unsigned_variable(value & _MASK64)

    def push_text(self, value: str) -> None:
        self.push_bytes(value.encode("utf-8"), True)

    def push_bytes(self, data: bytes, prefix_with_len: bool) -> None:
        if prefix_with_len:
            self.push_varint(len(data))
        self._push_next(bytes(data))

    def push_signed_bytes(self, data: Iterable[int], prefix_with_len: bool) -> None:
        self.push_bytes(bytes(value & 0xFF for value in data), prefix_with_len)

    def push_uuid(self, value: uuid.UUID) -> None:
        msb, lsb = sig_bits(value)
        self.push_i64(msb)
        self.push_i64(lsb)

    def push_position(self, value: PositionI) -> None:
        self.push_i64(
            ((value.x & 0x3FFFFFF) << 38)
            | ((value.z & 0x3FFFFFF) << 12)
            | (value.y & 0xFFF)
        )