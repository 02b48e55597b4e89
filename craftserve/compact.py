"""Fixed-width values packed into 64-bit words."""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _s64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value & (1 << 63) else value


def _u64(value: int) -> int:
    return value & _MASK64


def _trunc_mod(value: int, divisor: int) -> int:
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def round_up(value: int, multiple: int) -> int:
    """Round ``value`` up to a multiple of ``multiple``.

    A zero ``multiple`` gives 0, and a zero ``value`` gives ``multiple``.
    """
    if multiple == 0:
        return 0
    if value == 0:
        return multiple
    if value < 0:
        multiple = -multiple
    remainder = _trunc_mod(value, multiple)
    if remainder == 0:
        return value
    return value + multiple - remainder


class Compacter:
    """An array of ``size`` entries of ``bits`` bits each, stored in signed 64-bit words."""

    def __init__(self, bits: int, size: int) -> None:
        self.bpb = bits
        self.max = (1 << bits) - 1
        self.values: list[int] = [0] * (round_up(size * bits, 64) // 64)

    def _locate(self, index: int) -> tuple[int, int, int]:
        bit_index = index * self.bpb
        start = bit_index >> 6
        end = ((index + 1) * self.bpb - 1) >> 6
        offset = bit_index ^ (start << 6)
        return start, end, offset

    def set(self, index: int, value: int) -> int:
        """Store ``value`` at ``index`` and return the value that was there."""
        start, end, offset = self._locate(index)
        values = self.values
        masked = value & self.max

        previous = (_u64(values[start]) >> offset) & self.max
        cleared = values[start] & _s64(~(self.max << offset))
        values[start] = _s64(cleared | _s64(masked << offset))

        if start != end:
            z_index = 64 - offset
            p_index = self.bpb - 1
            previous |= (values[end] << z_index) & self.max
            kept = ((_u64(values[end]) >> p_index) << p_index) & _MASK64
            values[end] = _s64(kept | (masked >> z_index))

        return previous

    def get(self, index: int) -> int:
        """The value stored at ``index``."""
        start, end, offset = self._locate(index)
        values = self.values
        if start == end:
            return (_u64(values[start]) >> offset) & self.max

        z_index = 64 - offset
        low = _u64(values[start] >> offset)
        high = _u64(values[end] << z_index) & self.max
        return _s64(low | high)