"""Connection protocol states."""

from __future__ import annotations

from enum import IntEnum

_NAMES = {0: "Shake", 1: "Status", 2: "Login", 3: "Conf", 4: "Play"}


class PacketState(IntEnum):
    SHAKE = 0
    STATUS = 1
    LOGIN = 2
    CONFIGURATION = 3
    PLAY = 4

    def __str__(self) -> str:
        return _NAMES[self.value]

    def next(self) -> PacketState:
        """The state that follows this one; PLAY wraps back to SHAKE."""
        return PacketState((self.value + 1) % len(PacketState))


def packet_state_value_of(value: int) -> PacketState:
    """Look up a state by number; raises ValueError for unknown values."""
    try:
        return PacketState(value)
    except ValueError:
        raise ValueError(f"no state for value: {value}") from None