"""Client settings and flag sets exchanged with players."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from craftserve.buffer import ConnBuffer
from craftserve.game import GameMode
from craftserve.masking import has_flag, set_flag


class ChatMode(IntEnum):
    FULL = 0
    COMMANDS = 1
    NONE = 2


class MainHand(IntEnum):
    LEFT = 0
    RIGHT = 1


class HotBarSlot(IntEnum):
    SLOT_0 = 0
    SLOT_1 = 1
    SLOT_2 = 2
    SLOT_3 = 3
    SLOT_4 = 4
    SLOT_5 = 5
    SLOT_6 = 6
    SLOT_7 = 7
    SLOT_8 = 8


class StatusAction(IntEnum):
    RESPAWN = 0
    REQUEST = 1


class PlayerInfoAction(IntEnum):
    ADD_PLAYER = 0
    UPDATE_GAME_MODE = 4


@dataclass
class PlayerAbilities:
    invulnerable: bool = False
    flying: bool = False
    allow_flight: bool = False
    instant_build: bool = False

    def push(self, writer: ConnBuffer) -> None:
        flags = 0
        flags = set_flag(flags, 0x01, self.invulnerable)
        flags = set_flag(flags, 0x02, self.flying)
        flags = set_flag(flags, 0x04, self.allow_flight)
        flags = set_flag(flags, 0x08, self.instant_build)
        writer.push_byte(flags)

    def pull(self, reader: ConnBuffer) -> None:
        flags = reader.pull_byte()
        self.invulnerable = has_flag(flags, 0x01)
        self.flying = has_flag(flags, 0x02)
        self.allow_flight = has_flag(flags, 0x04)
        self.instant_build = has_flag(flags, 0x08)


@dataclass
class Relativity:
    """Which parts of a teleport are relative to the current position."""

    x: bool = False
    y: bool = False
    z: bool = False
    axis_x: bool = False
    axis_y: bool = False

    def push(self, writer: ConnBuffer) -> None:
        flags = 0
        flags = set_flag(flags, 0x01, self.x)
        flags = set_flag(flags, 0x02, self.y)
        flags = set_flag(flags, 0x04, self.z)
        # Pitch comes before yaw on the wire.
        flags = set_flag(flags, 0x08, self.axis_y)
        flags = set_flag(flags, 0x10, self.axis_x)
        writer.push_byte(flags)


_SKIN_FLAGS = (
    ("cape", 0x01),
    ("body", 0x02),
    ("arm_l", 0x04),
    ("arm_r", 0x08),
    ("leg_l", 0x10),
    ("leg_r", 0x20),
    ("head", 0x40),
)


def _go_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class SkinParts:
    cape: bool = False
    head: bool = False
    body: bool = False
    arm_l: bool = False
    arm_r: bool = False
    leg_l: bool = False
    leg_r: bool = False

    def __str__(self) -> str:
        return (
            f"Cape:{_go_bool(self.cape)} Head:{_go_bool(self.head)} "
            f"Body:{_go_bool(self.body)} ArmL:{_go_bool(self.arm_l)} "
            f"ArmR:{_go_bool(self.arm_r)} LegL:{_go_bool(self.leg_l)} "
            f"LegR:{_go_bool(self.leg_r)}"
        )

    def push(self, writer: ConnBuffer) -> None:
        flags = 0
        for name, bit in _SKIN_FLAGS:
            flags = set_flag(flags, bit, getattr(self, name))
        writer.push_byte(flags)

    def pull(self, reader: ConnBuffer) -> None:
        flags = reader.pull_byte()
        for name, bit in _SKIN_FLAGS:
            setattr(self, name, has_flag(flags, bit))


@dataclass
class PlayerInfoUpdateGameMode:
    game_mode: GameMode = GameMode.SURVIVAL

    def push(self, writer: ConnBuffer) -> None:
        writer.push_varint(int(self.game_mode))