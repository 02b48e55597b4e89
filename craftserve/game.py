"""Game-level value types: modes, difficulty, versions, positions and player profiles."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Difficulty(IntEnum):
    PEACEFUL = 0
    EASY = 1
    NORMAL = 2
    HARD = 3

    def __str__(self) -> str:
        return self.name.capitalize()


def difficulty_value_of(id: int) -> Difficulty:
    """Look up a difficulty by its wire id; raises ValueError for unknown ids."""
    try:
        return Difficulty(id)
    except ValueError:
        raise ValueError(f"no difficulty for id {id}") from None


class Dimension(IntEnum):
    NETHER = -1
    OVERWORLD = 0
    THE_END = 1


class GameMode(IntEnum):
    SURVIVAL = 0
    CREATIVE = 1
    ADVENTURE = 2
    SPECTATOR = 3

    def encoded(self, hardcore: bool) -> int:
        """The game mode byte, with the hardcore flag set when asked."""
        return (self.value | (0x8 if hardcore else 0)) & 0xFF


_LEVEL_TYPE_NAMES = {
    0: "default",
    1: "flat",
    2: "largeBiomes",
    3: "amplified",
    4: "customized",
    5: "buffet",
    6: "default_1_1",
}


class LevelType(IntEnum):
    DEFAULT = 0
    FLAT = 1
    LARGEBIOMES = 2
    AMPLIFIED = 3
    CUSTOMIZED = 4
    BUFFET = 5
    DEFAULT11 = 6

    def __str__(self) -> str:
        return _LEVEL_TYPE_NAMES[self.value]


_PROTOCOLS = {0: 340, 1: 404, 2: 498, 3: 578, 4: 769}
_VERSION_NAMES = {0: "1.12.2", 1: "1.13.2", 2: "1.14.4", 3: "1.15.2", 4: "1.21.4"}


class MinecraftVersion(IntEnum):
    MC1_12_2 = 0
    MC1_13_2 = 1
    MC1_14_4 = 2
    MC1_15_2 = 3
    MC1_21_4 = 4

    def protocol(self) -> int:
        """The protocol number clients of this version speak."""
        return _PROTOCOLS[self.value]

    def __str__(self) -> str:
        return _VERSION_NAMES.get(self.value, "Unknown")


CURRENT_PROTOCOL = MinecraftVersion.MC1_21_4


class Material(IntEnum):
    AIR = 0
    STONE = 1
    GRANITE = 2
    POLISHED_GRANITE = 3
    ANDESITE = 4
    POLISHED_ANDESITE = 5
    DIORITE = 6
    POLISHED_DIORITE = 7


@dataclass
class PositionI:
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass
class PositionF:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class RotationF:
    axis_x: float = 0.0  # yaw
    axis_y: float = 0.0  # pitch


@dataclass
class Location:
    """A position together with a rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    axis_x: float = 0.0
    axis_y: float = 0.0

    @property
    def position(self) -> PositionF:
        return PositionF(self.x, self.y, self.z)

    @property
    def rotation(self) -> RotationF:
        return RotationF(self.axis_x, self.axis_y)


@dataclass
class Vector2F:
    x: float = 0.0
    z: float = 0.0


@dataclass
class Vector3F(Vector2F):
    y: float = 0.0


@dataclass(frozen=True)
class ChunkPos:
    x: int = 0
    z: int = 0


@dataclass
class PosInfo:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0


@dataclass
class ProfileProperty:
    name: str
    value: str
    signature: str | None = None


@dataclass
class Profile:
    """A connected player's identity, chunk tracking and position."""

    uuid: uuid.UUID = field(default_factory=lambda: uuid.UUID(int=0))
    entity_id: int = 0
    name: str = ""
    max_chunks_count: int = 0
    sent_chunks: set[ChunkPos] = field(default_factory=set)
    spawned: bool = False
    sent_chunks_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )
    chunks_cache_center_x: int = 0
    chunks_cache_center_z: int = 0
    properties: list[ProfileProperty] = field(default_factory=list)
    other_data: dict[str, Any] = field(default_factory=dict)
    pos_info: PosInfo = field(default_factory=PosInfo)

    def set_pos_info(self, x: float, y: float, z: float, yaw: float, pitch: float) -> None:
        self.pos_info = PosInfo(x, y, z, yaw, pitch)

    def update_yaw_pitch(self, yaw: float, pitch: float) -> None:
        self.pos_info.yaw = yaw
        self.pos_info.pitch = pitch

    def update_pos(self, x: float, y: float, z: float) -> None:
        self.pos_info.x = x
        self.pos_info.y = y
        self.pos_info.z = z