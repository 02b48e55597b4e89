"""Plugin channel messages and the registry that creates them by channel name."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Union

from craftserve.buffer import ConnBuffer
from craftserve.game import PositionI

CHANNEL_BRAND = "minecraft:brand"
CHANNEL_DEBUG_PATHS = "minecraft:debug/paths"
CHANNEL_DEBUG_NEIGHBORS = "minecraft:debug/neighbors_update"


class NodeType(IntEnum):
    BLOCKED = 0
    OPEN = 1
    WALKABLE = 2
    TRAPDOOR = 3
    FENCE = 4
    LAVA = 5
    WATER = 6
    RAIL = 7
    DANGER_FIRE = 8
    DAMAGE_FIRE = 9
    DANGER_CACTUS = 10
    DAMAGE_CACTUS = 11
    DANGER_OTHER = 12
    DAMAGE_OTHER = 13
    DOOR_OPEN = 14
    DOOR_WOOD_CLOSED = 15
    DOOR_IRON_CLOSED = 16


def _node_type(value: int) -> Union[NodeType, int]:
    try:
        return NodeType(value)
    except ValueError:
        return value


@dataclass
class Brand:
    channel: ClassVar[str] = CHANNEL_BRAND

    name: str = ""

    def push(self, writer: ConnBuffer) -> None:
        writer.push_text(self.name)

    def pull(self, reader: ConnBuffer) -> None:
        self.name = reader.pull_text()


@dataclass
class PathPoint:
    x: int = 0
    y: int = 0
    z: int = 0
    distance_origin: float = 0.0
    cost: float = 0.0
    cost_malus: float = 0.0
    visited: bool = False
    node_type: Union[NodeType, int] = NodeType.BLOCKED
    distance_target: float = 0.0

    def push(self, writer: ConnBuffer) -> None:
        writer.push_i32(self.x)
        writer.push_i32(self.y)
        writer.push_i32(self.z)
        writer.push_f32(self.distance_origin)
        writer.push_f32(self.cost)
        writer.push_f32(self.cost_malus)
        writer.push_bit(self.visited)
        writer.push_i32(int(self.node_type))
        writer.push_f32(self.distance_target)

    def pull(self, reader: ConnBuffer) -> None:
        self.x = reader.pull_i32()
        self.y = reader.pull_i32()
        self.z = reader.pull_i32()
        self.distance_origin = reader.pull_f32()
        self.cost = reader.pull_f32()
        self.cost_malus = reader.pull_f32()
        self.visited = reader.pull_bit()
        self.node_type = _node_type(reader.pull_i32())
        self.distance_target = reader.pull_f32()


def _push_points(writer: ConnBuffer, points: list[PathPoint]) -> None:
    writer.push_i32(len(points))
    for point in points:
        point.push(writer)


def _pull_points(reader: ConnBuffer) -> list[PathPoint]:
    points = []
    for _ in range(reader.pull_i32()):
        point = PathPoint()
        point.pull(reader)
        points.append(point)
    return points


@dataclass
class PathEntity:
    index: int = 0
    target: PathPoint = field(default_factory=PathPoint)
    p_set: list[PathPoint] = field(default_factory=list)
    o_set: list[PathPoint] = field(default_factory=list)
    c_set: list[PathPoint] = field(default_factory=list)

    def push(self, writer: ConnBuffer) -> None:
        writer.push_i32(self.index)
        self.target.push(writer)
        _push_points(writer, self.p_set)
        _push_points(writer, self.o_set)
        _push_points(writer, self.c_set)

    def pull(self, reader: ConnBuffer) -> None:
        self.index = reader.pull_i32()
        target = PathPoint()
        target.pull(reader)
        self.target = target
        self.p_set = _pull_points(reader)
        self.o_set = _pull_points(reader)
        self.c_set = _pull_points(reader)


@dataclass
class DebugPaths:
    channel: ClassVar[str] = CHANNEL_DEBUG_PATHS

    unknown_value1: int = 0
    unknown_value2: float = 0.0
    path_entity: PathEntity = field(default_factory=PathEntity)

    def push(self, writer: ConnBuffer) -> None:
        writer.push_i32(self.unknown_value1)
        writer.push_f32(self.unknown_value2)
        self.path_entity.push(writer)

    def pull(self, reader: ConnBuffer) -> None:
        self.unknown_value1 = reader.pull_i32()
        self.unknown_value2 = reader.pull_f32()
        entity = PathEntity()
        entity.pull(reader)
        self.path_entity = entity


@dataclass
class DebugNeighbors:
    channel: ClassVar[str] = CHANNEL_DEBUG_NEIGHBORS

    time: int = 0
    location: PositionI = field(default_factory=PositionI)

    def push(self, writer: ConnBuffer) -> None:
        writer.push_varlong(self.time)
        writer.push_position(self.location)

    def pull(self, reader: ConnBuffer) -> None:
        self.time = reader.pull_varlong()
        self.location = reader.pull_position()


PluginMessage = Union[Brand, DebugPaths, DebugNeighbors]

_REGISTRY: dict[str, type] = {
    CHANNEL_BRAND: Brand,
    CHANNEL_DEBUG_PATHS: DebugPaths,
    CHANNEL_DEBUG_NEIGHBORS: DebugNeighbors,
}


def get_message_for_channel(channel: str) -> PluginMessage | None:
    """A new empty message for ``channel``, or None when the channel is unknown."""
    creator = _REGISTRY.get(channel)
    return creator() if creator is not None else None