"""An in-memory world made of chunks, each split into vertical slices of packed blocks."""

from __future__ import annotations

import uuid
from enum import Enum

from craftserve.buffer import ConnBuffer
from craftserve.compact import Compacter
from craftserve.nbt import NbtCompound, NbtLongArray
from craftserve.uuids import new_uuid

CHUNK_W = 16
CHUNK_H = 256
CHUNK_L = 16

SLICE_C = 16
SLICE_H = CHUNK_H // SLICE_C
SLICE_S = CHUNK_W * CHUNK_L * SLICE_H

BITS_PER_BLOCK = 14
MAX_PALETTE_ID = (1 << BITS_PER_BLOCK) - 1

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _s64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value & (1 << 63) else value


def chunk_index(x: int, z: int) -> int:
    """A single signed 64-bit key for the chunk at ``x``, ``z``."""
    return _s64((z << 32) | (x & 0xFFFFFFFF))


def slice_index(x: int, y: int, z: int) -> int:
    """The position of a block inside its slice's packed storage."""
    return y << 8 | z << 4 | x


def _block_level_to_slice(x: int, y: int, z: int) -> tuple[int, int, int]:
    return x & 0xF, y & 0xF, z & 0xF


class HeightMapType(str, Enum):
    WORLD_SURFACE_WG = "WORLD_SURFACE_WG"
    WORLD_SURFACE = "WORLD_SURFACE"
    OCEAN_FLOOR_WG = "OCEAN_FLOOR_WG"
    OCEAN_FLOOR = "OCEAN_FLOOR"
    MOTION_BLOCKING = "MOTION_BLOCKING"
    MOTION_BLOCKING_NO_LEAVES = "MOTION_BLOCKING_NO_LEAVES"


class Block:
    """A block addressed by level coordinates."""

    def __init__(self, x: int, y: int, z: int, slice_: Slice) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.slice = slice_

    @property
    def chunk(self) -> Chunk:
        return self.slice.chunk

    @property
    def level(self) -> Level:
        return self.slice.chunk.level

    def _index(self) -> int:
        return slice_index(*_block_level_to_slice(self.x, self.y, self.z))

    def get_block_type(self) -> int:
        return self.slice._block_get(self._index())

    def set_block_type(self, value: int) -> int:
        """Store a new block type and return the previous one."""
        return self.slice._block_set(self._index(), value)


class Slice:
    """A 16x16x16 section of a chunk."""

    def __init__(self, chunk: Chunk, index: int) -> None:
        self.index = index
        self.chunk = chunk
        self.values = Compacter(BITS_PER_BLOCK, SLICE_S)

    @property
    def level(self) -> Level:
        return self.chunk.level

    def get_block(self, x: int, y: int, z: int) -> Block:
        if not 0 <= x <= 15:
            raise ValueError("invalid x value for slice get block")
        if not 0 <= y <= 15:
            raise ValueError("invalid y value for slice get block")
        if not 0 <= z <= 15:
            raise ValueError("invalid z value for slice get block")
        return Block(
            (self.chunk.x << 4) | x,
            SLICE_H * self.index + y,
            (self.chunk.z << 4) | z,
            self,
        )

    def push(self, writer: ConnBuffer) -> None:
        """Write the slice as a full section using the direct palette."""
        writer.push_i16(SLICE_S)
        writer.push_byte(BITS_PER_BLOCK)
        writer.push_varint(len(self.values.values))
        for value in self.values.values:
            writer.push_i64(value)

    def _block_get(self, index: int) -> int:
        return self.values.get(index)

    def _block_set(self, index: int, value: int) -> int:
        return self.values.set(index, value)

    def fill(self, value: int) -> None:
        """Set every block of the slice to ``value``."""
        for y in range(SLICE_H):
            self.layer(y, value)

    def layer(self, index: int, value: int) -> None:
        """Set every block of horizontal layer ``index`` to ``value``."""
        for x in range(CHUNK_W):
            for z in range(CHUNK_L):
                self._block_set(slice_index(x, index, z), value)


class Chunk:
    """A column of slices; slices are created when first asked for."""

    def __init__(self, level: Level, x: int, z: int) -> None:
        self.x = x
        self.z = z
        self.level = level
        self._slices: list[Slice | None] = [None] * SLICE_C
        self.height_maps: dict[HeightMapType, Compacter] = {
            map_type: Compacter(9, 256) for map_type in HeightMapType
        }

    @property
    def slices(self) -> list[Slice | None]:
        """Every slice position; those not yet created are None."""
        return list(self._slices)

    def get_slice(self, y: int) -> Slice:
        if not 0 <= y <= 15:
            raise IndexError("index out of range [0:15]")
        existing = self._slices[y]
        if existing is not None:
            return existing
        created = Slice(self, y)
        self._slices[y] = created
        return created

    def get_block(self, x: int, y: int, z: int) -> Block:
        if not 0 <= x <= 15:
            raise ValueError("invalid x value for chunk get block")
        if not 0 <= y <= 255:
            raise ValueError("invalid y value for chunk get block")
        if not 0 <= z <= 15:
            raise ValueError("invalid z value for chunk get block")
        return Block((self.x << 4) | x, y, (self.z << 4) | z, self.get_slice(y >> 4))

    def push(self, writer: ConnBuffer) -> None:
        """Write every slice followed by the mask of slices written."""
        mask = 0
        for i, slice_ in enumerate(self._slices):
            if slice_ is None:
                raise RuntimeError(f"slice {i} of chunk {self.x},{self.z} has not been created")
            mask |= 1 << i
            slice_.push(writer)
        writer.push_varint(mask)

    def height_map_nbt_compound(self) -> NbtCompound:
        compound = NbtCompound()
        motion = self.height_maps[HeightMapType.MOTION_BLOCKING]
        compound.set(HeightMapType.MOTION_BLOCKING.value, NbtLongArray(motion.values))
        return compound


class Level:
    """A named world holding chunks by position."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.uuid: uuid.UUID = new_uuid()
        self._chunks: dict[int, Chunk] = {}

    def chunks(self) -> list[Chunk]:
        return list(self._chunks.values())

    def _chunk(self, x: int, z: int, generate: bool) -> Chunk | None:
        key = chunk_index(x, z)
        found = self._chunks.get(key)
        if found is not None or not generate:
            return found
        created = Chunk(self, x, z)
        self._chunks[key] = created
        return created

    def get_chunk(self, x: int, z: int) -> Chunk:
        """The chunk at ``x``, ``z``, created if needed."""
        chunk = self._chunk(x, z, True)
        assert chunk is not None
        return chunk

    def get_chunk_if_loaded(self, x: int, z: int) -> Chunk | None:
        return self._chunk(x, z, False)

    def get_block(self, x: int, y: int, z: int) -> Block:
        chunk = self.get_chunk(x >> 4, z >> 4)
        return Block(x, y, z, chunk.get_slice(y >> 4))


def gen_super_flat(level: Level, size: int) -> None:
    """Create chunks from ``-size`` to ``size - 1`` with their three lowest slices filled.

    Each chunk gets its own block id, counting up from 210.
    """
    block_id = 210
    for x in range(-size, size):
        for z in range(-size, size):
            chunk = level.get_chunk(x, z)
            for slice_y in range(SLICE_C):
                chunk.get_slice(slice_y)
            for slice_y in range(3):
                chunk.get_slice(slice_y).fill(block_id)
            block_id += 1