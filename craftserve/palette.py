"""Block and biome palettes of chunk sections and their wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from craftserve.buffer import ConnBuffer
from craftserve.registry import BiomeRegistry, BlockRegistry

AIR = "minecraft:air"


@dataclass
class PaletteEntry:
    """One block state of a stored section palette."""

    name: str
    properties: Mapping[str, str] | None = None


def bits_for_count(count: int) -> int:
    """Bits per entry used for a palette of ``count`` entries."""
    if count == 1:
        return 0
    if count < 17:
        return 4
    if count < 33:
        return 5
    if count < 65:
        return 6
    if count < 129:
        return 7
    raise ValueError(f"not implemented for palette of {count} entries")


@dataclass
class Palette:
    """Registry ids of a section's entries and how many bits index them."""

    blocks: list[int] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    air_index: int = -1
    bits_per_block: int = 0

    def push(self, buf: ConnBuffer, is_biome: bool) -> None:
        """Write the palette: a single value, or its type byte, size and entries."""
        if self.bits_per_block == 0:
            buf.push_byte(0)
            buf.push_varint(self.blocks[0])
            return

        count = len(self.blocks)
        type_byte = 0
        if is_biome:
            if count < 3:
                type_byte = 1
            elif count < 5:
                type_byte = 2
            elif count < 9:
                type_byte = 3
        if type_byte == 0:
            if count < 17:
                type_byte = 4
            elif count < 33:
                type_byte = 5
            elif count < 65:
                type_byte = 6
            elif count < 129:
                type_byte = 7
        if type_byte == 0:
            raise ValueError(f"not implemented for palette of {count} entries")

        buf.push_byte(type_byte)
        buf.push_varint(count)
        for block in self.blocks:
            buf.push_varint(block)


def palette_from_blocks(blocks: Iterable[PaletteEntry], registry: BlockRegistry) -> Palette:
    """A block palette; ``air_index`` is the position of air, or -1 when absent."""
    palette = Palette()
    for entry in blocks:
        block_id = registry.get_block_id(entry.name, entry.properties)
        if entry.name == AIR:
            palette.air_index = len(palette.blocks)
        palette.blocks.append(block_id)
        palette.names.append(entry.name)
    palette.bits_per_block = bits_for_count(len(palette.blocks))
    return palette


def palette_from_biomes(biomes: Iterable[str], registry: BiomeRegistry) -> Palette:
    """A biome palette from namespaced biome names."""
    palette = Palette(air_index=0)
    for name in biomes:
        palette.blocks.append(registry.get_biome_id(name))
        palette.names.append(name)
    palette.bits_per_block = bits_for_count(len(palette.blocks))
    return palette


@dataclass
class SinglePalette:
    """A palette holding exactly one value."""

    block: int = 0

    def push(self, buf: ConnBuffer) -> None:
        buf.push_byte(0)
        buf.push_varint(self.block)

    def pull(self, buf: ConnBuffer) -> None:
        """Read the value; the leading type byte must already have been read."""
        self.block = buf.pull_varint()


@dataclass
class Palette4:
    """An indirect palette of up to 16 entries, four bits each."""

    blocks: list[int] = field(default_factory=list)

    def push(self, buf: ConnBuffer) -> None:
        buf.push_byte(4)
        buf.push_varint(len(self.blocks))
        for block in self.blocks:
            buf.push_varint(block)

    def pull(self, buf: ConnBuffer) -> None:
        """Append the entries; the leading type byte must already have been read."""
        count = buf.pull_varint()
        self.blocks.extend(buf.pull_varint() for _ in range(count))


def calculate_not_air_blocks(bits_per_block: int, air_index: int, data: Iterable[int]) -> int:
    """How many packed entries in ``data`` differ from ``air_index``."""
    per_long = 64 // bits_per_block
    mask = (1 << bits_per_block) - 1
    return sum(
        1
        for long_value in data
        for i in range(per_long)
        if (long_value >> (i * bits_per_block)) & mask != air_index
    )


def calculate_not_air_blocks_new(
    bits_per_block: int, air_index: int, data: Iterable[int]
) -> int:
    """Like ``calculate_not_air_blocks`` but also counts the leftover high bits of each long."""
    per_long = 64 // bits_per_block
    mask = (1 << bits_per_block) - 1
    remainder = 64 % bits_per_block
    count = 0
    for long_value in data:
        for i in range(per_long):
            if (long_value >> (i * bits_per_block)) & mask != air_index:
                count += 1
        if remainder:
            last = (long_value >> (per_long * bits_per_block)) & ((1 << remainder) - 1)
            if last != air_index:
                count += 1
    return count