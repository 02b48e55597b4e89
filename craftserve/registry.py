"""Block-state and biome registries loaded from the game's data files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping


class RegistryError(LookupError):
    """A block, block state or biome is not in the registry."""


class BlockRegistry:
    """Looks up block-state ids by block name and property values.

    ``blocks`` maps a block name to its description: a ``properties`` mapping
    of property names to allowed values and a ``states`` list whose entries
    hold an ``id`` and, when the block has any, the state's ``properties``.
    """

    def __init__(self, blocks: Mapping[str, Mapping[str, Any]]) -> None:
        self._blocks = dict(blocks)

    def __contains__(self, block_name: object) -> bool:
        return block_name in self._blocks

    def get_block_id(
        self, block_name: str, properties: Mapping[str, str] | None = None
    ) -> int:
        """The id of the state of ``block_name`` whose properties equal ``properties``."""
        block = self._blocks.get(block_name)
        if block is None:
            raise RegistryError(f"block {block_name} not found")

        known = block.get("properties") or {}
        for prop in properties or {}:
            if prop not in known:
                raise RegistryError(f"property {prop} not found for block {block_name}")

        for state in block.get("states") or []:
            state_props = state.get("properties")
            # A state without properties only matches a request without them, and back.
            if (properties is None) != (state_props is None):
                continue
            wanted = properties or {}
            have = state_props or {}
            if len(wanted) != len(have):
                continue
            if all(have.get(key) == value for key, value in wanted.items()):
                return int(state["id"])

        raise RegistryError(
            f"no state found for block {block_name} with properties {properties}"
        )


@dataclass
class BiomeEffects:
    sky_color: int = 0
    water_color: int = 0
    water_fog_color: int = 0
    fog_color: int = 0
    foliage_color: int | None = None
    grass_color: int | None = None
    grass_color_modifier: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BiomeEffects:
        return cls(
            sky_color=int(data.get("sky_color", 0)),
            water_color=int(data.get("water_color", 0)),
            water_fog_color=int(data.get("water_fog_color", 0)),
            fog_color=int(data.get("fog_color", 0)),
            foliage_color=data.get("foliage_color"),
            grass_color=data.get("grass_color"),
            grass_color_modifier=data.get("grass_color_modifier") or "",
        )


@dataclass
class Biome:
    index: int = 0
    name: str = ""
    has_precipitation: bool = False
    temperature: float = 0.0
    downfall: float = 0.0
    effects: BiomeEffects = field(default_factory=BiomeEffects)

    @classmethod
    def from_json(cls, index: int, name: str, data: Mapping[str, Any]) -> Biome:
        """A biome numbered ``index`` and called ``name``, described by ``data``."""
        return cls(
            index=index,
            name=name,
            has_precipitation=bool(data.get("has_precipitation", False)),
            temperature=float(data.get("temperature", 0.0)),
            downfall=float(data.get("downfall", 0.0)),
            effects=BiomeEffects.from_json(data.get("effects") or {}),
        )


class BiomeRegistry:
    """Biomes by their namespaced name."""

    def __init__(self, biomes: Iterable[Biome]) -> None:
        self.biomes: dict[str, Biome] = {}
        self.id_to_tag: dict[int, str] = {}
        for biome in biomes:
            self.biomes[biome.name] = biome
            self.id_to_tag[biome.index] = biome.name

    def __len__(self) -> int:
        return len(self.biomes)

    def get_biome_id(self, biome_name: str) -> int:
        biome = self.biomes.get(biome_name)
        if biome is None:
            raise RegistryError(f"biome {biome_name} not found")
        return biome.index


def load_block_registry(path: str | Path = "registry/blocks.json") -> BlockRegistry:
    """Read the block registry from a JSON file."""
    return BlockRegistry(json.loads(Path(path).read_text(encoding="utf-8")))


def load_biome_registry(
    prismarine_path: str | Path = "registry/prismarine/biomes.json",
    biome_dir: str | Path = "registry/biome",
) -> BiomeRegistry:
    """Read the biome list, then each biome's ``<name>.json`` from ``biome_dir``."""
    listing = json.loads(Path(prismarine_path).read_text(encoding="utf-8"))
    directory = Path(biome_dir)
    biomes = []
    for entry in listing:
        short_name = entry["name"]
        data = json.loads((directory / f"{short_name}.json").read_text(encoding="utf-8"))
        biomes.append(Biome.from_json(int(entry["id"]), "minecraft:" + short_name, data))
    return BiomeRegistry(biomes)