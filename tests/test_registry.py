import json

import pytest

from craftserve.registry import (
    Biome,
    BiomeRegistry,
    BlockRegistry,
    RegistryError,
    load_biome_registry,
    load_block_registry,
)

BLOCKS = {
    "minecraft:air": {"states": [{"id": 0, "default": True}]},
    "minecraft:stone": {"states": [{"id": 1, "default": True}]},
    "minecraft:grass_block": {
        "properties": {"snowy": ["true", "false"]},
        "states": [
            {"id": 8, "properties": {"snowy": "true"}},
            {"id": 9, "properties": {"snowy": "false"}, "default": True},
        ],
    },
}


@pytest.fixture
def blocks():
    return BlockRegistry(BLOCKS)


def test_block_without_properties(blocks):
    assert blocks.get_block_id("minecraft:stone", None) == 1
    assert blocks.get_block_id("minecraft:air") == 0


def test_block_with_properties(blocks):
    assert blocks.get_block_id("minecraft:grass_block", {"snowy": "false"}) == 9
    assert blocks.get_block_id("minecraft:grass_block", {"snowy": "true"}) == 8


def test_unknown_block(blocks):
    with pytest.raises(RegistryError, match="not found"):
        blocks.get_block_id("minecraft:nothing", None)


def test_unknown_property(blocks):
    with pytest.raises(RegistryError, match="property colour"):
        blocks.get_block_id("minecraft:grass_block", {"colour": "red"})


def test_no_matching_state(blocks):
    with pytest.raises(RegistryError, match="no state found"):
        blocks.get_block_id("minecraft:grass_block", {"snowy": "maybe"})


def test_missing_properties_do_not_match_stateful_block(blocks):
    with pytest.raises(RegistryError):
        blocks.get_block_id("minecraft:grass_block", None)


def test_empty_properties_do_not_match_stateless_block(blocks):
    with pytest.raises(RegistryError):
        blocks.get_block_id("minecraft:stone", {})


def test_biome_lookup():
    registry = BiomeRegistry([Biome(index=3, name="minecraft:plains"), Biome(index=7, name="minecraft:desert")])
    assert registry.get_biome_id("minecraft:desert") == 7
    assert registry.id_to_tag[3] == "minecraft:plains"
    with pytest.raises(RegistryError):
        registry.get_biome_id("minecraft:moon")


def test_load_block_registry(tmp_path):
    path = tmp_path / "blocks.json"
    path.write_text(json.dumps(BLOCKS))
    registry = load_block_registry(path)
    assert registry.get_block_id("minecraft:grass_block", {"snowy": "true"}) == 8


def test_load_biome_registry(tmp_path):
    listing = tmp_path / "biomes.json"
    listing.write_text(json.dumps([{"id": 40, "name": "plains"}]))
    biome_dir = tmp_path / "biome"
    biome_dir.mkdir()
    (biome_dir / "plains.json").write_text(
        json.dumps(
            {
                "has_precipitation": True,
                "temperature": 0.8,
                "downfall": 0.4,
                "effects": {"sky_color": 7907327, "fog_color": 12638463, "grass_color": 5},
            }
        )
    )
    registry = load_biome_registry(listing, biome_dir)
    biome = registry.biomes["minecraft:plains"]
    assert registry.get_biome_id("minecraft:plains") == 40
    assert biome.has_precipitation is True
    assert biome.temperature == pytest.approx(0.8)
    assert biome.effects.sky_color == 7907327
    assert biome.effects.grass_color == 5
    assert biome.effects.foliage_color is None


def test_load_biome_registry_missing_file(tmp_path):
    listing = tmp_path / "biomes.json"
    listing.write_text(json.dumps([{"id": 1, "name": "absent"}]))
    with pytest.raises(OSError):
        load_biome_registry(listing, tmp_path)