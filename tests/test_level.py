import pytest

from craftserve.buffer import ConnBuffer
from craftserve.level import (
    BITS_PER_BLOCK,
    SLICE_C,
    SLICE_S,
    Chunk,
    HeightMapType,
    Level,
    chunk_index,
    gen_super_flat,
    slice_index,
)
from craftserve.nbt import NbtLongArray


@pytest.fixture
def level():
    return Level("world")


def test_get_chunk_creates_once(level):
    assert level.get_chunk_if_loaded(2, 3) is None
    chunk = level.get_chunk(2, 3)
    assert level.get_chunk(2, 3) is chunk
    assert level.get_chunk_if_loaded(2, 3) is chunk
    assert (chunk.x, chunk.z) == (2, 3)
    assert level.chunks() == [chunk]


def test_get_slice_cached_and_indexed(level):
    chunk = level.get_chunk(0, 0)
    first = chunk.get_slice(5)
    assert chunk.get_slice(5) is first
    assert first.index == 5
    assert chunk.slices[5] is first
    assert chunk.slices[4] is None


@pytest.mark.parametrize("y", [-1, 16])
def test_get_slice_out_of_range(level, y):
    with pytest.raises(IndexError):
        level.get_chunk(0, 0).get_slice(y)


@pytest.mark.parametrize("coords", [(-1, 0, 0), (16, 0, 0), (0, 256, 0), (0, 0, 16)])
def test_chunk_get_block_rejects_bad_coordinates(level, coords):
    with pytest.raises(ValueError):
        level.get_chunk(0, 0).get_block(*coords)


def test_slice_get_block_rejects_bad_coordinates(level):
    with pytest.raises(ValueError):
        level.get_chunk(0, 0).get_slice(0).get_block(0, 16, 0)


def test_chunk_block_coordinates_are_level_coordinates(level):
    chunk = level.get_chunk(1, 2)
    block = chunk.get_block(3, 20, 5)
    assert block.x >> 4 == 1 and block.x & 0xF == 3
    assert block.z >> 4 == 2 and block.z & 0xF == 5
    assert block.y == 20
    assert block.chunk is chunk
    assert block.level is level
    assert block.slice is chunk.get_slice(1)


def test_slice_block_y(level):
    block = level.get_chunk(0, 0).get_slice(2).get_block(0, 3, 0)
    assert block.y >> 4 == 2
    assert block.y & 0xF == 3


def test_block_type_round_trip(level):
    block = level.get_chunk(0, 0).get_block(1, 0, 0)
    assert block.get_block_type() == 0
    assert block.set_block_type(42) == 0
    assert block.get_block_type() == 42
    assert block.set_block_type(7) == 42
    assert block.get_block_type() == 7


def test_level_get_block_negative_coordinates(level):
    block = level.get_block(-1, 5, -1)
    assert block.chunk is level.get_chunk_if_loaded(-1, -1)
    block.set_block_type(9)
    assert level.get_block(-1, 5, -1).get_block_type() == 9


def test_fill_sets_blocks(level):
    slice_ = level.get_chunk(0, 0).get_slice(0)
    slice_.fill(33)
    assert [slice_.get_block(x, 0, 0).get_block_type() for x in range(4)] == [33] * 4


def test_gen_super_flat(level):
    gen_super_flat(level, 1)
    chunks = level.chunks()
    assert len(chunks) == 4
    assert all(s is not None for c in chunks for s in c.slices)
    types = sorted(c.get_block(0, 0, 0).get_block_type() for c in chunks)
    assert types == list(range(210, 214))
    assert all(c.get_block(0, 48, 0).get_block_type() == 0 for c in chunks)


def test_slice_push_header(level):
    slice_ = level.get_chunk(0, 0).get_slice(0)
    buf = ConnBuffer()
    slice_.push(buf)
    assert buf.pull_u16() == SLICE_S
    assert buf.pull_byte() == BITS_PER_BLOCK
    assert buf.pull_varint() == len(slice_.values.values)
    assert len(buf) == buf.read_index + 8 * len(slice_.values.values)


def test_chunk_push_ends_with_mask(level):
    chunk = level.get_chunk(0, 0)
    for y in range(SLICE_C):
        chunk.get_slice(y)
    buf = ConnBuffer()
    chunk.push(buf)
    mask = ConnBuffer()
    mask.push_varint((1 << SLICE_C) - 1)
    assert buf.data.endswith(mask.data)

    single = ConnBuffer()
    chunk.get_slice(0).push(single)
    assert len(buf) == SLICE_C * len(single) + len(mask)


def test_chunk_push_requires_all_slices(level):
    chunk = level.get_chunk(0, 0)
    chunk.get_slice(0)
    with pytest.raises(RuntimeError):
        chunk.push(ConnBuffer())


def test_height_map_compound(level):
    chunk = level.get_chunk(0, 0)
    compound = chunk.height_map_nbt_compound()
    tag = compound.get("MOTION_BLOCKING")
    assert isinstance(tag, NbtLongArray)
    assert tag.value == chunk.height_maps[HeightMapType.MOTION_BLOCKING].values
    assert set(chunk.height_maps) == set(HeightMapType)


def test_chunk_index_distinct_and_masked():
    keys = {chunk_index(x, z) for x in range(-3, 4) for z in range(-3, 4)}
    assert len(keys) == 49
    assert chunk_index(-1, 0) == 0xFFFFFFFF


def test_slice_index_covers_slice():
    indices = {slice_index(x, y, z) for x in range(16) for y in range(16) for z in range(16)}
    assert indices == set(range(SLICE_S))


def test_level_identity():
    first = Level("a")
    second = Level("b")
    assert first.name == "a"
    assert first.uuid != second.uuid
    assert isinstance(first.get_chunk(0, 0), Chunk)