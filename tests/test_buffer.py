import uuid

import pytest

from craftserve.buffer import ConnBuffer
from craftserve.game import PositionI


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 2**31 - 1, -1, -(2**31)])
def test_varint_round_trip(value):
    buf = ConnBuffer()
    buf.push_varint(value)
    assert buf.pull_varint() == value


@pytest.mark.parametrize("value", [0, 1, 2**40, 2**63 - 1, -1, -(2**63)])
def test_varlong_round_trip(value):
    buf = ConnBuffer()
    buf.push_varlong(value)
    assert buf.pull_varlong() == value


def test_varint_wire_bytes():
    buf = ConnBuffer()
    buf.push_varint(300)
    assert buf.data == bytes([0xAC, 0x02])


def test_negative_varint_takes_five_bytes():
    buf = ConnBuffer()
    buf.push_varint(-1)
    assert len(buf) == 5


def test_overlong_varint_raises():
    buf = ConnBuffer(bytes([0xFF] * 6))
    with pytest.raises(ValueError):
        buf.pull_varint()


@pytest.mark.parametrize("value", [0, 1234, -1234, 2**31 - 1, -(2**31)])
def test_i32_round_trip(value):
    buf = ConnBuffer()
    buf.push_i32(value)
    assert buf.pull_i32() == value


@pytest.mark.parametrize("value", [0, -5, 2**63 - 1, -(2**63)])
def test_i64_round_trip(value):
    buf = ConnBuffer()
    buf.push_i64(value)
    assert buf.pull_i64() == value


def test_u64_of_minus_one():
    buf = ConnBuffer()
    buf.push_i64(-1)
    assert buf.pull_u64() == 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("value", [0, 1234, -1234, 32767, -32768])
def test_i16_round_trip_consumes_four_bytes(value):
    buf = ConnBuffer()
    buf.push_i16(value)
    buf.push_i16(0)
    assert buf.pull_i16() == value
    assert buf.read_index == 4


def test_u16_reads_pushed_short():
    buf = ConnBuffer()
    buf.push_i16(1234)
    assert buf.pull_u16() == 1234


def test_i24_reads_low_three_bytes_of_int():
    buf = ConnBuffer()
    buf.push_i32(0x00ABCDEF)
    buf.skip(1)
    assert buf.pull_i24() == 0x00ABCDEF


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1024.0])
def test_floats_round_trip(value):
    buf = ConnBuffer()
    buf.push_f32(value)
    buf.push_f64(value)
    assert buf.pull_f32() == value
    assert buf.pull_f64() == value


def test_bit_round_trip():
    buf = ConnBuffer()
    buf.push_bit(True)
    buf.push_bit(False)
    assert buf.pull_bit() is True
    assert buf.pull_bit() is False


@pytest.mark.parametrize("text", ["", "hello", "żółć ☃"])
def test_text_round_trip(text):
    buf = ConnBuffer()
    buf.push_text(text)
    assert buf.pull_text() == text
    assert buf.read_index == len(buf)


def test_bytes_without_prefix_are_raw():
    buf = ConnBuffer()
    buf.push_bytes(b"abc", False)
    assert buf.data == b"abc"


def test_pull_bytes_past_end_raises():
    buf = ConnBuffer()
    buf.push_varint(10)
    buf.push_bytes(b"abc", False)
    with pytest.raises(IndexError):
        buf.pull_bytes()


def test_signed_bytes_round_trip():
    values = [-128, -1, 0, 1, 127]
    buf = ConnBuffer()
    buf.push_signed_bytes(values, True)
    assert buf.pull_signed_bytes() == values
    prefixless = ConnBuffer()
    prefixless.push_signed_bytes(values, False)
    assert prefixless.signed() == values


def test_uuid_round_trip():
    value = uuid.uuid4()
    buf = ConnBuffer()
    buf.push_uuid(value)
    assert len(buf) == 16
    assert buf.pull_uuid() == value


@pytest.mark.parametrize(
    "position",
    [PositionI(0, 0, 0), PositionI(-5, 100, 12345), PositionI(33554431, 4095, -33554432)],
)
def test_position_round_trip(position):
    buf = ConnBuffer()
    buf.push_position(position)
    assert buf.pull_position() == position


def test_reading_past_end_yields_zero():
    buf = ConnBuffer()
    assert buf.pull_byte() == 0
    assert buf.read_index == 0


def test_write_counter_tracks_pushes_and_reads():
    buf = ConnBuffer()
    buf.push_bytes(b"xyz", False)
    assert buf.write_index == 3
    buf.pull_byte()
    assert buf.write_index == 2


def test_write_appends_without_moving_write_counter():
    buf = ConnBuffer()
    assert buf.write(b"abcd") == 4
    assert buf.data == b"abcd"
    assert buf.write_index == 0


def test_reset_empties():
    buf = ConnBuffer(b"abc")
    buf.pull_byte()
    buf.reset()
    assert len(buf) == 0
    assert buf.read_index == 0


def test_skip_and_set_index():
    buf = ConnBuffer(b"abcdef")
    buf.skip(2)
    assert buf.pull_byte() == ord("c")
    buf.set_index(0)
    assert buf.pull_byte() == ord("a")
    buf.skip_all()
    assert buf.read_index == len(buf)


def test_copies():
    buf = ConnBuffer(b"abcdef")
    buf.skip(4)
    assert buf.copy_from_index().data == b"ef"
    duplicate = buf.copy()
    assert duplicate.data == buf.data
    assert duplicate.read_index == 0


def test_hex_string_matches_content():
    buf = ConnBuffer(b"\x01\xff")
    assert buf.hex_string() == b"\x01\xff".hex()