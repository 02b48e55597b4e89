"""Named binary tag value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar


class TagType(IntEnum):
    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


class Nbt:
    """Base of every tag: each kind has a fixed type id and tag name."""

    tag_type: ClassVar[TagType]
    tag_name: ClassVar[str]

    @property
    def type(self) -> TagType:
        return self.tag_type

    @property
    def name(self) -> str:
        return self.tag_name


@dataclass
class NbtEnd(Nbt):
    tag_type: ClassVar[TagType] = TagType.END
    tag_name: ClassVar[str] = "TAG_End"


@dataclass
class NbtByte(Nbt):
    tag_type: ClassVar[TagType] = TagType.BYTE
    tag_name: ClassVar[str] = "TAG_Byte"

    value: int = 0


@dataclass
class NbtShort(Nbt):
    tag_type: ClassVar[TagType] = TagType.SHORT
    tag_name: ClassVar[str] = "TAG_Short"

    value: int = 0


@dataclass
class NbtInt(Nbt):
    tag_type: ClassVar[TagType] = TagType.INT
    tag_name: ClassVar[str] = "TAG_Int"

    value: int = 0


@dataclass
class NbtLong(Nbt):
    tag_type: ClassVar[TagType] = TagType.LONG
    tag_name: ClassVar[str] = "TAG_Long"

    value: int = 0


@dataclass
class NbtFloat(Nbt):
    tag_type: ClassVar[TagType] = TagType.FLOAT
    tag_name: ClassVar[str] = "TAG_Float"

    value: float = 0.0


@dataclass
class NbtDouble(Nbt):
    tag_type: ClassVar[TagType] = TagType.DOUBLE
    tag_name: ClassVar[str] = "TAG_Double"

    value: float = 0.0


@dataclass
class NbtByteArray(Nbt):
    tag_type: ClassVar[TagType] = TagType.BYTE_ARRAY
    tag_name: ClassVar[str] = "TAG_Byte_Array"

    value: list[int] = field(default_factory=list)


@dataclass
class NbtString(Nbt):
    tag_type: ClassVar[TagType] = TagType.STRING
    tag_name: ClassVar[str] = "TAG_String"

    value: str = ""


@dataclass
class NbtList(Nbt):
    """A list whose elements all share the tag type ``n_type``."""

    tag_type: ClassVar[TagType] = TagType.LIST
    tag_name: ClassVar[str] = "TAG_List"

    n_type: TagType = TagType.END
    value: list[Nbt] = field(default_factory=list)


@dataclass
class NbtCompound(Nbt):
    """A mapping of names to tags."""

    tag_type: ClassVar[TagType] = TagType.COMPOUND
    tag_name: ClassVar[str] = "TAG_Compound"

    named: str = ""
    value: dict[str, Nbt] = field(default_factory=dict)

    def set(self, name: str, data: Nbt) -> None:
        self.value[name] = data

    def get(self, name: str) -> Nbt | None:
        """The tag stored under ``name``, or None."""
        return self.value.get(name)


@dataclass
class NbtIntArray(Nbt):
    tag_type: ClassVar[TagType] = TagType.INT_ARRAY
    tag_name: ClassVar[str] = "TAG_Int_Array"

    value: list[int] = field(default_factory=list)


@dataclass
class NbtLongArray(Nbt):
    tag_type: ClassVar[TagType] = TagType.LONG_ARRAY
    tag_name: ClassVar[str] = "TAG_Long_Array"

    value: list[int] = field(default_factory=list)