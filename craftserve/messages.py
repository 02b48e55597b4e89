"""Structured chat messages with styling and JSON / legacy-text rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from craftserve.chat import ChatColor

_STYLE_FLAGS = (
    ("bold", ChatColor.BOLD),
    ("italic", ChatColor.ITALIC),
    ("underlined", ChatColor.UNDERLINE),
    ("strikethrough", ChatColor.STRIKETHROUGH),
    ("obfuscated", ChatColor.OBFUSCATED),
)

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class MessagePosition(IntEnum):
    NORMAL_CHAT = 0
    SYSTEM_CHAT = 1
    HOT_BAR_TEXT = 2


@dataclass(eq=False)
class Message:
    """A chat component; children added with ``add`` form one tree rendered from its root."""

    text: str = ""
    color: ChatColor | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    extra: list[Message] = field(default_factory=list)
    _head: Message | None = field(default=None, init=False, repr=False)

    def set_color(self, code: ChatColor) -> Message:
        self.color = code
        return self

    def set_bold(self, value: bool) -> Message:
        self.bold = value
        return self

    def set_italic(self, value: bool) -> Message:
        self.italic = value
        return self

    def set_underlined(self, value: bool) -> Message:
        self.underlined = value
        return self

    def set_strikethrough(self, value: bool) -> Message:
        self.strikethrough = value
        return self

    def set_obfuscated(self, value: bool) -> Message:
        self.obfuscated = value
        return self

    def add(self, text: str) -> Message:
        """Append a child component holding ``text`` and return the child."""
        child = Message(text)
        child._head = self
        self.extra.append(child)
        return child

    def reset(self) -> Message:
        """Append an empty reset child that also turns off every style set here."""
        child = self.add("").set_color(ChatColor.RESET)
        for name, _ in _STYLE_FLAGS:
            if getattr(self, name) is True:
                setattr(child, name, False)
        return child

    def _root(self) -> Message:
        node = self
        while node._head is not None:
            node = node._head
        return node

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text}
        if self.color is not None:
            out["color"] = self.color.code.json
        for name, _ in _STYLE_FLAGS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        if self.extra:
            out["extra"] = [child._to_dict() for child in self.extra]
        return out

    def as_json(self) -> str:
        """Compact JSON of the whole tree this message belongs to."""
        encoded = json.dumps(self._root()._to_dict(), ensure_ascii=False, separators=(",", ":"))
        for char, escape in _JSON_ESCAPES.items():
            encoded = encoded.replace(char, escape)
        return encoded

    def _as_text(self) -> str:
        parts: list[str] = []
        if self.color is not None:
            parts.append(str(self.color))
        for name, code in _STYLE_FLAGS:
            if getattr(self, name) is True:
                parts.append(str(code))
        parts.append(self.text)
        parts.extend(child._as_text() for child in self.extra)
        return "".join(parts)

    def as_text(self) -> str:
        """Legacy section-sign text of the whole tree this message belongs to."""
        return self._root()._as_text()

    def __str__(self) -> str:
        return self.as_json()