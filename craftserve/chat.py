"""Chat colour codes and their translation to wire and console forms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

COLOR_C_CHAR = "\u00a7"
COLOR_A_CHAR = "&"

# Console attribute numbers (SGR parameters).
_ATTR_RESET = 0
_ATTR_BOLD = 1
_ATTR_ITALIC = 3
_ATTR_UNDERLINE = 4
_ATTR_BLINK_RAPID = 6
_ATTR_CROSSED_OUT = 9


@dataclass(frozen=True)
class ColorCode:
    """The representations of one chat colour or format."""

    chat: str
    motd: str
    json: str
    dec: str = ""
    hex: str = ""


class ChatColor(IntEnum):
    DARK_RED = 0
    RED = 1
    GOLD = 2
    YELLOW = 3
    DARK_GREEN = 4
    GREEN = 5
    DARK_AQUA = 6
    AQUA = 7
    DARK_BLUE = 8
    BLUE = 9
    DARK_PURPLE = 10
    PURPLE = 11
    WHITE = 12
    BLACK = 13
    DARK_GRAY = 14
    GRAY = 15
    OBFUSCATED = 16
    BOLD = 17
    STRIKETHROUGH = 18
    UNDERLINE = 19
    ITALIC = 20
    RESET = 21

    @property
    def code(self) -> ColorCode:
        """All representations of this colour."""
        return _CODES[self]

    def __str__(self) -> str:
        return _CODES[self].chat

    def on(self, text: str) -> str:
        """``text`` wrapped in this colour and followed by a reset; empty text stays empty."""
        if not text:
            return ""
        return f"{self}{text}{ChatColor.RESET}"


_CODES: dict[ChatColor, ColorCode] = {
    ChatColor.DARK_RED: ColorCode("\u00a74", r"\u00A74", "dark_red", "11141120", "AA0000"),
    ChatColor.RED: ColorCode("\u00a7c", r"\u00A7c", "red", "16733525", "FF5555"),
    ChatColor.GOLD: ColorCode("\u00a76", r"\u00A76", "gold", "16755200", "FFAA00"),
    ChatColor.YELLOW: ColorCode("\u00a7e", r"\u00A7e", "yellow", "16777045", "FFFF55"),
    ChatColor.DARK_GREEN: ColorCode("\u00a72", r"\u00A72", "dark_green", "43520", "00AA00"),
    # The green entry carries no JSON name.
    ChatColor.GREEN: ColorCode("\u00a7a", r"\u00A7a", "", "5635925", "55FF55"),
    ChatColor.DARK_AQUA: ColorCode("\u00a73", r"\u00A73", "dark_aqua", "43690", "00AAAA"),
    ChatColor.AQUA: ColorCode("\u00a7b", r"\u00A7b", "aqua", "5636095", "55FFFF"),
    ChatColor.DARK_BLUE: ColorCode("\u00a71", r"\u00A71", "dark_blue", "170", "0000AA"),
    ChatColor.BLUE: ColorCode("\u00a79", r"\u00A79", "blue", "5592575", "5555FF"),
    ChatColor.DARK_PURPLE: ColorCode("\u00a75", r"\u00A75", "dark_purple", "11141290", "AA00AA"),
    ChatColor.PURPLE: ColorCode("\u00a7d", r"\u00A7d", "light_purple", "16733695", "FF55FF"),
    ChatColor.WHITE: ColorCode("\u00a7f", r"\u00A7f", "white", "16777215", "FFFFFF"),
    ChatColor.BLACK: ColorCode("\u00a70", r"\u00A70", "black", "0", "000000"),
    ChatColor.DARK_GRAY: ColorCode("\u00a78", r"\u00A78", "dark_gray", "5592405", "555555"),
    ChatColor.GRAY: ColorCode("\u00a77", r"\u00A77", "gray", "11184810", "AAAAAA"),
    ChatColor.OBFUSCATED: ColorCode("\u00a7k", r"\u00A7k", "obfuscated"),
    ChatColor.BOLD: ColorCode("\u00a7l", r"\u00A7l", "bold"),
    ChatColor.STRIKETHROUGH: ColorCode("\u00a7m", r"\u00A7m", "strikethrough"),
    ChatColor.UNDERLINE: ColorCode("\u00a7n", r"\u00A7n", "underline"),
    ChatColor.ITALIC: ColorCode("\u00a7o", r"\u00A7o", "italic"),
    ChatColor.RESET: ColorCode("\u00a7r", r"\u00A7r", "reset"),
}

_CONSOLE_FORM: dict[ChatColor, int] = {
    ChatColor.DARK_RED: 91,
    ChatColor.RED: 31,
    ChatColor.GOLD: 33,
    ChatColor.YELLOW: 93,
    ChatColor.DARK_GREEN: 32,
    ChatColor.GREEN: 92,
    ChatColor.DARK_AQUA: 36,
    ChatColor.AQUA: 96,
    ChatColor.DARK_BLUE: 34,
    ChatColor.BLUE: 94,
    ChatColor.DARK_PURPLE: 35,
    ChatColor.PURPLE: 95,
    ChatColor.WHITE: 97,
    ChatColor.BLACK: 30,
    ChatColor.DARK_GRAY: 90,
    ChatColor.GRAY: 37,
    ChatColor.RESET: _ATTR_RESET,
    ChatColor.OBFUSCATED: _ATTR_BLINK_RAPID,
    ChatColor.BOLD: _ATTR_BOLD,
    ChatColor.STRIKETHROUGH: _ATTR_CROSSED_OUT,
    ChatColor.UNDERLINE: _ATTR_UNDERLINE,
    ChatColor.ITALIC: _ATTR_ITALIC,
}

_CHAR_TO_CODE: dict[str, ChatColor] = {
    "4": ChatColor.DARK_RED,
    "c": ChatColor.RED,
    "6": ChatColor.GOLD,
    "e": ChatColor.YELLOW,
    "2": ChatColor.DARK_GREEN,
    "a": ChatColor.GREEN,
    "3": ChatColor.DARK_AQUA,
    "b": ChatColor.AQUA,
    "1": ChatColor.DARK_BLUE,
    "9": ChatColor.BLUE,
    "5": ChatColor.DARK_PURPLE,
    "d": ChatColor.PURPLE,
    "f": ChatColor.WHITE,
    "0": ChatColor.BLACK,
    "8": ChatColor.DARK_GRAY,
    "7": ChatColor.GRAY,
    "k": ChatColor.OBFUSCATED,
    "l": ChatColor.BOLD,
    "m": ChatColor.STRIKETHROUGH,
    "n": ChatColor.UNDERLINE,
    "o": ChatColor.ITALIC,
    "r": ChatColor.RESET,
}


def _color_for_char(char: str) -> ChatColor:
    # Unknown code characters fall back to dark red.
    return _CHAR_TO_CODE.get(char, ChatColor.DARK_RED)


def translate(text: str) -> str:
    """Replace ``&x`` colour shorthands with the section-sign chat codes."""
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char != COLOR_A_CHAR or i + 1 >= length:
            out.append(char)
            i += 1
            continue
        out.append(_color_for_char(text[i + 1]).code.chat)
        i += 2
    return "".join(out)


def _styled(forms: list[int], text: str) -> str:
    if not forms:
        return text
    sequence = ";".join(str(form) for form in forms)
    return f"\x1b[{sequence}m{text}\x1b[0m"


def translate_console(text: str) -> str:
    """Turn chat colour codes (``&x`` or section-sign form) into ANSI terminal styling."""
    text = translate(text)

    out: list[str] = []
    pending: list[str] = []
    forms: list[int] = []

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char != COLOR_C_CHAR or i + 1 >= length:
            pending.append(char)
            i += 1
            continue

        form = _CONSOLE_FORM[_color_for_char(text[i + 1])]
        if pending:
            out.append(_styled(forms, "".join(pending)))
            pending.clear()

        i += 2
        if form <= _ATTR_CROSSED_OUT:
            forms.append(form)
        else:
            forms = [form]

    if pending:
        out.append(_styled(forms, "".join(pending)))

    return "".join(out)