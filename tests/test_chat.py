import re

import pytest

from craftserve.chat import ChatColor, translate, translate_console

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return _ANSI.sub("", text)


def test_translate_replaces_shorthand():
    assert translate("&cHello") == "\u00a7cHello"


def test_translate_leaves_trailing_ampersand():
    assert translate("ab&") == "ab&"


def test_translate_plain_text_unchanged():
    assert translate("nothing to do") == "nothing to do"


def test_translate_unknown_code_falls_back_to_dark_red():
    assert translate("&zX") == str(ChatColor.DARK_RED) + "X"


@pytest.mark.parametrize("color", list(ChatColor))
def test_every_color_translates_from_shorthand(color):
    char = color.code.chat[1]
    assert translate("&" + char) == color.code.chat


def test_str_is_chat_code():
    assert translate("&6") == str(ChatColor.GOLD)
    assert translate("&6") == "\u00a76"


def test_on_wraps_with_reset():
    assert ChatColor.RED.on("hi") == "\u00a7chi\u00a7r"


def test_on_empty_text():
    assert ChatColor.BLUE.on("") == ""


def test_console_plain_text_unchanged():
    assert translate_console("plain") == "plain"


def test_console_strips_to_visible_text():
    out = translate_console("&cRed &lBold")
    assert _strip(out) == "Red Bold"
    assert "\u00a7" not in out


def test_console_color_resets_format_list():
    assert translate_console("&l&cX") == "\x1b[31mX\x1b[0m"


def test_console_trailing_section_sign_kept():
    assert _strip(translate_console("a\u00a7")) == "a\u00a7"