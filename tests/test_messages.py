import json

from craftserve.chat import ChatColor
from craftserve.messages import Message


def test_plain_json():
    assert Message("hi").as_json() == '{"text":"hi"}'


def test_styled_json_fields():
    message = Message("hi").set_color(ChatColor.RED).set_bold(True)
    decoded = json.loads(message.as_json())
    assert decoded == {"text": "hi", "color": "red", "bold": True}


def test_child_renders_whole_tree():
    root = Message("a")
    child = root.add("b")
    assert child.as_json() == root.as_json()
    assert json.loads(root.as_json())["extra"][0]["text"] == "b"


def test_empty_extra_omitted():
    assert "extra" not in json.loads(Message("x").as_json())


def test_html_characters_escaped_and_round_trip():
    encoded = Message("<&>").as_json()
    assert "<" not in encoded and "&" not in encoded
    assert json.loads(encoded)["text"] == "<&>"


def test_as_text():
    message = Message("a").set_color(ChatColor.RED).set_bold(True)
    message.add("b")
    assert message.as_text() == "\u00a7c\u00a7lab"


def test_as_text_from_child_uses_root():
    root = Message("x")
    child = root.add("y")
    assert child.as_text() == root.as_text() == "xy"


def test_reset_turns_off_styles():
    message = Message("m").set_bold(True).set_italic(False)
    child = message.reset()
    assert child.color is ChatColor.RESET
    assert child.bold is False
    assert child.italic is None
    assert child.text == ""
    assert message.extra == [child]


def test_str_is_json():
    message = Message("z").set_underlined(True)
    assert str(message) == message.as_json()


def test_setters_chain_return_same_object():
    message = Message("q")
    assert message.set_strikethrough(True).set_obfuscated(True) is message
    decoded = json.loads(message.as_json())
    assert decoded["strikethrough"] is True and decoded["obfuscated"] is True