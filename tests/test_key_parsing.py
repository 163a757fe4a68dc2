"""Test key name parsing."""

import pytest
from postdeck.keyboard import KeyEvent, KeyType, parse_key


def test_ctrl_letter():
    event = parse_key("ctrl+z")
    assert event.key_type == KeyType.CTRL
    assert event.value == 'z'
    assert event.is_ctrl == True
    assert event.is_shift == False
    assert event.raw == "ctrl+z"


def test_ctrl_shift_letter_is_uppercase():
    event = parse_key("ctrl+shift+z")
    assert event.key_type == KeyType.CTRL
    assert event.value == 'Z'
    assert event.is_shift == True


def test_modifier_order_does_not_matter():
    assert parse_key("shift+ctrl+z").value == parse_key("ctrl+shift+z").value


def test_uppercase_letter_implies_shift():
    event = parse_key("ctrl+Z")
    assert event.value == 'Z'
    assert event.is_shift == True


@pytest.mark.parametrize("name", ["meta+z", "cmd+z", "super+z", "Cmd+z"])
def test_meta_counts_as_ctrl(name):
    event = parse_key(name)
    assert event.key_type == KeyType.CTRL
    assert event.value == 'z'
    assert event.is_meta == True
    assert event.is_ctrl == True


def test_alt_arrow():
    event = parse_key("alt+left")
    assert event.key_type == KeyType.ALT
    assert event.value == 'left'
    assert event.is_alt == True


def test_option_alias():
    assert parse_key("option+right").key_type == KeyType.ALT


def test_special_keys():
    for name in ("left", "enter", "f1", "pagedown"):
        event = parse_key(name)
        assert event.key_type == KeyType.SPECIAL
        assert event.value == name


def test_regular_characters():
    event = parse_key("a")
    assert event == KeyEvent(key_type=KeyType.REGULAR, value='a', raw='a')
    assert parse_key("A").value == 'A'


def test_plus_key():
    assert parse_key("+").value == '+'
    event = parse_key("ctrl++")
    assert event.key_type == KeyType.CTRL
    assert event.value == '+'


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        parse_key("")


def test_unknown_modifier_rejected():
    with pytest.raises(ValueError):
        parse_key("hyper+z")
