import string

import pytest

from xtables.keysyms import (
    ALL_LOWER_CASE,
    ALL_UPPER_CASE,
    KeySym,
    keysym_from_char,
    keysym_from_name,
    keysym_name,
    keysym_to_char,
)

PRINTABLE = string.ascii_letters + string.digits + string.punctuation + " "


@pytest.mark.parametrize(
    "name,expected",
    (
        ("a", KeySym.KEY_a),
        ("A", KeySym.KEY_A),
        ("7", KeySym.KEY_7),
        ("space", KeySym.KEY_SPACE),
        ("Return", KeySym.KEY_RETURN),
        ("BackSpace", KeySym.KEY_BACKSPACE),
        ("Tab", KeySym.KEY_TAB),
        ("Escape", KeySym.KEY_ESCAPE),
        ("F1", KeySym.KEY_F1),
        ("F12", KeySym.KEY_F12),
        ("exclam", KeySym.KEY_EXCLAM),
        ("quotedbl", KeySym.KEY_QUOTEDBL),
        ("asciicircum", KeySym.KEY_ASCIICIRCUM),
        ("asciitilde", KeySym.KEY_ASCIITILDE),
        ("bracketleft", KeySym.KEY_BRACKETLEFT),
        ("grave", KeySym.KEY_GRAVE),
        ("NoSymbol", KeySym.KEY_NONE),
    ),
)
def test_from_name(name, expected):
    assert keysym_from_name(name) is expected
    assert keysym_name(expected) == name


@pytest.mark.parametrize("name", ("", "ISO_Left_Tab", "XF86AudioMute", "f1", "SPACE", "nosymbol"))
def test_unknown_name(name):
    assert keysym_from_name(name) is KeySym.KEY_NONE


def test_every_keysym_has_a_distinct_name():
    names = [keysym_name(k) for k in KeySym]
    assert len(set(names)) == len(KeySym)
    for keysym in KeySym:
        assert keysym_from_name(keysym_name(keysym)) is keysym


@pytest.mark.parametrize("ch", PRINTABLE)
def test_char_round_trip(ch):
    assert keysym_to_char(keysym_from_char(ch)) == ch


def test_char_values():
    assert keysym_from_char("a") is KeySym.KEY_a
    assert keysym_from_char("~") is KeySym.KEY_ASCIITILDE
    assert keysym_from_char(" ") is KeySym.KEY_SPACE
    assert keysym_to_char(KeySym.KEY_a) == "a"
    assert keysym_to_char(KeySym.KEY_ASCIITILDE) == "~"
    assert keysym_to_char(KeySym.KEY_BACKSLASH) == "\\"


@pytest.mark.parametrize(
    "keysym",
    (KeySym.KEY_NONE, KeySym.KEY_TAB, KeySym.KEY_RETURN, KeySym.KEY_BACKSPACE, KeySym.KEY_ESCAPE, KeySym.KEY_F1),
)
def test_unprintable_keysym(keysym):
    with pytest.raises(ValueError):
        keysym_to_char(keysym)


@pytest.mark.parametrize("ch", ("\t", "\n", "\x08", "\x7f", "é", "", "ab"))
def test_unsupported_char(ch):
    with pytest.raises(ValueError):
        keysym_from_char(ch)


def test_case_tables():
    assert len(ALL_LOWER_CASE) == 26
    assert len(ALL_UPPER_CASE) == 26
    assert "".join(keysym_to_char(k) for k in ALL_LOWER_CASE) == string.ascii_lowercase
    assert "".join(keysym_to_char(k) for k in ALL_UPPER_CASE) == string.ascii_uppercase
