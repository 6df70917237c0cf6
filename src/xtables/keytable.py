# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections
import collections.abc
import logging
import typing

from .commontypes import MAX_KEYCODE, MIN_KEYCODE, InvalidFormat, Key, KeyCode, NonExistentKeyCode, NonExistentKeySym
from .keysyms import KeySym, Modifier, keysym_from_char, keysym_from_name
from .tools import TextSource, xmodmap_source

logger = logging.getLogger(__name__)

# xmodmap -pke always prints at least these two columns.
DEFAULT_COLUMNS = (Modifier.KEY, Modifier.SHIFT)


def parse_keycode_line(lineno: int, line: str) -> tuple[KeyCode, list[str]]:
    "Split one line of xmodmap -pke output into its keycode and keysym names."
    fields = line.split()
    if not fields or fields[0] != "keycode":
        raise InvalidFormat(lineno, line, "expected 'keycode'")
    if len(fields) < 2:
        raise InvalidFormat(lineno, line, "missing keycode")
    digits = fields[1].removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidFormat(lineno, line, "keycode is not a number")
    keycode = int(digits, 10)
    if not (MIN_KEYCODE <= keycode <= MAX_KEYCODE):
        raise InvalidFormat(lineno, line, "keycode out of range")
    if len(fields) < 3 or fields[2] != "=":
        raise InvalidFormat(lineno, line, "expected '='")
    return keycode, fields[3:]


class KeyTable:
    """Conversions between keys (modifier column plus keycode) and keysyms.

    Every parsed cell can be looked up with get(). The reverse direction is lossy: when several
    keys produce the same keysym, reverse() returns whichever was parsed last, and reverse_all()
    returns all of them in parse order.
    """

    def __init__(self):
        self._key_to_keysym: dict[Key, KeySym] = {}
        self._keysym_to_key: dict[KeySym, Key] = {}
        self._keysym_to_keys: collections.defaultdict[KeySym, list[Key]] = collections.defaultdict(list)

    def _add(self, key: Key, keysym: KeySym):
        self._key_to_keysym[key] = keysym
        if keysym is KeySym.KEY_NONE:
            return
        self._keysym_to_key[keysym] = key
        self._keysym_to_keys[keysym].append(key)

    @classmethod
    def parse(cls, raw: str, columns: collections.abc.Sequence[Modifier] = DEFAULT_COLUMNS) -> KeyTable:
        """Build a table from the text printed by xmodmap -pke.

        The keysym names after the '=' fill the given modifier columns in order; missing or unknown
        names become KEY_NONE. A line without the keycode or the '=' raises InvalidFormat and no
        table is built.
        """
        if not columns:
            raise ValueError("At least one modifier column is required")
        table = cls()
        for lineno, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            keycode, names = parse_keycode_line(lineno, line)
            for index, modifier in enumerate(columns):
                keysym = keysym_from_name(names[index]) if index < len(names) else KeySym.KEY_NONE
                table._add(Key(modifier=modifier, keycode=keycode), keysym)
        logger.debug("Parsed %d keymap cells", len(table))
        return table

    @classmethod
    def from_source(
        cls, source: typing.Optional[TextSource] = None, columns: collections.abc.Sequence[Modifier] = DEFAULT_COLUMNS
    ) -> KeyTable:
        if source is None:
            source = xmodmap_source()
        return cls.parse(source(), columns)

    def get(self, modifier: Modifier, keycode: KeyCode) -> KeySym:
        try:
            return self._key_to_keysym[Key(modifier=modifier, keycode=keycode)]
        except KeyError:
            raise NonExistentKeyCode(modifier, keycode) from None

    def lookup(self, modifier: Modifier, keycode: KeyCode) -> typing.Optional[KeySym]:
        return self._key_to_keysym.get(Key(modifier=modifier, keycode=keycode))

    def reverse(self, keysym: KeySym) -> Key:
        try:
            return self._keysym_to_key[keysym]
        except KeyError:
            raise NonExistentKeySym(keysym) from None

    def lookup_key(self, keysym: KeySym) -> typing.Optional[Key]:
        return self._keysym_to_key.get(keysym)

    def reverse_all(self, keysym: KeySym) -> tuple[Key, ...]:
        # .get so that misses don't grow the defaultdict
        return tuple(self._keysym_to_keys.get(keysym, ()))

    def key_for_char(self, ch: str) -> Key:
        return self.reverse(keysym_from_char(ch))

    def keycodes(self) -> list[KeyCode]:
        return sorted({key.keycode for key in self._key_to_keysym})

    def __contains__(self, item):
        if not isinstance(item, Key):
            return False
        return item in self._key_to_keysym

    def __len__(self):
        return len(self._key_to_keysym)

    def __iter__(self) -> collections.abc.Iterator[tuple[Key, KeySym]]:
        return iter(self._key_to_keysym.items())
