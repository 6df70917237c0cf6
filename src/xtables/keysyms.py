# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

# Values are the X11 keysym numbers from X11/keysymdef.h. The Latin-1 keysyms
# share their numbers with the ASCII codepoints, which is what makes the
# character conversions at the bottom of this module work.


class Modifier(enum.Enum):
    # One member per keysym column in the output of xmodmap -pke, in column order.
    KEY = enum.auto()
    SHIFT = enum.auto()
    MODE_SWITCH = enum.auto()
    MODE_SWITCH_SHIFT = enum.auto()
    ISO_LEVEL3_SHIFT = enum.auto()
    ISO_LEVEL3_SHIFT_SHIFT = enum.auto()


class KeySym(enum.IntEnum):
    KEY_NONE = 0x0000
    KEY_SPACE = 0x0020
    KEY_EXCLAM = 0x0021
    KEY_QUOTEDBL = 0x0022
    KEY_NUMBERSIGN = 0x0023
    KEY_DOLLAR = 0x0024
    KEY_PERCENT = 0x0025
    KEY_AMPERSAND = 0x0026
    KEY_APOSTROPHE = 0x0027
    KEY_PARENLEFT = 0x0028
    KEY_PARENRIGHT = 0x0029
    KEY_ASTERISK = 0x002A
    KEY_PLUS = 0x002B
    KEY_COMMA = 0x002C
    KEY_MINUS = 0x002D
    KEY_PERIOD = 0x002E
    KEY_SLASH = 0x002F
    KEY_0 = 0x0030
    KEY_1 = 0x0031
    KEY_2 = 0x0032
    KEY_3 = 0x0033
    KEY_4 = 0x0034
    KEY_5 = 0x0035
    KEY_6 = 0x0036
    KEY_7 = 0x0037
    KEY_8 = 0x0038
    KEY_9 = 0x0039
    KEY_COLON = 0x003A
    KEY_SEMICOLON = 0x003B
    KEY_LESS = 0x003C
    KEY_EQUAL = 0x003D
    KEY_GREATER = 0x003E
    KEY_QUESTION = 0x003F
    KEY_AT = 0x0040
    KEY_A = 0x0041
    KEY_B = 0x0042
    KEY_C = 0x0043
    KEY_D = 0x0044
    KEY_E = 0x0045
    KEY_F = 0x0046
    KEY_G = 0x0047
    KEY_H = 0x0048
    KEY_I = 0x0049
    KEY_J = 0x004A
    KEY_K = 0x004B
    KEY_L = 0x004C
    KEY_M = 0x004D
    KEY_N = 0x004E
    KEY_O = 0x004F
    KEY_P = 0x0050
    KEY_Q = 0x0051
    KEY_R = 0x0052
    KEY_S = 0x0053
    KEY_T = 0x0054
    KEY_U = 0x0055
    KEY_V = 0x0056
    KEY_W = 0x0057
    KEY_X = 0x0058
    KEY_Y = 0x0059
    KEY_Z = 0x005A
    KEY_BRACKETLEFT = 0x005B
    KEY_BACKSLASH = 0x005C
    KEY_BRACKETRIGHT = 0x005D
    KEY_ASCIICIRCUM = 0x005E
    KEY_UNDERSCORE = 0x005F
    KEY_GRAVE = 0x0060
    KEY_a = 0x0061
    KEY_b = 0x0062
    KEY_c = 0x0063
    KEY_d = 0x0064
    KEY_e = 0x0065
    KEY_f = 0x0066
    KEY_g = 0x0067
    KEY_h = 0x0068
    KEY_i = 0x0069
    KEY_j = 0x006A
    KEY_k = 0x006B
    KEY_l = 0x006C
    KEY_m = 0x006D
    KEY_n = 0x006E
    KEY_o = 0x006F
    KEY_p = 0x0070
    KEY_q = 0x0071
    KEY_r = 0x0072
    KEY_s = 0x0073
    KEY_t = 0x0074
    KEY_u = 0x0075
    KEY_v = 0x0076
    KEY_w = 0x0077
    KEY_x = 0x0078
    KEY_y = 0x0079
    KEY_z = 0x007A
    KEY_BRACELEFT = 0x007B
    KEY_BAR = 0x007C
    KEY_BRACERIGHT = 0x007D
    KEY_ASCIITILDE = 0x007E

    # TTY function keys
    KEY_BACKSPACE = 0xFF08
    KEY_TAB = 0xFF09
    KEY_RETURN = 0xFF0D
    KEY_ESCAPE = 0xFF1B

    KEY_F1 = 0xFFBE
    KEY_F2 = 0xFFBF
    KEY_F3 = 0xFFC0
    KEY_F4 = 0xFFC1
    KEY_F5 = 0xFFC2
    KEY_F6 = 0xFFC3
    KEY_F7 = 0xFFC4
    KEY_F8 = 0xFFC5
    KEY_F9 = 0xFFC6
    KEY_F10 = 0xFFC7
    KEY_F11 = 0xFFC8
    KEY_F12 = 0xFFC9


ALL_LOWER_CASE = tuple(KeySym(c) for c in range(ord("a"), ord("z") + 1))
ALL_UPPER_CASE = tuple(KeySym(c) for c in range(ord("A"), ord("Z") + 1))

# xmodmap spells most keysyms as the member name minus the prefix; these are the exceptions.
_SPECIAL_NAMES = {
    KeySym.KEY_NONE: "NoSymbol",
    KeySym.KEY_BACKSPACE: "BackSpace",
    KeySym.KEY_TAB: "Tab",
    KeySym.KEY_RETURN: "Return",
    KeySym.KEY_ESCAPE: "Escape",
}


def _xmodmap_name(keysym: KeySym) -> str:
    if keysym in _SPECIAL_NAMES:
        return _SPECIAL_NAMES[keysym]
    name = keysym.name.removeprefix("KEY_")
    # single letters, digits and function keys keep their case
    if len(name) == 1 or (name.startswith("F") and name[1:].isdigit()):
        return name
    return name.lower()


NAMES_TO_KEYSYMS: dict[str, KeySym] = {_xmodmap_name(k): k for k in KeySym}
KEYSYMS_TO_NAMES: dict[KeySym, str] = {v: k for k, v in NAMES_TO_KEYSYMS.items()}


def keysym_from_name(name: str) -> KeySym:
    "Look up a keysym by the name xmodmap prints for it. Unknown names map to KEY_NONE."
    return NAMES_TO_KEYSYMS.get(name, KeySym.KEY_NONE)


def keysym_name(keysym: KeySym) -> str:
    return KEYSYMS_TO_NAMES[keysym]


def is_printable(keysym: KeySym) -> bool:
    return KeySym.KEY_SPACE <= keysym <= KeySym.KEY_ASCIITILDE


def keysym_from_char(ch: str) -> KeySym:
    """Convert a printable ASCII character into its keysym.

    Raises ValueError for anything other than a single character between space and tilde.
    """
    if len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    codepoint = ord(ch)
    if not (KeySym.KEY_SPACE <= codepoint <= KeySym.KEY_ASCIITILDE):
        raise ValueError(f"No keysym for character {ch!r}")
    return KeySym(codepoint)


def keysym_to_char(keysym: KeySym) -> str:
    """Convert a keysym into the character it types.

    Only space, letters, digits and ASCII punctuation have characters; function keys,
    control keys such as Tab and Return, and KEY_NONE raise ValueError.
    """
    if not is_printable(keysym):
        raise ValueError(f"{keysym!r} has no printable character")
    return chr(keysym)
