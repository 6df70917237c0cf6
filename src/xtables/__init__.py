from .commontypes import (
    InvalidFormat,
    Key,
    KeyCode,
    NonExistentKeyCode,
    NonExistentKeySym,
    OutputEncodingInvalid,
    ToolFailed,
    ToolUnavailable,
    XTablesError,
)
from .keysyms import KeySym, Modifier, keysym_from_char, keysym_to_char
from .keytable import KeyTable
from .resources import ResourceStore

__all__ = [
    "InvalidFormat",
    "Key",
    "KeyCode",
    "KeySym",
    "KeyTable",
    "Modifier",
    "NonExistentKeyCode",
    "NonExistentKeySym",
    "OutputEncodingInvalid",
    "ResourceStore",
    "ToolFailed",
    "ToolUnavailable",
    "XTablesError",
    "keysym_from_char",
    "keysym_to_char",
]
