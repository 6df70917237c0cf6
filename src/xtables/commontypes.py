from __future__ import annotations

import msgspec

from .keysyms import KeySym, Modifier

KeyCode = int

MIN_KEYCODE = 0
MAX_KEYCODE = 255


class Key(msgspec.Struct, frozen=True):
    modifier: Modifier
    keycode: KeyCode

    def as_tuple(self):
        return (self.modifier, self.keycode)


class XTablesError(Exception):
    pass


class ToolUnavailable(XTablesError):
    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Could not run {tool}; is it installed?")


class ToolFailed(XTablesError):
    def __init__(self, tool: str, returncode: int, stderr: str):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{tool} exited with status {returncode}: {stderr.strip()}")


class OutputEncodingInvalid(XTablesError):
    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"{tool} produced output that is not valid UTF-8")


class InvalidFormat(XTablesError):
    def __init__(self, lineno: int, line: str, reason: str):
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid xmodmap format on line {lineno} ({reason}): {line!r}")


class NonExistentKeyCode(XTablesError, LookupError):
    def __init__(self, modifier: Modifier, keycode: KeyCode):
        self.modifier = modifier
        self.keycode = keycode
        super().__init__(f"No keysym for keycode {keycode} with modifier {modifier.name}")


class NonExistentKeySym(XTablesError, LookupError):
    def __init__(self, keysym: KeySym):
        self.keysym = keysym
        super().__init__(f"No key produces {keysym.name}")
