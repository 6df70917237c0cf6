import dataclasses
import json
import operator
import pathlib
import typing

import cattrs

from .keysyms import Modifier
from .keytable import DEFAULT_COLUMNS
from .tools import XMODMAP_COMMAND, XRDB_COMMAND, ToolSource

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(Modifier, operator.attrgetter("name"))
settings_converter.register_structure_hook(Modifier, lambda v, _: Modifier[v])


@dataclasses.dataclass(kw_only=True)
class Settings:
    keymap_command: list[str]
    resource_command: list[str]
    keymap_columns: list[Modifier]

    def keymap_source(self):
        return ToolSource(self.keymap_command)

    def resource_source(self):
        return ToolSource(self.resource_command)

    def save(self, dest: pathlib.Path):
        raw = settings_converter.unstructure(self)
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as f:
            raw = json.load(f)
        defaults = settings_converter.unstructure(cls.default())
        defaults.update(raw)
        return settings_converter.structure(defaults, cls)

    @classmethod
    def default(cls):
        return cls(
            keymap_command=list(XMODMAP_COMMAND),
            resource_command=list(XRDB_COMMAND),
            keymap_columns=list(DEFAULT_COLUMNS),
        )

    @classmethod
    def maybe_load(cls, src: typing.Optional[pathlib.Path]):
        if src is None:
            return cls.default()
        return cls.load(src)
