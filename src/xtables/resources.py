from __future__ import annotations

import logging
import typing

import attr

from .tools import TextSource, xrdb_source

logger = logging.getLogger(__name__)

UNIVERSAL_PROGRAM = "*"
COMMENT_PREFIX = "!"


@attr.frozen(kw_only=True)
class ResourceLine:
    program: str
    resource: str
    value: str

    @property
    def is_universal(self):
        return self.program == UNIVERSAL_PROGRAM


def is_comment(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_PREFIX)


def parse_resource_line(line: str) -> typing.Optional[ResourceLine]:
    """Parse one `program.resource: value` line from xrdb -query.

    Returns None for lines that don't look like a resource definition.
    """
    if not line.strip() or is_comment(line):
        return None
    program, dot, rest = line.partition(".")
    if not dot:
        return None
    resource, colon, value = rest.partition(":")
    if not colon:
        return None
    program = program.strip()
    resource = resource.strip()
    if not program or not resource:
        return None
    return ResourceLine(program=program, resource=resource, value=value.strip())


class ResourceStore:
    """Resource values, per program with universal fallbacks.

    A program's own value for a resource always wins over the universal one, no matter which
    was inserted first; the two live in separate maps.
    """

    def __init__(self):
        self._db: dict[str, dict[str, str]] = {}
        self._universal: dict[str, str] = {}

    @classmethod
    def parse(cls, raw: str) -> ResourceStore:
        store = cls()
        skipped = 0
        for line in raw.splitlines():
            parsed = parse_resource_line(line)
            if parsed is None:
                if line.strip() and not is_comment(line):
                    logger.debug("Skipping unrecognized resource line %r", line)
                    skipped += 1
                continue
            if parsed.is_universal:
                store.insert_universal(parsed.resource, parsed.value)
            else:
                store.insert(parsed.program, parsed.resource, parsed.value)
        logger.debug("Loaded resources for %d programs, skipped %d lines", len(store._db), skipped)
        return store

    @classmethod
    def from_source(cls, source: typing.Optional[TextSource] = None) -> ResourceStore:
        if source is None:
            source = xrdb_source()
        return cls.parse(source())

    def _program(self, program: str) -> dict[str, str]:
        if program not in self._db:
            self._db[program] = {}
        return self._db[program]

    def insert(self, program: str, resource: str, value: str):
        self._program(program)[resource] = value

    def insert_universal(self, resource: str, value: str):
        self._universal[resource] = value

    def query(self, program: str, resource: str) -> typing.Optional[str]:
        resources = self._db.get(program)
        if resources is not None and resource in resources:
            return resources[resource]
        return self._universal.get(resource)

    def programs(self) -> list[str]:
        return sorted(self._db)

    def resources(self, program: str) -> dict[str, str]:
        "Everything the given program sees, universal values included."
        merged = dict(self._universal)
        merged.update(self._db.get(program, {}))
        return merged

    def __contains__(self, item):
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self.query(*item) is not None

    def __len__(self):
        return len(self._universal) + sum(len(r) for r in self._db.values())
