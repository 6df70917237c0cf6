import argparse
import logging
import pathlib
import sys

from .commontypes import XTablesError
from .keysyms import Modifier, keysym_name, keysym_to_char
from .keytable import KeyTable
from .resources import ResourceStore
from .settings import Settings

logger = logging.getLogger(__name__)

# bad settings files surface as ValueError (including JSON errors) or OSError
CLI_ERRORS = (XTablesError, ValueError, OSError)


def _setup_logging(verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _describe(keysym):
    name = keysym_name(keysym)
    try:
        return f"{name} {keysym_to_char(keysym)!r}"
    except ValueError:
        return name


keymap_parser = argparse.ArgumentParser(description="Look up keys in the current X keymap.")
keymap_parser.add_argument("--settings", type=pathlib.Path)
keymap_parser.add_argument("--verbose", "-v", action="store_true")
keymap_lookup_group = keymap_parser.add_mutually_exclusive_group()
keymap_lookup_group.add_argument("--keycode", type=int)
keymap_lookup_group.add_argument("--char")
keymap_parser.add_argument("--modifier", choices=[m.name for m in Modifier], default=Modifier.KEY.name)


def print_keymap(table: KeyTable, args):
    if args.keycode is not None:
        print(_describe(table.get(Modifier[args.modifier], args.keycode)))
    elif args.char is not None:
        key = table.key_for_char(args.char)
        print(f"{key.modifier.name} {key.keycode}")
    else:
        for key, keysym in sorted(table, key=lambda item: (item[0].keycode, item[0].modifier.value)):
            print(f"{key.keycode:3} {key.modifier.name:<22} {_describe(keysym)}")


def keymap_cli(argv=None):
    args = keymap_parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        settings = Settings.maybe_load(args.settings)
        table = KeyTable.from_source(settings.keymap_source(), settings.keymap_columns)
        print_keymap(table, args)
    except CLI_ERRORS as exc:
        logger.debug("Keymap lookup failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


resource_parser = argparse.ArgumentParser(description="Query the X resource database.")
resource_parser.add_argument("--settings", type=pathlib.Path)
resource_parser.add_argument("--verbose", "-v", action="store_true")
resource_parser.add_argument("program")
resource_parser.add_argument("resource", nargs="?")


def resource_cli(argv=None):
    args = resource_parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        settings = Settings.maybe_load(args.settings)
        store = ResourceStore.from_source(settings.resource_source())
    except CLI_ERRORS as exc:
        logger.debug("Resource query failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.resource is None:
        for resource, value in sorted(store.resources(args.program).items()):
            print(f"{resource}: {value}")
        return 0
    value = store.query(args.program, args.resource)
    if value is None:
        print(f"{args.program}.{args.resource} is not set", file=sys.stderr)
        return 1
    print(value)
    return 0
