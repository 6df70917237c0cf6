import collections.abc
import logging
import subprocess
import typing

from .commontypes import OutputEncodingInvalid, ToolFailed, ToolUnavailable

logger = logging.getLogger(__name__)

XMODMAP_COMMAND = ("xmodmap", "-pke")
XRDB_COMMAND = ("xrdb", "-query")


@typing.runtime_checkable
class TextSource(typing.Protocol):
    def __call__(self) -> str:
        ...


def run_tool(argv: collections.abc.Sequence[str]) -> str:
    """Run an external query tool and return everything it wrote to stdout.

    Blocks until the tool exits. Raises ToolUnavailable if it cannot be launched, ToolFailed
    on a non-zero exit status, and OutputEncodingInvalid if stdout is not UTF-8.
    """
    tool = argv[0]
    logger.debug("Running %r", argv)
    try:
        proc = subprocess.run(list(argv), stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as exc:
        raise ToolUnavailable(tool) from exc
    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace")
        logger.debug("%s exited with status %d", tool, proc.returncode)
        raise ToolFailed(tool, proc.returncode, stderr)
    try:
        output = proc.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputEncodingInvalid(tool) from exc
    logger.debug("%s produced %d bytes", tool, len(proc.stdout))
    return output


class ToolSource:
    def __init__(self, argv: collections.abc.Sequence[str]):
        if not argv:
            raise ValueError("Tool command must not be empty")
        self.argv = tuple(argv)

    def __call__(self) -> str:
        return run_tool(self.argv)

    def __repr__(self):
        return f"ToolSource({self.argv!r})"


def xmodmap_source() -> ToolSource:
    return ToolSource(XMODMAP_COMMAND)


def xrdb_source() -> ToolSource:
    return ToolSource(XRDB_COMMAND)
