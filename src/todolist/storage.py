"""File I/O and the on-disk format for todo lists.

One todo per line, `a, <name>` for active and `c, <name>` for completed.
Only `\n` separates records; other line-break characters are kept as part
of a name.
"""

import logging
from typing import List, Sequence, Tuple, assert_never

from .models import Active, Completed, Err, Ok, Result, Todo

logger = logging.getLogger(__name__)


def encode(items: Sequence[Todo]) -> str:
    """Serialise todos, one line each, no trailing newline."""
    lines = []
    for t in items:
        match t:
            case Active(name=name):
                lines.append(f"a, {name}")
            case Completed(name=name):
                lines.append(f"c, {name}")
            case _:
                assert_never(t)
    return "\n".join(lines)


def split_records(text: str) -> List[str]:
    """Split file contents on newlines only, ignoring one trailing newline."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def decode(lines: Sequence[str]) -> Result[Tuple[Todo, ...]]:
    """Parse lines written by `encode`.

    Blank lines are skipped and lines with an unknown tag are dropped.
    Empty trailing fields don't count, so `a,` has no name field. A line
    without a name field fails the whole decode; nothing is partially
    loaded.
    """
    todos: List[Todo] = []
    for n, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        fields = line.split(",")
        while fields and fields[-1] == "":
            fields.pop()
        if len(fields) < 2:
            return Err(f"malformed line {n}: {line.strip()!r}")
        tag, name = fields[0].strip(), fields[1].strip()
        if tag == "a":
            todos.append(Active(name))
        elif tag == "c":
            todos.append(Completed(name))
    return Ok(tuple(todos))


def read_lines(path: str) -> Result[List[str]]:
    """Read `path` as a list of lines without line endings."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = split_records(f.read())
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read %s: %s", path, exc)
        return Err(str(exc))
    logger.debug("read %d lines from %s", len(lines), path)
    return Ok(lines)


def write_text(path: str, text: str) -> Result[None]:
    """Replace the contents of `path` with `text`."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        logger.warning("could not write %s: %s", path, exc)
        return Err(str(exc))
    logger.debug("wrote %d bytes to %s", len(text), path)
    return Ok(None)


class LocalFileStore:
    """File store backed by the local filesystem."""

    def read_lines(self, path: str) -> Result[List[str]]:
        return read_lines(path)

    def write(self, path: str, text: str) -> Result[None]:
        return write_text(path, text)
