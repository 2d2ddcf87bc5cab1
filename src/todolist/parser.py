"""Turn a raw input line into a Message."""

import re

from .messages import (
    Add,
    Complete,
    Delete,
    InvalidInput,
    Message,
    Quit,
    SaveRequested,
)

INDEX_RE = re.compile(r"[+-]?[0-9]+")


def parse(text: str) -> Message:
    """Parse one line typed at the prompt.

    Recognised forms are `q`, `s`, `a <name>`, `d <n>` and `c <n>`, where
    `<n>` is the 1-based number shown next to the item. Anything else,
    including a non-numeric `<n>`, gives InvalidInput.
    """
    if text == "q":
        return Quit()
    if text == "s":
        return SaveRequested()

    cmd, sep, rest = text.partition(" ")
    if not sep:
        return InvalidInput()
    cmd, value = cmd.strip(), rest.strip()

    if cmd == "a":
        return Add(value)
    if cmd in ("d", "c"):
        if not INDEX_RE.fullmatch(value):
            return InvalidInput()
        index = int(value) - 1
        return Delete(index) if cmd == "d" else Complete(index)
    return InvalidInput()
