"""Run one command against the terminal or the file store."""

import logging
from typing import Sequence, assert_never

from .messages import (
    Command,
    Fetch,
    Loaded,
    Message,
    NoOp,
    Persist,
    Quit,
    Saved,
)
from .models import Active, Completed, Err, Failed, Listing, State, Todo
from .parser import parse
from .storage import decode, encode
from .terminal import FileStore, Terminal

logger = logging.getLogger(__name__)

PROMPT = ">>> "

USAGE = "\n".join(
    [
        "usage:",
        " 'a <name>' adds a new todo",
        " 'd <id>' deletes a todo",
        " 'c <id>' marks todo as completed",
        " 's' to save",
        " 'q' to quit",
    ]
)


def format_list(items: Sequence[Todo]) -> str:
    """Number items from 1 in display order."""
    if not items:
        return "no todos"
    lines = []
    for i, t in enumerate(items, start=1):
        match t:
            case Active(name=name):
                lines.append(f"{i}. [active] {name}")
            case Completed(name=name):
                lines.append(f"{i}. [completed] {name}")
            case _:
                assert_never(t)
    return "\n".join(lines)


def read_input(terminal: Terminal) -> Message:
    """Prompt for a line and parse it. End of input counts as quitting."""
    try:
        terminal.put_str(PROMPT)
        line = terminal.read_line()
    except (EOFError, KeyboardInterrupt):
        logger.info("input closed, quitting")
        line = "q"
    except OSError as exc:
        logger.warning("terminal failed: %s", exc)
        line = "q"
    return parse(line)


def render(state: State, terminal: Terminal) -> None:
    match state:
        case Listing(items=items, status=status):
            terminal.put_line(f"\n## TODOS\n\n{format_list(items)}\n")
            terminal.put_line(USAGE)
            if status is not None:
                terminal.put_line(f"[{status}]")
        case Failed(message=message):
            terminal.put_line(f"\n[{message}]")
        case _:
            assert_never(state)


def interpret(
    state: State, cmd: Command, terminal: Terminal, files: FileStore
) -> Message:
    """Perform `cmd` and report what happened as a Message.

    File failures come back inside Loaded/Saved and a broken terminal
    ends the session with Quit; nothing is raised.
    """
    logger.debug("running %s", type(cmd).__name__)
    match cmd:
        case NoOp():
            try:
                render(state, terminal)
            except OSError as exc:
                logger.warning("terminal failed: %s", exc)
                return Quit()
            return read_input(terminal)
        case Persist(file_name=file_name, items=items):
            return Saved(files.write(file_name, encode(items)))
        case Fetch(file_name=file_name):
            result = files.read_lines(file_name)
            if isinstance(result, Err):
                return Loaded(result)
            return Loaded(decode(result.value))
        case _:
            assert_never(cmd)
