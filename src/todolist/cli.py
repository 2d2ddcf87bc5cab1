"""Command-line entry point and the update/interpret loop."""

import argparse
import logging
import os
from typing import List, Optional

from .core import init, update
from .interpreter import interpret
from .messages import Quit
from .models import DEFAULT_FILE, State
from .storage import LocalFileStore
from .terminal import FileStore, StdTerminal, Terminal

logger = logging.getLogger(__name__)


def run(terminal: Terminal, files: FileStore, file_name: str = DEFAULT_FILE) -> State:
    """Drive the app until the user quits; return the final state.

    Quit is checked before `update`, so it never reaches the transition
    function.
    """
    state, cmd = init(file_name)
    while True:
        msg = interpret(state, cmd, terminal, files)
        if msg == Quit():
            logger.info("quit requested")
            return state
        state, cmd = update(msg, state, file_name)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Attach a single handler to the root logger."""
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    default_file = os.environ.get("TODOLIST_FILE", DEFAULT_FILE)
    p = argparse.ArgumentParser(
        prog="todolist", description="Interactive terminal todo list."
    )
    p.add_argument(
        "-f",
        "--file",
        default=default_file,
        help=f"Path to the todo file (default: {default_file})",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold (default: WARNING)",
    )
    p.add_argument("--log-file", help="Write logs here instead of stderr")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    logger.info("starting with %s", os.path.abspath(args.file))
    run(StdTerminal(), LocalFileStore(), args.file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
