"""Shared fakes for the terminal and file store."""

from typing import Dict, List, Optional

import pytest

from todolist.models import Err, Ok
from todolist.storage import split_records


class FakeTerminal:
    """Replays scripted input lines and records everything written."""

    def __init__(self, inputs: Optional[List[str]] = None):
        self.inputs = list(inputs or [])
        self.output: List[str] = []

    def put_str(self, text: str) -> None:
        self.output.append(text)

    def put_line(self, text: str) -> None:
        self.output.append(text + "\n")

    def read_line(self) -> str:
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    @property
    def text(self) -> str:
        return "".join(self.output)


class FakeFileStore:
    """In-memory files; paths listed in `broken` fail every operation."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files = dict(files or {})
        self.broken: set = set()

    def read_lines(self, path: str):
        if path in self.broken or path not in self.files:
            return Err(f"cannot read {path}")
        return Ok(split_records(self.files[path]))

    def write(self, path: str, text: str):
        if path in self.broken:
            return Err(f"cannot write {path}")
        self.files[path] = text
        return Ok(None)


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def files():
    return FakeFileStore()
