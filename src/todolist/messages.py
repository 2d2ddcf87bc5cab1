"""Messages fed into `update` and commands it hands back to the interpreter."""

from dataclasses import dataclass
from typing import Tuple, Union

from .models import Result, Todo


@dataclass(frozen=True)
class Loaded:
    result: Result[Tuple[Todo, ...]]


@dataclass(frozen=True)
class Add:
    name: str


@dataclass(frozen=True)
class Delete:
    index: int  # 0-based


@dataclass(frozen=True)
class Complete:
    index: int  # 0-based


@dataclass(frozen=True)
class InvalidInput:
    pass


@dataclass(frozen=True)
class SaveRequested:
    pass


@dataclass(frozen=True)
class Saved:
    result: Result[None]


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[
    Loaded, Add, Delete, Complete, InvalidInput, SaveRequested, Saved, Quit
]


@dataclass(frozen=True)
class NoOp:
    """Nothing to do: render the current state and wait for input."""


@dataclass(frozen=True)
class Persist:
    file_name: str
    items: Tuple[Todo, ...]


@dataclass(frozen=True)
class Fetch:
    file_name: str


Command = Union[NoOp, Persist, Fetch]
