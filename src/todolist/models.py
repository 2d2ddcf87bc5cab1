"""Data models and constants for the todo list."""

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar, Union

DEFAULT_FILE = "todos.csv"

T = TypeVar("T")


@dataclass(frozen=True)
class Active:
    """A todo that still needs doing."""

    name: str


@dataclass(frozen=True)
class Completed:
    """A todo that has been marked as completed."""

    name: str


Todo = Union[Active, Completed]


@dataclass(frozen=True)
class Listing:
    """Normal screen: the list plus an optional one-shot status line."""

    items: Tuple[Todo, ...] = ()
    status: Optional[str] = None


@dataclass(frozen=True)
class Failed:
    """Error screen: shows `message` until the next successful action."""

    message: str
    items: Tuple[Todo, ...] = ()


State = Union[Listing, Failed]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: str


Result = Union[Ok[T], Err]
