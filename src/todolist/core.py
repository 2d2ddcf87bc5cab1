"""Todo list state transitions (pure functions, no I/O)."""

from typing import Tuple, assert_never

from .messages import (
    Add,
    Command,
    Complete,
    Delete,
    Fetch,
    InvalidInput,
    Loaded,
    Message,
    NoOp,
    Persist,
    Quit,
    SaveRequested,
    Saved,
)
from .models import (
    DEFAULT_FILE,
    Active,
    Completed,
    Err,
    Failed,
    Listing,
    Ok,
    State,
    Todo,
)


def init(file_name: str = DEFAULT_FILE) -> Tuple[State, Command]:
    """Starting state: an empty list, with a request to load the file."""
    return Listing(), Fetch(file_name)


def items_of(state: State) -> Tuple[Todo, ...]:
    """Return the list carried by either screen state."""
    match state:
        case Listing(items=items) | Failed(items=items):
            return items
        case _:
            assert_never(state)


def delete_at(items: Tuple[Todo, ...], index: int) -> Tuple[Todo, ...]:
    """Drop the item at 0-based `index`; out-of-range leaves items as they are."""
    return tuple(t for i, t in enumerate(items) if i != index)


def complete_at(items: Tuple[Todo, ...], index: int) -> Tuple[Todo, ...]:
    """Mark the active item at 0-based `index` as completed."""
    return tuple(
        Completed(t.name) if i == index and isinstance(t, Active) else t
        for i, t in enumerate(items)
    )


def update(
    msg: Message, state: State, file_name: str = DEFAULT_FILE
) -> Tuple[State, Command]:
    """Compute the next state and the command to run next.

    Listing and Failed behave the same for every message: a Failed state's
    error is dropped and its list carried over. Anything not listed below
    leaves the state unchanged.
    """
    items = items_of(state)

    match msg:
        case Loaded(result=Ok(value=loaded)):
            return Listing(tuple(loaded), "successfully loaded todos from file"), NoOp()
        case Loaded(result=Err(error=err)):
            return Listing(items, f"could not load todos from file. {err}"), NoOp()
        case Add(name=name):
            return Listing(items + (Active(name),), "item added"), NoOp()
        case Delete(index=index):
            return Listing(delete_at(items, index), "item deleted"), NoOp()
        case Complete(index=index):
            return Listing(complete_at(items, index), "marked as completed"), NoOp()
        case InvalidInput():
            return Failed("invalid input", items), NoOp()
        case SaveRequested():
            return state, Persist(file_name, items)
        case Saved(result=Ok()):
            return Listing(items, "saved successfully"), NoOp()
        case Saved(result=Err(error=err)):
            return Failed(err, items), NoOp()
        case Quit():
            return state, NoOp()
        case _:
            return state, NoOp()
