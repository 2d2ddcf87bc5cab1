"""todolist - terminal todo list built on a model/update/interpret loop."""

__version__ = "1.0.0"

from .models import Active, Completed, Listing, Failed, Ok, Err, DEFAULT_FILE
from .core import init, update
from .parser import parse
from .storage import encode, decode
from .interpreter import interpret, format_list

__all__ = [
    "Active",
    "Completed",
    "Listing",
    "Failed",
    "Ok",
    "Err",
    "DEFAULT_FILE",
    "init",
    "update",
    "parse",
    "encode",
    "decode",
    "interpret",
    "format_list",
]
