"""Terminal and file-store interfaces used by the interpreter."""

from typing import List, Protocol

from .models import Result


class Terminal(Protocol):
    def put_str(self, text: str) -> None: ...
    def put_line(self, text: str) -> None: ...
    def read_line(self) -> str:
        """Block for one line of input; raises EOFError at end of input."""
        ...


class FileStore(Protocol):
    def read_lines(self, path: str) -> Result[List[str]]: ...
    def write(self, path: str, text: str) -> Result[None]: ...


class StdTerminal:
    """Line terminal over stdin/stdout."""

    def put_str(self, text: str) -> None:
        print(text, end="", flush=True)

    def put_line(self, text: str) -> None:
        print(text)

    def read_line(self) -> str:
        return input()
