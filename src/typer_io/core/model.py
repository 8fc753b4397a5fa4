from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import sys
from typing import TextIO, Union


STDIO = "-"             # conventional "use the standard stream" marker
STDIN = "<stdin>"
STDOUT = "<stdout>"


def _isatty(stream: TextIO | None) -> bool:
    if stream is None:  # pythonw, detached daemons
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class FileStream:
    name: str

    @property
    def is_tty(self) -> bool:
        return False

    @property
    def path(self) -> Path:
        return Path(self.name)

    @property
    def display_name(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class StdinStream:
    tty: bool

    @classmethod
    def detect(cls) -> StdinStream:
        return cls(tty=_isatty(sys.stdin))

    @property
    def is_tty(self) -> bool:
        return self.tty

    @property
    def path(self) -> None:
        return None

    @property
    def display_name(self) -> str:
        return STDIN


@dataclass(frozen=True, slots=True)
class StdoutStream:
    tty: bool

    @classmethod
    def detect(cls) -> StdoutStream:
        return cls(tty=_isatty(sys.stdout))

    @property
    def is_tty(self) -> bool:
        return self.tty

    @property
    def path(self) -> None:
        return None

    @property
    def display_name(self) -> str:
        return STDOUT


Stream = Union[FileStream, StdinStream, StdoutStream]


class StreamOpenError(OSError):
    """Raised when an input or output file cannot be opened."""

    def __init__(self, direction: str, path: str, cause: OSError):
        super().__init__(f"Failed to open {direction} file `{path}`. Cause: {cause}")
        self.direction = direction
        self.path = path
        self.errno = cause.errno
