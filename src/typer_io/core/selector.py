"""Input and Output selectors: a file path or a standard stream.

Both wrap the same ``Stream`` variants but each accepts only the variants
valid for its direction, so an ``Input`` can never end up holding stdout and
vice versa.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from .model import (
    STDIN, STDIO, STDOUT, FileStream, StdinStream, StdoutStream, Stream,
)
from ..io.local import open_local_input, open_local_output
from ..io.stdio import StdioHandle, open_stdin, open_stdout

logger = logging.getLogger(__name__)

Token = Union[str, os.PathLike, None]


def _classify(token: Token, alias: str, default: type[StdinStream] | type[StdoutStream]) -> Stream:
    if token is None:
        return default.detect()
    text = os.fspath(token)
    if text in ("", STDIO, alias):
        return default.detect()
    return FileStream(text)


@dataclass(frozen=True)
class Input:
    """Either a file or stdin."""

    stream: FileStream | StdinStream = field(default_factory=StdinStream.detect)

    def __post_init__(self) -> None:
        if not isinstance(self.stream, (FileStream, StdinStream)):
            raise TypeError(f"Input cannot hold {self.stream!r}")

    @classmethod
    def from_token(cls, token: Token | Input = None) -> Input:
        """Build from a command-line token; ``None``, ``-`` and ``<stdin>`` select stdin."""
        if isinstance(token, cls):  # defaults already built by the caller
            return token
        stream = _classify(token, STDIN, StdinStream)
        logger.debug("Input token %r -> %r", token, stream)
        return cls(stream)

    def open(self) -> BinaryIO:
        """Open the input stream."""
        stream = self.stream
        if isinstance(stream, FileStream):
            return open_local_input(stream.name)
        if isinstance(stream, StdinStream):
            return open_stdin()
        raise AssertionError(f"{stream!r} is an output")

    def open_stdin(self) -> StdioHandle | None:
        """Open the input as locked stdin, or ``None`` if it is a file."""
        if isinstance(self.stream, StdinStream):
            return open_stdin()
        return None

    def open_file(self) -> BinaryIO | None:
        """Open the input as a file, or ``None`` if it is stdin."""
        if isinstance(self.stream, FileStream):
            return open_local_input(self.stream.name)
        return None

    @property
    def is_tty(self) -> bool:
        return self.stream.is_tty

    @property
    def path(self) -> Path | None:
        return self.stream.path

    @property
    def display_name(self) -> str:
        return self.stream.display_name

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Output:
    """Either a file or stdout."""

    stream: FileStream | StdoutStream = field(default_factory=StdoutStream.detect)

    def __post_init__(self) -> None:
        if not isinstance(self.stream, (FileStream, StdoutStream)):
            raise TypeError(f"Output cannot hold {self.stream!r}")

    @classmethod
    def from_token(cls, token: Token | Output = None) -> Output:
        """Build from a command-line token; ``None``, ``-`` and ``<stdout>`` select stdout."""
        if isinstance(token, cls):
            return token
        stream = _classify(token, STDOUT, StdoutStream)
        logger.debug("Output token %r -> %r", token, stream)
        return cls(stream)

    def open(self) -> BinaryIO:
        """Open the output stream, truncating files."""
        stream = self.stream
        if isinstance(stream, FileStream):
            return open_local_output(stream.name)
        if isinstance(stream, StdoutStream):
            return open_stdout()
        raise AssertionError(f"{stream!r} is an input")

    def open_stdout(self) -> StdioHandle | None:
        """Open the output as locked stdout, or ``None`` if it is a file."""
        if isinstance(self.stream, StdoutStream):
            return open_stdout()
        return None

    def open_file(self) -> BinaryIO | None:
        """Open the output as a file, or ``None`` if it is stdout."""
        if isinstance(self.stream, FileStream):
            return open_local_output(self.stream.name)
        return None

    @property
    def is_tty(self) -> bool:
        return self.stream.is_tty

    @property
    def path(self) -> Path | None:
        return self.stream.path

    @property
    def display_name(self) -> str:
        return self.stream.display_name

    def __str__(self) -> str:
        return self.display_name
