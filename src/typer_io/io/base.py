"""Base protocols and shared constants for the I/O layer."""

from typing import Protocol, runtime_checkable


COPY_BUFSIZE = 64 * 1024  # 64 KB


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for readable byte streams returned by ``Input.open``."""

    def read(self, size: int = -1) -> bytes:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for writable byte streams returned by ``Output.open``."""

    def write(self, data: bytes) -> int:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...
