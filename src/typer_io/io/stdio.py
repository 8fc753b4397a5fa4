"""Locked handles over the process standard streams."""

import io
import logging
import sys
import threading
from typing import BinaryIO

from ..core.model import STDIN, STDOUT

logger = logging.getLogger(__name__)


class StreamLock:
    """Exclusive lock on one process stream.

    Re-entrant for the owning thread, so a single thread may open the same
    stream twice without deadlocking itself. Unlike ``threading.RLock`` any
    thread may release it, so a handle can be closed wherever it ends up.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._owner: int | None = None
        self._count = 0

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        me = threading.get_ident()
        with self._cond:
            def free() -> bool:
                return self._count == 0 or self._owner == me

            if not free():
                if not blocking:
                    return False
                if not self._cond.wait_for(free, None if timeout < 0 else timeout):
                    return False
            self._owner = me
            self._count += 1
            return True

    def release(self) -> None:
        with self._cond:
            if self._count == 0:
                raise RuntimeError("release of an unheld stream lock")
            self._count -= 1
            if self._count == 0:
                self._owner = None
                self._cond.notify_all()

    def locked(self) -> bool:
        with self._cond:
            return self._count > 0


# One lock per process stream.
_STDIN_LOCK = StreamLock()
_STDOUT_LOCK = StreamLock()


class StdioHandle(io.RawIOBase):
    """Exclusive byte handle over ``sys.stdin.buffer`` or ``sys.stdout.buffer``.

    The stream lock is taken on construction and released on ``close()``.
    Closing the handle never closes the underlying process stream.
    """

    def __init__(self, stream: BinaryIO, lock: StreamLock, *, name: str, writable: bool):
        super().__init__()
        lock.acquire()
        self._stream = stream
        self._lock = lock
        self._writable = writable
        self.name = name

    def readable(self) -> bool:
        return not self._writable

    def writable(self) -> bool:
        return self._writable

    def isatty(self) -> bool:
        try:
            return self._stream.isatty()
        except (AttributeError, ValueError):
            return False

    def fileno(self) -> int:
        return self._stream.fileno()

    def read(self, size: int = -1) -> bytes:
        self._check_readable()
        return self._stream.read(size)

    def readall(self) -> bytes:
        return self.read()

    def readinto(self, buffer) -> int:
        self._check_readable()
        return self._stream.readinto(buffer)

    def write(self, data) -> int:
        if not self._writable:
            raise io.UnsupportedOperation("not writable")
        if self.closed:
            raise ValueError("I/O operation on closed handle")
        return self._stream.write(data)

    def flush(self) -> None:
        if self._writable and not self.closed:
            self._stream.flush()

    def close(self) -> None:
        if self.closed:
            return
        try:
            super().close()  # flushes
        finally:
            self._lock.release()
            logger.debug("Released %s", self.name)

    def _check_readable(self) -> None:
        if self._writable:
            raise io.UnsupportedOperation("not readable")
        if self.closed:
            raise ValueError("I/O operation on closed handle")


def open_stdin() -> StdioHandle:
    """Lock the process standard input and return it as a byte stream."""
    handle = StdioHandle(sys.stdin.buffer, _STDIN_LOCK, name=STDIN, writable=False)
    logger.debug("Acquired %s", STDIN)
    return handle


def open_stdout() -> StdioHandle:
    """Lock the process standard output and return it as a byte stream."""
    # keep text already written through sys.stdout ahead of our bytes
    sys.stdout.flush()
    handle = StdioHandle(sys.stdout.buffer, _STDOUT_LOCK, name=STDOUT, writable=True)
    logger.debug("Acquired %s", STDOUT)
    return handle
