"""Local file openers with direction-annotated errors."""

import logging
from typing import BinaryIO

from ..core.model import StreamOpenError

logger = logging.getLogger(__name__)


def _open(path: str, mode: str, direction: str) -> BinaryIO:
    try:
        f = open(path, mode)
    except OSError as e:
        raise StreamOpenError(direction, path, e) from e
    logger.debug("Opened %s file %r", direction, path)
    return f


def open_local_input(path: str) -> BinaryIO:
    """Open ``path`` for binary reading."""
    return _open(path, "rb", "input")


def open_local_output(path: str) -> BinaryIO:
    """Create or truncate ``path`` for binary writing."""
    return _open(path, "wb", "output")
