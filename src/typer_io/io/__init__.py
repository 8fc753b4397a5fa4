"""I/O layer for typer-io - raw byte streams over files and stdio."""

# Re-export these for import convenience
from .base import ByteSource, ByteSink, COPY_BUFSIZE
from .local import open_local_input, open_local_output
from .stdio import StdioHandle, open_stdin, open_stdout


def open_input(source=None):
    """Open ``source`` for reading; ``None``, ``-`` or ``<stdin>`` give locked stdin."""
    from ..core.selector import Input

    return Input.from_token(source).open()


def open_output(source=None):
    """Open ``source`` for writing; ``None``, ``-`` or ``<stdout>`` give locked stdout."""
    from ..core.selector import Output

    return Output.from_token(source).open()
