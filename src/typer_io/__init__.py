"""typer-io - reusable --input/--output options for Typer programs."""

import logging

from .core.model import StreamOpenError, STDIO, STDIN, STDOUT  # re-export
from .core.selector import Input, Output
from .io import open_input, open_output
from .options import (
    InputOutput, InputOption, OutputOption, InputArgument, OutputArgument, input_output,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Input", "Output", "InputOutput",
    "InputOption", "OutputOption", "InputArgument", "OutputArgument", "input_output",
    "open_input", "open_output",
    "StreamOpenError", "STDIO", "STDIN", "STDOUT",
]
