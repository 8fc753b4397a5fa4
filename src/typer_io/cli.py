"""Example programs: copy bytes from an input to an output."""

import shutil

import typer

from .core.model import StreamOpenError
from .core.selector import Input, Output
from .io.base import COPY_BUFSIZE, ByteSink, ByteSource
from .options import (
    InputArgument, InputOption, InputOutput, OutputArgument, OutputOption, input_output,
)

app = typer.Typer(add_completion=False, help="Copy --input to --output.")
custom_app = typer.Typer(add_completion=False, help="Copy --in to --out.")
positional_app = typer.Typer(add_completion=False, help="Copy <input> to <output>.")


def copy_stream(src: ByteSource, dst: ByteSink) -> None:
    """Copy every byte of ``src`` into ``dst`` and close both.

    Opening the output truncates its file, so copying a file onto itself
    loses the data before it is read.
    """
    try:
        shutil.copyfileobj(src, dst, COPY_BUFSIZE)
        dst.flush()
    finally:
        src.close()
        dst.close()


def run_copy(input: Input, output: Output) -> None:
    typer.echo(f"reading from {input!r}", err=True)
    typer.echo(f"writing to {output!r}", err=True)
    try:
        src, dst = InputOutput(input, output).open()
    except StreamOpenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    copy_stream(src, dst)


@app.command()
@input_output
def copy(io: InputOutput):
    """Copy --input to --output (both default to the standard streams).

    Do not pass the same file as both input and output: the output is
    truncated before anything is read.
    """
    run_copy(io.input, io.output)


@custom_app.command()
def custom(
    input: Input = InputOption("--in", default=...),
    output: Output = OutputOption("--out", default=...),
):
    """Copy --in to --out."""
    run_copy(input, output)


@positional_app.command()
def positional(
    input: Input = InputArgument(...),
    output: Output = OutputArgument(...),
):
    """Copy <input> to <output>; use '-' for the standard streams."""
    run_copy(input, output)


if __name__ == "__main__":
    app()
