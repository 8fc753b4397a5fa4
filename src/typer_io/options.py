"""Typer integration for Input and Output.

Add ``--input``/``--output`` to a command::

    @app.command()
    @input_output
    def main(io: InputOutput):
        src, dst = io.open()
        shutil.copyfileobj(src, dst)

Or declare one of them with custom flags::

    def main(input: Input = InputOption("--in")):
        typer.echo(f"is tty? {input.is_tty}", err=True)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import functools
import inspect
from typing import Any, BinaryIO, Callable, TypeVar

import typer

from .core.model import STDIN, STDOUT
from .core.selector import Input, Output

F = TypeVar("F", bound=Callable[..., Any])


def InputOption(*param_decls: str, default: Any = STDIN, help: str = "Input file path", **kwargs: Any) -> Any:
    """``typer.Option`` parsing into an ``Input``; defaults to stdin."""
    kwargs.setdefault("metavar", "PATH")
    return typer.Option(default, *param_decls, parser=Input.from_token, help=help, **kwargs)


def OutputOption(*param_decls: str, default: Any = STDOUT, help: str = "Output file path", **kwargs: Any) -> Any:
    """``typer.Option`` parsing into an ``Output``; defaults to stdout."""
    kwargs.setdefault("metavar", "PATH")
    return typer.Option(default, *param_decls, parser=Output.from_token, help=help, **kwargs)


def InputArgument(default: Any = STDIN, *, help: str = "Input file path, or '-' for stdin", **kwargs: Any) -> Any:
    """``typer.Argument`` parsing into an ``Input``."""
    kwargs.setdefault("metavar", "INPUT")
    return typer.Argument(default, parser=Input.from_token, help=help, **kwargs)


def OutputArgument(default: Any = STDOUT, *, help: str = "Output file path, or '-' for stdout", **kwargs: Any) -> Any:
    """``typer.Argument`` parsing into an ``Output``."""
    kwargs.setdefault("metavar", "OUTPUT")
    return typer.Argument(default, parser=Output.from_token, help=help, **kwargs)


@dataclass(frozen=True)
class InputOutput:
    """Combined input and output options."""

    input: Input = field(default_factory=Input)
    output: Output = field(default_factory=Output)

    def open(self) -> tuple[BinaryIO, BinaryIO]:
        """Open input then output; the input is closed again if the output fails."""
        src = self.input.open()
        try:
            dst = self.output.open()
        except BaseException:
            src.close()
            raise
        return src, dst


def input_output(func: F) -> F:
    """Expose a command's ``io: InputOutput`` parameter as ``--input`` and ``--output``.

    Typer reads the rewritten signature, so the command gets two options while
    the function body still receives a single ``InputOutput``.
    """
    sig = inspect.signature(func)
    if "io" not in sig.parameters:
        raise TypeError(f"{func.__name__}() needs an 'io' parameter to use @input_output")

    params = [p for p in sig.parameters.values() if p.name != "io"]
    params += [
        inspect.Parameter("input", inspect.Parameter.KEYWORD_ONLY, default=InputOption("--input"), annotation=Input),
        inspect.Parameter("output", inspect.Parameter.KEYWORD_ONLY, default=OutputOption("--output"), annotation=Output),
    ]

    @functools.wraps(func)
    def wrapper(*args: Any, input: Input, output: Output, **kwargs: Any) -> Any:
        return func(*args, io=InputOutput(input, output), **kwargs)

    annotations = {k: v for k, v in getattr(func, "__annotations__", {}).items() if k != "io"}
    annotations.update(input=Input, output=Output)
    wrapper.__annotations__ = annotations
    wrapper.__signature__ = sig.replace(parameters=params)  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]
