"""Tests for the Typer integration."""

import pytest
import typer
from typer.testing import CliRunner

from typer_io import (
    Input, InputArgument, InputOption, InputOutput, Output, OutputArgument, OutputOption, input_output,
)
from typer_io.core.model import FileStream, StdinStream, StdoutStream


def make_app(command) -> typer.Typer:
    app = typer.Typer(add_completion=False)
    app.command()(command)
    return app


class TestOptions:
    """Test InputOption / OutputOption as leaf option types."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def seen(self):
        return {}

    @pytest.fixture
    def app(self, seen):
        def main(
            input: Input = InputOption("--in"),
            output: Output = OutputOption("--out"),
        ):
            seen["input"] = input
            seen["output"] = output
        return make_app(main)

    def test_defaults(self, runner, app, seen):
        """Test options default to the standard streams."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        assert isinstance(seen["input"].stream, StdinStream)
        assert isinstance(seen["output"].stream, StdoutStream)

    def test_file_values(self, runner, app, seen):
        """Test file paths given on the command line."""
        result = runner.invoke(app, ["--in", "a.bin", "--out", "b.bin"])

        assert result.exit_code == 0, result.output
        assert seen["input"].stream == FileStream("a.bin")
        assert seen["output"].stream == FileStream("b.bin")

    def test_dash_values(self, runner, app, seen):
        """Test '-' given on the command line."""
        result = runner.invoke(app, ["--in", "-", "--out", "-"])

        assert result.exit_code == 0, result.output
        assert isinstance(seen["input"].stream, StdinStream)
        assert isinstance(seen["output"].stream, StdoutStream)

    def test_help_renders_stdio_defaults(self, runner, app):
        """Test help shows <stdin>/<stdout> defaults."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "<stdin>" in result.stdout
        assert "<stdout>" in result.stdout
        assert "--in" in result.stdout

    def test_required_option(self, runner, seen):
        """Test a required option without a value is a usage error."""
        def main(input: Input = InputOption("--in", default=...)):
            seen["input"] = input

        result = runner.invoke(make_app(main), [])
        assert result.exit_code == 2
        assert "input" not in seen

    def test_instance_defaults(self, runner, seen):
        """Test already-built selectors work as option defaults."""
        def main(
            input: Input = InputOption("--in", default=Input.from_token("a.bin")),
            output: Output = OutputOption("--out", default=Output()),
        ):
            seen["input"] = input
            seen["output"] = output

        app = make_app(main)

        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        assert seen["input"].stream == FileStream("a.bin")
        assert isinstance(seen["output"].stream, StdoutStream)

        result = runner.invoke(app, ["--in", "b.bin", "--out", "c.bin"])
        assert result.exit_code == 0, result.output
        assert seen["input"].stream == FileStream("b.bin")
        assert seen["output"].stream == FileStream("c.bin")

    def test_from_token_passes_selectors_through(self):
        """Test from_token returns an existing selector unchanged."""
        inp = Input.from_token("a.bin")
        out = Output.from_token("-")
        assert Input.from_token(inp) is inp
        assert Output.from_token(out) is out


class TestArguments:
    """Test positional InputArgument / OutputArgument."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    def test_positional_values(self, runner):
        """Test positional input and output."""
        seen = {}

        def main(input: Input = InputArgument(), output: Output = OutputArgument()):
            seen["input"] = input
            seen["output"] = output

        app = make_app(main)

        result = runner.invoke(app, ["in.bin"])
        assert result.exit_code == 0, result.output
        assert seen["input"].stream == FileStream("in.bin")
        assert isinstance(seen["output"].stream, StdoutStream)

        result = runner.invoke(app, ["-", "out.bin"])
        assert result.exit_code == 0, result.output
        assert isinstance(seen["input"].stream, StdinStream)
        assert seen["output"].stream == FileStream("out.bin")


class TestInputOutput:
    """Test the combined --input/--output declaration."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    def test_decorator_flattens_io(self, runner):
        """Test @input_output adds --input/--output next to other options."""
        seen = {}

        @input_output
        def main(io: InputOutput, name: str = typer.Option("x", "--name")):
            seen["io"] = io
            seen["name"] = name

        result = runner.invoke(make_app(main), ["--input", "a.bin", "--name", "y"])

        assert result.exit_code == 0, result.output
        assert seen["io"].input.stream == FileStream("a.bin")
        assert isinstance(seen["io"].output.stream, StdoutStream)
        assert seen["name"] == "y"

    def test_decorator_help(self, runner):
        """Test @input_output keeps the docstring and shows both options."""
        @input_output
        def main(io: InputOutput):
            """Do the thing."""

        result = runner.invoke(make_app(main), ["--help"])

        assert result.exit_code == 0
        assert "--input" in result.stdout
        assert "--output" in result.stdout
        assert "Do the thing." in result.stdout

    def test_decorator_requires_io_parameter(self):
        """Test @input_output rejects functions without io."""
        def main(other: str):
            pass

        with pytest.raises(TypeError, match="'io' parameter"):
            input_output(main)

    def test_defaults(self):
        """Test the bundle defaults to both standard streams."""
        io = InputOutput()
        assert isinstance(io.input.stream, StdinStream)
        assert isinstance(io.output.stream, StdoutStream)

    def test_open_closes_input_when_output_fails(self, tmp_path, monkeypatch):
        """Test the input is closed if the output cannot open."""
        src_path = tmp_path / "in.bin"
        src_path.write_bytes(b"data")
        io = InputOutput(Input.from_token(str(src_path)), Output.from_token(str(tmp_path / "nope" / "out.bin")))

        opened = []
        real_open = Input.open

        def tracking_open(self):
            f = real_open(self)
            opened.append(f)
            return f

        monkeypatch.setattr(Input, "open", tracking_open)
        with pytest.raises(OSError, match="output"):
            io.open()

        assert opened and opened[0].closed
