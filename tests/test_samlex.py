"""
samlex CLI Tests
================

Tests for the samlex token dump tool, run through click's CliRunner.
"""

import pytest
from click.testing import CliRunner

from samlang import __version__
from samlang.cli.errors import ExitCode, handle_cli_exception
from samlang.errors import EmptySourceError, SourceReadError
from samlang.cli.samlex import format_token_line, main
from samlang.lexer.tokens import Token, TokenKind


@pytest.fixture
def runner():
    return CliRunner()


def write_source(tmp_path, text: str, name: str = "prog.sam"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestSamlexCLI:
    """Tests for the samlex command."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Print the tokens of a SAM source file" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_dump_tokens(self, runner, tmp_path):
        """Tokens are printed one per line in the dump format."""
        path = write_source(tmp_path, "var x := 3 + 4.5; # add\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "token_type:(var) line..1",
            "token_type:(Identifier(x)) line..1",
            "token_type:(:=) line..1",
            "token_type:(IntValue(3)) line..1",
            "token_type:(+) line..1",
            "token_type:(RealValue(4.5)) line..1",
            "token_type:(;) line..1",
            "token_type:(EOF) line..2",
        ]

    def test_count(self, runner, tmp_path):
        path = write_source(tmp_path, "a b\nc\n")

        result = runner.invoke(main, ["--count", str(path)])

        assert result.exit_code == 0
        assert result.output.strip() == "4 tokens (EOF at line 3)"

    def test_encoding_option(self, runner, tmp_path):
        path = tmp_path / "latin.sam"
        path.write_bytes(b'"caf\xe9"\n')

        result = runner.invoke(main, ["--encoding", "latin-1", str(path)])

        assert result.exit_code == 0
        assert "token_type:(String(café)) line..1" in result.output

    def test_lexical_error(self, runner, tmp_path):
        """Lexical errors are reported with their location and exit 1."""
        path = write_source(tmp_path, "x := $;\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "token_type:(Identifier(x)) line..1" in result.output
        assert f"{path}:1:6: error: invalid character '$'" in result.output

    def test_very_long_int_is_lexical_error(self, runner, tmp_path):
        path = write_source(tmp_path, "x := " + "9" * 5000 + ";\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "out of range" in result.output

    def test_unreadable_source(self, runner, tmp_path):
        path = tmp_path / "bad.sam"
        path.write_bytes(b"\xff\xfe\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "Read error:" in result.output

    def test_empty_file(self, runner, tmp_path):
        path = write_source(tmp_path, "")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "empty" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.sam")])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_verbose_runs(self, runner, tmp_path):
        path = write_source(tmp_path, "x\n")

        result = runner.invoke(main, ["-v", str(path)])

        assert result.exit_code == 0
        assert "token_type:(Identifier(x)) line..1" in result.output


class TestFormatTokenLine:
    """Tests for the dump line format."""

    def test_keyword(self):
        assert format_token_line(Token(TokenKind.WHILE, None, 4)) == "token_type:(while) line..4"

    def test_string(self):
        token = Token(TokenKind.STRING_VALUE, "hi", 2)
        assert format_token_line(token) == "token_type:(String(hi)) line..2"


class TestHandleCliException:
    """Tests for the exit codes chosen by handle_cli_exception()."""

    def test_read_error_exits_build_error(self):
        error = SourceReadError("prog.sam", None, "Permission denied")
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error, error_type="Read")
        assert exc_info.value.code == ExitCode.BUILD_ERROR

    def test_empty_source_exits_invalid_args(self):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(EmptySourceError("prog.sam"))
        assert exc_info.value.code == ExitCode.INVALID_ARGS

    def test_unexpected_exception_exits_internal_error(self):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(ValueError("boom"))
        assert exc_info.value.code == ExitCode.INTERNAL_ERROR
