"""
String Escape Decoding Tests
============================

Tests for decode_escapes(), which turns a raw string literal body into
its value. The only escape is \\n.
"""

import pytest
from samlang.errors import SourceLocation
from samlang.lexer.errors import (
    InvalidEscapeError,
    LexicalErrorKind,
    UnterminatedStringError,
)
from samlang.lexer.escapes import decode_escapes


class TestDecodeEscapes:
    """Tests for valid string bodies."""

    def test_plain_text_unchanged(self):
        assert decode_escapes("abc") == "abc"

    def test_empty_body(self):
        assert decode_escapes("") == ""

    def test_newline_escape(self):
        """Backslash-n becomes a real newline."""
        assert decode_escapes("a\\nb") == "a\nb"

    def test_only_escape(self):
        assert decode_escapes("\\n") == "\n"

    def test_consecutive_escapes(self):
        assert decode_escapes("\\n\\n") == "\n\n"

    def test_other_characters_pass_through(self):
        assert decode_escapes("# not a comment; x := 1") == "# not a comment; x := 1"


class TestDecodeEscapeErrors:
    """Tests for invalid string bodies."""

    @pytest.mark.parametrize("body, char", [
        ("a\\tb", "t"),
        ("\\\\", "\\"),
        ("\\x41", "x"),
        ("\\ ", " "),
    ])
    def test_invalid_escape(self, body, char):
        """Anything but 'n' after a backslash is an error."""
        with pytest.raises(InvalidEscapeError) as exc_info:
            decode_escapes(body)
        assert exc_info.value.char == char
        assert exc_info.value.kind == LexicalErrorKind.INVALID_ESCAPE

    def test_trailing_backslash(self):
        """A lone backslash at the end leaves the string unterminated."""
        with pytest.raises(UnterminatedStringError) as exc_info:
            decode_escapes("abc\\")
        assert exc_info.value.kind == LexicalErrorKind.UNTERMINATED_STRING
        assert "trailing" in exc_info.value.detail

    def test_error_carries_location(self):
        location = SourceLocation("prog.sam", 4, 9)
        with pytest.raises(InvalidEscapeError) as exc_info:
            decode_escapes("\\q", location, 'print("\\q");')
        error = exc_info.value
        assert error.location == location
        assert error.line == 4
        assert str(error).startswith("prog.sam:4:9: error: invalid escape sequence '\\q'")
