"""
SAM Lexical Error Hierarchy
===========================

Exceptions raised by the scanner when the source text cannot be split
into tokens. All of them inherit from LexicalError, which itself inherits
from the toolchain base SamError.

Exception Hierarchy
-------------------
LexicalError (kind, line, detail)
├── InvalidCharacterError - character that starts no token
├── MalformedNumberError - "1." without fraction digits, or out of range
├── UnterminatedStringError - string reaching end of line, or a trailing '\\'
├── InvalidEscapeError - backslash followed by anything but 'n'
├── IncompleteOperatorError - '!', ':', '&' or '|' not completed
└── UnexpectedEndOfInputError - source ended inside a token

Scanning stops at the first error; there is no resynchronization.
"""

from enum import Enum
from typing import Optional

from samlang.errors import DiagnosticError, SourceLocation


class LexicalErrorKind(Enum):
    """Classification of lexical errors, one per error class."""

    INVALID_CHARACTER = "invalid character"
    MALFORMED_NUMBER = "malformed number"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_ESCAPE = "invalid escape"
    INCOMPLETE_OPERATOR = "incomplete operator"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"


# =============================================================================
# Base Lexical Exception
# =============================================================================

class LexicalError(DiagnosticError):
    """
    Base exception for all scanner errors.

    Attributes:
        kind: The LexicalErrorKind of this error
        detail: Short description of the offending text or condition
        location: Where in the source the error occurred
    """

    kind: LexicalErrorKind

    def __init__(
        self,
        detail: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.detail = detail
        super().__init__(detail, location, hint=hint, source_line=source_line)

    @property
    def line(self) -> Optional[int]:
        """Line number of the error, if known."""
        return self.location.line if self.location else None


# =============================================================================
# Concrete Errors
# =============================================================================

class InvalidCharacterError(LexicalError):
    """
    A character that cannot begin any token.

    Example:
        var price := $5;    # '$' is not part of the language
    """

    kind = LexicalErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class MalformedNumberError(LexicalError):
    """
    A numeric literal that is not a valid int or real.

    Raised for a decimal point with no digit after it ("3." or "3.x")
    and for integer literals that do not fit in 32 signed bits.
    """

    kind = LexicalErrorKind.MALFORMED_NUMBER


class UnterminatedStringError(LexicalError):
    """
    A string literal that is not closed.

    String literals may not span lines, so reaching the end of the line
    before the closing quote is an error. A body ending in a lone
    backslash is reported the same way, since the backslash escapes the
    closing quote position.
    """

    kind = LexicalErrorKind.UNTERMINATED_STRING

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        detail: str = "unterminated string literal",
    ):
        super().__init__(
            detail,
            location=location,
            hint="add closing '\"' on the same line",
            source_line=source_line,
        )


class InvalidEscapeError(LexicalError):
    """A backslash in a string literal followed by anything but 'n'."""

    kind = LexicalErrorKind.INVALID_ESCAPE

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid escape sequence '\\{char}'",
            location=location,
            hint="the only supported escape is '\\n'",
            source_line=source_line,
        )


class IncompleteOperatorError(LexicalError):
    """
    An operator prefix that never became a full operator.

    '!', ':', '&' and '|' only exist as the first half of '!=', ':=',
    '&&' and '||'.
    """

    kind = LexicalErrorKind.INCOMPLETE_OPERATOR

    def __init__(
        self,
        text: str,
        expected: list[str],
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        self.expected = expected
        choices = ", ".join(f"'{e}'" for e in expected)
        super().__init__(
            f"incomplete operator '{text}'",
            location=location,
            hint=f"did you mean {choices}?" if expected else None,
            source_line=source_line,
        )


class UnexpectedEndOfInputError(LexicalError):
    """The source ended while a token was still being scanned."""

    kind = LexicalErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(
        self,
        what: str,
        location: Optional[SourceLocation] = None,
    ):
        self.what = what
        super().__init__(f"unexpected end of input in {what}", location=location)
