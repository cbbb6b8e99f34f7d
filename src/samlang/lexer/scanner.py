"""
SAM Scanner
===========

Converts SAM source text into tokens, one token per get_token() call.

The scanner is a finite state machine driven by characters pulled from a
SourceCursor. Each call starts in INITIAL, skips whitespace and comments,
and returns as soon as one lexeme is complete. The character that ends a
multi-character lexeme is pushed back to the cursor so the next call
sees it again.

States
------
| State               | Entered on             | Leaves on                     |
|---------------------|------------------------|-------------------------------|
| INITIAL             | start of every call    | first character of a token    |
| COMMENT             | '#'                    | newline                       |
| INT_PART            | digit                  | non-digit (emit int) or '.'   |
| DECIMAL_POINT       | '.' after digits       | digit, else error             |
| AFTER_DECIMAL_POINT | digit after '.'        | non-digit (emit real)         |
| ALPHANUMERIC        | letter or '_'          | other (emit keyword/ident)    |
| STRING_LITERAL      | '"'                    | '"' (emit string), newline    |
| OPERATOR            | operator character     | no longer an operator prefix  |

Line Numbers
------------
The line counter starts at 1 and goes up for every newline consumed in
INITIAL or COMMENT. A newline that ends a token is pushed back and
counted by the next call, so every newline is counted exactly once.

Example
-------
>>> from samlang.lexer import scan_string
>>> for token in scan_string("var x := 3 + 4.5; # add"):
...     print(token.display(), token.line)
var 1
Identifier(x) 1
:= 1
IntValue(3) 1
+ 1
RealValue(4.5) 1
; 1
EOF 2
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, Optional

from samlang.errors import SourceLocation
from samlang.lexer.cursor import SourceCursor
from samlang.lexer.errors import (
    IncompleteOperatorError,
    InvalidCharacterError,
    MalformedNumberError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
)
from samlang.lexer.escapes import decode_escapes
from samlang.lexer.tokens import (
    Token,
    TokenKind,
    is_operator_prefix,
    is_operator_start,
    lookup_keyword,
    lookup_operator,
    operator_completions,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Configuration
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        encoding: Text encoding of source files
        display_name: Name shown in tokens and diagnostics instead of
            the source path (useful when scanning temporary files)
    """
    encoding: str = "utf-8"
    display_name: Optional[str] = None


class ScanState(Enum):
    """States of the scanner's state machine."""
    INITIAL = auto()
    COMMENT = auto()
    INT_PART = auto()
    DECIMAL_POINT = auto()
    AFTER_DECIMAL_POINT = auto()
    ALPHANUMERIC = auto()
    STRING_LITERAL = auto()
    OPERATOR = auto()


# What the scanner was in the middle of, for end-of-input errors
_STATE_DESCRIPTIONS = {
    ScanState.INT_PART: "number",
    ScanState.DECIMAL_POINT: "number",
    ScanState.AFTER_DECIMAL_POINT: "number",
    ScanState.ALPHANUMERIC: "identifier",
    ScanState.STRING_LITERAL: "string literal",
    ScanState.OPERATOR: "operator",
}


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes SAM source code.

    Usage:
        with Scanner.open("program.sam") as scanner:
            for token in scanner.tokenize():
                print(token)

    A scanner is single-use and not thread-safe: one get_token() call at
    a time, and once EOF is returned every later call returns EOF again.

    Attributes:
        filename: Name of the source (for tokens and error messages)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    DIGITS = string.digits

    WHITESPACE = " \t\r\n"

    # Largest value of a 32-bit signed int literal
    INT_MAX = 2**31 - 1

    def __init__(self, cursor: SourceCursor):
        """
        Initialize the scanner over a cursor.

        Args:
            cursor: Character source; the scanner takes ownership of it
        """
        self._cursor = cursor
        self.filename = cursor.filename
        self._line = 1
        self._token_count = 0

    @classmethod
    def open(
        cls,
        path: str | Path,
        options: Optional[ScannerOptions] = None,
    ) -> "Scanner":
        """
        Open a source file for scanning.

        Raises:
            SourceNotFoundError: If the file does not exist
            EmptySourceError: If the file is empty
            SourceReadError: If the file cannot be read
        """
        options = options or ScannerOptions()
        cursor = SourceCursor.open(
            path,
            encoding=options.encoding,
            display_name=options.display_name,
        )
        return cls(cursor)

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "Scanner":
        """Create a scanner over in-memory source text."""
        return cls(SourceCursor.from_string(text, filename))

    # =========================================================================
    # Public Interface
    # =========================================================================

    def get_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; a token of kind EOF once the source is exhausted

        Raises:
            LexicalError: If the source text is not valid SAM
            SourceReadError: If a line of the source cannot be read
        """
        cursor = self._cursor
        state = ScanState.INITIAL
        start = 0

        while True:
            char = cursor.next_char()

            if char is None:
                if state in (ScanState.INITIAL, ScanState.COMMENT):
                    return self._emit(TokenKind.EOF)
                raise UnexpectedEndOfInputError(
                    _STATE_DESCRIPTIONS[state],
                    self._location(),
                )

            if state is ScanState.INITIAL:
                if char == "#":
                    state = ScanState.COMMENT
                elif char in self.DIGITS:
                    start = cursor.index - 1
                    state = ScanState.INT_PART
                elif char in self.IDENT_START:
                    start = cursor.index - 1
                    state = ScanState.ALPHANUMERIC
                elif char == '"':
                    # Lexeme starts after the opening quote
                    start = cursor.index
                    state = ScanState.STRING_LITERAL
                elif char in self.WHITESPACE:
                    if char == "\n":
                        self._line += 1
                elif is_operator_start(char):
                    start = cursor.index - 1
                    state = ScanState.OPERATOR
                else:
                    raise InvalidCharacterError(
                        char,
                        self._location(cursor.index),
                        cursor.current_line,
                    )

            elif state is ScanState.COMMENT:
                if char == "\n":
                    self._line += 1
                    state = ScanState.INITIAL

            elif state is ScanState.INT_PART:
                if char in self.DIGITS:
                    continue
                if char == ".":
                    state = ScanState.DECIMAL_POINT
                    continue
                cursor.push_back()
                return self._emit_int(cursor.lexeme(start), start)

            elif state is ScanState.DECIMAL_POINT:
                if char in self.DIGITS:
                    state = ScanState.AFTER_DECIMAL_POINT
                    continue
                cursor.push_back()
                raise MalformedNumberError(
                    f"expected digit after decimal point in '{cursor.lexeme(start)}'",
                    self._location(cursor.index + 1),
                    hint="write a fraction digit, e.g. '1.0'",
                    source_line=cursor.current_line,
                )

            elif state is ScanState.AFTER_DECIMAL_POINT:
                if char in self.DIGITS:
                    continue
                cursor.push_back()
                return self._emit(TokenKind.REAL_VALUE, float(cursor.lexeme(start)))

            elif state is ScanState.ALPHANUMERIC:
                if char in self.IDENT_CHARS:
                    continue
                cursor.push_back()
                text = cursor.lexeme(start)
                keyword = lookup_keyword(text)
                if keyword is not None:
                    return self._emit(keyword)
                return self._emit(TokenKind.IDENTIFIER, text)

            elif state is ScanState.STRING_LITERAL:
                if char == '"':
                    body = cursor.lexeme(start)[:-1]
                    value = decode_escapes(
                        body,
                        self._location(start),
                        cursor.current_line,
                    )
                    return self._emit(TokenKind.STRING_VALUE, value)
                if char == "\n":
                    raise UnterminatedStringError(
                        self._location(start),
                        cursor.current_line,
                    )

            elif state is ScanState.OPERATOR:
                # Greedy: keep going while a longer operator is still possible
                if not cursor.at_end_of_line and is_operator_prefix(cursor.lexeme(start)):
                    continue
                cursor.push_back()
                text = cursor.lexeme(start)
                kind = lookup_operator(text)
                if kind is None:
                    raise IncompleteOperatorError(
                        text,
                        operator_completions(text),
                        self._location(start + 1),
                        cursor.current_line,
                    )
                return self._emit(kind)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Raises:
            LexicalError: If the source text is not valid SAM
        """
        while True:
            token = self.get_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def line_number(self) -> int:
        """Current line counter (1-indexed)."""
        return self._line

    @property
    def token_count(self) -> int:
        """Number of tokens returned so far, EOF included."""
        return self._token_count

    def close(self) -> None:
        self._cursor.close()

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _emit(self, kind: TokenKind, value: str | int | float | None = None) -> Token:
        token = Token(kind, value, self._line, self.filename)
        self._token_count += 1
        logger.debug(f"{token.location}: {token.display()}")
        return token

    def _emit_int(self, text: str, start: int) -> Token:
        """Emit an INT_VALUE token, rejecting values beyond 32 bits."""
        digits = text.lstrip("0") or "0"
        # Compare lengths first; int() refuses very long digit strings
        if len(digits) > len(str(self.INT_MAX)) or int(digits) > self.INT_MAX:
            shown = text if len(text) <= 20 else f"{text[:10]}...{text[-5:]}"
            raise MalformedNumberError(
                f"integer literal {shown} out of range",
                self._location(start + 1),
                hint=f"int values must not exceed {self.INT_MAX}",
                source_line=self._cursor.current_line,
            )
        return self._emit(TokenKind.INT_VALUE, int(digits))

    def _location(self, column: int = 0) -> SourceLocation:
        return SourceLocation(self.filename, self._line, column)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan_file(path: str | Path, options: Optional[ScannerOptions] = None) -> list[Token]:
    """Scan a source file and return all its tokens, EOF included."""
    with Scanner.open(path, options) as scanner:
        return list(scanner.tokenize())


def scan_string(text: str, filename: str = "<input>") -> list[Token]:
    """Scan in-memory source text and return all its tokens, EOF included."""
    with Scanner.from_string(text, filename) as scanner:
        return list(scanner.tokenize())
