"""
SAM Lexical Scanner
===================

This package turns SAM source text into a stream of tokens for a parser.

Components
----------
- **tokens**: TokenKind, Token, and the keyword/operator tables
- **cursor**: SourceCursor, a line-buffered character source with pushback
- **escapes**: string literal escape decoding
- **scanner**: Scanner, the tokenizing state machine
- **errors**: LexicalError and its subclasses

Pipeline
--------
    Source file → SourceCursor → Scanner → Token stream

Usage
-----
>>> from samlang.lexer import Scanner, TokenKind
>>> with Scanner.from_string('x := "hi";') as scanner:
...     [token.kind.name for token in scanner]
['IDENTIFIER', 'ASSIGNMENT', 'STRING_VALUE', 'SEMICOLON', 'EOF']
"""

from samlang.lexer.cursor import SourceCursor
from samlang.lexer.errors import (
    LexicalError,
    LexicalErrorKind,
    InvalidCharacterError,
    MalformedNumberError,
    UnterminatedStringError,
    InvalidEscapeError,
    IncompleteOperatorError,
    UnexpectedEndOfInputError,
)
from samlang.lexer.escapes import decode_escapes
from samlang.lexer.scanner import (
    Scanner,
    ScannerOptions,
    ScanState,
    scan_file,
    scan_string,
)
from samlang.lexer.tokens import (
    Token,
    TokenKind,
    KEYWORDS,
    OPERATORS,
    OPERATOR_PREFIXES,
    lookup_keyword,
    lookup_operator,
    is_operator_start,
    is_operator_prefix,
    spelling_of,
)

__all__ = [
    # Scanner
    "Scanner",
    "ScannerOptions",
    "ScanState",
    "scan_file",
    "scan_string",
    # Cursor
    "SourceCursor",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "OPERATORS",
    "OPERATOR_PREFIXES",
    "lookup_keyword",
    "lookup_operator",
    "is_operator_start",
    "is_operator_prefix",
    "spelling_of",
    # Escapes
    "decode_escapes",
    # Errors
    "LexicalError",
    "LexicalErrorKind",
    "InvalidCharacterError",
    "MalformedNumberError",
    "UnterminatedStringError",
    "InvalidEscapeError",
    "IncompleteOperatorError",
    "UnexpectedEndOfInputError",
]
