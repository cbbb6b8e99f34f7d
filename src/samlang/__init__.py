"""
SAM - Lexical Toolchain for the SAM Scripting Language
======================================================

SAM is a small procedural scripting language with var/function
declarations, int, real, boolean and string values, if/elsif/else and
while statements. This package provides its lexical scanner, which
streams source files line by line and produces line-tagged tokens for a
parser.

Main Components
---------------
- **lexer**: SourceCursor, Scanner, Token and TokenKind
- **errors**: exception hierarchy shared by the toolchain
- **cli**: the samlex token dump tool

Quick Start
-----------
Scan a file:
    >>> from samlang import Scanner
    >>> with Scanner.open("hello.sam") as scanner:
    ...     for token in scanner.tokenize():
    ...         print(token.display(), token.line)

Or use the command-line tool:
    $ samlex hello.sam
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from samlang.errors import (
    SamError,
    SourceLocation,
    SourceError,
    SourceNotFoundError,
    EmptySourceError,
    SourceReadError,
    CursorUsageError,
)
from samlang.lexer import (
    Scanner,
    ScannerOptions,
    SourceCursor,
    Token,
    TokenKind,
    scan_file,
    scan_string,
    LexicalError,
    LexicalErrorKind,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "SourceCursor",
    "Token",
    "TokenKind",
    "scan_file",
    "scan_string",
    # Exception hierarchy
    "SamError",
    "SourceLocation",
    "SourceError",
    "SourceNotFoundError",
    "EmptySourceError",
    "SourceReadError",
    "CursorUsageError",
    "LexicalError",
    "LexicalErrorKind",
]
