"""
SAM Error Hierarchy
===================

This module defines the exception hierarchy shared by the SAM toolchain.
All exceptions inherit from SamError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
SamError (base)
├── SourceError (opening and reading source files)
│   ├── SourceNotFoundError - source path does not exist
│   ├── EmptySourceError - source holds no lines at all
│   └── SourceReadError - a line could not be read or decoded
├── CursorUsageError - misuse of the character cursor (internal)
└── LexicalError (see samlang.lexer.errors)

Errors that can be tied to a place in the source carry a SourceLocation
and are formatted like compiler diagnostics:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SamError(Exception):
    """
    Base exception for all SAM toolchain errors.

    Callers that only want to know whether scanning succeeded can catch
    this single class:

        try:
            tokens = scan_file("program.sam")
        except SamError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when unknown)
    """
    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column', or 'filename:line' without a column."""
        if self.column > 0:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.filename}:{self.line}"


# =============================================================================
# Diagnostic Base
# =============================================================================

class DiagnosticError(SamError):
    """
    Base for errors that point at a place in the source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.sam:2:10: error: invalid character '$' (0x24)
                var x := $;
                         ^
            hint: remove the character or place it inside a string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Errors
# =============================================================================

class SourceError(SamError):
    """Base for errors opening or reading a source file."""
    pass


class SourceNotFoundError(SourceError):
    """
    The source path does not exist.

    Raised when the scanner is constructed, before any token is produced.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"source file not found: {path}")


class EmptySourceError(SourceError):
    """
    The source holds no lines at all.

    An empty source cannot produce any token, not even EOF, so it is
    rejected when the cursor reads its first line.
    """

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"source file is empty: {filename}")


class SourceReadError(SourceError):
    """
    A line of the source could not be read.

    Wraps the underlying OSError or UnicodeDecodeError. The line number
    is that of the line that failed to load, or None if the file could
    not be opened at all.
    """

    def __init__(self, filename: str, line: Optional[int], reason: str):
        self.filename = filename
        self.line = line
        self.reason = reason
        where = f"{filename}:{line}" if line is not None else filename
        super().__init__(f"{where}: cannot read source: {reason}")


# =============================================================================
# Internal Errors
# =============================================================================

class CursorUsageError(SamError):
    """
    The character cursor was used outside its contract.

    Only one character of pushback is available, and never across the
    start of a line. The scanner never does either, so this error signals
    a bug in the caller rather than a problem with the source text.
    """
    pass
