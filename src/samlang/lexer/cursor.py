"""
Source Cursor
=============

Line-buffered character source with one character of pushback.

The cursor holds exactly one physical line of the source at a time and
hands it out a character at a time. At the end of every line it returns
a synthetic "\\n", whether or not the underlying line had a terminator,
so the scanner sees one newline per line regardless of "\\n" versus
"\\r\\n" endings. After the last line it returns None.

Pushback
--------
push_back() un-reads the most recent character. For an ordinary
character the read index moves back by one. For the synthetic newline
the index stays at the end of the line and only the end-of-line flag is
cleared, so the next call hands out the same newline again before the
cursor moves on to the next line.

Example
-------
>>> cursor = SourceCursor.from_string("ab\\nc")
>>> [cursor.next_char() for _ in range(6)]
['a', 'b', '\\n', 'c', '\\n', None]
"""

import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional
import io

from samlang.errors import (
    CursorUsageError,
    EmptySourceError,
    SamError,
    SourceNotFoundError,
    SourceReadError,
)


logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    """Remove one trailing "\\n" or "\\r\\n" from a physical line."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class SourceCursor:
    """
    Streams source text one character at a time.

    Only the current line is held in memory. The first line is read when
    the cursor is created; a source without any line is rejected with
    EmptySourceError.

    Attributes:
        filename: Name used in diagnostics
    """

    def __init__(
        self,
        lines: Iterable[str],
        filename: str = "<input>",
        handle: Optional[IO[str]] = None,
    ):
        """
        Create a cursor over an iterable of physical lines.

        Args:
            lines: Source lines, with or without their terminators
            filename: Name used in diagnostics
            handle: File to close when the cursor is closed or exhausted

        Raises:
            EmptySourceError: If lines yields nothing
            SourceReadError: If the first line cannot be read
        """
        self.filename = filename
        self._lines: Iterator[str] = iter(lines)
        self._handle = handle

        self._line = ""
        self._line_number = 0
        self._index = 0
        self._at_eol = False
        self._exhausted = False
        self._can_push_back = False

        first = self._read_line()
        if first is None:
            self.close()
            raise EmptySourceError(filename)
        self._line = first
        self._line_number = 1

    # =========================================================================
    # Construction Helpers
    # =========================================================================

    @classmethod
    def open(
        cls,
        path: str | Path,
        encoding: str = "utf-8",
        display_name: Optional[str] = None,
    ) -> "SourceCursor":
        """
        Open a source file for streaming.

        Args:
            path: Path of the source file
            encoding: Text encoding of the file
            display_name: Name used in diagnostics (default: the path)

        Raises:
            SourceNotFoundError: If the file does not exist
            SourceReadError: If the file cannot be opened or read
            EmptySourceError: If the file is empty
        """
        path = Path(path)
        name = display_name or str(path)

        try:
            # Split on "\n" only; "\r\n" is handled by _strip_terminator
            handle = path.open("r", encoding=encoding, newline="\n")
        except FileNotFoundError as e:
            raise SourceNotFoundError(str(path)) from e
        except (OSError, LookupError) as e:
            raise SourceReadError(name, None, str(e)) from e

        logger.debug(f"Opened source {name} (encoding {encoding})")

        try:
            return cls(handle, name, handle=handle)
        except SamError:
            handle.close()
            raise

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "SourceCursor":
        """Create a cursor over in-memory source text."""
        return cls(io.StringIO(text), filename)

    # =========================================================================
    # Character Access
    # =========================================================================

    def next_char(self) -> Optional[str]:
        """
        Return the next character, "\\n" at the end of each line, or None.

        Raises:
            SourceReadError: If the next line cannot be read
        """
        if self._exhausted:
            return None

        if self._at_eol:
            line = self._read_line()
            if line is None:
                self._finish()
                return None
            self._line = line
            self._line_number += 1
            self._index = 0
            self._at_eol = False

        self._can_push_back = True

        if self._index < len(self._line):
            char = self._line[self._index]
            self._index += 1
            return char

        self._at_eol = True
        return "\n"

    def push_back(self) -> None:
        """
        Un-read the character most recently returned by next_char().

        Raises:
            CursorUsageError: On a second pushback in a row, before any
                character of the line was read, or after end of input
        """
        if not self._can_push_back:
            raise CursorUsageError(
                "push_back() called without a character to push back"
            )
        self._can_push_back = False

        if self._at_eol:
            # The index is already at the end of the line
            self._at_eol = False
            return

        if self._index == 0:
            raise CursorUsageError("push_back() across the start of a line")
        self._index -= 1

    def lexeme(self, start: int) -> str:
        """
        Return the current line's text from start up to the read index.

        Raises:
            CursorUsageError: If start lies outside [0, index]
        """
        if not 0 <= start <= self._index:
            raise CursorUsageError(
                f"lexeme start {start} outside line range [0, {self._index}]"
            )
        return self._line[start:self._index]

    # =========================================================================
    # State
    # =========================================================================

    @property
    def index(self) -> int:
        """Index of the next unread character in the current line."""
        return self._index

    @property
    def line_number(self) -> int:
        """Physical line number of the buffered line (1-indexed)."""
        return self._line_number

    @property
    def current_line(self) -> str:
        """Text of the buffered line, without its terminator."""
        return self._line

    @property
    def at_end_of_line(self) -> bool:
        """True once the synthetic newline of the current line was returned."""
        return self._at_eol

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # =========================================================================
    # Resource Handling
    # =========================================================================

    def close(self) -> None:
        """Close the underlying file, if the cursor owns one."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "SourceCursor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _read_line(self) -> Optional[str]:
        """Fetch the next physical line, or None at end of input."""
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(self.filename, self._line_number + 1, str(e)) from e
        return _strip_terminator(line)

    def _finish(self) -> None:
        self._exhausted = True
        self._can_push_back = False
        logger.debug(f"End of {self.filename} after {self._line_number} line(s)")
        self.close()
