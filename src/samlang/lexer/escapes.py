"""
String literal escape decoding.

The body of a string literal (quotes already removed) is decoded left to
right. The only escape sequence is \\n, which becomes a newline. A
backslash followed by anything else is an InvalidEscapeError, and a body
ending in a lone backslash is an UnterminatedStringError.
"""

from typing import Optional

from samlang.errors import SourceLocation
from samlang.lexer.errors import InvalidEscapeError, UnterminatedStringError


ESCAPE_SEQUENCES = {
    "n": "\n",
}


def decode_escapes(
    body: str,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> str:
    """
    Decode the escape sequences in a string literal body.

    Args:
        body: Literal text between the quotes
        location: Location reported in errors (the literal's line)
        source_line: Source text reported in errors

    Returns:
        The decoded string

    Raises:
        InvalidEscapeError: If a backslash is followed by anything but 'n'
        UnterminatedStringError: If the body ends with a lone backslash
    """
    chars = []
    escaping = False

    for char in body:
        if escaping:
            if char not in ESCAPE_SEQUENCES:
                raise InvalidEscapeError(char, location, source_line)
            chars.append(ESCAPE_SEQUENCES[char])
            escaping = False
        elif char == "\\":
            escaping = True
        else:
            chars.append(char)

    if escaping:
        raise UnterminatedStringError(
            location,
            source_line,
            detail="unterminated string literal (trailing '\\')",
        )

    return "".join(chars)
