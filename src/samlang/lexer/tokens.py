"""
SAM Tokens
==========

Token kinds, the token value class, and the keyword and operator tables
used by the scanner.

Token Categories
----------------
- Keywords: var, boolean, int, real, string, function, true, false,
  if, elsif, else, while, return
- Identifiers: letters, digits and underscores, not starting with a digit
- Literals: 32-bit ints (42), reals (4.5), strings ("text")
- Operators: + - * / = != := > >= < <= && || ++ --
- Punctuation: { } ( ) , ;
- EOF: end of input

Operator Matching
-----------------
Operators are matched greedily. OPERATOR_PREFIXES holds every prefix of
every operator spelling, so the scanner can ask "could a longer operator
still follow?" in one set lookup per character:

| Read so far | Prefix? | Operator? |
|-------------|---------|-----------|
| >           | yes     | >         |
| >=          | yes     | >=        |
| !           | yes     | (none)    |
| :=          | yes     | :=        |
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import Optional
import math

from samlang.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the SAM language.

    Exactly one kind describes any complete lexeme. IDENTIFIER,
    INT_VALUE, REAL_VALUE and STRING_VALUE carry a payload in
    Token.value; every other kind is fully described by the kind alone.
    """

    # === Keywords ===
    VAR = auto()            # var
    BOOLEAN = auto()        # boolean
    INT = auto()            # int
    REAL = auto()           # real
    STRING = auto()         # string
    FUNCTION = auto()       # function
    TRUE = auto()           # true
    FALSE = auto()          # false
    IF = auto()             # if
    ELSIF = auto()          # elsif
    ELSE = auto()           # else
    WHILE = auto()          # while
    RETURN = auto()         # return

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # names
    INT_VALUE = auto()      # 42
    REAL_VALUE = auto()     # 4.5
    STRING_VALUE = auto()   # "text"

    # === Arithmetic ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    ASTERISK = auto()       # *
    SLASH = auto()          # /

    # === Delimiters ===
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )

    # === Comparison and Assignment ===
    EQUAL = auto()          # =
    NOT_EQUAL = auto()      # !=
    ASSIGNMENT = auto()     # :=
    GREATER_THAN = auto()   # >
    GREATER_EQUAL = auto()  # >=
    LESS_THAN = auto()      # <
    LESS_EQUAL = auto()     # <=

    # === Logical ===
    LOGICAL_AND = auto()    # &&
    LOGICAL_OR = auto()     # ||

    # === Increment/Decrement ===
    INCREMENT = auto()      # ++
    DECREMENT = auto()      # --

    # === Separators ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;

    # === Sentinel ===
    EOF = auto()

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_KINDS

    @property
    def has_value(self) -> bool:
        """True for the kinds whose tokens carry a payload."""
        return self in _VALUE_KINDS


# =============================================================================
# Keyword and Operator Tables
# =============================================================================

KEYWORDS: dict[str, TokenKind] = {
    "var": TokenKind.VAR,
    "boolean": TokenKind.BOOLEAN,
    "int": TokenKind.INT,
    "real": TokenKind.REAL,
    "string": TokenKind.STRING,
    "function": TokenKind.FUNCTION,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "elsif": TokenKind.ELSIF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "return": TokenKind.RETURN,
}

OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "=": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    ":=": TokenKind.ASSIGNMENT,
    ">": TokenKind.GREATER_THAN,
    ">=": TokenKind.GREATER_EQUAL,
    "<": TokenKind.LESS_THAN,
    "<=": TokenKind.LESS_EQUAL,
    "&&": TokenKind.LOGICAL_AND,
    "||": TokenKind.LOGICAL_OR,
    "++": TokenKind.INCREMENT,
    "--": TokenKind.DECREMENT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

# Every non-empty prefix of every operator spelling
OPERATOR_PREFIXES: frozenset[str] = frozenset(
    spelling[:end]
    for spelling in OPERATORS
    for end in range(1, len(spelling) + 1)
)

_KEYWORD_KINDS = frozenset(KEYWORDS.values())
_OPERATOR_KINDS = frozenset(OPERATORS.values())
_VALUE_KINDS = frozenset((
    TokenKind.IDENTIFIER,
    TokenKind.INT_VALUE,
    TokenKind.REAL_VALUE,
    TokenKind.STRING_VALUE,
))

_SPELLINGS: dict[TokenKind, str] = {
    **{kind: text for text, kind in KEYWORDS.items()},
    **{kind: text for text, kind in OPERATORS.items()},
}

# Display labels for the payload kinds, as printed by the token dump
_VALUE_LABELS: dict[TokenKind, str] = {
    TokenKind.IDENTIFIER: "Identifier",
    TokenKind.INT_VALUE: "IntValue",
    TokenKind.REAL_VALUE: "RealValue",
    TokenKind.STRING_VALUE: "String",
}


def lookup_keyword(text: str) -> Optional[TokenKind]:
    """Return the keyword kind spelled exactly by text, or None."""
    return KEYWORDS.get(text)


def lookup_operator(text: str) -> Optional[TokenKind]:
    """Return the operator kind spelled exactly by text, or None."""
    return OPERATORS.get(text)


def is_operator_start(char: str) -> bool:
    """True if some operator spelling begins with char."""
    return char in OPERATOR_PREFIXES


def is_operator_prefix(text: str) -> bool:
    """True if text is a prefix (possibly all) of some operator spelling."""
    return text in OPERATOR_PREFIXES


def operator_completions(text: str) -> list[str]:
    """Return the operator spellings that extend text, shortest first."""
    return sorted(
        (spelling for spelling in OPERATORS if spelling.startswith(text)),
        key=lambda s: (len(s), s),
    )


def spelling_of(kind: TokenKind) -> Optional[str]:
    """Return the fixed source spelling of a keyword or operator kind."""
    return _SPELLINGS.get(kind)


def format_real(value: float) -> str:
    """
    Format a real value the way the token dump prints it.

    Uses the shortest digits that read back as the same value, never an
    exponent, and no fraction for whole numbers:

        3.0 -> 3    4.5 -> 4.5    1e20 -> 100000000000000000000
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from SAM source code.

    Attributes:
        kind: The TokenKind classification
        value: Payload for IDENTIFIER (str), INT_VALUE (int),
            REAL_VALUE (float) and STRING_VALUE (decoded str); None otherwise
        line: Line on which the token's last character was read (1-indexed)
        filename: Name of the source file
    """
    kind: TokenKind
    value: str | int | float | None = None
    line: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.kind.name}, {self.value!r}, line {self.line})"
        return f"Token({self.kind.name}, line {self.line})"

    def __str__(self) -> str:
        return self.display()

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line)

    def display(self) -> str:
        """
        Format the token the way the token dump prints it.

        Keywords and operators print their spelling, payload kinds print
        as Label(value), and the end of input prints as EOF:

            var  Identifier(x)  :=  IntValue(3)  String(hi)  EOF
        """
        if self.kind is TokenKind.REAL_VALUE:
            return f"RealValue({format_real(self.value)})"
        if self.kind in _VALUE_LABELS:
            return f"{_VALUE_LABELS[self.kind]}({self.value})"
        if self.kind is TokenKind.EOF:
            return "EOF"
        return _SPELLINGS[self.kind]
