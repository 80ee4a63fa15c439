"""
Mini-Ada Token Model
====================

Token classes, the reserved-word table and the immutable Token value
produced by the scanner.

Token Classes
-------------
- Literals: identifier, numeric_literal, boolean_literal, string_literal
- Keywords: procedure, is, declare, constant, type, not, if, then, while,
  write, read, begin, end, loop
- Operators: addop (+ - or), mulop (* / mod and), relop (< > =), assign (:=)
- Delimiters: semicolon, colon, lparen, rparen
- Structural: eof, error

Several spellings share one class: ``integer``, ``real`` and ``boolean`` are
all ``type``; ``put`` and ``put_line`` are both ``write``. The spelling is
kept in the token's lexeme so the parser can still tell them apart.

Keywords are matched case-insensitively. ``Begin``, ``BEGIN`` and ``begin``
all scan as ``begin`` while the lexeme keeps the original casing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import string


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token classes for Mini-Ada.

    The enum value is the class name used when rendering a token.
    """

    # === Structural Tokens ===
    ERROR = "error"
    EOF = "eof"

    # === Identifiers and Literals ===
    IDENTIFIER = "identifier"
    NUMERIC_LITERAL = "numeric_literal"
    BOOLEAN_LITERAL = "boolean_literal"     # true, false
    STRING_LITERAL = "string_literal"       # "..." with "" for a quote

    # === Keywords ===
    PROCEDURE = "procedure"
    IS = "is"
    DECLARE = "declare"
    CONSTANT = "constant"
    TYPE = "type"                           # integer, real, boolean
    ADDOP = "addop"                         # + - or
    MULOP = "mulop"                         # * / mod and
    NOT = "not"
    IF = "if"
    THEN = "then"
    WHILE = "while"
    WRITE = "write"                         # put, put_line
    READ = "read"                           # get
    BEGIN = "begin"
    END = "end"
    LOOP = "loop"

    # === Operators and Delimiters ===
    RELOP = "relop"                         # < > =
    SEMICOLON = "semicolon"                 # ;
    COLON = "colon"                         # :
    ASSIGN = "assign"                       # :=
    LPAREN = "lparen"                       # (
    RPAREN = "rparen"                       # )


class ErrorKind(Enum):
    """Why a token was classified as an error."""

    UNTERMINATED_STRING = "unterminated_string"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    MALFORMED_NUMBER = "malformed_number"
    INVALID_CHARACTER = "invalid_character"


# =============================================================================
# Keyword Mapping
# =============================================================================

# Keys are lower-case; lookups fold the word with _ASCII_LOWER first
KEYWORDS: dict[str, TokenType] = {
    # Literals
    "true": TokenType.BOOLEAN_LITERAL,
    "false": TokenType.BOOLEAN_LITERAL,

    # Declarations
    "procedure": TokenType.PROCEDURE,
    "is": TokenType.IS,
    "declare": TokenType.DECLARE,
    "constant": TokenType.CONSTANT,

    # Type names
    "integer": TokenType.TYPE,
    "real": TokenType.TYPE,
    "boolean": TokenType.TYPE,

    # Word operators
    "or": TokenType.ADDOP,
    "mod": TokenType.MULOP,
    "and": TokenType.MULOP,
    "not": TokenType.NOT,

    # Control flow
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "while": TokenType.WHILE,
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
    "loop": TokenType.LOOP,

    # I/O
    "put": TokenType.WRITE,
    "put_line": TokenType.WRITE,
    "get": TokenType.READ,
}

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def classify_as_keyword_or_identifier(text: str) -> TokenType:
    """
    Classify a scanned word as a keyword or an identifier.

    Only ASCII letters are folded, so the result never depends on the
    locale or on Unicode case rules.

    >>> classify_as_keyword_or_identifier("BEGIN")
    <TokenType.BEGIN: 'begin'>
    >>> classify_as_keyword_or_identifier("beginx")
    <TokenType.IDENTIFIER: 'identifier'>
    """
    return KEYWORDS.get(text.translate(_ASCII_LOWER), TokenType.IDENTIFIER)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        line: Line on which the token's first character appeared (1-indexed)
        lexeme: The exact source spelling ("" for EOF)
        error_kind: Reason for an ERROR token, None otherwise
    """
    type: TokenType
    line: int
    lexeme: str = ""
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def word(cls, text: str, line: int) -> "Token":
        """Build an identifier or keyword token from a scanned word."""
        return cls(classify_as_keyword_or_identifier(text), line, text)

    @classmethod
    def error(cls, line: int, lexeme: str, kind: ErrorKind) -> "Token":
        """Build an error token."""
        return cls(TokenType.ERROR, line, lexeme, kind)

    def __str__(self) -> str:
        """Render as '(line N): class : lexeme'."""
        return f"(line {self.line}): {self.type.value} : {self.lexeme}"

    def __repr__(self) -> str:
        if self.error_kind is not None:
            return (
                f"Token({self.type.name}, {self.lexeme!r}, line {self.line}, "
                f"{self.error_kind.value})"
            )
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    @property
    def is_keyword(self) -> bool:
        """True when the lexeme is a reserved word in any casing."""
        return (
            self.type is not TokenType.ERROR
            and self.lexeme.translate(_ASCII_LOWER) in KEYWORDS
        )

    @property
    def is_real(self) -> bool:
        """True for a numeric literal spelled with a decimal point."""
        return self.type is TokenType.NUMERIC_LITERAL and "." in self.lexeme

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping of the token."""
        data = {
            "type": self.type.value,
            "line": self.line,
            "lexeme": self.lexeme,
        }
        if self.error_kind is not None:
            data["error"] = self.error_kind.value
        return data
