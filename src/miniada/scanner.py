"""
Mini-Ada Scanner
================

This module implements the scanner (tokenizer) for Mini-Ada. Each call to
``Scanner.next_token`` skips whitespace and comments, then returns exactly
one token. Once input is exhausted every further call returns EOF.

Dispatch
--------
The first significant character selects the token class:

| Character     | Result                                   |
|---------------|------------------------------------------|
| ``"``         | string literal (``""`` embeds a quote)   |
| ``+``         | addop                                    |
| ``-``         | ``--`` comment to end of line, else addop|
| ``*`` ``/``   | mulop                                    |
| ``<`` ``>`` ``=`` | relop                                |
| ``;``         | semicolon                                |
| ``:``         | ``:=`` assign, else colon                |
| ``(`` ``)``   | lparen / rparen                          |
| letter        | identifier or keyword                    |
| digit         | numeric literal (integer or real)        |
| anything else | error                                    |

Errors
------
Lexical problems never raise. They come back as ERROR tokens carrying an
ErrorKind, and the next call resumes scanning after the bad lexeme:

- unterminated string literal
- malformed identifier (``a_``, ``a__b``)
- malformed numeric literal (``3.``, ``3.x``)
- invalid character

``Scanner.tokenize`` can be asked to raise instead (strict mode).

Character Classes
-----------------
Letters, digits and whitespace are ASCII-only. A non-ASCII letter is an
invalid character rather than the start of an identifier.

Example Usage
-------------
>>> from miniada.scanner import scan
>>> for token in scan("x := 3 + 4.5;")[:-1]:
...     print(token)
(line 1): identifier : x
(line 1): assign : :=
(line 1): numeric_literal : 3
(line 1): addop : +
(line 1): numeric_literal : 4.5
(line 1): semicolon : ;
"""

from dataclasses import replace
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, Optional, Union
import logging
import string

from miniada.config import ScanOptions
from miniada.errors import error_from_token
from miniada.source import CharacterSource, StreamSource, StringSource
from miniada.tokens import ErrorKind, Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

# Sets, not strings: "" (end of input) must never be a member
LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
ALPHANUMERIC = LETTERS | DIGITS
WHITESPACE = frozenset(" \t\n\r\v\f")

# Characters that form a complete token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.ADDOP,
    "*": TokenType.MULOP,
    "/": TokenType.MULOP,
    "<": TokenType.RELOP,
    ">": TokenType.RELOP,
    "=": TokenType.RELOP,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


# =============================================================================
# State Machine States
# =============================================================================

class _StringState(Enum):
    SCANNING = auto()       # inside the literal
    MAYBE_CLOSED = auto()   # just saw '"': terminator or first half of '""'


class _WordState(Enum):
    TERMINATED = auto()     # text so far is a valid identifier
    UNTERMINATED = auto()   # last character was '_'


class _NumberState(Enum):
    TERMINATED_INTEGER = auto()
    UNTERMINATED = auto()   # just saw '.', a digit must follow
    TERMINATED_REAL = auto()


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Converts a character source into Mini-Ada tokens.

    The scanner owns only its line counter. The character source is
    borrowed for each call, so one scanner can be driven across several
    sources (the line count carries over), and independent sources
    should use independent scanners.

    Usage:
        scanner = Scanner()
        source = StringSource(text)
        while not (token := scanner.next_token(source)).is_eof:
            handle(token)

    Attributes:
        options: Scan configuration (start line, strict mode, filename)
    """

    def __init__(self, options: Optional[ScanOptions] = None):
        """
        Initialize the scanner.

        Args:
            options: Scan configuration (uses defaults if None)
        """
        self.options = options or ScanOptions()
        self._line = self.options.start_line

    @property
    def line(self) -> int:
        """Current line number."""
        return self._line

    def set_line(self, line: int) -> None:
        """
        Reset the line counter.

        Raises:
            ValueError: If line is less than 1
        """
        if line < 1:
            raise ValueError(f"line must be >= 1, got {line}")
        self._line = line

    def __call__(self, source: CharacterSource) -> Token:
        return self.next_token(source)

    def next_token(self, source: CharacterSource) -> Token:
        """
        Scan and return the next token from source.

        Never raises for bad input: lexical errors are ERROR tokens.
        Returns EOF, without consuming anything, once input is exhausted.
        """
        while True:
            self._skip_whitespace(source)

            if source.at_end():
                return Token(TokenType.EOF, self._line)

            char = source.advance()

            if char == "-" and source.peek() == "-":
                # Comment: drop the rest of the line and start over
                self._skip_comment(source)
                continue

            return self._dispatch(char, source)

    def tokenize(self, source: CharacterSource) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF.

        Raises:
            ScanError: In strict mode, at the first error token
        """
        while True:
            token = self.next_token(source)
            if token.is_error and self.options.strict:
                raise error_from_token(token, self.options.filename)
            yield token
            if token.is_eof:
                return

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self, source: CharacterSource) -> None:
        while source.peek() in WHITESPACE:
            if source.advance() == "\n":
                self._line += 1

    def _skip_comment(self, source: CharacterSource) -> None:
        """
        Consume a '--' comment through its newline.

        The first '-' has already been consumed. The line counter moves on
        even when the comment runs to end of input without a newline.
        """
        while not source.at_end():
            if source.advance() == "\n":
                break
        self._line += 1

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _dispatch(self, char: str, source: CharacterSource) -> Token:
        """Scan the token that starts with the already-consumed char."""
        line = self._line

        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], line, char)

        if char == "-":
            return Token(TokenType.ADDOP, line, char)

        if char == ":":
            if source.peek() == "=":
                source.advance()
                return Token(TokenType.ASSIGN, line, ":=")
            return Token(TokenType.COLON, line, char)

        if char == '"':
            return self._scan_string(source, line)

        if char in LETTERS:
            return self._scan_word(char, source, line)

        if char in DIGITS:
            return self._scan_number(char, source, line)

        return self._error(line, char, ErrorKind.INVALID_CHARACTER)

    def _scan_string(self, source: CharacterSource, line: int) -> Token:
        """
        Scan a string literal after its opening quote.

        A doubled quote stands for one quote character; both delimiters
        and any doubled quotes stay in the lexeme. Newlines inside the
        literal are kept as text and do not advance the line counter.
        """
        chars = ['"']
        state = _StringState.SCANNING

        while True:
            if state is _StringState.SCANNING:
                if source.at_end():
                    return self._error(
                        line, "".join(chars), ErrorKind.UNTERMINATED_STRING
                    )
                char = source.advance()
                chars.append(char)
                if char == '"':
                    state = _StringState.MAYBE_CLOSED
            else:
                if source.peek() != '"':
                    return Token(TokenType.STRING_LITERAL, line, "".join(chars))
                chars.append(source.advance())
                state = _StringState.SCANNING

    def _scan_word(self, first: str, source: CharacterSource, line: int) -> Token:
        """
        Scan an identifier or keyword.

        A word is a letter followed by letters, digits and single
        underscores; every underscore must be followed by a letter or digit.
        """
        chars = [first]
        state = _WordState.TERMINATED

        while True:
            char = source.peek()

            if char in ALPHANUMERIC:
                chars.append(source.advance())
                state = _WordState.TERMINATED
            elif state is _WordState.UNTERMINATED:
                return self._error(
                    line, "".join(chars), ErrorKind.MALFORMED_IDENTIFIER
                )
            elif char == "_":
                chars.append(source.advance())
                state = _WordState.UNTERMINATED
            else:
                return Token.word("".join(chars), line)

    def _scan_number(self, first: str, source: CharacterSource, line: int) -> Token:
        """
        Scan an integer (``123``) or real (``12.5``) literal.

        A decimal point must be followed by at least one digit, and only
        one decimal point is part of the literal.
        """
        chars = [first]
        state = _NumberState.TERMINATED_INTEGER

        while True:
            char = source.peek()

            if char in DIGITS:
                chars.append(source.advance())
                if state is _NumberState.UNTERMINATED:
                    state = _NumberState.TERMINATED_REAL
            elif state is _NumberState.UNTERMINATED:
                return self._error(line, "".join(chars), ErrorKind.MALFORMED_NUMBER)
            elif char == "." and state is _NumberState.TERMINATED_INTEGER:
                chars.append(source.advance())
                state = _NumberState.UNTERMINATED
            else:
                return Token(TokenType.NUMERIC_LITERAL, line, "".join(chars))

    def _error(self, line: int, lexeme: str, kind: ErrorKind) -> Token:
        logger.debug(f"{self.options.filename}:{line}: {kind.value} {lexeme!r}")
        return Token.error(line, lexeme, kind)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(text: str, options: Optional[ScanOptions] = None) -> list[Token]:
    """
    Scan a string and return all tokens, ending with EOF.

    Raises:
        ScanError: In strict mode, at the first error token
    """
    scanner = Scanner(options)
    return list(scanner.tokenize(StringSource(text)))


def tokenize_file(
    path: Union[str, Path],
    options: Optional[ScanOptions] = None,
) -> Iterator[Token]:
    """
    Generate the tokens of a source file, ending with EOF.

    The file is read through a StreamSource, one character at a time, and
    is closed when the generator finishes or is closed. When
    options.filename is left at its default the path is used.

    Raises:
        FileNotFoundError: If the file does not exist
        ScanError: In strict mode, at the first error token
    """
    path = Path(path)
    options = options or ScanOptions()
    if options.filename == "<input>":
        options = replace(options, filename=str(path))

    with open(path, encoding=options.encoding, newline="") as stream:
        yield from Scanner(options).tokenize(StreamSource(stream))


def scan_file(
    path: Union[str, Path],
    options: Optional[ScanOptions] = None,
) -> list[Token]:
    """
    Scan a source file and return all tokens, ending with EOF.

    Raises:
        FileNotFoundError: If the file does not exist
        ScanError: In strict mode, at the first error token
    """
    tokens = list(tokenize_file(path, options))
    logger.debug(f"Scanned {path}: {len(tokens)} tokens")
    return tokens
