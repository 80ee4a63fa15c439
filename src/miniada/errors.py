"""
Mini-Ada Error Hierarchy
========================

This module defines the exception hierarchy for the Mini-Ada scanner.
All exceptions inherit from MiniAdaError, allowing callers to catch all
package errors with a single except clause if desired.

The scanner itself never raises for a lexical problem: a bad lexeme comes
back as an ``error`` token and scanning carries on. The exceptions below
are raised by the layers on top of it (strict-mode tokenization, the CLI)
when they decide an error token should stop the run.

Exception Hierarchy
-------------------
MiniAdaError (base)
└── ScanError - lexical error with location and hint
    ├── UnterminatedStringError - input ended inside a string literal
    ├── MalformedIdentifierError - trailing or doubled underscore
    ├── MalformedNumberError - decimal point not followed by a digit
    ├── InvalidCharacterError - character outside the language alphabet
    └── ScanFailedError - aggregate report of several errors

Error Message Format
--------------------
    filename:line: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from miniada.tokens import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniAdaError(Exception):
    """
    Base exception for all Mini-Ada errors.

        try:
            tokens = scan_file("prog.ada", ScanOptions(strict=True))
        except MiniAdaError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source code for error reporting.

    The scanner only tracks lines, so unlike a full compiler location
    there is no column.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Scan Errors
# =============================================================================

class ScanError(MiniAdaError):
    """
    Base exception for lexical errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        lexeme: The offending source text (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        lexeme: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.lexeme = lexeme
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            prog.ada:3: error: malformed identifier 'count_'
            hint: an underscore must be followed by a letter or digit
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ScanFailedError(ScanError):
    """
    Aggregate error wrapping a report built by ErrorCollector.

    The message is already formatted and is passed through untouched.
    """

    def _format_message(self) -> str:
        return self.message


class UnterminatedStringError(ScanError):
    """
    Input ended inside a string literal.

    Example:
        Put("hello;      -- no closing quote before end of file
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        lexeme: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add a closing '\"' (write '\"\"' for a quote inside a string)",
            lexeme=lexeme,
        )


class MalformedIdentifierError(ScanError):
    """
    Identifier with a trailing or doubled underscore.

    Examples:
        count_      -- trailing underscore
        max__value  -- doubled underscore
    """

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
    ):
        super().__init__(
            f"malformed identifier '{lexeme}'",
            location=location,
            hint="an underscore must be followed by a letter or digit",
            lexeme=lexeme,
        )


class MalformedNumberError(ScanError):
    """Numeric literal whose decimal point is not followed by a digit."""

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
    ):
        super().__init__(
            f"malformed numeric literal '{lexeme}'",
            location=location,
            hint="a decimal point must be followed by at least one digit",
            lexeme=lexeme,
        )


class InvalidCharacterError(ScanError):
    """Character that cannot start any token."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
    ):
        self.char = char
        if char:
            message = f"invalid character '{char}' (0x{ord(char):02X})"
        else:
            message = "invalid character"
        super().__init__(message, location=location, lexeme=char)


def error_from_token(token: "Token", filename: str = "<input>") -> ScanError:
    """
    Build the exception that describes an error token.

    Args:
        token: A token whose type is TokenType.ERROR
        filename: Source name used in the location

    Returns:
        The ScanError subclass matching the token's error kind
    """
    from miniada.tokens import ErrorKind

    location = SourceLocation(filename, token.line)
    kind = token.error_kind

    if kind is ErrorKind.UNTERMINATED_STRING:
        return UnterminatedStringError(location, token.lexeme)
    if kind is ErrorKind.MALFORMED_IDENTIFIER:
        return MalformedIdentifierError(token.lexeme, location)
    if kind is ErrorKind.MALFORMED_NUMBER:
        return MalformedNumberError(token.lexeme, location)
    return InvalidCharacterError(token.lexeme, location)


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ErrorCollector:
    """
    Collects scan errors for batch reporting.

    The CLI keeps scanning after an error token so that a single run
    reports every bad lexeme in a file.

    Example:
        collector = ErrorCollector()

        for token in scanner.tokenize(source):
            if token.is_error:
                collector.add(error_from_token(token, filename))

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self.errors: List[ScanError] = []

    def add(self, error: ScanError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any errors were collected."""
        if self.has_errors():
            raise ScanFailedError(self.report())
