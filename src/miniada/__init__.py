"""
Mini-Ada - Scanner for a Small Ada-Derived Language
===================================================

This package provides the lexical scanner for Mini-Ada, a small procedural
language with Ada-style syntax (``procedure ... is ... begin ... end``,
``:=`` assignment, ``--`` comments, case-insensitive keywords).

The scanner turns a character stream into classified tokens for a parser.
It does no parsing or semantic analysis of its own.

Main Components
---------------
- **tokens**: TokenType, ErrorKind, the keyword table and Token
- **source**: forward-only character sources over strings and streams
- **scanner**: the Scanner itself plus scan() / scan_file() helpers
- **config**: ScanOptions
- **errors**: exception hierarchy used by strict mode and the CLI

Quick Start
-----------
Scan a string:
    >>> from miniada import scan
    >>> [t.type.value for t in scan("x := 1;")]
    ['identifier', 'assign', 'numeric_literal', 'semicolon', 'eof']

Drive the scanner one token at a time:
    >>> from miniada import Scanner, StringSource
    >>> scanner = Scanner()
    >>> source = StringSource("Begin")
    >>> scanner.next_token(source).type.value
    'begin'

Or use the command-line tool:
    $ adascan program.ada
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from miniada.config import ScanOptions
from miniada.errors import (
    MiniAdaError,
    SourceLocation,
    ScanError,
    ScanFailedError,
    UnterminatedStringError,
    MalformedIdentifierError,
    MalformedNumberError,
    InvalidCharacterError,
    ErrorCollector,
    error_from_token,
)
from miniada.scanner import Scanner, scan, scan_file
from miniada.source import CharacterSource, StreamSource, StringSource
from miniada.tokens import (
    ErrorKind,
    KEYWORDS,
    Token,
    TokenType,
    classify_as_keyword_or_identifier,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Scanner",
    "scan",
    "scan_file",
    "ScanOptions",
    # Sources
    "CharacterSource",
    "StringSource",
    "StreamSource",
    # Tokens
    "Token",
    "TokenType",
    "ErrorKind",
    "KEYWORDS",
    "classify_as_keyword_or_identifier",
    # Exception hierarchy
    "MiniAdaError",
    "SourceLocation",
    "ScanError",
    "ScanFailedError",
    "UnterminatedStringError",
    "MalformedIdentifierError",
    "MalformedNumberError",
    "InvalidCharacterError",
    "ErrorCollector",
    "error_from_token",
]
