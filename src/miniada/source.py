"""
Character Sources
=================

The scanner reads through a small forward-only interface: look at the
next character, consume it, or ask whether input is exhausted. It never
seeks backward, so the same scanner works over an in-memory string or
an open text stream.

Both peek() and advance() return an empty string at end of input, so
callers can test membership in a character set without a separate
end-of-input check.
"""

from typing import Protocol, TextIO


class CharacterSource(Protocol):
    """Forward-only character stream with one character of lookahead."""

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end)."""
        ...

    def advance(self) -> str:
        """Consume and return the next character ("" at end)."""
        ...

    def at_end(self) -> bool:
        """Return True when no characters remain."""
        ...


class StringSource:
    """
    Character source over an in-memory string.

    Example:
        source = StringSource("x := 1;")
        token = Scanner().next_token(source)
    """

    def __init__(self, text: str):
        self.text = text
        self._pos = 0

    def peek(self) -> str:
        if self._pos >= len(self.text):
            return ""
        return self.text[self._pos]

    def advance(self) -> str:
        if self._pos >= len(self.text):
            return ""
        char = self.text[self._pos]
        self._pos += 1
        return char

    def at_end(self) -> bool:
        return self._pos >= len(self.text)

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos


class StreamSource:
    """
    Character source over a text stream.

    Reads one character at a time and keeps a single character of
    lookahead. The stream is borrowed: it is never closed here.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._lookahead = stream.read(1)

    def peek(self) -> str:
        return self._lookahead

    def advance(self) -> str:
        char = self._lookahead
        if char:
            self._lookahead = self.stream.read(1)
        return char

    def at_end(self) -> bool:
        return self._lookahead == ""
