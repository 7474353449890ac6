"""Character-level tokenizer for KiCad footprint S-expressions.

The grammar is deliberately small:

- ``(`` opens a nested list and ``)`` closes the current one
- ``"..."`` is a quoted atom; there are no escape sequences, so the next
  ``"`` always terminates it
- anything else is a bareword that runs until whitespace or a paren

The tokenizer works on an immutable text buffer with a read cursor. Backing
up by one character is the only form of lookahead it needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..exceptions import UnexpectedEndOfInput


class Signal(Enum):
    """Structural tokenizer results that are not atoms."""

    LIST_START = "("
    END_OF_LIST = ")"
    END_OF_INPUT = ""

    def __repr__(self) -> str:
        return f"Signal.{self.name}"


LIST_START = Signal.LIST_START
END_OF_LIST = Signal.END_OF_LIST
END_OF_INPUT = Signal.END_OF_INPUT


@dataclass(frozen=True)
class Token:
    """An atom read from the input."""

    value: str


class Tokenizer:
    """Reads tokens from a text buffer.

    Usage::

        tok = Tokenizer('(at -1.4625 0)')
        tok.next_token()  # Signal.LIST_START
        tok.next_token()  # Token(value='at')
    """

    __slots__ = ("_text", "_pos", "_length")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._length = len(text)

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    def _read_char(self) -> str:
        if self._pos >= self._length:
            raise UnexpectedEndOfInput(
                "Unexpected end of input reading footprint", position=self._pos
            )
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _unread(self) -> None:
        self._pos -= 1

    def skip_whitespace(self) -> bool:
        """Advance past whitespace. Returns False if the input is exhausted."""
        pos = self._pos
        text = self._text
        length = self._length
        while pos < length and text[pos].isspace():
            pos += 1
        self._pos = pos
        return pos < length

    def peek(self) -> str | None:
        """Return the next non-whitespace character without consuming it."""
        if not self.skip_whitespace():
            return None
        return self._text[self._pos]

    def next_token(self) -> Token | Signal:
        """Read the next token.

        Returns a :class:`Token` for atoms, or ``LIST_START``, ``END_OF_LIST``
        or ``END_OF_INPUT``. ``END_OF_INPUT`` is only returned at a token
        boundary; running out of input inside a quoted string or a bareword
        raises :class:`UnexpectedEndOfInput`.
        """
        if not self.skip_whitespace():
            return END_OF_INPUT

        ch = self._read_char()
        if ch == "(":
            return LIST_START
        if ch == ")":
            return END_OF_LIST
        if ch == '"':
            return Token(self._read_quoted())

        self._unread()
        return Token(self._read_bareword())

    def _read_quoted(self) -> str:
        """Read up to the closing quote (the opening one is already consumed)."""
        start = self._pos
        end = self._text.find('"', start)
        if end < 0:
            self._pos = self._length
            raise UnexpectedEndOfInput("Unterminated quoted string", position=start - 1)
        self._pos = end + 1
        return self._text[start:end]

    def _read_bareword(self) -> str:
        """Read until whitespace (consumed) or a paren (left for the next read)."""
        start = self._pos
        while True:
            ch = self._read_char()
            if ch.isspace():
                return self._text[start : self._pos - 1]
            if ch in "()":
                self._unread()
                return self._text[start : self._pos]
