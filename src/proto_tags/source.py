"""Character source for .proto files.

Feeds the tokenizer one character at a time with comments and quoted
strings already removed, and keeps track of the current line number.
"""

from __future__ import annotations

from typing import Optional


class PushbackError(RuntimeError):
    """Raised when more than one character is pushed back."""


class CharSource:
    """Reads characters from proto text, one character of pushback.

    ``//`` and ``/* */`` comments come out as a single space. Quoted
    strings (single or double quotes, with backslash escapes) come out as
    a single ``"`` so that their contents never look like identifiers.
    An unterminated ``'`` string ends at the newline, an unterminated
    ``"`` string at end of input.
    ``get()`` returns ``None`` at end of input.
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0
        self._pushed: Optional[str] = None
        self.line = 1

    def get(self) -> Optional[str]:
        if self._pushed is not None:
            ch = self._pushed
            self._pushed = None
            if ch == "\n":
                self.line += 1
            return ch

        ch = self._read()
        if ch is None:
            return None

        if ch == "/":
            nxt = self._peek()
            if nxt == "/":
                self._skip_line_comment()
                return " "
            if nxt == "*":
                self._pos += 1
                self._skip_block_comment()
                return " "
            return ch

        if ch in ('"', "'"):
            self._skip_string(ch)
            return '"'

        return ch

    def unget(self, ch: Optional[str]) -> None:
        """Push ``ch`` back so the next ``get()`` returns it.

        Pushing back end of input (``None``) is a no-op: the source stays
        exhausted.
        """
        if ch is None:
            return
        if self._pushed is not None:
            raise PushbackError("Only one character of pushback is supported")
        self._pushed = ch
        if ch == "\n":
            self.line -= 1

    # -- raw reading --

    def _read(self) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        if ch == "\n":
            self.line += 1
        return ch

    def _peek(self) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        return self._text[self._pos]

    def _skip_line_comment(self) -> None:
        # The newline is left in place, it still ends the line.
        while self._peek() not in (None, "\n"):
            self._pos += 1

    def _skip_block_comment(self) -> None:
        while True:
            ch = self._read()
            if ch is None:
                return
            if ch == "*" and self._peek() == "/":
                self._pos += 1
                return

    def _skip_string(self, quote: str) -> None:
        while True:
            # A single-quoted literal never spans lines; the newline stays.
            if quote == "'" and self._peek() == "\n":
                return
            ch = self._read()
            if ch is None or ch == quote:
                return
            if ch == "\\":
                self._read()
