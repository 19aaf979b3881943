"""Tokenizer for protobuf (.proto) files.

Only identifiers and the punctuation that delimits statements matter for
tag extraction; every other character is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Collection, Optional

from proto_tags.source import CharSource


class ProtoTokenType(Enum):
    # Delimiters
    LBRACE = auto()
    RBRACE = auto()
    SEMICOLON = auto()
    DOT = auto()
    EQUALS = auto()

    # Literals
    IDENT = auto()

    # Special
    EOF = auto()


_PUNCTUATION = {
    "{": ProtoTokenType.LBRACE,
    "}": ProtoTokenType.RBRACE,
    ";": ProtoTokenType.SEMICOLON,
    ".": ProtoTokenType.DOT,
    "=": ProtoTokenType.EQUALS,
}


def _is_ident_char(ch: Optional[str]) -> bool:
    return ch is not None and ((ch.isascii() and ch.isalnum()) or ch == "_")


@dataclass
class ProtoToken:
    """The current token. ``value`` is only meaningful for IDENT."""

    type: ProtoTokenType = ProtoTokenType.EOF
    value: str = ""
    line: int = 0


class ProtoTokenizer:
    """Pulls characters from a CharSource and keeps a single current token.

    The token object is updated in place by ``next_token()``; copy
    ``token.value`` before advancing if it is needed afterwards.
    """

    def __init__(self, source: CharSource):
        self._source = source
        self.token = ProtoToken()

    def next_token(self) -> ProtoToken:
        while True:
            ch = self._source.get()

            if ch is None:
                self.token.type = ProtoTokenType.EOF
                self.token.line = self._source.line
                return self.token

            if ch in _PUNCTUATION:
                self.token.type = _PUNCTUATION[ch]
                self.token.line = self._source.line
                return self.token

            if _is_ident_char(ch):
                line = self._source.line
                chars = []
                while _is_ident_char(ch):
                    chars.append(ch)
                    ch = self._source.get()
                self._source.unget(ch)
                self.token.type = ProtoTokenType.IDENT
                self.token.value = "".join(chars)
                self.token.line = line
                return self.token

            # Whitespace and anything else is not important here.

    def skip_until(self, types: Collection[ProtoTokenType]) -> None:
        """Advance until the current token is EOF or one of ``types``."""
        while self.token.type != ProtoTokenType.EOF and self.token.type not in types:
            self.next_token()

    def is_keyword(self, word: str) -> bool:
        return self.token.type == ProtoTokenType.IDENT and self.token.value == word
