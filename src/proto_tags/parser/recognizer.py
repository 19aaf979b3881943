"""Recursive descent tag recognizer for protobuf (.proto) files.

Walks the token stream statement by statement, extracting the names of
packages, messages, fields, enums, enum constants, services and RPC
methods. Anything it does not understand is skipped up to the next
``;``, ``{`` or ``}``, so malformed input only ever costs missing tags.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from proto_tags.kinds import KindRegistry, default_kinds
from proto_tags.models import SymbolKind, SymbolRecord
from proto_tags.source import CharSource

from .tokenizer import ProtoTokenizer, ProtoTokenType

TagSink = Callable[[SymbolRecord], None]

STATEMENT_KEYWORDS: Dict[str, SymbolKind] = {
    "package": SymbolKind.PACKAGE,
    "message": SymbolKind.MESSAGE,
    "enum": SymbolKind.ENUM,
    "repeated": SymbolKind.FIELD,
    "optional": SymbolKind.FIELD,
    "required": SymbolKind.FIELD,
    "service": SymbolKind.SERVICE,
    "rpc": SymbolKind.RPC,
}

_STATEMENT_END = (
    ProtoTokenType.SEMICOLON,
    ProtoTokenType.LBRACE,
    ProtoTokenType.RBRACE,
)
_ENUMERATOR_END = (ProtoTokenType.SEMICOLON, ProtoTokenType.RBRACE)


class ProtoTagParser:
    """Extracts tags from one character source and hands them to ``sink``."""

    def __init__(
        self,
        source: CharSource,
        sink: TagSink,
        kinds: Optional[KindRegistry] = None,
        source_file: str = "",
    ):
        self._source = source
        self._sink = sink
        self._kinds = kinds if kinds is not None else default_kinds()
        self._source_file = source_file
        self._tokenizer: Optional[ProtoTokenizer] = None

    # -- public API --

    def run(self) -> None:
        """Scan the whole source, emitting every enabled tag found."""
        self._tokenizer = ProtoTokenizer(self._source)
        try:
            self._find_tags()
        finally:
            self._tokenizer = None

    # -- statement parsing --

    def _find_tags(self) -> None:
        tok = self._tokenizer
        tok.next_token()

        while tok.token.type != ProtoTokenType.EOF:
            if tok.token.type == ProtoTokenType.IDENT:
                kind = STATEMENT_KEYWORDS.get(tok.token.value)
                if kind is not None:
                    self._parse_statement(kind)

            # Resynchronize whether or not the statement was understood.
            tok.skip_until(_STATEMENT_END)
            tok.next_token()

    def _parse_statement(self, kind: SymbolKind) -> bool:
        """Parse: KEYWORD [type] IDENT(name) ...

        Returns False when the statement did not have the expected shape
        and nothing was emitted.
        """
        tok = self._tokenizer
        tok.next_token()  # keyword

        if kind == SymbolKind.FIELD and not self._skip_field_type():
            return False

        if tok.token.type != ProtoTokenType.IDENT:
            return False

        self._emit(tok.token.value, tok.token.line, kind)
        tok.next_token()

        if kind == SymbolKind.ENUM:
            self._parse_enum_constants()
        return True

    def _skip_field_type(self) -> bool:
        """Skip a possibly qualified type name such as ``.foo.Bar.Baz``."""
        tok = self._tokenizer
        while True:
            if tok.token.type == ProtoTokenType.DOT:
                tok.next_token()
            if tok.token.type != ProtoTokenType.IDENT:
                return False
            tok.next_token()
            if tok.token.type != ProtoTokenType.DOT:
                return True

    def _parse_enum_constants(self) -> None:
        """Parse the body of an enum: LBRACE (IDENT EQUALS ... SEMICOLON)* RBRACE"""
        tok = self._tokenizer
        if tok.token.type != ProtoTokenType.LBRACE:
            return
        tok.next_token()

        while tok.token.type not in (ProtoTokenType.EOF, ProtoTokenType.RBRACE):
            if tok.token.type == ProtoTokenType.IDENT and not tok.is_keyword("option"):
                name = tok.token.value
                line = tok.token.line
                tok.next_token()
                if tok.token.type == ProtoTokenType.EQUALS:
                    self._emit(name, line, SymbolKind.ENUMERATOR)

            tok.skip_until(_ENUMERATOR_END)

            if tok.token.type == ProtoTokenType.SEMICOLON:
                tok.next_token()

    # -- output --

    def _emit(self, name: str, line: int, kind: SymbolKind) -> None:
        option = self._kinds.get(kind)
        if option is None or not option.enabled:
            return
        self._sink(
            SymbolRecord(name=name, kind=kind, line=line, source_file=self._source_file)
        )
