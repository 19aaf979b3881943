"""Kind registry: which symbol kinds are emitted and how they are labelled."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict

from proto_tags.models import KindOption, SymbolKind

KindRegistry = Dict[SymbolKind, KindOption]

# RPC methods are off unless explicitly requested.
_DEFAULT_KINDS: KindRegistry = {
    SymbolKind.PACKAGE: KindOption(True, "p", "package", "packages"),
    SymbolKind.MESSAGE: KindOption(True, "m", "message", "messages"),
    SymbolKind.FIELD: KindOption(True, "f", "field", "fields"),
    SymbolKind.ENUMERATOR: KindOption(True, "e", "enumerator", "enum constants"),
    SymbolKind.ENUM: KindOption(True, "g", "enum", "enum types"),
    SymbolKind.SERVICE: KindOption(True, "s", "service", "services"),
    SymbolKind.RPC: KindOption(False, "r", "rpc", "RPC methods"),
}


class KindSpecError(ValueError):
    """Raised when a kind selection string names an unknown kind."""


def default_kinds() -> KindRegistry:
    """Return a fresh copy of the default kind table."""
    return {kind: replace(option) for kind, option in _DEFAULT_KINDS.items()}


def kind_by_letter(letter: str) -> SymbolKind:
    for kind, option in _DEFAULT_KINDS.items():
        if option.letter == letter:
            return kind
    raise KindSpecError(f"Unknown kind letter {letter!r}")


def apply_kind_spec(kinds: KindRegistry, spec: str) -> KindRegistry:
    """Return a copy of ``kinds`` with the selection in ``spec`` applied.

    ``spec`` uses the ctags notation: ``+`` enables the letters that follow
    it, ``-`` disables them. A spec that does not start with ``+`` or ``-``
    replaces the selection: every kind is disabled first and only the
    listed letters are enabled.
    """
    result = {kind: replace(option) for kind, option in kinds.items()}
    if not spec:
        return result

    if spec[0] not in "+-":
        for option in result.values():
            option.enabled = False

    enable = True
    for ch in spec:
        if ch == "+":
            enable = True
        elif ch == "-":
            enable = False
        else:
            result[kind_by_letter(ch)].enabled = enable

    return result
