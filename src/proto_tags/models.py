from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SymbolKind(Enum):
    PACKAGE = auto()
    MESSAGE = auto()
    FIELD = auto()
    ENUMERATOR = auto()
    ENUM = auto()
    SERVICE = auto()
    RPC = auto()


@dataclass
class KindOption:
    """Per-kind settings: whether it is emitted and how it is labelled."""

    enabled: bool
    letter: str
    name: str
    description: str


@dataclass
class SymbolRecord:
    name: str
    kind: SymbolKind
    line: int = 0
    source_file: str = ""
