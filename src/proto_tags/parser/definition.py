"""Parser registration details for hosts that dispatch on file extension."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Type

from proto_tags.kinds import KindRegistry, default_kinds

from .recognizer import ProtoTagParser


@dataclass
class ParserDefinition:
    name: str
    extensions: List[str]
    kinds: KindRegistry = field(default_factory=default_kinds)
    parser: Type[ProtoTagParser] = ProtoTagParser

    def handles(self, path: str) -> bool:
        """True if ``path`` has one of this parser's extensions."""
        suffix = Path(path).suffix
        return bool(suffix) and suffix[1:] in self.extensions


PROTOBUF_PARSER = ParserDefinition(name="Protobuf", extensions=["proto"])
