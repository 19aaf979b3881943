from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from proto_tags.kinds import KindRegistry
from proto_tags.models import SymbolRecord
from proto_tags.source import CharSource

from .definition import PROTOBUF_PARSER


def find_tags(
    text: str,
    kinds: Optional[KindRegistry] = None,
    source_file: str = "",
) -> List[SymbolRecord]:
    """Extract tags from proto source text, in emission order."""
    records: List[SymbolRecord] = []
    parser = PROTOBUF_PARSER.parser(CharSource(text), records.append, kinds, source_file)
    parser.run()
    return records


def parse_proto_file(file_path: str, kinds: Optional[KindRegistry] = None) -> List[SymbolRecord]:
    """Read a .proto file and extract all of its tags.

    Bytes that are not valid UTF-8 are replaced rather than rejected; they
    can only ever sit in comments, strings or junk the scanner skips.
    """
    text = Path(file_path).read_text(encoding="utf-8", errors="replace")
    return find_tags(text, kinds, source_file=file_path)
