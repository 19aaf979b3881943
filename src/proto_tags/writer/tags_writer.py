from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from proto_tags.kinds import KindRegistry
from proto_tags.models import SymbolRecord

PROGRAM_NAME = "proto-tags"
PROGRAM_VERSION = "0.1.0"


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
    )


def _sort_key(record: SymbolRecord):
    return (record.name, record.source_file, record.line)


def render_tags(
    records: List[SymbolRecord],
    kinds: KindRegistry,
    sort: bool = True,
    long_kinds: bool = False,
) -> str:
    """Render records as a tag file in ctags extended format."""
    env = _get_template_env()
    template = env.get_template("tags.j2")

    ordered = sorted(records, key=_sort_key) if sort else list(records)
    tags: List[Dict[str, object]] = []
    for record in ordered:
        option = kinds[record.kind]
        tags.append({
            "name": record.name,
            "file": record.source_file,
            "line": record.line,
            "kind": f"kind:{option.name}" if long_kinds else option.letter,
        })

    return template.render(
        program=PROGRAM_NAME,
        version=PROGRAM_VERSION,
        sorted=sort,
        tags=tags,
    )


def render_kinds(kinds: KindRegistry) -> str:
    """Render the kind table the way ``--list-kinds`` shows it."""
    env = _get_template_env()
    template = env.get_template("kinds.j2")
    return template.render(kinds=list(kinds.values()))


def write_tags(
    records: List[SymbolRecord],
    output_path: str,
    kinds: KindRegistry,
    sort: bool = True,
    long_kinds: bool = False,
) -> None:
    """Write a tag file to ``output_path``; ``-`` means standard output."""
    source = render_tags(records, kinds, sort=sort, long_kinds=long_kinds)
    if output_path == "-":
        sys.stdout.write(source)
    else:
        Path(output_path).write_text(source)
