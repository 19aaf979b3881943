from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from proto_tags.kinds import KindSpecError, apply_kind_spec
from proto_tags.models import SymbolRecord
from proto_tags.parser.definition import PROTOBUF_PARSER
from proto_tags.parser.proto_parser import parse_proto_file
from proto_tags.writer.tags_writer import render_kinds, write_tags


def _find_files(working_path: str) -> List[str]:
    """Recursively find files the protobuf parser handles under working_path."""
    return sorted(
        str(p)
        for p in Path(working_path).rglob("*")
        if p.is_file() and PROTOBUF_PARSER.handles(str(p))
    )


def run(
    working_path: Optional[str],
    files: List[str],
    output_path: str = "tags",
    kind_spec: str = "",
    sort: bool = True,
    long_kinds: bool = False,
) -> None:
    """Main pipeline: find, parse, write."""
    verbose = output_path != "-"

    try:
        kinds = apply_kind_spec(PROTOBUF_PARSER.kinds, kind_spec)
    except KindSpecError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    # 1. Find input files
    proto_files = sorted(set(files))
    if working_path:
        proto_files = sorted(set(proto_files) | set(_find_files(working_path)))

    if not proto_files:
        print("FATAL: No .proto files to parse", file=sys.stderr)
        sys.exit(1)

    if verbose:
        print(f"Found {len(proto_files)} proto file(s)")

    # 2. Parse all files
    all_records: List[SymbolRecord] = []
    for pf in proto_files:
        records = parse_proto_file(pf, kinds)
        all_records.extend(records)
        if verbose:
            print(f"  Parsed {pf}: {len(records)} tag(s)")

    # 3. Write the tag file
    write_tags(all_records, output_path, kinds, sort=sort, long_kinds=long_kinds)

    if verbose:
        print(f"Wrote {len(all_records)} tag(s) to {output_path}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Generate a ctags-style tag file for protobuf definitions",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help=".proto files to parse",
    )
    parser.add_argument(
        "--working-path",
        help="Path to scan recursively for .proto files",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="tags",
        help="Tag file to write, '-' for standard output",
    )
    parser.add_argument(
        "--kinds",
        default="",
        help="Kind letters to include, e.g. '+r' or '-f' or 'mg'",
    )
    parser.add_argument(
        "--sort",
        choices=["yes", "no"],
        default="yes",
        help="Sort tags by name",
    )
    parser.add_argument(
        "--long-kinds",
        action="store_true",
        help="Write kinds as 'kind:<name>' instead of a single letter",
    )
    parser.add_argument(
        "--list-kinds",
        action="store_true",
        help="Print the available kinds and exit",
    )

    args = parser.parse_args(argv)

    if args.list_kinds:
        try:
            kinds = apply_kind_spec(PROTOBUF_PARSER.kinds, args.kinds)
        except KindSpecError as e:
            print(f"FATAL: {e}", file=sys.stderr)
            sys.exit(1)
        sys.stdout.write(render_kinds(kinds))
        return

    run(
        args.working_path,
        args.files,
        output_path=args.output,
        kind_spec=args.kinds,
        sort=args.sort == "yes",
        long_kinds=args.long_kinds,
    )


if __name__ == "__main__":
    main()
