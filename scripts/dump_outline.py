#!/usr/bin/env python3
"""Print the symbol tree of assembler sources, one file or a whole directory."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from asmnav.model import SourceFile, TreeObject
from asmnav.pipeline import parse_document
from asmnav.resolve import LocalFileSystem
from asmnav.scanner import dump_partitions, scan_partitions
from asmnav.syntax import Language, get_syntax

DEFAULT_EXTENSIONS = (".asm", ".a65", ".m65", ".inc", ".s", ".src")


def format_node(node: TreeObject) -> str:
    depth = sum(1 for _ in node.ancestors())
    name = node.name if node.name is not None else "<unnamed>"
    return (
        f"{'  ' * depth}{node.kind.text} {name} "
        f"compound={node.compound_name!r} "
        f"lines={node.start_line}-{node.end_line} "
        f"range=({node.start},{node.end})"
    )


def format_source_file(source_file: SourceFile) -> list[str]:
    lines = [f"# {source_file.source_path}"]
    lines.extend(format_node(node) for node in source_file.walk())
    for diagnostic in source_file.diagnostics:
        line = source_file.line_of_offset(diagnostic.range.start.value)
        lines.append(f"! {diagnostic.severity} {diagnostic.code} {diagnostic.located(source_file.source_path, line)}")
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump assembler outlines")
    parser.add_argument("path", type=Path, help="Source file or directory")
    parser.add_argument(
        "--language",
        type=Language,
        choices=list(Language),
        default=Language.MADS,
        help="Dialect (default: mads)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")
    parser.add_argument("--partitions", action="store_true", help="Also print the partition list of each file")
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    root: Path = args.path
    if root.is_file():
        files = [root]
    elif root.is_dir():
        files = sorted(path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in DEFAULT_EXTENSIONS)
    else:
        raise SystemExit(f"Invalid path: {root}")

    file_system = LocalFileSystem()
    fallback = get_syntax(args.language)
    output: list[str] = []
    iterator = files if args.no_progress or len(files) == 1 else tqdm(files, desc="parse", unit="file")
    for path in iterator:
        text = file_system.read_text(str(path))
        result = parse_document(
            text,
            args.language,
            str(path),
            fallback=fallback,
        )
        if result.error is not None:
            output.append(f"! {result.error.diagnostic.located(str(path), result.error.line)}")
        if result.source_file is not None:
            output.extend(format_source_file(result.source_file))
        if args.partitions:
            syntax = result.syntax or fallback
            dump_partitions(scan_partitions(text, syntax), text)

    if args.output is None:
        print("\n".join(output))
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("\n".join(output) + "\n", encoding="utf-8")
        print(f"Wrote outlines of {len(files)} files to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
