#!/usr/bin/env python3
"""Quick perf benchmark for assembler source parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from asmnav.folding import folding_regions
from asmnav.parser import ParseMode, ParserOptions, SourceParser
from asmnav.resolve import LocalFileSystem
from asmnav.syntax import Language, get_syntax

DEFAULT_EXTENSIONS = (".asm", ".a65", ".m65", ".inc", ".s", ".src")


def _collect_source_files(root: Path, extensions: tuple[str, ...]) -> list[Path]:
    files = sorted(path for path in root.rglob("*") if path.suffix.lower() in extensions)
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[tuple[Path, str]],
    parser: SourceParser,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_identifiers = 0
    total_regions = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for path, text in iterator:
        parsed = parser.parse(text, str(path))
        total_identifiers += len(parsed.identifiers)
        total_regions += len(folding_regions(parsed))
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_identifiers, total_regions, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark assembler parsing throughput")
    parser.add_argument("source_root", type=Path, help="Directory with assembler sources")
    parser.add_argument(
        "--language",
        type=Language,
        choices=list(Language),
        default=Language.MADS,
        help="Dialect used for every file (default: mads)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help=f"File extension to include, repeatable (default: {' '.join(DEFAULT_EXTENSIONS)})",
    )
    parser.add_argument("--strict", action="store_true", help="Parse in strict mode")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick profiling/smoke tests (0 = all files)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    source_root: Path = args.source_root
    if not source_root.exists() or not source_root.is_dir():
        raise SystemExit(f"Invalid source root: {source_root}")

    extensions = tuple(ext.lower() for ext in args.ext) if args.ext else DEFAULT_EXTENSIONS
    files = _collect_source_files(source_root, extensions)
    if not files:
        raise SystemExit(f"No {'/'.join(extensions)} files found under {source_root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    file_system = LocalFileSystem()
    sources = [(path, file_system.read_text(str(path))) for path in files]
    mode = ParseMode.STRICT if args.strict else ParseMode.PERMISSIVE
    source_parser = SourceParser(get_syntax(args.language), ParserOptions.for_mode(mode))
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                source_parser,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        identifiers_count = 0
        regions_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, identifiers_count, regions_count, diagnostics_count = _run_once(
                sources,
                source_parser,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, identifiers_count, regions_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, identifiers_count, regions_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, identifiers_count, regions_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    total_bytes = sum(len(text) for _, text in sources)

    print(f"Dataset: {source_root} ({args.language.name}, {mode.value})")
    print(f"Files: {len(sources)}")
    print(f"Identifiers: {identifiers_count}")
    print(f"Fold regions: {regions_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(sources) / mean:.1f}")
    print(f"KiB/s (mean):   {total_bytes / 1024 / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
