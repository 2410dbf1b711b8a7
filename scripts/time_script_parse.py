#!/usr/bin/env python3
"""Quick perf benchmark for WadMerge script parsing."""

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

from wadmergepy import parse_result


def _collect_script_files(root: Path, pattern: str) -> list[Path]:
    return sorted(path for path in root.rglob(pattern) if path.is_file())


def _run_once(
    texts: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_lines = 0
    rejected = 0
    iterator = (
        tqdm(texts, desc=label, unit="file")
        if show_progress
        else texts
    )
    for text in iterator:
        parsed = parse_result(text)
        if parsed.document is None:
            rejected += 1
            continue
        total_lines += len(parsed.document)
    duration = time.perf_counter() - start
    return duration, len(texts), total_lines, rejected


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark WadMerge script parsing throughput")
    parser.add_argument("--root", type=Path, required=True, help="Directory holding WadMerge scripts")
    parser.add_argument("--glob", default="*.txt", help="Script file pattern (default: *.txt)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
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
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid --root: {root}")

    files = _collect_script_files(root, args.glob)
    if not files:
        raise SystemExit(f"No {args.glob} files found under {root}")
    texts = [path.read_text(encoding="utf-8", errors="replace") for path in files]

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                texts,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        files_count = 0
        lines_count = 0
        rejected_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, lines_count, rejected_count = _run_once(
                texts,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, lines_count, rejected_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, lines_count, rejected_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, lines_count, rejected_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {files_count} (rejected: {rejected_count})")
    print(f"Line records: {lines_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
