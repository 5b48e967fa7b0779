#!/usr/bin/env python3
"""Automate the search benchmark workflow."""
from __future__ import annotations

import argparse
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

DEFAULT_LINE_COUNT = 200_000
DEFAULT_NEEDLE = "needle"
DEFAULT_QUERY_TARGET = 0.5


@dataclass
class SearchMeasurement:
    mode: str
    query: str
    warmup_seconds: float
    measured_seconds: float


def resolve_path(path_str: str, base_dir: Path) -> Path:
    path = Path(path_str)
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def timed_run(command: Sequence[str], cwd: Path) -> float:
    start = time.perf_counter()
    subprocess.run(command, cwd=str(cwd), check=True, stdout=subprocess.DEVNULL)
    return time.perf_counter() - start


def format_relative(path: Path, base_dir: Path) -> str:
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return path.as_posix()


def write_results(path: Path, workspace_root: Path, *,
                  timestamp: datetime,
                  line_count: int,
                  corpus_path: Path,
                  measurements: List[SearchMeasurement],
                  query_target: float,
                  generator_seconds: float | None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    slowest = max((m.measured_seconds for m in measurements), default=float("inf"))
    status = "PASS" if measurements and slowest <= query_target else "FAIL"

    lines: List[str] = []
    rendered_timestamp = timestamp.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    lines.append("# Benchmark Results")
    lines.append("")
    lines.append(f"Generated: {rendered_timestamp}")
    lines.append(f"Corpus: {format_relative(corpus_path, workspace_root)}")
    lines.append(f"Lines: {line_count}")
    if generator_seconds is not None:
        lines.append(f"Generation time: {generator_seconds:.2f}s")
    lines.append(f"Search target (< {query_target:.3f}s): {status} (slowest={slowest:.3f}s)")
    lines.append("")
    lines.append("## Searches")
    if measurements:
        lines.append("Mode | Query | Warmup (s) | Measured (s)")
        lines.append("--- | --- | --- | ---")
        for measurement in measurements:
            lines.append(
                f"{measurement.mode} | {measurement.query} | "
                f"{measurement.warmup_seconds:.3f} | {measurement.measured_seconds:.3f}"
            )
    else:
        lines.append("No searches recorded.")

    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def main() -> None:
    workspace_root = Path(__file__).resolve().parents[1]

    parser = argparse.ArgumentParser(description="Run the minigrep performance benchmarks.")
    parser.add_argument("--lines", type=int, default=DEFAULT_LINE_COUNT, help="Number of lines to generate.")
    parser.add_argument("--needle", type=str, default=DEFAULT_NEEDLE, help="Query used for every search.")
    parser.add_argument(
        "--corpus",
        type=str,
        default="build/benchmark_corpus.txt",
        help="Destination for the synthetic corpus.",
    )
    parser.add_argument(
        "--results",
        type=str,
        default="documentation/reports/benchmark_results.md",
        help="Where to write the Markdown summary.",
    )
    parser.add_argument(
        "--generator",
        type=str,
        default="scripts/generate_benchmark_corpus.py",
        help="Path to the corpus generator script.",
    )
    parser.add_argument(
        "--minigrep",
        type=str,
        default="minigrep.py",
        help="Path to the minigrep CLI entry point.",
    )
    parser.add_argument(
        "--python",
        type=str,
        default=sys.executable,
        help="Python executable used to run child processes.",
    )
    parser.add_argument(
        "--reuse-corpus",
        action="store_true",
        help="Reuse an existing corpus instead of regenerating it.",
    )
    parser.add_argument(
        "--query-target",
        type=float,
        default=DEFAULT_QUERY_TARGET,
        help="Target time (seconds) for a warmed search.",
    )
    parser.add_argument(
        "--skip-warmup",
        action="store_true",
        help="Skip the warmup pass before measuring searches.",
    )

    args = parser.parse_args()

    if args.lines <= 0:
        parser.error("--lines must be greater than zero")

    corpus_path = resolve_path(args.corpus, workspace_root)
    results_path = resolve_path(args.results, workspace_root)
    generator_path = resolve_path(args.generator, workspace_root)
    minigrep_path = resolve_path(args.minigrep, workspace_root)
    python_exec = args.python

    generator_elapsed: float | None = None
    if corpus_path.exists() and args.reuse_corpus:
        print(f"[bench] reusing corpus at {corpus_path}")
    else:
        print(f"[bench] generating {args.lines} lines into {corpus_path} using {generator_path}")
        generator_elapsed = timed_run(
            [python_exec, str(generator_path), str(corpus_path), "--lines", str(args.lines), "--needle", args.needle],
            cwd=workspace_root,
        )
        print(f"[bench] generation completed in {generator_elapsed:.2f}s")

    modes = [("case-sensitive", []), ("ignore-case", ["--ignore-case"])]
    measurements: List[SearchMeasurement] = []
    for mode, extra in modes:
        cmd = [python_exec, str(minigrep_path), args.needle, str(corpus_path), *extra]
        if not args.skip_warmup:
            print(f"[bench] warming up {mode} {args.needle}")
            warmup_elapsed = timed_run(cmd, cwd=workspace_root)
        else:
            warmup_elapsed = 0.0
        print(f"[bench] measuring {mode} {args.needle}")
        measured_elapsed = timed_run(cmd, cwd=workspace_root)
        measurements.append(SearchMeasurement(mode, args.needle, warmup_elapsed, measured_elapsed))
        print(f"[bench] {mode} {args.needle} warmup={warmup_elapsed:.3f}s measured={measured_elapsed:.3f}s")

    write_results(
        results_path,
        workspace_root,
        timestamp=datetime.now(timezone.utc),
        line_count=args.lines,
        corpus_path=corpus_path,
        measurements=measurements,
        query_target=args.query_target,
        generator_seconds=generator_elapsed,
    )
    print(f"[bench] wrote results to {results_path}")


if __name__ == "__main__":
    main()
