"""
Indexed priority queue command-line interface (CLI)

Subcommands:
- benchmark: time the heap operations on growing inputs, write a CSV
- sort: read "item priority" lines and print items in ascending priority

Usage examples:
    python -m indexedpq.cli benchmark --path heap_performance.csv --rounds 8
    python -m indexedpq.cli sort --path jobs.txt
    printf "a 5\nb 3\na 1\n" | python -m indexedpq.cli sort
"""

import argparse
import sys

from .benchmark import (
    DEFAULT_BASE_INPUT,
    DEFAULT_ITERATIONS,
    DEFAULT_ROUNDS,
    OPERATIONS,
    run_benchmarks,
)
from .datastructures import IndexedMinHeap
from .logger import LOG_LEVELS, init_logger, set_level

logger = init_logger(__name__)


# -------------------------------------------------------------------
# Input parsing
# -------------------------------------------------------------------
def parse_priority(text):
    """Parse an int when possible, otherwise a float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def load_pairs(lines):
    """Yield (item, priority) from "item priority" lines; blanks and # comments skipped."""
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.rsplit(None, 1)
        if len(parts) != 2:
            raise ValueError(f"line {lineno}: expected 'item priority', got {line!r}")
        item, text = parts
        try:
            priority = parse_priority(text)
        except ValueError:
            raise ValueError(f"line {lineno}: invalid priority {text!r}") from None
        yield item, priority


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_benchmark(args):
    """Run the benchmark suite and write the CSV report."""
    rows = run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        seed=args.seed,
        operations=args.ops,
    )
    print(f"Wrote {rows} rows to {args.path}")


def cmd_sort(args):
    """Print items in ascending priority; a repeated item takes its latest priority."""
    heap = IndexedMinHeap()
    if args.path:
        with open(args.path, "r", encoding="utf-8") as f:
            pairs = list(load_pairs(f))
    else:
        pairs = list(load_pairs(sys.stdin))
    for item, priority in pairs:
        heap.upsert(item, priority)
    logger.debug("loaded %d lines, %d distinct items", len(pairs), len(heap))
    while heap:
        item, priority = heap.extract_min_with_priority()
        print(f"{item}\t{priority}")


# -------------------------------------------------------------------
# Parser
# -------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(prog="indexedpq", description="Indexed min-priority queue tools")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("benchmark", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.add_argument("--ops", nargs="+", choices=sorted(OPERATIONS), default=None)
    s.set_defaults(func=cmd_benchmark)

    s = sub.add_parser("sort", help="Print 'item priority' lines in priority order")
    s.add_argument("--path", default=None, help="input file (stdin when omitted)")
    s.set_defaults(func=cmd_sort)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m indexedpq.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_level(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
