"""Timing and space benchmarks for :class:`IndexedMinHeap`.

Each operation is run on exponentially growing inputs
(``base_input * 2**i`` for ``i`` in ``range(rounds)``) and the results are
written to a CSV file, one row per (operation, input size).
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional

from .datastructures import IndexedMinHeap
from .logger import init_logger

logger = init_logger(__name__)

DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12
DEFAULT_ITERATIONS = 5
DEFAULT_SPACE_ITERATIONS = 3

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

Operation = Callable[[List[int]], IndexedMinHeap]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_priorities(size: int, rng: random.Random) -> List[int]:
    """Random priorities; the item stored under each priority is its list index."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def build_heap(data: List[int]) -> IndexedMinHeap[int, int]:
    heap: IndexedMinHeap[int, int] = IndexedMinHeap()
    for item, priority in enumerate(data):
        heap.insert(item, priority)
    return heap


def time_once(operation: Operation, data: List[int]) -> float:
    """Wall-clock milliseconds for one call of ``operation`` on ``data``."""
    start = time.perf_counter()
    operation(data)
    return (time.perf_counter() - start) * 1000


def measure_operation_time(operation: Operation, input_size: int, rng: random.Random,
                           iterations: int = DEFAULT_ITERATIONS):
    """Mean and sample standard deviation (ms) over fresh random inputs."""
    samples = [time_once(operation, generate_random_priorities(input_size, rng))
               for _ in range(iterations)]
    spread = statistics.stdev(samples) if iterations > 1 else 0.0
    return statistics.mean(samples), spread


def measure_space_efficiency(operation: Operation, input_size: int, rng: random.Random,
                             iterations: int = DEFAULT_SPACE_ITERATIONS) -> float:
    """Return average memory held by the heap after the operation (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_priorities(input_size, rng)
        heap = operation(data)
        total_size = sys.getsizeof(heap)
        total_size += sys.getsizeof(heap._items)
        total_size += sys.getsizeof(heap._priority)
        total_size += sys.getsizeof(heap._item_at)
        total_size += sys.getsizeof(heap._position_of)
        for item in heap.to_list():
            total_size += sys.getsizeof(item) + sys.getsizeof(heap._priority[item])
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data):
    return build_heap(data)


def bench_extract_min(data):
    heap = build_heap(data)
    while heap:
        heap.extract_min()
    return heap


def bench_peek_min(data):
    heap = build_heap(data)
    for _ in range(min(3, len(data))):
        heap.peek_min()
    return heap


def bench_change_priority(data):
    heap = build_heap(data)
    # Reverse the priority ranking: every item moves
    for item, priority in enumerate(data):
        heap.change_priority(item, -priority)
    return heap


def bench_contains(data):
    heap = build_heap(data)
    for item in range(len(data)):
        heap.contains(item)
    return heap


OPERATIONS: Dict[str, Operation] = {
    "insert": bench_insert,
    "extract_min": bench_extract_min,
    "peek_min": bench_peek_min,
    "change_priority": bench_change_priority,
    "contains": bench_contains,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   rounds: int = DEFAULT_ROUNDS, iterations: int = DEFAULT_ITERATIONS,
                   seed: Optional[int] = None, operations: Optional[List[str]] = None) -> int:
    """Run exponential performance tests and write them to ``output_file``.

    Returns the number of result rows written.
    """
    if base_input < 1:
        raise ValueError("base_input must be >= 1")
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if iterations < 1:
        raise ValueError("iterations must be >= 1")

    selected = operations or list(OPERATIONS)
    unknown = [name for name in selected if name not in OPERATIONS]
    if unknown:
        raise ValueError(f"Unknown operation(s): {', '.join(unknown)}")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name in selected:
            op_func = OPERATIONS[op_name]
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, rng, iterations)
                avg_space = measure_space_efficiency(op_func, size, rng)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows += 1
                logger.info(
                    "%-16s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows
