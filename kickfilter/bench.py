"""Timing helpers and a benchmark of the stereo processor."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from kickfilter.filter import FilterError
from kickfilter.processor import BLOCK_LENGTH, DEFAULT_SAMPLE_RATE, Processor

MS = 1_000
US = 1_000_000
NS = 1_000_000_000


def bench_time(func: Callable[[], object]) -> float:
    """Call func once and return the elapsed time in seconds."""
    start = time.perf_counter_ns()
    func()
    end = time.perf_counter_ns()
    return (end - start) / NS


@dataclass(frozen=True)
class BenchmarkResult:
    """Time taken to process one block and time the block represents, in seconds."""

    execution_time: float
    available_time: float


def run_benchmark(
    block_length: int = BLOCK_LENGTH, sample_rate: float = DEFAULT_SAMPLE_RATE
) -> BenchmarkResult:
    """Time one block of constant frames through a fresh processor."""
    if block_length < 0:
        raise ValueError(f"block length must not be negative, got {block_length}")
    audio_buffer = [(1.0, 1.0)] * block_length
    processor = Processor(sample_rate)
    execution_time = bench_time(lambda: processor.process(audio_buffer))
    return BenchmarkResult(execution_time, block_length / sample_rate)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kickfilter-bench", description="Benchmark the stereo filter processor."
    )
    parser.add_argument("--block-length", type=int, default=BLOCK_LENGTH)
    parser.add_argument("--sample-rate", type=float, default=DEFAULT_SAMPLE_RATE)
    args = parser.parse_args(argv)

    print("Run Benchmark")
    try:
        result = run_benchmark(args.block_length, args.sample_rate)
    except (FilterError, ValueError) as exc:
        parser.error(str(exc))
    print(f"Time: {result.execution_time * US} us")
    print(f"Time available: {result.available_time * US} us")
    return 0