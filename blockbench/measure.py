# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import logging
import statistics
import time
from typing import Any, Callable, NamedTuple

logger = logging.getLogger("blockbench-measure")

Clock = Callable[[], float]


class TimingSummary(NamedTuple):
    label: str
    iterations: int
    min: float
    average: float
    max: float


def summarize(label: str, elapsed: list[float]) -> TimingSummary:
    """`elapsed` must already be sorted ascending"""
    # Rounding can put the mean of equal samples just outside [min, max]
    average = min(max(statistics.fmean(elapsed), elapsed[0]), elapsed[-1])
    return TimingSummary(label, len(elapsed), elapsed[0], average, elapsed[-1])


def print_results(summary: TimingSummary) -> None:
    print(f"Parse {summary.label} ({summary.iterations} iterations):")
    print(f"min: {summary.min:.3f}ms")
    print(f"average: {summary.average:.3f}ms")
    print(f"max: {summary.max:.3f}ms")


def measure(label: str, iterations: int, work: Callable[[], Any],
        clock: Clock = time.perf_counter) -> list[float]:
    """Call `work` `iterations` times back to back and print min/average/max latency in
    milliseconds. Any exception raised by `work` aborts the run before anything is printed.

    Returns the sorted timings so that callers can inspect them."""
    if iterations < 1:
        raise ValueError(f"iterations must be a positive integer, got {iterations}")

    elapsed: list[float] = []
    for i in range(iterations):
        t0 = clock()
        try:
            work()
        except Exception:
            logger.debug(f"Parse {label} failed on iteration {i + 1} of {iterations}")
            raise
        t1 = clock()
        elapsed.append(max((t1 - t0) * 1000, 0.0))

    elapsed.sort()
    summary = summarize(label, elapsed)
    logger.debug(f"Parse {label}: {summary}")
    print_results(summary)
    return elapsed
