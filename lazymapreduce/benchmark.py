"""
Copyright (c) 2025. All rights reserved.
"""

"""
Timing helpers for comparing sequential and parallel runs.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

from .engine import MapReduceTask
from .pairs import PairLike

logger = logging.getLogger(__name__)


@dataclass
class RunTiming:
    """Wall-clock statistics over repeated runs of the same job"""
    mode: str
    repeats: int
    mean_seconds: float
    std_seconds: float
    min_seconds: float
    num_results: int


def time_run(task_factory: Callable[[], MapReduceTask],
             inputs: Sequence[PairLike],
             parallel: bool,
             repeats: int = 1) -> RunTiming:
    """
    Time push + run of a fresh task ``repeats`` times.

    Args:
        task_factory: Returns a configured MapReduceTask
        inputs: Input pairs pushed before every run
        parallel: Run both map and reduce in parallel mode
        repeats: Number of timed runs

    Returns:
        RunTiming: Statistics over the timed runs
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    durations: List[float] = []
    num_results = 0
    for _ in range(repeats):
        task = task_factory()
        start_time = time.perf_counter()
        task.push_inputs(inputs)
        results = task.run(parallel_map=parallel, parallel_reduce=parallel)
        durations.append(time.perf_counter() - start_time)
        num_results = len(results)

    samples = np.asarray(durations)
    timing = RunTiming(
        mode="parallel" if parallel else "sequential",
        repeats=repeats,
        mean_seconds=float(np.mean(samples)),
        std_seconds=float(np.std(samples)),
        min_seconds=float(np.min(samples)),
        num_results=num_results,
    )
    logger.debug(f"{timing.mode} timing: {timing.mean_seconds:.6f}s mean over {repeats} runs")
    return timing


def calculate_speedup(sequential_time: float, parallel_time: float) -> float:
    """Sequential over parallel time, infinite when the parallel time is zero."""
    if parallel_time == 0:
        logger.warning("Parallel time is zero, cannot calculate speedup")
        return float("inf")
    return sequential_time / parallel_time
