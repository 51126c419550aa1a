"""
Copyright (c) 2025. All rights reserved.
"""

"""
Configuration dataclasses for the MapReduce engine.

EngineConfig groups the knobs that shape how parallel phases are scheduled
and how failures in user code are treated. The factory helpers at the bottom
return ready-made configurations for common situations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """
    Configuration for a MapReduceTask.

    Attributes:
        max_workers (Optional[int]): Thread pool size used by parallel phases.
            None lets ThreadPoolExecutor pick its default.
        isolate_failures (bool): When True an exception raised by a map or
            reduce function is recorded and the run continues. When False
            (the default) the exception propagates out of run().
        thread_name_prefix (str): Prefix for worker thread names, visible in
            log records.

    Example:
        config = EngineConfig(max_workers=4, isolate_failures=False)
    """
    max_workers: Optional[int] = None
    isolate_failures: bool = False
    thread_name_prefix: str = "mapreduce"

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")


def create_default_config() -> EngineConfig:
    """Fail-fast configuration with the executor's default pool size"""
    return EngineConfig()


def create_parallel_config(max_workers: int) -> EngineConfig:
    """Fail-fast configuration with a fixed worker pool size"""
    return EngineConfig(max_workers=max_workers)


def create_lenient_config(max_workers: Optional[int] = None) -> EngineConfig:
    """Configuration that isolates user function failures per task"""
    return EngineConfig(max_workers=max_workers, isolate_failures=True)
