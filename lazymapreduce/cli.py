"""
Copyright (c) 2025. All rights reserved.
"""

"""
Command line driver for the MapReduce engine.

Reads every *.txt file in a data directory, pushes one input pair per line
and runs a sample job sequentially, in parallel, or both. In "both" mode the
two result sets are compared and a performance summary is printed.
"""

import argparse
import logging
import os
import sys
from functools import partial
from pathlib import Path
from typing import List, Optional, Tuple

from .benchmark import RunTiming, calculate_speedup, time_run
from .config import EngineConfig
from .factories.registry import JOB_NAMES, create_task
from .observer import LoggingObserver
from .pairs import KeyValuePair

logger = logging.getLogger(__name__)

EPILOG = """
Examples:
  python -m lazymapreduce                          # both modes, word_count
  python -m lazymapreduce sequential --data-dir ./data
  python -m lazymapreduce parallel --max-workers 4 --job inverted_index
  python -m lazymapreduce both --repeats 5 --top 20 --log-level DEBUG
"""


def load_inputs(data_dir: Path) -> List[KeyValuePair]:
    """One ("<file>:<line number>", line) pair per non-empty line of every *.txt file."""
    inputs = []
    for file_path in sorted(data_dir.glob("*.txt")):
        with open(file_path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.rstrip("\n")
                if line.strip():
                    inputs.append(KeyValuePair(f"{file_path.name}:{line_no}", line))
    return inputs


def run_mode(job: str, inputs: List[KeyValuePair], parallel: bool, config: EngineConfig,
             repeats: int) -> Tuple[dict, RunTiming]:
    """Run the job once for its results, then time it ``repeats`` times."""
    task = create_task(job, config=config, observer=LoggingObserver())
    task.push_inputs(inputs)
    results = task.run(parallel_map=parallel, parallel_reduce=parallel).to_dict()
    for failure in task.failures:
        print(f"  ! {failure}")

    timing = time_run(partial(create_task, job, config), inputs, parallel, repeats)
    return results, timing


def print_results(title: str, results: dict, top: int) -> None:
    print("-" * 60)
    print(title)
    print("-" * 60)
    ordered = sorted(results.items(), key=lambda kv: str(kv[0]))
    if all(isinstance(value, (int, float)) for value in results.values()):
        ordered.sort(key=lambda kv: kv[1], reverse=True)
    for key, value in ordered[:top]:
        print(f"{key!s:<30} {value}")
    if len(ordered) > top:
        print(f"... {len(ordered) - top} more")


def print_performance(sequential: RunTiming, parallel: RunTiming, max_workers: Optional[int]) -> float:
    speedup = calculate_speedup(sequential.mean_seconds, parallel.mean_seconds)

    print(f"\n{'=' * 60}")
    print("PERFORMANCE ANALYSIS")
    print(f"{'=' * 60}")
    print(f"Sequential time:     {sequential.mean_seconds:.4f} ± {sequential.std_seconds:.4f} seconds")
    print(f"Parallel time:       {parallel.mean_seconds:.4f} ± {parallel.std_seconds:.4f} seconds")
    print(f"Speedup:             {speedup:.2f}x")
    print(f"Worker threads:      {max_workers or 'executor default'} (CPU cores: {os.cpu_count()})")
    print(f"Repeats:             {sequential.repeats}")
    if speedup > 1:
        print(f"Parallel processing is {speedup:.2f}x faster")
    else:
        print("Sequential processing is as fast or faster (thread overhead dominates)")
    print(f"{'=' * 60}")
    return speedup


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the MapReduce driver."""
    parser = argparse.ArgumentParser(
        prog="lazymapreduce",
        description="In-memory MapReduce simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["sequential", "parallel", "both"],
        default="both",
        help="Processing mode (default: both)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="./data",
        help="Directory containing .txt files to process (default: ./data)",
    )
    parser.add_argument(
        "--job",
        choices=JOB_NAMES,
        default="word_count",
        help="Sample job to run (default: word_count)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Worker threads for parallel phases (default: executor default)",
    )
    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Record map/reduce failures per task instead of aborting the run",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of results to print (default: 10)",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=1,
        help="Timed repetitions per mode (default: 1)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    data_dir = Path(args.data_dir)
    if not data_dir.exists():
        print(f"Error: Data directory {data_dir} does not exist")
        return 1

    inputs = load_inputs(data_dir)
    if not inputs:
        print(f"Error: No non-empty lines in .txt files under {data_dir}")
        return 1

    if args.repeats < 1:
        print(f"Error: --repeats must be at least 1, got {args.repeats}")
        return 1

    try:
        config = EngineConfig(max_workers=args.max_workers, isolate_failures=args.isolate_failures)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"\nLoaded {len(inputs)} input pairs from {data_dir} (job: {args.job})")

    outcomes = {}
    for mode in ("sequential", "parallel"):
        if args.mode not in (mode, "both"):
            continue
        print("\n" + "=" * 60)
        print(f"{mode.upper()} PROCESSING")
        print("=" * 60)
        try:
            results, timing = run_mode(args.job, inputs, mode == "parallel", config, args.repeats)
        except Exception as e:
            logger.debug("Run failed", exc_info=True)
            print(f"Error: {mode} run failed: {type(e).__name__}: {e}")
            return 1
        print(f"{len(results)} results in {timing.mean_seconds:.4f} seconds")
        print_results(f"{mode.upper()} MAPREDUCE RESULTS", results, args.top)
        outcomes[mode] = (results, timing)

    if len(outcomes) == 2:
        sequential_results, sequential_timing = outcomes["sequential"]
        parallel_results, parallel_timing = outcomes["parallel"]
        print("\n" + "=" * 60)
        print("CORRECTNESS VERIFICATION")
        print("=" * 60)
        if sequential_results != parallel_results:
            print("Correctness check failed: sequential and parallel results differ")
            return 1
        print("Sequential and parallel results are identical")
        print_performance(sequential_timing, parallel_timing, args.max_workers)

    print("\nMapReduce run completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
