"""
Copyright (c) 2025. All rights reserved.
"""

"""
MapReduce Job Registry

Central registry that provides sample job classes by name.
Each job class exposes static map and reduce methods that can be handed
straight to MapReduceTask.
"""

from ..config import EngineConfig
from ..engine import TypelessMapReduce
from ..errors import UnknownJobError
from ..observer import TaskObserver

JOB_NAMES = ("word_count", "sum_values", "word_length_average", "inverted_index")


def get_job_class(job_name: str):
    """Get the MapReduce job class for the given job name."""
    if job_name == "word_count":
        from .word_count import WordCountMapReduce
        return WordCountMapReduce
    elif job_name == "sum_values":
        from .sum_values import SumValuesMapReduce
        return SumValuesMapReduce
    elif job_name == "word_length_average":
        from .word_length_average import WordLengthAverageMapReduce
        return WordLengthAverageMapReduce
    elif job_name == "inverted_index":
        from .inverted_index import InvertedIndexMapReduce
        return InvertedIndexMapReduce
    else:
        raise UnknownJobError(
            f"Unsupported job: {job_name} (available: {', '.join(JOB_NAMES)})"
        )


def create_task(job_name: str,
                config: EngineConfig = None,
                observer: TaskObserver = None) -> TypelessMapReduce:
    """Build a MapReduceTask wired with the named job's map and reduce functions."""
    job_class = get_job_class(job_name)
    return TypelessMapReduce(
        map_function=job_class.map,
        reduce_function=job_class.reduce,
        config=config,
        observer=observer,
    )
