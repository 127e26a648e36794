"""
SortBench: timing six classical sorting algorithms over generated datasets
"""

from sortbench._version import __version__
from sortbench.algorithms import (
    ALGORITHMS,
    STABLE_ALGORITHMS,
    Algorithm,
    bubble_sort,
    get_sort_function,
    insertion_sort,
    merge,
    merge_sort,
    partition,
    quick_sort,
    selection_sort,
    shell_sort,
)
from sortbench.config import Config, load_config
from sortbench.datasets import DatasetType, load_dataset
from sortbench.errors import (
    DatasetFormatError,
    DatasetLoadError,
    SortBenchError,
    SortVerificationError,
)
from sortbench.harness import BenchmarkResult, benchmark, run_suite
from sortbench.sampler import generate_corpus, generate_unique_dataset

__all__ = [
    "__version__",
    # Sort library
    "Algorithm",
    "ALGORITHMS",
    "STABLE_ALGORITHMS",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "partition",
    "quick_sort",
    "shell_sort",
    "get_sort_function",
    # Datasets
    "DatasetType",
    "load_dataset",
    "generate_unique_dataset",
    "generate_corpus",
    # Benchmarking
    "BenchmarkResult",
    "benchmark",
    "run_suite",
    # Configuration
    "Config",
    "load_config",
    # Errors
    "SortBenchError",
    "DatasetLoadError",
    "DatasetFormatError",
    "SortVerificationError",
]
