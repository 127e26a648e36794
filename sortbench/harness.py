"""
Benchmark harness for SortBench
"""

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from sortbench.algorithms import Algorithm, SortFunction, get_sort_function, resolve_algorithm
from sortbench.config import BenchmarkConfig
from sortbench.datasets import load_dataset
from sortbench.errors import SortVerificationError

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing of one sort over one dataset"""

    algorithm: str
    dataset: str
    size: int
    elapsed_ms: float

    def format(self) -> str:
        return f"{self.algorithm} for {self.dataset} took {self.elapsed_ms:.3f} ms"


def find_unsorted_index(seq: Sequence) -> int | None:
    """Index i of the first pair with seq[i] > seq[i + 1], or None if ordered"""
    for i in range(len(seq) - 1):
        if seq[i] > seq[i + 1]:
            return i
    return None


def benchmark(
    sort_fn: SortFunction,
    name: str,
    data: Sequence[int],
    dataset_name: str,
    verify: bool = False,
) -> BenchmarkResult:
    """Time one sort over a copy of data

    Args:
        sort_fn: In-place sort callable
        name: Display name of the algorithm
        data: Values to sort; left untouched
        dataset_name: Display name of the dataset
        verify: Raise SortVerificationError if the copy is not sorted afterwards

    Returns:
        BenchmarkResult with the elapsed wall-clock time in milliseconds
    """
    dataset = list(data)

    logger.info(f"Sorting {len(dataset)} values from {dataset_name} with {name}...")

    start = time.perf_counter()
    sort_fn(dataset)
    end = time.perf_counter()

    result = BenchmarkResult(
        algorithm=name,
        dataset=dataset_name,
        size=len(dataset),
        elapsed_ms=(end - start) * 1000.0,
    )
    logger.info(result.format())

    if verify:
        index = find_unsorted_index(dataset)
        if index is not None:
            raise SortVerificationError(name, index)

    return result


def run_suite(
    algorithms: Iterable[Algorithm | str],
    dataset_paths: Iterable[str | Path],
    config: BenchmarkConfig | None = None,
) -> list[BenchmarkResult]:
    """Benchmark every algorithm on every dataset

    Each dataset is loaded once. O(n^2) algorithms are skipped on datasets
    larger than config.skip_quadratic_above when that is set.
    """
    if config is None:
        config = BenchmarkConfig()

    selected = [resolve_algorithm(a) for a in algorithms]
    results = []
    for path in dataset_paths:
        path = Path(path)
        data = load_dataset(path)
        for algorithm in selected:
            limit = config.skip_quadratic_above
            if algorithm.quadratic and limit is not None and len(data) > limit:
                logger.warning(
                    f"Skipping {algorithm.label} on {path.name}: "
                    f"{len(data)} values exceeds skip_quadratic_above={limit}"
                )
                continue
            sort_fn = get_sort_function(algorithm)
            for _ in range(config.repeats):
                results.append(
                    benchmark(sort_fn, algorithm.label, data, path.name, verify=config.verify)
                )
    return results
