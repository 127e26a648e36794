"""
Dataset sampler

Draws unique random integers and writes them as dataset files. Uniqueness
comes from rejection against a set: values are drawn uniformly from
[0, upper_bound] until the set holds the requested count.
"""

import logging
from pathlib import Path

import numpy as np

from sortbench.config import DEFAULT_UPPER_BOUND, Config
from sortbench.datasets import DatasetType, dataset_filename

logger = logging.getLogger(__name__)

# Values drawn per numpy call while filling the set
_BATCH_SIZE = 4096


def generate_unique_dataset(
    count: int,
    upper_bound: int = DEFAULT_UPPER_BOUND,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """Draw count distinct integers uniformly from [0, upper_bound]

    Args:
        count: Number of values to return
        upper_bound: Inclusive upper end of the range
        rng: Random generator (a fresh unseeded one by default)

    Returns:
        The values in no particular order

    Raises:
        ValueError: count is negative or exceeds the size of the range
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if upper_bound < 0:
        raise ValueError(f"upper_bound must be non-negative, got {upper_bound}")
    if count > upper_bound + 1:
        raise ValueError(f"Cannot draw {count} unique values from [0, {upper_bound}]")

    if rng is None:
        rng = np.random.default_rng()

    unique_numbers: set[int] = set()
    while len(unique_numbers) < count:
        batch = rng.integers(0, upper_bound, size=_BATCH_SIZE, endpoint=True)
        for value in batch.tolist():
            unique_numbers.add(value)
            if len(unique_numbers) == count:
                break

    return list(unique_numbers)


def order_dataset(values: list[int], dataset_type: DatasetType) -> list[int]:
    """Return values arranged for a dataset category"""
    if dataset_type is DatasetType.PRE_SORTED:
        return sorted(values)
    if dataset_type is DatasetType.REVERSE_SORTED:
        return sorted(values, reverse=True)
    return list(values)


def write_dataset(path: str | Path, values: list[int]) -> Path:
    """Write values one per line, creating parent directories"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for num in values:
            f.write(f"{num}\n")
    logger.debug(f"Wrote {len(values)} values to {path}")
    return path


def generate_corpus(
    config: Config, rng: np.random.Generator | None = None
) -> dict[DatasetType, list[Path]]:
    """Write every configured size in every configured ordering

    One sample is drawn per size and written in each ordering, so the
    random, pre-sorted and reverse-sorted files of a size hold the same values.

    Returns:
        Paths written, grouped by dataset category
    """
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    dataset_config = config.datasets
    directory = Path(dataset_config.directory)
    dataset_types = [DatasetType(o) for o in dataset_config.orderings]

    written: dict[DatasetType, list[Path]] = {t: [] for t in dataset_types}
    for size in dataset_config.sizes:
        values = generate_unique_dataset(size, dataset_config.upper_bound, rng)
        for dataset_type in dataset_types:
            path = directory / dataset_filename(dataset_type, size)
            write_dataset(path, order_dataset(values, dataset_type))
            written[dataset_type].append(path)
            logger.info(f"Dataset {path} created with {size} unique numbers")

    return written
