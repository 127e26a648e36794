"""
Dataset catalog and loader

Datasets are plain text files holding one integer per line. Each category
(random, pre-sorted, reverse-sorted) has a fixed file-name pattern so the
generator and the benchmark agree on where a dataset of a given size lives.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from sortbench.config import DEFAULT_SIZES
from sortbench.errors import DatasetFormatError, DatasetLoadError

logger = logging.getLogger(__name__)


class DatasetType(Enum):
    """Ordering of the values in a dataset file"""

    RANDOM = "random"
    PRE_SORTED = "pre_sorted"
    REVERSE_SORTED = "reverse_sorted"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_LABELS = {
    DatasetType.RANDOM: "Unsorted Datasets",
    DatasetType.PRE_SORTED: "Pre-Sorted Datasets",
    DatasetType.REVERSE_SORTED: "Reverse Sorted Datasets",
}

_PREFIXES = {
    DatasetType.RANDOM: "dataset",
    DatasetType.PRE_SORTED: "sorted_dataset",
    DatasetType.REVERSE_SORTED: "sorted_desc_dataset",
}


def dataset_filename(dataset_type: DatasetType, size: int) -> str:
    """File name of the dataset of a category and size, e.g. sorted_dataset_25000.txt"""
    return f"{dataset_type.prefix}_{size}.txt"


def dataset_names(dataset_type: DatasetType, sizes: Iterable[int] = DEFAULT_SIZES) -> list[str]:
    """Ordered dataset file names of one category"""
    return [dataset_filename(dataset_type, size) for size in sizes]


def load_dataset(path: str | Path) -> list[int]:
    """Read whitespace-delimited integers from a dataset file

    Raises:
        DatasetLoadError: the file cannot be opened
        DatasetFormatError: a line is not UTF-8 text or a token is not an integer
    """
    path = Path(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise DatasetLoadError(path, e.strerror) from e

    data = []
    with f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                token = raw.decode("utf-8", errors="backslashreplace").strip()
                raise DatasetFormatError(path, line_number, token, reason="not UTF-8 text") from None
            for token in line.split():
                try:
                    data.append(int(token))
                except ValueError:
                    raise DatasetFormatError(path, line_number, token) from None

    logger.info(f"Loaded {len(data)} values from {path}")
    return data
