"""
Command-line interface for SortBench
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
import yaml

from sortbench.algorithms import Algorithm
from sortbench.config import Config, DatasetConfig, load_config
from sortbench.datasets import DatasetType, dataset_names
from sortbench.errors import DatasetFormatError, DatasetLoadError, SortVerificationError
from sortbench.harness import run_suite
from sortbench.menu import run_menu
from sortbench.sampler import generate_corpus

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _setup_logging(level: str | int) -> None:
    if isinstance(level, int):
        numeric_level = level
    else:
        numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for sortbench-run"""
    parser = argparse.ArgumentParser(description="SortBench - Sorting algorithm benchmark")

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=LOG_LEVELS,
        default=None,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        action="append",
        choices=[a.value for a in Algorithm],
        help="Algorithm to benchmark (repeatable); omit to use the interactive menu",
        default=None,
    )

    parser.add_argument(
        "--dataset-type",
        "-t",
        choices=[t.value for t in DatasetType],
        help="Benchmark every configured dataset of this category",
        default=None,
    )

    parser.add_argument(
        "--dataset",
        "-d",
        action="append",
        help="Dataset file to benchmark (repeatable)",
        default=None,
    )

    parser.add_argument("--repeats", "-r", type=int, help="Timed runs per pair", default=None)

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that every sorted copy is in ascending order",
    )

    return parser.parse_args(argv)


def parse_generate_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for sortbench-generate"""
    parser = argparse.ArgumentParser(
        description="SortBench - Generate datasets of unique random integers"
    )

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=LOG_LEVELS,
        default=None,
    )

    parser.add_argument("--sizes", "-n", type=int, nargs="+", help="Dataset sizes", default=None)

    parser.add_argument("--output", "-o", help="Directory to write datasets to", default=None)

    parser.add_argument("--seed", "-s", type=int, help="Random seed", default=None)

    parser.add_argument(
        "--upper-bound", "-u", type=int, help="Largest value that may be drawn", default=None
    )

    return parser.parse_args(argv)


def _dataset_paths(args: argparse.Namespace, config: Config) -> list[Path]:
    if args.dataset:
        return [Path(d) for d in args.dataset]
    dataset_type = DatasetType(args.dataset_type or DatasetType.RANDOM.value)
    directory = Path(config.datasets.directory)
    return [directory / name for name in dataset_names(dataset_type, config.datasets.sizes)]


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for sortbench-run

    Returns:
        Exit code
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e!s}")
        return 1

    if args.log_level:
        config.log_level = args.log_level
    if args.repeats is not None:
        if args.repeats < 1:
            print("Error: --repeats must be at least 1")
            return 1
        config.benchmark.repeats = args.repeats
    if args.verify:
        config.benchmark.verify = True

    _setup_logging(config.log_level)

    try:
        if not args.algorithm:
            ignored = [
                flag
                for flag, value in (
                    ("--dataset-type", args.dataset_type),
                    ("--dataset", args.dataset),
                    ("--repeats", args.repeats),
                )
                if value is not None
            ]
            if ignored:
                logger.warning(
                    f"{', '.join(ignored)} only apply with --algorithm; ignored by the menu"
                )
            run_menu(config)
            return 0

        results = run_suite(args.algorithm, _dataset_paths(args, config), config.benchmark)
        for result in results:
            print(result.format())
        return 0

    except (DatasetLoadError, DatasetFormatError, SortVerificationError) as e:
        logger.error(f"Benchmark aborted: {e!s}")
        print(f"Error: {e!s}")
        return 1


def generate_main(argv: list[str] | None = None) -> int:
    """
    Entry point for sortbench-generate

    Returns:
        Exit code
    """
    args = parse_generate_args(argv)

    try:
        config = load_config(args.config)

        if args.log_level:
            config.log_level = args.log_level
        if args.seed is not None:
            config.random_seed = args.seed

        if args.sizes or args.output or args.upper_bound is not None:
            config.datasets = DatasetConfig(
                directory=args.output or config.datasets.directory,
                sizes=args.sizes or config.datasets.sizes,
                upper_bound=(
                    args.upper_bound
                    if args.upper_bound is not None
                    else config.datasets.upper_bound
                ),
                orderings=config.datasets.orderings,
            )
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e!s}")
        return 1

    _setup_logging(config.log_level)

    rng = np.random.default_rng(config.random_seed)
    try:
        written = generate_corpus(config, rng)
    except OSError as e:
        logger.error(f"Failed to write datasets: {e!s}")
        print(f"Error: {e!s}")
        return 1

    for paths in written.values():
        for size, path in zip(config.datasets.sizes, paths):
            print(f"Dataset {path} created with {size} unique numbers.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
