"""
Configuration handling for SortBench
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SIZES = [25000, 75000, 120000, 350000, 500000]
DEFAULT_UPPER_BOUND = 4_000_000
ORDERINGS = ("random", "pre_sorted", "reverse_sorted")


@dataclass
class DatasetConfig:
    """Configuration for dataset generation and lookup"""

    # Where dataset files are written and read
    directory: str = "datasets"

    # Element counts, one file per size and ordering
    sizes: list[int] = field(default_factory=lambda: list(DEFAULT_SIZES))

    # Values are drawn from [0, upper_bound]
    upper_bound: int = DEFAULT_UPPER_BOUND

    # Which orderings to write when generating the corpus
    orderings: list[str] = field(default_factory=lambda: list(ORDERINGS))

    def __post_init__(self):
        if self.upper_bound < 0:
            raise ValueError(f"datasets.upper_bound must be non-negative, got {self.upper_bound}")
        if not self.sizes:
            raise ValueError("datasets.sizes must list at least one size")
        for size in self.sizes:
            if size < 0:
                raise ValueError(f"Dataset size must be non-negative, got {size}")
            if size > self.upper_bound + 1:
                raise ValueError(
                    f"Cannot draw {size} unique values from [0, {self.upper_bound}]"
                )
        unknown = [o for o in self.orderings if o not in ORDERINGS]
        if unknown:
            raise ValueError(f"Unknown dataset ordering(s): {', '.join(unknown)}")


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs"""

    # Number of timed runs per (algorithm, dataset) pair
    repeats: int = 1

    # Check the output is sorted after every timed run
    verify: bool = False

    # Skip O(n^2) algorithms on datasets larger than this (None = never skip)
    skip_quadratic_above: int | None = None

    def __post_init__(self):
        if self.repeats < 1:
            raise ValueError(f"benchmark.repeats must be at least 1, got {self.repeats}")


@dataclass
class Config:
    """Master configuration for SortBench"""

    # General settings
    log_level: str | int = "INFO"
    random_seed: int | None = None

    # Component configurations
    datasets: DatasetConfig = field(default_factory=DatasetConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file"""
        with open(path) as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        config = Config()

        nested_keys = ["datasets", "benchmark"]

        # Update top-level fields
        for key, value in config_dict.items():
            if key not in nested_keys and hasattr(config, key):
                setattr(config, key, value)

        # Update nested configs
        if "datasets" in config_dict:
            config.datasets = DatasetConfig(**config_dict["datasets"])
        if "benchmark" in config_dict:
            config.benchmark = BenchmarkConfig(**config_dict["benchmark"])

        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        config = Config.from_yaml(config_path)
    else:
        config = Config()

        # Use environment variables if available
        dataset_dir = os.environ.get("SORTBENCH_DATASET_DIR")
        if dataset_dir:
            config.datasets.directory = dataset_dir

        log_level = os.environ.get("SORTBENCH_LOG_LEVEL")
        if log_level:
            config.log_level = log_level.upper()

    return config
