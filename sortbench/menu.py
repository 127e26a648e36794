"""
Interactive menu for SortBench

The user picks a dataset category once, then repeatedly picks a dataset and
an algorithm; each pick is benchmarked and reported. Any out-of-range or
non-numeric answer ends the session.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from sortbench.algorithms import Algorithm, get_sort_function
from sortbench.config import Config
from sortbench.datasets import DatasetType, dataset_names, load_dataset
from sortbench.harness import BenchmarkResult, benchmark

logger = logging.getLogger(__name__)

RULE = "=" * 40
THIN_RULE = "-" * 40


class Menu:
    """Prompt-driven benchmark session

    Args:
        config: SortBench configuration
        input_fn: Reads one answer given a prompt (``input`` by default)
        output: Writes one line of text (``print`` by default)
    """

    def __init__(
        self,
        config: Config,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.config = config
        self.input_fn = input_fn
        self.output = output
        self.results: list[BenchmarkResult] = []

    def _header(self, title: str) -> None:
        self.output(f"\n{RULE}")
        self.output(title.center(40).rstrip())
        self.output(RULE)

    def _ask(self, options: list[str]) -> int | None:
        """Show numbered options and return the 0-based pick, or None"""
        for i, option in enumerate(options, start=1):
            self.output(f"{i}. {option}")
        self.output(THIN_RULE)
        try:
            answer = self.input_fn("Enter your choice: ")
        except EOFError:
            return None
        try:
            choice = int(answer.strip())
        except ValueError:
            logger.debug(f"Non-numeric menu answer: {answer!r}")
            return None
        if 1 <= choice <= len(options):
            return choice - 1
        return None

    def choose_dataset_type(self) -> DatasetType | None:
        self._header("SELECT DATASET TYPE")
        types = list(DatasetType)
        pick = self._ask([t.label for t in types] + ["Exit"])
        if pick is None or pick == len(types):
            return None
        return types[pick]

    def choose_dataset(self, dataset_type: DatasetType) -> str | None:
        self._header("SELECT A DATASET")
        names = dataset_names(dataset_type, self.config.datasets.sizes)
        pick = self._ask(names + ["Exit"])
        if pick is None or pick == len(names):
            return None
        return names[pick]

    def choose_algorithm(self) -> Algorithm | None:
        self._header("SELECT A SORTING ALGORITHM")
        algorithms = list(Algorithm)
        pick = self._ask([a.label for a in algorithms] + ["Exit"])
        if pick is None or pick == len(algorithms):
            return None
        return algorithms[pick]

    def _goodbye(self) -> None:
        self.output("\nExiting the program. Goodbye!")
        self.output(RULE)

    def run(self) -> list[BenchmarkResult]:
        """Run the session until the user exits

        Raises:
            DatasetLoadError: a chosen dataset file cannot be opened
        """
        self._header("SORTING ALGORITHM BENCHMARK TEST")

        dataset_type = self.choose_dataset_type()
        if dataset_type is None:
            self._goodbye()
            return self.results

        directory = Path(self.config.datasets.directory)
        while True:
            filename = self.choose_dataset(dataset_type)
            if filename is None:
                break

            data = load_dataset(directory / filename)

            algorithm = self.choose_algorithm()
            if algorithm is None:
                break

            self.output(f"\n{THIN_RULE}")
            self.output("   Sorting in progress. Please be patient...")
            self.output(THIN_RULE)

            result = benchmark(
                get_sort_function(algorithm),
                algorithm.label,
                data,
                filename,
                verify=self.config.benchmark.verify,
            )
            self.results.append(result)

            self.output(f"\n{THIN_RULE}")
            self.output(result.format())
            self.output(f"{THIN_RULE}\n")

        self._goodbye()
        return self.results


def run_menu(
    config: Config,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> list[BenchmarkResult]:
    """Run an interactive benchmark session and return its results"""
    return Menu(config, input_fn=input_fn, output=output).run()
