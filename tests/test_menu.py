import tempfile
import unittest
from pathlib import Path

from sortbench.config import Config, DatasetConfig
from sortbench.errors import DatasetLoadError
from sortbench.menu import run_menu
from sortbench.sampler import write_dataset


class ScriptedInput:
    """Feeds canned answers to the menu, then signals end of input"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class TestMenu(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.config = Config(datasets=DatasetConfig(directory=self.tmp.name, sizes=[6, 8]))
        write_dataset(self.dir / "dataset_6.txt", [5, 3, 8, 1, 9, 2])
        write_dataset(self.dir / "sorted_desc_dataset_8.txt", list(range(8, 0, -1)))
        self.lines = []

    def tearDown(self):
        self.tmp.cleanup()

    def run_with(self, answers):
        scripted = ScriptedInput(answers)
        results = run_menu(self.config, input_fn=scripted, output=self.lines.append)
        return results, scripted

    def test_benchmarks_until_exit(self):
        # Unsorted category, dataset 1 with quick sort, dataset 1 with shell sort, then exit
        results, scripted = self.run_with(["1", "1", "5", "1", "6", "3"])

        self.assertEqual(
            [(r.algorithm, r.dataset, r.size) for r in results],
            [("Quick Sort", "dataset_6.txt", 6), ("Shell Sort", "dataset_6.txt", 6)],
        )
        output = "\n".join(self.lines)
        self.assertIn("SORTING ALGORITHM BENCHMARK TEST", output)
        self.assertIn("1. Unsorted Datasets", output)
        self.assertIn("2. dataset_8.txt", output)
        self.assertIn("7. Exit", output)
        self.assertIn("Quick Sort for dataset_6.txt took", output)
        self.assertIn("Please be patient", output)
        self.assertIn("Exiting the program. Goodbye!", output)
        self.assertEqual(len(scripted.answers), 0)

    def test_reverse_category_lists_its_files(self):
        results, _ = self.run_with(["3", "2", "1", "x"])
        self.assertEqual([r.dataset for r in results], ["sorted_desc_dataset_8.txt"])
        self.assertIn("1. sorted_desc_dataset_6.txt", self.lines)

    def test_exit_from_type_menu(self):
        results, scripted = self.run_with(["4"])
        self.assertEqual(results, [])
        self.assertEqual(len(scripted.prompts), 1)
        self.assertIn("\nExiting the program. Goodbye!", self.lines)

    def test_invalid_or_missing_answers_exit(self):
        for answers in (["9"], ["abc"], [], ["1", "0"], ["1", "1", "7"], ["1", "1", "-2"]):
            with self.subTest(answers=answers):
                self.lines.clear()
                results, _ = self.run_with(answers)
                self.assertEqual(results, [])
                self.assertIn("\nExiting the program. Goodbye!", self.lines)

    def test_missing_dataset_is_fatal(self):
        # Pre-sorted files were never written
        with self.assertRaises(DatasetLoadError):
            self.run_with(["2", "1"])


if __name__ == "__main__":
    unittest.main()
