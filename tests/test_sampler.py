import tempfile
import unittest
from pathlib import Path

import numpy as np

from sortbench.config import Config, DatasetConfig
from sortbench.datasets import DatasetType, load_dataset
from sortbench.sampler import (
    generate_corpus,
    generate_unique_dataset,
    order_dataset,
    write_dataset,
)


class TestGenerateUniqueDataset(unittest.TestCase):
    def test_returns_exactly_count_distinct_values_in_range(self):
        rng = np.random.default_rng(0)
        values = generate_unique_dataset(5000, upper_bound=20000, rng=rng)
        self.assertEqual(len(values), 5000)
        self.assertEqual(len(set(values)), 5000)
        self.assertTrue(all(0 <= v <= 20000 for v in values))
        self.assertTrue(all(type(v) is int for v in values))

    def test_count_equal_to_range_size_covers_the_range(self):
        values = generate_unique_dataset(11, upper_bound=10, rng=np.random.default_rng(3))
        self.assertEqual(sorted(values), list(range(11)))

    def test_zero_count_and_zero_bound(self):
        self.assertEqual(generate_unique_dataset(0, upper_bound=10), [])
        self.assertEqual(generate_unique_dataset(1, upper_bound=0), [0])

    def test_seeded_generator_is_reproducible(self):
        a = generate_unique_dataset(100, rng=np.random.default_rng(99))
        b = generate_unique_dataset(100, rng=np.random.default_rng(99))
        self.assertEqual(a, b)

    def test_rejects_impossible_requests(self):
        with self.assertRaises(ValueError):
            generate_unique_dataset(12, upper_bound=10)
        with self.assertRaises(ValueError):
            generate_unique_dataset(-1)
        with self.assertRaises(ValueError):
            generate_unique_dataset(1, upper_bound=-1)


class TestOrderDataset(unittest.TestCase):
    def test_orderings(self):
        values = [4, 1, 3]
        self.assertEqual(order_dataset(values, DatasetType.RANDOM), [4, 1, 3])
        self.assertEqual(order_dataset(values, DatasetType.PRE_SORTED), [1, 3, 4])
        self.assertEqual(order_dataset(values, DatasetType.REVERSE_SORTED), [4, 3, 1])
        self.assertEqual(values, [4, 1, 3])


class TestWriteAndCorpus(unittest.TestCase):
    def test_write_dataset_one_value_per_line(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = write_dataset(Path(tmp) / "nested" / "d.txt", [3, -2, 10])
            self.assertEqual(path.read_text(), "3\n-2\n10\n")

    def test_generate_corpus_writes_every_ordering(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Config(
                random_seed=5,
                datasets=DatasetConfig(directory=tmp, sizes=[10, 25], upper_bound=1000),
            )
            written = generate_corpus(config)

            self.assertEqual(set(written), set(DatasetType))
            self.assertEqual(
                [p.name for p in written[DatasetType.PRE_SORTED]],
                ["sorted_dataset_10.txt", "sorted_dataset_25.txt"],
            )

            random_values = load_dataset(Path(tmp) / "dataset_25.txt")
            ascending = load_dataset(Path(tmp) / "sorted_dataset_25.txt")
            descending = load_dataset(Path(tmp) / "sorted_desc_dataset_25.txt")

            self.assertEqual(len(set(random_values)), 25)
            self.assertEqual(ascending, sorted(random_values))
            self.assertEqual(descending, sorted(random_values, reverse=True))

    def test_generate_corpus_respects_orderings(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Config(
                datasets=DatasetConfig(
                    directory=tmp, sizes=[5], upper_bound=100, orderings=["reverse_sorted"]
                )
            )
            written = generate_corpus(config, rng=np.random.default_rng(1))
            self.assertEqual(list(written), [DatasetType.REVERSE_SORTED])
            self.assertEqual(sorted(p.name for p in Path(tmp).iterdir()), ["sorted_desc_dataset_5.txt"])


if __name__ == "__main__":
    unittest.main()
