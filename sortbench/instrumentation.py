"""
Comparison counting for sort functions

Wraps each value in a Counted object whose rich comparisons bump a shared
counter, so any sort in sortbench.algorithms can be measured by the number of
element comparisons it performs rather than by wall-clock time.
"""

import functools
import logging
from collections.abc import Iterable

from sortbench.algorithms import SortFunction

logger = logging.getLogger(__name__)


@functools.total_ordering
class Counted:
    """A value that reports every comparison to its counter"""

    __slots__ = ("value", "counter")

    def __init__(self, value, counter: "ComparisonCounter"):
        self.value = value
        self.counter = counter

    def __eq__(self, other):
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value < other.value

    def __gt__(self, other):
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value > other.value

    def __le__(self, other):
        if not isinstance(other, Counted):
            return NotImplemented
        self.counter.count += 1
        return self.value <= other.value

    __hash__ = None

    def __repr__(self) -> str:
        return f"Counted({self.value!r})"


class ComparisonCounter:
    """Counts comparisons made between the values it wraps"""

    def __init__(self):
        self.count = 0

    def wrap(self, values: Iterable) -> list[Counted]:
        return [Counted(v, self) for v in values]

    @staticmethod
    def unwrap(items: Iterable[Counted]) -> list:
        return [item.value for item in items]

    def reset(self) -> None:
        self.count = 0


def count_comparisons(sort_fn: SortFunction, values: Iterable) -> tuple[list, int]:
    """Sort a copy of values and count the element comparisons

    Returns:
        (sorted values, number of comparisons)
    """
    counter = ComparisonCounter()
    items = counter.wrap(values)
    sort_fn(items)
    logger.debug(f"{getattr(sort_fn, '__name__', sort_fn)} made {counter.count} comparisons")
    return counter.unwrap(items), counter.count
