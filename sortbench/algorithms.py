"""
Sort library for SortBench

Six textbook in-place sorts over a mutable list of integers. Every function
reorders its argument ascending and returns nothing. Merge sort and quick sort
take an inclusive index range; the whole-list forms registered in ALGORITHMS
call them with [0, len - 1].
"""

from collections.abc import Callable, MutableSequence
from enum import Enum

SortFunction = Callable[[MutableSequence], None]


def bubble_sort(seq: MutableSequence) -> None:
    """Swap adjacent out-of-order pairs for n - 1 passes"""
    n = len(seq)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if seq[j] > seq[j + 1]:
                seq[j], seq[j + 1] = seq[j + 1], seq[j]


def selection_sort(seq: MutableSequence) -> None:
    """Swap the minimum of each unsorted suffix into place"""
    n = len(seq)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if seq[j] < seq[min_idx]:
                min_idx = j
        seq[i], seq[min_idx] = seq[min_idx], seq[i]


def insertion_sort(seq: MutableSequence) -> None:
    """Shift each element left past the strictly greater prefix elements"""
    for i in range(1, len(seq)):
        key = seq[i]
        j = i - 1
        while j >= 0 and seq[j] > key:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = key


def merge(seq: MutableSequence, left: int, mid: int, right: int) -> None:
    """Merge the sorted runs seq[left:mid + 1] and seq[mid + 1:right + 1]

    Ties take the left run's element first, which keeps the sort stable.
    """
    left_run = seq[left : mid + 1]
    right_run = seq[mid + 1 : right + 1]
    n1, n2 = len(left_run), len(right_run)

    i = j = 0
    k = left
    while i < n1 and j < n2:
        if left_run[i] <= right_run[j]:
            seq[k] = left_run[i]
            i += 1
        else:
            seq[k] = right_run[j]
            j += 1
        k += 1

    # Copy whatever remains of either run
    while i < n1:
        seq[k] = left_run[i]
        i += 1
        k += 1
    while j < n2:
        seq[k] = right_run[j]
        j += 1
        k += 1


def merge_sort(seq: MutableSequence, left: int = 0, right: int | None = None) -> None:
    """Sort seq[left:right + 1] by recursive halving and merging"""
    if right is None:
        right = len(seq) - 1
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(seq, left, mid)
        merge_sort(seq, mid + 1, right)
        merge(seq, left, mid, right)


def partition(seq: MutableSequence, low: int, high: int) -> int:
    """Partition seq[low:high + 1] around its last element

    Returns:
        Final index of the pivot
    """
    pivot = seq[high]
    i = low - 1
    for j in range(low, high):
        if seq[j] < pivot:
            i += 1
            seq[i], seq[j] = seq[j], seq[i]
    seq[i + 1], seq[high] = seq[high], seq[i + 1]
    return i + 1


def quick_sort(seq: MutableSequence, low: int = 0, high: int | None = None) -> None:
    """Sort seq[low:high + 1] with a last-element pivot

    Sorted and reverse-sorted input degrade to O(n^2) comparisons. The smaller
    side is sorted recursively and the larger one by looping, so the stack
    stays O(log n) even then.
    """
    if high is None:
        high = len(seq) - 1
    while low < high:
        pi = partition(seq, low, high)
        if pi - low < high - pi:
            quick_sort(seq, low, pi - 1)
            low = pi + 1
        else:
            quick_sort(seq, pi + 1, high)
            high = pi - 1


def shell_sort(seq: MutableSequence) -> None:
    """Gapped insertion sort with gaps n/2, n/4, ..., 1"""
    n = len(seq)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = seq[i]
            j = i
            while j >= gap and seq[j - gap] > temp:
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = temp
        gap //= 2


class Algorithm(Enum):
    """Sorting algorithms in menu order"""

    BUBBLE = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE = "merge"
    QUICK = "quick"
    SHELL = "shell"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Sort"

    @property
    def quadratic(self) -> bool:
        """True when the average case is O(n^2)"""
        return self in (Algorithm.BUBBLE, Algorithm.SELECTION, Algorithm.INSERTION)


def _merge_sort_all(seq: MutableSequence) -> None:
    merge_sort(seq, 0, len(seq) - 1)


def _quick_sort_all(seq: MutableSequence) -> None:
    quick_sort(seq, 0, len(seq) - 1)


ALGORITHMS: dict[Algorithm, SortFunction] = {
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.SELECTION: selection_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.MERGE: _merge_sort_all,
    Algorithm.QUICK: _quick_sort_all,
    Algorithm.SHELL: shell_sort,
}

STABLE_ALGORITHMS = (Algorithm.BUBBLE, Algorithm.INSERTION, Algorithm.MERGE)


def resolve_algorithm(name: "Algorithm | str") -> Algorithm:
    """Look up an algorithm by enum member, value ("quick") or label ("Quick Sort")"""
    if isinstance(name, Algorithm):
        return name
    key = name.strip().lower()
    for algorithm in Algorithm:
        if key in (algorithm.value, algorithm.label.lower()):
            return algorithm
    raise KeyError(f"Unknown sorting algorithm: {name}")


def get_sort_function(name: "Algorithm | str") -> SortFunction:
    """Return the whole-list sort callable for an algorithm"""
    return ALGORITHMS[resolve_algorithm(name)]
