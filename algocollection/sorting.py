"""Sorting and searching on sequences of comparable values."""

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["selection_sort", "binary_search", "min_chocolate_difference"]


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding *items* in ascending order, by selection sort."""
    result = list(items)
    for i in range(len(result) - 1):
        position = min(range(i, len(result)), key=result.__getitem__)
        if position != i:
            result[i], result[position] = result[position], result[i]
    return result


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of *key* in the sorted *items*, or -1 when it is absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Return the smallest spread between the largest and smallest of *students* packets.

    Each student gets one packet. Returns 0 when there are no packets or no
    students, and raises ValueError when there are fewer packets than students.
    """
    ordered = sorted(packets)
    if students == 0 or not ordered:
        return 0
    if len(ordered) < students:
        raise ValueError(
            f"{len(ordered)} packets cannot be shared among {students} students"
        )
    return min(
        high - low for low, high in zip(ordered, ordered[students - 1 :])
    )