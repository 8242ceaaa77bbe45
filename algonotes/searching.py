"""Searches over sorted, rotated and unsorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def search_rotated(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in a rotated ascending sequence of unique values."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = items[mid]
        if value == key:
            return mid
        if items[start] <= value and items[start] <= key <= value:
            end = mid - 1
        elif value <= items[end] and value <= key <= items[end]:
            start = mid + 1
        elif items[end] <= value:
            start = mid + 1
        elif items[start] >= value:
            end = mid - 1
        else:
            return None
    return None


def find_pivot(items: Sequence[Any]) -> int:
    """Return the index where a rotated ascending sequence wraps around.

    For a sequence that is not rotated this is the last index.
    """
    if not items:
        raise ValueError("cannot find the pivot of an empty sequence")
    start, end = 0, len(items) - 1
    while start < end:
        mid = (start + end) // 2
        if items[mid] >= items[0]:
            start = mid + 1
        else:
            end = mid
    return start


def first_and_last(items: Sequence[Any], target: Any) -> tuple[int, int] | None:
    """Return the first and last indices of ``target``, or None if it is absent."""
    positions = [index for index, value in enumerate(items) if value == target]
    if not positions:
        return None
    return positions[0], positions[-1]


def find_peak(items: Sequence[Any]) -> int:
    """Return the index of an element not smaller than its neighbours."""
    size = len(items)
    if size == 0:
        raise ValueError("an empty sequence has no peak")
    if size == 1 or items[0] >= items[1]:
        return 0
    if items[-1] >= items[-2]:
        return size - 1
    for index in range(1, size - 1):
        if items[index - 1] <= items[index] >= items[index + 1]:
            return index
    raise ValueError("no peak found")


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    count = 1
    current = 0
    for book in pages:
        if book > limit:
            return False
        if current + book > limit:
            count += 1
            current = book
            if count > students:
                return False
        else:
            current += book
    return True


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any student must read.

    Books are shared out in order, each student taking a contiguous run.
    """
    if students < 1:
        raise ValueError("there must be at least one student")
    if len(pages) < students:
        raise ValueError("fewer books than students")
    low = max(max(pages), 1)
    high = max(sum(pages), low)
    while low < high:
        mid = (low + high) // 2
        if _fits(pages, students, mid):
            high = mid
        else:
            low = mid + 1
    return low