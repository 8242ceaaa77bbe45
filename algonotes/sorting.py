"""Comparison sorts and merging of sorted sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using bubble sort."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using a max-heap."""
    heap = list(items)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(first: list[Any], second: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``second`` comes first.
    """
    return _merge(list(first), list(second))