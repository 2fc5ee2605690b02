"""Comparison sorts and the three-way partition of 0/1/2 values."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place with one Dutch-flag pass."""
    for value in nums:
        if value not in (0, 1, 2):
            raise ValueError(f"unexpected value {value!r}; only 0, 1 and 2 are allowed")
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``; stops early once a pass makes no swap."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using selection sort."""
    result = list(items)
    n = len(result)
    for step in range(n - 1):
        smallest = min(range(step, n), key=result.__getitem__)
        result[step], result[smallest] = result[smallest], result[step]
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using a binary max-heap."""
    result = list(items)
    n = len(result)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, root)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using a stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using quicksort with a last-element pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result