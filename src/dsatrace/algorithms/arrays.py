"""Array operations, searches and sorts.

Pseudocode lines for sorts follow the usual textbook layout: compare on the
inner-loop test, swap or write on the body.
"""

from __future__ import annotations

from dsatrace.algorithms.params import ArrayInsertParams, IndexParams, TargetParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.tracing import Trace


@algorithm(AlgorithmId.ARRAY_INSERT, params=ArrayInsertParams)
def array_insert(run: AlgorithmRun[ArrayInsertParams], array: list[int]) -> Trace:
    if len(array) >= run.settings.array_capacity:
        return run.structural(array, "Array full! Cannot insert.")
    value = run.params.value
    index = len(array) if run.params.index is None else min(max(run.params.index, 0), len(array))
    run.step(array, message=f"Insert {value} at index {index}")
    array.insert(index, value)
    run.step(array, [index], message="Inserted")
    return run.finish(index=index)


@algorithm(AlgorithmId.ARRAY_DELETE, params=IndexParams)
def array_delete(run: AlgorithmRun[IndexParams], array: list[int]) -> Trace:
    if not array:
        return run.structural(array, "Array empty! Cannot delete.")
    index = run.params.index
    if not 0 <= index < len(array):
        return run.structural(array, "Invalid delete index.")
    run.step(array, [index], message=f"Deleting index {index}")
    value = array.pop(index)
    run.step(array, message="Deleted")
    return run.finish(value=value)


@algorithm(AlgorithmId.ARRAY_PEEK)
def array_peek(run: AlgorithmRun[None], array: list[int]) -> Trace:
    if not array:
        return run.structural(array, "Array empty! Cannot peek.")
    run.step(array, [len(array) - 1], 0, f"Peeking last element: {array[-1]}")
    return run.finish(value=array[-1])


@algorithm(AlgorithmId.ARRAY_IS_EMPTY)
def array_is_empty(run: AlgorithmRun[None], array: list[int]) -> Trace:
    empty = not array
    run.step(array, line=0, message=f"Is Empty: {empty}")
    return run.finish(result=empty)


@algorithm(AlgorithmId.ARRAY_IS_FULL)
def array_is_full(run: AlgorithmRun[None], array: list[int]) -> Trace:
    full = len(array) >= run.settings.array_capacity
    run.step(array, line=0, message=f"Is Full: {full}")
    return run.finish(result=full)


@algorithm(AlgorithmId.LINEAR_SEARCH, params=TargetParams)
def linear_search(run: AlgorithmRun[TargetParams], array: list[int]) -> Trace:
    target = run.params.target
    for i, value in enumerate(array):
        run.step(array, [i], 0, f"Checking index {i}")
        if value == target:
            run.step(array, [i], 1, f"Found at index {i}")
            return run.finish(index=i)
    run.step(array, line=2, message="Not found")
    return run.finish(index=-1)


@algorithm(AlgorithmId.BINARY_SEARCH, params=TargetParams)
def binary_search(run: AlgorithmRun[TargetParams], array: list[int]) -> Trace:
    if any(array[i] < array[i - 1] for i in range(1, len(array))):
        return run.precondition(
            array, "Binary search requires sorted array. Sort it first or use linear search."
        )
    target = run.params.target
    low, high = 0, len(array) - 1
    while low <= high:
        mid = (low + high) // 2
        run.step(array, [mid], 2, f"mid = {mid}")
        if array[mid] == target:
            run.step(array, [mid], 3, f"Found at {mid}")
            return run.finish(index=mid)
        if array[mid] > target:
            high = mid - 1
            run.step(array, [mid], 4, f"Go left (r = {high})")
        else:
            low = mid + 1
            run.step(array, [mid], 5, f"Go right (l = {low})")
    run.step(array, line=6, message="Not found")
    return run.finish(index=-1)


@algorithm(AlgorithmId.BUBBLE_SORT)
def bubble_sort(run: AlgorithmRun[None], array: list[int]) -> Trace:
    n = len(array)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            run.step(array, [j, j + 1], 0, f"Compare {array[j]} and {array[j + 1]}")
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                run.step(array, [j, j + 1], 1, "Swapped")
    run.step(array, message="Sorted with Bubble Sort")
    return run.finish(sorted=list(array))


@algorithm(AlgorithmId.SELECTION_SORT)
def selection_sort(run: AlgorithmRun[None], array: list[int]) -> Trace:
    n = len(array)
    for i in range(n - 1):
        min_index = i
        run.step(array, [i], 0, f"Find min from {i}")
        for j in range(i + 1, n):
            run.step(array, [min_index, j], 2, f"Compare {array[j]} with min {array[min_index]}")
            if array[j] < array[min_index]:
                min_index = j
                run.step(array, [min_index], 3, f"New min at {min_index}")
        if min_index != i:
            array[i], array[min_index] = array[min_index], array[i]
            run.step(array, [i, min_index], 4, "Swapped")
    run.step(array, message="Sorted with Selection Sort")
    return run.finish(sorted=list(array))


@algorithm(AlgorithmId.INSERTION_SORT)
def insertion_sort(run: AlgorithmRun[None], array: list[int]) -> Trace:
    for i in range(1, len(array)):
        key = array[i]
        run.step(array, [i], 0, f"Key = {key}")
        j = i - 1
        while j >= 0 and array[j] > key:
            array[j + 1] = array[j]
            run.step(array, [j, j + 1], 3, f"Shift {array[j]}")
            j -= 1
        array[j + 1] = key
        run.step(array, [j + 1], 5, "Inserted key")
    run.step(array, message="Sorted with Insertion Sort")
    return run.finish(sorted=list(array))


@algorithm(AlgorithmId.MERGE_SORT)
def merge_sort(run: AlgorithmRun[None], array: list[int]) -> Trace:
    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        mid = (low + high) // 2
        run.step(array, range(low, high + 1), 1, f"Split [{low}..{high}] at {mid}")
        sort(low, mid)
        sort(mid + 1, high)
        merge(low, mid, high)

    def merge(low: int, mid: int, high: int) -> None:
        left, right = array[low : mid + 1], array[mid + 1 : high + 1]
        i = j = 0
        k = low
        while i < len(left) and j < len(right):
            run.step(array, [k], 2, f"Compare {left[i]} and {right[j]}")
            if left[i] <= right[j]:
                array[k] = left[i]
                i += 1
            else:
                array[k] = right[j]
                j += 1
            run.step(array, [k], 3, f"Write {array[k]} at index {k}")
            k += 1
        for value in left[i:] + right[j:]:
            array[k] = value
            run.step(array, [k], 3, f"Write {value} at index {k}")
            k += 1

    sort(0, len(array) - 1)
    run.step(array, message="Sorted with Merge Sort")
    return run.finish(sorted=list(array))


@algorithm(AlgorithmId.QUICK_SORT)
def quick_sort(run: AlgorithmRun[None], array: list[int]) -> Trace:
    def partition(low: int, high: int) -> int:
        pivot = array[high]
        run.step(array, [high], 1, f"Pivot = {pivot}")
        i = low - 1
        for j in range(low, high):
            run.step(array, [j, high], 2, f"Compare {array[j]} with pivot {pivot}")
            if array[j] <= pivot:
                i += 1
                if i != j:
                    array[i], array[j] = array[j], array[i]
                    run.step(array, [i, j], 3, f"Swap {array[j]} and {array[i]}")
        array[i + 1], array[high] = array[high], array[i + 1]
        run.step(array, [i + 1], 4, f"Pivot {pivot} placed at index {i + 1}")
        return i + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            p = partition(low, high)
            sort(low, p - 1)
            sort(p + 1, high)

    sort(0, len(array) - 1)
    run.step(array, message="Sorted with Quick Sort")
    return run.finish(sorted=list(array))
