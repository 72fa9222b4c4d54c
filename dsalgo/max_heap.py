"""A bounded max-heap of integers stored in a list."""

from __future__ import annotations

import argparse
import contextlib
import random
import time
from collections.abc import Iterator

MAX_HEAP_SIZE = 100
_MAX_SHIFT = 6


class HeapFullError(OverflowError):
    """Raised when pushing onto a heap that is at capacity."""


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""


def _parent(i: int) -> int:
    return (i - 1) // 2


def _spaces(exponent: int) -> int:
    return 1 << max(0, min(exponent, _MAX_SHIFT))


class MaxHeap:
    """Max-heap with a fixed capacity; the largest value sits at the root."""

    def __init__(self, capacity: int = MAX_HEAP_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements in array (level) order."""
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: int) -> None:
        """Insert ``value``, raising HeapFullError at capacity."""
        if self.is_full():
            raise HeapFullError("heap is full")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0 and items[_parent(index)] < items[index]:
            parent = _parent(index)
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        if self.is_empty():
            raise HeapEmptyError("heap is empty")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if self.is_empty():
            raise HeapEmptyError("heap is empty")
        return self._items[0]

    def verify(self) -> bool:
        """Check that no child is larger than its parent."""
        items = self._items
        return all(items[i] <= items[_parent(i)] for i in range(1, len(items)))

    def render(self) -> str:
        """Draw the heap level by level."""
        items = self._items
        if not items:
            return "Heap is empty"
        size = len(items)
        lines = ["Heap structure:"]
        level = 0
        start = 0
        width = 1
        while start < size:
            indent = "  " * _spaces(size // 2 - level)
            gap = " " * _spaces(size // 2 - level + 1)
            row = "".join(f"{value} {gap}" for value in items[start:start + width])
            lines.append(indent + row)
            start += width
            width *= 2
            level += 1
        return "\n".join(lines)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest


def measure_operations(
    heap: MaxHeap, count: int, rng: random.Random | None = None
) -> tuple[float, float]:
    """Push ``count`` random values then pop ``count`` times; return both CPU times."""
    rng = rng or random.Random()
    start = time.process_time()
    for _ in range(count):
        with contextlib.suppress(HeapFullError):
            heap.push(rng.randrange(1000))
    insert_time = time.process_time() - start

    start = time.process_time()
    for _ in range(count):
        with contextlib.suppress(HeapEmptyError):
            heap.pop()
    delete_time = time.process_time() - start
    return insert_time, delete_time


_MENU = """
=== Max Heap Menu ===
1. Insert element
2. Delete maximum
3. Peek maximum
4. Print heap
5. Verify heap
6. Run performance test
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive max-heap menu."""
    argparse.ArgumentParser(description="Interactive max-heap demo").parse_args(argv)
    heap = MaxHeap()
    rng = random.Random()

    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = int(input("Choice: "))
            if choice == 1:
                value = int(input("Enter value to insert: "))
            elif choice == 6:
                count = int(input("Enter number of operations: "))
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            choice = -1
            continue

        if choice == 1:
            try:
                heap.push(value)
            except HeapFullError:
                print("Heap is full")
            else:
                print(f"Inserted {value}")
                print(heap.render())
        elif choice == 2:
            try:
                value = heap.pop()
            except HeapEmptyError:
                print("Heap is empty")
            else:
                print(f"Deleted maximum value: {value}")
                print(heap.render())
        elif choice == 3:
            try:
                print(f"Maximum value: {heap.peek()}")
            except HeapEmptyError:
                print("Heap is empty")
        elif choice == 4:
            print(heap.render())
        elif choice == 5:
            if heap.verify():
                print("Heap property is satisfied")
            else:
                print("Heap property is violated!")
        elif choice == 6:
            if count > heap.capacity:
                count = heap.capacity
                print(f"Limiting to {count} operations")
            heap = MaxHeap(heap.capacity)
            insert_time, delete_time = measure_operations(heap, count, rng)
            print(f"\nPerformance Analysis ({count} operations):")
            print(f"Insert time: {insert_time:.6f} seconds")
            print(f"Delete time: {delete_time:.6f} seconds")
            if count > 0:
                print(f"Average insert time: {insert_time / count:.9f} seconds")
                print(f"Average delete time: {delete_time / count:.9f} seconds")
        elif choice == 0:
            print("Exiting program")
        else:
            print("Invalid choice")
    return 0