"""Recursive, iterative and step-by-step binary search over sorted sequences."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

FOUND = "found"
SEARCH_LEFT = "left"
SEARCH_RIGHT = "right"


@dataclass(frozen=True)
class SearchStep:
    """One comparison made by a binary search."""

    number: int
    left: int
    right: int
    mid: int
    value: int
    outcome: str


def binary_search_recursive(seq: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in sorted ``seq``, or None, using recursion."""

    def search(left: int, right: int) -> int | None:
        if left > right:
            return None
        mid = left + (right - left) // 2
        if seq[mid] == key:
            return mid
        if seq[mid] > key:
            return search(left, mid - 1)
        return search(mid + 1, right)

    return search(0, len(seq) - 1)


def binary_search_iterative(seq: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in sorted ``seq``, or None, using a loop."""
    left, right = 0, len(seq) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] == key:
            return mid
        if seq[mid] > key:
            right = mid - 1
        else:
            left = mid + 1
    return None


def binary_search_steps(seq: Sequence[int], key: int) -> Iterator[SearchStep]:
    """Yield every comparison a binary search for ``key`` makes."""
    left, right = 0, len(seq) - 1
    number = 1
    while left <= right:
        mid = left + (right - left) // 2
        value = seq[mid]
        if value == key:
            yield SearchStep(number, left, right, mid, value, FOUND)
            return
        if value > key:
            yield SearchStep(number, left, right, mid, value, SEARCH_LEFT)
            right = mid - 1
        else:
            yield SearchStep(number, left, right, mid, value, SEARCH_RIGHT)
            left = mid + 1
        number += 1


def render_step(seq: Sequence[int], step: SearchStep) -> str:
    """Draw the array and the L/R/M pointers for one search step."""
    cells = []
    markers = []
    for i, value in enumerate(seq):
        if i == step.mid:
            cells.append(f"[{value}] ")
        elif step.left <= i <= step.right:
            cells.append(f"{value} ")
        else:
            cells.append("_ ")

        if i == step.left and i == step.right:
            markers.append("^   ")
        elif i == step.left:
            markers.append("L   ")
        elif i == step.right:
            markers.append("R   ")
        elif i == step.mid:
            markers.append("M   ")
        else:
            markers.append("    ")
    return "Array: " + "".join(cells) + "\n" + "       " + "".join(markers)


def is_sorted(seq: Sequence[int]) -> bool:
    """Tell whether ``seq`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(seq, seq[1:]))


def generate_sorted_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Build a strictly increasing list: first value 0-9, then steps of 1-10."""
    if size < 1:
        raise ValueError("size must be positive")
    rng = rng or random.Random()
    values = [rng.randrange(10)]
    for _ in range(size - 1):
        values.append(values[-1] + rng.randrange(10) + 1)
    return values


def measure_time(
    search: Callable[[Sequence[int], int], int | None],
    seq: Sequence[int],
    key: int,
) -> tuple[int | None, float]:
    """Run ``search`` once and return its result and the CPU seconds it took."""
    start = time.process_time()
    index = search(seq, key)
    elapsed = time.process_time() - start
    return index, elapsed


def _print_array(seq: Sequence[int]) -> None:
    print("".join(f"{value} " for value in seq))


def _report(name: str, search, seq: Sequence[int], key: int) -> None:
    index, elapsed = measure_time(search, seq, key)
    print(f"{name}: {elapsed:.6f} seconds")
    if index is not None:
        print(f"Found at index: {index}")
    else:
        print("Not found")


def _visual_search(seq: Sequence[int], key: int) -> int | None:
    print(f"\nSearching for value: {key}")
    for step in binary_search_steps(seq, key):
        print(f"\nStep {step.number}:")
        print("\n" + render_step(seq, step))
        print(f"Comparing with middle element: {step.value}")
        if step.outcome == FOUND:
            print("Found the value!")
            return step.mid
        if step.outcome == SEARCH_LEFT:
            print("Value is smaller, searching left half")
        else:
            print("Value is larger, searching right half")
    print("Value not found")
    return None


_MENU = """
=== Binary Search Menu ===
1. Run recursive binary search
2. Run iterative binary search
3. Run visualized binary search
4. Compare recursive and iterative
5. Generate new sorted array
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search menu."""
    argparse.ArgumentParser(description="Interactive binary search demo").parse_args(argv)
    rng = random.Random()

    try:
        size = int(input("Enter array size: "))
    except (ValueError, EOFError):
        size = 0
    if size <= 0:
        print("Invalid size")
        return 1

    arr = generate_sorted_array(size, rng)
    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = int(input("Choice: "))
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            choice = -1
            continue

        try:
            if choice in (1, 2, 3, 4):
                key = int(input("Enter value to search: "))
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            continue

        if choice == 1:
            print("\nArray contents:")
            _print_array(arr)
            _report("Recursive binary search", binary_search_recursive, arr, key)
        elif choice == 2:
            print("\nArray contents:")
            _print_array(arr)
            _report("Iterative binary search", binary_search_iterative, arr, key)
        elif choice == 3:
            print("\nArray contents:")
            _print_array(arr)
            _visual_search(arr, key)
        elif choice == 4:
            print("\nComparing both methods:")
            print("Array contents:")
            _print_array(arr)
            _report("Recursive binary search", binary_search_recursive, arr, key)
            _report("Iterative binary search", binary_search_iterative, arr, key)
        elif choice == 5:
            arr = generate_sorted_array(size, rng)
            print("New sorted array generated")
            print("Array contents:")
            _print_array(arr)
        elif choice == 0:
            print("Exiting program")
        else:
            print("Invalid choice")
    return 0