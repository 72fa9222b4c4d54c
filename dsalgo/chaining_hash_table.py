"""A string-keyed hash table that resolves collisions by separate chaining."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

INITIAL_SIZE = 7
MAX_LOAD_FACTOR = 0.75
_MASK = (1 << 64) - 1


def _signed_bytes(key: str) -> Iterator[int]:
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def djb2(key: str) -> int:
    """Return the 64-bit djb2 hash of ``key`` (hash * 33 + c, starting at 5381)."""
    value = 5381
    for c in _signed_bytes(key):
        value = (value * 33 + c) & _MASK
    return value


@dataclass(frozen=True)
class CollisionStats:
    """Bucket usage figures for a chaining hash table."""

    empty_buckets: int
    empty_percent: float
    collided_buckets: int
    max_chain: int
    average_chain: float


class ChainingHashTable:
    """Mapping from strings to ints with one chain per bucket and automatic doubling."""

    def __init__(self, capacity: int = INITIAL_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._buckets: list[list[list]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def _chain(self, key: str) -> list[list]:
        return self._buckets[djb2(key) % len(self._buckets)]

    def _find(self, key: str) -> list | None:
        for entry in self._chain(key):
            if entry[0] == key:
                return entry
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __getitem__(self, key: str) -> int:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: str, value: int) -> None:
        if self.load_factor() >= MAX_LOAD_FACTOR:
            self._resize()
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])
        self._size += 1

    def __delitem__(self, key: str) -> None:
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if entry[0] == key:
                del chain[position]
                self._size -= 1
                return
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        for chain in self._buckets:
            for key, _ in list(chain):
                yield key

    def get(self, key: str, default: int | None = None) -> int | None:
        entry = self._find(key)
        return default if entry is None else entry[1]

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def buckets(self) -> tuple[tuple[tuple[str, int], ...], ...]:
        """Return each bucket's chain, head first, as (key, value) pairs."""
        return tuple(tuple((k, v) for k, v in chain) for chain in self._buckets)

    def collision_stats(self) -> CollisionStats:
        lengths = [len(chain) for chain in self._buckets]
        used = [n for n in lengths if n]
        empty = len(lengths) - len(used)
        return CollisionStats(
            empty_buckets=empty,
            empty_percent=empty / len(lengths) * 100,
            collided_buckets=sum(1 for n in used if n > 1),
            max_chain=max(used, default=0),
            average_chain=sum(used) / len(used) if used else 0.0,
        )

    def render(self) -> str:
        lines = [
            "Hash Table Status:",
            f"Size: {self._size}",
            f"Capacity: {self.capacity}",
            f"Load factor: {self.load_factor():.2f}",
            "",
        ]
        for index, chain in enumerate(self._buckets):
            if chain:
                body = "".join(f"[{k}: {v}] -> " for k, v in chain) + "NULL"
            else:
                body = "Empty"
            lines.append(f"Bucket {index}: {body}")
        return "\n".join(lines)

    def _resize(self) -> None:
        new_capacity = len(self._buckets) * 2
        new_buckets: list[list[list]] = [[] for _ in range(new_capacity)]
        for chain in self._buckets:
            for entry in chain:
                new_buckets[djb2(entry[0]) % new_capacity].insert(0, entry)
        self._buckets = new_buckets


def _format_stats(stats: CollisionStats) -> str:
    return "\n".join([
        "",
        "Collision Statistics:",
        f"Empty buckets: {stats.empty_buckets} ({stats.empty_percent:.1f}%)",
        f"Buckets with collisions: {stats.collided_buckets}",
        f"Maximum chain length: {stats.max_chain}",
        f"Average chain length: {stats.average_chain:.2f}",
    ])


_MENU = """
=== Hash Table Menu ===
1. Insert key-value pair
2. Get value by key
3. Remove key-value pair
4. Print hash table
5. Print collision statistics
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive chaining hash table menu."""
    argparse.ArgumentParser(description="Chaining hash table demo").parse_args(argv)
    table = ChainingHashTable()

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
            if choice == 1:
                key = input("Enter key: ")
                try:
                    value = int(input("Enter value: "))
                except ValueError:
                    print("Invalid value")
                    continue
                table[key] = value
                print(f"Successfully inserted ({key}: {value})")
            elif choice == 2:
                key = input("Enter key: ")
                try:
                    print(f"Value for key '{key}': {table[key]}")
                except KeyError:
                    print("Key not found")
            elif choice == 3:
                key = input("Enter key: ")
                try:
                    del table[key]
                except KeyError:
                    print("Key not found")
                else:
                    print(f"Successfully removed key '{key}'")
            elif choice == 4:
                print()
                print(table.render())
            elif choice == 5:
                print(_format_stats(table.collision_stats()))
            elif choice == 0:
                print("Exiting program")
            else:
                print("Invalid choice")
        except EOFError:
            break
    return 0