"""A string-keyed hash table using open addressing with tombstone deletion."""

from __future__ import annotations

import argparse
import enum

from dsalgo.chaining_hash_table import _MASK, _signed_bytes, djb2

INITIAL_SIZE = 7
MAX_LOAD_FACTOR = 0.75


def secondary_hash(key: str) -> int:
    """Return the odd step hash (hash * 31 + c, forced odd) used by double hashing."""
    value = 0
    for c in _signed_bytes(key):
        value = (value * 31 + c) & _MASK
    return value | 1


class ProbeType(enum.Enum):
    LINEAR = "Linear Probing"
    QUADRATIC = "Quadratic Probing"
    DOUBLE_HASH = "Double Hashing"

    def __str__(self) -> str:
        return self.value


class TableFullError(RuntimeError):
    """Raised when no free slot is found along a key's probe sequence."""


_TOMBSTONE = object()


class OpenAddressingHashTable:
    """Mapping from strings to ints stored directly in a probed slot array."""

    def __init__(self, capacity: int = INITIAL_SIZE, probe: ProbeType = ProbeType.LINEAR) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.probe = probe
        self._slots: list = [None] * capacity
        self._size = 0
        self.tombstones = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def probe_position(self, key: str, attempt: int) -> int:
        """Return the slot examined on the given attempt for ``key``."""
        base = djb2(key)
        capacity = len(self._slots)
        if self.probe is ProbeType.LINEAR:
            return ((base + attempt) & _MASK) % capacity
        if self.probe is ProbeType.QUADRATIC:
            return ((base + attempt * attempt) & _MASK) % capacity
        return ((base + attempt * secondary_hash(key)) & _MASK) % capacity

    def load_factor(self) -> float:
        return (self._size + self.tombstones) / len(self._slots)

    def _locate(self, key: str) -> int | None:
        for attempt in range(len(self._slots)):
            index = self.probe_position(key, attempt)
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and slot[0] == key:
                return index
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key) is not None

    def __getitem__(self, key: str) -> int:
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        return self._slots[index][1]

    def get(self, key: str, default: int | None = None) -> int | None:
        index = self._locate(key)
        return default if index is None else self._slots[index][1]

    def _existing(self, key: str) -> int | None:
        for attempt in range(len(self._slots)):
            index = self.probe_position(key, attempt)
            slot = self._slots[index]
            if slot is not None and slot is not _TOMBSTONE and slot[0] == key:
                return index
            if slot is None:
                return None
        return None

    def __setitem__(self, key: str, value: int) -> None:
        if self.load_factor() >= MAX_LOAD_FACTOR:
            self._resize()
        slots = self._slots
        for attempt in range(len(slots)):
            index = self.probe_position(key, attempt)
            slot = slots[index]
            if slot is None or slot is _TOMBSTONE:
                existing = self._existing(key)
                if existing is not None:
                    slots[existing] = (key, value)
                    return
                if slot is _TOMBSTONE:
                    self.tombstones -= 1
                slots[index] = (key, value)
                self._size += 1
                return
            if slot[0] == key:
                slots[index] = (key, value)
                return
        raise TableFullError("no free slot along the probe sequence")

    def __delitem__(self, key: str) -> None:
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = _TOMBSTONE
        self._size -= 1
        self.tombstones += 1

    def render(self) -> str:
        lines = [
            "Hash Table Status:",
            f"Size: {self._size}",
            f"Capacity: {self.capacity}",
            f"Tombstones: {self.tombstones}",
            f"Load factor: {self.load_factor():.2f}",
            "",
            "Table contents:",
        ]
        for index, slot in enumerate(self._slots):
            if slot is None:
                body = "Empty"
            elif slot is _TOMBSTONE:
                body = "Deleted"
            else:
                body = f"{slot[0]}: {slot[1]}"
            lines.append(f"[{index}] {body}")
        return "\n".join(lines)

    def _resize(self) -> None:
        old = self._slots
        self._slots = [None] * (len(old) * 2)
        self._size = 0
        self.tombstones = 0
        for slot in old:
            if slot is not None and slot is not _TOMBSTONE:
                self[slot[0]] = slot[1]


_MENU = """
=== Hash Table Menu ===
1. Insert key-value pair
2. Get value by key
3. Remove key-value pair
4. Print hash table
5. Change probe type
0. Exit"""

_PROBE_CHOICES = {1: ProbeType.LINEAR, 2: ProbeType.QUADRATIC, 3: ProbeType.DOUBLE_HASH}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive open addressing hash table menu."""
    argparse.ArgumentParser(description="Open addressing hash table demo").parse_args(argv)
    table = OpenAddressingHashTable()
    print(f"Initial probe type: {table.probe}")

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
                try:
                    table[key] = value
                except TableFullError:
                    print("Failed to insert")
                else:
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
                print("Select probe type:")
                for number, probe in _PROBE_CHOICES.items():
                    print(f"{number}. {probe}")
                try:
                    probe = _PROBE_CHOICES[int(input("Choice: "))]
                except (ValueError, KeyError):
                    print("Invalid choice")
                else:
                    table.probe = probe
                    print(f"Changed to {probe}")
            elif choice == 0:
                print("Exiting program")
            else:
                print("Invalid choice")
        except EOFError:
            break
    return 0