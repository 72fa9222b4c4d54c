"""Brute-force substring search and the shared result type and menu."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Match positions, the number of character comparisons, and optional trace lines."""

    positions: tuple[int, ...]
    comparisons: int
    steps: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.positions)


def brute_force_search(text: str, pattern: str, verbose: bool = False) -> SearchResult:
    """Find every occurrence of ``pattern`` by checking each alignment in turn."""
    n, m = len(text), len(pattern)
    positions: list[int] = []
    steps: list[str] = []
    comparisons = 0

    for i in range(n - m + 1):
        if verbose:
            steps.append(f"\nTrying position {i}:")
            steps.append(f"Text:    {text}")
            steps.append(f"Pattern: {' ' * i}{pattern}")
        match = True
        for j in range(m):
            comparisons += 1
            if verbose:
                steps.append(f"Comparing '{text[i + j]}' with '{pattern[j]}'")
            if text[i + j] != pattern[j]:
                match = False
                break
        if match:
            positions.append(i)
            if verbose:
                steps.append(f"Match found at position {i}!")

    if verbose:
        steps.append(f"\nTotal comparisons made: {comparisons}")
    return SearchResult(tuple(positions), comparisons, tuple(steps))


def format_matches(result: SearchResult, text: str, pattern: str) -> str:
    """Show each match with up to four characters of context and a marker line."""
    if not result.positions:
        return "Pattern not found in text."
    m = len(pattern)
    lines = [f"\nPattern \"{pattern}\" found at {result.count} position(s):"]
    for pos in result.positions:
        start = max(0, pos - 4)
        before = text[start:pos]
        after = text[pos + m:pos + m + 4]
        lines.append(f"Position {pos}: ....{before}[{text[pos:pos + m]}]{after}....")
        lines.append("         " + " " * len(before) + "^" + "~" * (m - 1))
    return "\n".join(lines)


def run_search_menu(
    search: Callable[[str, str, bool], SearchResult],
    title: str,
    intro: str,
    argv: list[str] | None = None,
) -> int:
    """Run the interactive text/pattern menu around a search function."""
    argparse.ArgumentParser(description=f"{title} demo").parse_args(argv)
    print(intro)
    text: str | None = None
    pattern: str | None = None

    choice = -1
    while choice != 0:
        print(f"\n=== {title} Menu ===")
        print("1. Enter new text")
        print("2. Enter new pattern")
        print("3. Search (without steps)")
        print("4. Search with steps")
        print("0. Exit")
        try:
            choice = int(input("Choice: "))
            if choice == 1:
                text = input("Enter text: ")
                print(f"Text set to: \"{text}\"")
            elif choice == 2:
                pattern = input("Enter pattern to search: ")
                print(f"Pattern set to: \"{pattern}\"")
            elif choice in (3, 4):
                if text is None or pattern is None:
                    print("Please enter both text and pattern first.")
                    continue
                result = search(text, pattern, choice == 4)
                for line in result.steps:
                    print(line)
                print(format_matches(result, text, pattern))
            elif choice == 0:
                print("Thank you for using the program!")
            else:
                print("Invalid choice")
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            choice = -1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the brute-force search menu."""
    return run_search_menu(
        brute_force_search,
        "Brute Force String Search",
        "Welcome to String Search Algorithm Demo!\n"
        "This program demonstrates the Brute Force string matching algorithm.\n",
        argv,
    )