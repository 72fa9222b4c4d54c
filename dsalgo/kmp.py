"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Callable

from dsalgo.string_search import SearchResult, run_search_menu


def _format_table(values: list[int]) -> str:
    return "[" + ", ".join(map(str, values)) + "]"


def failure_function(
    pattern: str, steps: Callable[[str], None] | None = None
) -> list[int]:
    """Return the partial-match table: longest proper prefix that is also a suffix.

    When ``steps`` is given it is called with a line describing each step.
    """
    m = len(pattern)
    failure = [0] * m

    def log(line: str) -> None:
        if steps is not None:
            steps(line)

    log("\nComputing failure function:")
    log(f"Pattern: {pattern}")

    j, i = 0, 1
    while i < m:
        log(f"\nComparing pattern[{j}]='{pattern[j]}' with pattern[{i}]='{pattern[i]}'")
        if pattern[i] == pattern[j]:
            failure[i] = j + 1
            log(f"Match! failure[{i}] = {failure[i]}")
            i += 1
            j += 1
        elif j > 0:
            j = failure[j - 1]
            log(f"Mismatch! Going back to position {j}")
        else:
            failure[i] = 0
            log(f"Mismatch! failure[{i}] = 0")
            i += 1
        log(f"Current failure array: {_format_table(failure[:i])}")

    log(f"\nFinal failure function: {_format_table(failure)}")
    return failure


def kmp_search(text: str, pattern: str, verbose: bool = False) -> SearchResult:
    """Find every occurrence of ``pattern`` using the failure function to skip work."""
    steps: list[str] = []
    failure = failure_function(pattern, steps.append if verbose else None)
    n, m = len(text), len(pattern)
    if m == 0:
        return SearchResult((), 0, tuple(steps))

    if verbose:
        steps.append("\nStarting KMP search:")

    positions: list[int] = []
    comparisons = 0
    i = j = 0
    while i < n:
        comparisons += 1
        if verbose:
            steps.append(
                f"\nComparing text[{i}]='{text[i]}' with pattern[{j}]='{pattern[j]}'"
            )
            steps.append(f"Text:    {text}")
            steps.append(f"Pattern: {' ' * (i - j)}{pattern}")
        if text[i] == pattern[j]:
            if verbose:
                steps.append("Match!")
            if j == m - 1:
                positions.append(i - m + 1)
                if verbose:
                    steps.append(f"Pattern found at position {i - m + 1}")
                j = failure[j]
            else:
                j += 1
            i += 1
        elif j > 0:
            if verbose:
                steps.append(
                    f"Mismatch! Going back using failure function: j = {j} -> {failure[j - 1]}"
                )
            j = failure[j - 1]
        else:
            if verbose:
                steps.append("Mismatch at pattern start, moving to next text position")
            i += 1

    if verbose:
        steps.append(f"\nTotal comparisons made: {comparisons}")
    return SearchResult(tuple(positions), comparisons, tuple(steps))


def main(argv: list[str] | None = None) -> int:
    """Run the KMP search menu."""
    return run_search_menu(
        kmp_search,
        "KMP String Search",
        "Welcome to KMP String Search Algorithm Demo!\n"
        "This program demonstrates the Knuth-Morris-Pratt string matching algorithm.\n"
        "KMP uses a failure function to avoid redundant comparisons.\n",
        argv,
    )