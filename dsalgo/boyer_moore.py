"""Boyer-Moore substring search using the bad-character and good-suffix rules."""

from __future__ import annotations

from dsalgo.string_search import SearchResult, run_search_menu


def bad_character_table(pattern: str) -> dict[str, int]:
    """Map each character of ``pattern`` to the index of its last occurrence."""
    return {ch: index for index, ch in enumerate(pattern)}


def good_suffix_tables(pattern: str) -> tuple[list[int], list[bool]]:
    """Build the good-suffix tables of ``pattern``.

    ``suffix[k]`` is the start of the rightmost earlier copy of the suffix of
    length ``k`` (or -1), and ``prefix[k]`` tells whether that suffix is also a
    prefix of the pattern.
    """
    m = len(pattern)
    suffix = [-1] * m
    prefix = [False] * m
    for i in range(m - 1):
        j = i
        length = 0
        while j >= 0 and pattern[j] == pattern[m - 1 - length]:
            length += 1
            suffix[length] = j
            j -= 1
        if j == -1:
            prefix[length] = True
    return suffix, prefix


def good_suffix_shift(pos: int, length: int, suffix: list[int], prefix: list[bool]) -> int:
    """Return the good-suffix shift after a mismatch at ``pos`` in a pattern of ``length``."""
    matched = length - 1 - pos
    if suffix[matched] != -1:
        return pos - suffix[matched] + 1
    for r in range(pos + 2, length):
        if prefix[length - r]:
            return r
    return length


def boyer_moore_search(text: str, pattern: str, verbose: bool = False) -> SearchResult:
    """Find every occurrence of ``pattern``, comparing right to left and skipping ahead."""
    n, m = len(text), len(pattern)
    last = bad_character_table(pattern)
    suffix, prefix = good_suffix_tables(pattern)
    positions: list[int] = []
    steps: list[str] = []
    comparisons = 0

    if verbose:
        steps.append("\nPrecomputed tables:")
        steps.append("Bad Character Table:")
        for ch in sorted(last):
            steps.append(f"'{ch}': {last[ch]}")

    s = 0
    while s <= n - m:
        j = m - 1
        if verbose:
            steps.append(f"\nCurrent position: {s}")
            steps.append(f"Text:    {text}")
            steps.append(f"Pattern: {' ' * s}{pattern}")

        while j >= 0 and pattern[j] == text[s + j]:
            comparisons += 1
            if verbose:
                steps.append(f"Match at position {s + j}")
            j -= 1

        if j < 0:
            positions.append(s)
            if verbose:
                steps.append(f"Pattern found at position {s}")
            s += m - last.get(text[s + m], -1) if s + m < n else 1
            continue

        comparisons += 1
        if verbose:
            steps.append(f"Mismatch at position {s + j}")
        bc_shift = j - last.get(text[s + j], -1)
        # With no matched suffix the good-suffix rule offers nothing.
        gs_shift = good_suffix_shift(j, m, suffix, prefix) if j < m - 1 else 0
        shift = max(bc_shift, gs_shift)
        if verbose:
            steps.append(f"Bad Character shift: {bc_shift}")
            steps.append(f"Good Suffix shift: {gs_shift}")
            steps.append(f"Taking maximum shift: {shift}")
        s += shift

    if verbose:
        steps.append(f"\nTotal comparisons made: {comparisons}")
    return SearchResult(tuple(positions), comparisons, tuple(steps))


def main(argv: list[str] | None = None) -> int:
    """Run the Boyer-Moore search menu."""
    return run_search_menu(
        boyer_moore_search,
        "Boyer-Moore String Search",
        "Welcome to Boyer-Moore String Search Algorithm Demo!\n"
        "This program demonstrates the Boyer-Moore string matching algorithm,\n"
        "which uses both Bad Character and Good Suffix rules for efficient searching.\n",
        argv,
    )