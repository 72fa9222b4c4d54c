import random

import pytest

from dsalgo.kmp import failure_function, kmp_search
from dsalgo.string_search import brute_force_search


def test_documented_failure_table():
    assert failure_function("ABCDABD") == [0, 0, 0, 0, 1, 2, 0]


@pytest.mark.parametrize("pattern", ["AABAACAABAA", "abab", "aaaa", "xyz", "a"])
def test_failure_table_is_longest_border(pattern):
    table = failure_function(pattern)
    assert len(table) == len(pattern)
    for k, f in enumerate(table):
        prefix = pattern[:k + 1]
        assert f <= k
        assert prefix[:f] == prefix[len(prefix) - f:]
        longer = f + 1
        assert longer > k or prefix[:longer] != prefix[len(prefix) - longer:]


def test_classic_example():
    result = kmp_search("ABABDABACDABABCABAB", "ABABCABAB")
    assert result.positions == (10,)


def test_single_character_pattern():
    assert kmp_search("banana", "a").positions == (1, 3, 5)


def test_agrees_with_brute_force_on_random_strings():
    rng = random.Random(1234)
    for _ in range(200):
        text = "".join(rng.choice("ab") for _ in range(rng.randrange(0, 30)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randrange(1, 5)))
        assert kmp_search(text, pattern).positions == brute_force_search(text, pattern).positions


def test_comparisons_are_linear():
    text = "a" * 200
    result = kmp_search(text, "aaab")
    assert result.positions == ()
    assert result.comparisons <= 2 * len(text)


def test_empty_pattern_finds_nothing():
    assert kmp_search("abc", "").positions == ()


def test_steps_callback_receives_final_table():
    lines = []
    table = failure_function("AAB", lines.append)
    assert lines[-1] == "\nFinal failure function: [" + ", ".join(map(str, table)) + "]"


def test_verbose_search_trace():
    result = kmp_search("abcab", "ab", verbose=True)
    assert "\nStarting KMP search:" in result.steps
    assert result.steps[-1] == f"\nTotal comparisons made: {result.comparisons}"
    assert kmp_search("abcab", "ab").steps == ()