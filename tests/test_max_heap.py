import io
import random

import pytest

from dsalgo.max_heap import (
    HeapEmptyError,
    HeapFullError,
    MaxHeap,
    main,
    measure_operations,
)


def filled(values, capacity=100):
    heap = MaxHeap(capacity)
    for value in values:
        heap.push(value)
    return heap


def test_pop_returns_descending_order():
    values = [5, 3, 17, 10, 84, 19, 6, 22, 9]
    heap = filled(values)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert heap.is_empty()


def test_peek_does_not_remove():
    heap = filled([4, 9, 2])
    assert heap.peek() == 9
    assert len(heap) == 3


def test_empty_heap_errors():
    heap = MaxHeap()
    with pytest.raises(HeapEmptyError):
        heap.pop()
    with pytest.raises(HeapEmptyError):
        heap.peek()


def test_full_heap_error():
    heap = filled([1, 2, 3], capacity=3)
    assert heap.is_full()
    with pytest.raises(HeapFullError):
        heap.push(4)
    assert len(heap) == 3


def test_default_capacity_matches_source_limit():
    heap = MaxHeap()
    assert heap.capacity == 100


def test_invalid_capacity():
    with pytest.raises(ValueError):
        MaxHeap(0)


def test_verify_holds_under_random_operations():
    rng = random.Random(11)
    heap = MaxHeap(100)
    for _ in range(300):
        if heap.is_full() or (not heap.is_empty() and rng.random() < 0.4):
            heap.pop()
        else:
            heap.push(rng.randrange(1000))
        assert heap.verify()


def test_iteration_root_is_maximum():
    values = [7, 1, 9, 4, 8]
    heap = filled(values)
    items = list(heap)
    assert sorted(items) == sorted(values)
    assert items[0] == max(values)


def test_render_empty():
    assert MaxHeap().render() == "Heap is empty"


def test_render_single():
    assert filled([3]).render() == "Heap structure:\n  3   "


def test_render_levels_hold_values_in_order():
    heap = filled([10, 20, 30, 40, 50, 60])
    lines = heap.render().split("\n")
    assert lines[0] == "Heap structure:"
    assert len(lines) == 4
    rendered = [int(tok) for line in lines[1:] for tok in line.split()]
    assert rendered == list(heap)
    assert [len(line.split()) for line in lines[1:]] == [1, 2, 3]


def test_measure_operations_empties_heap():
    heap = MaxHeap(50)
    insert_time, delete_time = measure_operations(heap, 50, random.Random(1))
    assert heap.is_empty()
    assert insert_time >= 0.0
    assert delete_time >= 0.0


def test_measure_operations_beyond_capacity_does_not_raise_and_empties():
    heap = MaxHeap(5)
    measure_operations(heap, 20, random.Random(2))
    assert len(heap) == 0


def test_main_insert_and_peek(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n1\n8\n3\n5\n2\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Inserted 5" in out
    assert "Maximum value: 8" in out
    assert "Heap property is satisfied" in out
    assert "Deleted maximum value: 8" in out


def test_main_empty_heap_messages(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n9\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Heap is empty") == 2
    assert "Invalid choice" in out


def test_main_performance_limits_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n500\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Limiting to 100 operations" in out
    assert "Performance Analysis (100 operations):" in out