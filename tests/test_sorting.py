import random

from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    intro_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

INTRO_EXAMPLE = [3, 1, 23, -9, 233, 23, -313, 32, -9]
HEAP_EXAMPLE = [12, 11, 13, 5, 6, 7]


def test_source_examples():
    for data in (INTRO_EXAMPLE, HEAP_EXAMPLE):
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert selection_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert heap_sort(data) == expected
        assert intro_sort(data) == expected


def test_intro_example_pinned():
    assert intro_sort(INTRO_EXAMPLE) == [-313, -9, -9, 1, 3, 23, 23, 32, 233]
    assert heap_sort(HEAP_EXAMPLE) == [5, 6, 7, 11, 12, 13]


def test_empty_and_single():
    for data, expected in (([], []), ([42], [42])):
        assert bubble_sort(data) == expected
        assert selection_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert heap_sort(data) == expected
        assert intro_sort(data) == expected


def test_does_not_mutate_input():
    data = [5, 3, 9, 1, 3]
    snapshot = list(data)
    expected = sorted(snapshot)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected
    assert intro_sort(data) == expected
    assert data == snapshot


def test_accepts_any_iterable():
    items = (4, 2, 8, 6)
    expected = [2, 4, 6, 8]
    assert bubble_sort(x for x in items) == expected
    assert selection_sort(x for x in items) == expected
    assert insertion_sort(x for x in items) == expected
    assert merge_sort(x for x in items) == expected
    assert quick_sort(x for x in items) == expected
    assert heap_sort(x for x in items) == expected
    assert intro_sort(x for x in items) == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected
    assert intro_sort(data) == expected


@given(st.lists(st.integers(), max_size=300))
def test_intro_sort_larger_inputs(data):
    assert intro_sort(data) == sorted(data)


@given(st.lists(st.integers(), max_size=300))
def test_heap_and_merge_larger_inputs(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected


def test_intro_sort_many_duplicates():
    rng = random.Random(7)
    data = [rng.randint(0, 3) for _ in range(2000)]
    assert intro_sort(data) == sorted(data)


def test_intro_sort_already_sorted_and_reversed():
    data = list(range(1000))
    assert intro_sort(data) == data
    assert intro_sort(reversed(data)) == data


def test_quick_sort_with_seeded_rng_is_correct_and_repeatable():
    rng = random.Random(1234)
    data = [rng.randint(-500, 500) for _ in range(500)]
    first = quick_sort(data, random.Random(1))
    second = quick_sort(data, random.Random(99))
    assert first == second == sorted(data)


def test_quick_sort_without_rng():
    data = [9, -2, 7, 7, 0, 3]
    assert quick_sort(data) == sorted(data)


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert heap_sort(words) == expected
    assert intro_sort(words) == expected