import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.distribution import counting_sort, pigeonhole_sort, radix_sort

COUNTING_EXAMPLE = [9, 2, 1, 4, 5, 3, 1, 2, 5, 9, 8, 4, 2, 5, 4]


@pytest.mark.parametrize("sort", [counting_sort, pigeonhole_sort, radix_sort])
def test_source_example(sort):
    assert sort(COUNTING_EXAMPLE) == sorted(COUNTING_EXAMPLE)


@pytest.mark.parametrize("sort", [counting_sort, pigeonhole_sort, radix_sort])
def test_empty(sort):
    assert sort([]) == []


@pytest.mark.parametrize("sort", [counting_sort, pigeonhole_sort, radix_sort])
def test_all_zeros(sort):
    assert sort([0, 0, 0]) == [0, 0, 0]


@pytest.mark.parametrize("sort", [counting_sort, pigeonhole_sort, radix_sort])
@given(st.lists(st.integers(min_value=0, max_value=5000), max_size=200))
def test_non_negative_matches_sorted(sort, data):
    assert sort(data) == sorted(data)


@pytest.mark.parametrize("sort", [counting_sort, pigeonhole_sort, radix_sort])
def test_does_not_mutate_input(sort):
    data = [30, 4, 17, 4, 0]
    snapshot = list(data)
    assert sort(data) == sorted(snapshot)
    assert data == snapshot


@given(st.lists(st.integers(min_value=-2000, max_value=2000), max_size=200))
def test_pigeonhole_handles_negatives(data):
    assert pigeonhole_sort(data) == sorted(data)


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_negative_values_rejected(sort):
    with pytest.raises(ValueError):
        sort([3, -1, 2])


def test_radix_sort_multi_digit():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


@given(st.lists(st.integers(min_value=0, max_value=10**9), max_size=100))
def test_radix_sort_large_values(data):
    result = radix_sort(data)
    assert result == sorted(data)
    assert len(result) == len(data)