import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortkit.comparison import bucket_sort, count_inversions, insertion_sort, merge_sort


def test_insertion_sort_source_example():
    data = [77, 33, 44, 11, 88, 22]
    assert insertion_sort(data) == sorted(data)


def test_insertion_sort_keeps_input():
    data = [3, 2, 1]
    insertion_sort(data)
    assert data == [3, 2, 1]


@given(st.lists(st.integers()))
def test_insertion_sort_matches_sorted(data):
    assert insertion_sort(data) == sorted(data)


def test_merge_sort_source_example():
    data = [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert merge_sort(data) == list(range(1, 11))


def test_merge_sort_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([42]) == [42]


@given(st.lists(st.integers()))
def test_merge_sort_matches_sorted(data):
    assert merge_sort(data) == sorted(data)


@given(st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_merge_sort_is_stable(pairs):
    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_bucket_sort_source_example():
    data = [0.78, 0.17, 0.39, 0.26, 0.72, 0.94, 0.21, 0.12, 0.23, 0.68]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.5, bad])


@given(
    st.lists(
        st.floats(min_value=0.0, max_value=1.0, exclude_max=True, allow_nan=False)
    )
)
def test_bucket_sort_matches_sorted(data):
    assert bucket_sort(data) == sorted(data)


def test_count_inversions_source_example():
    count, ordered = count_inversions([5, 3, 2, 4, 1])
    assert count == 8
    assert ordered == [1, 2, 3, 4, 5]


def test_count_inversions_sorted_has_none():
    assert count_inversions([1, 2, 2, 3]) == (0, [1, 2, 2, 3])


def test_count_inversions_empty():
    assert count_inversions([]) == (0, [])


@given(st.lists(st.integers(), unique=True))
def test_count_inversions_reverse_complements(data):
    forward, ordered = count_inversions(data)
    backward, _ = count_inversions(list(reversed(data)))
    n = len(data)
    assert forward + backward == n * (n - 1) // 2
    assert ordered == sorted(data)


@given(st.lists(st.integers(), min_size=2))
def test_count_inversions_adjacent_swap_changes_by_one(data):
    for index in range(len(data) - 1):
        if data[index] > data[index + 1]:
            swapped = list(data)
            swapped[index], swapped[index + 1] = swapped[index + 1], swapped[index]
            assert count_inversions(swapped)[0] == count_inversions(data)[0] - 1
            break
    else:
        assert count_inversions(data)[0] == 0