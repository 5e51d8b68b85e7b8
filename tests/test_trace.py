from hypothesis import given
from hypothesis import strategies as st

from sortkit.trace import render_array, trace_quicksort

SOURCE_EXAMPLE = [7, 3, 8, 5, 2, 2, 6, 4, 1]


def test_render_array_marks_outside_with_dots():
    assert render_array([1, 2, 3], 1, 1) == "[ . 2 . ]"


def test_render_array_empty():
    assert render_array([], 0, -1) == "[  ]"


def test_render_array_full_range_shows_all():
    assert render_array([4, 5], 0, 1) == "[ 4 5 ]"


def test_trace_source_example_sorts():
    result, _ = trace_quicksort(SOURCE_EXAMPLE)
    assert result == sorted(SOURCE_EXAMPLE)


def test_trace_source_example_first_and_last_lines():
    _, lines = trace_quicksort(SOURCE_EXAMPLE)
    assert lines[0] == "Quicksort called on subarray [0...8]:"
    assert lines[1] == render_array(SOURCE_EXAMPLE, 0, 8)
    assert lines[-1] == "Finished sorting subarray [0...8]"


def test_trace_calls_balance():
    _, lines = trace_quicksort(SOURCE_EXAMPLE)
    calls = [line for line in lines if "Quicksort called on subarray" in line]
    finishes = [line for line in lines if "Finished sorting subarray" in line]
    assert len(calls) == len(finishes)
    assert len(calls) > 1


def test_trace_single_element():
    result, lines = trace_quicksort([42])
    assert result == [42]
    assert "Subarray has <= 1 element, nothing to do" in lines


def test_trace_two_elements_swap():
    result, lines = trace_quicksort([2, 1])
    assert result == [1, 2]
    assert "  Swap arr[0]=2 with arr[1]=1" in lines
    assert "Subarray has <= 2 elements, direct comparison:" in lines


def test_trace_two_elements_in_order():
    _, lines = trace_quicksort([1, 2])
    assert "  No swap needed, already in order" in lines


def test_every_swap_followed_by_full_render():
    _, lines = trace_quicksort(SOURCE_EXAMPLE)
    swap_positions = [i for i, line in enumerate(lines) if line.startswith("  Swap arr[")]
    assert swap_positions
    for position in swap_positions:
        assert lines[position + 1].startswith("[ ")
        assert "." not in lines[position + 1]


def test_trace_nested_indentation():
    _, lines = trace_quicksort(SOURCE_EXAMPLE)
    nested = [line for line in lines if line.startswith("  Quicksort called")]
    assert nested


def test_trace_does_not_mutate_input():
    data = list(SOURCE_EXAMPLE)
    trace_quicksort(data)
    assert data == SOURCE_EXAMPLE


def test_trace_all_equal_terminates():
    result, _ = trace_quicksort([2] * 6)
    assert result == [2] * 6


@given(st.lists(st.integers(-20, 20), max_size=30))
def test_trace_matches_sorted(data):
    result, lines = trace_quicksort(data)
    assert result == sorted(data)
    assert lines[-1] == f"Finished sorting subarray [0...{len(data) - 1}]"