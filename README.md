# sortkit

A small collection of classic sorting algorithms for Python, written for
reading and experimenting as much as for use. Every sorting function takes
any iterable and returns a new sorted list; the input is left untouched.

## What is in it

| Module               | Functions |
|----------------------|-----------|
| `sortkit.counting`   | `counting_sort`, `counting_sort_with_negatives` |
| `sortkit.radix`      | `counting_digit_sort`, `radix_sort`, `radix_sort_with_buckets`, `radix_sort_with_negatives` |
| `sortkit.comparison` | `insertion_sort`, `merge_sort`, `bucket_sort`, `count_inversions` |
| `sortkit.quicksort`  | `lomuto_partition`, `quicksort`, `median_of_three_quicksort`, `randomized_quicksort` |
| `sortkit.trace`      | `render_array`, `trace_quicksort` |
| `sortkit.cli`        | `main` (the `sortkit` command) |

Notes on inputs and results:

* `counting_sort`, `radix_sort` and `radix_sort_with_buckets` take
  non-negative integers and raise `ValueError` for a negative one. The
  `counting_sort_with_negatives` and `radix_sort_with_negatives` variants
  accept any integers.
* `counting_digit_sort(values, exp)` performs one stable pass by the decimal
  digit selected by `exp` (1, 10, 100, ...); `exp` must be positive.
* `bucket_sort` takes floats in the range `[0, 1)` and raises `ValueError`
  for anything outside it.
* `count_inversions` returns a tuple `(count, sorted_values)`, where `count`
  is the number of pairs `i < j` with `values[i] > values[j]`.
* `lomuto_partition(values, left, right)` partitions a mutable sequence in
  place around `values[right]` and returns the pivot's final index. It
  raises `IndexError` for an invalid range.
* `randomized_quicksort(values, rng=None)` picks pivots with `rng.randint`;
  pass a `random.Random` instance to make runs reproducible. Without one the
  `random` module is used.
* `trace_quicksort` runs a median-of-three quicksort and returns
  `(sorted_values, lines)`, where `lines` describe each step: pivot
  selection, pointer moves, swaps and recursive calls.
* `render_array(values, left, right)` shows a list as `[ a b c ]`, with
  items outside `left..right` replaced by dots.

## Installation

```
pip install sortkit
```

To run the test suite:

```
pip install "sortkit[test]"
pytest
```

## Usage

```python
import random

from sortkit.comparison import bucket_sort, count_inversions, merge_sort
from sortkit.counting import counting_sort_with_negatives
from sortkit.quicksort import median_of_three_quicksort, randomized_quicksort
from sortkit.radix import radix_sort
from sortkit.trace import trace_quicksort

radix_sort([170, 45, 75, 90, 802, 24, 2, 66])
counting_sort_with_negatives([-2, 5, 3, -1, 2, 3, 0, -3])
merge_sort([10, 9, 8, 7, 6, 5, 4, 3, 2, 1])
bucket_sort([0.78, 0.17, 0.39, 0.26, 0.72])
count_inversions([5, 3, 2, 4, 1])          # (8, [1, 2, 3, 4, 5])
median_of_three_quicksort([13, 81, 10, 43, 31, 75, 0, 92])
randomized_quicksort([9, 8, 7, 6], random.Random(0))

result, lines = trace_quicksort([7, 3, 8, 5, 2, 2, 6, 4, 1])
print("\n".join(lines))
```

## Command line

Installing the package provides a `sortkit` command:

```
sortkit [-a ALGORITHM] [--trace] [VALUES ...]
```

It sorts the given numbers and prints the original and the sorted array.
Without values it uses `170 45 75 90 802 24 2 66`.

* `-a`, `--algorithm` chooses one of `bucket`, `counting`,
  `counting-negative`, `insertion`, `merge`, `quick`, `quick-median`,
  `quick-random`, `radix`, `radix-buckets`, `radix-negative`
  (default: `radix`). With `bucket` the values are read as floats and must
  lie in `[0, 1)`; otherwise they are read as integers.
* `--trace` prints every step of a median-of-three quicksort instead.

Examples:

```
sortkit
sortkit -a counting-negative -- -2 5 3 -1 0
sortkit -a bucket 0.78 0.17 0.39
sortkit --trace 7 3 8 5 2 2 6 4 1
```

A value that is not a number, or one the chosen algorithm does not accept
(for example a negative number with `radix`), ends the command with an
error message and exit status 2.