# sortbench

Textbook sorting algorithms for sequences of integers, and a command that
times one of them on a data set.

## Algorithms

| Module              | Function                                                    |
|---------------------|-------------------------------------------------------------|
| `sortbench.heap`    | `heap_sort(values)`                                         |
| `sortbench.radix`   | `radix_sort_base10(values)`, `radix_sort_base65536(values)` |
| `sortbench.merge`   | `merge_sort(values)`                                        |
| `sortbench.quick`   | `quick_sort(values)`                                        |
| `sortbench.shell`   | `shell_sort(values)`                                        |
| `sortbench.tim`     | `tim_sort(values, run=32)`                                  |

Each function sorts the list it is given in ascending order, in place.

- `heap_sort` builds a binary max-heap and repeatedly moves its root to the
  end.
- The radix sorts work on integers only. Negative numbers are sorted by
  magnitude separately and placed before the non-negative values.
  `radix_sort_base10` takes one decimal digit per pass,
  `radix_sort_base65536` sixteen bits per pass.
- `merge_sort` is a stable top-down merge sort.
- `quick_sort` uses Lomuto partitioning with the last element as pivot.
- `shell_sort` uses gaps of the form 2^k - 1; `shell_gaps(size)` returns the
  descending gap sequence for a given length.
- `tim_sort` insertion-sorts runs of `run` elements (32 by default) and then
  merges them bottom-up. A `run` below 1 raises `ValueError`.

The building blocks are public too: `heapify(values, size, root)`,
`merge(values, left, mid, right)`, `partition(values, low, high)` and
`insertion_sort(values, low, high)`. Their bounds are inclusive indices.

```python
from sortbench.quick import quick_sort

data = [5, -3, 9, 0, 2]
quick_sort(data)
print(data)  # [-3, 0, 2, 5, 9]
```

## Timing a sort

The data format is a count followed by at least that many
whitespace-separated numbers:

```
5
5 -3 9 0 2
```

`sortbench.bench` provides:

- `read_values(stream)` reads such data and returns a list of integers.
  Numbers written with a fractional part are truncated toward zero. Values
  past the count are ignored. A missing or negative count, or too few values,
  raises `ValueError`.
- `time_sort(algorithm, values)` sorts `values` in place and returns the CPU
  time taken, in seconds. If the result is out of order it raises
  `UnsortedResultError`.
- `is_sorted(values)` tells whether an iterable is in non-decreasing order.

The same is available as a command. It takes the name of an algorithm
(`heap`, `merge`, `quick`, `radix10`, `radix65536`, `shell` or `tim`) and
an optional input file, reading standard input when none is given, and
prints the elapsed CPU time in seconds:

```
sortbench --help
sortbench quick numbers.txt
sortbench radix10 < numbers.txt
```

It exits with status 2 if the input cannot be read or parsed, and 1 if the
sort leaves the data unsorted.

## Development

```
pip install -e ".[test]"
pytest
```