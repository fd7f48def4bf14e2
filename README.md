# basicalgos

A small collection of classic algorithms of the kind found in introductory
programming courses. They are written as plain Python functions that take
ordinary Python values and return new ones.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `basicalgos.sorting`

`bucket_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`,
`heap_sort` and `exchange_sort`. Each one takes an iterable and returns a new
list in ascending order. The input is left unchanged.

`bucket_sort` only accepts numbers in the range `[0, 1)`. Any other value
raises `ValueError`.

### `basicalgos.searching`

- `binary_search(items, target)` returns an index of `target` in an ascending
  sequence, or `None` when it is absent.
- `linear_search(items, target)` returns the index of the first occurrence,
  or `None`.
- `max_window_sum(items, k)` returns the largest sum of `k` consecutive items.
  It raises `ValueError` unless `1 <= k <= len(items)`.

### `basicalgos.graph`

`Graph(vertex_count)` is a directed graph on the vertices
`0 .. vertex_count - 1`.

- `add_edge(v, w)` adds an edge. A vertex outside the range raises
  `IndexError`.
- `topological_sort()` returns the vertices in reverse depth-first finishing
  order. Vertices are started in ascending order, and neighbours are visited
  in the order their edges were added.

### `basicalgos.arithmetic`

- `is_armstrong(n)`: true when the sum of the cubes of the digits equals `n`.
- `divide(dividend, divisor)`: returns `(quotient, remainder)`. The quotient
  is truncated toward zero and the remainder takes the sign of the dividend.
- `swap(first, second)`: returns the two values in exchanged order.
- `add(first, second)`: returns the sum of the two values.
- `reverse_number(n)`: reverses the decimal digits and keeps the sign.
- `power(base, exponent)`: the exponent must be a non-negative integer.
- `is_prime(n)`: raises `ValueError` for a negative `n`.

### `basicalgos.measures`

- `standard_deviation(data)` returns the population standard deviation. It
  raises `ValueError` for empty data.
- `frequencies(values)` returns a dict from each value to its count, in the
  order of first appearance.

### `basicalgos.matrix`

`multiply(a, b)` returns the product of two matrices given as nested
sequences. It raises `ValueError` when the rows are ragged or the inner
dimensions differ.

### `basicalgos.patterns`

Each function returns the lines of a text pattern as a list of strings:

- `pyramid`
- `centered_triangle`
- `inverted_triangle`
- `arrow_right`
- `arrow_left`
- `spaced_triangle`
- `spaced_inverted_triangle`
- `spaced_arrow_right`
- `spaced_arrow_left`
- `zigzag`
- `pascal_triangle`
- `palindromic_pyramid`, which takes no size and always has five rows

## Examples

```python
from basicalgos.sorting import merge_sort
from basicalgos.searching import binary_search
from basicalgos.graph import Graph
from basicalgos.patterns import pascal_triangle

merge_sort([5, 4, 3, 2, 1])            # [1, 2, 3, 4, 5]
binary_search([2, 3, 4, 10, 40], 10)   # 3
binary_search([2, 3, 4, 10, 40], 7)    # None

g = Graph(6)
for v, w in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(v, w)
g.topological_sort()                   # [5, 4, 2, 3, 1, 0]

pascal_triangle(4)                     # ['1', '11', '121', '1331']
```

## Command line

```
basicalgos
basicalgos hello
basicalgos pattern NAME [SIZE]
```

With no command, or with `hello`, the tool prints `Hello World`.

`pattern` prints one of the patterns. `SIZE` defaults to 5 and is ignored by
`palindromic-pyramid`. The valid names are:

- `pyramid`
- `centered-triangle`
- `inverted-triangle`
- `arrow-right`
- `arrow-left`
- `spaced-triangle`
- `spaced-inverted-triangle`
- `spaced-arrow-right`
- `spaced-arrow-left`
- `palindromic-pyramid`
- `zigzag`
- `pascal-triangle`

## What it does not do

The command line only prints the greeting and the patterns. It does not read
numbers from the terminal, so it cannot sort, search, or compute statistics or
matrix products. For those, call the functions from Python.