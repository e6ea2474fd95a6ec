# contestkit

This package solves problems from programming contests and Codeforces
rounds. Each solution is an ordinary Python function. A function takes
the problem's input as Python values and returns the answer. It does not
print anything.

## Install

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Modules

- `contestkit.algo2020`
  - `checkout_time`: least travel time with acceleration, braking, a speed limit and a delay.
  - `min_square_sum`: smallest sum of a 3x3 block in a grid.
  - `min_vitamin_steps`: fewest steps to reach an exact amount. Returns `None` if the amount cannot be reached.
- `contestkit.csranking`
  - `min_tree_cost`: cheapest way to keep `k` nodes connected to the root of a tree.
  - `butterfly_sum`: sum of `x + 1` over the distinct values.
  - `max_points_in_angle`: most points inside one angular sector seen from an origin.
  - `is_number`: integer, decimal or exponent syntax check.
  - `min_chessboard_swaps`: row and column swaps that turn a 0/1 grid into a chessboard. Returns `None` if no arrangement is found.
- `contestkit.icpc_beta`
  - `shortest_influenced_path`: cheapest route between named cities, where each city adds an influence toll. Ties go to the route that gathers the most stones. Returns `None` if the target cannot be reached.
  - `count_partitions`: number of ways to make a total from distinct coins.
  - `check_fingerprints`: for each query, `True` when it matches none of the known sequences.
  - `min_groups`: greedy grouping of consecutive pairs.
  - `consecutive_divisors`: every `x` for which `x * (x + 1)` divides `n`.
  - `locate_rectangle`: finds a hidden rectangle by binary search. You supply a query callable that returns the overlap area.
- `contestkit.pipeline`
  - `pipeline_feasible`: checks whether every pipe opening in a 3D grid can be joined to a neighbour's opening.
- `contestkit.codeforces`
  - `pursuit_stages`
  - `minimax_string`
  - `min_purchase_cost`
  - `max_adjacent_product`
  - `diane_string`

## Example

```python
from contestkit.csranking import is_number
from contestkit.icpc_beta import count_partitions
from contestkit.codeforces import diane_string, max_adjacent_product

is_number("-1.5e10")               # True
count_partitions(4, [1, 2])        # 3
diane_string(3)                    # "abc"
max_adjacent_product([2, 4, 3])    # 12
```

## Errors and missing solutions

- For input a function cannot work with, it raises `ValueError`.
- When a problem has no solution, the function returns the value its docstring names, usually `None`.

## What it does not do

- There is no command-line program. The package does not read problem input from standard input or files. You call the functions from Python and pass the input yourself.
- `locate_rectangle` is the interactive problem. Its judge is the query function you pass in.