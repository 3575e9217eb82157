# aoc2020

Small helpers and puzzle solutions for Advent of Code 2020.

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

- `aoc2020.aocmath`
  - `sums_to(numbers, target)` returns whether the numbers, added left to right, equal `target`.
  - `product(numbers)` returns the product of the numbers. An empty sequence gives `1`.
- `aoc2020.reader`
  - `read_lines(filename)` reads a file, trims whitespace around its whole content and splits it on newlines. It raises `OSError` if the file cannot be read.
  - `read_integers(filename)` reads a file and parses one integer per line. Lines that are not integers, or that fall outside the signed 64-bit range, are skipped.
- `aoc2020.day01`
  - `n_sum(entries, target, n)` returns the first `n` entries, in order, that sum to `target`. It returns `None` when no such combination exists.

## Example: Day 1

```python
from aoc2020.aocmath import product
from aoc2020.day01 import n_sum
from aoc2020.reader import read_integers

entries = read_integers("day01.in")
print(product(n_sum(entries, 2020, 2)))  # part 1
print(product(n_sum(entries, 2020, 3)))  # part 2
```

## What it does not do

The package is a library only. It has no command-line program for solving a day's puzzle, and it does not ship puzzle input files: you supply the input file yourself. Only Day 1 is solved.