# adventsolve

Solvers for a selection of Advent of Code puzzles. Each puzzle day has its
own module, named `y<year>_day<day>`, for example `adventsolve.y2022_day05`.

Covered days:

| Year | Days |
|------|------|
| 2021 | 1, 14, 15 |
| 2022 | 1 to 13 |
| 2023 | 1, 2 |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library use

Most day modules share one small interface:

- `parse(text)` turns the raw puzzle input into the structure the solver works on;
- `part1(...)` and `part2(...)` compute the answers to the two halves of the puzzle
  from that structure.

```python
from adventsolve import y2021_day01

depths = y2021_day01.parse("199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n")
print(y2021_day01.part1(depths))  # 7
print(y2021_day01.part2(depths))  # 5
```

Two modules differ slightly:

- `y2022_day05.parse(text)` returns a `(CargoBay, steps)` tuple, and
  `part1(bay, steps)` / `part2(bay, steps)` take both. The parts work on a
  copy, so the same bay can be used for both.
- `y2021_day14.part1(text)` and `part2(text)` take the raw input text
  directly; `pair_insertion(text, steps)` runs any number of steps.
  `parse(text)` is still available and returns a `(Polymer, rules)` tuple.

Answers are plain Python values: integers for most puzzles, and strings
where the puzzle asks for text — the top crate letters of 2022 day 5 and the
CRT drawing of 2022 day 10 part 2 (one line per screen row, each ending in a
newline).

Malformed input raises `ValueError`.

## Dispatcher

`adventsolve.cli.solve(year, day, part, text)` picks the right module, parses
the text and returns the answer. It raises `ValueError` for a year and day
that have no solver, or for a part other than 1 or 2.

```python
from adventsolve.cli import solve

with open("input.txt") as handle:
    answer = solve(2022, 1, 2, handle.read())
print(answer)
```

## Command line

The package installs an `adventsolve` command:

```
adventsolve YEAR DAY PART [INPUT]
```

`PART` is 1 or 2. `INPUT` is the path of a puzzle input file; leave it out or
give `-` to read the input from standard input. The answer is printed on
standard output. If the file cannot be read or the input cannot be solved, a
message starting with `error:` goes to standard error and the exit status
is 1.

```
adventsolve 2022 5 1 input.txt
adventsolve 2021 1 2 < input.txt
adventsolve --help
```

## What it does not do

The package neither downloads nor ships puzzle inputs: you provide the input
text yourself, either as a file, on standard input, or as a string passed to
the functions.