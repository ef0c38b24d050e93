# aoc2022

Solutions to the Advent of Code 2022 puzzles, together with a small command-line
tool for the chores around them: creating a day's files, fetching inputs and
puzzle descriptions, running solutions, and keeping a benchmark table up to date
in a `README.md`.

## Installation

```
pip install .
```

This installs the `aoc2022` command. For the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

Downloading inputs, reading puzzle descriptions and submitting answers go
through the external `aoc` command-line client, which must be installed and on
your `PATH`. Set the `AOC_YEAR` environment variable to pass a specific event
year to it.

## Working directory

Run the tool from the project root: the directory that holds both the
`aoc2022/` package directory and the puzzle data. Paths are resolved relative
to the current directory:

| Path | Contents |
| --- | --- |
| `aoc2022/solutions/dayNN.py` | the solution module for day `NN` |
| `data/inputs/NN.txt` | your personal puzzle input for day `NN` |
| `data/examples/NN.txt` | the example input from the puzzle text |
| `data/puzzles/NN.md` | the downloaded puzzle description |
| `data/timings.json` | stored benchmark results |

Days are written as two digits (`01` … `25`); on the command line a plain
number between 1 and 25 is accepted.

## Commands

```
aoc2022 scaffold 5 [--download]
```
Create `aoc2022/solutions/day05.py` from a template (it must not exist yet)
and empty `data/inputs/05.txt` and `data/examples/05.txt`. With `--download`,
also fetch the day's input and description.

```
aoc2022 download 5
aoc2022 read 5
```
Fetch the input and description for day 5 through `aoc`, or show the
description in the terminal.

```
aoc2022 today
```
Between the 1st and the 25th of December (on UTC−5 time), scaffold, download
and read the current day. Outside that range it exits with an error.

```
aoc2022 solve 5 [--submit 1]
```
Run the solution for day 5 on `data/inputs/05.txt` in a child Python process.
With `--submit N`, the answer to part `N` is submitted through `aoc` once it
has been computed.

```
aoc2022 all
```
Run every day that has a solution module, in order. Days without one are
reported as "Not solved."

```
aoc2022 time [5] [--all] [--store]
```
Benchmark solutions: each part is run repeatedly (about one second, between
10 and 10,000 samples) and the average is reported. Without a day, only days
that do not yet have stored timings for both parts are run; `--all` runs every
day. With `--store`, the results are merged into `data/timings.json` and written
into the benchmark table of `README.md`.

A solution module can also be run directly:

```
python -m aoc2022.solutions.day01 [--time] [--submit 1]
```

### Benchmark table

`time --store` replaces everything from the first to the last occurrence of
this marker in `README.md`:

```
<!--- benchmarking table --->
<!--- benchmarking table --->
```

The table lists each day's part timings, linked to its solution module, and
the total run time in milliseconds. The marker may appear at most twice;
otherwise the README is left unchanged and a failure is reported.

## Solved days

Days 1 to 6 are solved in `aoc2022.solutions` (`day01` … `day06`); each module
offers `part_one(text)` and `part_two(text)`, which take the raw puzzle input.
`day07` only follows the `cd` commands of the session and returns no answer
for either part.

## Limitations

- The `--release` flag of `solve` and `all`, and the `--dhat` flag of `solve`,
  are accepted but have no effect: there are no build profiles or heap
  profiling.
- Fetching, reading and submitting need the external `aoc` client; the package
  does not talk to the puzzle website itself.