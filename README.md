# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations. The `push_swap` command prints the operations it performs, one
per line, so that applying them in order leaves stack `a` sorted in
ascending order and stack `b` empty.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upwards: the top goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downwards: the bottom goes to the top |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push_swap 3 2 1
```

or as one quoted string holding spaces, which is split on whitespace:

```
push_swap "4 67 3 87 23"
```

The first number given is the top of stack `a`. Each number is an optional
`+` or `-` followed by digits. If the input is already sorted, nothing is
printed and the exit status is 0. If a number is malformed, lies outside the
32-bit signed range, or appears twice, or if no numbers are left after
splitting, `Error` is written to standard error and the exit status is 2.
With no arguments at all the command prints nothing and exits with status 1.

Lists of two to five numbers are sorted with fixed move sequences. Longer
lists move everything but three numbers to `b`, sort those three, then bring
each number back from `b` choosing the one that needs the fewest rotations,
and finally rotate `a` so that its smallest number is on top.

## Library use

```python
from pushswap.cli import push_swap
from pushswap.stacks import Stacks
from pushswap.sorting import sort_stacks

push_swap(["3", "2", "1"])      # ['sa', 'rra']

stacks = Stacks([3, 2, 1])
sort_stacks(stacks)
list(stacks.a)                  # [1, 2, 3]
stacks.moves                    # ['sa', 'rra']
```

- `pushswap.cli` — `push_swap(args)` returns the list of moves for the given
  arguments; `main(argv=None)` runs the command and returns its exit status.
- `pushswap.stacks` — the `Stacks` class with the eleven operations as
  methods and a `moves` log, plus `is_sorted`, `has_duplicates` and
  `lowest_position`.
- `pushswap.parsing` — `parse_arguments`, `parse_int`, `is_number`,
  `split_spaces` and `is_whitespace`; invalid input raises `InputError`, a
  subclass of `ValueError`.
- `pushswap.positions` — `target_index`, `max_position`, `move_cost`, and
  `plan_rotations`, which returns a `Rotations` record of how many of each
  rotation line up both stacks.
- `pushswap.sorting` — `sort2` to `sort5`, `big_sort`, `best_candidate`,
  `organize`, `sort_lowest` and `sort_stacks`, which picks the strategy by
  the size of `a`.
- `pushswap.libft` — small helpers in the style of the C library:
  `chars` (character classes and case), `memory` (byte-buffer fill, copy,
  search and compare), `strings` (NUL-terminated string functions),
  `output` (writing to file descriptors) and `convert` (`atoi`, `itoa`,
  `split`, `strmapi`, `striteri`).

## What it does not do

There is no checker command: the package prints moves but does not read a
list of moves back to verify that they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```