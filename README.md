# stackyard

A yard holds `n` stacks of containers. Each container carries a goods type from
`1` to `n`. stackyard moves containers from the top of one stack to the top of
another, one at a time, and prints each move as it makes it. The goal is to
bring the containers of type `k` into stack `k`.

The program's prompts and messages are in Russian.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
stackyard [--log PATH]
```

The command reads from standard input. It prompts for the yard one value at a
time:

1. The number of stacks (1 to 500).
2. For each stack, the number of containers in it (0 to 500), followed by the
   goods types of those containers (each from 1 to the number of stacks),
   listed from top to bottom.

Type `0` at the first prompt to quit. Type `log` there to switch detailed
tracing on or off. When tracing is on, the contents of every stack are shown
after each move. A value that is not a number or is out of range prints an
error and returns to the first prompt. The program also stops when standard
input ends.

Example session input:

```
3
4 1 2 3 2
0
0
0
```

Each move is printed as `from -> to (type)`, with stacks numbered from 1.
Moves, prompts, the values typed and the final stack contents are also written
to a log file, `log.txt` in the current directory unless `--log` names another
path. The file is overwritten at each start. If it cannot be opened, the
command prints an error and exits with status 1.

How the yard is sorted depends on the number of stacks:

- One stack: the program reports that the stack is already sorted when every
  container is type 1, and prints `0` otherwise.
- Two stacks: type-2 containers from stack 1 are moved to stack 2, and type-1
  containers from stack 2 are moved to stack 1. The moves are printed as
  `1 -> 2` and `2 -> 1`.
- Three or more stacks: for each `i` from the first stack onwards,
  stacks `i`, `i+1` and `i+2` are merged into stack `i+2` with the smallest
  type on top, and containers are then handed from the top of stack `i+2` to
  their own stack until one of type `i+2` is on top.

## Using it from Python

A stack is a plain `list` of ints whose last element is the top.

```python
import io

from stackyard.algorithms import Reporter, read_stacks
from stackyard.cli import sort_many

stacks = read_stacks("3 4 1 2 3 2 0 0")
reporter = Reporter(log=io.StringIO())
sort_many(stacks, reporter)
reporter.show_result(stacks)
```

In `stackyard.algorithms`:

- `read_stacks(tokens)` takes a string or an iterable of tokens: the number of
  stacks (3 to 500), then for each stack its size (0 to 500) and its types,
  top first. It raises `InputError` (a `ValueError`) when a token is missing,
  is not a number, or is out of range.
- `merge_and_sort(stacks, first, second, target, reporter=None)` and
  `distribute(index, stacks, reporter=None)` are the two steps that
  `sort_many` uses. Both change `stacks` in place. With no reporter they make
  their moves silently.
- `Reporter(out=sys.stdout, log=None, detailed=False)` writes moves with
  `action`, stack snapshots with `show` (only when `detailed` is true) and the
  final stacks with `show_result`. Snapshots are only written when a `log`
  stream is given; otherwise a "log file not open" error line is written to
  `out` instead.

In `stackyard.cli`:

- `sort_single(stacks, reporter)` and `sort_pair(stacks, reporter)` handle one
  and two stacks and return whether the stacks are sorted. `sort_pair` empties
  both stacks and leaves them empty if it finds a type other than 1 or 2.
- `sort_many(stacks, reporter)` sorts three or more stacks.
- `string_to_number(text)` reads an optionally signed decimal prefix after
  leading spaces and returns 0 when there is none.
- `print_instructions(out)` writes the input rules and an example.
- `main(argv=None)` runs the interactive command and returns its exit status.

## What it does not do

stackyard has no non-interactive mode: the command does not read a yard from a
file or command-line arguments, and it does not check that the final stacks
are fully sorted. It only prints the moves it made and the stacks as they end
up.