# swapcheck

These tools check programs that sort a stack of integers with the
`push_swap` instruction set: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`,
`rra`, `rrb` and `rrr`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Checker

`swapcheck-checker` takes the starting contents of stack A as its arguments.
The first argument is the top of the stack. The checker then reads
instructions from standard input, one per line, and applies them.

```
printf 'sa\n' | swapcheck-checker 2 1 3
```

Reading stops at end of input or at an empty line. The checker then prints:

- `OK` if stack A is in ascending order from top to bottom and stack B is
  empty;
- `KO` otherwise.

It prints `Error` in these cases:

- An argument is not an optional sign followed by digits that fit in a
  32-bit integer, or a number appears twice. The exit status is 255.
- An instruction is not recognized, or the last instruction has no
  newline at the end. The exit status is 0.

An instruction that needs more elements than the stack holds, such as
swapping a stack with one element or pushing from an empty stack, does
nothing.

If no arguments are given, the checker prints nothing and exits with
status 0.

## Tester

`swapcheck-tester` runs `./push_swap` from the current directory many times,
on arrays of random integers of increasing size. Each time, it writes the
program's output to `output.txt` and passes that file to `./checker`, also
taken from the current directory, with the same numbers as arguments. Both
executables must be present.

```
swapcheck-tester -n 20 -s 3 -e 100 -st 5 -l 700
```

For every run the tester shows one of these results:

- `[OK]` in green;
- `[OK]` in yellow, when the output has more lines than the warning limit;
- `[KO]` in red;
- `[Error]` in red, when the checker could not be started or gave no
  answer it understood.

After each size it prints the smallest and the largest number of
instructions it saw. If the checker answers `Error`, the tester stops and
exits with status 1. When the session ends, `output.txt` is deleted.

| Option        | Meaning                                             | Default |
|---------------|-----------------------------------------------------|---------|
| `-n <tests>`  | Tests per array size; a negative value means no end | 10      |
| `-s <start>`  | Minimum array size                                  | 1       |
| `-e <end>`    | Maximum array size                                  | 500     |
| `-st <steps>` | Step between array sizes                            | 1       |
| `-l <limit>`  | Line count above which an `[OK]` is shown in yellow | 5500    |
| `-h`          | Show help and exit                                  |         |

If an option is unknown, or an option is missing its value, the tester
reports it, prints the help and exits. If an option's value is not an
integer, or if `-s` is greater than `-e`, the tester exits with status 1.

## Library use

- `swapcheck.stacks`:
  - `Instruction` is an enum of the eleven instructions.
    `Instruction.parse(line)` reads one instruction, with or without its
    newline, and raises `ValueError` for anything else.
  - `Stacks(a, b)` holds both stacks. Its methods are
    `apply(instruction)`, `is_solved()`, and `render()`, which draws the
    two stacks side by side as a text table.
- `swapcheck.checker`: `parse_numbers(args)` and `check(numbers, lines)`.
  Both raise `CheckerError` on invalid input.
- `swapcheck.tester`:
  - `TesterOptions`, `parse_options(argv)` and `parse_int(text)`;
  - `generate_random_array(size, rng)`;
  - `run_push_swap(numbers, output_path, program)`;
  - `run_checker(numbers, output_path, program)`, which returns a
    `Verdict`;
  - `count_lines(path)`.
- `swapcheck.numbers`: `atoi`, `is_int` and `digit_count`. These work on
  32-bit integers.
- `swapcheck.cprintf`: `sprintf` and `printf`, a small printf for
  `%c %s %p %d %i %u %x %X %%`. It supports the flags `- + space # 0`, a
  width and a precision. `FormatSpec`, `pad_width` and `pad_precision` are
  its building blocks.

## What it does not do

The package contains no `push_swap` sorter. The tester needs one as
`./push_swap` in the current directory.

The tester also runs `./checker`, not `swapcheck-checker`. To use the
bundled checker, place an executable named `checker` in that directory
that runs `swapcheck-checker`.