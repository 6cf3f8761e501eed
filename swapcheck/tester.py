"""Stress-test a push_swap program against a checker on random inputs."""

from __future__ import annotations

import itertools
import os
import random
import re
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence, Union

BLUE = "\033[34m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
PURPLE = "\033[35m"
RESET = "\033[0m"

RAND_MAX = 2147483647
PUSH_SWAP = "./push_swap"
CHECKER = "./checker"
OUTPUT_FILE = "output.txt"

HELP_TEXT = (
    "Usage: ./program [options]\n"
    "Options :\n"
    "  -n <tests>     Number of tests per array size (default: 10, -1 to infinite)\n"
    "  -s <start>     Minimum array size (default: 1)\n"
    "  -e <end>       Maximum array size (default: 500)\n"
    "  -st <steps>    Testing steps (default: 1)\n"
    "  -l <limit>     Limit of operations to show a warning (default: 5500)\n"
    "  -h             Display this help message\n"
)

_UINT_MASK = 0xFFFFFFFF
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_VALUE_OPTIONS = ("-n", "-s", "-e", "-st", "-l")

Program = Union[str, "os.PathLike[str]", Sequence[str]]


class Verdict(Enum):
    """What the checker said about one run."""

    ERROR = -1
    OK = 0
    KO = 1


class _CheckerFailure(RuntimeError):
    """The checker answered ``Error``: the tester cannot go on."""


@dataclass
class TesterOptions:
    """Settings of a test session, as given on the command line."""

    num_tests: int | None = 10
    start: int = 1
    end: int = 500
    steps: int = 1
    limit: int = 5500
    help_requested: bool = False
    unknown_option: str | None = None

    def sizes(self) -> Iterator[int]:
        """Array sizes to test, from ``start`` to ``end`` by ``steps``."""
        size = self.start
        while size <= self.end:
            yield size
            size += self.steps

    def runs(self) -> Iterator[int]:
        """Run indices for one size; endless when ``num_tests`` is None."""
        if self.num_tests is None:
            return itertools.count()
        return iter(range(self.num_tests))


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def parse_int(text: str) -> int:
    """Parse a whole argument as a decimal integer, raising ValueError on junk."""
    if text == "":
        return 0
    match = _INT_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Error : '{text}' is not a valable integer.")
    value = max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))
    return _wrap_int32(value)


def parse_options(argv: Sequence[str]) -> TesterOptions:
    """Build options from command-line arguments (program name excluded).

    Parsing stops at ``-h`` or at the first unknown option, which both set
    ``help_requested``.
    """
    options = TesterOptions()
    args = iter(argv)
    for arg in args:
        if arg == "-h":
            options.help_requested = True
            return options
        value = next(args, None) if arg in _VALUE_OPTIONS else None
        if value is None:
            options.help_requested = True
            options.unknown_option = arg
            return options
        number = parse_int(value)
        if arg == "-n":
            options.num_tests = None if number < 0 else number
        elif arg == "-s":
            options.start = number
        elif arg == "-e":
            options.end = number
        elif arg == "-st":
            options.steps = number & _UINT_MASK
        else:
            options.limit = number & _UINT_MASK
    return options


def generate_random_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers centred on zero."""
    if size < 0:
        raise ValueError(f"cannot generate an array of size {size}")
    rng = rng if rng is not None else random.Random()
    half = RAND_MAX // 2
    return [rng.randint(0, RAND_MAX) - half for _ in range(size)]


def _command(program: Program, numbers: Sequence[int]) -> list[str]:
    if isinstance(program, (str, os.PathLike)):
        prefix = [os.fspath(program)]
    else:
        prefix = list(program)
    return [*prefix, *(str(n) for n in numbers)]


def run_push_swap(
    numbers: Sequence[int], output_path: str | os.PathLike[str], program: Program = PUSH_SWAP
) -> None:
    """Run push_swap on ``numbers``, writing its standard output to ``output_path``."""
    command = _command(program, numbers)
    with open(output_path, "wb") as output:
        try:
            subprocess.run(command, stdout=output, check=False)
        except OSError as exc:
            print(f"Error executing {command[0]}: {exc.strerror}", file=sys.stderr)


def run_checker(
    numbers: Sequence[int], output_path: str | os.PathLike[str], program: Program = CHECKER
) -> Verdict:
    """Feed the instructions in ``output_path`` to the checker and read its verdict."""
    command = _command(program, numbers)
    try:
        instructions = open(output_path, "rb")
    except OSError as exc:
        print(f"Error opening {os.fspath(output_path)}: {exc.strerror}", file=sys.stderr)
        return Verdict.ERROR
    with instructions:
        try:
            result = subprocess.run(
                command, stdin=instructions, stdout=subprocess.PIPE, check=False
            )
        except OSError as exc:
            print(f"Error executing {command[0]}: {exc.strerror}", file=sys.stderr)
            return Verdict.ERROR
    answer = result.stdout
    if answer.startswith(b"KO"):
        return Verdict.KO
    if answer.startswith(b"OK"):
        return Verdict.OK
    if answer.startswith(b"Error"):
        raise _CheckerFailure(f"{command[0]} reported Error")
    return Verdict.ERROR


def count_lines(path: str | os.PathLike[str]) -> int:
    """Number of newline characters in the file at ``path``."""
    return Path(path).read_bytes().count(b"\n")


def _status(verdict: Verdict, lines: int, limit: int) -> str:
    if verdict is Verdict.ERROR:
        return f"{RED}[Error] {RESET}"
    if verdict is Verdict.KO:
        return f"{RED}[KO] {RESET}"
    colour = YELLOW if lines > limit else GREEN
    return f"{colour}[OK] {RESET}"


def _run_session(options: TesterOptions, output: Path) -> None:
    rng = random.Random()
    for size in options.sizes():
        print(f"Testing with {PURPLE}{size}{RESET} elements:", flush=True)
        lowest: int | None = None
        highest: int | None = None
        for _ in options.runs():
            numbers = generate_random_array(size, rng)
            run_push_swap(numbers, output)
            lines = count_lines(output)
            lowest = lines if lowest is None else min(lowest, lines)
            highest = lines if highest is None else max(highest, lines)
            verdict = run_checker(numbers, output)
            sys.stdout.write(_status(verdict, lines, options.limit))
            sys.stdout.flush()
        shown_min = -1 if lowest is None else lowest
        shown_max = -1 if highest is None else highest
        print(
            f"\nMin: {GREEN}{shown_min}{RESET}, Max: {YELLOW}{shown_max}{RESET}\n",
            flush=True,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.help_requested:
        if options.unknown_option is not None:
            print(f"Unknown option : {options.unknown_option}", file=sys.stderr)
        print(HELP_TEXT, end="")
        return 0
    if options.start > options.end:
        print("Error : min size (-s) should be <= of max size (-e).", file=sys.stderr)
        return 1

    output = Path(OUTPUT_FILE)
    try:
        _run_session(options, output)
    except (ValueError, OSError, _CheckerFailure) as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        output.unlink()
    except OSError as exc:
        print(f"Error deleting the file: {exc.strerror}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())