"""Check that a list of push_swap instructions sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .numbers import atoi, is_int
from .stacks import Instruction, Stacks


class CheckerError(Exception):
    """The arguments or the instructions are not valid."""


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Turn arguments into the starting contents of stack A.

    Raises CheckerError for an argument that is not a 32-bit integer or for
    a repeated value.
    """
    bad = [arg for arg in args if not is_int(arg)]
    if bad:
        raise CheckerError(f"not an integer: {bad[0]!r}")
    numbers = [atoi(arg) for arg in args]
    if len(set(numbers)) != len(numbers):
        raise CheckerError("duplicate numbers")
    return numbers


def check(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply instruction lines to ``numbers`` and tell whether they end sorted.

    Reading stops at the end of ``lines`` or at an empty line. Each
    instruction must end with a newline; anything else raises CheckerError.
    """
    stacks = Stacks(numbers)
    for line in lines:
        if line in ("", "\n"):
            break
        if not line.endswith("\n"):
            raise CheckerError(f"unterminated instruction: {line!r}")
        try:
            instruction = Instruction.parse(line)
        except ValueError as exc:
            raise CheckerError(str(exc)) from None
        stacks.apply(instruction)
    return stacks.is_solved()


def _stdin_lines() -> Iterable[str]:
    for raw in sys.stdin.buffer:
        yield raw.decode("utf-8", "replace")


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except CheckerError:
        print("Error")
        return 255
    try:
        solved = check(numbers, _stdin_lines())
    except CheckerError:
        print("Error")
        return 0
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())