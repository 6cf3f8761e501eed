"""The two stacks of the push_swap game and the instructions that move them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable

from .cprintf import sprintf

_RULE = "--------------------------------------\n"
_HEADER = _RULE + "|     Stack A     ||     Stack B     |\n" + _RULE
_EMPTY_CELL = "|                 |"
_CELL = "|   % -12d  |"


class Instruction(Enum):
    """One push_swap instruction, named by its text."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Read an instruction from a line, with or without its trailing newline.

        Raises ValueError for anything that is not an instruction.
        """
        name = line[:-1] if line.endswith("\n") else line
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown instruction: {line!r}") from None


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(dest: deque[int], src: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


_ACTIONS: dict[Instruction, Callable[[Stacks], None]] = {
    Instruction.SA: lambda s: _swap(s.a),
    Instruction.SB: lambda s: _swap(s.b),
    Instruction.SS: lambda s: (_swap(s.a), _swap(s.b)) and None,
    Instruction.PA: lambda s: _push(s.a, s.b),
    Instruction.PB: lambda s: _push(s.b, s.a),
    Instruction.RA: lambda s: _rotate(s.a),
    Instruction.RB: lambda s: _rotate(s.b),
    Instruction.RR: lambda s: (_rotate(s.a), _rotate(s.b)) and None,
    Instruction.RRA: lambda s: _reverse_rotate(s.a),
    Instruction.RRB: lambda s: _reverse_rotate(s.b),
    Instruction.RRR: lambda s: (_reverse_rotate(s.a), _reverse_rotate(s.b)) and None,
}


class Stacks:
    """Stacks A and B; the left end of each deque is its top."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)

    def apply(self, instruction: Instruction) -> None:
        """Carry out one instruction; moves on too few elements do nothing."""
        _ACTIONS[instruction](self)

    def is_solved(self) -> bool:
        """Whether B is empty and A is in ascending order from top to bottom."""
        return not self.b and all(x <= y for x, y in pairwise(self.a))

    def render(self) -> str:
        """Draw both stacks side by side, aligned on their bottoms."""
        rows = [_HEADER]
        items_a = iter(self.a)
        items_b = iter(self.b)
        size_a = len(self.a)
        size_b = len(self.b)
        while size_a or size_b:
            if size_a and size_a >= size_b:
                rows.append(sprintf(_CELL, next(items_a)))
                size_a -= 1
            else:
                rows.append(_EMPTY_CELL)
            if size_b and size_b > size_a:
                rows.append(sprintf(_CELL, next(items_b)) + "\n")
                size_b -= 1
            else:
                rows.append(_EMPTY_CELL + "\n")
        rows.append(_RULE)
        return "".join(rows)