import pytest

from swapcheck.stacks import Instruction, Stacks


@pytest.mark.parametrize("instruction", list(Instruction))
def test_parse_round_trip(instruction):
    assert Instruction.parse(instruction.value + "\n") is instruction
    assert Instruction.parse(instruction.value) is instruction


@pytest.mark.parametrize("line", ["xx\n", "s a\n", "SA\n", "rrrr\n", "\n", "sa\n\n"])
def test_parse_rejects_unknown(line):
    with pytest.raises(ValueError):
        Instruction.parse(line)


def test_swap_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Instruction.SA)
    assert list(stacks.a) == [2, 1, 3]


def test_rotate_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Instruction.RA)
    assert list(stacks.a) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Instruction.RRA)
    assert list(stacks.a) == [3, 1, 2]


@pytest.mark.parametrize(
    "first, second",
    [
        (Instruction.SA, Instruction.SA),
        (Instruction.RA, Instruction.RRA),
        (Instruction.RRA, Instruction.RA),
        (Instruction.PB, Instruction.PA),
    ],
)
def test_inverse_pairs_restore_state(first, second):
    numbers = [5, -3, 8, 0, 12]
    stacks = Stacks(numbers)
    stacks.apply(first)
    stacks.apply(second)
    assert list(stacks.a) == numbers
    assert list(stacks.b) == []


def test_push_moves_top_element():
    stacks = Stacks([7, 8, 9])
    stacks.apply(Instruction.PB)
    assert list(stacks.b) == [7]
    assert list(stacks.a) == [8, 9]


def test_push_from_empty_does_nothing():
    stacks = Stacks([4, 5])
    stacks.apply(Instruction.PA)
    assert list(stacks.a) == [4, 5]
    assert list(stacks.b) == []


@pytest.mark.parametrize(
    "instruction", [Instruction.SA, Instruction.RA, Instruction.RRA]
)
def test_single_element_unchanged(instruction):
    stacks = Stacks([42])
    stacks.apply(instruction)
    assert list(stacks.a) == [42]


def test_double_instructions_affect_both_stacks():
    both = Stacks([1, 2, 3], [4, 5, 6])
    both.apply(Instruction.RR)
    single = Stacks([1, 2, 3], [4, 5, 6])
    single.apply(Instruction.RA)
    single.apply(Instruction.RB)
    assert list(both.a) == list(single.a)
    assert list(both.b) == list(single.b)

    both.apply(Instruction.SS)
    single.apply(Instruction.SA)
    single.apply(Instruction.SB)
    assert list(both.a) == list(single.a)
    assert list(both.b) == list(single.b)

    both.apply(Instruction.RRR)
    single.apply(Instruction.RRA)
    single.apply(Instruction.RRB)
    assert list(both.a) == list(single.a)
    assert list(both.b) == list(single.b)


def test_is_solved():
    assert Stacks([1, 2, 3]).is_solved()
    assert Stacks([]).is_solved()
    assert not Stacks([2, 1, 3]).is_solved()
    assert not Stacks([1, 2], [3]).is_solved()


def test_render_frame_and_contents():
    stacks = Stacks([1, 2, 3], [4])
    text = stacks.render()
    lines = text.splitlines()
    assert lines[0] == "--------------------------------------"
    assert lines[1] == "|     Stack A     ||     Stack B     |"
    assert lines[-1] == "--------------------------------------"
    assert len(lines) == 3 + 3 + 1
    body = "\n".join(lines[3:-1])
    for number in (1, 2, 3, 4):
        assert str(number) in body
    assert lines[3].endswith("|                 |")


def test_render_empty_has_only_frame():
    lines = Stacks().render().splitlines()
    assert len(lines) == 4