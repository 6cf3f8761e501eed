import io
import sys

import pytest

from swapcheck.checker import CheckerError, check, main, parse_numbers


def _feed_stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def _blank_then_fail():
    yield "\n"
    raise AssertionError("read past the blank line")


def test_parse_numbers_keeps_order():
    assert parse_numbers(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_numbers_accepts_limits():
    assert parse_numbers(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["-2147483649"], ["1", "2a"], [" 1"]],
)
def test_parse_numbers_rejects(args):
    with pytest.raises(CheckerError):
        parse_numbers(args)


def test_check_sorted_without_instructions():
    assert check([1, 2, 3], []) is True


def test_check_unsorted_without_instructions():
    assert check([2, 1], []) is False


def test_check_swap_sorts():
    assert check([2, 1], ["sa\n"]) is True


def test_check_non_empty_b_is_ko():
    assert check([1, 2], ["pb\n"]) is False


def test_check_push_and_back():
    assert check([3, 1, 2], ["ra\n"]) is True
    assert check([1, 2, 3], ["pb\n", "pa\n"]) is True


def test_check_unknown_instruction():
    with pytest.raises(CheckerError):
        check([1], ["xx\n"])


def test_check_unterminated_instruction():
    with pytest.raises(CheckerError):
        check([2, 1], ["sa"])


def test_check_stops_at_blank_line():
    assert check([2, 1], _blank_then_fail()) is False


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_ok(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"sa\n")
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"")
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_arguments(capsys):
    assert main(["1", "1"]) == 255
    assert capsys.readouterr().out == "Error\n"


def test_main_bad_instruction(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"nope\n")
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_crlf_is_error(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"sa\r\n")
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "Error\n"