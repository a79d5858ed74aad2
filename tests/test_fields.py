import pytest

from tjaparse.decoding.fields import (
    Field,
    parse_command,
    parse_header,
    to_float,
    to_int,
)
from tjaparse.decoding.lines import split_lines
from tjaparse.exceptions import ErrorKind, ParseError


def _line(content: str):
    return split_lines(content)[0]


def _error(func, *args) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        func(*args)
    return exc_info.value


# ---------------------------------------------------------------------------
# parse_header
# ---------------------------------------------------------------------------


def test_header_name_and_value():
    assert parse_header(_line("TITLE:Foo")) == Field("TITLE", "Foo")


def test_header_is_returned_verbatim():
    assert parse_header(_line("title: Foo Bar ")) == Field("title", " Foo Bar ")


def test_header_splits_at_first_colon():
    assert parse_header(_line("SUBTITLE:--feat. A:B")) == Field("SUBTITLE", "--feat. A:B")


def test_header_without_colon():
    err = _error(parse_header, _line("TITLE Foo"))
    assert err.kind is ErrorKind.MISSING_HEADER_FORMAT
    assert err.line == 0


def test_header_with_empty_value():
    err = _error(parse_header, _line("TITLE:"))
    assert err.kind is ErrorKind.EMPTY_HEADER_VALUE


def test_header_with_empty_name():
    err = _error(parse_header, _line(":Foo"))
    assert err.kind is ErrorKind.MISSING_HEADER_FORMAT


def test_header_error_carries_line_number():
    line = split_lines("TITLE:Foo\nBPM")[1]
    err = _error(parse_header, line)
    assert (err.line, err.column) == (1, 0)


# ---------------------------------------------------------------------------
# parse_command
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "name", ["START", "END", "GOGOSTART", "GOGOEND", "BARLINEON", "BARLINEOFF"]
)
def test_zero_argument_commands(name):
    assert parse_command(_line(f"#{name}")) == Field(name, None)


def test_command_with_argument():
    assert parse_command(_line("#BPMCHANGE 180")) == Field("BPMCHANGE", "180")


def test_command_argument_keeps_later_spaces():
    assert parse_command(_line("#BRANCHSTART p, 1, 2")) == Field("BRANCHSTART", "p, 1, 2")


def test_start_with_player_argument():
    assert parse_command(_line("#START P1")) == Field("START", "P1")


def test_unknown_single_token_command():
    err = _error(parse_command, _line("#FOO"))
    assert err.kind is ErrorKind.EMPTY_COMMAND_VALUE


def test_argument_command_without_argument():
    err = _error(parse_command, _line("#SCROLL"))
    assert err.kind is ErrorKind.EMPTY_COMMAND_VALUE


def test_command_without_hash():
    err = _error(parse_command, _line("GOGOSTART"))
    assert err.kind is ErrorKind.MISSING_COMMAND_FORMAT


def test_command_empty_line():
    err = _error(parse_command, _line(""))
    assert err.kind is ErrorKind.MISSING_COMMAND_FORMAT


def test_command_bare_hash():
    err = _error(parse_command, _line("#"))
    assert err.kind is ErrorKind.MISSING_COMMAND_FORMAT


def test_command_is_case_sensitive():
    err = _error(parse_command, _line("#gogostart"))
    assert err.kind is ErrorKind.EMPTY_COMMAND_VALUE


# ---------------------------------------------------------------------------
# to_int
# ---------------------------------------------------------------------------


def test_to_int_plain():
    assert to_int("8", 0) == 8


def test_to_int_signed():
    assert to_int("-12", 0) == -12
    assert to_int("+3", 0) == 3


def test_to_int_ignores_leading_whitespace_and_trailing_text():
    assert to_int("  10 hits", 0) == 10


def test_to_int_rejects_non_numeric():
    err = _error(to_int, "abc", 5)
    assert err.kind is ErrorKind.INT_CONVERT_FAILED
    assert err.line == 5


def test_to_int_rejects_full_width_digits():
    err = _error(to_int, "１２", 0)
    assert err.kind is ErrorKind.INT_CONVERT_FAILED


def test_to_int_range():
    assert to_int("2147483647", 0) == 2147483647
    assert to_int("-2147483648", 0) == -2147483648
    err = _error(to_int, "2147483648", 0)
    assert err.kind is ErrorKind.INT_CONVERT_FAILED


# ---------------------------------------------------------------------------
# to_float
# ---------------------------------------------------------------------------


def test_to_float_plain():
    assert to_float("120", 0) == 120.0
    assert to_float("-1.25", 0) == -1.25


def test_to_float_forms():
    assert to_float(".5", 0) == 0.5
    assert to_float("2.", 0) == 2.0
    assert to_float("1e2", 0) == 100.0


def test_to_float_prefix():
    assert to_float(" 150.5bpm", 0) == 150.5
    assert to_float("1e", 0) == 1.0


def test_to_float_rejects_non_numeric():
    err = _error(to_float, "abc", 3)
    assert err.kind is ErrorKind.FLOAT_CONVERT_FAILED
    assert err.line == 3


def test_to_float_rejects_lone_dot():
    err = _error(to_float, ".", 0)
    assert err.kind is ErrorKind.FLOAT_CONVERT_FAILED


def test_to_float_rejects_overflow():
    err = _error(to_float, "1e400", 0)
    assert err.kind is ErrorKind.FLOAT_CONVERT_FAILED
