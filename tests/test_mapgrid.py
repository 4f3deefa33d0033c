import pytest

from cubparse.mapgrid import check_map, is_blank, pad_lines, read_map, validate_map
from cubparse.stream import CharStream, ParseError

GOOD = ["11111\n", "1N001\n", "11111\n"]


@pytest.mark.parametrize(
    "line, expected",
    [("\n", True), ("", True), (" \t \n", True), ("  ", True), (" 1\n", False), ("x", False)],
)
def test_is_blank(line, expected):
    assert is_blank(line) is expected


def test_check_map_empty():
    with pytest.raises(ParseError, match="no map"):
        check_map([])


def test_check_map_forbidden_character():
    with pytest.raises(ParseError, match="forbidden character in map"):
        check_map(["111\n", "1X1\n"])


def test_check_map_rejects_tab():
    with pytest.raises(ParseError, match="forbidden character in map"):
        check_map(["1\t1\n"])


def test_check_map_returns_last_line_length():
    lines = ["1\n", "1111\n", "111\n"]
    assert check_map(lines) == len(lines[-1])


def test_pad_lines_equalises_lengths():
    lines = ["11\n", "1N01\n", "111111\n"]
    width = len(lines[-1])
    padded = pad_lines(lines, width)
    assert all(len(line) == width for line in padded)
    assert all(line.endswith("\n") for line in padded)
    assert padded[0].startswith("11 ")
    assert padded[-1] is lines[-1]


def test_pad_lines_keeps_content():
    padded = pad_lines(["1N1\n"], 6)
    assert padded[0].rstrip(" \n") == "1N1"


def test_validate_good_map():
    grid = list(GOOD)
    validate_map(grid)
    assert grid == GOOD


def test_validate_multiple_players():
    with pytest.raises(ParseError, match="multiple players"):
        validate_map(["11111\n", "1NS01\n", "11111\n"])


def test_validate_no_player():
    with pytest.raises(ParseError, match="no player"):
        validate_map(["111\n", "101\n", "111\n"])


@pytest.mark.parametrize(
    "grid",
    [
        ["1111\n", "0N11\n", "1111\n"],
        ["11111\n", "1N 01\n", "11111\n"],
        ["1N11\n", "1111\n"],
        ["1111\n", "1N01\n"],
        ["111\n", "1N0\n", "111\n"],
    ],
)
def test_validate_missing_wall(grid):
    with pytest.raises(ParseError, match="missing wall at map edge"):
        validate_map(grid)


def test_read_map_skips_leading_blank_lines():
    stream = CharStream("\n  \n\t\n" + "".join(GOOD))
    assert read_map(stream) == GOOD


def test_read_map_pads_short_lines():
    grid = read_map(CharStream("111\n1N1\n1111\n"))
    assert len({len(line) for line in grid}) == 1


def test_read_map_empty():
    with pytest.raises(ParseError, match="no map"):
        read_map(CharStream("\n\n"))