import pytest

from cubparse.colors import Color, read_color
from cubparse.stream import CharStream, ParseError


def test_reads_color_with_leading_blanks():
    assert read_color(CharStream(" \t220,100,0\n")) == Color(220, 100, 0)


def test_reads_color_without_leading_blank():
    assert read_color(CharStream("1,2,3")) == Color(1, 2, 3)


def test_extreme_values_accepted():
    assert read_color(CharStream("0,255,0\n")) == Color(0, 255, 0)


def test_str_format():
    assert str(Color(10, 20, 30)) == "10.20.30"


def test_terminator_after_last_component_is_consumed():
    stream = CharStream("4,5,6\nX")
    read_color(stream)
    assert stream.read_char() == "X"


@pytest.mark.parametrize(
    "text",
    [
        "256,0,0\n",
        "0,0,2555\n",
        "1 2,3\n",
        "1, 2,3\n",
        "1,2\n",
        "a,b,c\n",
        "",
        "1,2,\n",
        "-1,2,3\n",
    ],
)
def test_invalid_inputs(text):
    with pytest.raises(ParseError, match="invalid color input"):
        read_color(CharStream(text))


def test_color_is_immutable():
    color = read_color(CharStream("1,2,3\n"))
    with pytest.raises(AttributeError):
        color.red = 9
    assert color == Color(1, 2, 3)
    assert str(color) == "1.2.3"