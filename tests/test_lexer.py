import pytest

from ttmap.errors import MapSyntaxError
from ttmap.lexer import tokenize, tokenize_line


def kinds(tokens):
    return [t.kind for t in tokens]


def test_grid_statement_tokens():
    tokens = tokenize_line("grid 10, 10", 1)
    assert kinds(tokens) == ["WORD", "NUMBER", "COMMA", "NUMBER"]
    assert tokens[1].text == "10"


def test_comments_are_ignored():
    tokens = tokenize_line("grid 10, 10 # a ten-by-ten grid", 1)
    assert len(tokens) == 4


def test_comma_without_spaces():
    tokens = tokenize_line("entity circle within 5,7", 1)
    assert [t.text for t in tokens] == ["entity", "circle", "within", "5", ",", "7"]


def test_decimal_number_is_one_token():
    tokens = tokenize_line("radius 1.5", 1)
    assert kinds(tokens) == ["WORD", "NUMBER"]
    assert tokens[1].text == "1.5"


def test_line_and_column_positions():
    lines = list(tokenize("grid 10, 10\nrect at 1, 1 width 2 height 2"))
    line_no, tokens = lines[1]
    assert line_no == 2
    at = tokens[1]
    assert at.text == "at"
    assert (at.line, at.col) == (2, 6)


def test_blank_and_comment_lines_are_skipped():
    lines = list(tokenize("\n   \n# just a comment\ngrid 2,2\n"))
    assert [n for n, _ in lines] == [4]


def test_invalid_character():
    with pytest.raises(MapSyntaxError) as ei:
        tokenize_line("grid $", 3)
    err = ei.value
    assert (err.line, err.col) == (3, 6)
    assert err.found == "'$'"


def test_non_ascii_digits_are_rejected():
    with pytest.raises(MapSyntaxError) as ei:
        tokenize_line("grid ٣,٣", 1)
    assert ei.value.col == 6
