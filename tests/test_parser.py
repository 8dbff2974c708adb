import pytest

from ttmap.commands import (
    BooleanOp,
    CircleAtPoint,
    CircleWithinCell,
    LineSegment,
    ShapeOp,
    Side,
    SquareWithinCell,
)
from ttmap.errors import DuplicateGridError, MapSyntaxError, MissingGridError, RangeError
from ttmap.parser import parse


def test_parse_grid_dimensions():
    doc = parse("grid 5, 3")
    assert (doc.grid.width, doc.grid.height) == (5, 3)
    assert doc.commands == ()


def test_parse_rect():
    doc = parse("grid 10, 10\nrect at 1, 2 width 3 height 2")
    (rect,) = doc.commands
    assert isinstance(rect, ShapeOp)
    assert rect.op is BooleanOp.UNION
    assert (rect.rect.x, rect.rect.y, rect.rect.w, rect.rect.h) == (1, 2, 3, 2)
    assert rect.line == 2


def test_parse_rect_with_xor():
    doc = parse("grid 10, 10\nrect at 1, 2 width 3 height 2\nxor rect at 4,2 width 2 height 2")
    xor = doc.commands[1]
    assert xor.op is BooleanOp.XOR
    assert (xor.rect.x, xor.rect.y, xor.rect.w, xor.rect.h) == (4, 2, 2, 2)
    assert doc.shape_ops == doc.commands


def test_parse_line():
    doc = parse("grid 10, 10\nline along left from 1,2 length 4")
    (line,) = doc.commands
    assert isinstance(line, LineSegment)
    assert line.side is Side.LEFT
    assert (line.x, line.y, line.length) == (1, 2, 4)


def test_parse_circles():
    doc = parse("grid 10, 10\nentity circle within 5,7\nentity circle at 5,6 radius 2\nentity circle at 1,1 radius 1.5")
    within, at, frac = doc.commands
    assert within == CircleWithinCell(5, 7, 2, 1)
    assert isinstance(at, CircleAtPoint) and at.radius == 2.0
    assert frac.radius == 1.5


def test_parse_square_entity():
    doc = parse("grid 10, 10\nentity square within 5,7")
    (sq,) = doc.commands
    assert isinstance(sq, SquareWithinCell)
    assert (sq.x, sq.y) == (5, 7)


def test_square_entity_at_point_is_invalid():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 10, 10\nentity square at 5,7")
    assert ei.value.expected == "'within'"


def test_syntax_error_reports_found_and_expected():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid width 10")
    err = ei.value
    assert err.expected == "integer"
    assert err.found == "'width'"
    assert (err.line, err.col) == (1, 6)


def test_unknown_statement():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 3,3\nwall at 1,1")
    assert ei.value.found == "'wall'"
    assert ei.value.line == 2


def test_keywords_are_case_sensitive():
    with pytest.raises(MapSyntaxError):
        parse("GRID 3,3")


def test_truncated_statement():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 3,3\nrect at 0,0 width 1")
    assert ei.value.found == "end of line"
    assert ei.value.expected == "'height'"


def test_trailing_tokens():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 3,3 4")
    assert ei.value.expected == "end of line"


def test_decimal_where_integer_expected():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 3,3\nrect at 1.5,0 width 1 height 1")
    assert ei.value.expected == "integer"


def test_bad_side():
    with pytest.raises(MapSyntaxError) as ei:
        parse("grid 3,3\nline along middle from 0,0 length 1")
    assert "side" in ei.value.expected


def test_missing_grid_before_statement():
    with pytest.raises(MissingGridError) as ei:
        parse("rect at 0,0 width 1 height 1\ngrid 3,3")
    assert ei.value.line == 1


def test_missing_grid_in_empty_source():
    with pytest.raises(MissingGridError) as ei:
        parse("\n# nothing here\n")
    assert ei.value.line is None


def test_duplicate_grid():
    with pytest.raises(DuplicateGridError) as ei:
        parse("grid 3,3\ngrid 4,4")
    assert ei.value.line == 2


def test_zero_sized_grid():
    with pytest.raises(RangeError):
        parse("grid 0,3")


def test_blank_lines_and_comments_keep_line_numbers():
    doc = parse("\n\ngrid 3,3\n\n# walls\nrect at 0,0 width 1 height 1  # corner\n")
    assert doc.grid.line == 3
    assert doc.commands[0].line == 6


def test_commands_keep_document_order():
    src = "\n".join([
        "grid 4,4",
        "entity circle within 0,0",
        "rect at 0,0 width 2 height 2",
        "line along top from 0,0 length 1",
        "xor rect at 1,1 width 1 height 1",
    ])
    doc = parse(src)
    assert [type(c).__name__ for c in doc.commands] == [
        "CircleWithinCell", "ShapeOp", "LineSegment", "ShapeOp",
    ]
