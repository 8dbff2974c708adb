# parser.py
# DSL text -> MapDocument (grid declaration + ordered commands).

from __future__ import annotations
import logging
from typing import List, Optional

from .commands import (
    BooleanOp,
    CellRect,
    CircleAtPoint,
    CircleWithinCell,
    Command,
    GridSpec,
    LineSegment,
    MapDocument,
    ShapeOp,
    Side,
    SquareWithinCell,
)
from .errors import DuplicateGridError, MapSyntaxError, MissingGridError, RangeError
from .lexer import Token, tokenize

log = logging.getLogger(__name__)

END_OF_LINE = "end of line"
STATEMENT_KEYWORDS = ("grid", "rect", "xor", "line", "entity")


class _StatementParser:
    """Cursor over the tokens of a single source line."""

    def __init__(self, tokens: List[Token], line_no: int):
        self.tokens = tokens
        self.line_no = line_no
        self.i = 0

    # --- cursor -------------------------------------------------------------

    def peek(self) -> Optional[Token]:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def _end_col(self) -> int:
        last = self.tokens[-1]
        return last.col + len(last.text)

    def fail(self, expected: str) -> MapSyntaxError:
        tok = self.peek()
        if tok is None:
            return MapSyntaxError(END_OF_LINE, expected, self.line_no, self._end_col())
        return MapSyntaxError(tok.describe(), expected, tok.line, tok.col)

    def consume(self, expected: str) -> Token:
        tok = self.peek()
        if tok is None:
            raise self.fail(expected)
        self.i += 1
        return tok

    def next_is(self, word: str) -> bool:
        tok = self.peek()
        return tok is not None and tok.kind == "WORD" and tok.text == word

    def accept(self, word: str) -> Token:
        if not self.next_is(word):
            raise self.fail(f"'{word}'")
        return self.consume(f"'{word}'")

    def accept_one_of(self, words, expected: str) -> Token:
        tok = self.peek()
        if tok is None or tok.kind != "WORD" or tok.text not in words:
            raise self.fail(expected)
        return self.consume(expected)

    def accept_int(self) -> int:
        tok = self.peek()
        if tok is None or tok.kind != "NUMBER" or "." in tok.text:
            raise self.fail("integer")
        self.i += 1
        return int(tok.text)

    def accept_number(self) -> float:
        tok = self.peek()
        if tok is None or tok.kind != "NUMBER":
            raise self.fail("number")
        self.i += 1
        return float(tok.text)

    def accept_comma(self) -> None:
        tok = self.peek()
        if tok is None or tok.kind != "COMMA":
            raise self.fail("','")
        self.i += 1

    def expect_end(self) -> None:
        if self.peek() is not None:
            raise self.fail(END_OF_LINE)

    def parse_pair(self):
        a = self.accept_int()
        self.accept_comma()
        b = self.accept_int()
        return a, b

    # --- statements ---------------------------------------------------------

    def parse_grid(self) -> GridSpec:
        head = self.accept("grid")
        width, height = self.parse_pair()
        self.expect_end()
        if width <= 0 or height <= 0:
            raise RangeError(f"grid {width},{height}", "width and height must be positive", head.line, head.col)
        return GridSpec(width, height, head.line, head.col)

    def parse_statement(self) -> Command:
        head = self.peek()
        if self.next_is("rect"):
            cmd = self.parse_rect(BooleanOp.UNION, head)
        elif self.next_is("xor"):
            self.accept("xor")
            cmd = self.parse_rect(BooleanOp.XOR, head)
        elif self.next_is("line"):
            cmd = self.parse_line(head)
        elif self.next_is("entity"):
            cmd = self.parse_entity(head)
        else:
            raise self.fail("statement ('grid', 'rect', 'xor', 'line' or 'entity')")
        self.expect_end()
        return cmd

    def parse_rect(self, op: BooleanOp, head: Token) -> ShapeOp:
        self.accept("rect")
        self.accept("at")
        x, y = self.parse_pair()
        self.accept("width")
        w = self.accept_int()
        self.accept("height")
        h = self.accept_int()
        return ShapeOp(op, CellRect(x, y, w, h), head.line, head.col)

    def parse_line(self, head: Token) -> LineSegment:
        self.accept("line")
        self.accept("along")
        side = Side(self.accept_one_of({s.value for s in Side}, "side ('top', 'bottom', 'left' or 'right')").text)
        self.accept("from")
        x, y = self.parse_pair()
        self.accept("length")
        length = self.accept_int()
        return LineSegment(side, x, y, length, head.line, head.col)

    def parse_entity(self, head: Token):
        self.accept("entity")
        shape = self.accept_one_of({"circle", "square"}, "shape ('circle' or 'square')").text
        if shape == "square":
            self.accept("within")
            x, y = self.parse_pair()
            return SquareWithinCell(x, y, head.line, head.col)
        placement = self.accept_one_of({"within", "at"}, "position ('within' or 'at')").text
        x, y = self.parse_pair()
        if placement == "within":
            return CircleWithinCell(x, y, head.line, head.col)
        self.accept("radius")
        radius = self.accept_number()
        return CircleAtPoint(x, y, radius, head.line, head.col)


def parse(source: str) -> MapDocument:
    """
    Parse map source into a MapDocument.
    The grid declaration must come first and only once; everything else is
    kept in document order.
    """
    grid: Optional[GridSpec] = None
    commands: List[Command] = []
    for line_no, tokens in tokenize(source):
        p = _StatementParser(tokens, line_no)
        head = tokens[0]
        if p.next_is("grid"):
            if grid is not None:
                raise DuplicateGridError(line_no, head.col)
            grid = p.parse_grid()
            continue
        cmd = p.parse_statement()
        if grid is None:
            raise MissingGridError(line_no, head.col)
        commands.append(cmd)
    if grid is None:
        raise MissingGridError()
    log.debug("parsed grid %dx%d with %d commands", grid.width, grid.height, len(commands))
    return MapDocument(grid, tuple(commands))
