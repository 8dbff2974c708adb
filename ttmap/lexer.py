# lexer.py
# Line-oriented tokeniser for the map DSL (one statement per line).

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import MapSyntaxError


_TOKEN_RE = re.compile(
    r"(?P<NUMBER>\d+(?:\.\d+)?)"
    r"|(?P<WORD>[A-Za-z]+)"
    r"|(?P<COMMA>,)"
    r"|(?P<SPACE>[ \t\r\f\v]+)"
    r"|(?P<COMMENT>#.*)",
    re.ASCII,
)


@dataclass(frozen=True)
class Token:
    kind: str        # NUMBER | WORD | COMMA
    text: str
    line: int
    col: int

    def describe(self) -> str:
        if self.kind == "NUMBER":
            return f"number {self.text}"
        if self.kind == "COMMA":
            return "','"
        return f"'{self.text}'"


def tokenize_line(text: str, line_no: int) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise MapSyntaxError(found=repr(text[pos]), expected="keyword, number or ','", line=line_no, col=pos + 1)
        kind = m.lastgroup
        if kind == "COMMENT":
            break
        if kind != "SPACE":
            tokens.append(Token(kind, m.group(), line_no, pos + 1))
        pos = m.end()
    return tokens


def tokenize(source: str) -> Iterator[Tuple[int, List[Token]]]:
    """Yield (line number, tokens) for every non-blank, non-comment line."""
    for line_no, text in enumerate(source.splitlines(), start=1):
        tokens = tokenize_line(text, line_no)
        if tokens:
            yield line_no, tokens
