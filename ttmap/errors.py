# errors.py
# Compile error taxonomy; every failure in the core is one of these.

from __future__ import annotations
from typing import Optional


class CompileError(Exception):
    """Base error for anything that aborts a compile."""

    def __init__(self, message: str, line: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col

    def __str__(self) -> str:
        if self.line is None:
            return f"ERROR: {self.message}"
        return f"[{self.line},{self.col or 1}] ERROR: {self.message}"


class MapSyntaxError(CompileError):
    """Malformed or unrecognised statement."""

    def __init__(self, found: str, expected: str, line: int, col: int):
        super().__init__(f"expected {expected}, got {found}", line, col)
        self.found = found
        self.expected = expected


class MissingGridError(CompileError):
    """A statement appears before the grid declaration (or there is none)."""

    def __init__(self, line: Optional[int] = None, col: Optional[int] = None):
        super().__init__("no grid dimensions declared before this statement" if line else "no grid dimensions", line, col)


class DuplicateGridError(CompileError):
    """A second `grid` declaration."""

    def __init__(self, line: int, col: int = 1):
        super().__init__("grid dimensions declared more than once", line, col)


class RangeError(CompileError):
    """Out-of-bounds coordinate or non-positive dimension."""

    def __init__(self, command: str, reason: str, line: Optional[int] = None, col: Optional[int] = None):
        super().__init__(f"{command}: {reason}", line, col)
        self.command = command
        self.reason = reason
