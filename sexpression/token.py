"""Token kinds and the lightweight token view handed from tokenizer to parser."""

from enum import Enum

from .errors import Position


class TokenKind(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    SYMBOL = "symbol"
    NUMBER = "number"
    STRING = "string"
    END_OF_INPUT = "end of input"


class Token:
    """A span of the source plus the line/column it starts at.

    Holds no copy of the text. For STRING tokens the span includes both
    quotes and `escaped` records whether a backslash occurred inside.
    """

    __slots__ = ("kind", "start", "end", "line", "column", "escaped")

    def __init__(self, kind: TokenKind, start: int, end: int, line: int, column: int,
                 escaped: bool = False):
        self.kind = kind
        self.start = start
        self.end = end
        self.line = line
        self.column = column
        self.escaped = escaped

    def text(self, source: str) -> str:
        return source[self.start:self.end]

    def position(self) -> Position:
        return Position(self.start, self.line, self.column)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.start, self.end, self.line, self.column, self.escaped) == (
            other.kind, other.start, other.end, other.line, other.column, other.escaped)

    def __hash__(self):
        return hash((self.kind, self.start, self.end, self.line, self.column, self.escaped))

    def __repr__(self):
        return (f"Token({self.kind.name}, {self.start}, {self.end}, "
                f"line={self.line}, column={self.column})")
