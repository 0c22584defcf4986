"""Typed parse failures. Every error carries the position where it was found."""

from typing import NamedTuple, Optional

from .types import Span


class Position(NamedTuple):
    offset: int
    line: int
    column: int


class ParseError(SyntaxError):
    """Base class for every failure the reader reports.

    Instances are created once, at the first point of failure, and handed
    back to the caller untouched.
    """

    kind = "parse-error"
    message = "parse error"

    def __init__(self, position: Position, context: Optional[str] = None,
                 end: Optional[int] = None):
        super().__init__(self.message)
        self.position = position
        self.context = context
        # Offset just past the offending lexeme, when it is known.
        self.end = end
        self.lineno = position.line

    def __reduce__(self):
        return type(self), (self.position, self.context, self.end)

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def span(self) -> Optional[Span]:
        if self.end is None:
            return None
        return Span(self.position.offset, self.end)

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __str__(self) -> str:
        text = f"{self.message} at line {self.line}, column {self.column}"
        if self.context is not None:
            text += f": {self.context!r}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.position!r}, {self.context!r})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.position, self.context, self.end) == (other.position, other.context, other.end)

    def __hash__(self):
        return hash((type(self), self.position, self.context, self.end))


class UnexpectedEof(ParseError):
    kind = "unexpected-eof"
    message = "unexpected end of input"


class UnbalancedParens(ParseError):
    kind = "unbalanced-parens"
    message = "unbalanced parentheses"


class TrailingInput(ParseError):
    kind = "trailing-input"
    message = "unexpected input after expression"


class InvalidNumber(ParseError):
    kind = "invalid-number"
    message = "invalid number"


class UnterminatedString(ParseError):
    kind = "unterminated-string"
    message = "unterminated string"


class InvalidEscape(ParseError):
    kind = "invalid-escape"
    message = "invalid escape sequence"


class NestingTooDeep(ParseError):
    kind = "nesting-too-deep"
    message = "maximum nesting depth exceeded"
