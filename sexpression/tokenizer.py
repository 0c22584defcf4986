"""Lazy, single-pass tokenizer for S-expression source."""

from typing import Iterator, Optional

from .cursor import Cursor
from .errors import InvalidEscape, Position, UnterminatedString
from .literals import ESCAPES
from .token import Token, TokenKind
from .types import DEFAULT_COMMENT, DELIMITERS, WHITESPACE

DIGITS = frozenset("0123456789")
SIGNS = frozenset("+-")
# One-character operators that skip the general symbol scan.
OPERATORS = frozenset("+-*/<>=!")
BOUNDARIES = WHITESPACE | DELIMITERS

_STRING_STOP = frozenset('"\\\n')


class Tokenizer:
    """Iterator over the tokens of `source`.

    Produces tokens on demand and ends with a single END_OF_INPUT token.
    Errors in string literals are raised from `__next__` when the offending
    token is reached.
    """

    def __init__(self, source: str, comment: str = DEFAULT_COMMENT, fast_paths: bool = True):
        self.source = source
        self.comment = comment
        self.fast_paths = fast_paths
        self._cursor = Cursor(source)
        self._done = False
        # A comment marker ends a symbol or number run.
        self._boundaries = BOUNDARIES | {comment}

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        tok = self.next_token()
        if tok.kind is TokenKind.END_OF_INPUT:
            self._done = True
        return tok

    def next_token(self) -> Token:
        cur = self._cursor
        self._skip_blank()
        line, column = cur.line, cur.column
        start = cur.offset
        ch = cur.peek()
        if ch is None:
            return Token(TokenKind.END_OF_INPUT, start, start, line, column)
        if ch == "(":
            cur.advance()
            return Token(TokenKind.LEFT_PAREN, start, start + 1, line, column)
        if ch == ")":
            cur.advance()
            return Token(TokenKind.RIGHT_PAREN, start, start + 1, line, column)
        if ch == '"':
            return self._string(start, line, column)

        if self.fast_paths:
            if ch in DIGITS or (ch in SIGNS and cur.peek_next() in DIGITS):
                end = cur.skip_run(self._boundaries)
                return Token(TokenKind.NUMBER, start, end, line, column)
            if ch in OPERATORS:
                nxt = cur.peek_next()
                if nxt is None or nxt in self._boundaries:
                    cur.advance()
                    return Token(TokenKind.SYMBOL, start, start + 1, line, column)
        return self._run(start, line, column)

    def peek_start(self) -> Optional[Position]:
        """Skip blanks and comments and return where the next lexeme starts.

        Returns None at end of input. The lexeme itself is not scanned.
        """
        self._skip_blank()
        if self._cursor.at_end:
            return None
        return self._cursor.position()

    def _skip_blank(self):
        cur = self._cursor
        while True:
            ch = cur.peek()
            if ch is None:
                return
            if ch in WHITESPACE:
                cur.advance()
            elif ch == self.comment:
                while ch is not None and ch != "\n":
                    cur.advance()
                    ch = cur.peek()
            else:
                return

    def _run(self, start: int, line: int, column: int) -> Token:
        # General path: a maximal run of constituent characters, classified
        # by its leading characters.
        src = self.source
        end = self._cursor.skip_run(self._boundaries)
        first = src[start]
        if first in DIGITS or (
            first in SIGNS and end - start > 1 and src[start + 1] in DIGITS
        ):
            kind = TokenKind.NUMBER
        else:
            kind = TokenKind.SYMBOL
        return Token(kind, start, end, line, column)

    def _string(self, start: int, line: int, column: int) -> Token:
        cur = self._cursor
        opened = cur.position()
        cur.advance()
        escaped = False
        while True:
            cur.skip_run(_STRING_STOP)
            ch = cur.peek()
            if ch is None:
                raise UnterminatedString(opened, self.source[start:start + 16])
            if ch == '"':
                cur.advance()
                return Token(TokenKind.STRING, start, cur.offset, line, column, escaped)
            if ch == "\\":
                at = cur.position()
                cur.advance()
                code = cur.peek()
                if code is None:
                    raise UnterminatedString(opened, self.source[start:start + 16])
                if code not in ESCAPES:
                    raise InvalidEscape(at, "\\" + code)
                cur.advance()
                escaped = True
            else:
                cur.advance()


def tokenize(source: str, comment: str = DEFAULT_COMMENT, fast_paths: bool = True) -> Iterator[Token]:
    """Yield the tokens of `source`, END_OF_INPUT last."""
    return Tokenizer(source, comment, fast_paths)
