"""Read position over an immutable source string."""

from typing import Optional

from .errors import Position


class Cursor:
    __slots__ = ("source", "offset", "line", "column", "_length")

    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.line = 1
        self.column = 1
        self._length = len(source)

    @property
    def at_end(self) -> bool:
        return self.offset >= self._length

    def peek(self) -> Optional[str]:
        if self.offset < self._length:
            return self.source[self.offset]
        return None

    def peek_next(self) -> Optional[str]:
        """Character after the one `peek` returns, if any."""
        nxt = self.offset + 1
        if nxt < self._length:
            return self.source[nxt]
        return None

    def advance(self) -> Optional[str]:
        if self.offset >= self._length:
            return None
        ch = self.source[self.offset]
        self.offset += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_run(self, stop: frozenset) -> int:
        """Advance over the run of characters not in `stop`.

        `stop` must contain "\\n" so the line never changes inside the run.
        Returns the offset where the run ended.
        """
        src = self.source
        end = self.offset
        length = self._length
        while end < length and src[end] not in stop:
            end += 1
        self.column += end - self.offset
        self.offset = end
        return end

    def position(self) -> Position:
        return Position(self.offset, self.line, self.column)
