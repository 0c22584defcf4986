"""Tree builder: assembles tokens into Expression trees.

Nested lists are tracked on an explicit stack rather than the Python call
stack, so nesting is bounded only by `ReaderConfig.max_depth`.
"""

from .errors import NestingTooDeep, TrailingInput, UnbalancedParens, UnexpectedEof
from .literals import classify_atom
from .token import Token, TokenKind
from .tokenizer import Tokenizer
from .types import DEFAULT_CONFIG, List, ReaderConfig, Span


class _OpenList:
    __slots__ = ("token", "items")

    def __init__(self, token: Token):
        self.token = token
        self.items = []


class Parser:
    def __init__(self, source: str, config: ReaderConfig = DEFAULT_CONFIG):
        self.source = source
        self.config = config
        self._tokens = Tokenizer(source, config.comment, config.fast_paths)
        self._lookahead = None

    def peek(self) -> Token:
        if self._lookahead is None:
            self._lookahead = self._tokens.next_token()
        return self._lookahead

    def next(self) -> Token:
        tok = self.peek()
        if tok.kind is not TokenKind.END_OF_INPUT:
            self._lookahead = None
        return tok

    @property
    def at_end(self) -> bool:
        return self.peek().kind is TokenKind.END_OF_INPUT

    def parse_expression(self):
        """Parse exactly one expression starting at the next token."""
        stack = []
        max_depth = self.config.max_depth
        source = self.source
        config = self.config
        while True:
            tok = self.next()
            kind = tok.kind
            if kind is TokenKind.LEFT_PAREN:
                if len(stack) >= max_depth:
                    raise NestingTooDeep(tok.position(), f"limit is {max_depth}")
                stack.append(_OpenList(tok))
                continue
            if kind is TokenKind.RIGHT_PAREN:
                if not stack:
                    raise UnbalancedParens(tok.position(), ")")
                opened = stack.pop()
                node = List(tuple(opened.items), Span(opened.token.start, tok.end))
            elif kind is TokenKind.END_OF_INPUT:
                if stack:
                    raise UnbalancedParens(stack[-1].token.position(), "(")
                raise UnexpectedEof(tok.position())
            else:
                node = classify_atom(tok, source, config)

            if not stack:
                return node
            stack[-1].items.append(node)

    def expect_end(self):
        """Fail with TrailingInput if anything but blanks and comments remain.

        The trailing lexeme is not tokenized, so a malformed string or number
        after the expression still reports as trailing input.
        """
        if self._lookahead is not None:
            if self._lookahead.kind is TokenKind.END_OF_INPUT:
                return
            start = self._lookahead.position()
        else:
            start = self._tokens.peek_start()
            if start is None:
                return
        rest = self.source[start.offset:start.offset + 32]
        raise TrailingInput(start, rest.split("\n", 1)[0])
