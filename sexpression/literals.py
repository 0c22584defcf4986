"""Atom classification: numeric conversion and string escape decoding."""

import re

from .errors import InvalidNumber, Position
from .token import Token, TokenKind
from .types import Boolean, Null, Number, ReaderConfig, Span, String, Symbol

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
# Longest digit string that can still fit in a signed 64-bit integer.
_INT64_DIGITS = 19

_NUMBER_RE = re.compile(
    r"(?P<int>[+-]?[0-9]+)(?P<frac>\.[0-9]+)?(?P<exp>[eE][+-]?[0-9]+)?"
)

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}

KEYWORDS = {
    "true": lambda span: Boolean(True, span),
    "false": lambda span: Boolean(False, span),
    "null": lambda span: Null(span),
}


def parse_number(lexeme: str, position: Position):
    """Convert a number lexeme to an int or float.

    Integers outside the signed 64-bit range come back as floats.
    """
    m = _NUMBER_RE.fullmatch(lexeme)
    if m is None:
        raise InvalidNumber(position, lexeme, position.offset + len(lexeme))
    if m.group("frac") is None and m.group("exp") is None:
        digits = len(lexeme) - (lexeme[0] in "+-")
        if digits <= _INT64_DIGITS:
            value = int(lexeme)
            if INT64_MIN <= value <= INT64_MAX:
                return value
    return float(lexeme)


def decode_string(raw: str) -> str:
    """Decode the body of a string literal the tokenizer already validated."""
    out = []
    start = 0
    i = raw.find("\\")
    while i != -1:
        out.append(raw[start:i])
        out.append(ESCAPES[raw[i + 1]])
        start = i + 2
        i = raw.find("\\", start)
    out.append(raw[start:])
    return "".join(out)


def classify_atom(token: Token, source: str, config: ReaderConfig):
    span = Span(token.start, token.end)
    kind = token.kind
    if kind is TokenKind.NUMBER:
        return Number(parse_number(token.text(source), token.position()), span)
    if kind is TokenKind.STRING:
        body = source[token.start + 1:token.end - 1]
        if token.escaped:
            return String(decode_string(body), span, decoded=True)
        return String(body, span)
    text = token.text(source)
    if config.keywords:
        make = KEYWORDS.get(text)
        if make is not None:
            return make(span)
    make = config.symbol
    if make is Symbol:
        return Symbol(text, span)
    return make(text)
