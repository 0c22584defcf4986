from .reader import read, parse, read_all, iter_read
from .printer import dumps
from .types import (
    Symbol, Number, String, List, Boolean, Null, Span, Expression, ReaderConfig, OwnedSymbol,
)
from .errors import (
    ParseError, Position, UnexpectedEof, UnbalancedParens, TrailingInput,
    InvalidNumber, UnterminatedString, InvalidEscape, NestingTooDeep,
)

__all__ = [
    "read", "parse", "read_all", "iter_read", "dumps",
    "Symbol", "Number", "String", "List", "Boolean", "Null", "Span", "Expression",
    "ReaderConfig", "OwnedSymbol",
    "ParseError", "Position", "UnexpectedEof", "UnbalancedParens", "TrailingInput",
    "InvalidNumber", "UnterminatedString", "InvalidEscape", "NestingTooDeep",
]
