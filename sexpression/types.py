from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, NamedTuple, Optional, Union

# Expression node types: Symbol, Number, String, List, plus Boolean/Null when
# keyword literals are enabled. Spans are carried for diagnostics only and
# never take part in equality.

DEFAULT_MAX_DEPTH = 1024
DEFAULT_COMMENT = ";"

# The characters str.isspace() accepts.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
DELIMITERS = frozenset('()"')


class Span(NamedTuple):
    start: int
    end: int


@dataclass(frozen=True)
class Symbol:
    text: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, eq=False)
class Number:
    value: Union[int, float]
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self):
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class String:
    text: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)
    # True when escape decoding built new text rather than slicing the source.
    decoded: bool = field(default=False, compare=False, repr=False)


@dataclass(frozen=True, eq=False, repr=False)
class List:
    items: tuple = ()
    span: Optional[Span] = field(default=None, repr=False)

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    # Equality, hashing and repr walk nested lists with an explicit stack so
    # any tree the reader accepts can be compared and printed.

    def __eq__(self, other):
        if not isinstance(other, List):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if len(a.items) != len(b.items):
                return False
            for x, y in zip(a.items, b.items):
                if isinstance(x, List) and isinstance(y, List):
                    pending.append((x, y))
                elif x != y:
                    return False
        return True

    def __hash__(self):
        return hash(tuple(_walk(self)))

    def __repr__(self):
        out = []
        for node in _walk(self):
            if node is _OPEN:
                out.append("List([")
            elif node is _CLOSE:
                out.append("])")
            elif node is _SEP:
                out.append(", ")
            else:
                out.append(repr(node))
        return "".join(out)


_OPEN = object()
_CLOSE = object()
_SEP = object()


def _walk(root):
    """Yield atoms and open/separator/close markers of `root` in order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, List):
            yield _OPEN
            stack.append(_CLOSE)
            for i in range(len(node.items) - 1, -1, -1):
                stack.append(node.items[i])
                if i:
                    stack.append(_SEP)
        else:
            yield node


@dataclass(frozen=True)
class Boolean:
    value: bool
    span: Optional[Span] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Null:
    span: Optional[Span] = field(default=None, compare=False, repr=False)


class OwnedSymbol(ABC):
    """Base for caller-defined symbol types.

    Pass `from_text` as `ReaderConfig.symbol` to read symbols into the
    subclass; `__str__` gives the text the printer writes back.
    """

    @classmethod
    @abstractmethod
    def from_text(cls, text: str) -> "OwnedSymbol":
        ...

    @abstractmethod
    def __str__(self) -> str:
        ...


Expression = Union[Symbol, Number, String, List, Boolean, Null]


@dataclass(frozen=True)
class ReaderConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    comment: str = DEFAULT_COMMENT
    # Read `true`, `false` and `null` as Boolean/Null instead of symbols.
    keywords: bool = False
    fast_paths: bool = True
    # Builds the node for a symbol from its text.
    symbol: Callable[[str], Any] = Symbol

    def __post_init__(self):
        if not callable(self.symbol):
            raise TypeError(f"symbol must be callable, got {self.symbol!r}")
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")
        if len(self.comment) != 1:
            raise ValueError(f"comment marker must be one character, got {self.comment!r}")
        if self.comment in WHITESPACE or self.comment in DELIMITERS:
            raise ValueError(f"comment marker cannot be a token boundary: {self.comment!r}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ReaderConfig":
        known = {"max_depth", "comment", "keywords", "fast_paths", "symbol"}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"unknown reader options: {', '.join(sorted(unknown))}")
        return cls(**values)


DEFAULT_CONFIG = ReaderConfig()


def resolve_config(config: Any) -> ReaderConfig:
    """Accept a ReaderConfig, a plain dict of the same keys, or None."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, ReaderConfig):
        return config
    if isinstance(config, Mapping):
        return ReaderConfig.from_mapping(config)
    raise TypeError(f"config must be a ReaderConfig or a mapping, got {type(config).__name__}")
