"""Top-level read API."""

import logging
from typing import Any, Iterator, Union

from .errors import ParseError
from .parser import Parser
from .types import Expression, resolve_config

log = logging.getLogger(__name__)


def _check_source(source: Any) -> str:
    if not isinstance(source, str):
        raise TypeError(f"source must be str, got {type(source).__name__}")
    return source


def parse(source: str, config: Any = None) -> Expression:
    """Parse exactly one expression from `source`.

    Raises:
        ParseError: the first failure found; see `sexpression.errors`.
    """
    parser = Parser(_check_source(source), resolve_config(config))
    log.debug("reading %d characters", len(source))
    expr = parser.parse_expression()
    parser.expect_end()
    return expr


def read(source: str, config: Any = None) -> Union[Expression, ParseError]:
    """Parse exactly one expression, returning the error instead of raising.

    Args:
        source: complete source text.
        config: a ReaderConfig, a dict with the same keys, or None.

    Returns:
        The Expression, or the ParseError that stopped the parse. Nothing
        else about the input is retained between calls.
    """
    try:
        return parse(source, config)
    except ParseError as e:
        log.debug("read failed: %s (%s)", e.kind, e)
        return e


def iter_read(source: str, config: Any = None) -> Iterator[Expression]:
    """Yield each top-level expression in `source` in order."""
    parser = Parser(_check_source(source), resolve_config(config))
    while not parser.at_end:
        yield parser.parse_expression()


def read_all(source: str, config: Any = None) -> list:
    """Parse every top-level expression in `source`.

    An empty or comment-only source gives an empty list. Raises the first
    ParseError found.
    """
    return list(iter_read(source, config))
