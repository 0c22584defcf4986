"""CLI: python -m sexpression [file ...]

Reads every top-level expression from each file (stdin when none is given)
and prints them in canonical form, one per line.
"""

import logging
import os
import sys
from pathlib import Path

from .errors import ParseError
from .printer import dumps
from .reader import read_all

log = logging.getLogger(__name__)


def _log_level() -> int:
    name = os.getenv("LOGLEVEL", "").upper()
    level = getattr(logging, name, None) if name else None
    if isinstance(level, int):
        return level
    return logging.WARNING


def main(argv=None) -> int:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    if any(a in ("-h", "--help") for a in args):
        print("Usage: python -m sexpression [file ...]", file=sys.stderr)
        return 2

    sources = [(a, Path(a)) for a in args] or [("<stdin>", None)]
    for name, path in sources:
        try:
            text = sys.stdin.read() if path is None else path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"{name}: {e}", file=sys.stderr)
            return 2
        log.info("reading %s", name)
        try:
            exprs = read_all(text)
        except ParseError as e:
            detail = e.message if e.context is None else f"{e.message}: {e.context!r}"
            print(f"{name}:{e.line}:{e.column}: {detail}", file=sys.stderr)
            return 1
        for expr in exprs:
            print(dumps(expr))
    return 0


if __name__ == "__main__":
    sys.exit(main())
