"""Canonical printer for Expression trees."""

import math

from .types import Boolean, List, Null, Number, OwnedSymbol, String, Symbol

_STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
})


_CLOSE = object()
_SPACE = object()


def _number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isinf(value):
        return "1e999" if value > 0 else "-1e999"
    if math.isnan(value):
        raise ValueError("NaN has no S-expression representation")
    # repr always includes a '.' or an exponent, so the text reads back as float.
    return repr(value)


def dumps(expr) -> str:
    """Render `expr` so that reading the result gives an equal tree."""
    out = []
    _write(expr, out)
    return "".join(out)


def _write(expr, out: list):
    # Explicit stack so output depth is not limited by the Python call stack.
    stack = [expr]
    while stack:
        node = stack.pop()
        if node is _SPACE:
            out.append(" ")
        elif node is _CLOSE:
            out.append(")")
        elif isinstance(node, List):
            out.append("(")
            stack.append(_CLOSE)
            for i in range(len(node.items) - 1, -1, -1):
                stack.append(node.items[i])
                if i:
                    stack.append(_SPACE)
        elif isinstance(node, Symbol):
            out.append(node.text)
        elif isinstance(node, Number):
            out.append(_number(node.value))
        elif isinstance(node, String):
            out.append('"' + node.text.translate(_STRING_ESCAPES) + '"')
        elif isinstance(node, Boolean):
            out.append("true" if node.value else "false")
        elif isinstance(node, Null):
            out.append("null")
        elif isinstance(node, OwnedSymbol):
            out.append(str(node))
        else:
            raise TypeError(f"not an expression: {node!r}")
