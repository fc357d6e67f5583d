"""Flow expression -> C++ expression text.

There is no expression parser: a handful of whole-expression forms are
recognised in priority order and everything else passes through after the
keyword operators are rewritten. The only binary operator with structure
is ``^``, which splits on its first occurrence.
"""

from __future__ import annotations

import re

from .includes import IncludeSet

# Golden ratio as written for the 'phi' keyword (17 significant digits).
PHI_LITERAL = "1.6180339887498948"

# Numerals accepted as 64-bit floats: sign, digits/fraction/exponent, inf, nan
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)

# Applied in order over the whole expression text
_KEYWORD_OPERATORS = (
    (" and ", " && "),
    (" or ", " || "),
    ("not ", "!"),
)


def is_float_literal(text: str) -> bool:
    return _FLOAT_RE.fullmatch(text) is not None


def translate_expr(expr: str, includes: IncludeSet) -> str:
    """Render one Flow expression as C++, recording any headers it needs."""
    expr = expr.strip()

    if expr == "phi":
        return PHI_LITERAL

    if expr.startswith('"') and expr.endswith('"'):
        includes.string = True
        return f"std::string({expr})"

    if expr in ("true", "false"):
        return expr

    if is_float_literal(expr):
        return expr

    if " ^ " in expr:
        includes.cmath = True
        base, exponent = expr.split(" ^ ", 1)
        left = translate_expr(base, includes)
        right = translate_expr(exponent, includes)
        return f"std::pow({left}, {right})"

    for flow_op, cpp_op in _KEYWORD_OPERATORS:
        expr = expr.replace(flow_op, cpp_op)
    return expr
