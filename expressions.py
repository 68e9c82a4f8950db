# Numeric expression evaluation with SymPy.
#
# Accepts the display glyphs the quiz uses (× and ÷) next to the ASCII
# operators, so an order-of-operations prompt can be checked verbatim.
from __future__ import annotations

import math
import re
from tokenize import TokenError
from typing import Any, Optional

from sympy import nan, oo, preorder_traversal, zoo
from sympy.core.power import Pow
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

LEN_LIMIT = 100
INVALID_CHARS_MSG = (
    "Only numeric expressions using digits, spaces, + - * / × ÷ ^ . and parentheses are allowed."
)
NON_FINITE_MSG = "Expression is not finite (e.g., division by zero)."
TOO_COMPLEX_MSG = "Expression is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/×÷^().\s]{1,100}$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 200
_MAX_INT_DIGITS = 200
_MAX_EXPONENT_ABS = 2000


def validate_expr(s: Any) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Expression required."
    if len(s) > LEN_LIMIT:
        return f"Expression too long (> {LEN_LIMIT})."
    if _ALLOWED_RE.fullmatch(s) is None:
        return INVALID_CHARS_MSG
    return None


def normalize_glyphs(expr: str) -> str:
    return expr.replace("×", "*").replace("÷", "/")


def _assert_finite(val: Any) -> None:
    if getattr(val, "is_finite", None) is False:
        raise ValueError(NON_FINITE_MSG)
    if val in (oo, -oo, zoo, nan):
        raise ValueError(NON_FINITE_MSG)


def _assert_complexity(sym: Any) -> None:
    if isinstance(sym, (int, float)):
        if not math.isfinite(float(sym)):
            raise ValueError(NON_FINITE_MSG)
        return
    if getattr(sym, "is_Number", False):
        return

    if hasattr(sym, "count_ops") and sym.count_ops() > _MAX_OPS:
        raise ValueError(TOO_COMPLEX_MSG)

    for node in preorder_traversal(sym):
        if getattr(node, "is_Integer", False) and len(str(abs(int(node)))) > _MAX_INT_DIGITS:
            raise ValueError(TOO_COMPLEX_MSG)
        if isinstance(node, Pow) and getattr(node.exp, "is_number", False):
            exp = float(node.exp)
            if not math.isfinite(exp) or abs(exp) > _MAX_EXPONENT_ABS:
                raise ValueError(TOO_COMPLEX_MSG)


def evaluate(expr: str) -> float:
    """
    Evaluate `expr` under standard precedence: parentheses, then × and ÷
    left to right, then + and - left to right.
    Raises ValueError on invalid, non-finite or oversized input.
    """
    err = validate_expr(expr)
    if err:
        raise ValueError(err)
    text = normalize_glyphs(expr)
    try:
        # size checks run on the unevaluated tree so 9^9^9 is never computed
        _assert_complexity(parse_expr(text, transformations=TRANSFORMS, evaluate=False))
        sym = parse_expr(text, transformations=TRANSFORMS, evaluate=True)
    except (SyntaxError, TypeError, TokenError) as e:
        raise ValueError(INVALID_CHARS_MSG) from e
    _assert_finite(sym)
    val = float(sym.evalf())
    if not math.isfinite(val):
        raise ValueError(NON_FINITE_MSG)
    return val
