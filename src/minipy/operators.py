"""Operator semantics over fully reduced values.

Dispatch is purely on the kinds of the operands; an `Int` meeting a `Float`
is promoted and the `Float` rules apply. Anything not covered falls through
to `UnsupportedOperand`.
"""

from __future__ import annotations

import ast
import math
import operator
from typing import Any

from .errors import ArithmeticFailure, UnsupportedOperand
from .values import BOOL, FLOAT, INT, STRING, kind_of, values_equal

_UNSUPPORTED = object()
_NUMERIC = (INT, FLOAT)

_SYMBOLS = {
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.FloorDiv: "//",
    ast.Mod: "%",
    ast.Pow: "**",
    ast.MatMult: "@",
    ast.BitAnd: "&",
    ast.BitOr: "|",
    ast.BitXor: "^",
    ast.LShift: "<<",
    ast.RShift: ">>",
    ast.Not: "not",
    ast.UAdd: "unary +",
    ast.USub: "unary -",
    ast.Invert: "~",
    ast.Eq: "==",
    ast.NotEq: "!=",
    ast.Lt: "<",
    ast.LtE: "<=",
    ast.Gt: ">",
    ast.GtE: ">=",
    ast.Is: "is",
    ast.IsNot: "is not",
    ast.In: "in",
    ast.NotIn: "not in",
}

_ORDERING = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
}


def op_symbol(op: ast.AST) -> str:
    return _SYMBOLS.get(type(op), type(op).__name__)


def _unsupported(op: ast.AST, *kinds: str) -> UnsupportedOperand:
    if len(kinds) == 1:
        return UnsupportedOperand(f"unsupported operand type for {op_symbol(op)}: '{kinds[0]}'")
    joined = " and ".join(f"'{kind}'" for kind in kinds)
    return UnsupportedOperand(f"unsupported operand type(s) for {op_symbol(op)}: {joined}")


# ----------------------------
# unary
# ----------------------------


def apply_unary(op: ast.unaryop, operand: Any) -> Any:
    kind = kind_of(operand)
    if isinstance(op, ast.Not):
        if kind == BOOL:
            return not operand
    elif isinstance(op, ast.UAdd):
        if kind in _NUMERIC:
            return operand
    elif isinstance(op, ast.USub):
        if kind in _NUMERIC:
            return -operand
    elif isinstance(op, ast.Invert):
        if kind == INT:
            return ~operand
    raise _unsupported(op, kind)


# ----------------------------
# binary
# ----------------------------


def _int_binop(op: ast.operator, left: int, right: int) -> Any:
    if isinstance(op, ast.Add):
        return left + right
    if isinstance(op, ast.Sub):
        return left - right
    if isinstance(op, ast.Mult):
        return left * right
    if isinstance(op, ast.Div):
        return float(left) / float(right)
    if isinstance(op, ast.Mod):
        return left % right
    if isinstance(op, ast.FloorDiv):
        # Goes through float on purpose; huge operands lose precision.
        return math.floor(float(left) / float(right))
    if isinstance(op, ast.Pow):
        if right < 0:
            raise ArithmeticFailure("integer power with a negative exponent")
        return left**right
    if isinstance(op, ast.BitAnd):
        return left & right
    if isinstance(op, ast.BitOr):
        return left | right
    if isinstance(op, ast.BitXor):
        return left ^ right
    if isinstance(op, (ast.LShift, ast.RShift)):
        if right < 0:
            raise ArithmeticFailure("negative shift count")
        return left << right if isinstance(op, ast.LShift) else left >> right
    return _UNSUPPORTED


def _float_binop(op: ast.operator, left: float, right: float) -> Any:
    result = _float_arith(op, left, right)
    if result is not _UNSUPPORTED and not math.isfinite(result):
        if math.isfinite(left) and math.isfinite(right):
            raise ArithmeticFailure(f"{op_symbol(op)}: float result out of range")
    return result


def _float_arith(op: ast.operator, left: float, right: float) -> Any:
    if isinstance(op, ast.Add):
        return left + right
    if isinstance(op, ast.Sub):
        return left - right
    if isinstance(op, ast.Mult):
        return left * right
    if isinstance(op, ast.Div):
        return left / right
    if isinstance(op, ast.Mod):
        return left % right
    if isinstance(op, ast.FloorDiv):
        return float(math.floor(left / right))
    if isinstance(op, ast.Pow):
        return math.pow(left, right)
    return _UNSUPPORTED


def _string_binop(op: ast.operator, left: Any, right: Any, left_kind: str, right_kind: str) -> Any:
    if isinstance(op, ast.Add) and left_kind == STRING and right_kind == STRING:
        return left + right
    if isinstance(op, ast.Mult):
        if left_kind == INT and right_kind == STRING:
            return right * max(left, 0)
        if left_kind == STRING and right_kind == INT:
            return left * max(right, 0)
    return _UNSUPPORTED


def apply_binop(op: ast.operator, left: Any, right: Any) -> Any:
    left_kind = kind_of(left)
    right_kind = kind_of(right)
    try:
        if left_kind == INT and right_kind == INT:
            result = _int_binop(op, left, right)
        elif left_kind in _NUMERIC and right_kind in _NUMERIC:
            result = _float_binop(op, float(left), float(right))
        else:
            result = _string_binop(op, left, right, left_kind, right_kind)
    except (ZeroDivisionError, OverflowError, ValueError) as exc:
        raise ArithmeticFailure(f"{op_symbol(op)}: {exc}") from None
    except MemoryError:
        raise ArithmeticFailure(f"{op_symbol(op)}: result too large") from None
    if result is _UNSUPPORTED:
        raise _unsupported(op, left_kind, right_kind)
    return result


# ----------------------------
# comparisons
# ----------------------------


def apply_compare(op: ast.cmpop, left: Any, right: Any) -> bool:
    left_kind = kind_of(left)
    right_kind = kind_of(right)
    compare = _ORDERING.get(type(op))
    if compare is not None and left_kind in _NUMERIC and right_kind in _NUMERIC:
        if left_kind == FLOAT or right_kind == FLOAT:
            try:
                left, right = float(left), float(right)
            except OverflowError as exc:
                raise ArithmeticFailure(f"{op_symbol(op)}: {exc}") from None
        return compare(left, right)
    if isinstance(op, ast.Eq):
        return values_equal(left, right)
    if isinstance(op, ast.NotEq):
        return not values_equal(left, right)
    raise _unsupported(op, left_kind, right_kind)
