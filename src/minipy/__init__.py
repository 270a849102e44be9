"""A tree-walking evaluator for a small, class-based Python subset."""

from .core import TRACE_ENV_VAR, RunResult
from .errors import (
    ArithmeticFailure,
    AssertionFailed,
    EvaluationError,
    InternalInvariantViolation,
    InvalidReceiver,
    InvalidTarget,
    NotCallable,
    ParseError,
    RecursionDepthExceeded,
    Unimplemented,
    UnknownAttribute,
    UnknownMethod,
    UnknownSymbol,
    UnsupportedOperand,
)
from .main import Interpreter
from .values import Class, Function, Object

__all__ = [
    "ArithmeticFailure",
    "AssertionFailed",
    "Class",
    "EvaluationError",
    "Function",
    "InternalInvariantViolation",
    "Interpreter",
    "InvalidReceiver",
    "InvalidTarget",
    "NotCallable",
    "Object",
    "ParseError",
    "RecursionDepthExceeded",
    "RunResult",
    "TRACE_ENV_VAR",
    "Unimplemented",
    "UnknownAttribute",
    "UnknownMethod",
    "UnknownSymbol",
    "UnsupportedOperand",
]
