from __future__ import annotations


class EvaluationError(Exception):
    """Base class for every error that aborts an evaluation run."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def describe(self) -> str:
        return f"{self.kind}: {self.message}" if self.message else self.kind


class ParseError(EvaluationError):
    pass


class UnknownSymbol(EvaluationError):
    pass


class UnknownAttribute(EvaluationError):
    pass


class UnknownMethod(EvaluationError):
    pass


class InvalidReceiver(EvaluationError):
    pass


class NotCallable(EvaluationError):
    pass


class UnsupportedOperand(EvaluationError):
    pass


class ArithmeticFailure(EvaluationError):
    pass


class AssertionFailed(EvaluationError):
    pass


class Unimplemented(EvaluationError):
    pass


class InvalidTarget(EvaluationError):
    pass


class RecursionDepthExceeded(EvaluationError):
    pass


class InternalInvariantViolation(EvaluationError):
    """An evaluator bug; never reachable from well-formed programs."""
