from __future__ import annotations

from typing import Any

MISSING = object()


class ExitPoint:
    """A target that `return`, `break` or `continue` transfers control to."""

    __slots__ = ("label",)

    def __init__(self, label: str):
        self.label = label

    def __repr__(self) -> str:
        return f"<ExitPoint {self.label} at {id(self):#x}>"


class ControlFlowSignal(BaseException):
    """Internal non-user exceptions used for control flow (return/break/continue)."""

    def __init__(self, target: ExitPoint):
        super().__init__(target)
        self.target = target


class ReturnSignal(ControlFlowSignal):
    def __init__(self, target: ExitPoint, value: Any):
        super().__init__(target)
        self.value = value


class BreakSignal(ControlFlowSignal):
    pass


class ContinueSignal(ControlFlowSignal):
    pass


class FlowControl:
    """The (break, continue) exit points visible inside a loop body."""

    __slots__ = ("loop_break", "loop_continue")

    def __init__(self, loop_break: ExitPoint, loop_continue: ExitPoint):
        self.loop_break = loop_break
        self.loop_continue = loop_continue
