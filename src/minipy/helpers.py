from __future__ import annotations

import ast
import logging
from typing import Any, Callable

from .attributes import get_attr, set_attr
from .common import MISSING, ExitPoint, ReturnSignal
from .errors import InvalidTarget, NotCallable, UnknownAttribute
from .scopes import CallFrame, Environment
from .values import Class, Function, Object, new_object, to_string

logger = logging.getLogger(__name__)


class HelperMixin:
    # ----------------------------
    # assignment targets
    # ----------------------------

    def _assign_target(self, target: ast.AST, value: Any, env: Environment) -> None:
        if isinstance(target, ast.Name):
            env.update(target.id, value)
            return
        if isinstance(target, ast.Attribute):
            receiver = self.eval_expr(target.value, env)
            set_attr(target.attr, value, receiver)
            return
        raise InvalidTarget(f"cannot assign to {ast.unparse(target)}")

    def _read_attr(self, name: str, receiver: Any) -> Any:
        value = get_attr(name, receiver)
        if value is MISSING:
            raise UnknownAttribute(f"No attribute {name}")
        return value

    def _resolve_augassign_target(
        self, target: ast.AST, env: Environment
    ) -> tuple[Any, Callable[[Any], None]]:
        if isinstance(target, ast.Name):

            def store(value: Any) -> None:
                env.update(target.id, value)

            return env.lookup(target.id), store

        if isinstance(target, ast.Attribute):
            receiver = self.eval_expr(target.value, env)

            def store(value: Any) -> None:
                set_attr(target.attr, value, receiver)

            return self._read_attr(target.attr, receiver), store

        raise InvalidTarget(f"cannot assign to {ast.unparse(target)}")

    # ----------------------------
    # call protocol
    # ----------------------------

    def _call_value(self, callee: Any, args: list[Any], env: Environment) -> Any:
        if type(callee) is Class:
            return self._construct(callee, args, env)
        if type(callee) is Function:
            return self._call_function(callee, args, env)
        raise NotCallable(f"Unable to call {to_string(callee)}")

    def _construct(self, cls: Class, args: list[Any], env: Environment) -> Object:
        obj = new_object(cls)
        # __init__ comes from the class's own map, not through method dispatch
        ctor = get_attr("__init__", cls)
        if ctor is not MISSING:
            self._call_value(ctor, [obj, *args], env)
        return obj

    def _call_function(self, func: Function, args: list[Any], env: Environment) -> Any:
        logger.debug("calling %s with %d argument(s)", func.name, len(args))
        # zip(): unmatched parameters stay unbound, surplus arguments are dropped
        frame = CallFrame(dict(zip(func.params, args)), env.globals)
        exit_point = ExitPoint(f"return from {func.name}")
        saved = env.enter_call(frame, exit_point)
        try:
            self.exec_block(func.body, env)
        except ReturnSignal as r:
            if r.target is not exit_point:
                raise
            return r.value
        finally:
            env.restore(saved)
        return None
