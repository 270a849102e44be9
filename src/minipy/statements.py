from __future__ import annotations

import ast
import logging

from .common import BreakSignal, ContinueSignal, ExitPoint, FlowControl, ReturnSignal
from .errors import AssertionFailed, InternalInvariantViolation, Unimplemented
from .operators import apply_binop
from .scopes import Environment
from .values import Class, Function, is_truthy

logger = logging.getLogger(__name__)


class StatementMixin:
    def exec_Expr(self, node: ast.Expr, env: Environment) -> None:
        self.eval_expr(node.value, env)

    def exec_Pass(self, node: ast.Pass, env: Environment) -> None:
        return

    def exec_Assert(self, node: ast.Assert, env: Environment) -> None:
        # The message expression is never evaluated.
        if not is_truthy(self.eval_expr(node.test, env)):
            raise AssertionFailed("Assertion failed!")

    def exec_Assign(self, node: ast.Assign, env: Environment) -> None:
        val = self.eval_expr(node.value, env)
        for tgt in node.targets:
            self._assign_target(tgt, val, env)

    def exec_AugAssign(self, node: ast.AugAssign, env: Environment) -> None:
        old, store = self._resolve_augassign_target(node.target, env)
        rhs = self.eval_expr(node.value, env)
        store(apply_binop(node.op, old, rhs))

    def exec_If(self, node: ast.If, env: Environment) -> None:
        if is_truthy(self.eval_expr(node.test, env)):
            self.exec_block(node.body, env)
        else:
            self.exec_block(node.orelse, env)

    def exec_While(self, node: ast.While, env: Environment) -> None:
        loop_break = ExitPoint("break")
        outer_flow = env.flow
        try:
            while True:
                flow = FlowControl(loop_break, ExitPoint("continue"))
                env.flow = flow
                try:
                    if not is_truthy(self.eval_expr(node.test, env)):
                        self.exec_block(node.orelse, env)
                        return
                    self.exec_block(node.body, env)
                except ContinueSignal as signal:
                    if signal.target is not flow.loop_continue:
                        raise
                except BreakSignal as signal:
                    if signal.target is not loop_break:
                        raise
                    return
        finally:
            env.flow = outer_flow

    def exec_Break(self, node: ast.Break, env: Environment) -> None:
        if env.flow is None:
            raise InternalInvariantViolation("'break' outside loop")
        raise BreakSignal(env.flow.loop_break)

    def exec_Continue(self, node: ast.Continue, env: Environment) -> None:
        if env.flow is None:
            raise InternalInvariantViolation("'continue' outside loop")
        raise ContinueSignal(env.flow.loop_continue)

    def exec_Return(self, node: ast.Return, env: Environment) -> None:
        val = self.eval_expr(node.value, env) if node.value is not None else None
        raise ReturnSignal(env.return_target, val)

    def exec_Delete(self, node: ast.Delete, env: Environment) -> None:
        raise Unimplemented(f"Unimplemented: {ast.unparse(node)}")

    def exec_FunctionDef(self, node: ast.FunctionDef, env: Environment) -> None:
        args = node.args
        if args.vararg or args.kwarg or args.kwonlyargs or args.defaults:
            raise Unimplemented(
                f"def {node.name}: only plain positional parameters are supported"
            )
        if node.decorator_list:
            raise Unimplemented(f"def {node.name}: decorators are not supported")
        params = tuple(arg.arg for arg in [*args.posonlyargs, *args.args])
        env.update(node.name, Function(node.name, params, node.body))

    def exec_ClassDef(self, node: ast.ClassDef, env: Environment) -> None:
        # Base classes are accepted but never evaluated.
        if node.keywords or node.decorator_list:
            raise Unimplemented(
                f"class {node.name}: keywords and decorators are not supported"
            )
        env.push_frame()
        self.exec_block(node.body, env)
        attrs = env.pop_frame()
        logger.debug("created class %s with attributes %s", node.name, sorted(attrs))
        env.update(node.name, Class(node.name, attrs))
