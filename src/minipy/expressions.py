from __future__ import annotations

import ast
from typing import Any

from .attributes import get_class_attr
from .common import MISSING
from .errors import Unimplemented, UnknownMethod
from .operators import apply_binop, apply_compare, apply_unary
from .scopes import Environment
from .values import is_truthy, to_string

_CONSTANT_TYPES = (type(None), bool, int, float, complex, str)


class ExpressionMixin:
    def eval_Constant(self, node: ast.Constant, env: Environment) -> Any:
        if type(node.value) not in _CONSTANT_TYPES:
            raise Unimplemented(f"Constant not supported: {ast.unparse(node)}")
        return node.value

    def eval_Name(self, node: ast.Name, env: Environment) -> Any:
        if isinstance(node.ctx, ast.Load):
            return env.lookup(node.id)
        raise Unimplemented("Name ctx other than Load not supported here")

    def eval_Tuple(self, node: ast.Tuple, env: Environment) -> tuple:
        return tuple(self.eval_expr(elt, env) for elt in node.elts)

    def eval_Attribute(self, node: ast.Attribute, env: Environment) -> Any:
        receiver = self.eval_expr(node.value, env)
        return self._read_attr(node.attr, receiver)

    def eval_UnaryOp(self, node: ast.UnaryOp, env: Environment) -> Any:
        return apply_unary(node.op, self.eval_expr(node.operand, env))

    def eval_BinOp(self, node: ast.BinOp, env: Environment) -> Any:
        left = self.eval_expr(node.left, env)
        right = self.eval_expr(node.right, env)
        return apply_binop(node.op, left, right)

    def eval_BoolOp(self, node: ast.BoolOp, env: Environment) -> Any:
        stop_when = isinstance(node.op, ast.Or)
        res = None
        for v in node.values:
            res = self.eval_expr(v, env)
            if is_truthy(res) is stop_when:
                return res
        return res

    def eval_Compare(self, node: ast.Compare, env: Environment) -> bool:
        left = self.eval_expr(node.left, env)
        for op, comp in zip(node.ops, node.comparators):
            right = self.eval_expr(comp, env)
            if not apply_compare(op, left, right):
                return False
            left = right
        return True

    def eval_IfExp(self, node: ast.IfExp, env: Environment) -> Any:
        branch = node.body if is_truthy(self.eval_expr(node.test, env)) else node.orelse
        return self.eval_expr(branch, env)

    def eval_Call(self, node: ast.Call, env: Environment) -> Any:
        func = node.func
        if isinstance(func, ast.Name) and func.id == "print":
            return self._print(node, env)
        if node.keywords or any(isinstance(arg, ast.Starred) for arg in node.args):
            raise Unimplemented("keyword arguments and argument unpacking are not supported")

        if isinstance(func, ast.Attribute):
            receiver = self.eval_expr(func.value, env)
            args = [self.eval_expr(arg, env) for arg in node.args]
            method = get_class_attr(func.attr, receiver)
            if method is MISSING:
                raise UnknownMethod(f"Unknown method: {func.attr}")
            return self._call_value(method, [receiver, *args], env)

        callee = self.eval_expr(func, env)
        args = [self.eval_expr(arg, env) for arg in node.args]
        return self._call_value(callee, args, env)

    def _print(self, node: ast.Call, env: Environment) -> None:
        # Only the first argument is evaluated; the rest are ignored.
        text = to_string(self.eval_expr(node.args[0], env)) if node.args else ""
        print(text, file=self._output())
        return None
