from __future__ import annotations

import ast

from .errors import ParseError


class _ExitPointChecker(ast.NodeVisitor):
    """
    Rejects `break`/`continue` outside a loop and `return` outside a function.

    Function and class bodies start a fresh context: a loop around a `def`
    does not make `break` valid inside it, and a class body inside a
    function is not itself a function body.
    """

    def __init__(self, filename: str):
        self.filename = filename
        self.in_loop = False
        self.in_function = False

    def _fail(self, message: str, node: ast.AST) -> None:
        lineno = getattr(node, "lineno", "?")
        raise ParseError(f"{message} ({self.filename}, line {lineno})")

    def _visit_body(self, stmts: list[ast.stmt], *, in_loop: bool, in_function: bool) -> None:
        saved = (self.in_loop, self.in_function)
        self.in_loop, self.in_function = in_loop, in_function
        try:
            for stmt in stmts:
                self.visit(stmt)
        finally:
            self.in_loop, self.in_function = saved

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_body(node.body, in_loop=False, in_function=True)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_body(node.body, in_loop=False, in_function=True)

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._visit_body(node.body, in_loop=False, in_function=False)

    def visit_While(self, node: ast.While) -> None:
        self.visit(node.test)
        self._visit_body(node.body, in_loop=True, in_function=self.in_function)
        # `else` runs inside the loop's flow-control context
        self._visit_body(node.orelse, in_loop=True, in_function=self.in_function)

    def visit_For(self, node: ast.For) -> None:
        # `for` is not evaluated; its body is still checked so that errors
        # surface as parse errors rather than at runtime.
        self._visit_body(node.body, in_loop=True, in_function=self.in_function)
        self._visit_body(node.orelse, in_loop=self.in_loop, in_function=self.in_function)

    def visit_Break(self, node: ast.Break) -> None:
        if not self.in_loop:
            self._fail("'break' outside loop", node)

    def visit_Continue(self, node: ast.Continue) -> None:
        if not self.in_loop:
            self._fail("'continue' not properly in loop", node)

    def visit_Return(self, node: ast.Return) -> None:
        if not self.in_function:
            self._fail("'return' outside function", node)
        self.generic_visit(node)


class ModuleCode:
    """
    Holds:
      - the source text and filename
      - the parsed AST, checked for misplaced exit statements
    """

    def __init__(self, source: str, filename: str = "<minipy>"):
        self.source = source
        self.filename = filename
        try:
            self.tree = ast.parse(source, filename=filename, mode="exec")
        except SyntaxError as exc:
            raise ParseError(f"{exc.msg} ({filename}, line {exc.lineno})") from exc
        _ExitPointChecker(filename).visit(self.tree)
