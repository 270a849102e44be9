from __future__ import annotations

import ast
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional, TextIO

from .code import ModuleCode
from .common import ControlFlowSignal
from .errors import (
    EvaluationError,
    InternalInvariantViolation,
    RecursionDepthExceeded,
    Unimplemented,
)
from .scopes import Environment

logger = logging.getLogger(__name__)

TRACE_ENV_VAR = "TRACE"

# Each evaluated call nests roughly a dozen host frames.
RECURSION_LIMIT = 10_000


class RunResult:
    """Outcome of `InterpreterCore.run`: the global frame plus the error, if any."""

    def __init__(self, globals_dict: Dict[str, Any], exception: EvaluationError | None = None):
        self.globals = globals_dict
        self.exception = exception

    @property
    def ok(self) -> bool:
        return self.exception is None

    def raise_for_exception(self) -> None:
        if self.exception is not None:
            raise self.exception

    def __repr__(self) -> str:
        state = "ok" if self.ok else self.exception.describe()
        return f"<RunResult {state}>"


class InterpreterCore:
    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        trace_stream: Optional[TextIO] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        stdout:
          - where `print` writes; None -> sys.stdout at the time of the call
        trace_stream:
          - where statement traces go; None -> sys.stderr at the time of the call
        environ:
          - consulted before every statement for the TRACE flag; None -> os.environ
        """
        self.stdout = stdout
        self.trace_stream = trace_stream
        self.environ = os.environ if environ is None else environ

    def _output(self) -> TextIO:
        return sys.stdout if self.stdout is None else self.stdout

    def _trace_output(self) -> TextIO:
        return sys.stderr if self.trace_stream is None else self.trace_stream

    def tracing(self) -> bool:
        return TRACE_ENV_VAR in self.environ

    # ----- run -----

    def run(self, source: str, env: Optional[dict] = None, filename: str = "<minipy>") -> RunResult:
        """
        Parse and evaluate `source` with `env` as the global frame.

        Evaluation errors abort the run and are returned on the result rather
        than raised.
        """
        if env is None:
            env = {}
        elif not isinstance(env, dict):
            raise TypeError("env must be dict or None")

        logger.debug("evaluating %s", filename)
        try:
            code = ModuleCode(source, filename)
            self.exec_module(code.tree, env)
        except EvaluationError as exc:
            logger.debug("evaluation of %s aborted: %s", filename, exc.describe())
            return RunResult(env, exc)
        logger.debug("evaluation of %s finished", filename)
        return RunResult(env)

    # ----- dispatch -----

    def exec_module(self, node: ast.Module, globals_dict: Optional[dict] = None) -> Environment:
        env = Environment({} if globals_dict is None else globals_dict)
        saved_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(saved_limit, RECURSION_LIMIT))
        try:
            self.exec_block(node.body, env)
        except RecursionError:
            raise RecursionDepthExceeded("maximum recursion depth exceeded") from None
        except ControlFlowSignal as signal:
            raise InternalInvariantViolation(
                f"{type(signal).__name__} escaped to module level"
            ) from None
        finally:
            sys.setrecursionlimit(saved_limit)
        return env

    def exec_block(self, stmts: list[ast.stmt], env: Environment) -> None:
        for stmt in stmts:
            self.exec_stmt(stmt, env)

    def exec_stmt(self, node: ast.AST, env: Environment) -> None:
        if self.tracing():
            print(f"*** Evaluating: {ast.dump(node)}", file=self._trace_output())
        m = getattr(self, f"exec_{node.__class__.__name__}", None)
        if m is None:
            raise Unimplemented(f"Statement not supported: {node.__class__.__name__}")
        m(node, env)

    def eval_expr(self, node: ast.AST, env: Environment) -> Any:
        m = getattr(self, f"eval_{node.__class__.__name__}", None)
        if m is None:
            raise Unimplemented(f"Expression not supported: {node.__class__.__name__}")
        return m(node, env)
