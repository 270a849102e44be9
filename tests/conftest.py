from __future__ import annotations

import sys
from pathlib import Path

# Allow importing the package when running plain `pytest` without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest

from minipy import Interpreter


@pytest.fixture
def run_interpreter():
    def _run(source: str, *, env=None, filename: str = "<test>", stdout=None):
        interpreter = Interpreter(stdout=stdout, environ={})
        result = interpreter.run(source, env=env, filename=filename)
        result.raise_for_exception()
        return result.globals

    return _run


@pytest.fixture
def run_result():
    def _run(source: str, *, env=None, filename: str = "<test>"):
        return Interpreter(environ={}).run(source, env=env, filename=filename)

    return _run
