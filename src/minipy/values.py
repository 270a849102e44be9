from __future__ import annotations

import ast
import math
from typing import Any, Dict

from .errors import InternalInvariantViolation

NONE = "None"
BOOL = "Bool"
INT = "Int"
FLOAT = "Float"
IMAGINARY = "Imaginary"
STRING = "String"
TUPLE = "Tuple"
FUNCTION = "Function"
CLASS = "Class"
OBJECT = "Object"


class Function:
    """A `def` statement's value. No environment is captured."""

    __slots__ = ("name", "params", "body")

    def __init__(self, name: str, params: tuple[str, ...], body: list[ast.stmt]):
        self.name = name
        self.params = tuple(params)
        self.body = body

    def __repr__(self) -> str:
        return f"<Function {self.name}({', '.join(self.params)})>"


class Class:
    __slots__ = ("name", "attrs")

    def __init__(self, name: str, attrs: Dict[str, Any]):
        self.name = name
        # shared by every reference to this class
        self.attrs = attrs

    def __repr__(self) -> str:
        return f"<Class {self.name}>"


class Object:
    __slots__ = ("cls", "attrs")

    def __init__(self, cls: Any, attrs: Dict[str, Any]):
        self.cls = cls
        self.attrs = attrs

    def __repr__(self) -> str:
        name = self.cls.name if type(self.cls) is Class else "?"
        return f"<Object of {name}>"


def new_object(cls: Class) -> Object:
    return Object(cls, {"__class__": cls})


_KINDS_BY_TYPE = {
    type(None): NONE,
    bool: BOOL,
    int: INT,
    float: FLOAT,
    complex: IMAGINARY,
    str: STRING,
    tuple: TUPLE,
    Function: FUNCTION,
    Class: CLASS,
    Object: OBJECT,
}


def kind_of(value: Any) -> str:
    # Exact type lookup: bool must not be mistaken for int.
    kind = _KINDS_BY_TYPE.get(type(value))
    if kind is None:
        raise InternalInvariantViolation(f"not an evaluator value: {type(value).__name__}")
    return kind


def is_truthy(value: Any) -> bool:
    """Only `0`, `False` and `None` are falsy; `0.0`, `""` and `()` are not."""
    kind = kind_of(value)
    if kind == INT:
        return value != 0
    if kind == BOOL:
        return value
    return kind != NONE


def class_of(obj: Object) -> Class:
    if type(obj.cls) is not Class:
        raise InternalInvariantViolation("object must be associated with a class")
    return obj.cls


def to_string(value: Any) -> str:
    kind = kind_of(value)
    if kind == NONE:
        return "None"
    if kind == BOOL:
        return "True" if value else "False"
    if kind == STRING:
        return value
    if kind == INT:
        return str(value)
    if kind == FLOAT:
        return repr(value)
    if kind == IMAGINARY:
        if value.real == 0:
            return f"{value.imag!r}j"
        sign = "-" if math.copysign(1.0, value.imag) < 0 else "+"
        return f"({value.real!r}{sign}{abs(value.imag)!r}j)"
    if kind == FUNCTION:
        return f"<{value.name}>"
    if kind == CLASS:
        return f"<class '__main__.{value.name}'>"
    if kind == OBJECT:
        return f"<{class_of(value).name} object>"
    # TUPLE
    parts = [to_string(item) for item in value]
    trailer = "," if len(parts) == 1 else ""
    return f"({', '.join(parts)}{trailer})"


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality; values of different kinds are never equal."""
    kind = kind_of(left)
    if kind != kind_of(right):
        return False
    if kind == TUPLE:
        return len(left) == len(right) and all(
            values_equal(lhs, rhs) for lhs, rhs in zip(left, right)
        )
    if kind == FUNCTION:
        return (
            left.name == right.name
            and left.params == right.params
            and [ast.dump(stmt) for stmt in left.body] == [ast.dump(stmt) for stmt in right.body]
        )
    if kind == CLASS:
        return left.name == right.name and left.attrs is right.attrs
    if kind == OBJECT:
        return values_equal(left.cls, right.cls) and left.attrs is right.attrs
    return left == right
