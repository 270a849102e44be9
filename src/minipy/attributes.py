from __future__ import annotations

from typing import Any

from .common import MISSING
from .errors import InvalidReceiver
from .values import Class, Object, class_of, kind_of


def get_attr(name: str, value: Any) -> Any:
    """Look `name` up in the value's own map; `MISSING` when absent."""
    if type(value) is Object or type(value) is Class:
        return value.attrs.get(name, MISSING)
    raise InvalidReceiver(f"only classes and objects have attributes, not {kind_of(value)}")


def get_class_attr(name: str, value: Any) -> Any:
    """Method lookup: searches the object's class map, never the instance map."""
    if type(value) is not Object:
        raise InvalidReceiver(f"only objects have class attributes, not {kind_of(value)}")
    return class_of(value).attrs.get(name, MISSING)


def set_attr(name: str, value: Any, target: Any) -> None:
    if type(target) is Object or type(target) is Class:
        target.attrs[name] = value
        return
    raise InvalidReceiver(f"cannot set attribute {name!r} on {kind_of(target)}")
