from __future__ import annotations

import ast

import pytest

from minipy import InternalInvariantViolation, InvalidReceiver
from minipy.attributes import get_attr, get_class_attr, set_attr
from minipy.common import MISSING
from minipy.values import (
    Class,
    Function,
    Object,
    is_truthy,
    kind_of,
    new_object,
    to_string,
    values_equal,
)


def _make_class(name: str = "C", **attrs) -> Class:
    return Class(name, dict(attrs))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        (True, "True"),
        (False, "False"),
        (42, "42"),
        (-3, "-3"),
        (10**30, "1000000000000000000000000000000"),
        (2.0, "2.0"),
        (0.1, "0.1"),
        (2j, "2.0j"),
        (complex(1, 2), "(1.0+2.0j)"),
        (complex(1, -2), "(1.0-2.0j)"),
        ("hi", "hi"),
        ((), "()"),
        ((1,), "(1,)"),
        ((1, "a", None), "(1, a, None)"),
        (((1,), (True, 2.5)), "((1,), (True, 2.5))"),
    ],
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_to_string_of_reference_values():
    cls = _make_class("Point")
    assert to_string(Function("area", ("self",), [])) == "<area>"
    assert to_string(cls) == "<class '__main__.Point'>"
    assert to_string(new_object(cls)) == "<Point object>"
    assert to_string((cls,)) == "(<class '__main__.Point'>,)"


def test_to_string_of_malformed_object_is_internal_error():
    with pytest.raises(InternalInvariantViolation):
        to_string(Object(5, {}))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, False),
        (False, False),
        (None, False),
        (0.0, True),
        ("", True),
        ((), True),
        (0j, True),
        (1, True),
        (-1, True),
        (True, True),
        ("0", True),
    ],
)
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


def test_reference_values_are_truthy():
    cls = _make_class()
    assert is_truthy(cls)
    assert is_truthy(new_object(cls))
    assert is_truthy(Function("f", (), []))


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, "None"),
        (True, "Bool"),
        (1, "Int"),
        (1.0, "Float"),
        (1j, "Imaginary"),
        ("s", "String"),
        ((), "Tuple"),
    ],
)
def test_kind_of_distinguishes_bool_from_int(value, kind):
    assert kind_of(value) == kind


def test_kind_of_rejects_host_values():
    with pytest.raises(InternalInvariantViolation):
        kind_of([1, 2])


def test_values_equal_is_structural():
    body = ast.parse("return 1").body
    same_body = ast.parse("return 1").body
    other_body = ast.parse("return 2").body
    assert values_equal(Function("f", ("a",), body), Function("f", ("a",), same_body))
    assert not values_equal(Function("f", ("a",), body), Function("f", ("a",), other_body))
    assert not values_equal(Function("f", ("a",), body), Function("g", ("a",), body))

    attrs = {}
    assert values_equal(Class("C", attrs), Class("C", attrs))
    assert not values_equal(Class("C", {}), Class("C", {}))

    cls = _make_class()
    obj = new_object(cls)
    assert values_equal(obj, obj)
    assert not values_equal(obj, new_object(cls))

    assert values_equal((1, ("a", None)), (1, ("a", None)))
    assert not values_equal((1,), (True,))
    assert not values_equal(0, False)
    assert not values_equal(1, 1.0)


def test_new_object_is_seeded_with_class():
    cls = _make_class()
    obj = new_object(cls)
    assert obj.cls is cls
    assert obj.attrs == {"__class__": cls}
    assert new_object(cls).attrs is not obj.attrs


# ----------------------------
# attribute store
# ----------------------------


def test_get_attr_reads_own_map_only():
    cls = _make_class(method=1)
    obj = new_object(cls)
    assert get_attr("method", obj) is MISSING
    assert get_attr("method", cls) == 1
    assert get_attr("__class__", obj) is cls


def test_get_class_attr_bypasses_instance_map():
    cls = _make_class(method=1)
    obj = new_object(cls)
    obj.attrs["method"] = 2
    assert get_class_attr("method", obj) == 1
    assert get_class_attr("__class__", obj) is MISSING


def test_set_attr_mutates_shared_map():
    cls = _make_class()
    alias = cls
    set_attr("count", 3, alias)
    assert cls.attrs == {"count": 3}

    obj = new_object(cls)
    set_attr("count", 4, obj)
    assert obj.attrs["count"] == 4
    assert cls.attrs["count"] == 3


@pytest.mark.parametrize("receiver", [1, "s", None, (), Function("f", (), [])])
def test_attribute_store_rejects_other_kinds(receiver):
    with pytest.raises(InvalidReceiver):
        get_attr("x", receiver)
    with pytest.raises(InvalidReceiver):
        set_attr("x", 1, receiver)
    with pytest.raises(InvalidReceiver):
        get_class_attr("x", receiver)


def test_get_class_attr_requires_an_object():
    with pytest.raises(InvalidReceiver):
        get_class_attr("x", _make_class(x=1))


def test_get_class_attr_on_malformed_object_is_internal_error():
    with pytest.raises(InternalInvariantViolation):
        get_class_attr("x", Object("not a class", {}))
