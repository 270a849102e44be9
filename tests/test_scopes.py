from __future__ import annotations

import pytest

from minipy import InternalInvariantViolation, UnknownSymbol
from minipy.common import ExitPoint
from minipy.scopes import CallFrame, Environment


def test_lookup_and_update_use_top_frame_only():
    env = Environment({})
    env.update("x", 1)
    assert env.lookup("x") == 1

    env.push_frame()
    with pytest.raises(UnknownSymbol, match="Unknown symbol: x"):
        env.lookup("x")
    env.update("y", 2)

    assert env.pop_frame() == {"y": 2}
    assert env.lookup("x") == 1
    with pytest.raises(UnknownSymbol):
        env.lookup("y")


def test_global_frame_cannot_be_popped():
    with pytest.raises(InternalInvariantViolation):
        Environment({}).pop_frame()


def test_globals_is_the_bottom_frame():
    globals_dict = {"a": 1}
    env = Environment(globals_dict)
    env.push_frame()
    env.push_frame()
    assert env.globals is globals_dict


def test_enter_call_and_restore_swap_frame_and_exit_point():
    globals_dict = {"g": 1}
    env = Environment(globals_dict)
    frames_before = env.frames
    with pytest.raises(InternalInvariantViolation):
        env.return_target

    target = ExitPoint("return")
    saved = env.enter_call(CallFrame({"p": 2}, globals_dict), target)
    assert env.return_target is target
    assert env.lookup("p") == 2
    assert env.lookup("g") == 1

    inner = ExitPoint("return")
    nested = env.enter_call(CallFrame({}, globals_dict), inner)
    assert env.return_target is inner
    with pytest.raises(UnknownSymbol):
        env.lookup("p")
    env.restore(nested)
    assert env.return_target is target

    env.restore(saved)
    assert env.frames is frames_before
    with pytest.raises(InternalInvariantViolation):
        env.return_target


def test_call_frame_overlays_parameters_on_globals():
    globals_dict = {"g": 1, "shadowed": "global"}
    frame = CallFrame({"shadowed": "param"}, globals_dict)

    assert frame["g"] == 1
    assert frame["shadowed"] == "param"
    assert "g" in frame
    assert "missing" not in frame
    assert sorted(frame) == ["g", "shadowed"]
    assert len(frame) == 2


def test_call_frame_writes():
    globals_dict = {"g": 1, "shadowed": "global"}
    frame = CallFrame({"shadowed": "param"}, globals_dict)

    frame["g"] = 2
    frame["shadowed"] = "changed"
    frame["fresh"] = 3

    assert globals_dict == {"g": 2, "shadowed": "global"}
    assert frame.locals == {"shadowed": "changed", "fresh": 3}
