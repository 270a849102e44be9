from __future__ import annotations

from typing import Any, Dict, Iterator, MutableMapping, NamedTuple

from .common import ExitPoint, FlowControl
from .errors import InternalInvariantViolation, UnknownSymbol


class CallFrame(MutableMapping[str, Any]):
    """
    The top frame of a function call: parameter bindings overlaid on the
    global frame.

    Behavior:
      - loads: call-local names first, then globals
      - stores: names already bound globally (and not call-local) are
        rebound in the global frame; everything else stays call-local
      - enclosing blocks and enclosing calls are never visible
    """

    def __init__(self, params: Dict[str, Any], globals_dict: Dict[str, Any]):
        self.locals = params
        self.globals = globals_dict

    def __getitem__(self, name: str) -> Any:
        if name in self.locals:
            return self.locals[name]
        return self.globals[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self.locals and name in self.globals:
            self.globals[name] = value
        else:
            self.locals[name] = value

    def __delitem__(self, name: str) -> None:
        if name in self.locals:
            del self.locals[name]
        else:
            del self.globals[name]

    def __contains__(self, name: object) -> bool:
        return name in self.locals or name in self.globals

    def __iter__(self) -> Iterator[str]:
        yield from self.locals
        for name in self.globals:
            if name not in self.locals:
                yield name

    def __len__(self) -> int:
        return len(self.locals) + sum(1 for name in self.globals if name not in self.locals)


class SavedCall(NamedTuple):
    frames: list
    return_target: ExitPoint | None


class Environment:
    """
    Stack of frames plus the exit point of the function currently running.

    Lookup and update only ever consult the top frame.
    """

    def __init__(self, globals_dict: Dict[str, Any]):
        self.frames: list[MutableMapping[str, Any]] = [globals_dict]
        self._return_target: ExitPoint | None = None
        # innermost loop's exit points; None outside loops
        self.flow: FlowControl | None = None

    @property
    def globals(self) -> Dict[str, Any]:
        return self.frames[0]

    @property
    def top(self) -> MutableMapping[str, Any]:
        return self.frames[-1]

    @property
    def return_target(self) -> ExitPoint:
        if self._return_target is None:
            raise InternalInvariantViolation("'return' used outside of a function")
        return self._return_target

    def lookup(self, name: str) -> Any:
        frame = self.top
        if name not in frame:
            raise UnknownSymbol(f"Unknown symbol: {name}")
        return frame[name]

    def update(self, name: str, value: Any) -> None:
        self.top[name] = value

    def push_frame(self) -> None:
        self.frames.append({})

    def pop_frame(self) -> Dict[str, Any]:
        if len(self.frames) < 2:
            raise InternalInvariantViolation("cannot pop the global frame")
        return dict(self.frames.pop())

    def enter_call(self, frame: MutableMapping[str, Any], return_target: ExitPoint) -> SavedCall:
        saved = SavedCall(self.frames, self._return_target)
        self.frames = [*saved.frames, frame]
        self._return_target = return_target
        return saved

    def restore(self, saved: SavedCall) -> None:
        self.frames = saved.frames
        self._return_target = saved.return_target
