"""
Helpers for building verb tables: verb -> factory(arg) -> list of actions.

A token such as "counter:jump=-2" reaches the factory registered for "jump"
with arg "-2"; verbs written without "=" receive arg None.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from undoable import Action, Undo, Redo, UndoAll, RedoAll, Jump, InvalidArgument
from .normalize import normalize_bool, normalize_int

VerbFactory = Callable[[Optional[str]], List[Action]]


def sequence(make: Callable[[], List[Action]]) -> VerbFactory:
    """Verb that takes no argument and yields the actions `make` returns."""
    def _factory(arg: Optional[str]) -> List[Action]:
        if arg is not None:
            raise InvalidArgument(f"Unexpected argument: {arg!r}")
        return list(make())
    return _factory


def nullary(make: Callable[[], Any]) -> VerbFactory:
    return sequence(lambda: [make()])


def with_bool(make: Callable[[bool], Any]) -> VerbFactory:
    def _factory(arg: Optional[str]) -> List[Action]:
        ok, value, err = normalize_bool(arg)
        if not ok:
            raise InvalidArgument(err)
        return [make(value)]
    return _factory


def with_int(make: Callable[[int], Any]) -> VerbFactory:
    def _factory(arg: Optional[str]) -> List[Action]:
        ok, value, err = normalize_int(arg)
        if not ok:
            raise InvalidArgument(err)
        return [make(value)]
    return _factory


# shared by every domain
CONTROL_VERBS: Dict[str, VerbFactory] = {
    "undo": nullary(Undo),
    "redo": nullary(Redo),
    "undo-all": nullary(UndoAll),
    "redo-all": nullary(RedoAll),
    "jump": with_int(Jump),
}
