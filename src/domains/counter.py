from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict

from undoable import Action, UnrecognizedAction
from .verbs import VerbFactory, nullary


@dataclass(frozen=True)
class CounterState:
    count: int = 0


class CounterAction(Action):
    """Marker for actions handled by the counter domain."""
    pass


@dataclass(frozen=True)
class AddCounter(CounterAction):
    """Increase the count by the domain step."""


@dataclass(frozen=True)
class SubCounter(CounterAction):
    """Decrease the count by the domain step."""


class CounterDomain:
    """Scalar counter moved up or down by a fixed step."""

    name = "counter"

    def __init__(self, step: int = 1, initial: int = 0):
        self.step = step
        self.initial = initial

    def initial_state(self) -> CounterState:
        return CounterState(count=self.initial)

    def handles(self, action: Any) -> bool:
        return isinstance(action, CounterAction)

    def transition(self, present: CounterState, action: Any) -> CounterState:
        if isinstance(action, AddCounter):
            return replace(present, count=present.count + self.step)
        if isinstance(action, SubCounter):
            return replace(present, count=present.count - self.step)
        raise UnrecognizedAction(action, self.name)

    def verbs(self) -> Dict[str, VerbFactory]:
        return {
            "add": nullary(AddCounter),
            "sub": nullary(SubCounter),
            "subtract": nullary(SubCounter),
        }
