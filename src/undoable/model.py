from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

from .errors import InvalidArgument

S = TypeVar("S")


@dataclass(frozen=True)
class History(Generic[S]):
    """
    Immutable past/present/future envelope around a domain state value.

    - past:   oldest first, ends with the state just before `present`
    - future: nearest first, starts with the state just after `present`

    Every operation returns a new History, or `self` when it is a no-op.
    Boundaries (empty past/future) are never errors.
    """
    present: S
    past: Tuple[S, ...] = ()
    future: Tuple[S, ...] = ()

    def __post_init__(self):
        # accept lists from callers but always store tuples
        object.__setattr__(self, "past", tuple(self.past))
        object.__setattr__(self, "future", tuple(self.future))

    @classmethod
    def start(cls, value: S) -> "History[S]":
        return cls(present=value)

    # ----- read-only views -----

    @property
    def timeline(self) -> Tuple[S, ...]:
        return self.past + (self.present,) + self.future

    @property
    def index(self) -> int:
        """Position of `present` inside `timeline`."""
        return len(self.past)

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    # ----- transitions -----

    def advance(self, value: S) -> "History[S]":
        """Record `present` into past and install `value`; drops the redo branch."""
        return History(present=value, past=self.past + (self.present,), future=())

    def undo_one(self) -> "History[S]":
        if not self.past:
            return self
        return History(
            present=self.past[-1],
            past=self.past[:-1],
            future=(self.present,) + self.future,
        )

    def redo_one(self) -> "History[S]":
        if not self.future:
            return self
        return History(
            present=self.future[0],
            past=self.past + (self.present,),
            future=self.future[1:],
        )

    def undo_all(self) -> "History[S]":
        if not self.past:
            return self
        return History(
            present=self.past[0],
            past=(),
            future=self.past[1:] + (self.present,) + self.future,
        )

    def redo_all(self) -> "History[S]":
        if not self.future:
            return self
        return History(
            present=self.future[-1],
            past=self.past + (self.present,) + self.future[:-1],
            future=(),
        )

    def jump(self, step: int) -> "History[S]":
        """
        Move `step` states through the timeline: negative is undo, positive redo.
        Clamped at both ends, so jump(-len(past)) == undo_all().
        """
        if isinstance(step, bool) or not isinstance(step, int):
            raise InvalidArgument(f"Jump step must be an integer, got: {step!r}")
        if step == 0:
            return self
        # same result as repeating undo_one/redo_one, without the intermediate copies
        timeline = self.timeline
        target = max(0, min(self.index + step, len(timeline) - 1))
        if target == self.index:
            return self
        return History(
            present=timeline[target],
            past=timeline[:target],
            future=timeline[target + 1:],
        )


# ----- outbound projections -----

def present(history: History[S]) -> S:
    return history.present


def past(history: History[S]) -> Tuple[S, ...]:
    return history.past


def future(history: History[S]) -> Tuple[S, ...]:
    return history.future
