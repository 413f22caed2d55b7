from __future__ import annotations
from dataclasses import dataclass


class Action:
    """Marker base class for all actions (intents)."""
    pass


class HistoryAction(Action):
    """Marker for the history-control actions shared by every domain."""
    pass


@dataclass(frozen=True)
class Undo(HistoryAction):
    """Step back one state."""


@dataclass(frozen=True)
class Redo(HistoryAction):
    """Step forward one state."""


@dataclass(frozen=True)
class UndoAll(HistoryAction):
    """Rewind to the oldest recorded state."""


@dataclass(frozen=True)
class RedoAll(HistoryAction):
    """Fast-forward to the newest undone state."""


@dataclass(frozen=True)
class Jump(HistoryAction):
    step: int  # <0 back, >0 forward; clamped at either end
