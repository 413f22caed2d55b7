"""
Public API for the undoable package.

Import from here everywhere else, so you can refactor internals freely:
    from undoable import (
        History, present, past, future,
        Action, HistoryAction, Undo, Redo, UndoAll, RedoAll, Jump,
        HistoryError, UnrecognizedAction, InvalidArgument,
        DomainProtocol, reduce, apply, Store
    )
"""
from .model import History, present, past, future
from .actions import (
    Action, HistoryAction,
    Undo, Redo, UndoAll, RedoAll, Jump,
)
from .errors import HistoryError, UnrecognizedAction, InvalidArgument
from .protocol import DomainProtocol
from .reducer import reduce, apply
from .store import Store

__all__ = [
    # model
    "History", "present", "past", "future",
    # actions
    "Action", "HistoryAction",
    "Undo", "Redo", "UndoAll", "RedoAll", "Jump",
    # errors
    "HistoryError", "UnrecognizedAction", "InvalidArgument",
    # protocol & reducer & store
    "DomainProtocol", "reduce", "apply", "Store",
]
