from __future__ import annotations
from typing import Any

from .actions import Undo, Redo, UndoAll, RedoAll, Jump
from .errors import UnrecognizedAction
from .model import History
from .protocol import DomainProtocol


def reduce(history: History, action: Any, domain: DomainProtocol) -> History:
    """
    Pure history transformer. Never mutates the input history.

    History-control actions go straight to the container and never become a
    state of their own; domain actions are turned into a new value and
    recorded with `advance`. Raises UnrecognizedAction for anything else.
    """
    # --- History control ---
    if isinstance(action, Undo):
        return history.undo_one()

    if isinstance(action, Redo):
        return history.redo_one()

    if isinstance(action, Jump):
        return history.jump(action.step)

    if isinstance(action, UndoAll):
        return history.undo_all()

    if isinstance(action, RedoAll):
        return history.redo_all()

    # --- Domain transition ---
    if domain.handles(action):
        return history.advance(domain.transition(history.present, action))

    raise UnrecognizedAction(action, getattr(domain, "name", None))


apply = reduce
