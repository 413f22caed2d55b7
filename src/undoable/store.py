from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
import logging

from .actions import Action, Undo, Redo, UndoAll, RedoAll, Jump
from .model import History
from .protocol import DomainProtocol
from .reducer import reduce

log = logging.getLogger(__name__)


@dataclass
class Store:
    """
    Small single-writer wrapper around the pure reducer for one domain.

    Usage:
        store = Store(domain=CounterDomain())
        store.apply(AddCounter())
        store.undo(); store.redo()

    Holds the latest History; older generations handed out stay valid.
    """
    domain: DomainProtocol = field(default=None)  # inject at construction
    history: Optional[History] = None

    def __post_init__(self):
        if self.domain is None:
            raise ValueError("Store requires a domain.")
        if self.history is None:
            self.history = History.start(self.domain.initial_state())

    @property
    def state(self) -> Any:
        return self.history.present

    def apply(self, action: Action) -> History:
        try:
            new = reduce(self.history, action, self.domain)
        except ValueError:
            log.debug("%s: rejected %r", self.domain.name, action)
            raise
        if new is self.history:
            log.debug("%s: %r was a no-op", self.domain.name, action)
        else:
            log.debug("%s: %r -> %d past / %d future",
                      self.domain.name, action, len(new.past), len(new.future))
        self.history = new
        return self.history

    def undo(self) -> History:
        return self.apply(Undo())

    def redo(self) -> History:
        return self.apply(Redo())

    def undo_all(self) -> History:
        return self.apply(UndoAll())

    def redo_all(self) -> History:
        return self.apply(RedoAll())

    def jump(self, step: int) -> History:
        return self.apply(Jump(step))

    def clear_history(self) -> None:
        """Forget past and future, keeping the current state."""
        self.history = History.start(self.history.present)
