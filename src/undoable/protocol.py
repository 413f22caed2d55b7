from __future__ import annotations
from typing import Any, Protocol


class DomainProtocol(Protocol):
    """
    Minimal contract used by the reducer to stay decoupled from concrete domains.

    Implementations must provide:
      - name: str, used in error messages and by the registry
      - initial_state() -> S, the value a fresh History starts from
      - handles(action) -> bool, True for the domain's own actions
      - transition(present, action) -> S, a pure function returning the next value
    """
    name: str

    def initial_state(self) -> Any: ...
    def handles(self, action: Any) -> bool: ...
    def transition(self, present: Any, action: Any) -> Any: ...
