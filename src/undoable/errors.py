from __future__ import annotations
from typing import Any, Optional


class HistoryError(ValueError):
    """Base class for errors raised by the history core."""


class UnrecognizedAction(HistoryError):
    """Action is neither a history-control action nor one the domain handles."""

    def __init__(self, action: Any, domain: Optional[str] = None):
        self.action = action
        self.domain = domain
        where = f" for domain '{domain}'" if domain else ""
        super().__init__(f"Unrecognized action{where}: {action!r}")


class InvalidArgument(HistoryError):
    """Malformed operation input, e.g. a non-integer jump step."""
