from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

from undoable import Action, InvalidArgument, UnrecognizedAction
from .counter import CounterDomain
from .weather import WeatherDomain
from .verbs import CONTROL_VERBS

log = logging.getLogger(__name__)

def _lc(x: Any) -> str:
    return str(x).strip().lower()

class DomainRegistry:
    """
    Named domains plus a token parser for scripted dispatch.

    Tokens look like "domain:verb" or "domain:verb=arg":
        reg = DomainRegistry()
        name, actions = reg.parse("counter:jump=-2")
    The domain part may be a registered alias.
    """

    def __init__(self, domains: Optional[Iterable[Any]] = None, aliases: Optional[Dict[str, str]] = None):
        self._domains: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = {}

        # 1) built-ins, unless the caller supplies its own set
        for domain in (domains if domains is not None else (CounterDomain(), WeatherDomain())):
            self.register(domain)

        # 2) caller-provided aliases (first writer wins)
        for token, name in (aliases or {}).items():
            self.add_alias(token, name)

    def register(self, domain: Any) -> None:
        name = _lc(domain.name)
        if not name:
            raise ValueError("Domain must have a non-empty name")
        self._domains[name] = domain
        self._aliases.setdefault(name, name)

    def add_alias(self, token: str, name: str) -> None:
        if _lc(name) not in self._domains:
            raise ValueError(f"Unknown domain for alias '{token}': {name}")
        self._aliases.setdefault(_lc(token), _lc(name))

    def names(self) -> List[str]:
        return list(self._domains)

    def resolve(self, token: str) -> Optional[str]:
        if not token:
            return None
        return self._aliases.get(_lc(token))

    def get(self, name: str) -> Any:
        resolved = self.resolve(name)
        if resolved is None:
            raise UnrecognizedAction(name)
        return self._domains[resolved]

    def parse(self, token: str) -> Tuple[str, List[Action]]:
        """Turn "domain:verb[=arg]" into (domain name, actions to dispatch in order)."""
        head, sep, tail = token.partition(":")
        if not sep or not tail.strip():
            raise InvalidArgument(f"Expected 'domain:verb[=arg]', got: {token!r}")
        domain = self.get(head)
        verb, eq, arg = tail.partition("=")
        verb = _lc(verb)

        domain_verbs = domain.verbs() if hasattr(domain, "verbs") else {}
        factory = CONTROL_VERBS.get(verb) or domain_verbs.get(verb)
        if factory is None:
            raise UnrecognizedAction(verb, domain.name)
        actions = factory(arg.strip() if eq else None)
        log.debug("parsed %r -> %s %r", token, domain.name, actions)
        return domain.name, actions
