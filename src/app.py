# src/app.py
from __future__ import annotations

import argparse
import copy
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# local imports
from undoable import History, HistoryError, Store
from domains import CounterDomain, CounterState, DomainRegistry, WeatherDomain, WeatherState

log = logging.getLogger("app")


# ---------------------------
# Config loading
# ---------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "aliases": {
        # token → domain name
        "count": "counter",
        "wx": "weather",
    },
    "counter": {
        "step": 1,
        "initial": 0,
    },
    "weather": {
        "days": 21,
        "seed": None,
        "start": None,   # ISO date; None means today
    },
    "logging": {
        "level": "WARNING",
    },
}

def load_config(path: Optional[str]) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            log.warning("config not found: %s (using defaults)", p)
            return cfg
        with p.open("r", encoding="utf-8") as f:
            user = yaml.safe_load(f) or {}
        if not isinstance(user, dict):
            raise ValueError(f"{p}: top level must be a mapping")
        # shallow merge per section
        for k, v in user.items():
            if isinstance(v, dict) and k in cfg and isinstance(cfg[k], dict):
                cfg[k].update(v)
            else:
                cfg[k] = v
    return cfg


def build_registry(config: Dict[str, Any]) -> DomainRegistry:
    counter_cfg = config.get("counter", {})
    weather_cfg = config.get("weather", {})
    start = weather_cfg.get("start")
    if isinstance(start, str):
        start = date.fromisoformat(start)
    domains = [
        CounterDomain(
            step=int(counter_cfg.get("step", 1)),
            initial=int(counter_cfg.get("initial", 0)),
        ),
        WeatherDomain(
            days=int(weather_cfg.get("days", 21)),
            seed=weather_cfg.get("seed"),
            start=start,
        ),
    ]
    return DomainRegistry(domains, aliases=config.get("aliases", {}))


# ---------------------------
# Dispatch
# ---------------------------

def run_tokens(tokens: List[str], registry: DomainRegistry, stores: Dict[str, Store]) -> None:
    """Apply each token to its own domain's store; stops at the first bad token."""
    for token in tokens:
        name, actions = registry.parse(token)
        for action in actions:
            stores[name].apply(action)


def format_history(name: str, history: History) -> str:
    lines = [f"[{name}]"]
    lines.append("  past:    " + ", ".join(_fmt(s) for s in history.past))
    lines.append("  present: " + _fmt(history.present))
    lines.append("  future:  " + ", ".join(_fmt(s) for s in history.future))
    return "\n".join(lines)


def _fmt(value: Any) -> str:
    if isinstance(value, WeatherState):
        return (f"WeatherState(initialized={value.initialized}, loading={value.loading}, "
                f"forecasts={len(value.forecasts)})")
    if isinstance(value, CounterState):
        return str(value.count)
    return repr(value)


# ---------------------------
# App bootstrap
# ---------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Undoable history demo")
    parser.add_argument("tokens", nargs="*", help="Actions as domain:verb[=arg], e.g. counter:add counter:undo")
    parser.add_argument("--config", "-c", help="Path to config.yaml", default=None)
    parser.add_argument("--log-level", "-l", help="Override logging level from config", default=None)
    args = parser.parse_args(argv)

    config = load_config(args.config)
    level = (args.log_level or config.get("logging", {}).get("level") or "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    registry = build_registry(config)
    # one independent store per domain; the combined state is just this dict
    stores = {name: Store(domain=registry.get(name)) for name in registry.names()}

    try:
        run_tokens(args.tokens, registry, stores)
    except HistoryError as exc:
        log.error("%s", exc)
        return 2

    for name, store in stores.items():
        print(format_history(name, store.history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
