from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import random

from undoable import Action, UnrecognizedAction
from .verbs import VerbFactory, nullary, sequence, with_bool

SUMMARIES = (
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
)


@dataclass(frozen=True)
class WeatherForecast:
    date: date
    temperature_c: int
    summary: Optional[str] = None

    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)


@dataclass(frozen=True)
class WeatherState:
    initialized: bool = False
    loading: bool = False
    forecasts: Tuple[WeatherForecast, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "forecasts", tuple(self.forecasts))


class WeatherAction(Action):
    """Marker for actions handled by the weather domain."""
    pass


@dataclass(frozen=True)
class SetForecasts(WeatherAction):
    forecasts: Tuple[WeatherForecast, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "forecasts", tuple(self.forecasts))


@dataclass(frozen=True)
class SetLoading(WeatherAction):
    loading: bool


@dataclass(frozen=True)
class SetInitialized(WeatherAction):
    """Mark the forecasts as loaded at least once."""


def generate_forecasts(count: int = 21, start: Optional[date] = None,
                       rng: Optional[random.Random] = None) -> Tuple[WeatherForecast, ...]:
    """
    Sample forecast data: one entry per day from `start` (default: today).
    Pass a seeded Random for reproducible output.
    """
    rng = rng or random.Random()
    start = start or date.today()
    return tuple(
        WeatherForecast(
            date=start + timedelta(days=i),
            temperature_c=rng.randint(-20, 55),
            summary=rng.choice(SUMMARIES),
        )
        for i in range(count)
    )


def load_forecasts_actions(source: Callable[[], Iterable[WeatherForecast]]) -> List[Action]:
    """
    Request lifecycle as a plain list of actions:
    loading on -> install forecasts -> loading off -> initialized.

    `source` runs to completion here, before any action reaches the history.
    """
    forecasts = tuple(source())
    return [
        SetLoading(True),
        SetForecasts(forecasts),
        SetLoading(False),
        SetInitialized(),
    ]


class WeatherDomain:
    """Loading/initialized flags plus the list of fetched forecasts."""

    name = "weather"

    def __init__(self, days: int = 21, seed: Optional[int] = None, start: Optional[date] = None):
        self.days = days
        self.seed = seed
        self.start = start

    def initial_state(self) -> WeatherState:
        return WeatherState()

    def handles(self, action: Any) -> bool:
        return isinstance(action, WeatherAction)

    def transition(self, present: WeatherState, action: Any) -> WeatherState:
        if isinstance(action, SetForecasts):
            return replace(present, forecasts=action.forecasts)
        if isinstance(action, SetLoading):
            return replace(present, loading=action.loading)
        if isinstance(action, SetInitialized):
            return replace(present, initialized=True)
        raise UnrecognizedAction(action, self.name)

    def sample_source(self) -> Callable[[], Tuple[WeatherForecast, ...]]:
        rng = random.Random(self.seed) if self.seed is not None else None
        return lambda: generate_forecasts(self.days, self.start, rng)

    def verbs(self) -> Dict[str, VerbFactory]:
        return {
            "loading": with_bool(SetLoading),
            "initialized": nullary(SetInitialized),
            "load": sequence(lambda: load_forecasts_actions(self.sample_source())),
            "clear": nullary(SetForecasts),
        }

