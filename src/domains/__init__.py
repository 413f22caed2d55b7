"""
Public API for the domains package.
Usage:
    from domains import DomainRegistry, CounterDomain, WeatherDomain
"""
from .counter import CounterDomain, CounterState, CounterAction, AddCounter, SubCounter
from .weather import (
    WeatherDomain, WeatherState, WeatherForecast, WeatherAction,
    SetForecasts, SetLoading, SetInitialized,
    generate_forecasts, load_forecasts_actions,
)
from .registry import DomainRegistry

__all__ = [
    # counter
    "CounterDomain", "CounterState", "CounterAction", "AddCounter", "SubCounter",
    # weather
    "WeatherDomain", "WeatherState", "WeatherForecast", "WeatherAction",
    "SetForecasts", "SetLoading", "SetInitialized",
    "generate_forecasts", "load_forecasts_actions",
    # registry
    "DomainRegistry",
]
