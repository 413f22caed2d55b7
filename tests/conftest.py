# tests/conftest.py
import sys
from datetime import date
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from undoable import History, Store
from domains import CounterDomain, WeatherDomain, DomainRegistry

@pytest.fixture
def counter():
    return CounterDomain()

@pytest.fixture
def weather():
    # seeded so generated forecasts are reproducible
    return WeatherDomain(days=21, seed=7, start=date(2024, 1, 1))

@pytest.fixture
def registry(counter, weather):
    return DomainRegistry([counter, weather], aliases={"wx": "weather"})

@pytest.fixture
def counter_history(counter):
    return History.start(counter.initial_state())

@pytest.fixture
def weather_history(weather):
    return History.start(weather.initial_state())

@pytest.fixture
def counter_store(counter):
    return Store(domain=counter)

@pytest.fixture
def weather_store(weather):
    return Store(domain=weather)
