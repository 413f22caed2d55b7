from undoable import Undo, Redo, reduce
from domains import AddCounter, SetLoading, SetInitialized, load_forecasts_actions


def test_combined_simple_actions(counter, weather, counter_history, weather_history):
    c = reduce(counter_history, AddCounter(), counter)
    w = reduce(weather_history, SetLoading(True), weather)

    combined = {"counter": c, "weather": w}
    assert combined["counter"].present.count == 1
    assert combined["weather"].present.loading is True


def test_interleaved_actions_do_not_cross_domains(counter, weather, counter_history, weather_history):
    c = reduce(counter_history, AddCounter(), counter)
    w = weather_history
    for action in load_forecasts_actions(weather.sample_source()):
        w = reduce(w, action, weather)
    w_snapshot = (w.past, w.present, w.future)

    for _ in range(4):
        c = reduce(c, AddCounter(), counter)
    assert c.present.count == 5
    assert (w.past, w.present, w.future) == w_snapshot
    assert len(w.present.forecasts) == 21

    w = reduce(w, Undo(), weather)
    assert w.present.initialized is False
    assert c.present.count == 5

    c = reduce(c, Undo(), counter)
    assert c.present.count == 4
    c_snapshot = (c.past, c.present, c.future)

    w = reduce(w, Redo(), weather)
    assert w.present.initialized is True
    assert (w.past, w.present, w.future) == w_snapshot
    assert (c.past, c.present, c.future) == c_snapshot


def test_stores_are_independent(counter_store, weather_store):
    counter_store.apply(AddCounter())
    weather_store.apply(SetInitialized())
    counter_store.undo()
    assert weather_store.state.initialized is True
    assert len(weather_store.history.past) == 1
    weather_store.undo()
    assert counter_store.history.future[0].count == 1
