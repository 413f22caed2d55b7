import pytest
from undoable import (
    History, Undo, Redo, UndoAll, RedoAll, Jump,
    UnrecognizedAction, InvalidArgument, reduce, apply,
)
from domains import AddCounter, SubCounter, CounterState, SetLoading


def _counts(values):
    return tuple(CounterState(v) for v in values)


def test_counter_undo_scenario(counter, counter_history):
    h = counter_history
    for action in (AddCounter(), AddCounter(), AddCounter(), SubCounter()):
        h = reduce(h, action, counter)
    assert h.past == _counts([0, 1, 2, 3])
    assert h.present == CounterState(2)
    assert h.future == ()

    h = reduce(h, Undo(), counter)
    assert h.past == _counts([0, 1, 2])
    assert h.present == CounterState(3)
    assert h.future == _counts([2])

    h = reduce(h, Redo(), counter)
    assert h.past == _counts([0, 1, 2, 3])
    assert h.present == CounterState(2)
    assert h.future == ()


def test_all_control_actions_in_sequence(counter, counter_history):
    h = counter_history
    actions = [
        AddCounter(), AddCounter(), AddCounter(), SubCounter(),
        Undo(), Redo(), UndoAll(), RedoAll(),
        Jump(-1), Jump(1),
    ]
    for action in actions:
        h = reduce(h, action, counter)
    assert h.past == _counts([0, 1, 2, 3])
    assert h.present == CounterState(2)
    assert h.future == ()


def test_new_action_after_undo_prunes_branch(counter, counter_history):
    h = counter_history
    for action in (AddCounter(), AddCounter(), AddCounter(), SubCounter(), Undo(), AddCounter()):
        h = reduce(h, action, counter)
    assert h.past == _counts([0, 1, 2, 3])
    assert h.present == CounterState(4)
    assert h.future == ()


def test_undo_all_redo_all_scenario(counter, counter_history):
    h = reduce(reduce(counter_history, AddCounter(), counter), AddCounter(), counter)
    h = reduce(h, UndoAll(), counter)
    assert h.past == ()
    assert h.present == CounterState(0)
    assert h.future == _counts([1, 2])

    h = reduce(h, RedoAll(), counter)
    assert h.past == _counts([0, 1])
    assert h.present == CounterState(2)
    assert h.future == ()


def test_control_actions_never_become_states(counter, counter_history):
    h = reduce(counter_history, AddCounter(), counter)
    for action in (Undo(), Redo(), Jump(0), UndoAll(), RedoAll()):
        h = reduce(h, action, counter)
    assert len(h.timeline) == 2


def test_control_noops_return_same_history(counter, counter_history):
    for action in (Undo(), Redo(), Jump(0), Jump(-4), UndoAll(), RedoAll()):
        assert reduce(counter_history, action, counter) is counter_history


def test_unrecognized_action_raises_and_leaves_history(counter, counter_history):
    h = reduce(counter_history, AddCounter(), counter)
    with pytest.raises(UnrecognizedAction) as exc:
        reduce(h, "add", counter)
    assert exc.value.domain == "counter"
    assert exc.value.action == "add"
    assert h.present == CounterState(1)


def test_other_domain_action_is_unrecognized(counter, counter_history):
    with pytest.raises(UnrecognizedAction):
        reduce(counter_history, SetLoading(True), counter)


def test_malformed_jump_is_invalid_argument(counter, counter_history):
    with pytest.raises(InvalidArgument):
        reduce(counter_history, Jump("two"), counter)


def test_apply_is_reduce(counter, counter_history):
    assert apply(counter_history, AddCounter(), counter) == reduce(counter_history, AddCounter(), counter)


def test_reduce_accepts_any_domain_protocol():
    class Echo:
        name = "echo"

        def initial_state(self):
            return ""

        def handles(self, action):
            return isinstance(action, str)

        def transition(self, present, action):
            return present + action

    domain = Echo()
    h = History.start(domain.initial_state())
    h = reduce(reduce(h, "a", domain), "b", domain)
    assert h.timeline == ("", "a", "ab")
    assert reduce(h, Undo(), domain).present == "a"
