import pytest

from maec.base_module import BaseModule, State


def test_initial_state():
    assert BaseModule().state is State.CREATED


@pytest.mark.parametrize(
    "action, expected",
    [
        ("start", State.STARTED),
        ("stop", State.STOPPED),
        ("finish", State.FINISHING),
        ("done", State.FINISHED),
    ],
)
def test_transitions(action, expected):
    module = BaseModule()
    getattr(module, action)()
    assert module.state is expected


def test_full_lifecycle():
    module = BaseModule()
    seen = []
    for step in (module.start, module.stop, module.start, module.finish, module.done):
        step()
        seen.append(module.state)
    assert seen == [
        State.STARTED,
        State.STOPPED,
        State.STARTED,
        State.FINISHING,
        State.FINISHED,
    ]