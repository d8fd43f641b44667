import pytest

from maec.audio_module import ConstModule, SinkModule
from maec.base_module import State
from maec.mixer import ModuleMixDown, ModuleMixUp, MultiMix


def test_mixdown_adds_inputs():
    mix = ModuleMixDown()
    first, second = ConstModule(2.0), ConstModule(3.5)
    mix.bind(first)
    mix.bind(second)
    assert mix.num_inputs() == 2
    mix.meta_process()
    buff = mix.get_buffer()
    assert len(buff) == first.info.out_buffer
    assert all(v == pytest.approx(2.0 + 3.5) for v in buff)


def test_mixdown_bind_returns_module_and_shares_chain():
    mix = ModuleMixDown()
    const = ConstModule(1.0)
    assert mix.bind(const) is const
    assert const.forward is mix
    assert const.chain is mix.chain


def test_mixdown_in_chain_with_sink():
    sink = SinkModule()
    mix = ModuleMixDown()
    sink.bind(mix)
    mix.bind(ConstModule(1.0))
    mix.bind(ConstModule(1.0))
    mix.bind(ConstModule(1.0))
    sink.meta_process()
    buff = sink.get_buffer()
    assert set(buff) == {3.0}


def test_mixdown_without_inputs_raises():
    with pytest.raises(RuntimeError):
        ModuleMixDown().meta_process()


def test_mixdown_mismatched_sizes_raise():
    mix = ModuleMixDown()
    small = ConstModule(1.0)
    small.info.out_buffer = 10
    mix.bind(small)
    mix.bind(ConstModule(1.0))
    with pytest.raises(ValueError):
        mix.meta_process()


def test_mixdown_start_and_stop_reach_inputs():
    mix = ModuleMixDown()
    a, b = ConstModule(), ConstModule()
    mix.bind(a)
    mix.bind(b)
    mix.meta_start()
    assert (mix.state, a.state, b.state) == (State.STARTED,) * 3
    mix.meta_stop()
    assert (mix.state, a.state, b.state) == (State.STOPPED,) * 3


def test_mixup_tracks_outputs():
    up = ModuleMixUp()
    s1, s2 = SinkModule(), SinkModule()
    s1.bind(up)
    s2.bind(up)
    assert up.num_outputs() == 2
    assert up.outputs == [s1, s2]


def test_mixup_get_buffer_returns_copies():
    up = ModuleMixUp()
    up.bind(ConstModule(4.0))
    up.meta_process()
    first = up.get_buffer()
    second = up.get_buffer()
    assert first == second
    assert first is not second
    first[0] = -1.0
    assert second[0] == 4.0


def test_mixup_get_buffer_empty():
    assert ModuleMixUp().get_buffer() is None


def test_multimix_mixes_down_and_up():
    multi = MultiMix()
    multi.bind(ConstModule(1.5))
    multi.bind(ConstModule(2.5))
    s1, s2 = SinkModule(), SinkModule()
    s1.bind(multi)
    s2.bind(multi)
    assert multi.num_inputs() == 2
    assert multi.num_outputs() == 2
    s1.meta_process()
    s2.meta_process()
    b1, b2 = s1.get_buffer(), s2.get_buffer()
    assert b1 == b2
    assert all(v == pytest.approx(1.5 + 2.5) for v in b1)