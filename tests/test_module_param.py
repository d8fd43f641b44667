from maec.audio_buffer import BUFF_SIZE
from maec.audio_module import AudioModule, ConstModule, SinkModule
from maec.base_module import State
from maec.module_param import (
    BaseParamModule,
    ModuleParam,
    ParamModule,
    ParamSink,
    ParamSource,
)


def test_constant_param_returns_constant_buffer():
    param = ModuleParam(5)
    buff = param.get()
    assert len(buff) == BUFF_SIZE
    assert all(v == 5 for v in buff)


def test_set_constant_replaces_value():
    param = ModuleParam(1.0)
    param.set_constant(3.0)
    assert param.value == 3.0
    assert all(v == 3.0 for v in param.get())
    assert param.backward is param.const_mod


def test_param_bound_to_module():
    src = ConstModule(7.0)
    param = ModuleParam(src)
    assert param.backward is src
    assert all(v == 7.0 for v in param.get())


def test_conf_mod_configures_from_module():
    mod = AudioModule()
    mod.info.out_buffer = 100
    mod.info.channels = 2
    mod.info.sample_rate = 1000

    param = ModuleParam(0.5)
    param.conf_mod(mod)

    assert param.forward is mod
    assert param.info.out_buffer == 100
    assert param.const_mod.info.channels == 2
    buff = param.get()
    assert buff.channel_size == 100
    assert buff.sample_rate == 1000


def test_base_param_module_start_stop():
    params = [ModuleParam(1.0), ModuleParam(2.0)]
    holder = BaseParamModule(*params)
    holder.param_start()
    assert all(p.state is State.STARTED for p in params)
    assert all(p.const_mod.state is State.STARTED for p in params)
    holder.param_stop()
    assert all(p.state is State.STOPPED for p in params)


def test_param_module_lifecycle_and_sync():
    param = ModuleParam(2.0)
    pmod = ParamModule(param)
    sink = SinkModule()
    sink.bind(pmod).bind(ConstModule(1.0))
    sink.chain.buffer_size = 16

    sink.meta_start()
    assert pmod.state is State.STARTED
    assert param.state is State.STARTED

    sink.meta_info_sync()
    assert pmod.info.out_buffer == 16
    assert len(param.get()) == 16

    sink.meta_stop()
    assert param.state is State.STOPPED


def test_param_sink_syncs_params_from_chain():
    param = ModuleParam(4.0)
    psink = ParamSink(param)
    psink.bind(ConstModule(1.0))
    psink.chain.buffer_size = 8

    psink.meta_info_sync()
    assert param.info.out_buffer == 8
    assert list(param.get()) == [4.0] * 8

    psink.meta_start()
    assert psink.state is State.STARTED
    assert param.state is State.STARTED
    psink.meta_stop()
    assert param.state is State.STOPPED


def test_param_source_syncs_params():
    param = ModuleParam(9.0)
    psource = ParamSource(param)
    sink = SinkModule()
    sink.bind(psource)
    sink.chain.buffer_size = 12

    sink.meta_info_sync()
    assert psource.info.out_buffer == 12
    assert len(param.get()) == 12

    sink.meta_start()
    assert psource.state is State.STARTED
    assert param.state is State.STARTED
    sink.meta_stop()
    assert param.state is State.STOPPED