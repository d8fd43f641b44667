"""Module parameters: values that may come from constants or other modules."""

from __future__ import annotations

from maec.audio_buffer import AudioBuffer
from maec.audio_module import AudioModule, ConstModule, SinkModule, SourceModule


class ModuleParam(SinkModule):
    """A parameter whose values are sampled from the chain bound behind it.

    It can be given a constant value, in which case a constant source is
    bound behind it, or any module whose output becomes the parameter.
    """

    def __init__(self, source: float | AudioModule | None = None) -> None:
        super().__init__()
        self.value = 0.0
        self.const_mod: ConstModule | None = None
        if isinstance(source, AudioModule):
            self.bind(source)
        elif source is not None:
            self.set_constant(source)

    def get(self) -> AudioBuffer | None:
        """Process the chain behind this parameter and return its buffer."""
        self.meta_process()
        return self.get_buffer()

    def set_constant(self, val: float) -> None:
        """Make this parameter return ``val`` in every sample."""
        self.value = val
        if self.const_mod is None:
            self.const_mod = ConstModule(val)
        else:
            self.const_mod.value = val
        self.bind(self.const_mod)

    def conf_mod(self, mod: AudioModule) -> None:
        """Configure size, channels and sample rate from ``mod``, then sync."""
        self.set_forward(mod)
        self.chain.buffer_size = mod.info.out_buffer
        self.chain.channels = mod.info.channels
        self.chain.sample_rate = mod.info.sample_rate
        self.meta_info_sync()


class BaseParamModule:
    """Manages the state of a fixed set of parameters."""

    def __init__(self, *params: ModuleParam) -> None:
        self.params: list[ModuleParam] = list(params)

    def param_start(self) -> None:
        """Start every parameter chain."""
        for param in self.params:
            param.meta_start()

    def param_stop(self) -> None:
        """Stop every parameter chain."""
        for param in self.params:
            param.meta_stop()

    def param_info(self, mod: AudioModule) -> None:
        """Configure every parameter from ``mod``."""
        for param in self.params:
            param.conf_mod(mod)


class ParamModule(AudioModule, BaseParamModule):
    """An audio module that keeps its parameters in step with itself."""

    def __init__(self, *params: ModuleParam) -> None:
        AudioModule.__init__(self)
        BaseParamModule.__init__(self, *params)

    def meta_start(self) -> None:
        """Start the chain, this module and its parameters."""
        AudioModule.meta_start(self)
        self.param_start()

    def meta_stop(self) -> None:
        """Stop the chain, this module and its parameters."""
        AudioModule.meta_stop(self)
        self.param_stop()

    def meta_info_sync(self) -> None:
        """Sync the chain, then configure the parameters from this module."""
        AudioModule.meta_info_sync(self)
        self.param_info(self)


class ParamSink(SinkModule, BaseParamModule):
    """A sink that keeps its parameters in step with itself."""

    def __init__(self, *params: ModuleParam) -> None:
        SinkModule.__init__(self)
        BaseParamModule.__init__(self, *params)

    def meta_start(self) -> None:
        """Start the chain, this sink and its parameters."""
        SinkModule.meta_start(self)
        self.param_start()

    def meta_stop(self) -> None:
        """Stop the chain, this sink and its parameters."""
        SinkModule.meta_stop(self)
        self.param_stop()

    def meta_info_sync(self) -> None:
        """Sync the chain, then configure the parameters from this sink."""
        SinkModule.meta_info_sync(self)
        self.param_info(self)


class ParamSource(SourceModule, BaseParamModule):
    """A source that keeps its parameters in step with itself."""

    def __init__(self, *params: ModuleParam) -> None:
        SourceModule.__init__(self)
        BaseParamModule.__init__(self, *params)

    def meta_start(self) -> None:
        """Start this source and its parameters."""
        SourceModule.meta_start(self)
        self.param_start()

    def meta_stop(self) -> None:
        """Stop this source and its parameters."""
        SourceModule.meta_stop(self)
        self.param_stop()

    def meta_info_sync(self) -> None:
        """Sync this source, then configure its parameters from it."""
        SourceModule.meta_info_sync(self)
        self.param_info(self)