"""Audio modules and the chains they form."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from maec.audio_buffer import BUFF_SIZE, AudioBuffer
from maec.base_module import BaseModule
from maec.chrono import SAMPLE_RATE


@dataclass
class AudioInfo:
    """Describes the audio a module consumes and produces."""

    in_buffer: int = BUFF_SIZE
    out_buffer: int = BUFF_SIZE
    channels: int = 1
    sample_rate: int = SAMPLE_RATE


@dataclass
class ChainInfo:
    """Information shared by every module in one chain."""

    buffer_size: int = BUFF_SIZE
    channels: int = 1
    sample_rate: int = SAMPLE_RATE
    module_num: int = 0
    module_finish: int = 0


class AudioModule(BaseModule):
    """A module that takes a buffer from the module behind it and processes it.

    Modules are linked with :meth:`bind`: the bound module sits behind this
    one and supplies its buffer when this module is processed.
    """

    def __init__(self) -> None:
        super().__init__()
        self.info = AudioInfo()
        self.chain = ChainInfo()
        self.backward: AudioModule | None = None
        self.forward: AudioModule | None = None
        self.buff: AudioBuffer | None = None

    def _back(self) -> AudioModule:
        if self.backward is None:
            raise RuntimeError(f"{type(self).__name__} has no module bound behind it")
        return self.backward

    def meta_process(self) -> None:
        """Process the chain behind this module, then this module."""
        back = self._back()
        back.meta_process()
        self.buff = back.get_buffer()
        self.process()

    def meta_start(self) -> None:
        """Start the chain behind this module, then this module."""
        self._back().meta_start()
        BaseModule.start(self)
        self.start()

    def meta_stop(self) -> None:
        """Stop the chain behind this module, then this module."""
        self._back().meta_stop()
        BaseModule.stop(self)
        self.stop()

    def meta_finish(self) -> None:
        """Finish the chain behind this module, then this module."""
        self._back().meta_finish()
        BaseModule.finish(self)
        self.finish()

    def info_sync(self) -> None:
        """Copy the audio info from the module in front of this one."""
        if self.forward is None:
            raise RuntimeError(f"{type(self).__name__} has no module bound in front of it")
        self.info = dataclasses.replace(self.forward.info)

    def meta_info_sync(self) -> None:
        """Sync this module's info, then the chain behind it."""
        self.info_sync()
        self._back().meta_info_sync()

    def process(self) -> None:
        """Work on the current buffer; the default leaves it untouched."""

    def done(self) -> None:
        """Mark this module finished and report it to the chain."""
        BaseModule.done(self)
        self.chain.module_finish += 1

    def finish(self) -> None:
        """Finish immediately."""
        self.done()

    def get_buffer(self) -> AudioBuffer | None:
        """Hand over the current buffer, leaving this module without one."""
        buff, self.buff = self.buff, None
        return buff

    def create_buffer(self, channels: int = 1, size: int | None = None) -> AudioBuffer:
        """Create a buffer; its size defaults to this module's output size."""
        if size is None:
            return AudioBuffer(self.info.out_buffer, channels, self.info.sample_rate)
        return AudioBuffer(size, channels)

    def set_forward(self, mod: AudioModule) -> None:
        """Record the module in front of this one."""
        self.forward = mod

    def bind(self, mod: AudioModule) -> AudioModule:
        """Attach ``mod`` behind this module and return it for further binding."""
        self.backward = mod
        mod.set_forward(self)
        mod.chain = self.chain
        return mod


class SourceModule(AudioModule):
    """A module at the back of a chain that produces audio itself."""

    def meta_process(self) -> None:
        """Process this module alone."""
        self.process()

    def meta_start(self) -> None:
        """Start this module alone."""
        BaseModule.start(self)
        self.start()

    def meta_stop(self) -> None:
        """Stop this module alone."""
        BaseModule.stop(self)
        self.stop()

    def meta_finish(self) -> None:
        """Finish this module alone."""
        BaseModule.finish(self)
        self.finish()

    def meta_info_sync(self) -> None:
        """Sync this module's info alone."""
        self.info_sync()


class SinkModule(AudioModule):
    """A module at the front of a chain that consumes audio."""

    def info_sync(self) -> None:
        """Take the audio info from the chain info."""
        self.info.in_buffer = self.chain.buffer_size
        self.info.out_buffer = self.chain.buffer_size
        self.info.channels = self.chain.channels
        self.info.sample_rate = self.chain.sample_rate


class PeriodSink(SinkModule):
    """A sink that processes the chain ``period`` times per call."""

    def __init__(self, period: int = 1) -> None:
        super().__init__()
        self.period = period

    def meta_process(self) -> None:
        """Process the chain once per period."""
        for _ in range(self.period):
            super().meta_process()


class ConstModule(SourceModule):
    """A source whose buffers hold one constant value."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__()
        self.value = value

    def process(self) -> None:
        """Produce a buffer filled with the constant value."""
        buff = self.create_buffer()
        buff.fill(self.value)
        self.buff = buff


class Counter(AudioModule):
    """Passes buffers through unchanged while counting them."""

    def __init__(self) -> None:
        super().__init__()
        self._samples = 0
        self._processed = 0

    def process(self) -> None:
        """Count the current buffer."""
        if self.buff is not None:
            self._samples += len(self.buff)
        self._processed += 1

    def samples(self) -> int:
        """Number of samples seen since the last reset."""
        return self._samples

    def processed(self) -> int:
        """Number of buffers processed since the last reset."""
        return self._processed

    def reset(self) -> None:
        """Clear both counts."""
        self._samples = 0
        self._processed = 0