"""Modules that join several chains into one or split one into several."""

from __future__ import annotations

from maec.audio_buffer import AudioBuffer
from maec.audio_module import AudioModule
from maec.base_module import BaseModule


class ModuleMixDown(AudioModule):
    """Mixes the output of many modules into one buffer (n:1).

    Every bound input is processed and the resulting buffers are added
    together sample by sample.
    """

    def __init__(self) -> None:
        super().__init__()
        self.inputs: list[AudioModule] = []
        self.buffs: list[AudioBuffer] = []

    def _require_inputs(self) -> list[AudioModule]:
        if not self.inputs:
            raise RuntimeError(f"{type(self).__name__} has no input modules bound")
        return self.inputs

    def bind(self, mod: AudioModule) -> AudioModule:
        """Add ``mod`` to the inputs of this mixer and return it."""
        self.inputs.append(mod)
        mod.set_forward(self)
        mod.chain = self.chain
        return mod

    def meta_process(self) -> None:
        """Process every input, collect their buffers, then mix them."""
        collected = []
        for mod in self._require_inputs():
            mod.meta_process()
            buff = mod.get_buffer()
            if buff is None:
                raise RuntimeError(f"{type(mod).__name__} produced no buffer")
            collected.append(buff)
        self.buffs = collected
        self.process()

    def process(self) -> None:
        """Add the collected input buffers together."""
        if not self.buffs:
            self.buff = None
            return
        first, *rest = self.buffs
        mixed = first.copy()
        for buff in rest:
            if len(buff) != len(mixed):
                raise ValueError(
                    f"cannot mix buffers of {len(mixed)} and {len(buff)} samples"
                )
            mixed[:] = [a + b for a, b in zip(mixed, buff)]
        self.buffs = []
        self.buff = mixed

    def meta_start(self) -> None:
        """Start every input chain, then this module."""
        for mod in self._require_inputs():
            mod.meta_start()
        BaseModule.start(self)
        self.start()

    def meta_stop(self) -> None:
        """Stop every input chain, then this module."""
        for mod in self._require_inputs():
            mod.meta_stop()
        BaseModule.stop(self)
        self.stop()

    def meta_finish(self) -> None:
        """Finish every input chain, then this module."""
        for mod in self._require_inputs():
            mod.meta_finish()
        BaseModule.finish(self)
        self.finish()

    def meta_info_sync(self) -> None:
        """Sync this module's info, then every input chain."""
        self.info_sync()
        for mod in self._require_inputs():
            mod.meta_info_sync()

    def num_inputs(self) -> int:
        """Number of input modules bound to this mixer."""
        return len(self.inputs)


class ModuleMixUp(AudioModule):
    """Shares the output of one module with many modules (1:n).

    Every request for the buffer receives an independent copy.
    """

    def __init__(self) -> None:
        super().__init__()
        self.outputs: list[AudioModule] = []

    def set_forward(self, mod: AudioModule) -> None:
        """Add ``mod`` to the modules in front of this one."""
        self.outputs.append(mod)
        self.forward = mod

    def get_buffer(self) -> AudioBuffer | None:
        """Return a copy of the current buffer, keeping the original."""
        if self.buff is None:
            return None
        return self.buff.copy()

    def num_outputs(self) -> int:
        """Number of output modules bound to this mixer."""
        return len(self.outputs)


class MultiMix(ModuleMixDown, ModuleMixUp):
    """Mixes many inputs down and shares the result with many outputs (n:n)."""