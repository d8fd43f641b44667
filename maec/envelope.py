"""Envelopes: sources whose output follows a value over chain time."""

from __future__ import annotations

import dataclasses
import math

from maec.audio_module import SourceModule
from maec.chrono import ChainTimer


def _trunc_div(num: int, den: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den > 0) else -quotient


class BaseEnvelope(SourceModule):
    """A source that moves from a start value to a stop value over time.

    Times are chain times in nanoseconds, kept by the envelope's own timer.
    A stop time of -1 means the envelope never ends.
    """

    def __init__(
        self,
        start_value: float = 0.0,
        stop_value: float = 0.0,
        start_time: int = 0,
        stop_time: int = 0,
    ) -> None:
        super().__init__()
        self.start_value = start_value
        self.stop_value = stop_value
        self.start_time = start_time
        self.stop_time = stop_time
        self.timer = ChainTimer()

    def time_diff(self) -> int:
        """Duration between the start and stop times."""
        return self.stop_time - self.start_time

    def val_diff(self) -> float:
        """Difference between the stop and start values."""
        return self.stop_value - self.start_value

    def val_divide(self) -> float:
        """Ratio of the stop value to the start value, 0 if the start is 0."""
        if self.start_value == 0:
            return 0.0
        return self.stop_value / self.start_value

    def remaining_samples(self) -> int:
        """Whole samples left between the current time and the stop time."""
        return _trunc_div(self.stop_time - self.get_time(), self.timer.npf)

    def get_time(self) -> int:
        """Current chain time of this envelope."""
        return self.timer.time

    def get_time_inc(self) -> int:
        """Return the current time, then advance the timer by one sample."""
        current = self.timer.time
        self.timer.inc_sample()
        return current


class DurationEnvelope(BaseEnvelope):
    """Runs an enclosed envelope for a set duration from the moment it starts."""

    def __init__(self, envelope: BaseEnvelope | None = None, duration: int = 0) -> None:
        super().__init__()
        self.envelope = envelope
        self.duration = duration

    def _inner(self) -> BaseEnvelope:
        if self.envelope is None:
            raise RuntimeError("DurationEnvelope has no envelope to run")
        return self.envelope

    def start(self) -> None:
        """Place the enclosed envelope at the current time and start it."""
        env = self._inner()
        env.start_time = self.get_time()
        env.stop_time = self.get_time() + self.duration
        env.start()

    def process(self) -> None:
        """Take the next buffer from the enclosed envelope."""
        env = self._inner()
        env.meta_process()
        self.buff = env.get_buffer()
        if self.buff is not None:
            self.timer.add_sample(len(self.buff))


class ConstantEnvelope(BaseEnvelope):
    """Outputs the start value in every sample."""

    def process(self) -> None:
        """Fill a new buffer with the start value."""
        buff = self.create_buffer()
        buff.fill(self.start_value)
        self.timer.add_sample(len(buff))
        self.buff = buff


class _InternalEnvelope(ConstantEnvelope):
    """Fills gaps between envelopes in a chain."""


class SetValue(BaseEnvelope):
    """Outputs the start value until the stop time, then the stop value."""

    def process(self) -> None:
        """Fill a new buffer with start values, then stop values."""
        buff = self.create_buffer()
        size = len(buff)
        initial = max(0, min(self.remaining_samples(), size))
        buff[:initial] = [self.start_value] * initial
        buff[initial:] = [self.stop_value] * (size - initial)
        self.timer.add_sample(size)
        self.buff = buff


class ExponentialRamp(BaseEnvelope):
    """Ramps exponentially from the start value to the stop value."""

    def process(self) -> None:
        """Fill a new buffer with points on the exponential ramp."""
        buff = self.create_buffer()
        ratio = self.val_divide()
        span = self.time_diff()
        buff[:] = [
            self.start_value
            * math.pow(ratio, (self.get_time_inc() - self.start_time) / span)
            for _ in range(len(buff))
        ]
        self.buff = buff


class LinearRamp(BaseEnvelope):
    """Ramps linearly from the start value to the stop value."""

    def process(self) -> None:
        """Fill a new buffer with points on the linear ramp."""
        buff = self.create_buffer()
        diff = self.val_diff()
        span = self.time_diff()
        buff[:] = [
            self.start_value + diff * ((self.get_time_inc() - self.start_time) / span)
            for _ in range(len(buff))
        ]
        self.buff = buff


class ChainEnvelope(BaseEnvelope):
    """Plays several envelopes one after another.

    Gaps between envelopes, and the time after the last one, are filled
    with internal envelopes holding the previous envelope's stop value.
    """

    def __init__(
        self,
        start_value: float = 0.0,
        stop_value: float = 0.0,
        start_time: int = 0,
        stop_time: int = 0,
    ) -> None:
        super().__init__(start_value, stop_value, start_time, stop_time)
        self.envs: list[BaseEnvelope] = []
        self.inter: list[_InternalEnvelope] = []
        self.optimized = 0
        self.can_optimize = True
        self.current: BaseEnvelope | None = None
        self.env_index = -1

    def add_envelope(self, env: BaseEnvelope) -> None:
        """Append an envelope to the chain and fill in any gaps."""
        if self.inter:
            self.envs.pop()
            self.inter.pop()
        self.envs.append(env)
        self.optimize()

    def optimize(self) -> None:
        """Insert gap fillers between envelopes and a tail after the last one."""
        size = len(self.envs) - 1
        while self.can_optimize and self.optimized < size:
            env = self.envs[self.optimized]
            if env.stop_time >= self.envs[self.optimized + 1].start_time:
                self.optimized += 1
                continue
            self.optimized += 1
            self.create_internal(self.optimized)
        self.create_internal(len(self.envs))

    def create_internal(self, index: int) -> None:
        """Insert a gap-filling envelope at ``index``."""
        interp = _InternalEnvelope()
        if index == 0:
            interp.start_value = self.start_value
            interp.start_time = 0
        else:
            prev = self.envs[index - 1]
            interp.start_value = prev.stop_value
            interp.start_time = prev.stop_time
        if index >= len(self.envs):
            interp.stop_time = -1
        else:
            interp.stop_time = self.envs[index].start_time
        self.envs.insert(index, interp)
        self.inter.append(interp)

    def next_envelope(self) -> None:
        """Move to the next envelope, handing it this chain's timer."""
        if self.env_index + 1 >= len(self.envs):
            raise IndexError("no envelope left in the chain")
        self.env_index += 1
        self.current = self.envs[self.env_index]
        self.current.timer = dataclasses.replace(self.timer)

    def start(self) -> None:
        """Select the first envelope of the chain."""
        self.env_index = -1
        self.next_envelope()

    def process(self) -> None:
        """Fill a buffer from the envelopes, switching as each one ends."""
        if self.current is None:
            raise RuntimeError("ChainEnvelope must be started before processing")
        out = self.create_buffer()
        total = len(out)
        processed = 0
        while processed < total:
            cur = self.current
            num = total - processed
            if cur.stop_time >= 0:
                num = min(num, cur.remaining_samples())
            if num <= 0:
                self.next_envelope()
                continue
            cur.info.out_buffer = num
            cur.meta_process()
            chunk = cur.get_buffer()
            if chunk is None:
                raise RuntimeError(f"{type(cur).__name__} produced no buffer")
            out[processed:processed + num] = chunk[:num]
            processed += num
            self.timer.add_sample(num)
            if cur.stop_time >= 0 and self.get_time() >= cur.stop_time:
                self.next_envelope()
        self.buff = out


class ADSREnvelope(ChainEnvelope):
    """Attack, decay and sustain stages built from a chain of envelopes.

    ``attack`` is the time the attack ends and ``decay`` the time the
    decay ends; the sustain level holds from then on.
    """

    def __init__(self, attack: int = 0, decay: int = 0, sustain: float = 1.0) -> None:
        super().__init__()
        self.attack = attack
        self.decay = decay
        self.sustain = sustain

    def start(self) -> None:
        """Build the stages and select the first one."""
        self.envs = []
        self.inter = []
        self.optimized = 0
        stages = (
            LinearRamp(0.0, 1.0, 0, self.attack),
            LinearRamp(1.0, self.sustain, self.attack, self.decay),
            ConstantEnvelope(self.sustain, self.sustain, self.decay, -1),
        )
        for stage in stages:
            self.add_envelope(stage)
        super().start()