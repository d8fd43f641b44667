"""Fundamental oscillators: sine, square, sawtooth and triangle waves."""

from __future__ import annotations

import math

from maec.audio_module import AudioModule, SourceModule
from maec.module_param import ModuleParam, ParamSource

TWO_PI = 2.0 * math.pi


def _frac(value: float) -> float:
    """Fractional part, keeping the sign of ``value``."""
    return math.modf(value)[0]


def _triangle(frac: float) -> float:
    if frac < 0.25:
        return frac * 4.0
    if frac > 0.75:
        return (frac - 1.0) * 4.0
    return (0.5 - frac) * 4.0


class BaseOscillator(SourceModule):
    """A source producing a periodic wave at a fixed frequency.

    The phase counts samples produced so far.
    """

    def __init__(self, frequency: float = 440.0, phase: float = 0) -> None:
        super().__init__()
        self.frequency = frequency
        self.phase = phase

    def inc_phase(self, amount: float) -> None:
        """Advance the phase by ``amount``."""
        self.phase += amount

    def _render(self, wave) -> None:
        buff = self.create_buffer()
        rate = buff.sample_rate
        for index in range(len(buff)):
            buff[index] = wave(self.frequency * self.phase / rate)
            self.inc_phase(1)
        self.buff = buff


class SineOscillator(BaseOscillator):
    """Sine wave oscillator."""

    def process(self) -> None:
        """Fill a new buffer with a sine wave."""
        self._render(lambda cycles: math.sin(TWO_PI * cycles))


class SquareOscillator(BaseOscillator):
    """Square wave oscillator."""

    def process(self) -> None:
        """Fill a new buffer with a square wave."""
        self._render(lambda cycles: 1.0 if _frac(cycles) < 0.5 else -1.0)


class SawtoothOscillator(BaseOscillator):
    """Sawtooth wave oscillator."""

    def process(self) -> None:
        """Fill a new buffer with a sawtooth wave."""
        self._render(lambda cycles: 2.0 * _frac(cycles + 0.5) - 1.0)


class TriangleOscillator(BaseOscillator):
    """Triangle wave oscillator."""

    def process(self) -> None:
        """Fill a new buffer with a triangle wave."""
        self._render(lambda cycles: _triangle(_frac(cycles)))


class BaseModOscillator(ParamSource):
    """A source producing a periodic wave whose frequency is a parameter.

    The phase is measured in cycles and kept within one period.
    """

    def __init__(
        self,
        frequency: float | AudioModule | ModuleParam = 440.0,
        phase: float = 0.0,
    ) -> None:
        param = frequency if isinstance(frequency, ModuleParam) else ModuleParam(frequency)
        super().__init__(param)
        self.frequency = param
        self.phase = phase

    def inc_phase(self, amount: float) -> None:
        """Advance the phase by ``amount`` cycles, wrapping at one cycle."""
        self.phase = math.fmod(self.phase + amount, 1.0)

    def _render(self, wave) -> None:
        rate = self.info.sample_rate
        buff = self.create_buffer()
        freqs = self.frequency.get()
        if freqs is None:
            raise RuntimeError("frequency parameter produced no buffer")
        for index in range(len(buff)):
            buff[index] = wave(self.phase)
            self.inc_phase(freqs[index] * (1 / rate))
        self.buff = buff


class ModSineOscillator(BaseModOscillator):
    """Sine wave oscillator with a modulated frequency."""

    def process(self) -> None:
        """Fill a new buffer with a sine wave."""
        self._render(lambda phase: math.sin(phase * TWO_PI))


class ModSquareOscillator(BaseModOscillator):
    """Square wave oscillator with a modulated frequency."""

    def process(self) -> None:
        """Fill a new buffer with a square wave."""
        self._render(lambda phase: 1.0 if _frac(phase) < 0.5 else -1.0)


class ModSawtoothOscillator(BaseModOscillator):
    """Sawtooth wave oscillator with a modulated frequency."""

    def process(self) -> None:
        """Fill a new buffer with a sawtooth wave."""
        self._render(lambda phase: 2.0 * _frac(phase + 0.5) - 1.0)


class ModTriangleOscillator(BaseModOscillator):
    """Triangle wave oscillator with a modulated frequency."""

    def process(self) -> None:
        """Fill a new buffer with a triangle wave."""
        self._render(lambda phase: _triangle(_frac(phase)))