"""Timekeeping: wall-clock intervals and chain-relative time."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass

NANO = 1_000_000_000
"""Nanoseconds in one second."""

SAMPLE_RATE = 44100
"""Default sample rate in samples per second."""


def get_time() -> int:
    """Return a monotonic time value in nanoseconds.

    The value is meaningful only when compared with another value
    returned by this function.
    """
    return _time.monotonic_ns()


@dataclass
class ChainTimer:
    """Keeps time relative to a module chain, counted in samples.

    The elapsed time is derived from the number of processed samples,
    the number of channels, and the nanoseconds per frame (``npf``).
    """

    channels: int = 1
    sample: int = 0
    npf: int = NANO // SAMPLE_RATE

    def reset(self) -> None:
        """Restore the timer to its starting state."""
        self.channels = 1
        self.sample = 0
        self.npf = 0

    @property
    def samplerate(self) -> int:
        """Approximate sample rate derived from the nanoseconds per frame."""
        return NANO // self.npf

    @samplerate.setter
    def samplerate(self, rate: int) -> None:
        self.npf = NANO // rate

    @property
    def time(self) -> int:
        """Elapsed chain time in nanoseconds."""
        return _trunc_div(self.sample, self.channels) * self.npf

    def time_for(self, sample: int, channels: int = 1) -> int:
        """Elapsed time in nanoseconds for the given sample and channel count."""
        return _trunc_div(sample, channels) * self.npf

    def inc_sample(self) -> None:
        """Advance the sample count by one."""
        self.sample += 1

    def add_sample(self, val: int) -> None:
        """Advance the sample count by ``val``."""
        self.sample += val


def _trunc_div(num: int, den: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den > 0) else -quotient