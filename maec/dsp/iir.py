"""Recursive (IIR) filters and the tools to build them."""

from __future__ import annotations

import enum
import math
from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence

from maec.chrono import SAMPLE_RATE


class FilterType(enum.Enum):
    """Kinds of frequency filter."""

    LOW_PASS = enum.auto()
    HIGH_PASS = enum.auto()
    BAND_PASS = enum.auto()
    BAND_REJECT = enum.auto()


def iir_recursive_single(
    value: float,
    input_container: deque,
    output_container: deque,
    aco: Sequence[float],
    bco: Sequence[float],
    apoles: int,
    bpoles: int,
) -> float:
    """Run one value through a recursive filter and return the output.

    ``input_container`` holds the previous inputs and ``output_container``
    the previous outputs, most recent first. Both are updated in place and
    keep their length.
    """
    input_container.appendleft(value)
    result = sum(input_container[i] * aco[i] for i in range(apoles))
    result += sum(output_container[i] * bco[i] for i in range(bpoles))
    output_container.appendleft(result)
    input_container.pop()
    output_container.pop()
    return result


def _resized(values: list[float], size: int) -> list[float]:
    return values[:size] + [0.0] * max(0, size - len(values))


class IIRFilter:
    """An infinite impulse response filter with managed history.

    The A coefficients weigh the current and previous inputs, the B
    coefficients weigh the previous outputs.
    """

    def __init__(self, asize: int = 0, bsize: int = 0) -> None:
        self.asize = asize
        self.bsize = bsize
        self.acoes: list[float] = []
        self.bcoes: list[float] = []
        self.inputs: deque[float] = deque()
        self.outputs: deque[float] = deque()
        self.reserve()

    def reserve(self) -> None:
        """Size the coefficient lists and clear the input/output history."""
        self.acoes = _resized(self.acoes, self.asize)
        self.bcoes = _resized(self.bcoes, self.bsize)
        self.inputs = deque([0.0] * self.asize)
        self.outputs = deque([0.0] * self.bsize)

    def set_a(self, index: int, value: float) -> None:
        """Set the A coefficient at ``index``."""
        self.acoes[index] = value

    def get_a(self, index: int) -> float:
        """Return the A coefficient at ``index``."""
        return self.acoes[index]

    def set_b(self, index: int, value: float) -> None:
        """Set the B coefficient at ``index``."""
        self.bcoes[index] = value

    def get_b(self, index: int) -> float:
        """Return the B coefficient at ``index``."""
        return self.bcoes[index]

    def _step(self, value: float) -> float:
        return iir_recursive_single(
            value, self.inputs, self.outputs,
            self.acoes, self.bcoes, self.asize, self.bsize,
        )

    def process(self, signal: MutableSequence[float]) -> None:
        """Filter ``signal`` in place."""
        for index, value in enumerate(signal):
            signal[index] = self._step(value)

    def filter(self, signal: Iterable[float]) -> list[float]:
        """Filter ``signal`` and return the result as a new list."""
        return [self._step(value) for value in signal]


class BaseIIRImplementation(IIRFilter):
    """Common settings of concrete IIR filters.

    Cutoffs are stored as fractions of the sample rate; ``freq_high`` and
    ``freq_low`` expose them in hertz.
    """

    def __init__(
        self,
        filter_type: FilterType = FilterType.LOW_PASS,
        sample_rate: int = SAMPLE_RATE,
    ) -> None:
        super().__init__()
        self.filter_type = filter_type
        self.sample_rate = sample_rate
        self.frac_high = 0.0
        self.frac_low = 0.0

    @property
    def freq_high(self) -> float:
        """Upper (stop) cutoff in hertz."""
        return self.frac_high * self.sample_rate

    @freq_high.setter
    def freq_high(self, freq: float) -> None:
        self.frac_high = freq / self.sample_rate

    @property
    def freq_low(self) -> float:
        """Lower (start) cutoff in hertz."""
        return self.frac_low * self.sample_rate

    @freq_low.setter
    def freq_low(self, freq: float) -> None:
        self.frac_low = freq / self.sample_rate

    def generate_coefficients(self) -> None:
        """Compute the coefficients; the base version only reserves storage."""
        self.reserve()


class SinglePole(BaseIIRImplementation):
    """Single pole filter, akin to an analog RC circuit."""

    def frac_to_x(self, freq: float) -> float:
        """Convert a cutoff fraction to the decay value ``x``."""
        return math.exp(-2 * math.pi * freq)

    def generate_coefficients(self) -> None:
        """Compute the coefficients for a low or high pass filter."""
        if self.filter_type is FilterType.LOW_PASS:
            self.asize, self.bsize = 1, 1
            self.reserve()
            xval = self.frac_to_x(self.frac_high)
            self.set_a(0, 1.0 - xval)
            self.set_b(0, xval)
        elif self.filter_type is FilterType.HIGH_PASS:
            self.asize, self.bsize = 2, 1
            self.reserve()
            xval = self.frac_to_x(self.frac_low)
            self.set_a(0, (1 + xval) / 2)
            self.set_a(1, -(1 + xval) / 2)
            self.set_b(0, xval)
        else:
            raise ValueError(
                f"single pole filters support only low and high pass, not {self.filter_type.name}"
            )