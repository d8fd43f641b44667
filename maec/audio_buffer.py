"""Audio buffers and sample format conversion."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from typing import overload

from maec.chrono import SAMPLE_RATE

BUFF_SIZE = 440
"""Default number of samples per channel in a buffer."""


class AudioBuffer:
    """Multi-channel buffer of floating point samples.

    Samples are stored sequentially: all of channel 0, then all of
    channel 1, and so on. Indexing and iteration follow that order.
    """

    def __init__(self, size: int, channels: int = 1, sample_rate: int = SAMPLE_RATE) -> None:
        if size < 0:
            raise ValueError(f"buffer size must not be negative, got {size}")
        if channels < 1:
            raise ValueError(f"channel count must be positive, got {channels}")
        self.channel_size = size
        self.channels = channels
        self.sample_rate = sample_rate
        self._data: list[float] = [0.0] * (size * channels)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> list[float]: ...

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            values = list(value)
            if len(range(*index.indices(len(self._data)))) != len(values):
                raise ValueError("slice assignment must not change the buffer size")
            self._data[index] = values
        else:
            self._data[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioBuffer):
            return NotImplemented
        return (
            self.channels == other.channels
            and self.sample_rate == other.sample_rate
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return (
            f"AudioBuffer(size={self.channel_size}, channels={self.channels}, "
            f"sample_rate={self.sample_rate})"
        )

    def fill(self, value: float) -> None:
        """Set every sample to ``value``."""
        self._data = [value] * len(self._data)

    def copy(self) -> AudioBuffer:
        """Return an independent copy of this buffer."""
        clone = AudioBuffer(self.channel_size, self.channels, self.sample_rate)
        clone._data = list(self._data)
        return clone

    def channel(self, index: int) -> list[float]:
        """Return the samples of one channel."""
        if not 0 <= index < self.channels:
            raise IndexError(f"channel {index} out of range for {self.channels} channels")
        start = index * self.channel_size
        return self._data[start:start + self.channel_size]

    def interleaved(self) -> Iterator[float]:
        """Yield samples frame by frame, one value per channel in each frame."""
        for frame in range(self.channel_size):
            for chan in range(self.channels):
                yield self._data[chan * self.channel_size + frame]


def create_buffer(size: int, channels: int = 1, sample_rate: int = SAMPLE_RATE) -> AudioBuffer:
    """Create a new zero-filled buffer."""
    return AudioBuffer(size, channels, sample_rate)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def mf_float(val: float) -> float:
    """Convert a sample to single precision."""
    return struct.unpack("f", struct.pack("f", val))[0]


def mf_null(val: float) -> float:
    """Return the sample unchanged."""
    return val


def mf_int16(val: float) -> int:
    """Convert a sample in [-1, 1] to a signed 16 bit integer."""
    if val < 0:
        return int(val * 32768)
    return int(val * 32767)


def mf_uint16(val: float) -> int:
    """Convert a sample in [-1, 1] to an unsigned 16 bit integer."""
    return _round_half_away(((val + 1) / 2) * 65535)


def mf_char(val: float) -> int:
    """Convert a sample in [-1, 1] to a signed 8 bit integer."""
    if val < 0:
        return int(val * 128.0)
    return int(val * 127.0)


def mf_uchar(val: float) -> int:
    """Convert a sample in [-1, 1] to an unsigned 8 bit integer."""
    return _round_half_away(((val + 1.0) / 2.0) * 255.0)


def int16_mf(val: int) -> float:
    """Convert a signed 16 bit integer to a sample."""
    return val / 32767.0


def uint16_mf(val: int) -> float:
    """Convert an unsigned 16 bit integer to a sample."""
    return (val / 65535.0) * 2.0 - 1.0


def char_mf(val: int) -> float:
    """Convert a signed 8 bit integer to a sample."""
    if val < 0:
        return val / 128.0
    return val / 127.0


def uchar_mf(val: int) -> float:
    """Convert an unsigned 8 bit integer to a sample."""
    return (val / 255.0) * 2.0 - 1.0