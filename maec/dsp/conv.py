"""Convolution of signals with kernels."""

from __future__ import annotations

from collections.abc import Iterable

from maec.audio_buffer import AudioBuffer


def length_conv(size1: int, size2: int) -> int:
    """Length of the full convolution of two signals."""
    return size1 + size2 - 1


def input_conv(signal: Iterable[float], kernel: Iterable[float]) -> AudioBuffer:
    """Convolve by spreading each input sample across the kernel."""
    sig = list(signal)
    ker = list(kernel)
    out = AudioBuffer(length_conv(len(sig), len(ker)))
    for i, value in enumerate(sig):
        for j, weight in enumerate(ker):
            out[i + j] += value * weight
    return out


def output_conv(signal: Iterable[float], kernel: Iterable[float]) -> AudioBuffer:
    """Convolve by computing each output sample from the inputs that reach it."""
    sig = list(signal)
    ker = list(kernel)
    out = AudioBuffer(length_conv(len(sig), len(ker)))
    for i in range(len(out)):
        out[i] = sum(
            weight * sig[i - j]
            for j, weight in enumerate(ker)
            if 0 <= i - j < len(sig)
        )
    return out