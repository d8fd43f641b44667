"""Helpers for Fourier transforms."""

from __future__ import annotations

import math


def cos_basis(phase: int, total: int, freq: float) -> float:
    """Cosine basis function value at ``phase`` of ``total``."""
    return math.cos((2 * math.pi * freq * phase) / total)


def sin_basis(phase: int, total: int, freq: float) -> float:
    """Sine basis function value at ``phase`` of ``total``."""
    return math.sin((2 * math.pi * freq * phase) / total)


def length_ft(size: int) -> int:
    """Length of the frequency domain produced from ``size`` real samples."""
    return size // 2 + 1


def length_ift(size: int) -> int:
    """Length of the time domain produced from ``size`` frequency bins."""
    return (size - 1) * 2