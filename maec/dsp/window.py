"""Window functions evaluated at a single point."""

from __future__ import annotations

import math


def window_rectangle(num: int, size: int) -> float:
    """Rectangular window: a raised cosine with no cosine part, so always 1."""
    return window_hann(num, max(size, 2), 1.0)


def window_hann(num: int, size: int, a0: float = 0.5) -> float:
    """Raised-cosine window; ``a0`` of 0.5 gives a Hann window."""
    return a0 - (1 - a0) * math.cos(2 * math.pi * num / (size - 1))


def window_hamming(num: int, size: int, a0: float = 0.54) -> float:
    """Hamming window, a raised cosine with ``a0`` of 0.54."""
    return window_hann(num, size, a0)


def window_blackmanc(num: int, size: int, alpha: float = 0.16) -> float:
    """Blackman window with a configurable ``alpha``."""
    return (
        (1 - alpha) / 2
        - 0.5 * math.cos(2 * math.pi * num / (size - 1))
        + (alpha / 2) * math.cos(4 * math.pi * num / (size - 1))
    )


def window_blackman(num: int, size: int) -> float:
    """Blackman window with the standard ``alpha`` of 0.16."""
    return window_blackmanc(num, size, 0.16)