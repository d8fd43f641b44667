"""Small DSP helper functions."""

from __future__ import annotations

import math


def sinc(x: float) -> float:
    """Unnormalised sinc: ``sin(x) / x``."""
    return math.sin(x) / x