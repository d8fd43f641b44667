import math

import pytest

from maec.dsp.util import sinc


def test_zero_crossings():
    for k in range(1, 5):
        assert sinc(k * math.pi) == pytest.approx(0.0, abs=1e-12)


def test_near_origin_approaches_one():
    assert sinc(1e-8) == pytest.approx(1.0)


def test_even_function():
    for x in (0.3, 1.7, 4.2):
        assert sinc(-x) == pytest.approx(sinc(x))


def test_zero_raises():
    with pytest.raises(ZeroDivisionError):
        sinc(0.0)