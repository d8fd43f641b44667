import math

import pytest

from maec.oscillator import (
    BaseModOscillator,
    BaseOscillator,
    ModSawtoothOscillator,
    ModSineOscillator,
    ModSquareOscillator,
    ModTriangleOscillator,
    SawtoothOscillator,
    SineOscillator,
    SquareOscillator,
    TriangleOscillator,
)

RATE = 800
FREQ = 100.0
SIZE = 16


def _configure(osc, size=SIZE):
    osc.info.out_buffer = size
    osc.info.sample_rate = RATE
    return osc


def _render(osc):
    osc.meta_process()
    return list(osc.get_buffer())


def _plain_oscillators(size=SIZE):
    return [
        _configure(SineOscillator(FREQ), size),
        _configure(SquareOscillator(FREQ), size),
        _configure(SawtoothOscillator(FREQ), size),
        _configure(TriangleOscillator(FREQ), size),
    ]


def test_base_oscillator_inc_phase():
    osc = BaseOscillator(FREQ)
    osc.inc_phase(1)
    osc.inc_phase(1)
    assert osc.phase == 2


def test_base_mod_oscillator_phase_wraps():
    osc = BaseModOscillator(FREQ)
    osc.inc_phase(0.75)
    osc.inc_phase(0.5)
    assert osc.phase == pytest.approx(0.25)
    assert 0.0 <= osc.phase < 1.0


def test_sine_starts_at_zero():
    values = _render(_configure(SineOscillator(FREQ)))
    assert values[0] == pytest.approx(0.0, abs=1e-12)


def test_square_values():
    values = _render(_configure(SquareOscillator(FREQ)))
    assert set(values) <= {1.0, -1.0}
    assert values[:8] == [1.0] * 4 + [-1.0] * 4


def test_values_bounded():
    for osc in _plain_oscillators():
        osc.meta_process()
        values = list(osc.get_buffer())
        assert len(values) == SIZE
        assert all(-1.0 - 1e-12 <= v <= 1.0 + 1e-12 for v in values)


def test_phase_advances_by_buffer_size():
    for osc in _plain_oscillators():
        osc.meta_process()
        osc.get_buffer()
        assert osc.phase == SIZE


def test_periodic():
    period = int(RATE / FREQ)
    for osc in _plain_oscillators():
        osc.meta_process()
        values = list(osc.get_buffer())
        assert values[:period] == pytest.approx(values[period:2 * period])


def test_consecutive_buffers_continue():
    wholes = _plain_oscillators(SIZE)
    splits = _plain_oscillators(SIZE // 2)
    for whole_osc, split_osc in zip(wholes, splits):
        whole_osc.meta_process()
        whole = list(whole_osc.get_buffer())
        split_osc.meta_process()
        first = list(split_osc.get_buffer())
        split_osc.meta_process()
        second = list(split_osc.get_buffer())
        assert first + second == pytest.approx(whole)


def test_sine_half_period_antisymmetric():
    values = _render(_configure(SineOscillator(FREQ)))
    half = int(RATE / FREQ) // 2
    for n in range(half):
        assert values[n] == pytest.approx(-values[n + half], abs=1e-12)


def test_modulated_matches_fixed_frequency():
    pairs = [
        (SineOscillator(FREQ), ModSineOscillator(FREQ)),
        (SquareOscillator(FREQ), ModSquareOscillator(FREQ)),
        (SawtoothOscillator(FREQ), ModSawtoothOscillator(FREQ)),
        (TriangleOscillator(FREQ), ModTriangleOscillator(FREQ)),
    ]
    for plain_osc, mod_osc in pairs:
        _configure(plain_osc)
        _configure(mod_osc)
        plain_osc.meta_process()
        mod_osc.meta_process()
        plain = list(plain_osc.get_buffer())
        mod = list(mod_osc.get_buffer())
        assert mod == pytest.approx(plain, abs=1e-9)


def test_mod_zero_frequency_is_constant():
    sine = _render(_configure(ModSineOscillator(0.0)))
    square = _render(_configure(ModSquareOscillator(0.0)))
    assert all(v == 0.0 for v in sine)
    assert square == [1.0] * SIZE


def test_mod_frequency_from_module():
    source = SineOscillator(FREQ)
    osc = _configure(ModSineOscillator(source))
    assert osc.frequency.backward is source
    values = _render(osc)
    assert len(values) == SIZE
    assert all(-1.0 <= v <= 1.0 for v in values)


def test_mod_frequency_buffer_too_short():
    osc = ModSineOscillator(FREQ)
    osc.frequency.const_mod.info.out_buffer = 4
    _configure(osc, size=SIZE)
    with pytest.raises(IndexError):
        osc.meta_process()


def test_mod_oscillator_phase_stays_in_cycle():
    osc = _configure(ModSawtoothOscillator(FREQ * 3))
    _render(osc)
    assert 0.0 <= osc.phase < 1.0
    assert math.isfinite(osc.phase)