import pytest

from maec.dsp.ft import cos_basis, length_ft, length_ift, sin_basis


def test_basis_at_zero_phase():
    assert cos_basis(0, 16, 3) == 1.0
    assert sin_basis(0, 16, 3) == 0.0


@pytest.mark.parametrize("phase", range(8))
def test_basis_pythagorean(phase):
    c = cos_basis(phase, 8, 1.5)
    s = sin_basis(phase, 8, 1.5)
    assert c * c + s * s == pytest.approx(1.0)


def test_basis_full_period():
    assert cos_basis(16, 16, 1) == pytest.approx(1.0)
    assert sin_basis(16, 16, 1) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("size", [2, 8, 64, 1000])
def test_length_round_trip(size):
    assert length_ift(length_ft(size)) == size


def test_length_ft_odd_matches_even_below():
    assert length_ft(9) == length_ft(8)