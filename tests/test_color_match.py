import math

import numpy as np
import pytest

import spectrumrgb.color_match as cm


def test_table_covers_400_to_750_inclusive():
    assert cm.TABLE.shape == (351, 3)
    assert cm.WAVELENGTHS[0] == 400
    assert cm.WAVELENGTHS[-1] == 750


def test_table_is_read_only():
    with pytest.raises(ValueError):
        cm.TABLE[0, 0] = 1.0


def test_table_is_non_negative():
    assert np.all(cm.TABLE >= 0.0)


def test_lookup_reads_the_matching_row():
    assert cm.lookup(400) == tuple(cm.TABLE[0])
    assert cm.lookup(550) == tuple(cm.TABLE[150])
    assert cm.lookup(750) == tuple(cm.TABLE[350])


def test_lookup_accepts_integral_floats():
    assert cm.lookup(550.0) == cm.lookup(550)
    assert cm.lookup(np.int64(550)) == cm.lookup(550)


@pytest.mark.parametrize("wavelength", [399, 751, 550.5, math.nan, math.inf, True, "550", 10**400])
def test_lookup_rejects_uncovered_wavelengths(wavelength):
    with pytest.raises(cm.OutOfDomainError):
        cm.lookup(wavelength)
    assert not cm.covers(wavelength)


def test_out_of_domain_error_details():
    with pytest.raises(ValueError) as info:
        cm.lookup(399)
    err = info.value
    assert isinstance(err, cm.OutOfDomainError)
    assert err.wavelength == 399
    assert (err.minimum, err.maximum) == (400, 750)
    assert "outside" in str(err)


def test_lookup_array_matches_lookup():
    wavelengths = [400, 475, 550, 750]
    table = cm.lookup_array(wavelengths)
    assert table.shape == (4, 3)
    for row, wl in zip(table, wavelengths):
        assert tuple(row) == cm.lookup(wl)


@pytest.mark.parametrize("wavelengths", [["550"], [True, False], [10**400]])
def test_lookup_array_rejects_non_numeric_input(wavelengths):
    with pytest.raises(cm.OutOfDomainError):
        cm.lookup_array(wavelengths)


def test_lookup_array_reports_first_bad_wavelength():
    with pytest.raises(cm.OutOfDomainError) as info:
        cm.lookup_array([500, 760, 300])
    assert info.value.wavelength == 760


def test_interpolate_hits_samples_and_midpoints():
    np.testing.assert_allclose(cm.interpolate(550), cm.TABLE[150])
    np.testing.assert_allclose(cm.interpolate(550.5), (cm.TABLE[150] + cm.TABLE[151]) / 2)
    assert cm.interpolate([400.0, 750.0]).shape == (2, 3)


@pytest.mark.parametrize("wavelength", [399.9, 750.1, math.nan])
def test_interpolate_rejects_outside_table(wavelength):
    with pytest.raises(cm.OutOfDomainError):
        cm.interpolate(wavelength)


@pytest.mark.parametrize("wavelength, expected", [
    (400, (0.01879338, 0.002589775, 0.08508254)),
    (550, (0.537417, 0.99075, 0.002323578)),
    (750, (0.0002556624, 9.931439e-05, 0.0)),
])
def test_table_holds_published_cvrl_values(wavelength, expected):
    assert cm.lookup(wavelength) == pytest.approx(expected, rel=1e-6, abs=1e-12)
