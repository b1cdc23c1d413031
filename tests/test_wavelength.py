import pytest

import spectrumrgb.wavelength as wv
from spectrumrgb.approximate import approximate_convert
from spectrumrgb.color_match import OutOfDomainError
from spectrumrgb.physical import physical_convert


def test_convert_defaults_to_physical():
    assert wv.convert(550) == physical_convert(550)
    assert wv.convert(550, normalize=True) == physical_convert(550, normalize=True)


def test_convert_approximate():
    assert wv.convert(300, method="approximate") == (0.0, 0.0, 0.0)
    assert wv.convert(470, method="approximate") == approximate_convert(470)


def test_convert_propagates_out_of_domain():
    with pytest.raises(OutOfDomainError):
        wv.convert(380, method="physical")


def test_unknown_method():
    with pytest.raises(ValueError, match="method must be one of"):
        wv.convert(550, method="blackbody")


def test_default_ranges():
    assert wv.default_range("physical") == (400, 750)
    assert wv.default_range("approximate") == (wv.VISIBLE_MIN, wv.VISIBLE_MAX)


@pytest.mark.parametrize("method, rows", [("approximate", 401), ("physical", 351)])
def test_rgb_table_is_clamped(method, rows):
    table = wv.rgb(method)
    assert table.shape == (rows, 3)
    assert table.min() >= 0.0
    assert table.max() <= 1.0


def test_rgb_table_custom_range():
    assert wv.rgb("physical", start=450, stop=460).shape == (11, 3)


def test_colormap():
    cmap = wv.colormap()
    assert cmap.N == 401
    assert cmap.name == "spectrum_approximate"


def test_rainbow_is_inside_the_visible_range():
    assert all(wv.VISIBLE_MIN <= wl <= wv.VISIBLE_MAX for wl in wv.RAINBOW_6)
    assert wv.RAINBOW_6 == sorted(wv.RAINBOW_6, reverse=True)
