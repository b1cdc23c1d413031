"""
Empirical wavelength to RGB approximation.

Based on
  http://www.physics.sfasu.edu/astro/color/spectra.html
  RGB VALUES FOR VISIBLE WAVELENGTHS   by Dan Bruton (astro@tamu.edu)

Each channel is a linear ramp inside a set of spectral bands, which is then dimmed near the ends of the visible
spectrum and raised to the power GAMMA.  Bands are half open, [start, stop), so a wavelength sitting exactly on a
boundary belongs to the band that starts there.  Anything outside of [380, 781) is black.  There is no error path.
"""
import numpy as np

GAMMA = 0.80
BAND_MIN = 380.0
BAND_MAX = 781.0


def _rising(start, stop):
    def ramp(wl):
        return (wl - start) / (stop - start)
    return ramp


def _falling(start, stop):
    def ramp(wl):
        return -(wl - stop) / (stop - start)
    return ramp


# (start, stop, (r, g, b)), each channel either a constant or a ramp over the band
BANDS = (
    (BAND_MIN, 440.0, (_falling(380.0, 440.0), 0.0, 1.0)),
    (440.0, 490.0, (0.0, _rising(440.0, 490.0), 1.0)),
    (490.0, 510.0, (0.0, 1.0, _falling(490.0, 510.0))),
    (510.0, 580.0, (_rising(510.0, 580.0), 1.0, 0.0)),
    (580.0, 645.0, (1.0, _falling(580.0, 645.0), 0.0)),
    (645.0, BAND_MAX, (1.0, 0.0, 0.0)),
)


def _violet_edge(wl):
    return 0.3 + 0.7 * (wl - 380.0) / (420.0 - 380.0)


def _red_edge(wl):
    return 0.3 + 0.7 * (780.0 - wl) / (780.0 - 700.0)


FALLOFF_BANDS = (
    (BAND_MIN, 420.0, _violet_edge),
    (420.0, 701.0, 1.0),
    (701.0, BAND_MAX, _red_edge),
)


def _evaluate(term, wl):
    if callable(term):
        return term(wl)
    return np.full_like(wl, term)


def _select(bands, wl, pick):
    return np.select(
        [np.logical_and(wl >= start, wl < stop) for start, stop, _ in bands],
        [_evaluate(pick(terms), wl) for _, _, terms in bands],
        default=0.0,
    )


def raw_rgb(wavelengths):
    """
    The band ramps, before falloff and gamma.

    Returns
    -------
    np.ndarray of shape (N, 3)
    """
    wl = np.atleast_1d(np.asarray(wavelengths, dtype=np.float64))
    return np.stack([_select(BANDS, wl, lambda terms: terms[channel]) for channel in range(3)], axis=-1)


def falloff(wavelengths):
    """
    Brightness attenuation near the ends of the visible spectrum, in [0, 1].  Has the same shape as its input.
    """
    wl = np.asarray(wavelengths, dtype=np.float64)
    return _select(FALLOFF_BANDS, np.atleast_1d(wl), lambda term: term).reshape(wl.shape)


def approximate_rgb(wavelengths):
    """
    Convert an array of wavelengths (nm) to gamma corrected RGB.

    Returns
    -------
    np.ndarray of shape (N, 3), values in [0, 1]
    """
    wl = np.atleast_1d(np.asarray(wavelengths, dtype=np.float64))
    raw = raw_rgb(wl)
    dimmed = raw * falloff(wl)[:, np.newaxis]
    return np.where(raw == 0.0, 0.0, np.power(np.maximum(dimmed, 0.0), GAMMA))


def approximate_convert(wavelength):
    """
    Convert a single wavelength (nm) to gamma corrected RGB.

    Returns
    -------
    3-tuple of floats
    """
    r, g, b = approximate_rgb(wavelength)[0]
    return float(r), float(g), float(b)
