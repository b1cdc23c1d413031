"""
Wavelength to sRGB via the CIE color matching functions.

The conversion is wavelength -> (X, Y, Z) from the color matching table -> linear sRGB through the fixed D65 matrix
from http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html#WSMatrices -> gamma encoded sRGB.

By default the raw tristimulus values are fed to the matrix, which is what the spectrum images this package draws
have always looked like.  Passing normalize=True feeds the chromaticity coordinates x, y, z = X, Y, Z / (X + Y + Z)
instead, which gives every wavelength the same total magnitude and so a much flatter looking spectrum.

Results are not clamped; channels can be negative or exceed 1 and it is up to the caller to clamp them.
"""
import math

import numpy as np

import spectrumrgb.color_match as cm

# CIE XYZ -> linear sRGB, D65 white point
XYZ_TO_LINEAR_SRGB = np.array((
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
))
XYZ_TO_LINEAR_SRGB.setflags(write=False)

SRGB_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

DOMAIN_MIN = cm.TABLE_MIN
DOMAIN_MAX = cm.TABLE_MAX


def encode_srgb(c):
    """
    sRGB gamma encoding, applied elementwise.  Values at or below the threshold, negatives included, take the
    linear segment.
    """
    c = np.asarray(c, dtype=np.float64)
    return np.where(
        c <= SRGB_THRESHOLD,
        12.92 * c,
        1.055 * np.power(np.maximum(c, SRGB_THRESHOLD), 1.0 / SRGB_GAMMA) - 0.055,
    )


def xyz_to_linear_srgb(xyz):
    """Apply XYZ_TO_LINEAR_SRGB to a (3,) or (N, 3) array."""
    return np.asarray(xyz, dtype=np.float64) @ XYZ_TO_LINEAR_SRGB.T


def chromaticity(xyz):
    """
    Convert tristimulus values to chromaticity coordinates (x, y, z), with z = 1 - x - y.  Zero magnitude rows
    map to (0, 0, 0).
    """
    xyz = np.atleast_2d(np.asarray(xyz, dtype=np.float64))
    magnitude = np.sum(xyz, axis=1, keepdims=True)
    safe = np.where(magnitude == 0.0, 1.0, magnitude)
    out = np.empty_like(xyz)
    out[:, :2] = xyz[:, :2] / safe
    out[:, 2] = 1.0 - out[:, 0] - out[:, 1]
    out[magnitude[:, 0] == 0.0] = 0.0
    return out


def _tristimulus(wavelengths, interpolate):
    wavelengths = np.atleast_1d(np.asarray(wavelengths, dtype=np.float64))
    if interpolate:
        return cm.interpolate(wavelengths)

    finite = np.isfinite(wavelengths)
    samples = np.floor(np.where(finite, wavelengths, 0.0))
    bad = np.logical_not(np.logical_and.reduce((finite, samples >= DOMAIN_MIN, samples <= DOMAIN_MAX)))
    if np.any(bad):
        raise cm.OutOfDomainError(wavelengths[bad][0])
    return cm.lookup_array(samples)


def physical_rgb(wavelengths, normalize=False, interpolate=False):
    """
    Convert an array of wavelengths to gamma encoded sRGB.

    Parameters
    ----------
    wavelengths : float or array_like
        Wavelengths in nm.  Real values are truncated down to the 1 nm table sample below them, so the usable
        domain is [DOMAIN_MIN, DOMAIN_MAX + 1).
    normalize : bool, optional
        If True, convert the tristimulus values to chromaticity coordinates before the matrix.  Defaults to False.
    interpolate : bool, optional
        If True, linearly interpolate the table instead of truncating, in which case the domain is
        [DOMAIN_MIN, DOMAIN_MAX].  Defaults to False.

    Returns
    -------
    np.ndarray of shape (N, 3)

    Raises
    ------
    color_match.OutOfDomainError
        If any wavelength is outside of the domain.  Nothing is computed in that case.
    """
    xyz = _tristimulus(wavelengths, interpolate)
    if normalize:
        xyz = chromaticity(xyz)
    return encode_srgb(xyz_to_linear_srgb(xyz))


def physical_convert(wavelength, normalize=False, interpolate=False):
    """
    Convert a single wavelength to gamma encoded sRGB.  See physical_rgb() for the parameters.

    Returns
    -------
    3-tuple of floats
    """
    try:
        finite = not isinstance(wavelength, bool) and math.isfinite(wavelength)
    except OverflowError as e:
        raise cm.OutOfDomainError(wavelength) from e
    if not finite:
        raise cm.OutOfDomainError(wavelength)
    r, g, b = physical_rgb(wavelength, normalize=normalize, interpolate=interpolate)[0]
    return float(r), float(g), float(b)
