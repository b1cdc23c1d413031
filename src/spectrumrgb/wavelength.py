"""
Utilities associated with wavelength and color.

The public API of this module picks between the two wavelength to color conversions this package implements:

    physical : CIE color matching functions + the sRGB matrix, see spectrumrgb.physical
    approximate : piecewise linear band ramps, see spectrumrgb.approximate

convert() turns one wavelength in nanometers into an (r, g, b) triple with either method, and rgb() tabulates a
method every 1 nm into an array that can be used directly as a matplotlib colormap.

It also exposes some useful constants, like the wavelength limits and the wavelengths associated with various colors.
"""
import numpy as np
import matplotlib as mpl

import spectrumrgb.physical as physical
import spectrumrgb.approximate as approximate

# Various useful wavelength related constants
VISIBLE_MIN = 380
VISIBLE_MAX = 780

RED = 680
ORANGE = 620
YELLOW = 575
GREEN = 510
BLUE = 450
PURPLE = 400

RAINBOW_6 = [RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE]

# method name -> (vectorized converter, scalar converter, default (start, stop) in nm)
METHODS = {
    "physical": (physical.physical_rgb, physical.physical_convert, (physical.DOMAIN_MIN, physical.DOMAIN_MAX)),
    "approximate": (approximate.approximate_rgb, approximate.approximate_convert, (VISIBLE_MIN, VISIBLE_MAX)),
}


def _method(method):
    try:
        return METHODS[method]
    except KeyError as e:
        raise ValueError(f"wavelength: method must be one of {sorted(METHODS)}, got {method!r}.") from e


def converter(method, vectorized=True):
    """Get the conversion function for a method name."""
    vector_fn, scalar_fn, _ = _method(method)
    return vector_fn if vectorized else scalar_fn


def default_range(method):
    """The (start, stop) wavelength range, in nm and inclusive, over which a method is meaningful."""
    return _method(method)[2]


def convert(wavelength, method="physical", **options):
    """
    Convert a single wavelength in nm to an (r, g, b) triple.

    Parameters
    ----------
    wavelength : float
    method : str, optional
        "physical" (the default) or "approximate".
    options
        Passed to the converter.  The physical converter accepts normalize and interpolate, the approximate
        converter takes none.
    """
    return converter(method, vectorized=False)(wavelength, **options)


def rgb(method="approximate", start=None, stop=None, **options):
    """
    Tabulate a method every 1 nm from start to stop, inclusive, clamped to [0, 1].  start and stop default to
    default_range(method).

    To turn to a mpl colormap, use mpl.colors.ListedColormap(rgb()), or colormap().
    """
    default_start, default_stop = default_range(method)
    start = default_start if start is None else start
    stop = default_stop if stop is None else stop
    return np.clip(converter(method)(np.arange(start, stop + 1), **options), 0.0, 1.0)


def colormap(method="approximate", **kwargs):
    """A matplotlib colormap that runs through the spectrum, from violet to red."""
    return mpl.colors.ListedColormap(rgb(method, **kwargs), name=f"spectrum_{method}")
