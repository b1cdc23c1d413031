"""
CIE color matching functions, tabulated every 1 nm.

The table holds the 10-deg XYZ CMFs transformed from the CIE (2006) 2-deg LMS cone fundamentals, as published at
http://cvrl.ioo.ucl.ac.uk/cmfs.htm.  The values are taken from the copy that colour-science ships under the name
"CIE 2015 10 Degree Standard Observer", restricted to 400 - 750 nm.  Row i of the table is the wavelength
TABLE_MIN + i, so the table has 351 rows and both ends of the range are valid samples.

The table is loaded once, at import, and is marked read only.  Every access goes through lookup(), lookup_array()
or interpolate(), all of which reject wavelengths the table does not cover with an OutOfDomainError rather than
reading a neighboring row.
"""
import math
import numbers

import numpy as np
from scipy.interpolate import interp1d
import colour

OBSERVER = "CIE 2015 10 Degree Standard Observer"
TABLE_MIN = 400
TABLE_MAX = 750


class OutOfDomainError(ValueError):
    """
    Raised when a wavelength falls outside of the range covered by the color matching table.

    Parameters
    ----------
    wavelength : float
        The offending wavelength, in nm.
    minimum, maximum : float, optional
        The inclusive bounds of the valid range.  Default to the table bounds.
    """
    def __init__(self, wavelength, minimum=TABLE_MIN, maximum=TABLE_MAX):
        self.wavelength = wavelength
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"wavelength {wavelength} nm is outside of the color matching table, which covers "
            f"[{minimum}, {maximum}] nm in 1 nm steps."
        )


def _load_table(observer=OBSERVER):
    cmfs = colour.MSDS_CMFS[observer]
    wavelengths = np.asarray(cmfs.wavelengths)
    mask = np.logical_and(wavelengths >= TABLE_MIN, wavelengths <= TABLE_MAX)
    table = np.array(cmfs.values[mask], dtype=np.float64)
    if table.shape != (TABLE_MAX - TABLE_MIN + 1, 3):
        raise ValueError(
            f"color_match: observer {observer} does not provide 1 nm samples over [{TABLE_MIN}, {TABLE_MAX}] nm."
        )
    table.setflags(write=False)
    return table


TABLE = _load_table()
WAVELENGTHS = np.arange(TABLE_MIN, TABLE_MAX + 1)
WAVELENGTHS.setflags(write=False)

_interpolator = interp1d(WAVELENGTHS, TABLE, axis=0, bounds_error=True)


def covers(wavelength):
    """Whether lookup() will accept this wavelength."""
    if isinstance(wavelength, bool) or not isinstance(wavelength, numbers.Real):
        return False
    if isinstance(wavelength, numbers.Integral):
        return TABLE_MIN <= wavelength <= TABLE_MAX
    wavelength = float(wavelength)
    return math.isfinite(wavelength) and wavelength.is_integer() and TABLE_MIN <= wavelength <= TABLE_MAX


def lookup(wavelength):
    """
    Get the tristimulus values (X, Y, Z) for a single wavelength.

    Parameters
    ----------
    wavelength : int
        The wavelength in nm.  Must be integral (550 and 550.0 are both fine, 550.5 is not) and inside
        [TABLE_MIN, TABLE_MAX].

    Returns
    -------
    3-tuple of floats

    Raises
    ------
    OutOfDomainError
        If the wavelength is not an integral sample of the table.
    """
    if not covers(wavelength):
        raise OutOfDomainError(wavelength)
    x, y, z = TABLE[int(wavelength) - TABLE_MIN]
    return float(x), float(y), float(z)


def lookup_array(wavelengths):
    """
    Vectorized lookup().  Every element is validated, and the first bad one is reported.

    Returns
    -------
    np.ndarray of shape (N, 3)
    """
    raw = np.atleast_1d(np.asarray(wavelengths))
    if raw.dtype.kind not in "iuf":
        raise OutOfDomainError(raw[0] if raw.size else wavelengths)
    wavelengths = raw.astype(np.float64)
    bad = np.logical_not(np.logical_and.reduce((
        np.isfinite(wavelengths),
        np.floor(wavelengths) == wavelengths,
        wavelengths >= TABLE_MIN,
        wavelengths <= TABLE_MAX,
    )))
    if np.any(bad):
        raise OutOfDomainError(wavelengths[bad][0])
    return TABLE[wavelengths.astype(np.int64) - TABLE_MIN]


def interpolate(wavelengths):
    """
    Linearly interpolate the table at real valued wavelengths inside [TABLE_MIN, TABLE_MAX].

    Accepts a scalar or an array, and returns an array of shape (3,) or (N, 3) respectively.
    """
    wavelengths = np.asarray(wavelengths, dtype=np.float64)
    bad = np.logical_not(np.logical_and(wavelengths >= TABLE_MIN, wavelengths <= TABLE_MAX))
    if np.any(bad):
        raise OutOfDomainError(np.atleast_1d(wavelengths)[np.atleast_1d(bad)][0])
    return _interpolator(wavelengths)
