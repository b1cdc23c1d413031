"""
Render spectrum strips to 8 bit images.

A strip samples a conversion method at every integer wavelength in [start, stop), turns each sample into
px_per_wavelength identical pixel columns and repeats that row height times.  Channels are clamped to
[0, channel_max] and quantized with int(255.999 * c), so every value in [0, 1] lands within 1/255 of where it
started.

Images can be written as plain text PPM (P3) files, which is what the strip has always been, or as PNG through
matplotlib.
"""
import logging
import pathlib

import numpy as np
import matplotlib.image as mpimg

import spectrumrgb.wavelength as wv
from spectrumrgb.color_match import OutOfDomainError

logger = logging.getLogger(__name__)

QUANTIZE_SCALE = 255.999
ERROR_MODES = ("raise", "skip")


def quantize(values, channel_max=1.0):
    """
    Clamp color channels to [0, channel_max] and convert them to 8 bit integers.

    Parameters
    ----------
    values : array_like
        Color channels, any shape.
    channel_max : float, optional
        Upper clamp, in (0, 1].  Defaults to 1.0.

    Returns
    -------
    np.ndarray of dtype uint8, same shape as values.
    """
    if not 0.0 < channel_max <= 1.0:
        raise ValueError(f"quantize: channel_max must be in (0, 1], got {channel_max}.")
    values = np.clip(np.asarray(values, dtype=np.float64), 0.0, channel_max)
    return (QUANTIZE_SCALE * values).astype(np.uint8)


def dequantize(pixels):
    """Map 8 bit channels back to [0, 1]."""
    return np.asarray(pixels, dtype=np.float64) / 255.0


def sample_wavelengths(start, stop, px_per_wavelength=1):
    """The wavelength shown in each pixel column of a strip."""
    return np.repeat(np.arange(start, stop), px_per_wavelength)


def _convert_skipping(method, wavelengths, converter_options):
    convert = wv.converter(method, vectorized=False)
    colors = np.zeros((wavelengths.shape[0], 3))
    skipped = 0
    for i, wl in enumerate(wavelengths):
        try:
            colors[i] = convert(float(wl), **converter_options)
        except OutOfDomainError:
            skipped += 1
    if skipped:
        logger.warning(
            "%d of %d wavelengths could not be converted with the %s method and were painted black.",
            skipped, wavelengths.shape[0], method
        )
    return colors


def render_strip(
    method="physical", start=400, stop=700, px_per_wavelength=2, height=100, channel_max=1.0, on_error="raise",
    **converter_options
):
    """
    Render a horizontal spectrum strip.

    Parameters
    ----------
    method : str, optional
        "physical" or "approximate".  Defaults to "physical".
    start, stop : int, optional
        Integer wavelengths start <= wl < stop are sampled.  Default to 400 and 700.
    px_per_wavelength : int, optional
        Pixel columns per sample.  Defaults to 2.
    height : int, optional
        Pixel rows.  Defaults to 100.
    channel_max : float, optional
        See quantize().
    on_error : str, optional
        What to do with a wavelength the method cannot convert.  "raise" (the default) propagates the
        OutOfDomainError and renders nothing, "skip" paints that column black.
    converter_options
        Passed to the converter, see spectrumrgb.wavelength.convert().

    Returns
    -------
    np.ndarray of shape (height, (stop - start) * px_per_wavelength, 3) and dtype uint8
    """
    if start >= stop:
        raise ValueError(f"render_strip: start ({start}) must be < stop ({stop}).")
    if px_per_wavelength < 1 or height < 1:
        raise ValueError("render_strip: px_per_wavelength and height must be >= 1.")
    if on_error not in ERROR_MODES:
        raise ValueError(f"render_strip: on_error must be one of {ERROR_MODES}, got {on_error!r}.")

    wavelengths = sample_wavelengths(start, stop)
    if on_error == "raise":
        colors = wv.converter(method)(wavelengths, **converter_options)
    else:
        colors = _convert_skipping(method, wavelengths, converter_options)

    row = np.repeat(quantize(colors, channel_max), px_per_wavelength, axis=0)
    logger.debug(
        "rendered %s strip over [%s, %s) nm: %d x %d px", method, start, stop, row.shape[0], height
    )
    return np.repeat(row[np.newaxis], height, axis=0)


def write_ppm(path, pixels):
    """Write a (height, width, 3) uint8 array as an ASCII PPM, one pixel per line."""
    pixels = np.asarray(pixels, dtype=np.uint8)
    height, width, _ = pixels.shape
    with open(path, "w") as out_file:
        out_file.write(f"P3\n{width} {height}\n255\n")
        np.savetxt(out_file, pixels.reshape(-1, 3), fmt="%d")


def read_ppm(path):
    """Read back an ASCII PPM written by write_ppm()."""
    with open(path, "r") as in_file:
        tokens = in_file.read().split()
    if tokens[0] != "P3":
        raise ValueError(f"read_ppm: {path} is not an ASCII PPM file.")
    width, height, max_value = (int(t) for t in tokens[1:4])
    data = np.array([int(t) for t in tokens[4:]], dtype=np.int64)
    if data.shape[0] != width * height * 3:
        raise ValueError(f"read_ppm: {path} holds {data.shape[0]} values, expected {width * height * 3}.")
    return (data * 255 // max_value).astype(np.uint8).reshape(height, width, 3)


def write_png(path, pixels):
    mpimg.imsave(path, np.asarray(pixels, dtype=np.uint8), format="png")


WRITERS = {
    ".ppm": write_ppm,
    ".png": write_png,
}


def save(path, pixels):
    """Write pixels to path, in the format picked by its suffix.  Missing parent directories are created."""
    path = pathlib.Path(path)
    try:
        writer = WRITERS[path.suffix.lower()]
    except KeyError as e:
        raise ValueError(f"save: unsupported image format {path.suffix!r}, use one of {sorted(WRITERS)}.") from e
    path.parent.mkdir(parents=True, exist_ok=True)
    writer(path, pixels)
    logger.info("%s created successfully.", path)
    return path
