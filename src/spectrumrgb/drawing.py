"""
Utilities for drawing spectrum strips with matplotlib.

plot_to_axis() draws a strip rendered by spectrumrgb.image onto an existing set of axes, with the x axis in
nanometers so that it can sit under other wavelength plots.  standalone_plot() makes a figure for it and shows it.
"""
import matplotlib.pyplot as plt

import spectrumrgb.image as image


def plot_to_axis(ax, method="physical", start=400, stop=700, height=100, **kwargs):
    """
    Draw a spectrum strip onto ax.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
    method, start, stop, height
        See spectrumrgb.image.render_strip().
    kwargs
        Any other render_strip() argument.  px_per_wavelength defaults to 1 here, since imshow does its own scaling.

    Returns
    -------
    The AxesImage created by imshow.
    """
    kwargs.setdefault("px_per_wavelength", 1)
    pixels = image.render_strip(method=method, start=start, stop=stop, height=height, **kwargs)
    rtn = ax.imshow(
        pixels,
        origin="lower",
        extent=(start, stop, 0, height),
        interpolation="nearest",
    )
    ax.set_aspect("auto")
    ax.set_xlabel("wavelength (nm)")
    ax.set_yticks([])
    ax.set_title(f"{method} spectrum")
    return rtn


def standalone_plot(method="physical", fig_size=(6.0, 1.5), show=True, **kwargs):
    fig, axis = plt.subplots(figsize=fig_size, layout="constrained")
    plot_to_axis(axis, method, **kwargs)
    if show:
        plt.show()
    return fig
