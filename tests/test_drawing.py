import matplotlib.pyplot as plt

from spectrumrgb import drawing


def test_plot_to_axis_uses_nanometer_extent():
    fig, ax = plt.subplots()
    artist = drawing.plot_to_axis(ax, "approximate", start=380, stop=781, height=10)
    assert artist.get_array().shape == (10, 401, 3)
    assert tuple(artist.get_extent()) == (380, 781, 0, 10)
    assert ax.get_xlabel() == "wavelength (nm)"
    plt.close(fig)


def test_standalone_plot_without_showing():
    fig = drawing.standalone_plot("physical", show=False, height=5)
    assert len(fig.axes) == 1
    plt.close(fig)
