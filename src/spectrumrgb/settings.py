import logging
import pickle

import spectrumrgb.wavelength as wv
from spectrumrgb.image import ERROR_MODES

logger = logging.getLogger(__name__)

METHODS = tuple(wv.METHODS)


class Settings:
    """
    A simple settings data class, which is basically just a wrapper for a dict that exposes its keys as attributes
    """
    def __init__(self, **kwargs):
        object.__setattr__(self, "dict", dict(**kwargs))

    def keys(self):
        return self.dict.keys()

    def update(self, updates):
        self.dict.update(updates)

    def establish_defaults(self, **kwargs):
        for key, value in kwargs.items():
            self.dict.setdefault(key, value)
        return set(kwargs.keys())

    def get_subset(self, subset):
        return {key: self.dict[key] for key in subset}

    def __getattr__(self, key):
        try:
            return object.__getattribute__(self, "dict")[key]
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        self.dict[key] = value

    def __eq__(self, other):
        return isinstance(other, Settings) and self.dict == other.dict

    def __repr__(self):
        return f"{type(self).__name__}({self.dict})"

    def load(self, filename):
        with open(filename, "rb") as inFile:
            self.update(pickle.load(inFile))
        logger.debug("loaded settings from %s", filename)

    def save(self, filename):
        with open(filename, "wb") as outFile:
            pickle.dump(self.dict, outFile)
        logger.debug("saved settings to %s", filename)


class RenderSettings(Settings):
    """
    Everything needed to render a spectrum strip.

    Defaults reproduce the classic strip: the physical method sampled every 1 nm over [400, 700), two pixel columns
    per sample and 100 rows, written to images/spectrum.ppm.

    Keys
    ----
    method : str
        "physical" or "approximate".
    start, stop : int
        The strip covers integer wavelengths start <= wl < stop, in nm.
    px_per_wavelength : int
        Pixel columns per wavelength sample.
    height : int
        Pixel rows.
    channel_max : float
        Channels are clamped to [0, channel_max] before quantizing, must be in (0, 1].
    on_error : str
        "raise" to abort on a wavelength the method cannot convert, "skip" to paint it black.
    normalize, interpolate : bool
        Options for the physical method, ignored by the approximate one.
    output : str
        Where the image is written.  The suffix picks the format, .ppm or .png.
    """
    DEFAULTS = {
        "method": "physical",
        "start": 400,
        "stop": 700,
        "px_per_wavelength": 2,
        "height": 100,
        "channel_max": 1.0,
        "on_error": "raise",
        "normalize": False,
        "interpolate": False,
        "output": "images/spectrum.ppm",
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.establish_defaults(**self.DEFAULTS)

    @classmethod
    def from_file(cls, filename):
        settings = cls()
        settings.load(filename)
        return settings

    def converter_options(self):
        if self.method == "physical":
            return self.get_subset(("normalize", "interpolate"))
        return {}

    def validate(self):
        """Raise a ValueError describing the first invalid key, if any."""
        if self.method not in METHODS:
            raise ValueError(f"RenderSettings: method must be one of {METHODS}, got {self.method!r}.")
        if self.on_error not in ERROR_MODES:
            raise ValueError(f"RenderSettings: on_error must be one of {ERROR_MODES}, got {self.on_error!r}.")
        if self.start >= self.stop:
            raise ValueError(f"RenderSettings: start ({self.start}) must be < stop ({self.stop}).")
        if self.px_per_wavelength < 1 or self.height < 1:
            raise ValueError("RenderSettings: px_per_wavelength and height must be >= 1.")
        if not 0.0 < self.channel_max <= 1.0:
            raise ValueError(f"RenderSettings: channel_max must be in (0, 1], got {self.channel_max}.")
        return self
