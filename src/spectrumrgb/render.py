"""
Command line entry point: render a spectrum strip to an image file.

    spectrumrgb-render images/spectrum.ppm --method physical --start 400 --stop 700

Settings can be loaded from and saved to a pickled settings file.  Flags given on the command line take precedence
over the loaded file.
"""
import argparse
import logging
import sys

import spectrumrgb.drawing as drawing
import spectrumrgb.image as image
from spectrumrgb.settings import RenderSettings, METHODS, ERROR_MODES

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Render a spectrum strip, colored by wavelength, to an image file.")
    parser.add_argument(
        "output", nargs="?", default=None,
        help=f"Image to write, .ppm or .png.  Defaults to {RenderSettings.DEFAULTS['output']}."
    )
    parser.add_argument("--method", choices=METHODS, default=None, help="Wavelength to color conversion.")
    parser.add_argument("--start", type=int, default=None, help="First wavelength sampled, in nm.")
    parser.add_argument("--stop", type=int, default=None, help="Wavelength sampling stops before this, in nm.")
    parser.add_argument(
        "--px-per-wavelength", type=int, default=None, dest="px_per_wavelength",
        help="Pixel columns per 1 nm sample."
    )
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels.")
    parser.add_argument(
        "--channel-max", type=float, default=None, dest="channel_max",
        help="Clamp color channels to [0, channel_max] before quantizing."
    )
    parser.add_argument(
        "--on-error", choices=ERROR_MODES, default=None, dest="on_error",
        help="Abort on wavelengths the method cannot convert, or paint them black."
    )
    parser.add_argument(
        "--normalize", action="store_true", default=None,
        help="Physical method: use chromaticity coordinates instead of raw XYZ."
    )
    parser.add_argument(
        "--interpolate", action="store_true", default=None,
        help="Physical method: interpolate the color matching table instead of truncating."
    )
    parser.add_argument("--settings", default=None, help="Load settings from this file first.")
    parser.add_argument("--save-settings", default=None, dest="save_settings", help="Save the final settings here.")
    parser.add_argument("--show", action="store_true", help="Also display the strip with matplotlib.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def settings_from_args(args):
    settings = RenderSettings.from_file(args.settings) if args.settings else RenderSettings()
    overrides = {key: value for key, value in vars(args).items() if key in RenderSettings.DEFAULTS}
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return settings.validate()


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
        pixels = image.render_strip(
            method=settings.method,
            start=settings.start,
            stop=settings.stop,
            px_per_wavelength=settings.px_per_wavelength,
            height=settings.height,
            channel_max=settings.channel_max,
            on_error=settings.on_error,
            **settings.converter_options()
        )
        image.save(settings.output, pixels)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if args.save_settings:
        settings.save(args.save_settings)
    if args.show:
        drawing.standalone_plot(
            settings.method, start=settings.start, stop=settings.stop, on_error=settings.on_error,
            **settings.converter_options()
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
