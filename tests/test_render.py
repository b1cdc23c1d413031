import logging

import pytest

from spectrumrgb import image, render
from spectrumrgb.settings import RenderSettings


def test_renders_default_strip(tmp_path):
    out = tmp_path / "spectrum.ppm"
    assert render.main([str(out), "--height", "3"]) == 0
    pixels = image.read_ppm(out)
    assert pixels.shape == (3, 600, 3)
    assert pixels.any()


def test_out_of_domain_range_fails(tmp_path, caplog):
    out = tmp_path / "spectrum.ppm"
    with caplog.at_level(logging.ERROR):
        assert render.main([str(out), "--start", "390"]) == 1
    assert "outside" in caplog.text
    assert not out.exists()


def test_skip_mode_renders_anyway(tmp_path):
    out = tmp_path / "spectrum.ppm"
    assert render.main([str(out), "--start", "390", "--on-error", "skip", "--height", "1"]) == 0
    assert image.read_ppm(out)[0, :20].max() == 0


def test_command_line_beats_settings_file(tmp_path):
    settings_path = tmp_path / "render.dat"
    RenderSettings(method="approximate", start=380, stop=781, height=50).save(settings_path)
    out = tmp_path / "spectrum.png"
    assert render.main([str(out), "--settings", str(settings_path), "--height", "2"]) == 0
    assert out.exists()

    saved = tmp_path / "final.dat"
    assert render.main([
        str(out), "--settings", str(settings_path), "--height", "2", "--save-settings", str(saved)
    ]) == 0
    final = RenderSettings.from_file(saved)
    assert (final.method, final.start, final.stop, final.height) == ("approximate", 380, 781, 2)
    assert final.output == str(out)


def test_invalid_settings_fail(tmp_path):
    assert render.main([str(tmp_path / "s.ppm"), "--start", "700", "--stop", "400"]) == 1


def test_missing_settings_file_fails(tmp_path):
    assert render.main([str(tmp_path / "s.ppm"), "--settings", str(tmp_path / "nope.dat")]) == 1


def test_parser_rejects_unknown_method():
    with pytest.raises(SystemExit):
        render.build_parser().parse_args(["--method", "blackbody"])


def test_flags_left_unset_do_not_override():
    args = render.build_parser().parse_args(["--normalize"])
    settings = render.settings_from_args(args)
    assert settings.normalize is True
    assert settings.interpolate is False
    assert settings.output == RenderSettings.DEFAULTS["output"]
