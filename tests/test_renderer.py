"""End-to-end render and CLI tests."""

import logging

import pytest

from hidden_line_surface import SurfaceRenderer, RenderConfig, COL_BLACK
from hidden_line_surface import cli


def test_default_config_matches_reference_constants():
    config = RenderConfig()
    assert (config.width, config.height) == (1920, 1080)
    assert (config.x_min, config.x_max, config.y_min, config.y_max) == (-15, 15, -15, 15)
    assert (config.x_scale, config.y_scale, config.z_scale) == (20.0, 20.0, 350.0)
    assert (config.big_step, config.small_step) == (0.25, 0.001)
    assert config.background == 0xFF000000
    assert config.foreground == 0xFFFFFFFF


@pytest.mark.parametrize("kwargs", [
    dict(width=0), dict(height=-1), dict(small_step=0.0),
    dict(big_step=-0.25), dict(x_min=1.0, x_max=0.0),
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_config_is_immutable():
    config = RenderConfig()
    with pytest.raises(AttributeError):
        config.width = 10


def test_with_colors_keeps_unset_tone():
    config = RenderConfig().with_colors(foreground=0xFF00FF00)
    assert config.foreground == 0xFF00FF00
    assert config.background == COL_BLACK


def test_render_draws_surface(coarse_full_config, caplog):
    renderer = SurfaceRenderer(coarse_full_config)
    with caplog.at_level(logging.INFO, logger="hidden_line_surface"):
        canvas = renderer.render()
    assert (canvas.w, canvas.h) == (1920, 1080)
    assert canvas.count_foreground(COL_BLACK) > 1000
    # The central bump rises well above the canvas midline.
    assert any(canvas.get_pixel(x, y) != COL_BLACK
               for x in range(950, 971) for y in range(150, 540))
    assert "lit pixels" in caplog.text


def test_save_writes_both_files(tmp_path, small_config):
    renderer = SurfaceRenderer(small_config)
    canvas = renderer.render()
    tga, bmp = renderer.save(canvas, tmp_path / "a.tga", tmp_path / "a.bmp")
    n = small_config.width * small_config.height * 4
    assert tga.stat().st_size == 18 + n
    assert bmp.stat().st_size == 54 + n


@pytest.fixture
def fast_cli(monkeypatch, small_config):
    monkeypatch.setattr(cli, "RenderConfig", lambda: small_config)


def test_cli_writes_default_files(tmp_path, monkeypatch, fast_cli, small_config):
    monkeypatch.chdir(tmp_path)
    assert cli.main([]) == 0
    n = small_config.width * small_config.height * 4
    assert (tmp_path / "output.tga").stat().st_size == 18 + n
    assert (tmp_path / "output.bmp").stat().st_size == 54 + n


def test_cli_colors(tmp_path, fast_cli):
    tga = tmp_path / "c.tga"
    assert cli.main(["--tga", str(tga), "--bmp", str(tmp_path / "c.bmp"),
                     "--fg-color", "#00FF00", "--bg-color", "102030"]) == 0
    data = tga.read_bytes()
    # First pixel is background: 0xFF102030 little-endian.
    assert data[18:22] == bytes([0x30, 0x20, 0x10, 0xFF])
    assert bytes([0x00, 0xFF, 0x00, 0xFF]) in data[18:]


def test_cli_rejects_bad_color(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--fg-color", "#12345"])
    assert exc.value.code == 2
    assert "invalid color" in capsys.readouterr().err


def test_cli_reports_io_failure(tmp_path, fast_cli, capsys):
    missing = tmp_path / "nope" / "x.tga"
    assert cli.main(["--tga", str(missing), "--bmp", str(tmp_path / "x.bmp")]) == 1
    assert capsys.readouterr().err.startswith("Error:")
