import os

import pytest
from PIL import Image

from revflag.colors import Color, ParsedColors
from revflag.flag import main, parse_stripe_ids, render_flag, saved_filename

RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)


def _palette(*colors):
    return ParsedColors(colors=list(colors))


def _assets(tmp_path, settings=None, colors="r255\ng255\nb255\n"):
    assets = tmp_path / "assets"
    assets.mkdir()
    if settings is not None:
        (assets / "settings.cfg").write_text(settings)
    (assets / "colors.txt").write_text(colors)
    return assets


def test_parse_stripe_ids_all_given():
    assert parse_stripe_ids(["1", "2", "3"]) == [1, 2, 3]


def test_parse_stripe_ids_missing_become_zero():
    assert parse_stripe_ids(["4"]) == [4, 0, 0]
    assert parse_stripe_ids([]) == [0, 0, 0]


def test_parse_stripe_ids_extra_ignored():
    assert parse_stripe_ids(["1", "2", "3", "9"]) == [1, 2, 3]


def test_parse_stripe_ids_non_integer_reported(capsys):
    assert parse_stripe_ids(["x", "-1", "5"]) == [0, 0, 5]
    err = capsys.readouterr().err
    assert "x is not an integer, using default value 0 for stripe №1" in err
    assert "stripe №2" in err


def test_saved_filename():
    assert saved_filename("./", [1, 2, 3]) == "./1 2 3.png"
    assert saved_filename("out/", [0, 0, 0]) == "out/0 0 0.png"


def test_render_flag_stripes_take_palette_colors():
    image = render_flag(_palette(RED, GREEN, BLUE), [0, 1, 2], 30, 20)
    assert image.size == (30, 20)
    assert image.getpixel((0, 0)) == (255, 0, 0, 255)
    assert image.getpixel((15, 19)) == (0, 255, 0, 255)
    assert image.getpixel((29, 10)) == (0, 0, 255, 255)


def test_render_flag_leftover_columns_stay_black():
    image = render_flag(_palette(RED, GREEN, BLUE), [0, 1, 2], 31, 5)
    assert image.getpixel((30, 0)) == (0, 0, 0, 255)
    assert image.getpixel((29, 0)) == (0, 0, 255, 255)


def test_render_flag_unknown_index_uses_default():
    image = render_flag(_palette(RED), [0, 7, 0], 9, 3)
    assert image.getpixel((4, 1)) == (0, 0, 0, 255)
    assert image.getpixel((0, 1)) == image.getpixel((8, 1))


def test_render_flag_transparent_color_shows_background():
    image = render_flag(_palette(Color(255, 255, 255, 0)), [0, 0, 0], 6, 2)
    assert set(image.getdata()) == {(0, 0, 0, 255)}


def test_render_flag_bad_size():
    with pytest.raises(ValueError):
        render_flag(_palette(RED), [0, 0, 0], 0, 10)


def test_main_saves_flag(tmp_path, monkeypatch):
    settings = "w=30\nh=20\nbpp=32\nsave=1\nsave_path=./\n"
    assets = _assets(tmp_path, settings)
    monkeypatch.chdir(tmp_path)
    assert main(["0", "1", "2"]) == 0
    with Image.open(tmp_path / "0 1 2.png") as image:
        assert image.size == (30, 20)
        assert image.convert("RGBA").getpixel((0, 0)) == (255, 0, 0, 255)
        assert image.convert("RGBA").getpixel((29, 0)) == (0, 0, 255, 255)
    assert (assets / "settings.cfg").read_text() == settings


def test_main_without_save(tmp_path, monkeypatch):
    _assets(tmp_path, "w=30\nh=20\nbpp=32\nsave=0\nsave_path=./\n")
    monkeypatch.chdir(tmp_path)
    assert main(["1"]) == 0
    assert not (tmp_path / "1 0 0.png").exists()


def test_main_repairs_missing_config(tmp_path, monkeypatch):
    assets = _assets(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    saved = (assets / "settings.cfg").read_text().splitlines()
    assert "w = 300" in saved
    assert "save_path = ./" in saved
    assert os.path.exists(tmp_path / "0 0 0.png")


def test_main_fails_on_config_error(tmp_path, monkeypatch, capsys):
    _assets(tmp_path, "colour=3\n")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "unexpected settings key 'colour'" in capsys.readouterr().err
    assert not (tmp_path / "0 0 0.png").exists()