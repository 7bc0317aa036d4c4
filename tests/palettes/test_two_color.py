import math

import numpy as np
import pytest

from wavepalette import PaletteConstructionError
from wavepalette.colors import RGBA
from wavepalette.colors.samples import BLACK, WHITE
from wavepalette.palettes import TwoColorPalette


def test_defaults():
    palette = TwoColorPalette()
    assert palette.start_color == WHITE
    assert palette.end_color == BLACK
    assert palette.wave_length == 256.0
    assert palette.scale_modifier == 40.0


def test_endpoints():
    palette = TwoColorPalette()
    assert palette.get_color(0) == palette.start_color
    assert palette.get_color(palette.wave_length / 2) == palette.end_color
    assert palette.get_color(palette.wave_length) == palette.start_color


def test_quarter_period_is_midpoint():
    # 255 * 0.5 = 127.5 rounds half to even
    assert TwoColorPalette().get_color(64).value == (128, 128, 128, 255)


def test_custom_colors_and_wave_length():
    palette = TwoColorPalette(RGBA(10, 20, 30), RGBA(200, 100, 50), wave_length=100.0)
    assert palette.get_color(0) == RGBA(10, 20, 30)
    assert palette.get_color(50) == RGBA(200, 100, 50)
    assert palette.get_color(25) == RGBA(105, 60, 40)
    assert palette.get_color(75) == RGBA(105, 60, 40)
    assert palette.get_color(-25) == RGBA(105, 60, 40)


def test_alpha_is_not_interpolated():
    palette = TwoColorPalette(RGBA(0, 0, 0, 0), RGBA(255, 255, 255, 10))
    for n in (0, 30, 128, 200):
        assert palette.get_color(n).alpha == 255


def test_periodic():
    palette = TwoColorPalette()
    for n in np.linspace(-1000, 1000, 41):
        assert palette.get_color(n) == palette.get_color(n + 256.0)


@pytest.mark.parametrize("wave_length", [0.0, -256.0, math.inf, math.nan])
def test_invalid_wave_length(wave_length):
    with pytest.raises(PaletteConstructionError):
        TwoColorPalette(wave_length=wave_length)


def test_sample_matches_get_color():
    palette = TwoColorPalette(RGBA(12, 240, 99), RGBA(250, 3, 180), wave_length=300.0)
    ns = np.linspace(-2000.0, 2000.0, 801)
    expected = np.array([palette.get_color(n).value for n in ns], dtype=np.uint8)
    assert np.array_equal(palette.sample(ns), expected)


def test_immutable_parameters():
    palette = TwoColorPalette()
    with pytest.raises(AttributeError):
        palette.start_color = BLACK  # type: ignore[misc]
    with pytest.raises(AttributeError):
        palette.wave_length = 10.0  # type: ignore[misc]


class TestAnchorInputs:
    """Anchor colors are normalized when the palette is built."""

    def test_tuples_and_arrays_are_accepted(self):
        palette = TwoColorPalette((255, 0, 0), np.array([0, 0, 255]))
        assert palette.start_color == RGBA(255, 0, 0)
        assert palette.end_color == RGBA(0, 0, 255)
        assert palette.get_color(0) == RGBA(255, 0, 0)
        assert palette.get_color(128) == RGBA(0, 0, 255)

    def test_bad_type_fails_at_construction(self):
        with pytest.raises(TypeError):
            TwoColorPalette("white", BLACK)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            TwoColorPalette(WHITE, 0)  # type: ignore[arg-type]

    def test_bad_channel_count_fails_at_construction(self):
        with pytest.raises(ValueError):
            TwoColorPalette((255, 0), BLACK)
