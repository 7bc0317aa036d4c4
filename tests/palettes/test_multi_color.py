import warnings

import numpy as np
import pytest

from wavepalette import PaletteConstructionError
from wavepalette.colors import RGBA
from wavepalette.colors.samples import RAINBOW, RED, VIOLET
from wavepalette.palettes import MultiColorPalette


def test_defaults():
    palette = MultiColorPalette()
    assert palette.colors == RAINBOW
    assert palette.color_count == 7
    assert palette.wave_length == 1792.0
    assert palette.scale_modifier == 68.0


def test_cyclic_consistency():
    palette = MultiColorPalette()
    assert palette.get_color(0) == RAINBOW[0]
    assert palette.get_color(palette.wave_length) == palette.get_color(0)
    assert palette.get_color(-palette.wave_length) == palette.get_color(0)


def test_rising_edge_visits_anchors_in_order():
    palette = MultiColorPalette()
    for k, anchor in enumerate(RAINBOW):
        assert palette.get_color(128 * k) == anchor


def test_peak_wraps_back_to_first_anchor():
    palette = MultiColorPalette()
    assert palette.get_color(896) == RED


def test_falling_edge_visits_anchors_in_reverse():
    palette = MultiColorPalette()
    assert palette.get_color(896 + 128) == VIOLET
    for k in range(1, 7):
        assert palette.get_color(896 + 128 * k) == RAINBOW[7 - k]


def test_between_anchors_interpolates():
    palette = MultiColorPalette([RGBA(0, 0, 0), RGBA(200, 100, 50)])
    # wave length 512; n=64 sits halfway from the first anchor to the second
    assert palette.get_color(64) == RGBA(100, 50, 25)


def test_anchor_inputs_are_normalized():
    palette = MultiColorPalette([(255, 0, 0), [0, 0, 255, 128], np.array([0, 255, 0])])
    assert palette.colors == (RGBA(255, 0, 0), RGBA(0, 0, 255, 128), RGBA(0, 255, 0))


def test_unsupported_anchor_type():
    with pytest.raises(TypeError):
        MultiColorPalette(["red"])


def test_empty_anchor_list_fails_at_construction():
    with pytest.raises(PaletteConstructionError):
        MultiColorPalette([])
    with pytest.raises(ValueError):
        MultiColorPalette(())


class TestSingleAnchor:
    """A one-anchor palette is constant."""

    def test_warns(self):
        with pytest.warns(UserWarning):
            MultiColorPalette([RGBA(12, 34, 56)])

    def test_constant_output(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            palette = MultiColorPalette([RGBA(12, 34, 56)])
        assert palette.wave_length == 256.0
        for n in np.linspace(-5000.0, 5000.0, 97):
            assert palette.get_color(n) == RGBA(12, 34, 56)
        assert np.all(palette.sample(np.arange(-300.0, 300.0, 3.7)) == [12, 34, 56, 255])


def test_sample_matches_get_color():
    palette = MultiColorPalette()
    ns = np.linspace(-4000.0, 4000.0, 1601)
    expected = np.array([palette.get_color(n).value for n in ns], dtype=np.uint8)
    assert np.array_equal(palette.sample(ns), expected)


def test_colors_are_read_only():
    palette = MultiColorPalette()
    assert isinstance(palette.colors, tuple)
    with pytest.raises(AttributeError):
        palette.colors = ()  # type: ignore[misc]
