from wavepalette import defaults
from wavepalette.palettes import CosineOscillatorPalette
from wavepalette.utils.default import value_or_default


def test_value_or_default():
    assert value_or_default(None, 256.0) == 256.0
    assert value_or_default(100.0, 256.0) == 100.0
    # falsy values are kept
    assert value_or_default(0, 11) == 0


def test_constructor_overrides_only_given_terms():
    palette = CosineOscillatorPalette(g_term=5)
    assert palette.terms == (defaults.COSINE_R_TERM, 5.0, defaults.COSINE_B_TERM)
