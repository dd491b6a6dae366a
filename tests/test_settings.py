import pytest

from convertertoolkit.core.settings import (
    DEFAULT_CREATOR,
    FEATURES_ENV,
    PAPER_ENV,
    load_export_settings,
    parse_features,
)
from convertertoolkit.graphics.color import ColorMode
from convertertoolkit.graphics.paper import paper_size


def test_parse_features_handles_negation_and_values():
    flags = parse_features(" native_text, !grayscale , Extra-Flag=on, other=off, ,")

    assert flags == {
        "native_text": True,
        "grayscale": False,
        "extra_flag": True,
        "other": False,
    }


def test_parse_features_ignores_unknown_values():
    assert parse_features("native_text=maybe") == {}


def test_defaults_are_letter_rgb_outlined_text():
    settings = load_export_settings({})

    assert (settings.page_width, settings.page_height) == (612.0, 792.0)
    assert settings.color_mode is ColorMode.RGB
    assert settings.use_vectorized_text is True
    assert settings.creator == DEFAULT_CREATOR


def test_environment_overrides():
    settings = load_export_settings({PAPER_ENV: "A4-landscape", FEATURES_ENV: "native_text,grayscale"})

    assert settings.page_width == pytest.approx(841.89, abs=0.01)
    assert settings.page_height == pytest.approx(595.28, abs=0.01)
    assert settings.color_mode is ColorMode.GRAYSCALE
    assert settings.use_vectorized_text is False


def test_unknown_paper_falls_back_to_letter():
    settings = load_export_settings({PAPER_ENV: "napkin"})

    assert settings.page_width == 612.0


def test_paper_size_rejects_unknown_names():
    with pytest.raises(ValueError):
        paper_size("napkin")
