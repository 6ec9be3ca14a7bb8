# tests/test_palette.py

import pytest

from pixel_planet import InvalidConfigurationError, Palette
from pixel_planet.palette import BUILTIN_PALETTES, parse_color

from conftest import GREY, RED


def test_palette_holds_references():
    colors = [RED, None]
    weights = [1, 2]
    palette = Palette(colors, weights)
    assert palette.colors is colors
    assert palette.weights is weights
    assert len(palette) == 2
    assert palette.colors[1] is None
    assert not palette.has_back


def test_back_color():
    assert Palette([RED], [1], back_color=GREY).has_back


@pytest.mark.parametrize("colors, weights", [
    ([RED, GREY], [1]),
    ([], []),
    ([RED], [-1]),
    ([RED, GREY], [0, 0]),
])
def test_invalid_palettes(colors, weights):
    with pytest.raises(InvalidConfigurationError):
        Palette(colors, weights)


@pytest.mark.parametrize("name", sorted(BUILTIN_PALETTES))
def test_builtin_palettes_are_valid(name):
    palette = Palette.builtin(name)
    assert len(palette.colors) == len(palette.weights)


def test_unknown_builtin():
    with pytest.raises(InvalidConfigurationError):
        Palette.from_config("plaid")


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ([1, 2, 3], (1, 2, 3)),
    ((1, 2, 3, 4), (1, 2, 3)),
    ("#ff8000", (255, 128, 0)),
    ("white", (255, 255, 255)),
])
def test_parse_color(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["not-a-color", [1, 2], [0, 300, 0]])
def test_parse_invalid_color(value):
    with pytest.raises(InvalidConfigurationError):
        parse_color(value)


def test_from_config_dict():
    palette = Palette.from_config({"colors": ["#000000", None], "weights": [3, 1], "back_color": "red"})
    assert palette.colors == [(0, 0, 0), None]
    assert palette.weights == [3, 1]
    assert palette.back_color == (255, 0, 0)


def test_from_config_requires_weights():
    with pytest.raises(InvalidConfigurationError):
        Palette.from_config({"colors": ["red"]})
