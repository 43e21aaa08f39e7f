import pytest

from promo_poster.colors import Color, lighten, with_alpha
from promo_poster.exceptions import ColorParseError


def test_from_hex():
    assert Color.from_hex("#D4AF37") == Color(212, 175, 55, 255)
    assert Color.from_hex("fff") == Color(255, 255, 255)
    assert Color.from_hex("#00000080") == Color(0, 0, 0, 128)


def test_from_hex_invalid():
    with pytest.raises(ColorParseError):
        Color.from_hex("not-a-color")


def test_to_hex():
    assert Color(200, 169, 97).to_hex() == "#C8A961"


def test_lighten_clamps_at_max():
    gold = Color.from_hex("#D4AF37")
    assert lighten(gold, 20) == Color(255, 226, 106, 255)


def test_lighten_zero_is_identity():
    color = Color(10, 20, 30, 77)
    assert lighten(color, 0) == color


def test_lighten_keeps_alpha():
    assert lighten(Color(0, 0, 0, 50), 10).a == 50


@pytest.mark.parametrize("percent", [-500, -10, 150, 1000])
def test_lighten_out_of_range_clamps(percent):
    result = lighten(Color.from_hex("#6B2C1F"), percent)
    assert all(0 <= channel <= 255 for channel in result.rgba)


def test_lighten_negative_clamps_to_black():
    assert lighten(Color(40, 50, 60), -100).rgb == (0, 0, 0)


def test_with_alpha():
    accent = Color.from_hex("#C8A961")
    faded = with_alpha(accent, 0)
    assert faded.rgb == accent.rgb
    assert faded.a == 0
    assert accent.a == 255


def test_with_alpha_clamps():
    assert Color(1, 2, 3).with_alpha(300).a == 255
