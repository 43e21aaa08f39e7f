import pytest

from promo_poster.exceptions import InvalidImageDimensionsError
from promo_poster.layout import LayoutGeometry, fit_cover, wrap_text


def test_wrap_short_text_is_single_line():
    assert wrap_text("Ada's Kitchen", 16) == ["Ada's Kitchen"]


def test_wrap_exact_length_is_single_line():
    assert wrap_text("ABCDEFGHIJ", 10) == ["ABCDEFGHIJ"]


def test_wrap_two_long_words():
    assert wrap_text("AAAAAAAAAA BBBBBBBBBB", 10) == ["AAAAAAAAAA", "BBBBBBBBBB"]


def test_wrap_packs_greedily():
    lines = wrap_text("A B C D E F G H", 3)
    assert lines == ["A B", "C D", "E F", "G H"]
    assert all(len(line) <= 3 for line in lines)


def test_wrap_keeps_long_word_whole():
    lines = wrap_text("AB SUPERCALIFRAGILISTIC CD", 5)
    assert lines == ["AB", "SUPERCALIFRAGILISTIC", "CD"]


def test_wrap_empty_text():
    assert wrap_text("", 10) == [""]


def test_wrap_preserves_word_order():
    text = "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG"
    lines = wrap_text(text, 12)
    assert " ".join(lines) == text
    assert all(len(line) <= 12 for line in lines)


def test_fit_cover_wide_image():
    fit = fit_cover(1600, 800, 400)
    assert fit.draw_width == 800
    assert fit.draw_height == 400
    assert fit.offset_x == -200
    assert fit.offset_y == 0


def test_fit_cover_tall_image():
    fit = fit_cover(800, 1600, 400)
    assert fit.draw_width == 400
    assert fit.draw_height == 800
    assert fit.offset_x == 0
    assert fit.offset_y == -200


def test_fit_cover_square_image():
    fit = fit_cover(500, 500, 368)
    assert (fit.draw_width, fit.draw_height) == (368, 368)
    assert (fit.offset_x, fit.offset_y) == (0, 0)


@pytest.mark.parametrize("width,height", [(1920, 1080), (333, 1000), (1, 7)])
def test_fit_cover_always_covers_target(width, height):
    fit = fit_cover(width, height, 368)
    assert fit.draw_width >= 368
    assert fit.draw_height >= 368
    # Overflow is centered
    assert fit.offset_x == pytest.approx((368 - fit.draw_width) / 2)
    assert fit.offset_y == pytest.approx((368 - fit.draw_height) / 2)


@pytest.mark.parametrize("width,height", [(800, 0), (0, 800), (0, 0)])
def test_fit_cover_rejects_zero_dimensions(width, height):
    with pytest.raises(InvalidImageDimensionsError):
        fit_cover(width, height, 400)


def test_geometry_medallion_sizes():
    g = LayoutGeometry()
    assert g.photo_size < 2 * g.photo_radius
    assert g.ring_outer_radius > g.photo_radius
    assert g.glow_radius > g.ring_outer_radius
    # The medallion layer must fit inside the frame
    assert g.photo_center_y - g.glow_radius >= 0
    assert g.photo_center_y + g.glow_radius <= g.height
