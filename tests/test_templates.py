import dataclasses

import pytest

from promo_poster.colors import Color
from promo_poster.exceptions import UnknownTemplateError
from promo_poster.templates import (
    DEFAULT_TEMPLATE_ID,
    Background,
    BackgroundKind,
    Theme,
    get_template_options,
    registry,
)


def test_five_templates_in_registration_order():
    ids = [option.id for option in registry.list()]
    assert ids == ["classic", "royal", "emerald", "monochrome", "ivory"]


def test_list_has_display_names():
    for option in registry.list():
        assert option.display_name


def test_resolve_known_id():
    assert registry.resolve("royal").id == "royal"


@pytest.mark.parametrize("template_id", [None, "", "neon"])
def test_resolve_falls_back_to_default(template_id):
    assert registry.resolve(template_id).id == DEFAULT_TEMPLATE_ID


def test_get_unknown_raises():
    with pytest.raises(UnknownTemplateError):
        registry.get("neon")


def test_every_theme_defines_all_colors():
    color_fields = [
        "primary_text", "secondary_text", "accent", "border", "border_accent",
        "badge_background", "badge_border", "image_glow",
    ]
    for option in registry.list():
        theme = registry.get(option.id)
        for field in color_fields:
            assert isinstance(getattr(theme, field), Color), f"{theme.id}.{field}"


def test_gradient_backgrounds_have_two_stops():
    for option in registry.list():
        background = registry.get(option.id).background
        if background.kind == BackgroundKind.GRADIENT:
            assert len(background.colors) >= 2
        else:
            assert len(background.colors) == 1


def test_gradient_with_one_color_is_rejected():
    with pytest.raises(ValueError):
        Background(BackgroundKind.GRADIENT, (Color(0, 0, 0),))


def test_themes_are_immutable():
    theme = registry.get("classic")
    with pytest.raises(dataclasses.FrozenInstanceError):
        theme.accent = Color(0, 0, 0)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        registry._themes["neon"] = registry.get("classic")


def test_monochrome_is_untextured_and_ivory_is_light():
    assert registry.get("monochrome").textured is False
    assert registry.get("ivory").light is True


def test_template_options():
    options = get_template_options()
    assert [o["id"] for o in options] == [o.id for o in registry.list()]
    assert options[0]["accent"].startswith("#")


def test_theme_type_exported():
    assert isinstance(registry.get("emerald"), Theme)


def test_registry_iterates_themes_in_order():
    themes = list(registry)
    assert [t.id for t in themes] == [o.id for o in registry.list()]
    assert all(isinstance(t, Theme) for t in themes)
    assert len(themes) == len(registry)
