import pytest
from PIL import Image, ImageDraw

from promo_poster import PosterCompositor, PosterInput
from promo_poster.config import PosterSettings


@pytest.fixture
def portrait():
    """Square test portrait with a few features so scaling shows up."""
    img = Image.new('RGB', (400, 400), '#3498DB')
    draw = ImageDraw.Draw(img)
    draw.ellipse([(120, 80), (280, 240)], fill='#F5CBA7')
    draw.rectangle([(100, 260), (300, 400)], fill='#2ECC71')
    return img


@pytest.fixture
def poster_input(portrait):
    return PosterInput(
        name="Ada Obi",
        role="CEO",
        entity_type="Business",
        business="Ada's Kitchen and Catering Services",
        portrait=portrait,
    )


@pytest.fixture
def settings():
    return PosterSettings(_env_file=None)


@pytest.fixture
def compositor(settings):
    return PosterCompositor(settings=settings)


@pytest.fixture
def logo_path(tmp_path):
    path = tmp_path / "logo.png"
    Image.new('RGBA', (150, 150), '#6B2C1F').save(path)
    return path
