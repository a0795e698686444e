from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from emote_converter.models.config_model import ConverterConfig
from emote_converter.models.emote_model import SizeCatalog, SizeSpec

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)


def quadrant_image(width: int = 200, height: int = 100) -> Image.Image:
    """Четыре цветных квадранта: красный, зелёный / синий, белый."""
    img = Image.new("RGBA", (width, height), WHITE)
    draw = ImageDraw.Draw(img)
    half_w, half_h = width // 2, height // 2
    draw.rectangle((0, 0, half_w - 1, half_h - 1), fill=RED)
    draw.rectangle((half_w, 0, width - 1, half_h - 1), fill=GREEN)
    draw.rectangle((0, half_h, half_w - 1, height - 1), fill=BLUE)
    return img


@pytest.fixture
def cat_png(tmp_path: Path) -> Path:
    path = tmp_path / "cat.png"
    quadrant_image(120, 80).save(path)
    return path


@pytest.fixture
def small_catalog() -> SizeCatalog:
    return SizeCatalog(
        [
            SizeSpec("Discord", "Small", 28, 28),
            SizeSpec("Twitch", "2.0", 56, 56),
            SizeSpec("Wide", "Banner", 64, 16),
        ]
    )


@pytest.fixture
def sequential_config(small_catalog: SizeCatalog) -> ConverterConfig:
    return ConverterConfig(catalog=small_catalog, max_workers=1)
