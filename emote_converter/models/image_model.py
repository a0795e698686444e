"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного исходника и его метаданные.

    Fields:
        path: Путь к исходному файлу (None, если декодировали байты).
        pil_image: Первый кадр в режиме RGBA.
        width: Ширина, px.
        height: Высота, px.
        source_format: Формат по данным Pillow, например "PNG".
        frame_count: Число кадров в исходнике (для GIF/WebP может быть > 1).
        has_transparency: Есть ли хотя бы один не полностью непрозрачный пиксель.
        size_bytes: Размер входных данных, если известен.
    """
    path: Optional[Path]
    pil_image: Image.Image
    width: int
    height: int
    source_format: str
    frame_count: int
    has_transparency: bool
    size_bytes: Optional[int]

    @property
    def is_animated(self) -> bool:
        return self.frame_count > 1
