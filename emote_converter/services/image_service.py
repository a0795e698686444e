"""Загрузка и декодирование исходного изображения.

Принципы:
- SRP: класс отвечает только за чтение байтов и декодирование первого кадра.
- OCP: новые источники (стрим, байты) добавлены отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from emote_converter.models.image_model import ImageData
from emote_converter.services.errors import DecodeError, FileIOError

logger = logging.getLogger(__name__)

# расширение -> имя декодера Pillow
FORMAT_BY_EXTENSION = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
    "webp": "WEBP",
}
SNIFF_FORMATS: Tuple[str, ...] = ("JPEG", "PNG", "GIF", "WEBP")


def normalize_extension(hint: Optional[str]) -> str:
    """`.PNG` -> `png`; None -> пустая строка."""
    if not hint:
        return ""
    return hint.lower().lstrip(".")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Читает файл с диска и декодирует его первый кадр.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` в режиме RGBA и метаданными.

        Raises:
            FileIOError: если файл не существует, не является файлом или не читается.
            DecodeError: если содержимое не распознано как поддерживаемое изображение.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileIOError(path, message=f"Файл не найден: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileIOError(path, exc) from exc

        image_data = self.decode_bytes(data, path.suffix)
        logger.debug("Decoded %s: %dx%d %s", path.name, image_data.width, image_data.height, image_data.source_format)
        return replace(image_data, path=path)

    def decode_stream(self, stream: BinaryIO, extension_hint: Optional[str] = None) -> ImageData:
        """Читает поток целиком и декодирует как `decode_bytes`."""
        try:
            data = stream.read()
        except OSError as exc:
            raise FileIOError(getattr(stream, "name", "<stream>"), exc) from exc
        return self.decode_bytes(data, extension_hint)

    def decode_bytes(self, data: bytes, extension_hint: Optional[str] = None) -> ImageData:
        """Декодирует байты в RGBA-растр первого кадра.

        Известное расширение выбирает ровно один декодер; неизвестное
        или пустое включает автоопределение среди JPEG/PNG/GIF/WebP.
        """
        ext = normalize_extension(extension_hint)
        expected = FORMAT_BY_EXTENSION.get(ext)
        formats = (expected,) if expected else SNIFF_FORMATS
        label = expected or "auto"

        try:
            with Image.open(io.BytesIO(data), formats=list(formats)) as img:
                source_format = img.format or label
                frame_count = int(getattr(img, "n_frames", 1))
                img.seek(0)
                rgba = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError, EOFError) as exc:
            raise DecodeError(label, exc) from exc

        width, height = rgba.size
        if width < 1 or height < 1:
            raise DecodeError(label, ValueError(f"пустой растр {width}x{height}"))

        return ImageData(
            path=None,
            pil_image=rgba,
            width=width,
            height=height,
            source_format=source_format,
            frame_count=frame_count,
            has_transparency=self._has_transparency(rgba),
            size_bytes=len(data),
        )

    def _has_transparency(self, rgba: Image.Image) -> bool:
        alpha = np.asarray(rgba.getchannel("A"), dtype=np.uint8)
        return bool(alpha.size) and int(alpha.min()) < 255
