"""Иерархия ошибок конвертера.

Все ошибки конвейера наследуют `EmoteConverterError`, исходная причина
сохраняется в `__cause__` (через `raise ... from exc`) и в поле `cause`.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional


class EmoteConverterError(Exception):
    """Базовая ошибка конвертера."""


class ValidationError(EmoteConverterError):
    """Файл с неподдерживаемым расширением выбран пользователем."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = Path(path)
        self.reason = reason


class FileIOError(EmoteConverterError, OSError):
    """Не удалось открыть или прочитать файл."""

    def __init__(self, path: str | Path, cause: Optional[BaseException] = None, message: Optional[str] = None) -> None:
        super().__init__(message or f"Не удалось прочитать файл: {path}")
        self.path = Path(path)
        self.cause = cause


class WriteError(FileIOError):
    """Не удалось создать каталог бандла или записать файл."""

    def __init__(self, filename: str | Path, cause: Optional[BaseException] = None) -> None:
        super().__init__(filename, cause, message=f"Не удалось записать {filename}")
        self.filename = str(filename)


class DecodeError(EmoteConverterError):
    """Байты не распознаны ни одним поддерживаемым декодером."""

    def __init__(self, format: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Не удалось декодировать изображение (формат: {format})")
        self.format = format
        self.cause = cause


class EncodeError(EmoteConverterError):
    """Не удалось закодировать PNG для одного из размеров."""

    def __init__(self, filename: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Не удалось закодировать PNG: {filename}")
        self.filename = filename
        self.cause = cause


class ConversionCancelled(EmoteConverterError):
    """Запуск отменён между элементами каталога."""


class ProgressCallbackError(EmoteConverterError):
    """Обработчик прогресса вызывающей стороны выбросил исключение."""


def describe_error(exc: BaseException) -> str:
    """Цепочка причин в одну строку: `ошибка: причина: причина`."""
    parts: List[str] = []
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        if not parts or parts[-1] != text:
            parts.append(text)
        current = current.__cause__ or getattr(current, "cause", None)
    return ": ".join(parts)
