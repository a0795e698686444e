"""Модели запроса и результата конвертации."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


class RunState(enum.Enum):
    IDLE = "idle"
    DECODING = "decoding"
    CONVERTING = "converting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SelectionResult:
    """Результат проверки выбранного файла: принят или отклонён с причиной."""
    path: Path
    accepted: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class ConversionRequest:
    input_path: Path


@dataclass(frozen=True)
class ConversionResult:
    """Итог одного запуска конвертации.

    Fields:
        input_path: Исходный файл.
        bundle_directory: Каталог бандла (None, если до него не дошли).
        written_files: Записанные файлы в порядке каталога.
        error: Первая ошибка запуска или None при успехе.
    """
    input_path: Path
    bundle_directory: Optional[Path]
    written_files: Tuple[Path, ...] = ()
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
