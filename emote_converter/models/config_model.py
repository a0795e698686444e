"""Конфигурация конвертера: каталог размеров и параметры выполнения."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from emote_converter.models.emote_model import SizeCatalog, default_catalog

BUNDLE_SUFFIX = "_emote_bundle"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _default_workers() -> int:
    return max(1, min(4, os.cpu_count() or 1))


@dataclass(frozen=True)
class ConverterConfig:
    """Неизменяемая конфигурация, передаётся в `ConversionService` при создании.

    Fields:
        catalog: Набор целевых размеров.
        max_workers: Потоков на обработку размеров (1 = последовательно).
        extended_formats: Принимать ли дополнительно `.webp`.
        bundle_suffix: Суффикс каталога бандла.
    """
    catalog: SizeCatalog = field(default_factory=default_catalog)
    max_workers: int = field(default_factory=_default_workers)
    extended_formats: bool = False
    bundle_suffix: str = BUNDLE_SUFFIX

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers должен быть >= 1: {self.max_workers}")
        if len(self.catalog) == 0:
            raise ValueError("Каталог размеров пуст")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        """Читает EMOTE_CONVERTER_WORKERS и EMOTE_CONVERTER_EXTENDED."""
        env = os.environ if environ is None else environ

        workers_raw = env.get("EMOTE_CONVERTER_WORKERS")
        if workers_raw:
            try:
                workers = int(workers_raw)
            except ValueError as exc:
                raise ValueError(f"EMOTE_CONVERTER_WORKERS не число: {workers_raw!r}") from exc
        else:
            workers = _default_workers()

        extended_raw = env.get("EMOTE_CONVERTER_EXTENDED", "").strip().lower()
        if extended_raw in _TRUE_VALUES:
            extended = True
        elif extended_raw in _FALSE_VALUES:
            extended = False
        else:
            raise ValueError(f"EMOTE_CONVERTER_EXTENDED: ожидается yes/no, получено {extended_raw!r}")

        return cls(max_workers=workers, extended_formats=extended)
