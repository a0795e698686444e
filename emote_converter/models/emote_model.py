"""Каталог размеров эмоутов для платформ.

Принципы:
- SRP: только данные о целевых размерах, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`, кортежи) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class SizeSpec:
    """Один целевой размер эмоута.

    Fields:
        platform: Платформа, например "Discord".
        variant: Название варианта внутри платформы, например "Small".
        width: Ширина, px.
        height: Высота, px.
    """
    platform: str
    variant: str
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Размер должен быть положительным: {self.width}x{self.height}")

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def filename(self, base: str) -> str:
        """Имя выходного файла: `<base>-<platform>-<variant>-<W>x<H>.png`."""
        return f"{base}-{self.platform}-{self.variant}-{self.width}x{self.height}.png"


class SizeCatalog:
    """Упорядоченный неизменяемый набор `SizeSpec`.

    Дубликаты (platform, variant) и коллизии имён файлов отклоняются при создании.
    """

    def __init__(self, specs: Iterable[SizeSpec]) -> None:
        items = tuple(specs)
        seen_keys = set()
        seen_names = set()
        for spec in items:
            key = (spec.platform, spec.variant)
            if key in seen_keys:
                raise ValueError(f"Повторяющийся размер в каталоге: {spec.platform} {spec.variant}")
            # имя файла не зависит от base, поэтому проверяем на пустой основе
            name = spec.filename("")
            if name in seen_names:
                raise ValueError(f"Коллизия имени файла в каталоге: {name}")
            seen_keys.add(key)
            seen_names.add(name)
        self._specs: Tuple[SizeSpec, ...] = items

    def __iter__(self) -> Iterator[SizeSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, index: int) -> SizeSpec:
        return self._specs[index]

    def __repr__(self) -> str:
        return f"SizeCatalog({len(self._specs)} sizes)"

    @property
    def specs(self) -> Tuple[SizeSpec, ...]:
        return self._specs

    def platforms(self) -> Tuple[str, ...]:
        """Платформы в порядке первого появления."""
        return tuple(dict.fromkeys(spec.platform for spec in self._specs))


_DEFAULT_SIZES = (
    # Discord
    ("Discord", "Small", 28, 28),
    ("Discord", "Medium", 32, 32),
    ("Discord", "Large", 48, 48),
    ("Discord", "Animated", 128, 128),
    # Twitch
    ("Twitch", "1.0", 28, 28),
    ("Twitch", "2.0", 56, 56),
    ("Twitch", "3.0", 112, 112),
    # 7TV
    ("7TV", "1x", 32, 32),
    ("7TV", "2x", 64, 64),
    ("7TV", "3x", 96, 96),
    ("7TV", "4x", 128, 128),
)


def default_catalog() -> SizeCatalog:
    """Базовый каталог: Discord, Twitch и 7TV (11 размеров)."""
    return SizeCatalog(SizeSpec(*row) for row in _DEFAULT_SIZES)
