from __future__ import annotations

from typing import Tuple

from PIL import Image


class ResizeService:
    """Масштабирование «fill»: покрыть целевой прямоугольник и обрезать по центру."""

    # ---------- Геометрия ----------
    def fill_scale(self, src_size: Tuple[int, int], target_size: Tuple[int, int]) -> float:
        """
        Коэффициент равномерного масштаба, при котором исходник целиком
        покрывает цель: max(W/srcW, H/srcH).
        """
        src_w, src_h = src_size
        dst_w, dst_h = target_size
        return max(dst_w / src_w, dst_h / src_h)

    def scaled_size(self, src_size: Tuple[int, int], target_size: Tuple[int, int]) -> Tuple[int, int]:
        """Размер после масштабирования; не меньше цели по каждой оси."""
        scale = self.fill_scale(src_size, target_size)
        src_w, src_h = src_size
        dst_w, dst_h = target_size
        return max(dst_w, int(round(src_w * scale))), max(dst_h, int(round(src_h * scale)))

    def crop_box(self, scaled_size: Tuple[int, int], target_size: Tuple[int, int]) -> Tuple[int, int, int, int]:
        """
        Центрированная рамка обрезки (left, top, right, bottom) в координатах
        масштабированного изображения. Излишек по длинной оси делится поровну.
        """
        sw, sh = scaled_size
        tw, th = target_size
        left = (sw - tw) // 2
        top = (sh - th) // 2
        return left, top, left + tw, top + th

    # ---------- Преобразование ----------
    def fill(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """
        Возвращает новое изображение ровно width x height.

        Масштабирует с фильтром Lanczos (для RGBA Pillow ресемплирует
        в premultiplied-альфе), затем обрезает по центру. Исходник не мутируется.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Целевой размер должен быть положительным: {width}x{height}")
        src = image if image.mode == "RGBA" else image.convert("RGBA")
        target = (width, height)

        new_size = self.scaled_size(src.size, target)
        if new_size == src.size:
            scaled = src.copy()
        else:
            scaled = src.resize(new_size, Image.Resampling.LANCZOS)

        if scaled.size == target:
            return scaled
        return scaled.crop(self.crop_box(scaled.size, target))
