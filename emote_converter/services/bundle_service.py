"""Запись бандла эмоутов на диск.

Принципы:
- SRP: только имена, каталог и сохранение PNG; без ресемплинга.
- Все выходы кодируются в PNG независимо от формата исходника (прозрачность).
"""
from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image

from emote_converter.models.config_model import BUNDLE_SUFFIX
from emote_converter.models.emote_model import SizeSpec
from emote_converter.services.errors import EncodeError, WriteError

logger = logging.getLogger(__name__)


class BundleService:
    def __init__(self, bundle_suffix: str = BUNDLE_SUFFIX) -> None:
        self._bundle_suffix = bundle_suffix

    # ---- Имена ----
    def base_name(self, input_path: str | Path) -> str:
        """Имя исходного файла без расширения."""
        return Path(input_path).stem

    def bundle_dir_for(self, input_path: str | Path) -> Path:
        """`<каталог исходника>/<base>_emote_bundle`."""
        path = Path(input_path)
        return path.parent / f"{path.stem}{self._bundle_suffix}"

    def output_filename(self, base: str, spec: SizeSpec) -> str:
        return spec.filename(base)

    # ---- Диск ----
    def ensure_bundle_dir(self, input_path: str | Path) -> Path:
        """Создаёт каталог бандла (и родителей), если его нет.

        Raises:
            WriteError: если каталог создать не удалось.
        """
        bundle_dir = self.bundle_dir_for(input_path)
        try:
            bundle_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(bundle_dir, exc) from exc
        logger.debug("Bundle directory ready: %s", bundle_dir)
        return bundle_dir

    def encode_png(self, image: Image.Image, filename: str = "<memory>") -> bytes:
        buf = io.BytesIO()
        try:
            image.save(buf, format="PNG")
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(filename, exc) from exc
        return buf.getvalue()

    def write_emote(self, bundle_dir: Path, base: str, spec: SizeSpec, image: Image.Image) -> Path:
        """Кодирует растр в PNG и записывает его в бандл, перезаписывая существующий файл."""
        filename = self.output_filename(base, spec)
        data = self.encode_png(image, filename)
        out_path = bundle_dir / filename
        try:
            out_path.write_bytes(data)
        except OSError as exc:
            raise WriteError(out_path, exc) from exc
        logger.debug("Wrote %s (%d bytes)", out_path, len(data))
        return out_path
