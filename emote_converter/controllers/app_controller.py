"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от `ConversionService` как от роли; конкретная конфигурация передаётся снаружи.
Clean Code:
- Обработчики компактны; конвертация выполняется в фоне, UI обновляется через `after`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, messagebox, TclError
from typing import Optional

import customtkinter as ctk

from emote_converter.models.conversion_model import ConversionRequest, ConversionResult
from emote_converter.models.emote_model import SizeSpec
from emote_converter.services.conversion_service import ConversionService
from emote_converter.services.errors import EmoteConverterError, ValidationError, describe_error
from emote_converter.services.image_service import ImageService
from emote_converter.ui.control_panel import ControlPanel
from emote_converter.ui.preview_pane import PreviewPane
from emote_converter.ui.status_bar import StatusBar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Выбор файла и проверка расширения через `ConversionService.require_selection`.
    - Предпросмотр через `ImageService`.
    - Запуск конвертации в фоне и доставка результата в UI-поток.
    """
    preview: PreviewPane
    panel: ControlPanel
    status: StatusBar
    window: ctk.CTk
    conversion_service: ConversionService = field(default_factory=ConversionService)

    _image_service: ImageService = field(default_factory=ImageService)
    _request: Optional[ConversionRequest] = None
    _running: bool = False

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.panel.on_select_file = self._handle_select_file
        self.panel.on_convert = self._handle_convert
        self.window.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ---- Handlers ----
    def _handle_select_file(self) -> None:
        patterns = " ".join(f"*{ext}" for ext in sorted(self.conversion_service.accepted_extensions))
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(("Images", patterns), ("All files", "*.*")),
            )
        except TclError:
            logger.warning("File dialog could not be opened", exc_info=True)
            return

        if not file_path:
            return

        try:
            request = self.conversion_service.require_selection(file_path)
        except ValidationError as exc:
            # предыдущий выбор остаётся без изменений
            messagebox.showerror("Неверный тип файла", exc.reason)
            self.status.set_error(exc.reason)
            return

        self._request = request
        self._load_preview(request.input_path)
        self.panel.set_convert_enabled(not self._running)

    def _handle_convert(self) -> None:
        if self._request is None or self._running:
            return
        self._running = True
        self.panel.set_convert_enabled(False)
        self.panel.set_select_enabled(False)
        self.status.set_status("Конвертация…")
        self.status.set_progress(0, len(self.conversion_service.config.catalog))

        self.conversion_service.convert_async(
            self._request.input_path,
            on_done=lambda result: self.window.after(0, self._on_conversion_done, result),
            on_progress=lambda done, total, spec: self.window.after(0, self._on_progress, done, total, spec),
        )

    def _handle_close(self) -> None:
        self.conversion_service.shutdown(wait=False)
        self.window.destroy()

    # ---- Background delivery (UI thread) ----
    def _on_progress(self, done: int, total: int, spec: SizeSpec) -> None:
        self.status.set_progress(done, total)
        self.status.set_status(f"Конвертация… {spec.platform} {spec.variant} ({done}/{total})")

    def _on_conversion_done(self, result: ConversionResult) -> None:
        self._running = False
        self.panel.set_convert_enabled(True)
        self.panel.set_select_enabled(True)
        self.status.hide_progress()

        if result.succeeded:
            self.status.set_status(f"Готово: {len(result.written_files)} файлов в {result.bundle_directory}")
            messagebox.showinfo("Готово", f"Все размеры эмоутов сохранены в\n{result.bundle_directory}")
            return

        message = describe_error(result.error)
        self.status.set_error(message)
        messagebox.showerror("Ошибка конвертации", message)

    # ---- Helpers ----
    def _load_preview(self, path: Path) -> None:
        try:
            image_data = self._image_service.load_image(path)
        except EmoteConverterError as exc:
            # конвертация всё равно доступна: ошибка проявится при декодировании
            logger.info("Preview unavailable for %s: %s", path, describe_error(exc))
            self.preview.clear("Предпросмотр недоступен")
            self.panel.set_path_only(str(path))
            self.status.set_status(f"Выбран файл (без предпросмотра): {path.name}")
            return

        self.preview.set_image(image_data.pil_image)
        self.panel.set_image_info(image_data)
        self.status.set_status(f"Выбран файл: {path.name}")
