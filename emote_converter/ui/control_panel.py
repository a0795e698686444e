"""Боковая панель: выбор файла, запуск конвертации, информация и список размеров.

Принципы:
- SRP: управляет только элементами управления, не содержит логики конвертации.
- ISP: события наружу через `on_*`, состояние внутрь через компактные `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from emote_converter.models.emote_model import SizeCatalog
from emote_converter.models.image_model import ImageData


def _format_bytes(size: Optional[int]) -> str:
    if size is None:
        return "—"
    if size < 1024:
        return f"{size} Б"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} КБ"
    return f"{size / (1024 * 1024):.1f} МБ"


class ControlPanel(ctk.CTkFrame):
    """Панель с блоками: файл, информация, размеры."""
    def __init__(self, master: ctk.CTk, catalog: SizeCatalog, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_select_file: Optional[Callable[[], None]] = None
        self.on_convert: Optional[Callable[[], None]] = None

        # File section
        self._title = ctk.CTkLabel(self, text="Эмоуты", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._select_btn = ctk.CTkButton(self, text="Выбрать изображение…", command=self._emit_select_file)
        self._select_btn.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._convert_btn = ctk.CTkButton(self, text="Конвертировать и сохранить", command=self._emit_convert)
        self._convert_btn.grid(row=2, column=0, padx=8, pady=(0, 12), sticky="ew")
        self._convert_btn.configure(state="disabled")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._format_val = ctk.StringVar(value="—")
        self._alpha_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_format = ctk.CTkLabel(self, textvariable=self._format_val, anchor="w", justify="left")
        self._info_alpha = ctk.CTkLabel(self, textvariable=self._alpha_val, anchor="w", justify="left")

        self._info_path.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_format.grid(row=6, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_alpha.grid(row=7, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Sizes section
        self._sizes_title = ctk.CTkLabel(self, text="Размеры", font=ctk.CTkFont(size=16, weight="bold"))
        self._sizes_title.grid(row=8, column=0, padx=8, pady=(8, 4), sticky="w")

        sizes_frame = ctk.CTkScrollableFrame(self, height=200)
        sizes_frame.grid(row=9, column=0, padx=8, pady=(0, 8), sticky="nsew")
        sizes_frame.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(9, weight=1)

        row = 0
        for platform in catalog.platforms():
            header = ctk.CTkLabel(sizes_frame, text=platform, font=ctk.CTkFont(weight="bold"), anchor="w")
            header.grid(row=row, column=0, padx=6, pady=(6, 2), sticky="w")
            row += 1
            for spec in catalog:
                if spec.platform != platform:
                    continue
                label = ctk.CTkLabel(sizes_frame, text=f"{spec.variant}: {spec.width}×{spec.height}", anchor="w")
                label.grid(row=row, column=0, padx=(18, 6), pady=0, sticky="w")
                row += 1

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        self._path_val.set(str(image_data.path) if image_data.path else "—")
        self._dims_val.set(f"Размер: {image_data.width}×{image_data.height} px, {_format_bytes(image_data.size_bytes)}")
        frames = f", кадров: {image_data.frame_count} (берётся первый)" if image_data.is_animated else ""
        self._format_val.set(f"Формат: {image_data.source_format}{frames}")
        self._alpha_val.set("Прозрачность: есть" if image_data.has_transparency else "Прозрачность: нет")

    def set_path_only(self, path: str) -> None:
        """Информация, когда предпросмотр не удалось построить."""
        self._path_val.set(path)
        self._dims_val.set("—")
        self._format_val.set("—")
        self._alpha_val.set("—")

    def set_convert_enabled(self, enabled: bool) -> None:
        self._convert_btn.configure(state="normal" if enabled else "disabled")

    def set_select_enabled(self, enabled: bool) -> None:
        self._select_btn.configure(state="normal" if enabled else "disabled")

    # ---- Events ----
    def _emit_select_file(self) -> None:
        if self.on_select_file:
            self.on_select_file()

    def _emit_convert(self) -> None:
        if self.on_convert:
            self.on_convert()
