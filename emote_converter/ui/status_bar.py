from __future__ import annotations

import customtkinter as ctk


class StatusBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)  # text stretches

        self._status_value = ctk.StringVar(value="Файл не выбран")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._status_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="ew")

        self._progress = ctk.CTkProgressBar(self, width=180)
        self._progress.set(0)
        self._progress.grid(row=0, column=1, padx=(6, 12), pady=8, sticky="e")
        self._progress.grid_remove()

    # public API (sync from controller)
    def set_status(self, text: str) -> None:
        self._status_value.set(text)

    def set_error(self, text: str) -> None:
        self._status_value.set(f"Ошибка: {text}")
        self.hide_progress()

    def set_progress(self, done: int, total: int) -> None:
        if total <= 0:
            return
        self._progress.grid()
        self._progress.set(done / total)

    def hide_progress(self) -> None:
        self._progress.set(0)
        self._progress.grid_remove()
