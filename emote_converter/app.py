from typing import Optional

import customtkinter as ctk

from emote_converter.controllers.app_controller import AppController
from emote_converter.models.config_model import ConverterConfig
from emote_converter.services.conversion_service import ConversionService
from emote_converter.ui.control_panel import ControlPanel
from emote_converter.ui.preview_pane import PreviewPane
from emote_converter.ui.status_bar import StatusBar


class EmoteConverterApp(ctk.CTk):
    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Emote Converter")
        self.minsize(640, 420)

        config = config or ConverterConfig()

        # root layout: left preview, right controls
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._preview = PreviewPane(self)
        self._preview.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._panel = ControlPanel(self, catalog=config.catalog)
        self._panel.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._status = StatusBar(self)
        self._status.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            preview=self._preview,
            panel=self._panel,
            status=self._status,
            window=self,
            conversion_service=ConversionService(config),
        )
        self._controller.bind_events()
