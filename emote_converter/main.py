"""Точка входа в приложение."""
import logging
import os

from emote_converter.app import EmoteConverterApp
from emote_converter.models.config_model import ConverterConfig


def main() -> None:
    """Настраивает логирование и запускает главное окно приложения."""
    logging.basicConfig(
        level=os.environ.get("EMOTE_CONVERTER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = EmoteConverterApp(ConverterConfig.from_env())
    app.mainloop()


if __name__ == "__main__":
    main()
