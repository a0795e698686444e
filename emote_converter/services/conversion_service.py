"""Оркестрация конвертации: проверка выбора, декодирование, размеры, запись.

Принципы:
- SRP: последовательность шагов и агрегация ошибки; сами шаги в сервисах.
- DIP: сервисы и каталог передаются при создании (`ConverterConfig`), глобального состояния нет.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Tuple

from emote_converter.models.config_model import ConverterConfig
from emote_converter.models.conversion_model import (
    ConversionRequest,
    ConversionResult,
    RunState,
    SelectionResult,
)
from emote_converter.models.emote_model import SizeSpec
from emote_converter.models.image_model import ImageData
from emote_converter.services.bundle_service import BundleService
from emote_converter.services.errors import (
    ConversionCancelled,
    EmoteConverterError,
    ProgressCallbackError,
    ValidationError,
    describe_error,
)
from emote_converter.services.image_service import ImageService
from emote_converter.services.resize_service import ResizeService

logger = logging.getLogger(__name__)

BASE_EXTENSIONS: FrozenSet[str] = frozenset({".jpg", ".jpeg", ".png", ".gif"})
EXTENDED_EXTENSIONS: FrozenSet[str] = BASE_EXTENSIONS | {".webp"}

ProgressCallback = Callable[[int, int, SizeSpec], None]
DoneCallback = Callable[[ConversionResult], None]


class ConversionService:
    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        image_service: Optional[ImageService] = None,
        resize_service: Optional[ResizeService] = None,
        bundle_service: Optional[BundleService] = None,
    ) -> None:
        self._config = config or ConverterConfig()
        self._image_service = image_service or ImageService()
        self._resize_service = resize_service or ResizeService()
        self._bundle_service = bundle_service or BundleService(self._config.bundle_suffix)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._state = RunState.IDLE

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def state(self) -> RunState:
        """Состояние самого последнего начатого запуска.

        Общее для всех запусков сервиса: при параллельных `convert` и
        `convert_async` отражает того, кто сменил состояние последним.
        """
        with self._state_lock:
            return self._state

    @property
    def accepted_extensions(self) -> FrozenSet[str]:
        return EXTENDED_EXTENSIONS if self._config.extended_formats else BASE_EXTENSIONS

    # ---- Выбор файла ----
    def validate_selection(self, path: str | Path) -> SelectionResult:
        """Проверка только по расширению (без регистра); содержимое не читается."""
        p = Path(path)
        ext = p.suffix.lower()
        if ext in self.accepted_extensions:
            return SelectionResult(path=p, accepted=True)
        allowed = ", ".join(sorted(e.lstrip(".").upper() for e in self.accepted_extensions))
        return SelectionResult(path=p, accepted=False, reason=f"Неподдерживаемый тип файла, выберите {allowed}")

    def require_selection(self, path: str | Path) -> ConversionRequest:
        selection = self.validate_selection(path)
        if not selection.accepted:
            raise ValidationError(selection.path, selection.reason or "Неподдерживаемый тип файла")
        return ConversionRequest(input_path=selection.path)

    # ---- Конвертация ----
    def convert(
        self,
        path: str | Path,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ConversionResult:
        """Декодирует один раз и пишет по файлу на каждый размер каталога.

        Ошибки не пробрасываются: первая (в порядке каталога) попадает в
        `ConversionResult.error`, оставшиеся размеры пропускаются, уже
        записанные файлы остаются на диске.
        """
        input_path = Path(path)
        self._set_state(RunState.DECODING, input_path)
        try:
            image = self._image_service.load_image(input_path)
        except Exception as exc:
            return self._failed(input_path, None, [], exc)

        # декодирование раньше каталога: битый файл не оставляет пустой бандл
        try:
            bundle_dir = self._bundle_service.ensure_bundle_dir(input_path)
        except Exception as exc:
            return self._failed(input_path, None, [], exc)

        self._set_state(RunState.CONVERTING, input_path)
        written, error = self._convert_all(input_path, image, bundle_dir, on_progress, cancel_event)
        if error is not None:
            return self._failed(input_path, bundle_dir, written, error)

        self._set_state(RunState.DONE, input_path)
        logger.info("Converted %s: %d files in %s", input_path.name, len(written), bundle_dir)
        return ConversionResult(input_path=input_path, bundle_directory=bundle_dir, written_files=tuple(written))

    def convert_async(
        self,
        path: str | Path,
        on_done: Optional[DoneCallback] = None,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> "Future[ConversionResult]":
        """Запускает `convert` в фоновом потоке.

        `on_done` вызывается ровно один раз (из фонового потока) с результатом,
        успешным или нет. Запуски выполняются по одному.
        """
        input_path = Path(path)
        future = self._get_executor().submit(self.convert, input_path, on_progress, cancel_event)
        if on_done is not None:
            future.add_done_callback(lambda f: on_done(self._result_of(f, input_path)))
        return future

    def shutdown(self, wait: bool = True) -> None:
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=wait)
                self._executor = None

    # ---- Helpers ----
    def _result_of(self, future: "Future[ConversionResult]", input_path: Path) -> ConversionResult:
        """Результат фонового запуска; исключение или отмена тоже становятся результатом."""
        if future.cancelled():
            return self._failed(input_path, None, [], ConversionCancelled(f"Конвертация отменена: {input_path}"))
        exc = future.exception()
        if exc is not None:
            return self._failed(input_path, None, [], exc)
        return future.result()

    def _convert_all(
        self,
        input_path: Path,
        image: ImageData,
        bundle_dir: Path,
        on_progress: Optional[ProgressCallback],
        cancel_event: Optional[threading.Event],
    ) -> Tuple[List[Path], Optional[BaseException]]:
        catalog = self._config.catalog
        base = self._bundle_service.base_name(input_path)
        total = len(catalog)
        written: List[Path] = []

        def convert_one(spec: SizeSpec) -> Path:
            if cancel_event is not None and cancel_event.is_set():
                raise ConversionCancelled(f"Конвертация отменена перед {spec.platform} {spec.variant}")
            resized = self._resize_service.fill(image.pil_image, spec.width, spec.height)
            return self._bundle_service.write_emote(bundle_dir, base, spec, resized)

        if self._config.max_workers == 1:
            for index, spec in enumerate(catalog, start=1):
                try:
                    written.append(convert_one(spec))
                    self._report_progress(on_progress, index, total, spec)
                except Exception as exc:
                    return written, exc
            return written, None

        # результаты собираются в порядке каталога, а не завершения
        with ThreadPoolExecutor(max_workers=self._config.max_workers, thread_name_prefix="emote-size") as pool:
            futures = [pool.submit(convert_one, spec) for spec in catalog]
            for index, (spec, future) in enumerate(zip(catalog, futures), start=1):
                try:
                    written.append(future.result())
                    self._report_progress(on_progress, index, total, spec)
                except Exception as exc:
                    for pending in futures[index:]:
                        pending.cancel()
                    return written, exc
        return written, None

    def _report_progress(self, on_progress: Optional[ProgressCallback], index: int, total: int, spec: SizeSpec) -> None:
        if on_progress is None:
            return
        try:
            on_progress(index, total, spec)
        except Exception as exc:
            raise ProgressCallbackError(f"Обработчик прогресса упал на {spec.platform} {spec.variant}") from exc

    def _failed(
        self,
        input_path: Path,
        bundle_dir: Optional[Path],
        written: List[Path],
        error: BaseException,
    ) -> ConversionResult:
        self._set_state(RunState.FAILED, input_path)
        if isinstance(error, EmoteConverterError):
            logger.warning("Conversion of %s failed: %s", input_path.name, describe_error(error))
        else:
            logger.error("Unexpected error converting %s", input_path.name, exc_info=error)
        return ConversionResult(
            input_path=input_path,
            bundle_directory=bundle_dir,
            written_files=tuple(written),
            error=error,
        )

    def _set_state(self, state: RunState, input_path: Path) -> None:
        with self._state_lock:
            self._state = state
        logger.debug("%s -> %s", input_path.name, state.value)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="emote-convert")
            return self._executor
