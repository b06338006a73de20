from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from time import perf_counter

from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.languages import LangEnum
from gemini_ocr.domain.models import OcrRequest, OcrResult
from gemini_ocr.ports.ocr_port import OCRPort


class OCRService:
    def __init__(self, ocr: OCRPort) -> None:
        self._ocr = ocr

    def recognize_bytes(
        self,
        image_bytes: bytes,
        language: LangEnum = LangEnum.AUTO,
        cancellation_token: CancellationToken | None = None,
        progress_callback: Callable[[dict], None] | None = None,
    ) -> OcrResult:
        if not image_bytes:
            raise ValueError("Image bytes are required.")
        self._emit_progress(
            progress_callback,
            stage="ocr_started",
            bytes_len=len(image_bytes),
            language=language.value,
        )
        started = perf_counter()
        result = self._ocr.recognize(
            OcrRequest(image_bytes=image_bytes, language=language),
            cancellation_token,
        )
        self._emit_progress(
            progress_callback,
            stage="ocr_done",
            contents=len(result.contents),
            text_len=len(result.text),
            duration_ms=int((perf_counter() - started) * 1000),
        )
        return result

    def recognize_file(
        self,
        path: str | Path,
        language: LangEnum = LangEnum.AUTO,
        cancellation_token: CancellationToken | None = None,
        progress_callback: Callable[[dict], None] | None = None,
    ) -> OcrResult:
        image_path = Path(path)
        if not image_path.is_file():
            raise ValueError(f"Image file not found: {image_path}")
        return self.recognize_bytes(
            image_path.read_bytes(),
            language=language,
            cancellation_token=cancellation_token,
            progress_callback=progress_callback,
        )

    @staticmethod
    def _emit_progress(
        callback: Callable[[dict], None] | None,
        **payload: object,
    ) -> None:
        if callback is None:
            return
        callback(dict(payload))
