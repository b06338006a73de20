from __future__ import annotations

from typing import Protocol, runtime_checkable

from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.models import OcrRequest, OcrResult


@runtime_checkable
class OCRPort(Protocol):
    def recognize(
        self, request: OcrRequest, cancellation_token: CancellationToken | None = None
    ) -> OcrResult:
        """Recognize text in the request image."""
