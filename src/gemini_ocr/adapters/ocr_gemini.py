from __future__ import annotations

import logging

from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.gemini_payload import GeminiRequest, build_request
from gemini_ocr.domain.gemini_response import parse_response
from gemini_ocr.domain.gemini_settings import GeminiSettings
from gemini_ocr.domain.languages import LangEnum
from gemini_ocr.domain.models import OcrRequest, OcrResult
from gemini_ocr.ports.http_port import HttpPort
from gemini_ocr.ports.ocr_port import OCRPort

logger = logging.getLogger(__name__)


class GeminiOCRAdapter(OCRPort):
    """OCR through the Gemini ``generateContent`` REST endpoint.

    ``settings`` is read on every call, so edits made through the settings
    service apply to the next recognition without rebuilding the adapter.
    """

    def __init__(self, settings: GeminiSettings, http: HttpPort) -> None:
        self._settings = settings
        self._http = http

    @property
    def supported_languages(self) -> list[LangEnum]:
        return list(LangEnum)

    def recognize(
        self, request: OcrRequest, cancellation_token: CancellationToken | None = None
    ) -> OcrResult:
        token = cancellation_token or CancellationToken()
        gemini_request = self.build_request(request)
        token.raise_if_cancelled()
        logger.debug(
            "Sending OCR request model=%s image_bytes=%d",
            gemini_request.model,
            len(request.image_bytes),
        )
        raw_response = self._http.post(gemini_request.url, gemini_request.body, token)
        result = parse_response(raw_response)
        logger.debug("OCR response mapped to %d content(s)", len(result.contents))
        return result

    def build_request(self, request: OcrRequest) -> GeminiRequest:
        return build_request(request, self._settings, self._settings.prompts.active)
