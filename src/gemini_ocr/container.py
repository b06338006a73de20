from __future__ import annotations

from typing import Any

from gemini_ocr.adapters.http_requests import RequestsHttpAdapter
from gemini_ocr.adapters.ocr_gemini import GeminiOCRAdapter
from gemini_ocr.adapters.sqlite_settings_storage import SQLiteSettingsStorage
from gemini_ocr.domain.gemini_settings import GeminiSettings
from gemini_ocr.ports.http_port import HttpPort
from gemini_ocr.services.ocr_service import OCRService
from gemini_ocr.services.settings_service import SettingsService
from gemini_ocr.settings import (
    GEMINI_API_KEY,
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    GEMINI_TEMPERATURE,
    HTTP_TIMEOUT_SECONDS,
)


def default_settings() -> GeminiSettings:
    return GeminiSettings(
        url=GEMINI_BASE_URL,
        api_key=GEMINI_API_KEY,
        model=GEMINI_MODEL,
        temperature=GEMINI_TEMPERATURE,
    )


def build_services(sqlite_path: str, http: HttpPort | None = None) -> dict[str, Any]:
    storage = SQLiteSettingsStorage(sqlite_path)
    settings_service = SettingsService(storage, defaults=default_settings())
    settings = settings_service.load()
    http = http or RequestsHttpAdapter(timeout=HTTP_TIMEOUT_SECONDS)
    ocr = GeminiOCRAdapter(settings, http)
    return {
        "ocr_service": OCRService(ocr),
        "settings_service": settings_service,
        "http": http,
        "ocr": ocr,
        "storage": storage,
    }
