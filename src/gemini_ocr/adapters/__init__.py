from .http_requests import RequestsHttpAdapter
from .ocr_gemini import GeminiOCRAdapter
from .sqlite_settings_storage import SQLiteSettingsStorage

__all__ = ["GeminiOCRAdapter", "RequestsHttpAdapter", "SQLiteSettingsStorage"]
