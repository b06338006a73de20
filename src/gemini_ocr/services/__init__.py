from .ocr_service import OCRService
from .settings_service import SettingsService

__all__ = ["OCRService", "SettingsService"]
