from .http_port import HttpPort
from .ocr_port import OCRPort
from .settings_storage_port import SettingsStoragePort, StorageSlot

__all__ = ["HttpPort", "OCRPort", "SettingsStoragePort", "StorageSlot"]
