from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class StorageSlot(str, Enum):
    GEMINI_OCR = "gemini_ocr"


@runtime_checkable
class SettingsStoragePort(Protocol):
    def load_settings(self, slot: StorageSlot) -> dict | None:
        """Return the stored payload for a slot, or None if nothing was saved."""

    def save_settings(self, slot: StorageSlot, payload: dict) -> None:
        """Persist the payload for a slot, replacing any previous value."""
