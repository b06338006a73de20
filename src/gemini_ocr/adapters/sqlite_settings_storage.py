from __future__ import annotations

import json
import sqlite3
from datetime import datetime

from gemini_ocr.domain.errors import SettingsStorageError
from gemini_ocr.ports.settings_storage_port import SettingsStoragePort, StorageSlot


class SQLiteSettingsStorage(SettingsStoragePort):
    def __init__(self, sqlite_path: str) -> None:
        self._sqlite_path = sqlite_path
        self._ensure_schema()

    def load_settings(self, slot: StorageSlot) -> dict | None:
        try:
            with self._connect() as conn:
                row = conn.execute(
                    """
                    SELECT payload_json
                    FROM plugin_settings
                    WHERE slot = ?
                    """,
                    (slot.value,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise SettingsStorageError("Failed to load settings") from exc
        if row is None:
            return None
        try:
            data = json.loads(row[0])
        except json.JSONDecodeError as exc:
            raise SettingsStorageError(f"Stored settings are not valid JSON: {slot.value}") from exc
        if not isinstance(data, dict):
            raise SettingsStorageError(f"Stored settings must be an object: {slot.value}")
        return data

    def save_settings(self, slot: StorageSlot, payload: dict) -> None:
        try:
            updated_at = datetime.now().isoformat()
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO plugin_settings(slot, payload_json, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(slot)
                    DO UPDATE SET
                        payload_json = excluded.payload_json,
                        updated_at = excluded.updated_at
                    """,
                    (slot.value, json.dumps(payload, ensure_ascii=False), updated_at),
                )
        except sqlite3.Error as exc:
            raise SettingsStorageError("Failed to save settings") from exc

    def _ensure_schema(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS plugin_settings(
                        slot TEXT PRIMARY KEY,
                        payload_json TEXT NOT NULL,
                        updated_at TEXT
                    )
                    """
                )
        except sqlite3.Error as exc:
            raise SettingsStorageError("Failed to initialize settings schema") from exc

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._sqlite_path)
