from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.models import OcrRequest, OcrResult
from gemini_ocr.ports.http_port import HttpPort
from gemini_ocr.ports.ocr_port import OCRPort
from gemini_ocr.ports.settings_storage_port import SettingsStoragePort, StorageSlot


class DummyHttp:
    def post(self, url: str, json_body: dict, cancellation_token: CancellationToken) -> str:
        return "{}"


class DummyOCR:
    def recognize(
        self, request: OcrRequest, cancellation_token: CancellationToken | None = None
    ) -> OcrResult:
        return OcrResult()


class DummyStorage:
    def load_settings(self, slot: StorageSlot) -> dict | None:
        return None

    def save_settings(self, slot: StorageSlot, payload: dict) -> None:
        return None


def test_ports_runtime_checkable() -> None:
    assert isinstance(DummyHttp(), HttpPort)
    assert isinstance(DummyOCR(), OCRPort)
    assert isinstance(DummyStorage(), SettingsStoragePort)
