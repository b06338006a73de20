from unittest.mock import Mock

import pytest

from gemini_ocr.domain.languages import LangEnum
from gemini_ocr.domain.models import OcrContent, OcrRequest, OcrResult
from gemini_ocr.services.ocr_service import OCRService


def test_recognize_file_reads_bytes_and_calls_port(tmp_path) -> None:
    image_path = tmp_path / "page.png"
    image_path.write_bytes(b"png-bytes")
    ocr = Mock()
    ocr.recognize.return_value = OcrResult(contents=[OcrContent(text="a"), OcrContent(text="b")])
    events: list[dict] = []

    service = OCRService(ocr)
    result = service.recognize_file(image_path, language=LangEnum.KOREAN, progress_callback=events.append)

    assert result.text == "a\nb"
    ocr.recognize.assert_called_once_with(
        OcrRequest(image_bytes=b"png-bytes", language=LangEnum.KOREAN), None
    )
    assert [event["stage"] for event in events] == ["ocr_started", "ocr_done"]
    assert events[0]["bytes_len"] == len(b"png-bytes")
    assert events[1]["contents"] == 2


def test_recognize_file_missing_raises(tmp_path) -> None:
    service = OCRService(Mock())
    with pytest.raises(ValueError):
        service.recognize_file(tmp_path / "missing.png")


def test_recognize_bytes_rejects_empty_input() -> None:
    ocr = Mock()
    service = OCRService(ocr)
    with pytest.raises(ValueError):
        service.recognize_bytes(b"")
    ocr.recognize.assert_not_called()


def test_recognize_bytes_propagates_port_errors() -> None:
    ocr = Mock()
    ocr.recognize.side_effect = RuntimeError("No data\nRaw: {}")
    service = OCRService(ocr)
    with pytest.raises(RuntimeError, match="No data"):
        service.recognize_bytes(b"x")
