from unittest.mock import Mock

from gemini_ocr.adapters.ocr_gemini import GeminiOCRAdapter
from gemini_ocr.container import build_services


def test_build_services_shares_settings_between_service_and_adapter(tmp_path) -> None:
    http = Mock()
    http.post.return_value = '{"candidates": [{"content": {"parts": [{"text": "ok"}]}}]}'
    services = build_services(str(tmp_path / "settings.db"), http=http)

    settings_service = services["settings_service"]
    settings_service.update_connection(model="gemini-custom")
    result = services["ocr_service"].recognize_bytes(b"img")

    assert isinstance(services["ocr"], GeminiOCRAdapter)
    assert result.text == "ok"
    url = http.post.call_args.args[0]
    assert "/models/gemini-custom:generateContent" in url


def test_build_services_reloads_saved_settings(tmp_path) -> None:
    db_path = str(tmp_path / "settings.db")
    first = build_services(db_path, http=Mock())
    first["settings_service"].select_prompt("translate")

    second = build_services(db_path, http=Mock())
    assert second["settings_service"].active_prompt().name == "translate"
