import threading
from unittest.mock import Mock

import pytest
import requests

from gemini_ocr.adapters.http_requests import RequestsHttpAdapter
from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.errors import OperationCancelledError


def test_post_sends_json_and_returns_text() -> None:
    response = Mock()
    response.text = '{"ok": true}'
    session = Mock()
    session.post.return_value = response
    adapter = RequestsHttpAdapter(timeout=5, session=session)

    text = adapter.post("https://example.com/x", {"a": 1}, CancellationToken())

    assert text == '{"ok": true}'
    session.post.assert_called_once_with(
        "https://example.com/x",
        headers={"Content-Type": "application/json"},
        json={"a": 1},
        timeout=5,
    )
    response.raise_for_status.assert_called_once()


def test_post_propagates_http_errors() -> None:
    response = Mock()
    response.raise_for_status.side_effect = requests.HTTPError("400 Client Error")
    session = Mock()
    session.post.return_value = response
    adapter = RequestsHttpAdapter(session=session)

    with pytest.raises(requests.HTTPError):
        adapter.post("https://example.com/x", {}, CancellationToken())


def test_post_does_not_send_when_already_cancelled() -> None:
    session = Mock()
    adapter = RequestsHttpAdapter(session=session)
    token = CancellationToken()
    token.cancel()

    with pytest.raises(OperationCancelledError):
        adapter.post("https://example.com/x", {}, token)
    session.post.assert_not_called()


def test_post_aborts_when_cancelled_in_flight() -> None:
    started = threading.Event()
    release = threading.Event()
    token = CancellationToken()

    def _slow_post(*args, **kwargs):
        started.set()
        release.wait(5)
        return Mock(text="late")

    session = Mock()
    session.post.side_effect = _slow_post
    adapter = RequestsHttpAdapter(session=session)

    def _cancel_when_started() -> None:
        started.wait(5)
        token.cancel()

    canceller = threading.Thread(target=_cancel_when_started)
    canceller.start()
    try:
        with pytest.raises(OperationCancelledError):
            adapter.post("https://example.com/x", {}, token)
    finally:
        release.set()
        canceller.join()


def test_post_without_session_uses_a_fresh_request_per_call(monkeypatch) -> None:
    calls: list[str] = []

    def _fake_post(url, headers, json, timeout):
        calls.append(url)
        return Mock(text=f"body-{len(calls)}")

    monkeypatch.setattr(requests, "post", _fake_post)
    adapter = RequestsHttpAdapter(timeout=3)

    assert adapter.post("https://example.com/a", {}, CancellationToken()) == "body-1"
    assert adapter.post("https://example.com/b", {}, CancellationToken()) == "body-2"
    assert calls == ["https://example.com/a", "https://example.com/b"]
