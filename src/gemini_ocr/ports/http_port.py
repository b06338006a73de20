from __future__ import annotations

from typing import Protocol, runtime_checkable

from gemini_ocr.domain.cancellation import CancellationToken


@runtime_checkable
class HttpPort(Protocol):
    def post(
        self, url: str, json_body: dict, cancellation_token: CancellationToken
    ) -> str:
        """POST a JSON body and return the raw response text."""
