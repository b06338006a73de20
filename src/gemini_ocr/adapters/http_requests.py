from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import requests

from gemini_ocr.domain.cancellation import CancellationToken
from gemini_ocr.domain.errors import OperationCancelledError
from gemini_ocr.ports.http_port import HttpPort

logger = logging.getLogger(__name__)

_CANCEL_POLL_SECONDS = 0.05


class RequestsHttpAdapter(HttpPort):
    """POST through ``requests`` on a worker thread so a cancellation can stop the wait.

    Without an injected session every call uses its own connection, so a
    request abandoned after a cancel never shares state with the next call.
    """

    def __init__(self, timeout: float = 60.0, session: requests.Session | None = None) -> None:
        self._timeout = timeout
        self._session = session

    def post(
        self, url: str, json_body: dict, cancellation_token: CancellationToken
    ) -> str:
        cancellation_token.raise_if_cancelled()
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._send, url, json_body)
            while not future.done():
                if cancellation_token.wait(_CANCEL_POLL_SECONDS):
                    future.cancel()
                    logger.debug("POST cancelled while in flight")
                    raise OperationCancelledError("Operation was cancelled.")
            return future.result()
        finally:
            executor.shutdown(wait=False)

    def _send(self, url: str, json_body: dict) -> str:
        post = self._session.post if self._session is not None else requests.post
        response = post(
            url,
            headers={"Content-Type": "application/json"},
            json=json_body,
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.text
