from __future__ import annotations


class PromptConfigurationError(RuntimeError):
    """Raised before any request is sent when the active prompt is unusable."""


class NoDataError(RuntimeError):
    def __init__(self, raw_response: str) -> None:
        super().__init__(f"No data\nRaw: {raw_response}")
        self.raw_response = raw_response


class OperationCancelledError(RuntimeError):
    """Raised when a cancellation token fires before a call completes."""


class SettingsStorageError(RuntimeError):
    pass
