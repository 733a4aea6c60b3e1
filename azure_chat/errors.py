from __future__ import annotations

from typing import Any


class ConfigurationError(ValueError):
    """Required Azure OpenAI settings are missing or empty."""

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


class RequestError(RuntimeError):
    """The chat-completion call failed.

    When the server answered, `status_code`, `headers` and `body` are set.
    When no response was received, only `transport_error` is set.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
        body: Any = None,
        transport_error: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers or {}
        self.body = body
        self.transport_error = transport_error

    @property
    def has_response(self) -> bool:
        return self.status_code is not None
