from typing import Any, Optional


class ApiError(Exception):
    """Base exception for errors raised by the data provider itself."""
    pass


class TransportError(ApiError):
    """
    The request failed before the server returned a status.

    The request engine never retries these; they reach the caller unchanged.
    """
    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ApiConnectionError(TransportError):
    """Server unreachable (DNS failure, refused connection, reset socket)."""


class ApiTimeoutError(TransportError):
    """No answer within the configured timeout."""


class ApiResponseError(ApiError):
    """
    Terminal HTTP failure: a non-retryable status, or a retryable one after
    the last attempt. str(error) is the server's status text.
    """
    def __init__(
        self,
        status_text: str,
        status_code: Optional[int] = None,
        response_data: Any = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
    ):
        self.status_text = status_text
        self.status_code = status_code
        self.response_data = response_data if response_data is not None else {}
        self.url = url
        self.method = method
        super().__init__(status_text)

    def __repr__(self) -> str:
        target = f" {self.method} {self.url}" if self.url else ""
        return f"{self.__class__.__name__}({self.status_code} {self.status_text!r}{target})"


class ConfigError(ApiError, ValueError):
    """Provider settings missing or malformed."""
