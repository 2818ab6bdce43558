"""Custom exceptions for resume_chat failure paths."""

from typing import Optional


class ResumeLoadError(Exception):
    """
    Exception raised when the résumé source document cannot be loaded.

    Never escapes ResumeStore.load(): the store keeps its current record instead.

    Attributes:
        message: Error description
        source: URL or path that was being loaded
        original_error: The underlying network/parse error, if any
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source = source
        self.original_error = original_error

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class TransportError(Exception):
    """
    Exception raised when a remote model transport fails.

    Covers non-success statuses, network failures, timeouts and malformed payloads.
    ResponseGenerator catches it and falls back to the local responder.

    Attributes:
        message: Error description
        status_code: HTTP status returned by the endpoint, if one was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code

        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)


class ProxyError(Exception):
    """
    Exception raised inside the backend proxy handler.

    The message is public: it is sent back to the caller verbatim, so it must never
    contain provider keys or upstream error text.

    Attributes:
        status_code: HTTP status to respond with
        message: Public error description
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")
