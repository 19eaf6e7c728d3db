"""
Exception hierarchy for upstash_qstash.

QStashError
 +-- InitError              client construction rejected locally
 +-- PublishRequestError    request rejected locally, before any I/O
 +-- ApiError               call-time failures
      +-- TransportError          no response obtained
      +-- DeserializationError    2xx response with an unparseable body
      +-- RemoteError             non-2xx response
"""
from typing import Optional


class QStashError(Exception):
    """Base class for every error raised by upstash_qstash."""


class InitError(QStashError, ValueError):
    """Raised when a client cannot be constructed (empty token, bad base_url)."""


class PublishRequestError(QStashError, ValueError):
    """Raised when a publish request fails local validation."""


class ApiError(QStashError):
    """Base class for failures that happen while talking to QStash."""


class TransportError(ApiError):
    """No response was received (connect, DNS, TLS, timeout, protocol)."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"transport failure: {type(cause).__name__}: {cause}")


class DeserializationError(ApiError):
    """A success response was received but its body could not be parsed."""

    def __init__(self, body: str, cause: Optional[BaseException] = None):
        self.body = body
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"could not deserialize response body{detail}")


class RemoteError(ApiError):
    """QStash answered with a status outside the 2xx range.

    Callers that need finer-grained handling (rate limits, auth) inspect
    ``status`` themselves.
    """

    def __init__(
        self,
        status: int,
        message: str,
        body: str = "",
        status_class: Optional[str] = None,
    ):
        self.status = status
        self.message = message
        self.body = body
        self.status_class = status_class
        super().__init__(f"HTTP {status}: {message}")

    def __repr__(self) -> str:
        return f"RemoteError(status={self.status!r}, message={self.message!r})"
