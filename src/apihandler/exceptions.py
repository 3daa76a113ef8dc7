"""Exception hierarchy for apihandler.

All exceptions inherit from :class:`ApiHandlerError`. Transport failures
are re-raised to the caller unchanged in kind: the handlers never retry
and never swallow them, and the response cache is left untouched on every
error path.

Subclass hierarchy::

    ApiHandlerError
    +-- TransportError
    |   +-- ConnectionError_   (connect, DNS, timeout, invalid URL)
    |   +-- HttpStatusError    (non-2xx response)
    +-- SerializationError     (POST payload is not JSON-serialisable)
    +-- InvalidUsageError      (handler used after close)
    +-- ConfigError            (invalid handler configuration)
"""

from __future__ import annotations

from typing import Optional


class ApiHandlerError(Exception):
    """Base exception for all apihandler errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(ApiHandlerError):
    """Raised when a GET or POST does not complete with a 2xx response.

    Args:
        message: Human-readable error description.
        url: The request URL, when known.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ConnectionError_(TransportError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """


class HttpStatusError(TransportError):
    """Raised when the server answers with a status outside the 2xx range.

    The error body is not parsed; only the status code is kept.

    Args:
        status_code: The HTTP status returned by the server.
        url: The request URL.
        reason: Optional reason phrase (e.g. ``Not Found``).
    """

    def __init__(self, status_code: int, url: str, reason: str = ""):
        message = f"HTTP {status_code} {reason}".rstrip() + f" for {url}"
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason


class SerializationError(ApiHandlerError):
    """Raised when a POST payload cannot be converted to JSON text."""


class InvalidUsageError(ApiHandlerError):
    """Raised when a handler is used after it has been closed."""


class ConfigError(ApiHandlerError):
    """Raised for invalid handler configuration values."""
