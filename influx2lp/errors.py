"""Exceptions raised by the line-protocol writer.

Every exception carries the HTTP ``status_code`` and response ``body`` seen at
the point of failure so callers can report them without inspecting the
exception type.  Failures that happen before a response arrives report
``status_code == 0`` and an empty body.
"""

from __future__ import annotations


class Influx2LPError(Exception):
    """Base class for all write failures."""

    def __init__(self, message: str, status_code: int = 0, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigurationError(Influx2LPError):
    """Raised when a required routing parameter (bucket, org) is missing."""


class RequestConstructionError(Influx2LPError):
    """Raised when the write request cannot be built from the configuration."""


class TransportError(Influx2LPError):
    """Raised when the server could not be reached."""


class UnexpectedStatusError(Influx2LPError):
    """Raised when the server answers with anything other than the expected status."""

    def __init__(self, status_code: int, body: str, uri: str, expected: int = 204) -> None:
        super().__init__(
            f"expected status {expected}, got status {status_code} (uri={uri!r})",
            status_code=status_code,
            body=body,
        )
        self.uri = uri
        self.expected = expected
