"""Error taxonomy shared by the model, client and facade layers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

__all__ = [
    "ErrorKind",
    "TriplineError",
    "DecodeError",
    "PayloadValidationError",
    "TransportError",
    "RequestFailedError",
    "ControllerClosedError",
]


class ErrorKind(str, Enum):
    """Structured failure category preserved through every layer."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    SERVER = "server"
    CLIENT = "client"
    DECODE = "decode"
    VALIDATION = "validation"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        """Return ``True`` when repeating the same request may succeed."""

        return self in {ErrorKind.NETWORK, ErrorKind.TIMEOUT, ErrorKind.SERVER}


class TriplineError(Exception):
    """Base class for client-side request failures."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def status_code(self) -> int | None:
        return None


class DecodeError(TriplineError):
    """Raised when a mapping does not match the expected record shape."""

    kind = ErrorKind.DECODE

    def __init__(
        self, message: str, *, errors: Sequence[dict[str, Any]] = ()
    ) -> None:
        super().__init__(message)
        self.errors = tuple(errors)


class PayloadValidationError(TriplineError):
    """Raised when an outbound payload cannot be constructed."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self, message: str, *, errors: Sequence[dict[str, Any]] = ()
    ) -> None:
        super().__init__(message)
        self.errors = tuple(errors)


class TransportError(TriplineError):
    """Connectivity failure, non-2xx status or undecodable response body."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message, kind=kind)
        self._status_code = status_code
        self.detail = detail

    @property
    def status_code(self) -> int | None:
        return self._status_code


class RequestFailedError(TriplineError):
    """Generic "request failed" error raised by the facade.

    Wraps any lower-level :class:`TriplineError`, keeping its ``kind`` and
    HTTP status so presentation can tell retryable failures apart from
    permanent ones.
    """

    def __init__(
        self,
        operation: str,
        description: str,
        *,
        kind: ErrorKind,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{operation} request failed: {description}", kind=kind)
        self.operation = operation
        self.description = description
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @classmethod
    def wrap(cls, operation: str, exc: TriplineError) -> "RequestFailedError":
        return cls(
            operation,
            str(exc),
            kind=exc.kind,
            status_code=exc.status_code,
        )


class ControllerClosedError(RuntimeError):
    """Raised when an action is invoked on a disposed controller."""
