"""Observable phases of a single request cycle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Optional, TypeVar, Union

from ..api.errors import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Idle:
    """No request has been made yet."""

    phase: ClassVar[str] = "idle"


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""

    phase: ClassVar[str] = "loading"


@dataclass(frozen=True, slots=True)
class Succeeded(Generic[T]):
    """The latest request completed with ``payload``."""

    payload: T
    phase: ClassVar[str] = "succeeded"


@dataclass(frozen=True, slots=True)
class Failed:
    """The latest request failed.

    ``message`` is the fixed user-facing text configured on the controller;
    ``kind`` keeps the failure category for presentation.
    """

    message: str
    kind: ErrorKind = ErrorKind.UNKNOWN
    status_code: Optional[int] = None
    phase: ClassVar[str] = "failed"

    @property
    def retryable(self) -> bool:
        return self.kind.retryable


ControllerState = Union[Idle, Loading, Succeeded[Any], Failed]

__all__ = ["ControllerState", "Idle", "Loading", "Succeeded", "Failed"]
