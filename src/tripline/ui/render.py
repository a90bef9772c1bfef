"""Presentation binding: turn controller state into a render-ready view model."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from ..api.errors import ErrorKind
from ..api.schemas import WireModel
from ..state.states import ControllerState, Failed, Loading, Succeeded

FAILURE_MESSAGES: Mapping[ErrorKind, str] = {
    ErrorKind.NETWORK: "No connection. Check your network and try again.",
    ErrorKind.TIMEOUT: "The server took too long to respond. Try again.",
    ErrorKind.SERVER: "Something went wrong on our side. Try again later.",
    ErrorKind.CLIENT: "The request was rejected.",
    ErrorKind.DECODE: "Received an unexpected response.",
    ErrorKind.VALIDATION: "Some of the entered details are invalid.",
}


class StateView(BaseModel):
    """What a screen needs to draw one endpoint's state."""

    phase: Literal["idle", "loading", "succeeded", "failed"]
    show_progress: bool = Field(default=False, description="Render a progress indicator")
    error_text: Optional[str] = Field(default=None, description="Failure notification text")
    retryable: bool = Field(default=False, description="Offer a retry action")
    payload: Optional[Any] = Field(default=None, description="JSON-compatible result")


def render_state(
    state: ControllerState, messages: Mapping[ErrorKind, str] = FAILURE_MESSAGES
) -> StateView:
    """Map ``state`` to a :class:`StateView`.

    Failure text is picked per error kind; unknown kinds fall back to the
    controller's fixed message.
    """

    if isinstance(state, Loading):
        return StateView(phase="loading", show_progress=True)
    if isinstance(state, Failed):
        return StateView(
            phase="failed",
            error_text=messages.get(state.kind, state.message),
            retryable=state.retryable,
        )
    if isinstance(state, Succeeded):
        return StateView(phase="succeeded", payload=_to_jsonable(state.payload))
    return StateView(phase="idle")


def _to_jsonable(payload: Any) -> Any:
    if isinstance(payload, WireModel):
        return payload.encode()
    return payload


__all__ = ["FAILURE_MESSAGES", "StateView", "render_state"]
