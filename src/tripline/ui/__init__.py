"""Presentation adapter consumed by screens rendering controller state."""

from .render import FAILURE_MESSAGES, StateView, render_state

__all__ = ["FAILURE_MESSAGES", "StateView", "render_state"]
