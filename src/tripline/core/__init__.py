"""Shared configuration for the Tripline client stack."""

from .config import DEFAULT_FAILURE_MESSAGE, ClientConfig

__all__ = ["ClientConfig", "DEFAULT_FAILURE_MESSAGE"]
