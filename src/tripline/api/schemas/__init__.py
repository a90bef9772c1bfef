"""Exports of the wire records exchanged with the Tripline backend."""

from . import models
from .base import WireModel
from .models import *  # noqa: F401,F403 - re-export contract models

__all__ = ["WireModel", *models.__all__]
