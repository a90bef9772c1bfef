"""Tripline client stack.

Layers, bottom-up: wire records (``api.schemas``), the declarative HTTP
client (``api.client``), the data-access facade (``api.facade``), state
controllers (``state``) and the presentation binding (``ui``). The
``sandbox`` package serves the same contracts for local development.
"""

from .api import ApiClient, ApiFacade, ErrorKind, RequestFailedError
from .core.config import ClientConfig
from .state import FeatureController, JourneyBookingController, UsersController

__all__ = [
    "ApiClient",
    "ApiFacade",
    "ClientConfig",
    "ErrorKind",
    "RequestFailedError",
    "FeatureController",
    "JourneyBookingController",
    "UsersController",
]
