"""State controllers exposing request phases to presentation."""

from .controller import Listener, RequestController
from .controllers import FeatureController, JourneyBookingController, UsersController
from .states import ControllerState, Failed, Idle, Loading, Succeeded

__all__ = [
    "ControllerState",
    "Idle",
    "Loading",
    "Succeeded",
    "Failed",
    "Listener",
    "RequestController",
    "FeatureController",
    "JourneyBookingController",
    "UsersController",
]
