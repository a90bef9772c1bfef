"""Client-side layers for the Tripline REST API.

``schemas`` holds the wire records, ``endpoints`` the declarative verb/path
table, ``client`` the httpx-backed transport and ``facade`` the pass-through
used by state controllers.
"""

from .client import ApiClient
from .endpoints import BOOK_JOURNEY, ENDPOINTS, LIST_USERS, NEW_FEATURE, Endpoint
from .errors import (
    DecodeError,
    ErrorKind,
    PayloadValidationError,
    RequestFailedError,
    TransportError,
    TriplineError,
)
from .facade import ApiFacade

__all__ = [
    "ApiClient",
    "ApiFacade",
    "Endpoint",
    "ENDPOINTS",
    "NEW_FEATURE",
    "BOOK_JOURNEY",
    "LIST_USERS",
    "ErrorKind",
    "TriplineError",
    "DecodeError",
    "PayloadValidationError",
    "TransportError",
    "RequestFailedError",
]
