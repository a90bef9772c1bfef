"""Declarative table mapping HTTP verb and path to request/response records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Mapping, Optional, Type, TypeVar

from .schemas import (
    BookJourneyRequest,
    NewFeatureRequest,
    NewFeatureResponse,
    RawResponse,
    UserListResponse,
    WireModel,
)

RequestT = TypeVar("RequestT", bound=WireModel)
ResponseT = TypeVar("ResponseT", bound=WireModel)

_SUPPORTED_METHODS = frozenset({"GET", "POST"})


@dataclass(frozen=True, slots=True)
class Endpoint(Generic[RequestT, ResponseT]):
    """Single ``(verb, path)`` pair with its request and response records.

    ``request_model`` is ``None`` for body-less calls. ``response_model`` is
    ``None`` when the endpoint has no fixed schema and the caller receives a
    :class:`~tripline.api.schemas.RawResponse` envelope instead.
    """

    name: str
    method: str
    path: str
    request_model: Optional[Type[RequestT]] = None
    response_model: Optional[Type[ResponseT]] = None

    def __post_init__(self) -> None:
        if self.method not in _SUPPORTED_METHODS:
            raise ValueError(f"{self.name}: unsupported HTTP method {self.method!r}")
        if self.method == "GET" and self.request_model is not None:
            raise ValueError(f"{self.name}: GET endpoints cannot carry a body")
        if self.path.startswith("/"):
            raise ValueError(f"{self.name}: path must be relative to the base URL")


NEW_FEATURE: Endpoint[NewFeatureRequest, NewFeatureResponse] = Endpoint(
    "new_feature", "POST", "new-endpoint", NewFeatureRequest, NewFeatureResponse
)
BOOK_JOURNEY: Endpoint[BookJourneyRequest, RawResponse] = Endpoint(
    "book_journey", "POST", "user/book-journey", BookJourneyRequest, None
)
LIST_USERS: Endpoint[WireModel, UserListResponse] = Endpoint(
    "list_users", "GET", "users", None, UserListResponse
)

ENDPOINTS: Mapping[str, Endpoint] = {
    endpoint.name: endpoint for endpoint in (NEW_FEATURE, BOOK_JOURNEY, LIST_USERS)
}

__all__ = ["Endpoint", "ENDPOINTS", "NEW_FEATURE", "BOOK_JOURNEY", "LIST_USERS"]
