"""Request and response records for the Tripline REST endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, StrictBool, StrictInt, StrictStr

from .base import WireModel

__all__ = [
    "NewFeatureRequest",
    "NewFeatureResponse",
    "Passenger",
    "BookJourneyRequest",
    "User",
    "UserListResponse",
    "RawResponse",
    "ErrorPayload",
    "ErrorResponse",
]


class _Request(WireModel):
    model_config = ConfigDict(extra="forbid")


class _Response(WireModel):
    model_config = ConfigDict(extra="ignore")


class NewFeatureRequest(_Request):
    """Payload for ``POST new-endpoint``."""

    param1: StrictStr = Field(..., description="Free-form feature parameter")
    param2: StrictInt = Field(..., description="Numeric feature parameter")
    optional_param: Optional[StrictBool] = Field(
        default=None, alias="optionalParam", description="Optional feature toggle"
    )


class NewFeatureResponse(_Response):
    """Result of ``POST new-endpoint``."""

    success: StrictBool = Field(..., description="Whether the backend accepted the call")
    message: StrictStr = Field(..., description="Human readable outcome")
    data: Optional[Dict[str, Any]] = Field(
        default=None, description="Optional endpoint specific object"
    )


class Passenger(_Request):
    """Traveller attached to a journey booking."""

    name: StrictStr
    email: StrictStr
    type: StrictStr = Field(..., description="Passenger category, e.g. adult or child")


class BookJourneyRequest(_Request):
    """Payload for ``POST user/book-journey``."""

    journey_id: StrictStr = Field(..., alias="journeyId")
    start_location: StrictStr = Field(..., alias="startLocation")
    end_location: StrictStr = Field(..., alias="endLocation")
    start_time: StrictStr = Field(..., alias="startTime", description="ISO-8601 departure")
    end_time: StrictStr = Field(..., alias="endTime", description="ISO-8601 arrival")
    passengers: List[Passenger] = Field(..., description="Travellers on the booking")
    card_id: StrictStr = Field(..., alias="cardId", description="Stored payment card")
    total_amount: StrictInt = Field(
        ..., alias="totalAmount", description="Total price in minor currency units"
    )
    test_mode: StrictBool = Field(
        ..., alias="testMode", description="Run the booking without charging the card"
    )


class User(_Response):
    """Single entry of the users listing."""

    id: StrictInt
    name: StrictStr
    email: StrictStr


class UserListResponse(_Response):
    """Result of ``GET users``."""

    status: StrictStr
    message: StrictStr
    data: List[User] = Field(..., description="Users in backend order")


class RawResponse(WireModel):
    """Untyped HTTP response wrapped in an immutable envelope.

    ``body`` holds the decoded JSON document when the backend answered with
    JSON and the plain text otherwise.
    """

    status_code: StrictInt = Field(..., alias="statusCode")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None


class ErrorPayload(_Response):
    """Error details returned by the backend."""

    code: StrictStr = Field(..., description="Machine readable error code")
    message: StrictStr = Field(..., description="Human readable description")
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(_Response):
    """Uniform error envelope ``{"error": {...}}``."""

    error: ErrorPayload
