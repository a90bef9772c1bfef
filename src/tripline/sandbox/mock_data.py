"""Deterministic payloads served by the sandbox backend."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..api.schemas import BookJourneyRequest, NewFeatureRequest


class SandboxScenario(str, Enum):
    """Available behaviours for the sandbox backend."""

    SUCCESS = "success"
    SERVER_ERROR = "server_error"
    MALFORMED = "malformed"


SAMPLE_USERS: Dict[str, Any] = {
    "status": "success",
    "message": "Users retrieved",
    "data": [
        {"id": 1, "name": "Ada Lovelace", "email": "ada@example.com"},
        {"id": 2, "name": "Alan Turing", "email": "alan@example.com"},
    ],
}

SERVER_ERROR_BODY: Dict[str, Any] = {
    "error": {"code": "internal_error", "message": "Simulated backend failure"}
}

MALFORMED_BODY: Dict[str, Any] = {"unexpected": True}


def users_payload() -> Dict[str, Any]:
    return {
        "status": SAMPLE_USERS["status"],
        "message": SAMPLE_USERS["message"],
        "data": [dict(user) for user in SAMPLE_USERS["data"]],
    }


def feature_payload(request: NewFeatureRequest) -> Dict[str, Any]:
    return {
        "success": True,
        "message": "Feature request accepted",
        "data": request.encode(),
    }


def booking_payload(request: BookJourneyRequest) -> Dict[str, Any]:
    return {
        "bookingId": f"BK-{request.journey_id}",
        "status": "confirmed",
        "journeyId": request.journey_id,
        "passengerCount": len(request.passengers),
        "totalAmount": request.total_amount,
        "testMode": request.test_mode,
    }


__all__ = [
    "SandboxScenario",
    "SAMPLE_USERS",
    "SERVER_ERROR_BODY",
    "MALFORMED_BODY",
    "users_payload",
    "feature_payload",
    "booking_payload",
]
