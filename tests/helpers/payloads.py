"""Contract payloads shared across tests."""

from __future__ import annotations

from typing import Any, Dict

USERS_SAMPLE: Dict[str, Any] = {
    "status": "success",
    "message": "Users retrieved",
    "data": [
        {"id": 1, "name": "Ada Lovelace", "email": "ada@example.com"},
        {"id": 2, "name": "Alan Turing", "email": "alan@example.com"},
    ],
}

BOOKING_PAYLOAD: Dict[str, Any] = {
    "journeyId": "journey-42",
    "startLocation": "Central Station",
    "endLocation": "Airport",
    "startTime": "2026-03-01T09:00:00Z",
    "endTime": "2026-03-01T09:40:00Z",
    "passengers": [
        {"name": "Ada Lovelace", "email": "ada@example.com", "type": "adult"},
        {"name": "Byron", "email": "byron@example.com", "type": "child"},
    ],
    "cardId": "card-001",
    "totalAmount": 4200,
    "testMode": True,
}
