"""Data-access facade between the HTTP client and state controllers.

One pass-through per endpoint. Whatever goes wrong below this layer is
re-raised as :class:`~tripline.api.errors.RequestFailedError`, which keeps
the failure kind and description but hides the concrete exception type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from .client import ApiClient
from .errors import RequestFailedError, TriplineError
from .schemas import (
    BookJourneyRequest,
    NewFeatureRequest,
    NewFeatureResponse,
    RawResponse,
    UserListResponse,
)

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ApiFacade:
    """Thin layer that normalises client failures for controllers."""

    client: ApiClient

    async def submit_feature(
        self, param1: str, param2: int, optional_param: Optional[bool] = None
    ) -> NewFeatureResponse:
        try:
            payload = NewFeatureRequest.build(
                param1=param1, param2=param2, optional_param=optional_param
            )
            return await self.client.submit_feature(payload)
        except TriplineError as exc:
            raise _wrap("new_feature", exc) from exc

    async def book_journey(self, request: BookJourneyRequest) -> RawResponse:
        try:
            return await self.client.book_journey(request)
        except TriplineError as exc:
            raise _wrap("book_journey", exc) from exc

    async def list_users(self) -> UserListResponse:
        try:
            return await self.client.list_users()
        except TriplineError as exc:
            raise _wrap("list_users", exc) from exc


def _wrap(operation: str, exc: TriplineError) -> RequestFailedError:
    logger.info(
        "facade.request.failed",
        operation=operation,
        kind=exc.kind.value,
        status_code=exc.status_code,
    )
    return RequestFailedError.wrap(operation, exc)


__all__ = ["ApiFacade"]
