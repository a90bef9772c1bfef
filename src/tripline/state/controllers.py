"""Per-endpoint controllers bound to :class:`~tripline.api.facade.ApiFacade`."""

from __future__ import annotations

from typing import Optional

from ..api.facade import ApiFacade
from ..api.schemas import (
    BookJourneyRequest,
    NewFeatureResponse,
    RawResponse,
    UserListResponse,
)
from ..core.config import DEFAULT_FAILURE_MESSAGE
from .controller import RequestController


class FeatureController(RequestController[NewFeatureResponse]):
    """``perform(param1, param2, optional_param=None)`` posts to ``new-endpoint``."""

    name = "new_feature"

    def __init__(
        self, facade: ApiFacade, *, failure_message: str = DEFAULT_FAILURE_MESSAGE
    ) -> None:
        super().__init__(failure_message=failure_message)
        self.facade = facade

    async def _call(
        self, param1: str, param2: int, optional_param: Optional[bool] = None
    ) -> NewFeatureResponse:
        return await self.facade.submit_feature(param1, param2, optional_param)


class JourneyBookingController(RequestController[RawResponse]):
    """``perform(request)`` books a journey."""

    name = "book_journey"

    def __init__(
        self, facade: ApiFacade, *, failure_message: str = DEFAULT_FAILURE_MESSAGE
    ) -> None:
        super().__init__(failure_message=failure_message)
        self.facade = facade

    async def _call(self, request: BookJourneyRequest) -> RawResponse:
        return await self.facade.book_journey(request)


class UsersController(RequestController[UserListResponse]):
    """``perform()`` loads the users listing."""

    name = "list_users"

    def __init__(
        self, facade: ApiFacade, *, failure_message: str = DEFAULT_FAILURE_MESSAGE
    ) -> None:
        super().__init__(failure_message=failure_message)
        self.facade = facade

    async def _call(self) -> UserListResponse:
        return await self.facade.list_users()


__all__ = ["FeatureController", "JourneyBookingController", "UsersController"]
