"""FastAPI sandbox implementing the Tripline endpoint contracts.

Serves deterministic payloads from :mod:`.mock_data` so the client stack can
be exercised locally or in tests through ``httpx.ASGITransport``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from fastapi import APIRouter, Body, FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..api.errors import DecodeError
from ..api.schemas import BookJourneyRequest, NewFeatureRequest
from . import mock_data
from .mock_data import SandboxScenario

logger = structlog.get_logger(__name__)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def _scenario_override(request: Request) -> Optional[JSONResponse]:
    scenario: SandboxScenario = request.app.state.scenario
    if scenario is SandboxScenario.SERVER_ERROR:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=mock_data.SERVER_ERROR_BODY,
        )
    if scenario is SandboxScenario.MALFORMED:
        return JSONResponse(
            status_code=status.HTTP_200_OK, content=mock_data.MALFORMED_BODY
        )
    return None


def build_router(prefix: str = "/api") -> APIRouter:
    """Return a router serving ``new-endpoint``, ``user/book-journey`` and ``users``."""

    router = APIRouter(prefix=prefix, tags=["sandbox"])

    @router.post("/new-endpoint", name="sandbox:new-feature")
    async def new_feature(
        request: Request, payload: Dict[str, Any] = Body(...)
    ) -> JSONResponse:
        override = _scenario_override(request)
        if override is not None:
            return override
        try:
            body = NewFeatureRequest.decode(payload)
        except DecodeError as exc:
            logger.info(
                "sandbox.request.rejected", endpoint="new_feature", error=str(exc)
            )
            return _error(422, "invalid_payload", str(exc))
        return JSONResponse(mock_data.feature_payload(body))

    @router.post("/user/book-journey", name="sandbox:book-journey")
    async def book_journey(
        request: Request, payload: Dict[str, Any] = Body(...)
    ) -> JSONResponse:
        override = _scenario_override(request)
        if override is not None:
            return override
        try:
            body = BookJourneyRequest.decode(payload)
        except DecodeError as exc:
            logger.info(
                "sandbox.request.rejected", endpoint="book_journey", error=str(exc)
            )
            return _error(422, "invalid_payload", str(exc))
        return JSONResponse(
            status_code=status.HTTP_201_CREATED, content=mock_data.booking_payload(body)
        )

    @router.get("/users", name="sandbox:list-users")
    async def list_users(request: Request) -> JSONResponse:
        override = _scenario_override(request)
        if override is not None:
            return override
        return JSONResponse(mock_data.users_payload())

    return router


def create_app(
    scenario: SandboxScenario = SandboxScenario.SUCCESS, *, prefix: str = "/api"
) -> FastAPI:
    """Build the sandbox application for ``scenario``."""

    app = FastAPI(title="Tripline sandbox")
    app.state.scenario = SandboxScenario(scenario)
    app.include_router(build_router(prefix))
    return app


app = create_app()

__all__ = ["build_router", "create_app", "app"]
