"""Typed HTTP client for the Tripline REST API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx
import structlog
from httpx import AsyncClient

from ..core.config import ClientConfig
from .endpoints import BOOK_JOURNEY, LIST_USERS, NEW_FEATURE, Endpoint
from .errors import DecodeError, ErrorKind, TransportError
from .schemas import (
    BookJourneyRequest,
    ErrorResponse,
    NewFeatureRequest,
    NewFeatureResponse,
    RawResponse,
    UserListResponse,
    WireModel,
)

logger = structlog.get_logger(__name__)

_BODY_PREVIEW_LIMIT = 500


@dataclass(slots=True)
class ApiClient:
    """Convenience wrapper around :class:`httpx.AsyncClient` with typed responses.

    Every failure leaves this class as :class:`TransportError`: connectivity
    problems, non-2xx statuses and bodies that do not decode into the
    endpoint's response record.
    """

    http: AsyncClient

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ApiClient":
        """Build a client bound to ``config.base_url``."""

        http = AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            transport=transport,
        )
        return cls(http=http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    async def submit_feature(self, payload: NewFeatureRequest) -> NewFeatureResponse:
        """Send ``POST new-endpoint``."""

        return await self.call(NEW_FEATURE, payload)

    async def book_journey(self, payload: BookJourneyRequest) -> RawResponse:
        """Send ``POST user/book-journey`` and return the untyped response."""

        return await self.call(BOOK_JOURNEY, payload)

    async def list_users(self) -> UserListResponse:
        """Send ``GET users``."""

        return await self.call(LIST_USERS)

    async def call(
        self, endpoint: Endpoint, payload: Optional[WireModel] = None
    ) -> Any:
        """Perform ``endpoint`` and decode its response record."""

        _check_payload(endpoint, payload)
        log = logger.bind(
            endpoint=endpoint.name, method=endpoint.method, path=endpoint.path
        )
        log.info("api.request.start")

        body = payload.encode() if payload is not None else None
        try:
            response = await self.http.request(endpoint.method, endpoint.path, json=body)
        except httpx.TimeoutException as exc:
            log.warning("api.request.failed", kind=ErrorKind.TIMEOUT.value, error=str(exc))
            raise TransportError(
                f"{endpoint.name}: request timed out", kind=ErrorKind.TIMEOUT
            ) from exc
        except httpx.HTTPError as exc:
            log.warning("api.request.failed", kind=ErrorKind.NETWORK.value, error=str(exc))
            raise TransportError(
                f"{endpoint.name}: network error: {exc}", kind=ErrorKind.NETWORK
            ) from exc

        if not response.is_success:
            detail = _extract_error(response)
            kind = ErrorKind.SERVER if response.status_code >= 500 else ErrorKind.CLIENT
            log.warning(
                "api.request.failed",
                kind=kind.value,
                status_code=response.status_code,
                detail=detail,
            )
            raise TransportError(
                f"{endpoint.name}: HTTP {response.status_code}: {detail}",
                kind=kind,
                status_code=response.status_code,
                detail=detail,
            )

        result = _decode(endpoint, response)
        log.info("api.request.success", status_code=response.status_code)
        return result


def _check_payload(endpoint: Endpoint, payload: Optional[WireModel]) -> None:
    if endpoint.request_model is None:
        if payload is not None:
            raise TypeError(f"{endpoint.name} does not accept a request body")
        return
    if not isinstance(payload, endpoint.request_model):
        raise TypeError(
            f"{endpoint.name} expects {endpoint.request_model.__name__}, "
            f"got {type(payload).__name__}"
        )


def _decode(endpoint: Endpoint, response: httpx.Response) -> Any:
    if endpoint.response_model is None:
        return RawResponse.build(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=_read_body(response),
        )

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning(
            "api.request.failed",
            endpoint=endpoint.name,
            kind=ErrorKind.DECODE.value,
            status_code=response.status_code,
            body_preview=response.text[:_BODY_PREVIEW_LIMIT],
        )
        raise TransportError(
            f"{endpoint.name}: response body is not valid JSON",
            kind=ErrorKind.DECODE,
            status_code=response.status_code,
        ) from exc

    try:
        return endpoint.response_model.decode(data)
    except DecodeError as exc:
        logger.warning(
            "api.request.failed",
            endpoint=endpoint.name,
            kind=ErrorKind.DECODE.value,
            status_code=response.status_code,
            detail=str(exc),
        )
        raise TransportError(
            f"{endpoint.name}: {exc}",
            kind=ErrorKind.DECODE,
            status_code=response.status_code,
            detail=str(exc),
        ) from exc


def _read_body(response: httpx.Response) -> Any:
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


def _extract_error(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text[:_BODY_PREVIEW_LIMIT] or response.reason_phrase
    try:
        envelope = ErrorResponse.decode(data)
    except DecodeError:
        if isinstance(data, dict) and "detail" in data:
            return str(data["detail"])
        return str(data)[:_BODY_PREVIEW_LIMIT]
    return f"{envelope.error.code}: {envelope.error.message}"


__all__ = ["ApiClient"]
