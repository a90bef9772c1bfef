from __future__ import annotations

import pytest

from tripline.api.endpoints import BOOK_JOURNEY, ENDPOINTS, LIST_USERS, NEW_FEATURE, Endpoint
from tripline.api.schemas import NewFeatureRequest, NewFeatureResponse, UserListResponse

pytestmark = pytest.mark.unit


def test_endpoint_table_matches_contracts() -> None:
    assert (NEW_FEATURE.method, NEW_FEATURE.path) == ("POST", "new-endpoint")
    assert NEW_FEATURE.request_model is NewFeatureRequest
    assert NEW_FEATURE.response_model is NewFeatureResponse

    assert (BOOK_JOURNEY.method, BOOK_JOURNEY.path) == ("POST", "user/book-journey")
    assert BOOK_JOURNEY.response_model is None

    assert (LIST_USERS.method, LIST_USERS.path) == ("GET", "users")
    assert LIST_USERS.request_model is None
    assert LIST_USERS.response_model is UserListResponse

    assert set(ENDPOINTS) == {"new_feature", "book_journey", "list_users"}


def test_get_endpoint_cannot_declare_body() -> None:
    with pytest.raises(ValueError, match="GET endpoints cannot carry a body"):
        Endpoint("broken", "GET", "users", NewFeatureRequest, UserListResponse)


def test_unsupported_method_is_rejected() -> None:
    with pytest.raises(ValueError, match="unsupported HTTP method"):
        Endpoint("broken", "DELETE", "users")


def test_absolute_path_is_rejected() -> None:
    with pytest.raises(ValueError, match="relative"):
        Endpoint("broken", "GET", "/users")
