from __future__ import annotations

import pytest

from tests.helpers.payloads import USERS_SAMPLE
from tripline.api.errors import ErrorKind
from tripline.api.schemas import UserListResponse
from tripline.state import Failed, Idle, Loading, Succeeded
from tripline.ui import FAILURE_MESSAGES, render_state

pytestmark = pytest.mark.unit


def test_idle_and_loading_views() -> None:
    assert render_state(Idle()).phase == "idle"

    loading = render_state(Loading())
    assert loading.phase == "loading"
    assert loading.show_progress is True
    assert loading.error_text is None


def test_success_view_exposes_wire_payload() -> None:
    view = render_state(Succeeded(UserListResponse.decode(USERS_SAMPLE)))

    assert view.phase == "succeeded"
    assert view.payload == USERS_SAMPLE
    assert view.show_progress is False


def test_failure_text_depends_on_error_kind() -> None:
    offline = render_state(Failed("Failed to load data", kind=ErrorKind.NETWORK))
    rejected = render_state(Failed("Failed to load data", kind=ErrorKind.CLIENT))

    assert offline.error_text == FAILURE_MESSAGES[ErrorKind.NETWORK]
    assert offline.retryable is True
    assert rejected.error_text == FAILURE_MESSAGES[ErrorKind.CLIENT]
    assert rejected.retryable is False


def test_unknown_kind_falls_back_to_controller_message() -> None:
    view = render_state(Failed("Failed to load data", kind=ErrorKind.UNKNOWN))

    assert view.error_text == "Failed to load data"


def test_presentation_can_override_messages() -> None:
    view = render_state(
        Failed("Failed to load data", kind=ErrorKind.SERVER),
        messages={},
    )

    assert view.error_text == "Failed to load data"
