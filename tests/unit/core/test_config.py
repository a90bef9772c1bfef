from __future__ import annotations

import pytest
from pydantic import ValidationError

from tripline.core.config import DEFAULT_FAILURE_MESSAGE, ClientConfig

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BASE_URL", "TIMEOUT_SECONDS", "FAILURE_MESSAGE", "LOG_LEVEL"):
        monkeypatch.delenv(f"TRIPLINE_{name}", raising=False)

    config = ClientConfig.build_default()

    assert config.base_url == "http://localhost:8000/api/"
    assert config.timeout_seconds == 5.0
    assert config.failure_message == DEFAULT_FAILURE_MESSAGE == "Failed to load data"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRIPLINE_BASE_URL", "https://api.tripline.test/v1/")
    monkeypatch.setenv("TRIPLINE_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("TRIPLINE_FAILURE_MESSAGE", "Try again later")

    config = ClientConfig.build_default()

    assert config.base_url == "https://api.tripline.test/v1/"
    assert config.timeout_seconds == 12.5
    assert config.failure_message == "Try again later"


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(timeout_seconds=0)


def test_log_level_is_normalised_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TRIPLINE_LOG_LEVEL", "debug")

    assert ClientConfig.build_default().log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(log_level="chatty")
