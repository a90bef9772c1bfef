import importlib.util
import json
import sys
from pathlib import Path

import httpx
import pytest

from tripline.core.config import ClientConfig
from tripline.sandbox import SandboxScenario, create_app

PROJECT_ROOT = Path(__file__).resolve().parents[3]
MODULE_PATH = PROJECT_ROOT / "scripts" / "smoke_endpoints.py"
SPEC = importlib.util.spec_from_file_location("smoke_endpoints_module", MODULE_PATH)
smoke_endpoints = importlib.util.module_from_spec(SPEC)
assert SPEC and SPEC.loader
sys.modules["smoke_endpoints_module"] = smoke_endpoints
SPEC.loader.exec_module(smoke_endpoints)


def _sandbox_config() -> ClientConfig:
    return ClientConfig(base_url="http://sandbox.test/api/")


@pytest.mark.asyncio
async def test_run_flows_against_sandbox():
    transport = httpx.ASGITransport(app=create_app())

    outcomes = await smoke_endpoints.run_flows(
        _sandbox_config(), smoke_endpoints.FLOWS, transport=transport
    )

    assert [outcome.flow for outcome in outcomes] == ["feature", "book", "users"]
    assert all(outcome.succeeded for outcome in outcomes)
    assert outcomes[1].view.payload["body"]["bookingId"] == "BK-smoke-journey"


@pytest.mark.asyncio
async def test_run_flows_reports_failures():
    transport = httpx.ASGITransport(app=create_app(SandboxScenario.SERVER_ERROR))

    outcomes = await smoke_endpoints.run_flows(
        _sandbox_config(), ("users",), transport=transport
    )

    assert outcomes[0].view.phase == "failed"
    assert outcomes[0].view.retryable is True


def test_main_prints_views_and_exit_code(monkeypatch, capsys):
    captured = {}

    async def fake_run_flows(config, flows, *, transport=None):
        captured["base_url"] = config.base_url
        captured["flows"] = tuple(flows)
        return [
            smoke_endpoints.FlowOutcome(
                flow="users",
                view=smoke_endpoints.StateView(phase="failed", error_text="offline"),
            )
        ]

    monkeypatch.setattr(smoke_endpoints, "run_flows", fake_run_flows)
    monkeypatch.setattr(smoke_endpoints, "configure_logging", lambda level: None)

    exit_code = smoke_endpoints.main(
        ["--base-url", "http://example.test/api/", "--endpoint", "users"]
    )

    assert exit_code == 1
    assert captured == {"base_url": "http://example.test/api/", "flows": ("users",)}
    line = json.loads(capsys.readouterr().out.strip())
    assert line["flow"] == "users"
    assert line["error_text"] == "offline"


def test_main_returns_2_on_unexpected_error(monkeypatch, capsys):
    async def broken_run_flows(config, flows, *, transport=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(smoke_endpoints, "run_flows", broken_run_flows)
    monkeypatch.setattr(smoke_endpoints, "configure_logging", lambda level: None)

    assert smoke_endpoints.main([]) == 2
    assert "smoke check failed: boom" in capsys.readouterr().err
