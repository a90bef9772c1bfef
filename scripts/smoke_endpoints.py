"""Smoke-check the Tripline endpoints through the full client stack."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import httpx

from tripline.api import ApiClient, ApiFacade
from tripline.api.schemas import BookJourneyRequest, Passenger
from tripline.core.config import ClientConfig
from tripline.logging import configure_logging
from tripline.state import (
    ControllerState,
    FeatureController,
    JourneyBookingController,
    RequestController,
    UsersController,
)
from tripline.ui import StateView, render_state

FLOWS: tuple[str, ...] = ("feature", "book", "users")


@dataclass(slots=True)
class FlowOutcome:
    flow: str
    view: StateView

    @property
    def succeeded(self) -> bool:
        return self.view.phase == "succeeded"


def sample_booking() -> BookJourneyRequest:
    """Booking used by the ``book`` flow; runs in test mode so no card is charged."""

    return BookJourneyRequest.build(
        journey_id="smoke-journey",
        start_location="Central Station",
        end_location="Airport Terminal 2",
        start_time="2026-01-01T08:00:00Z",
        end_time="2026-01-01T08:45:00Z",
        passengers=[Passenger.build(name="Smoke Test", email="smoke@example.com", type="adult")],
        card_id="card-test",
        total_amount=1250,
        test_mode=True,
    )


async def _run_flow(flow: str, facade: ApiFacade, config: ClientConfig) -> ControllerState:
    controller: RequestController
    if flow == "feature":
        controller = FeatureController(facade, failure_message=config.failure_message)
        args: tuple = ("TestValue", 123)
    elif flow == "book":
        controller = JourneyBookingController(facade, failure_message=config.failure_message)
        args = (sample_booking(),)
    elif flow == "users":
        controller = UsersController(facade, failure_message=config.failure_message)
        args = ()
    else:
        raise ValueError(f"unknown flow {flow!r}")
    async with controller:
        return await controller.perform(*args)


async def run_flows(
    config: ClientConfig,
    flows: Iterable[str],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[FlowOutcome]:
    """Run ``flows`` sequentially and return their rendered final states."""

    outcomes: list[FlowOutcome] = []
    async with ApiClient.from_config(config, transport=transport) as client:
        facade = ApiFacade(client)
        for flow in flows:
            state = await _run_flow(flow, facade, config)
            outcomes.append(FlowOutcome(flow=flow, view=render_state(state)))
    return outcomes


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smoke-check Tripline endpoints.")
    parser.add_argument("--base-url", default=None, help="Override TRIPLINE_BASE_URL.")
    parser.add_argument(
        "--endpoint",
        choices=(*FLOWS, "all"),
        default="all",
        help="Flow to run (default: all).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    overrides = {"base_url": args.base_url} if args.base_url else {}
    flows = FLOWS if args.endpoint == "all" else (args.endpoint,)
    try:
        config = ClientConfig(**overrides)
        configure_logging(config.log_level)
        outcomes = asyncio.run(run_flows(config, flows))
    except Exception as exc:
        print(f"smoke check failed: {exc}", file=sys.stderr)
        return 2

    for outcome in outcomes:
        record = {"flow": outcome.flow, **outcome.view.model_dump(mode="json")}
        print(json.dumps(record), file=sys.stdout)
    return 0 if all(outcome.succeeded for outcome in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
