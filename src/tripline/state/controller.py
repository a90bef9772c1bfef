"""State controller driving ``Idle -> Loading -> Succeeded | Failed``."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Set, TypeVar

import structlog

from ..api.errors import ControllerClosedError, ErrorKind, TriplineError
from ..core.config import DEFAULT_FAILURE_MESSAGE
from .states import ControllerState, Failed, Idle, Loading, Succeeded

logger = structlog.get_logger(__name__)

T = TypeVar("T")

Listener = Callable[[ControllerState], None]


class RequestController(ABC, Generic[T]):
    """Holds the current state of one endpoint and runs its action.

    Each invocation receives a sequence token. Only the completion carrying
    the latest token may change the state, so overlapping invocations end in
    the state produced by the last one started, whichever finishes first.

    The owner constructs and disposes the controller explicitly via
    :meth:`close`/:meth:`aclose` or ``async with``.
    """

    name = "request"

    def __init__(self, *, failure_message: str = DEFAULT_FAILURE_MESSAGE) -> None:
        self.failure_message = failure_message
        self._state: ControllerState = Idle()
        self._listeners: List[Listener] = []
        self._tasks: Set["asyncio.Task[ControllerState]"] = set()
        self._sequence = 0
        self._closed = False
        self._log = logger.bind(controller=self.name)

    @property
    def state(self) -> ControllerState:
        """Snapshot of the current state."""

        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the current state and every later transition.

        Returns a callable that removes the listener.
        """

        self._ensure_open()
        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def perform(self, *args: Any, **kwargs: Any) -> ControllerState:
        """Run the action and return the state observed once it settles.

        ``Loading`` is emitted before the first suspension point.
        """

        token = self._begin()
        return await self._complete(token, *args, **kwargs)

    def launch(self, *args: Any, **kwargs: Any) -> "asyncio.Task[ControllerState]":
        """Emit ``Loading`` now and run the action in a background task."""

        token = self._begin()
        task = asyncio.create_task(self._complete(token, *args, **kwargs))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def close(self) -> None:
        """Dispose the controller: cancel launched work and drop listeners."""

        if self._closed:
            return
        self._closed = True
        for task in list(self._tasks):
            task.cancel()
        self._listeners.clear()
        self._log.debug("controller.closed")

    async def aclose(self) -> None:
        pending = list(self._tasks)
        self.close()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def __aenter__(self) -> "RequestController[T]":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    @abstractmethod
    async def _call(self, *args: Any, **kwargs: Any) -> T:
        """Invoke the facade operation backing this controller."""

    def _begin(self) -> int:
        self._ensure_open()
        self._sequence += 1
        self._log.debug("controller.action.start", token=self._sequence)
        self._emit(Loading())
        return self._sequence

    async def _complete(self, token: int, *args: Any, **kwargs: Any) -> ControllerState:
        try:
            payload = await self._call(*args, **kwargs)
        except TriplineError as exc:
            self._settle(
                token,
                Failed(
                    self.failure_message, kind=exc.kind, status_code=exc.status_code
                ),
            )
        except asyncio.CancelledError:
            self._log.debug("controller.action.cancelled", token=token)
            self._settle(token, Failed(self.failure_message, kind=ErrorKind.UNKNOWN))
            raise
        except Exception:
            self._log.exception("controller.action.crashed", token=token)
            self._settle(token, Failed(self.failure_message, kind=ErrorKind.UNKNOWN))
            raise
        else:
            self._settle(token, Succeeded(payload))
        return self._state

    def _settle(self, token: int, state: ControllerState) -> None:
        if self._closed or token != self._sequence:
            self._log.debug(
                "controller.result.discarded",
                token=token,
                latest=self._sequence,
                phase=state.phase,
            )
            return
        self._emit(state)

    def _on_task_done(self, task: "asyncio.Task[ControllerState]") -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._log.warning(
                "controller.task.failed", error=repr(exc), error_type=type(exc).__name__
            )

    def _emit(self, state: ControllerState) -> None:
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _ensure_open(self) -> None:
        if self._closed:
            raise ControllerClosedError(f"{self.name} controller is closed")


__all__ = ["RequestController", "Listener"]
