"""Presentation state controller: filters in, observable article list out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any, Callable, List, Optional

from .client import NewsClient
from .exceptions import NewsFetchError
from .models import ControllerState, FilterParameters

LOGGER = logging.getLogger(__name__)

Subscriber = Callable[[ControllerState], None]


class NewsController:
    """Own the current filters and article list and keep them in sync with the API.

    Every :meth:`set_parameters` or :meth:`refresh` issues exactly one fetch.
    Only the most recently issued fetch may change the state: older in-flight
    fetches are cancelled, and anything they still deliver is dropped by
    comparing request sequence numbers.

    The controller must be created inside a running event loop because it
    issues its first fetch immediately (unless ``autostart`` is False).
    """

    def __init__(
        self,
        client: NewsClient,
        parameters: Optional[FilterParameters] = None,
        *,
        autostart: bool = True,
    ) -> None:
        self.client = client
        self._parameters = parameters or FilterParameters()
        self._state = ControllerState()
        self._subscribers: List[Subscriber] = []
        self._sequence = 0
        self._task: Optional[asyncio.Task[None]] = None
        if autostart:
            self.refresh()

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def parameters(self) -> FilterParameters:
        return self._parameters

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for state changes and return a function that removes it."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def set_parameters(self, parameters: FilterParameters) -> asyncio.Task[None]:
        LOGGER.info(
            "Filters changed: category=%r, language=%s, country=%s",
            parameters.category,
            parameters.language,
            parameters.country,
        )
        self._parameters = parameters
        return self._start(parameters)

    def update_filters(self, **changes: Any) -> asyncio.Task[None]:
        """Change some of the current filters, keep the rest, and fetch."""

        return self.set_parameters(self._parameters.replace(**changes))

    def refresh(self) -> asyncio.Task[None]:
        LOGGER.info("Refreshing news")
        return self._start(self._parameters)

    async def run_fetch(self, parameters: FilterParameters, sequence: Optional[int] = None) -> None:
        """Fetch once for ``parameters`` and apply the outcome if it is still the latest request."""

        if sequence is None:
            self._sequence += 1
            sequence = self._sequence
        try:
            result = await self.client.fetch_parameters(parameters)
        except NewsFetchError as exc:
            LOGGER.warning("Error fetching news: %s", exc, exc_info=True)
            if self._is_stale(sequence):
                return
            self._publish(replace(self._state, last_error=str(exc), in_flight=False))
            return

        if self._is_stale(sequence):
            return
        self._publish(
            ControllerState(
                articles=tuple(result.results),
                parameters=parameters,
                last_error=None,
                in_flight=False,
            )
        )
        LOGGER.info("News fetched successfully: %d articles", len(result.results))

    async def wait(self) -> ControllerState:
        """Wait until the latest fetch has finished and return the resulting state."""

        while True:
            task = self._task
            if task is None or task.done():
                return self._state
            await asyncio.wait({task})

    async def aclose(self) -> None:
        self._sequence += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
        if self._state.in_flight:
            self._publish(replace(self._state, in_flight=False))

    def _start(self, parameters: FilterParameters) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()
        self._sequence += 1
        sequence = self._sequence
        previous = self._task
        if previous is not None and not previous.done():
            LOGGER.debug("Cancelling superseded fetch")
            previous.cancel()
        self._publish(replace(self._state, in_flight=True))
        self._task = loop.create_task(self.run_fetch(parameters, sequence))
        return self._task

    def _is_stale(self, sequence: int) -> bool:
        if sequence != self._sequence:
            LOGGER.debug("Discarding response for superseded request #%d", sequence)
            return True
        return False

    def _publish(self, state: ControllerState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                LOGGER.exception("State subscriber %r failed", callback)


__all__ = ["NewsController", "Subscriber"]
