"""In-flight request accounting so shutdown can drain admin writes."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.lovgol.core.logging import get_logger

logger = get_logger(__name__)


class RequestTracker:
    """Counts tracked requests and exposes an idle signal for the shutdown drain.

    All bookkeeping happens on the event loop thread, so the counter needs no lock.
    """

    def __init__(self) -> None:
        self.reset()

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track_request(self) -> AsyncGenerator[None]:
        self._in_flight += 1
        self._idle.clear()
        try:
            yield
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self._idle.set()

    async def start_shutdown(self) -> None:
        """Flip into draining mode; ``/health`` starts answering 503."""
        self._shutting_down = True
        if self._in_flight:
            logger.info("Waiting for in-flight requests", in_flight=self._in_flight)

    async def wait_for_drain(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds; True when every request finished."""
        try:
            await asyncio.wait_for(self._idle.wait(), timeout=timeout)
        except TimeoutError:
            logger.warning("Drain timed out", timeout=timeout, in_flight=self._in_flight)
            return False
        return True

    def reset(self) -> None:
        self._in_flight = 0
        self._shutting_down = False
        self._idle = asyncio.Event()
        self._idle.set()


request_tracker = RequestTracker()
