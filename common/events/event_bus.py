"""
In-process event bus.

Publishing is a non-blocking enqueue: the publisher gets no
acknowledgment and never sees subscriber failures. A background
dispatcher task drains the queue and hands each event to the handlers
subscribed to its type.

Example:
    bus = EventBus()
    bus.subscribe(OrgDeletedEvent, revoke_sessions)
    await bus.start()

    bus.publish(OrgDeletedEvent(org_id="..."))

    await bus.stop()
"""

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Awaitable[None]]


class EventBus:
    """Fire-and-forget publish/subscribe over an asyncio.Queue."""

    def __init__(self, max_queue_size: int = 0):
        """
        Initialize EventBus.

        Args:
            max_queue_size: Queue bound, 0 for unbounded. A full queue drops
                the event with a warning rather than blocking the publisher.
        """
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_queue_size)
        self._handlers: Dict[Type, List[EventHandler]] = defaultdict(list)
        self._dispatcher: Optional[asyncio.Task] = None

    def subscribe(self, event_type: Type, handler: EventHandler) -> None:
        """Register an async handler for an event type."""
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type.__name__}")

    def publish(self, event: Any) -> None:
        """
        Enqueue an event for asynchronous delivery.

        Returns immediately; delivery happens on the dispatcher task.
        """
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning(f"Event queue full, dropping {type(event).__name__}")
            return
        logger.debug(f"Published {type(event).__name__}")

    @property
    def is_running(self) -> bool:
        return self._dispatcher is not None and not self._dispatcher.done()

    @property
    def pending(self) -> int:
        """Number of events waiting for dispatch."""
        return self._queue.qsize()

    async def start(self) -> None:
        """Start the dispatcher task on the running loop."""
        if self.is_running:
            return
        self._dispatcher = asyncio.create_task(self._run())
        logger.info("Event bus started")

    async def stop(self, timeout: Optional[float] = 10.0) -> None:
        """
        Deliver everything already queued, then stop the dispatcher.

        Args:
            timeout: Seconds to wait for queued events, None to wait forever.
                Events still queued afterwards are dropped with a warning.
        """
        if not self.is_running:
            return
        try:
            await asyncio.wait_for(self._queue.join(), timeout)
        except asyncio.TimeoutError:
            logger.warning(
                f"Event bus stop timed out after {timeout}s; dropping {self.pending} queued event(s)"
            )
        self._dispatcher.cancel()
        try:
            await self._dispatcher
        except asyncio.CancelledError:
            pass
        self._dispatcher = None
        logger.info("Event bus stopped")

    async def drain(self) -> None:
        """Wait until every queued event has been dispatched."""
        await self._queue.join()

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._dispatch(event)
            finally:
                self._queue.task_done()

    async def _dispatch(self, event: Any) -> None:
        for handler in self._handlers.get(type(event), []):
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    f"Handler {getattr(handler, '__name__', handler)} failed for {type(event).__name__}"
                )
