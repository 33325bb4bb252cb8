"""Unit tests for the in-process fire-and-forget event bus."""

import asyncio

import pytest

from common.events import EventBus
from workspace.schemas import OrgDeletedEvent


class TestEventBus:
    @pytest.mark.asyncio
    async def test_publish_returns_before_delivery(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event.org_id)

        bus.subscribe(OrgDeletedEvent, handler)
        await bus.start()

        bus.publish(OrgDeletedEvent(org_id="org-1"))
        assert received == []

        await bus.drain()
        assert received == ["org-1"]
        await bus.stop()

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_block_others(self):
        bus = EventBus()
        received = []

        async def broken(event):
            raise RuntimeError("subscriber bug")

        async def healthy(event):
            received.append(event.org_id)

        bus.subscribe(OrgDeletedEvent, broken)
        bus.subscribe(OrgDeletedEvent, healthy)
        await bus.start()

        bus.publish(OrgDeletedEvent(org_id="org-2"))
        await bus.drain()

        assert received == ["org-2"]
        assert bus.is_running
        await bus.stop()

    @pytest.mark.asyncio
    async def test_only_matching_type_is_delivered(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(OrgDeletedEvent, handler)
        await bus.start()

        bus.publish("not an org event")
        await bus.drain()

        assert received == []
        await bus.stop()

    @pytest.mark.asyncio
    async def test_full_queue_drops_without_raising(self):
        bus = EventBus(max_queue_size=1)

        bus.publish(OrgDeletedEvent(org_id="a"))
        bus.publish(OrgDeletedEvent(org_id="b"))

        assert bus.pending == 1

    @pytest.mark.asyncio
    async def test_stop_delivers_queued_events(self):
        bus = EventBus()
        received = []

        async def slow(event):
            await asyncio.sleep(0)
            received.append(event.org_id)

        bus.subscribe(OrgDeletedEvent, slow)
        await bus.start()
        for org_id in ("x", "y", "z"):
            bus.publish(OrgDeletedEvent(org_id=org_id))

        await bus.stop()

        assert received == ["x", "y", "z"]
        assert not bus.is_running

    @pytest.mark.asyncio
    async def test_stop_gives_up_on_hung_handler(self, caplog):
        bus = EventBus()
        never = asyncio.Event()

        async def hung(event):
            await never.wait()

        bus.subscribe(OrgDeletedEvent, hung)
        await bus.start()
        for org_id in ("a", "b"):
            bus.publish(OrgDeletedEvent(org_id=org_id))

        with caplog.at_level("WARNING", logger="common.events.event_bus"):
            await bus.stop(timeout=0.05)

        assert not bus.is_running
        assert "dropping 1 queued event(s)" in caplog.text
