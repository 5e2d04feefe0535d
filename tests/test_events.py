from __future__ import annotations

import asyncio

import pytest

from cardgen.i18n import LANGUAGE_CHANGED, LanguageChanged, NotificationBridge


def test_on_off_by_handler_identity() -> None:
    bridge = NotificationBridge()
    seen = []

    def handler(payload):
        seen.append(payload)

    bridge.on(LANGUAGE_CHANGED, handler)
    bridge.on(LANGUAGE_CHANGED, handler)
    bridge.emit(LANGUAGE_CHANGED, "a")
    bridge.off(LANGUAGE_CHANGED, handler)
    bridge.off(LANGUAGE_CHANGED, handler)
    bridge.emit(LANGUAGE_CHANGED, "b")

    assert seen == ["a"]


def test_events_are_routed_by_name() -> None:
    bridge = NotificationBridge()
    seen = []
    bridge.on("other", seen.append)

    bridge.emit(LANGUAGE_CHANGED, "ignored")
    bridge.emit("other", "kept")

    assert seen == ["kept"]


def test_failing_handler_does_not_block_others() -> None:
    bridge = NotificationBridge()
    seen = []

    def broken(payload):
        raise RuntimeError("boom")

    bridge.on(LANGUAGE_CHANGED, broken)
    bridge.on(LANGUAGE_CHANGED, seen.append)

    bridge.emit(LANGUAGE_CHANGED, "x")

    assert seen == ["x"]


@pytest.mark.asyncio
async def test_async_handler_and_subscribers() -> None:
    bridge = NotificationBridge()
    received = []

    async def handler(payload: LanguageChanged):
        received.append(payload.language)

    bridge.on(LANGUAGE_CHANGED, handler)
    queue = bridge.subscribe()

    event = bridge.language_changed("en-US", {"app": {"title": "x"}})
    await asyncio.sleep(0)

    assert received == ["en-US"]
    assert queue.get_nowait() is event
    assert event.to_dict() == {"language": "en-US", "translations": {"app": {"title": "x"}}}

    bridge.unsubscribe(queue)
    bridge.language_changed("ja-JP", {})
    assert queue.empty()
