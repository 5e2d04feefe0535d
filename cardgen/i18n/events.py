import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

LANGUAGE_CHANGED = "languageChanged"

Handler = Callable[[Any], Any]


@dataclass
class LanguageChanged:
    language: str
    translations: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"language": self.language, "translations": self.translations}


class NotificationBridge:
    """Observer registry keyed by event name.

    Handlers are called in registration order. Queues handed out by
    subscribe() receive every language-changed payload.
    """

    def __init__(self):
        self._handlers: dict[str, list[Handler]] = {}
        self._subscribers: list[asyncio.Queue] = []
        self._tasks: set[asyncio.Task] = set()

    def on(self, event_name: str, handler: Handler) -> None:
        handlers = self._handlers.setdefault(event_name, [])
        if handler not in handlers:
            handlers.append(handler)

    def off(self, event_name: str, handler: Handler) -> None:
        handlers = self._handlers.get(event_name, [])
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def handlers(self, event_name: str) -> list[Handler]:
        return list(self._handlers.get(event_name, []))

    def emit(self, event_name: str, payload: Any) -> None:
        for handler in self.handlers(event_name):
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    task = asyncio.ensure_future(result)
                    self._tasks.add(task)
                    task.add_done_callback(self._task_done)
            except Exception:
                logger.exception("Handler for %s failed", event_name)

        if event_name == LANGUAGE_CHANGED:
            for queue in list(self._subscribers):
                queue.put_nowait(payload)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Async handler failed: %s", task.exception())

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        try:
            self._subscribers.remove(queue)
        except ValueError:
            pass

    def language_changed(self, language: str, translations: dict[str, Any]) -> LanguageChanged:
        event = LanguageChanged(language=language, translations=translations)
        self.emit(LANGUAGE_CHANGED, event)
        return event
