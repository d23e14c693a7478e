import logging
import threading
from typing import Callable, List

from fastapi import Request

from carthi.notifications.models import LeadEvent

logger = logging.getLogger(__name__)

Handler = Callable[[LeadEvent], None]


class EventBus:
    """
    Publish/subscribe channel between code that changes leads and code
    that reports those changes.

    Owned by the application (see ``main.lifespan``) and handed to whoever
    needs it; subscribers detach with the callable returned by ``subscribe``.
    """

    def __init__(self):
        self._handlers: List[Handler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: Handler) -> Callable[[], None]:
        with self._lock:
            self._handlers.append(handler)

        def unsubscribe() -> None:
            with self._lock:
                if handler in self._handlers:
                    self._handlers.remove(handler)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def publish(self, event: LeadEvent) -> int:
        """Deliver ``event`` to every subscriber, returns how many received it."""
        with self._lock:
            handlers = list(self._handlers)

        delivered = 0
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                # One broken subscriber must not hide the event from the rest
                logger.exception("Event handler %r failed for %s", handler, event.title)
                continue
            delivered += 1
        return delivered


def get_event_bus(request: Request) -> EventBus:
    return request.app.state.event_bus
