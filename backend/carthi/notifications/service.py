import logging
import threading
import uuid
from typing import Callable, List, Optional

from fastapi import Request

from carthi.notifications.bus import EventBus
from carthi.notifications.models import LeadEvent, Notification

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Inbox fed by the event bus."""

    def __init__(self):
        self._notifications: List[Notification] = []
        self._lock = threading.Lock()
        self._unsubscribe: Optional[Callable[[], None]] = None

    def attach(self, bus: EventBus) -> None:
        self.detach()
        self._unsubscribe = bus.subscribe(self.handle_event)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def handle_event(self, event: LeadEvent) -> Notification:
        notification = Notification(
            type=event.type,
            title=event.title,
            message=event.message,
            timestamp=event.timestamp,
            action_url=event.action_url,
        )
        with self._lock:
            self._notifications.append(notification)
        return notification

    def list_notifications(self, unread_only: bool = False) -> List[Notification]:
        with self._lock:
            items = [n for n in self._notifications if not (unread_only and n.read)]
        return sorted(items, key=lambda n: n.timestamp, reverse=True)

    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for n in self._notifications if not n.read)

    def get(self, notification_id: uuid.UUID) -> Optional[Notification]:
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    return notification
        return None

    def mark_read(self, notification_id: uuid.UUID) -> Optional[Notification]:
        notification = self.get(notification_id)
        if notification is not None:
            notification.read = True
        return notification

    def mark_all_read(self) -> int:
        with self._lock:
            unread = [n for n in self._notifications if not n.read]
            for notification in unread:
                notification.read = True
        return len(unread)

    def delete(self, notification_id: uuid.UUID) -> bool:
        with self._lock:
            for index, notification in enumerate(self._notifications):
                if notification.id == notification_id:
                    del self._notifications[index]
                    return True
        logger.warning("Notification %s not found for delete", notification_id)
        return False


def get_notification_center(request: Request) -> NotificationCenter:
    return request.app.state.notifications
