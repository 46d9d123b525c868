"""Local reminder scheduler fed by the event bus.

The scheduler subscribes to ``reminder.requested`` and keeps one pending
reminder per identifier: scheduling again under the same identifier replaces
the earlier request. Reminders are one-shot; ``pop_due`` hands out the ones
whose fire time has passed and forgets them.

Scheduling requires authorization (``request_authorization``). Without it,
``schedule_reminder`` raises NotificationSchedulingError; when the request came
through the bus, the bus logs that error and the publisher carries on.

Removing a food item does not cancel its reminder.
"""
from __future__ import annotations
import logging
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional

from fridge.utilities.errors import NotificationSchedulingError
from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, REMINDER_REQUESTED

logger = logging.getLogger(__name__)


class Reminder:
    def __init__(self, identifier: str, title: str, body: str, fire_at: datetime):
        self.identifier = identifier
        self.title = title
        self.body = body
        self.fire_at = fire_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            'identifier': self.identifier,
            'title': self.title,
            'body': self.body,
            'fire_at': self.fire_at.isoformat(),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Reminder):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Reminder({self.identifier}, {self.fire_at.isoformat()}, {self.body!r})"


class ReminderScheduler:
    def __init__(self, authorized: bool = False):
        self._lock = Lock()
        self._pending: Dict[str, Reminder] = {}
        self._authorized = authorized
        self._buses: List[EventBus] = []

    @property
    def authorized(self) -> bool:
        return self._authorized

    def request_authorization(self, granted: bool = True) -> bool:
        """Record the outcome of the permission prompt and return it."""
        self._authorized = bool(granted)
        if self._authorized:
            logger.info("Notifications allowed")
        else:
            logger.info("Notifications not allowed")
        return self._authorized

    def attach(self, bus: Optional[EventBus] = None) -> "ReminderScheduler":
        """Idempotent: subscribe to reminder requests on the bus once."""
        bus = bus or GLOBAL_EVENT_BUS
        if bus not in self._buses:
            bus.subscribe(REMINDER_REQUESTED, self._on_reminder_requested)
            self._buses.append(bus)
        return self

    def detach(self) -> None:
        for bus in self._buses:
            bus.unsubscribe(REMINDER_REQUESTED, self._on_reminder_requested)
        self._buses.clear()

    def _on_reminder_requested(self, event_name: str, payload: Any):
        self.schedule_reminder(
            payload['identifier'], payload['title'], payload['body'], payload['fire_at']
        )

    def schedule_reminder(self, identifier: str, title: str, body: str, fire_at: datetime) -> Reminder:
        if not self._authorized:
            raise NotificationSchedulingError(f"Notifications not authorized; reminder {identifier} dropped")
        reminder = Reminder(str(identifier), title, body, fire_at)
        with self._lock:
            replaced = reminder.identifier in self._pending
            self._pending[reminder.identifier] = reminder
        logger.debug("%s reminder %s for %s", "Replaced" if replaced else "Scheduled",
                     reminder.identifier, fire_at.isoformat())
        return reminder

    def pending(self) -> List[Reminder]:
        """Pending reminders ordered by fire time."""
        with self._lock:
            return sorted(self._pending.values(), key=lambda r: (r.fire_at, r.identifier))

    def get(self, identifier: str) -> Optional[Reminder]:
        with self._lock:
            return self._pending.get(str(identifier))

    def pop_due(self, now: Optional[datetime] = None) -> List[Reminder]:
        """Remove and return every reminder whose fire time is at or before now."""
        now = now or datetime.now()
        with self._lock:
            due = [r for r in self._pending.values() if r.fire_at <= now]
            for r in due:
                del self._pending[r.identifier]
        return sorted(due, key=lambda r: (r.fire_at, r.identifier))


__all__ = ['Reminder', 'ReminderScheduler']
