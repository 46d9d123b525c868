"""Event helper utilities.

Helpers that build fridge event payloads and publish them on an event bus
(the global one unless another is given).

Quick import:
    from fridge.events.event_helpers import (
        request_expiration_reminder, publish_food_added, publish_food_removed
    )
"""
from __future__ import annotations
from datetime import datetime, time
from typing import Optional

from fridge.domain.FoodItem import FoodItem
from fridge.utilities.config import REMINDER_HOUR
from fridge.utilities.constants import REMINDER_TITLE, REMINDER_BODY_TEMPLATE
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    REMINDER_REQUESTED, FOOD_ADDED, FOOD_REMOVED
)

__all__ = [
    'reminder_fire_time', 'build_reminder', 'request_expiration_reminder',
    'publish_food_added', 'publish_food_removed',
]


def reminder_fire_time(item: FoodItem, hour: int = REMINDER_HOUR) -> datetime:
    """The item's expiration date at the reminder hour (local, naive)."""
    return datetime.combine(item.expiration_date, time(hour=hour))


def build_reminder(item: FoodItem) -> dict:
    """Reminder request payload; the identifier is the item's id."""
    return {
        'identifier': str(item.id),
        'title': REMINDER_TITLE,
        'body': REMINDER_BODY_TEMPLATE.format(name=item.name),
        'fire_at': reminder_fire_time(item),
    }


def request_expiration_reminder(item: FoodItem, bus: Optional[EventBus] = None) -> None:
    """Publish a reminder.requested event (fire-and-forget)."""
    (bus or GLOBAL_EVENT_BUS).publish(REMINDER_REQUESTED, build_reminder(item))


def publish_food_added(item: FoodItem, bus: Optional[EventBus] = None) -> None:
    (bus or GLOBAL_EVENT_BUS).publish(FOOD_ADDED, {'item': item})


def publish_food_removed(item_id, bus: Optional[EventBus] = None) -> None:
    (bus or GLOBAL_EVENT_BUS).publish(FOOD_REMOVED, {'item_id': str(item_id)})
