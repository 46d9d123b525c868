"""Simple Event Bus / Observer implementation for fridge events.

Event names used so far:
  reminder.requested -> payload {"identifier": str, "title": str, "body": str, "fire_at": datetime}
  food.added         -> payload {"item": FoodItem}
  food.removed       -> payload {"item_id": str}

Subscribers are callables taking (event_name, payload). Publishing is one-way: a
failing subscriber is logged and never affects the publisher.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
REMINDER_REQUESTED = "reminder.requested"
FOOD_ADDED = "food.added"
FOOD_REMOVED = "food.removed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:
				logger.warning("Error delivering %s to %s: %s", event_name, cb, e)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'REMINDER_REQUESTED', 'FOOD_ADDED', 'FOOD_REMOVED'
]
