"""FridgeController: owns the application state and wires the pure operations to
persistence and reminders.

Every mutation swaps in a new FridgeState, saves the full affected collection and,
for new food items, publishes a reminder request. Reminder delivery is
fire-and-forget; a failed save is logged and the in-memory state is kept.
"""
from __future__ import annotations
import logging
from datetime import date
from threading import Lock
from typing import Iterable, List, Optional, Tuple

from fridge.domain.FoodItem import FoodItem
from fridge.domain.FridgeState import FridgeState
from fridge.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from fridge.events.event_helpers import (
    request_expiration_reminder, publish_food_added, publish_food_removed
)
from fridge.infra.Item_Repository import ItemRepository
from fridge.utilities.errors import PersistenceError
from . import operations

logger = logging.getLogger(__name__)


class FridgeController:
    def __init__(self, repository: Optional[ItemRepository] = None, bus: Optional[EventBus] = None):
        self.repository = repository if repository is not None else ItemRepository()
        self.bus = bus if bus is not None else GLOBAL_EVENT_BUS
        self._state = FridgeState()
        self._lock = Lock()
        self._loaded = False

    @property
    def state(self) -> FridgeState:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._loaded

    # --- Persistence helpers ----------------------------------------------
    def load(self) -> FridgeState:
        """Hydrate both collections from the repository (absent data -> empty)."""
        with self._lock:
            self._state = FridgeState(
                self.repository.load_food_items(),
                self.repository.load_grocery_items(),
            )
            self._loaded = True
        logger.info("Loaded %d food items and %d grocery items",
                    len(self._state.food_items), len(self._state.grocery_items))
        return self._state

    def _save_food_items(self):
        try:
            self.repository.save_food_items(self._state.food_items)
        except PersistenceError as e:
            logger.error("Failed to save food items: %s", e)

    def _save_grocery_items(self):
        try:
            self.repository.save_grocery_items(self._state.grocery_items)
        except PersistenceError as e:
            logger.error("Failed to save grocery items: %s", e)

    def _announce_new_item(self, item: FoodItem):
        publish_food_added(item, self.bus)
        request_expiration_reminder(item, self.bus)

    # --- Food items -------------------------------------------------------
    def add_food_item(self, name: str, expiration_date: date) -> Optional[FoodItem]:
        with self._lock:
            food_items, item = operations.add_food_item(self._state.food_items, name, expiration_date)
            if item is None:
                logger.debug("Rejected food item with blank name %r", name)
                return None
            self._state = self._state.replace(food_items=food_items)
            self._save_food_items()
        logger.info("Added food item %s (%s)", item.name, item.id)
        self._announce_new_item(item)
        return item

    def remove_food_item(self, item_id) -> bool:
        """Remove the item with item_id; returns False (and saves nothing) if it is unknown."""
        with self._lock:
            food_items = operations.remove_food_item(self._state.food_items, item_id)
            if len(food_items) == len(self._state.food_items):
                return False
            self._state = self._state.replace(food_items=food_items)
            self._save_food_items()
        logger.info("Removed food item %s", item_id)
        publish_food_removed(item_id, self.bus)
        return True

    # --- Grocery items ----------------------------------------------------
    def add_grocery_item(self, name: str) -> List[str]:
        with self._lock:
            groceries = operations.add_grocery_item(self._state.grocery_items, name)
            if len(groceries) != len(self._state.grocery_items):
                self._state = self._state.replace(grocery_items=groceries)
                self._save_grocery_items()
            return list(self._state.grocery_items)

    def remove_grocery_items_at(self, positions: Iterable[int]) -> List[str]:
        """Bulk removal by position; OutOfRangeError propagates with the state untouched."""
        with self._lock:
            groceries = operations.remove_grocery_items_at(self._state.grocery_items, positions)
            self._state = self._state.replace(grocery_items=groceries)
            self._save_grocery_items()
            return list(groceries)

    def remove_grocery_item(self, name: str) -> List[str]:
        with self._lock:
            groceries = operations.remove_grocery_item(self._state.grocery_items, name)
            if len(groceries) != len(self._state.grocery_items):
                self._state = self._state.replace(grocery_items=groceries)
                self._save_grocery_items()
            return list(self._state.grocery_items)

    def promote_grocery_item(self, name: str, expiration_date: date) -> Tuple[Optional[FoodItem], List[str]]:
        """Move a bought grocery entry to the food list; returns (new item or None, groceries)."""
        with self._lock:
            food_items, groceries, item = operations.promote_grocery_item(
                self._state.food_items, self._state.grocery_items, name, expiration_date
            )
            if item is None:
                return None, list(self._state.grocery_items)
            self._state = self._state.replace(food_items=food_items, grocery_items=groceries)
            self._save_food_items()
            self._save_grocery_items()
        logger.info("Promoted grocery item %s to food item %s", item.name, item.id)
        self._announce_new_item(item)
        return item, list(groceries)


__all__ = ['FridgeController']
