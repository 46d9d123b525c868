"""Repository for the food list and grocery list (key-value persistence)."""
import logging
from typing import List, Sequence

from fridge.domain.FoodItem import FoodItem
from fridge.infra.KeyValue_Store import JsonKeyValueStore
from fridge.infra.paths import STORE_FILE
from fridge.utilities.constants import FOOD_ITEMS_KEY, GROCERY_ITEMS_KEY

logger = logging.getLogger(__name__)


class ItemRepository:
    def __init__(self, store=None):
        self.store = store if store is not None else JsonKeyValueStore(STORE_FILE)

    def save_food_items(self, items: Sequence[FoodItem]) -> None:
        self.store.set(FOOD_ITEMS_KEY, [item.to_dict() for item in items])

    def load_food_items(self) -> List[FoodItem]:
        """Load the food list; absent or corrupt data yields an empty list."""
        data = self.store.get(FOOD_ITEMS_KEY)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Stored %s is not a list, starting empty", FOOD_ITEMS_KEY)
            return []
        try:
            items = [FoodItem.from_dict(entry) for entry in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Corrupt %s entry, starting empty: %s", FOOD_ITEMS_KEY, e)
            return []
        seen = set()
        for item in items:
            if item.id in seen:
                logger.warning("Duplicate id %s in stored %s, starting empty", item.id, FOOD_ITEMS_KEY)
                return []
            seen.add(item.id)
        return items

    def save_grocery_items(self, names: Sequence[str]) -> None:
        self.store.set(GROCERY_ITEMS_KEY, list(names))

    def load_grocery_items(self) -> List[str]:
        """Load the grocery list; absent or corrupt data yields an empty list."""
        data = self.store.get(GROCERY_ITEMS_KEY)
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(n, str) for n in data):
            logger.warning("Stored %s is not a list of strings, starting empty", GROCERY_ITEMS_KEY)
            return []
        return list(data)


__all__ = ['ItemRepository']
