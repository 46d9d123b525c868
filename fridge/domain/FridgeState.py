"""FridgeState: snapshot of the tracked food items and the grocery list."""
from typing import List, Optional, Sequence

from fridge.domain.FoodItem import FoodItem


class FridgeState:
    def __init__(self, food_items: Optional[Sequence[FoodItem]] = None,
                 grocery_items: Optional[Sequence[str]] = None):
        # Copies, so a state never shares a list with the caller
        self.food_items: List[FoodItem] = list(food_items or [])
        self.grocery_items: List[str] = list(grocery_items or [])

    def replace(self, food_items: Optional[Sequence[FoodItem]] = None,
                grocery_items: Optional[Sequence[str]] = None) -> "FridgeState":
        '''
        Returns a new state with the given collections swapped in; omitted ones are carried over.
        '''
        return FridgeState(
            self.food_items if food_items is None else food_items,
            self.grocery_items if grocery_items is None else grocery_items,
        )

    def find_food_item(self, item_id) -> Optional[FoodItem]:
        for item in self.food_items:
            if item.matches(item_id):
                return item
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, FridgeState):
            return NotImplemented
        return self.food_items == other.food_items and self.grocery_items == other.grocery_items

    def __str__(self) -> str:
        food_str = ",\n\t".join(str(item) for item in self.food_items)
        grocery_str = ", ".join(self.grocery_items)
        return f"Food Items:\n\t{food_str}\nGrocery List: {grocery_str}"

    __repr__ = __str__
