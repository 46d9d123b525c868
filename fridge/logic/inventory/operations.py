"""Pure operations on the food and grocery collections.

None of these functions mutate their inputs: each returns new lists. A blank name
(empty after stripping whitespace) turns an add into a no-op, signalled by a
``None`` item in the result so callers know not to persist or schedule anything.
"""
from __future__ import annotations
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union
from uuid import UUID, uuid4

from fridge.domain.FoodItem import FoodItem
from fridge.utilities.errors import OutOfRangeError, ValidationError

__all__ = [
    "normalize_name", "ensure_name",
    "add_food_item", "remove_food_item",
    "add_grocery_item", "remove_grocery_items_at", "remove_grocery_item",
    "promote_grocery_item",
]


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Return the stripped name, or None if nothing is left."""
    if not isinstance(name, str):
        return None
    stripped = name.strip()
    return stripped or None


def ensure_name(name: Optional[str]) -> str:
    """Like normalize_name, but raise ValidationError for blank names."""
    normalized = normalize_name(name)
    if normalized is None:
        raise ValidationError(f"Name must not be blank: {name!r}")
    return normalized


def add_food_item(items: Sequence[FoodItem], name: str, expiration_date: date,
                  *, id_factory=uuid4) -> Tuple[List[FoodItem], Optional[FoodItem]]:
    normalized = normalize_name(name)
    if normalized is None:
        return list(items), None
    item = FoodItem(name=normalized, expiration_date=expiration_date, id=id_factory())
    return [*items, item], item


def remove_food_item(items: Sequence[FoodItem], item_id: Union[UUID, str]) -> List[FoodItem]:
    """Remove the first item with the given id; unknown ids leave the list unchanged."""
    result = list(items)
    for idx, item in enumerate(result):
        if item.matches(item_id):
            del result[idx]
            break
    return result


def add_grocery_item(groceries: Sequence[str], name: str) -> List[str]:
    normalized = normalize_name(name)
    if normalized is None:
        return list(groceries)
    return [*groceries, normalized]


def remove_grocery_items_at(groceries: Sequence[str], positions: Iterable[int]) -> List[str]:
    """Remove the entries at the given positions.

    All positions are checked before anything is removed; a single bad one rejects
    the whole request with OutOfRangeError. Negative positions are out of range.
    """
    targets = set(positions)
    bad = [p for p in targets if not isinstance(p, int) or isinstance(p, bool) or not 0 <= p < len(groceries)]
    if bad:
        raise OutOfRangeError(bad, len(groceries))
    return [g for idx, g in enumerate(groceries) if idx not in targets]


def remove_grocery_item(groceries: Sequence[str], name: str) -> List[str]:
    """Remove the first entry equal to name (exact match); absent names are a no-op."""
    result = list(groceries)
    try:
        result.remove(name)
    except ValueError:
        pass
    return result


def promote_grocery_item(items: Sequence[FoodItem], groceries: Sequence[str], name: str,
                         expiration_date: date, *, id_factory=uuid4
                         ) -> Tuple[List[FoodItem], List[str], Optional[FoodItem]]:
    """Track a bought grocery entry as a food item.

    The name is stripped once and that value both names the food item and selects
    the grocery entry, compared on its stripped form. Only the first matching
    grocery entry is removed, even when the list holds duplicates.
    """
    normalized = normalize_name(name)
    if normalized is None:
        return list(items), list(groceries), None
    new_items, item = add_food_item(items, normalized, expiration_date, id_factory=id_factory)
    new_groceries = list(groceries)
    for idx, entry in enumerate(new_groceries):
        if entry.strip() == normalized:
            del new_groceries[idx]
            break
    return new_items, new_groceries, item
