from typing import Final

# Storage keys
FOOD_ITEMS_KEY: Final[str] = "FoodItems"
GROCERY_ITEMS_KEY: Final[str] = "GroceryItems"

# Freshness: items expiring within this many days (inclusive) are "expiring soon"
EXPIRING_SOON_DAYS: Final[int] = 2

# Serialized FoodItem fields
ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"
DISPLAY_DATE_FORMAT: Final[str] = "%b %d, %Y"

# Reminder content
REMINDER_TITLE: Final[str] = "Expiration Reminder"
REMINDER_BODY_TEMPLATE: Final[str] = "{name} is expiring soon!"

# Display colors per freshness state: (color name, opacity)
FRESHNESS_COLORS: Final[dict[str, tuple[str, float]]] = {
    "expired": ("red", 0.3),
    "expiring_soon": ("orange", 0.3),
    "fresh": ("green", 0.2),
}
