"""Freshness classification of food items by whole calendar days until expiration.

    days_until < 0                       -> EXPIRED
    0 <= days_until <= EXPIRING_SOON_DAYS -> EXPIRING_SOON
    days_until > EXPIRING_SOON_DAYS       -> FRESH

Dates are compared as ``date`` objects, so a time of day or a DST change can never
shift an item into a neighbouring bucket.
"""
from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from fridge.domain.FoodItem import FoodItem
from fridge.utilities.constants import EXPIRING_SOON_DAYS, FRESHNESS_COLORS, DISPLAY_DATE_FORMAT


class Freshness(str, Enum):
    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"
    FRESH = "fresh"

    @property
    def color(self) -> str:
        '''Display color as "<name>:<opacity>", e.g. "red:0.3".'''
        name, opacity = FRESHNESS_COLORS[self.value]
        return f"{name}:{opacity}"


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def days_until(expiration: Union[FoodItem, date, datetime], today: Optional[date] = None) -> int:
    """Signed number of calendar days from today to the expiration date."""
    if isinstance(expiration, FoodItem):
        expiration = expiration.expiration_date
    today = _as_date(today) if today is not None else date.today()
    return (_as_date(expiration) - today).days


def classify_days(days: int) -> Freshness:
    if days < 0:
        return Freshness.EXPIRED
    if days <= EXPIRING_SOON_DAYS:
        return Freshness.EXPIRING_SOON
    return Freshness.FRESH


def classify(expiration: Union[FoodItem, date, datetime], today: Optional[date] = None) -> Freshness:
    """Classify an item (or a bare expiration date) relative to today."""
    return classify_days(days_until(expiration, today))


def expires_label(item: FoodItem) -> str:
    return f"Expires on {item.expiration_date.strftime(DISPLAY_DATE_FORMAT)}"


__all__ = ['Freshness', 'days_until', 'classify_days', 'classify', 'expires_label']
