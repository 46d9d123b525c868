"""Freshness summaries over the food list."""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from fridge.domain.FoodItem import FoodItem
from fridge.domain.Freshness import Freshness, classify_days, days_until, expires_label

__all__ = ["describe_item", "compute_attention_items", "compute_freshness_summary"]


def describe_item(item: FoodItem, today: Optional[date] = None) -> Dict[str, Any]:
    """JSON-ready view of an item with its derived freshness."""
    days_left = days_until(item, today)
    freshness = classify_days(days_left)
    return {
        'id': str(item.id),
        'name': item.name,
        'expiration_date': item.expiration_date.isoformat(),
        'days_until': days_left,
        'freshness': freshness.value,
        'color': freshness.color,
        'expires_label': expires_label(item),
    }


def compute_attention_items(items: Sequence[FoodItem], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Return expired and expiring-soon items, soonest first."""
    today = today or date.today()
    result = [d for d in (describe_item(i, today) for i in items) if d['freshness'] != Freshness.FRESH.value]
    result.sort(key=lambda x: (x['days_until'], x['name']))
    return result


def compute_freshness_summary(items: Sequence[FoodItem], today: Optional[date] = None) -> Dict[str, Any]:
    today = today or date.today()
    counts = {f.value: 0 for f in Freshness}
    for item in items:
        counts[classify_days(days_until(item, today)).value] += 1
    return {
        'today': today.isoformat(),
        'total': len(items),
        'counts': counts,
        'attention': compute_attention_items(items, today),
    }
