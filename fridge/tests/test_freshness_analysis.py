from datetime import date
import unittest
from fridge.domain.FoodItem import FoodItem
from fridge.logic.freshness.analysis import describe_item, compute_freshness_summary


class TestFreshnessAnalysis(unittest.TestCase):

    def setUp(self):
        self.today = date(2026, 10, 18)
        self.items = [
            FoodItem("Yogurt", date(2026, 10, 30)),
            FoodItem("Milk", date(2026, 10, 17)),
            FoodItem("Bread", date(2026, 10, 20)),
            FoodItem("Apple", date(2026, 10, 20)),
        ]

    def test_describe_item(self):
        described = describe_item(self.items[1], self.today)
        self.assertEqual(described['name'], "Milk")
        self.assertEqual(described['expiration_date'], "2026-10-17")
        self.assertEqual(described['days_until'], -1)
        self.assertEqual(described['freshness'], "expired")
        self.assertEqual(described['color'], "red:0.3")
        self.assertEqual(described['expires_label'], "Expires on Oct 17, 2026")

    def test_summary(self):
        summary = compute_freshness_summary(self.items, self.today)
        self.assertEqual(summary['total'], 4)
        self.assertEqual(summary['counts'], {"expired": 1, "expiring_soon": 2, "fresh": 1})
        self.assertEqual([a['name'] for a in summary['attention']], ["Milk", "Apple", "Bread"])

    def test_summary_of_empty_list(self):
        summary = compute_freshness_summary([], self.today)
        self.assertEqual(summary['counts'], {"expired": 0, "expiring_soon": 0, "fresh": 0})
        self.assertEqual(summary['attention'], [])
