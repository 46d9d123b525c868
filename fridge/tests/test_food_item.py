from datetime import date, datetime
import unittest
from uuid import UUID, uuid4
from fridge.domain.FoodItem import FoodItem


class TestFoodItem(unittest.TestCase):

    def test_new_items_get_distinct_ids(self):
        ids = {FoodItem("Milk", date.today()).id for _ in range(200)}
        self.assertEqual(len(ids), 200)

    def test_id_is_read_only(self):
        item = FoodItem("Milk", date.today())
        with self.assertRaises(AttributeError):
            item.id = uuid4()

    def test_datetime_is_reduced_to_date(self):
        item = FoodItem("Milk", datetime(2026, 10, 18, 15, 30))
        self.assertEqual(item.expiration_date, date(2026, 10, 18))

    def test_to_dict_format(self):
        item_id = UUID("12345678-1234-5678-1234-567812345678")
        item = FoodItem("Yogurt", date(2026, 1, 5), id=item_id)
        self.assertEqual(item.to_dict(), {
            "id": "12345678-1234-5678-1234-567812345678",
            "name": "Yogurt",
            "expirationDate": "2026-01-05",
        })

    def test_from_dict_restores_item(self):
        item = FoodItem("Cheese", date(2026, 12, 31))
        restored = FoodItem.from_dict(item.to_dict())
        self.assertEqual(restored, item)
        self.assertEqual(restored.id, item.id)

    def test_from_dict_rejects_malformed(self):
        good = FoodItem("Cheese", date(2026, 12, 31)).to_dict()
        for broken in (
            {**good, "id": "not-a-uuid"},
            {**good, "expirationDate": "31-12-2026"},
            {k: v for k, v in good.items() if k != "name"},
            {**good, "name": 42},
            {**good, "id": 5},
            {**good, "id": ["12345678-1234-5678-1234-567812345678"]},
            {**good, "expirationDate": 20261231},
        ):
            with self.assertRaises((KeyError, TypeError, ValueError)):
                FoodItem.from_dict(broken)
        with self.assertRaises(TypeError):
            FoodItem.from_dict(["Cheese"])

    def test_matches_uuid_or_string(self):
        item = FoodItem("Milk", date.today())
        self.assertTrue(item.matches(item.id))
        self.assertTrue(item.matches(str(item.id)))
        self.assertFalse(item.matches("garbage"))
        self.assertFalse(item.matches(uuid4()))
