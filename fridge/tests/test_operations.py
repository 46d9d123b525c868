from datetime import date
import unittest
from fridge.domain.FoodItem import FoodItem
from fridge.logic.inventory import operations as ops
from fridge.utilities.errors import OutOfRangeError, ValidationError


class TestFoodOperations(unittest.TestCase):

    def setUp(self):
        self.exp = date(2026, 10, 20)
        self.items = [FoodItem("Bread", date(2026, 10, 19))]

    def test_add_appends_with_trimmed_name(self):
        new_items, item = ops.add_food_item(self.items, "  Milk ", self.exp)
        self.assertEqual(len(new_items), 2)
        self.assertIs(new_items[-1], item)
        self.assertEqual(item.name, "Milk")
        self.assertEqual(item.expiration_date, self.exp)
        self.assertEqual(len(self.items), 1)

    def test_add_whitespace_name_is_noop(self):
        for name in ("", "  ", "\t\n"):
            new_items, item = ops.add_food_item(self.items, name, self.exp)
            self.assertIsNone(item)
            self.assertEqual(new_items, self.items)

    def test_add_then_remove_round_trip(self):
        new_items, item = ops.add_food_item(self.items, "Milk", self.exp)
        self.assertEqual(ops.remove_food_item(new_items, item.id), self.items)
        self.assertEqual(ops.remove_food_item(new_items, str(item.id)), self.items)

    def test_remove_unknown_id_is_noop(self):
        self.assertEqual(ops.remove_food_item(self.items, "missing"), self.items)

    def test_ids_unique(self):
        items = []
        for i in range(50):
            items, _ = ops.add_food_item(items, f"Item {i}", self.exp)
        self.assertEqual(len({i.id for i in items}), 50)

    def test_ensure_name(self):
        self.assertEqual(ops.ensure_name("  Eggs "), "Eggs")
        with self.assertRaises(ValidationError):
            ops.ensure_name("   ")


class TestGroceryOperations(unittest.TestCase):

    def test_add_allows_duplicates(self):
        groceries = ops.add_grocery_item(["Eggs"], "Eggs")
        self.assertEqual(groceries, ["Eggs", "Eggs"])

    def test_add_blank_is_noop(self):
        self.assertEqual(ops.add_grocery_item(["Eggs"], "   "), ["Eggs"])

    def test_remove_positions(self):
        groceries = ["A", "B", "C"]
        self.assertEqual(ops.remove_grocery_items_at(groceries, {0, 2}), ["B"])
        self.assertEqual(groceries, ["A", "B", "C"])

    def test_remove_positions_out_of_range_rejects_all(self):
        groceries = ["A", "B", "C"]
        for positions in ({0, 3}, {-1}, {1, 7}):
            with self.assertRaises(OutOfRangeError):
                ops.remove_grocery_items_at(groceries, positions)
        self.assertEqual(groceries, ["A", "B", "C"])

    def test_out_of_range_is_an_index_error(self):
        with self.assertRaises(IndexError):
            ops.remove_grocery_items_at([], [0])

    def test_remove_by_value_first_match_only(self):
        self.assertEqual(ops.remove_grocery_item(["Eggs", "Milk", "Eggs"], "Eggs"), ["Milk", "Eggs"])
        self.assertEqual(ops.remove_grocery_item(["Milk"], "Eggs"), ["Milk"])


class TestPromoteGroceryItem(unittest.TestCase):

    def test_promote_removes_only_one_duplicate(self):
        groceries = ops.add_grocery_item([], "Eggs")
        groceries = ops.add_grocery_item(groceries, "Eggs")
        food, groceries_after, item = ops.promote_grocery_item([], groceries, "Eggs", date(2026, 10, 25))
        self.assertEqual(groceries_after, ["Eggs"])
        self.assertEqual(len(food), 1)
        self.assertEqual(food[0], item)
        self.assertEqual(item.name, "Eggs")

    def test_promote_name_not_on_list_still_adds(self):
        food, groceries, item = ops.promote_grocery_item([], ["Milk"], "Eggs", date(2026, 10, 25))
        self.assertEqual(groceries, ["Milk"])
        self.assertEqual([i.name for i in food], ["Eggs"])

    def test_promote_blank_name_changes_nothing(self):
        food, groceries, item = ops.promote_grocery_item([], ["  "], "  ", date(2026, 10, 25))
        self.assertIsNone(item)
        self.assertEqual(food, [])
        self.assertEqual(groceries, ["  "])

    def test_promote_padded_name_removes_stored_entry(self):
        groceries = ops.add_grocery_item([], " Eggs ")
        food, groceries_after, item = ops.promote_grocery_item([], groceries, " Eggs ", date(2026, 10, 25))
        self.assertEqual(groceries_after, [])
        self.assertEqual(item.name, "Eggs")
        self.assertEqual(food, [item])

    def test_promote_matches_untrimmed_stored_entry(self):
        food, groceries, item = ops.promote_grocery_item([], ["Milk", " Eggs", "Eggs"], "Eggs", date(2026, 10, 25))
        self.assertEqual(groceries, ["Milk", "Eggs"])
        self.assertEqual(item.name, "Eggs")
