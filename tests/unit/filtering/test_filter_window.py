"""Tests for full refilter and incremental window shifts."""

from __future__ import annotations

import unittest

from tmenu.filtering import FilterWindow, matches
from tmenu.items import load

FRUITS = ["apple", "banana", "grape", "kiwi", "mango", "pear"]


def window_for(items: list[str], limit: int, query: str = "", case_insensitive: bool = False) -> FilterWindow:
    window = FilterWindow(load(items), limit, case_insensitive=case_insensitive)
    window.refilter(query)
    return window


class FilterWindowTestCase(unittest.TestCase):
    def assertWindowConsistent(self, window: FilterWindow) -> None:
        store = window.store
        expected = [
            position
            for position in range(window.lower_bound, window.upper_bound)
            if matches(store[position], window.query, window.case_insensitive)
        ]
        self.assertEqual(list(window.positions), expected)
        self.assertLessEqual(len(window), window.limit)
        self.assertEqual(list(window.positions), sorted(window.positions))
        if len(window) < window.limit:
            every_match = [
                position
                for position in range(len(store))
                if matches(store[position], window.query, window.case_insensitive)
            ]
            self.assertEqual(list(window.positions), every_match)


class RefilterTests(FilterWindowTestCase):
    def test_empty_query_fills_window_from_start(self) -> None:
        window = window_for(FRUITS, 3)
        self.assertEqual(window.items, ("apple", "banana", "grape"))
        self.assertEqual((window.lower_bound, window.upper_bound), (0, 3))
        self.assertWindowConsistent(window)

    def test_sparse_query_scans_to_end(self) -> None:
        window = window_for(FRUITS, 3, "an")
        self.assertEqual(window.items, ("banana", "mango"))
        self.assertEqual((window.lower_bound, window.upper_bound), (1, 6))
        self.assertWindowConsistent(window)

    def test_no_match_leaves_lower_bound_at_start(self) -> None:
        window = window_for(FRUITS, 3, "xyz")
        self.assertEqual(window.items, ())
        self.assertFalse(window)
        self.assertEqual((window.lower_bound, window.upper_bound), (0, 6))

    def test_refilter_replaces_previous_window(self) -> None:
        window = window_for(FRUITS, 3)
        window.shift_right(1)
        window.refilter("p")
        self.assertEqual(window.items, ("apple", "grape", "pear"))
        self.assertEqual(window.query, "p")
        self.assertWindowConsistent(window)

    def test_limit_zero_is_always_empty(self) -> None:
        window = window_for(FRUITS, 0)
        self.assertEqual(window.items, ())
        self.assertFalse(window.shift_right(1))
        self.assertFalse(window.shift_left(1))

    def test_case_insensitive_window(self) -> None:
        window = window_for(["Alpha", "beta", "ALPINE", "gamma"], 5, "alp", case_insensitive=True)
        self.assertEqual(window.items, ("Alpha", "ALPINE"))

    def test_negative_limit_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FilterWindow(load(FRUITS), -1)


class ShiftTests(FilterWindowTestCase):
    def test_shift_right_slides_by_one_match(self) -> None:
        window = window_for(FRUITS, 3)
        self.assertTrue(window.shift_right(1))
        self.assertEqual(window.items, ("banana", "grape", "kiwi"))
        self.assertEqual((window.lower_bound, window.upper_bound), (1, 4))
        self.assertWindowConsistent(window)

    def test_shift_left_restores_previous_window(self) -> None:
        window = window_for(FRUITS, 3)
        window.shift_right(1)
        self.assertTrue(window.shift_left(1))
        self.assertEqual(window.items, ("apple", "banana", "grape"))
        self.assertEqual((window.lower_bound, window.upper_bound), (0, 3))
        self.assertWindowConsistent(window)

    def test_shift_right_at_end_is_noop(self) -> None:
        window = window_for(FRUITS, 3)
        while window.shift_right(1):
            self.assertWindowConsistent(window)
        self.assertEqual(window.items, ("kiwi", "mango", "pear"))
        before = (window.positions, window.lower_bound, window.upper_bound)
        self.assertFalse(window.shift_right(1))
        self.assertEqual((window.positions, window.lower_bound, window.upper_bound), before)

    def test_shift_left_at_start_is_noop(self) -> None:
        window = window_for(FRUITS, 3)
        before = (window.positions, window.lower_bound, window.upper_bound)
        self.assertFalse(window.shift_left(1))
        self.assertEqual((window.positions, window.lower_bound, window.upper_bound), before)

    def test_shifts_skip_non_matching_items(self) -> None:
        items = ["a1", "x", "a2", "x", "x", "a3", "x", "a4"]
        window = window_for(items, 2, "a")
        self.assertEqual(window.items, ("a1", "a2"))
        self.assertTrue(window.shift_right(1))
        self.assertEqual(window.items, ("a2", "a3"))
        self.assertWindowConsistent(window)
        self.assertTrue(window.shift_right(1))
        self.assertEqual(window.items, ("a3", "a4"))
        self.assertWindowConsistent(window)
        self.assertFalse(window.shift_right(1))
        self.assertTrue(window.shift_left(1))
        self.assertEqual(window.items, ("a2", "a3"))
        self.assertWindowConsistent(window)
        self.assertTrue(window.shift_left(1))
        self.assertEqual(window.items, ("a1", "a2"))
        self.assertFalse(window.shift_left(1))
        self.assertWindowConsistent(window)

    def test_shift_by_larger_amount_keeps_window_size(self) -> None:
        items = [f"item{idx}" for idx in range(10)]
        window = window_for(items, 3)
        self.assertTrue(window.shift_right(2))
        self.assertEqual(window.items, ("item2", "item3", "item4"))
        self.assertWindowConsistent(window)
        self.assertTrue(window.shift_left(2))
        self.assertEqual(window.items, ("item0", "item1", "item2"))
        self.assertWindowConsistent(window)

    def test_partial_shift_near_end(self) -> None:
        items = [f"item{idx}" for idx in range(5)]
        window = window_for(items, 3)
        self.assertTrue(window.shift_right(5))
        self.assertEqual(window.items, ("item2", "item3", "item4"))
        self.assertWindowConsistent(window)

    def test_non_full_window_cannot_shift(self) -> None:
        window = window_for(FRUITS, 3, "an")
        self.assertFalse(window.shift_right(1))
        self.assertFalse(window.shift_left(1))
        self.assertEqual(window.items, ("banana", "mango"))


if __name__ == "__main__":
    unittest.main()
