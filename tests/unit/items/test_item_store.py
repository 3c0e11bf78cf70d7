from __future__ import annotations

import unittest

from tmenu.items import ItemStore, load


class ItemStoreTests(unittest.TestCase):
    def test_load_preserves_order_and_duplicates(self) -> None:
        store = load(["b", "a", "b"])
        self.assertEqual(len(store), 3)
        self.assertEqual(list(store), ["b", "a", "b"])
        self.assertEqual(store[2], "b")

    def test_load_accepts_iterables(self) -> None:
        store = load(item for item in ("x", "y"))
        self.assertEqual(list(store), ["x", "y"])

    def test_texts_follow_requested_positions(self) -> None:
        store = load(["zero", "one", "two"])
        self.assertEqual(store.texts([2, 0]), ("two", "zero"))

    def test_empty_store(self) -> None:
        self.assertTrue(load([]).is_empty())
        self.assertFalse(ItemStore(["a"]).is_empty())

    def test_non_text_items_rejected(self) -> None:
        with self.assertRaises(TypeError):
            load(["ok", 3])  # type: ignore[list-item]


if __name__ == "__main__":
    unittest.main()
