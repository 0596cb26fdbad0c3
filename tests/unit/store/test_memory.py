from __future__ import annotations

import unittest

from autonav.store import DocumentExistsError, MemoryStore, StoreError, StoreNode, StoreWrite


class MemoryStoreTests(unittest.TestCase):
    def test_documents_create_their_ancestor_folders(self) -> None:
        store = MemoryStore()
        store.add_document("A/B/c.md", "c")

        self.assertEqual(store.get("A"), StoreNode.container("A"))
        self.assertEqual(store.get("A/B"), StoreNode.container("A/B"))
        self.assertEqual(store.children(StoreNode.container("A")), [StoreNode.container("A/B")])
        self.assertEqual(store.children(StoreNode.container("A/B")), [StoreNode.document("A/B/c.md")])

    def test_only_engine_writes_are_logged(self) -> None:
        store = MemoryStore()
        store.add_document("seed.md", "seed")
        store.create("Navigation.md", "one")
        store.modify("Navigation.md", "two")

        self.assertEqual(
            store.writes,
            [
                StoreWrite(op="create", path="Navigation.md", content="one"),
                StoreWrite(op="modify", path="Navigation.md", content="two"),
            ],
        )
        with self.assertRaises(DocumentExistsError):
            store.create("seed.md", "again")

    def test_remove_drops_subtree(self) -> None:
        store = MemoryStore()
        store.add_document("A/B/c.md")
        store.add_document("A2/d.md")

        store.remove("A")

        self.assertIsNone(store.get("A/B"))
        self.assertEqual(store.document_paths(), ["A2/d.md"])
        self.assertEqual(store.children(store.root()), [StoreNode.container("A2")])

    def test_children_of_missing_folder_raise(self) -> None:
        with self.assertRaises(StoreError):
            MemoryStore().children(StoreNode.container("missing"))


if __name__ == "__main__":
    unittest.main()
