"""Tests for depth-dependent navigation document policies."""

from __future__ import annotations

import unittest

from autonav.config import NavigationSettings
from autonav.levels import (
    NavigationLevel,
    index_path_for,
    level_for,
    plan_first_level_index,
    plan_for,
    plan_nested_index,
    plan_root_index,
)
from autonav.store import MemoryStore, StoreNode


def _vault() -> MemoryStore:
    store = MemoryStore()
    store.add_folder("Templates")
    store.add_document("Projects/Notes.md")
    store.add_document("Projects/Alpha/Intro.md")
    store.add_document("Projects/Alpha/Beta/Deep.md")
    store.add_folder("Projects/Archive")
    store.add_folder("Journal")
    store.add_document("Home.md")
    return store


class LevelTests(unittest.TestCase):
    def test_level_follows_distance_from_root(self) -> None:
        self.assertIs(level_for(StoreNode.container("")), NavigationLevel.ROOT)
        self.assertIs(level_for(StoreNode.container("Projects")), NavigationLevel.FIRST_LEVEL)
        self.assertIs(level_for(StoreNode.container("Projects/Alpha")), NavigationLevel.NESTED)
        self.assertIs(level_for(StoreNode.container("Projects/Alpha/Beta")), NavigationLevel.NESTED)

    def test_index_paths(self) -> None:
        settings = NavigationSettings(navigation_file_name="Start")
        self.assertEqual(index_path_for(StoreNode.container(""), settings), "Start.md")
        self.assertEqual(index_path_for(StoreNode.container("Projects"), settings), "Projects/Projects.md")
        self.assertEqual(index_path_for(StoreNode.container("Projects/Alpha"), settings), "Projects/Alpha/Alpha.md")


class RootPlanTests(unittest.TestCase):
    def test_root_lists_sorted_non_excluded_folders_only(self) -> None:
        plan = plan_root_index(_vault(), NavigationSettings())

        self.assertEqual(plan.path, "Navigation.md")
        self.assertEqual(
            plan.content,
            "#Navigation\n\n- [[Journal/Journal|Journal]]\n- [[Projects/Projects|Projects]]\n",
        )
        self.assertEqual([node.path for node in plan.nested], ["Journal", "Projects"])

    def test_root_heading_uses_configured_name(self) -> None:
        store = MemoryStore()

        plan = plan_root_index(store, NavigationSettings(navigation_file_name="Index"))

        self.assertEqual(plan.path, "Index.md")
        self.assertEqual(plan.content, "#Index\n\n")


class FirstLevelPlanTests(unittest.TestCase):
    def test_first_level_lists_subfolders_as_links_then_documents(self) -> None:
        store = _vault()
        store.add_document("Projects/Projects.md", "old")

        plan = plan_first_level_index(store, StoreNode.container("Projects"), NavigationSettings(excluded_folders="Archive"))

        assert plan is not None
        self.assertEqual(plan.path, "Projects/Projects.md")
        self.assertEqual(
            plan.content,
            "#Navigation for Projects\n\n- [[Projects/Alpha/Alpha|Alpha]]\n- [[Notes]]\n",
        )
        self.assertEqual([node.path for node in plan.nested], ["Projects/Alpha"])

    def test_first_level_rejects_excluded_nested_and_non_folder_nodes(self) -> None:
        store = _vault()
        settings = NavigationSettings()

        self.assertIsNone(plan_first_level_index(store, StoreNode.container("Templates"), settings))
        self.assertIsNone(plan_first_level_index(store, StoreNode.container("Projects/Alpha"), settings))
        self.assertIsNone(plan_first_level_index(store, StoreNode.document("Home.md"), settings))
        self.assertIsNone(plan_first_level_index(store, StoreNode.container(""), settings))


class NestedPlanTests(unittest.TestCase):
    def test_nested_outlines_whole_subtree(self) -> None:
        plan = plan_nested_index(_vault(), StoreNode.container("Projects/Alpha"), NavigationSettings())

        assert plan is not None
        self.assertEqual(plan.path, "Projects/Alpha/Alpha.md")
        self.assertEqual(plan.content, "#Navigation for Alpha\n\n- **Beta**\n  - [[Deep]]\n- [[Intro]]\n")
        self.assertEqual(plan.nested, ())

    def test_nested_empty_folder_has_heading_only(self) -> None:
        plan = plan_nested_index(_vault(), StoreNode.container("Projects/Archive"), NavigationSettings())

        assert plan is not None
        self.assertEqual(plan.content, "#Navigation for Archive\n\n\n")

    def test_nested_excluded_folder_has_no_plan(self) -> None:
        settings = NavigationSettings(excluded_folders="Archive")
        self.assertIsNone(plan_nested_index(_vault(), StoreNode.container("Projects/Archive"), settings))


class DispatchTests(unittest.TestCase):
    def test_plan_for_picks_policy_by_depth(self) -> None:
        store = _vault()
        settings = NavigationSettings()

        root_plan = plan_for(store, store.root(), settings)
        first_plan = plan_for(store, StoreNode.container("Projects"), settings)
        nested_plan = plan_for(store, StoreNode.container("Projects/Alpha"), settings)

        assert root_plan is not None and first_plan is not None and nested_plan is not None
        self.assertEqual(root_plan.path, "Navigation.md")
        self.assertIn("- [[Projects/Alpha/Alpha|Alpha]]", first_plan.content)
        self.assertNotIn("Deep", first_plan.content)
        self.assertIn("  - [[Deep]]", nested_plan.content)


if __name__ == "__main__":
    unittest.main()
