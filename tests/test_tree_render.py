import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tree_set import TreeSet
from tree_render import (
    render_pre_order,
    render_in_order,
    render_post_order,
    render_branches,
    render_levels,
)


def build(*values):
    tree = TreeSet()
    for value in values:
        tree.add(value)
    return tree


class TestIndentedRenderers(unittest.TestCase):

    def setUp(self):
        self.tree = build(5, 3, 8, 1, 4, 7, 9)

    def test_pre_order(self):
        expected = (
            "5\n"
            "    L: 3\n"
            "        L: 1\n"
            "        R: 4\n"
            "    R: 8\n"
            "        L: 7\n"
            "        R: 9\n"
        )
        self.assertEqual(render_pre_order(self.tree), expected)

    def test_in_order(self):
        expected = (
            "        L: 1\n"
            "    L: 3\n"
            "        R: 4\n"
            "5\n"
            "        L: 7\n"
            "    R: 8\n"
            "        R: 9\n"
        )
        self.assertEqual(render_in_order(self.tree), expected)

    def test_post_order(self):
        expected = (
            "        L: 1\n"
            "        R: 4\n"
            "    L: 3\n"
            "        L: 7\n"
            "        R: 9\n"
            "    R: 8\n"
            "5\n"
        )
        self.assertEqual(render_post_order(self.tree), expected)

    def test_single_node(self):
        tree = build(42)
        self.assertEqual(render_pre_order(tree), "42\n")
        self.assertEqual(render_in_order(tree), "42\n")
        self.assertEqual(render_post_order(tree), "42\n")

    def test_empty_tree_renders_nothing(self):
        tree = TreeSet()
        self.assertEqual(render_pre_order(tree), "")
        self.assertEqual(render_in_order(tree), "")
        self.assertEqual(render_post_order(tree), "")
        self.assertEqual(render_branches(tree), "")
        self.assertEqual(render_levels(tree), "")

    def test_reflects_shape_after_remove(self):
        self.tree.remove(5)
        self.assertEqual(render_pre_order(self.tree).splitlines()[0], "4")
        self.assertNotIn("R: 4", render_pre_order(self.tree))

    def test_deep_chain_does_not_recurse(self):
        tree = TreeSet()
        for i in range(3000):
            tree.add(i)
        lines = render_pre_order(tree).splitlines()
        self.assertEqual(len(lines), 3000)
        self.assertEqual(lines[-1], "    " * 2999 + "R: 2999")
        self.assertEqual(len(render_in_order(tree).splitlines()), 3000)
        self.assertEqual(len(render_post_order(tree).splitlines()), 3000)


class TestBranchRenderer(unittest.TestCase):

    def test_branches(self):
        tree = build(5, 3, 8, 1, 4)
        expected = (
            "    |   |-- 1\n"
            "    |-- 3\n"
            "    |   \\-- 4\n"
            "\\-- 5\n"
            "    \\-- 8\n"
        )
        self.assertEqual(render_branches(tree), expected)

    def test_right_chain(self):
        tree = build(1, 2, 3)
        expected = (
            "\\-- 1\n"
            "    \\-- 2\n"
            "        \\-- 3\n"
        )
        self.assertEqual(render_branches(tree), expected)


class TestLevelRenderer(unittest.TestCase):

    def test_full_tree(self):
        tree = build(5, 3, 8, 1, 4, 7, 9)
        expected = (
            "   5\n"
            " 3   8\n"
            "1 4 7 9\n"
        )
        self.assertEqual(render_levels(tree), expected)

    def test_missing_children_keep_their_slot(self):
        tree = build(5, 3, 8, 9)
        expected = (
            "   5\n"
            " 3   8\n"
            "      9\n"
        )
        self.assertEqual(render_levels(tree), expected)

    def test_explicit_height_widens_picture(self):
        tree = build(2, 1, 3)
        expected = (
            "   2\n"
            " 1   3\n"
        )
        self.assertEqual(render_levels(tree, height=3), expected)

    def test_wide_elements_share_one_slot_width(self):
        self.assertEqual(render_levels(build(50, 30, 70)), "  50\n30  70\n")
        self.assertEqual(render_levels(build(50, 5, 100)), "    50\n  5   100\n")
        self.assertEqual(render_levels(build(50, 70)), "  50\n    70\n")

    def test_height_below_tree_height_raises(self):
        tree = build(1, 2, 3)
        with self.assertRaises(ValueError):
            render_levels(tree, height=2)


if __name__ == "__main__":
    unittest.main()
