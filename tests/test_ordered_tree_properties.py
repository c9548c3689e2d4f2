"""Property tests for OrderedTree driven by hypothesis."""

import sys
import os
import io
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordered_tree import OrderedTree

# Bounded so the recursive operations stay well inside the recursion limit
# even when hypothesis generates sorted input.
values = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)
operations = st.lists(
    st.tuples(st.sampled_from(["insert", "remove"]), st.integers(-50, 50)),
    max_size=80,
)


def assert_bst(test, node, low=None, high=None):
    if node is None:
        return
    if low is not None:
        test.assertLess(low, node.value)
    if high is not None:
        test.assertLess(node.value, high)
    assert_bst(test, node.left, low, node.value)
    assert_bst(test, node.right, node.value, high)


class TestOrderedTreeProperties(unittest.TestCase):

    @given(operations)
    def test_in_order_stays_strictly_ascending(self, ops):
        tree = OrderedTree()
        model = set()
        for op, v in ops:
            getattr(tree, op)(v)
            if op == "insert":
                model.add(v)
            else:
                model.discard(v)
            assert_bst(self, tree._root)
        self.assertEqual(tree.in_order(), sorted(model))
        self.assertEqual(tree.size(), len(model))

    @given(values, st.integers(-1000, 1000))
    def test_insert_is_idempotent(self, xs, v):
        once = OrderedTree(xs)
        once.insert(v)
        twice = OrderedTree(xs)
        twice.insert(v)
        twice.insert(v)
        self.assertEqual(once.pre_order(), twice.pre_order())

    @given(values, st.integers(-1100, 1100))
    def test_contains_matches_inserted_set(self, xs, probe):
        tree = OrderedTree(xs)
        for x in xs:
            self.assertTrue(tree.contains(x))
        self.assertEqual(tree.contains(probe), probe in set(xs))

    @given(values, st.integers(-1000, 1000))
    def test_remove_drops_exactly_one_value(self, xs, v):
        tree = OrderedTree(xs)
        before = tree.in_order()
        tree.remove(v)
        if v in before:
            before.remove(v)
        self.assertEqual(tree.in_order(), before)

    @given(values, values)
    def test_copy_is_independent(self, xs, extra):
        original = OrderedTree(xs)
        snapshot = original.in_order()
        clone = original.copy()
        for v in extra:
            clone.insert(v)
        for v in xs:
            clone.remove(v)
        self.assertEqual(original.in_order(), snapshot)

        for v in extra:
            original.insert(v)
        self.assertEqual(clone.in_order(), sorted(set(extra) - set(xs)))

    @given(values)
    def test_take_transfers_contents(self, xs):
        source = OrderedTree(xs)
        before = source.in_order()
        moved = OrderedTree.take(source)
        self.assertTrue(source.is_empty())
        self.assertEqual(moved.in_order(), before)

    @given(values)
    def test_min_max_and_print_agree_with_sorted(self, xs):
        tree = OrderedTree(xs)
        out = io.StringIO()
        tree.print_tree(out)
        if not xs:
            self.assertEqual(out.getvalue(), "Empty tree\n")
            return
        expected = sorted(set(xs))
        self.assertEqual(tree.min(), expected[0])
        self.assertEqual(tree.max(), expected[-1])
        self.assertEqual(out.getvalue().split(), [str(v) for v in expected])


if __name__ == "__main__":
    unittest.main()
