"""Unit tests for edge cases in zipperlist.

Regression tests for ``None`` elements being mistaken for an absent
cursor, consistency checking, and large zippers.
"""

import unittest

import pytest

from zipperlist import (
    InvariantViolationError,
    Zipper,
    ZipperError,
    check_invariants,
)


class TestNoneElements(unittest.TestCase):
    """``None`` is data, never an absent cursor."""

    def test_move_left_keeps_none_cursor_as_data(self):
        # A None cursor in front of data is a present element and moves right.
        z = Zipper(left=[3, None, 2, 1], cursor=None, right=[3])
        expected = Zipper(left=[None, 2, 1], cursor=3, right=[None, 3])
        self.assertEqual(z.move_left(), expected)
        self.assertEqual(expected.to_list(), [1, 2, None, 3, None, 3])

    def test_move_left_from_end_adds_nothing_to_right(self):
        z = Zipper(left=[3, None, 2, 1])
        self.assertEqual(z.move_left(), Zipper(left=[None, 2, 1], cursor=3))
        self.assertEqual(z.move_left().count(), z.count())

    def test_none_elements_survive_walking_left(self):
        z = Zipper(left=[None, None])
        once = z.move_left()
        twice = once.move_left()
        self.assertEqual(once, Zipper(left=[None], cursor=None))
        self.assertEqual(twice, Zipper(cursor=None, right=[None]))
        self.assertEqual(twice.count(), 2)

    def test_none_elements_survive_walking_right(self):
        z = Zipper.from_list([None, None])
        end = z.move_right().move_right()
        self.assertEqual(end, Zipper(left=[None, None]))
        self.assertTrue(end.is_at_end())
        self.assertEqual(end.count(), 2)

    def test_cursor_start_keeps_none_elements(self):
        z = Zipper.from_list_end([None, 1, None])
        self.assertEqual(z.cursor_start(), Zipper(cursor=None, right=[1, None]))

    def test_delete_none_cursor(self):
        z = Zipper.from_list([None])
        self.assertEqual(z.delete(), Zipper.empty())


class TestInvariants(unittest.TestCase):
    """check_invariants and the gap state."""

    def test_valid_states_pass(self):
        for z in (
            Zipper.empty(),
            Zipper.from_list([1]),
            Zipper.from_list_end([1, 2]),
            Zipper.from_lists([1], [2, 3]),
        ):
            self.assertIs(check_invariants(z), z)

    def test_gap_state_is_reported(self):
        z = Zipper(left=[1], right=[2])
        with self.assertRaises(InvariantViolationError):
            check_invariants(z)

    def test_invariant_error_hierarchy(self):
        self.assertTrue(issubclass(InvariantViolationError, ZipperError))
        self.assertTrue(issubclass(InvariantViolationError, RuntimeError))

    def test_reversing_past_end_mirrors_into_before_start(self):
        z = Zipper.from_list_end([1, 2])
        mirrored = z.reverse()
        self.assertEqual(mirrored, Zipper(right=[2, 1]))
        self.assertEqual(mirrored.to_list(), [2, 1])
        self.assertEqual(mirrored.reverse(), z)


class TestStructuralSharing(unittest.TestCase):
    """Operations reuse the untouched side."""

    def test_move_right_shares_tail(self):
        z = Zipper.from_list([1, 2, 3])
        moved = z.move_right()
        self.assertIs(moved.right, z.right.tail)

    def test_edits_share_sides(self):
        z = Zipper.from_lists([1, 2], [3, 4])
        self.assertIs(z.replace(9).left, z.left)
        self.assertIs(z.replace(9).right, z.right)
        self.assertIs(z.push(0).right, z.right)


@pytest.mark.slow
class TestLargeZippers:
    """Large inputs stay iterative."""

    N = 200_000

    def test_walk_to_end_and_back(self):
        z = Zipper.from_list(range(self.N))
        end = z.cursor_end()
        assert end.count() == self.N
        assert end.cursor_start() == z

    def test_equality_on_large_zippers(self):
        a = Zipper.from_list(range(self.N))
        b = Zipper.from_list(range(self.N))
        assert a == b
        assert hash(a) == hash(b)

    def test_to_list(self):
        z = Zipper.from_list_end(range(self.N))
        assert z.to_list() == list(range(self.N))


if __name__ == "__main__":
    unittest.main()
