"""Tests for the persistent ConsList backing zipper sides."""

import pytest

from zipperlist.core.conslist import NIL, ConsList


class TestConstruction:
    """Building lists."""

    def test_nil_is_empty(self):
        assert len(NIL) == 0
        assert not NIL
        assert NIL.is_empty()
        assert list(NIL) == []

    def test_from_iterable_keeps_order(self):
        cells = ConsList.from_iterable([1, 2, 3])
        assert list(cells) == [1, 2, 3]
        assert cells.head == 1
        assert len(cells) == 3

    def test_from_reversed(self):
        cells = ConsList.from_reversed(iter([1, 2, 3]))
        assert list(cells) == [3, 2, 1]

    def test_constructor_only_builds_empty(self):
        assert ConsList() == NIL
        assert len(ConsList()) == 0
        with pytest.raises(TypeError):
            ConsList(1)

    def test_cons_tracks_size(self):
        cells = NIL.cons(None).cons(None)
        assert len(cells) == 2
        assert list(cells) == [None, None]

    def test_cons_shares_tail(self):
        base = ConsList.from_iterable([2, 3])
        extended = base.cons(1)
        assert list(extended) == [1, 2, 3]
        assert extended.tail is base
        # Original untouched
        assert list(base) == [2, 3]

    def test_reversed(self):
        assert ConsList.from_iterable("abc").reversed().to_list() == ["c", "b", "a"]


class TestAccess:
    """Head, tail and membership."""

    def test_head_of_empty_raises(self):
        with pytest.raises(IndexError, match="head of empty"):
            NIL.head

    def test_tail_of_empty_raises(self):
        with pytest.raises(IndexError, match="tail of empty"):
            NIL.tail

    def test_contains(self):
        cells = ConsList.from_iterable([1, None, "x"])
        assert None in cells
        assert "x" in cells
        assert 7 not in cells

    def test_immutable(self):
        cells = ConsList.from_iterable([1])
        with pytest.raises(AttributeError):
            cells._head = 5


class TestEquality:
    """Equality and hashing."""

    def test_equal_lists(self):
        assert ConsList.from_iterable([1, 2]) == ConsList.from_iterable([1, 2])
        assert ConsList.from_iterable([1, 2]) != ConsList.from_iterable([2, 1])
        assert ConsList.from_iterable([1]) != ConsList.from_iterable([1, 1])

    def test_not_equal_to_plain_list(self):
        assert ConsList.from_iterable([1, 2]) != [1, 2]

    def test_hash_matches_equality(self):
        a = ConsList.from_iterable([1, 2, 3])
        b = ConsList.from_iterable([1, 2, 3])
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_long_lists_compare_without_recursion(self):
        a = ConsList.from_iterable(range(100_000))
        b = ConsList.from_iterable(range(100_000))
        assert a == b
        assert len(a) == 100_000

    def test_repr(self):
        assert repr(ConsList.from_iterable([1, 2])) == "ConsList([1, 2])"
        assert repr(NIL) == "ConsList([])"
