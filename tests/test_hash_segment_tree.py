import pytest

from algokit.hash_segment_tree import HashSegmentTree


def _codes(text):
    return [ord(c) - ord("a") + 1 for c in text]


def test_equal_parts_hash_equal():
    text = "abcabc"
    tree = HashSegmentTree(len(text), _codes(text))
    assert tree.query(1, 3) == tree.query(4, 6)
    assert tree.query(2, 3) == tree.query(5, 6)


def test_different_parts_hash_differently():
    text = "abcabd"
    tree = HashSegmentTree(len(text), _codes(text))
    assert tree.query(1, 2) == tree.query(4, 5)
    assert tree.query(1, 3) != tree.query(4, 6)


def test_update_and_restore():
    text = "hello"
    tree = HashSegmentTree(len(text), _codes(text))
    before = tree.query(1, 5)
    tree.update(2, "a")
    assert tree.query(1, 5) != before
    tree.update(2, "e")
    assert tree.query(1, 5) == before


def test_char_update_equals_code_update():
    first = HashSegmentTree(4, _codes("abcd"))
    second = HashSegmentTree(4, _codes("abcd"))
    first.update(3, "z")
    second.update(3, 26)
    assert first.query(1, 4) == second.query(1, 4)


def test_update_makes_parts_equal():
    tree = HashSegmentTree(4, _codes("abxy"))
    tree.update(3, "a")
    tree.update(4, "b")
    assert tree.query(1, 2) == tree.query(3, 4)


def test_empty_range_and_bounds():
    tree = HashSegmentTree(4, _codes("abcd"))
    assert tree.query(3, 2) == (0, 0)
    with pytest.raises(IndexError):
        tree.query(0, 2)
    with pytest.raises(IndexError):
        tree.update(5, 1)
    with pytest.raises(ValueError):
        tree.update(1, "ab")