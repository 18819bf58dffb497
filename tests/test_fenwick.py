import random

import pytest

from algokit.fenwick import FenwickTree, FenwickTree2D, RangeFenwickTree


@pytest.fixture
def nums():
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(20)]


def test_fenwick_range_sums_match_slices(nums):
    tree = FenwickTree(len(nums))
    tree.build(nums)
    for l in range(len(nums)):
        for r in range(l, len(nums)):
            assert tree.query(l, r) == sum(nums[l:r + 1])


def test_fenwick_point_updates(nums):
    tree = FenwickTree(len(nums))
    tree.build(nums)
    values = list(nums)
    rng = random.Random(3)
    for _ in range(30):
        idx = rng.randrange(len(values))
        delta = rng.randint(-10, 10)
        tree.add(idx, delta)
        values[idx] += delta
    assert [tree.get(i) for i in range(len(values))] == values
    assert tree.prefix(len(values) - 1) == sum(values)


def test_fenwick_empty_range_and_minus_one(nums):
    tree = FenwickTree(len(nums))
    tree.build(nums)
    assert tree.query(5, 2) == 0
    assert tree.prefix(-1) == 0


def test_fenwick_out_of_range():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(5, 1)
    with pytest.raises(IndexError):
        tree.prefix(-2)
    with pytest.raises(ValueError):
        FenwickTree(-1)


def test_fenwick_2d_rectangles():
    rng = random.Random(11)
    rows, cols = 6, 5
    grid = [[0] * (cols + 1) for _ in range(rows + 1)]
    tree = FenwickTree2D(rows, cols)
    for _ in range(40):
        i, j = rng.randint(0, rows), rng.randint(0, cols)
        v = rng.randint(-9, 9)
        tree.add(i, j, v)
        grid[i][j] += v
    for x1 in range(rows + 1):
        for x2 in range(x1, rows + 1):
            for y1 in range(cols + 1):
                for y2 in range(y1, cols + 1):
                    expected = sum(sum(row[y1:y2 + 1]) for row in grid[x1:x2 + 1])
                    assert tree.query(x1, y1, x2, y2) == expected
                    assert tree.query(x2, y2, x1, y1) == expected


def test_fenwick_2d_build_is_one_based():
    grid = [[1, 2, 3], [4, 5, 6]]
    tree = FenwickTree2D(2, 3)
    tree.build(grid)
    assert tree.query(1, 1, 2, 3) == sum(map(sum, grid))
    assert tree.query(0, 0, 0, 3) == 0
    for i, row in enumerate(grid, 1):
        for j, x in enumerate(row, 1):
            assert tree.query(i, j, i, j) == x


def test_fenwick_2d_out_of_range():
    tree = FenwickTree2D(2, 2)
    with pytest.raises(IndexError):
        tree.add(3, 0, 1)


def test_range_fenwick_matches_plain_list(nums):
    tree = RangeFenwickTree(len(nums))
    tree.build(nums)
    values = list(nums)
    rng = random.Random(5)
    for _ in range(25):
        l = rng.randrange(len(values))
        r = rng.randrange(l, len(values))
        v = rng.randint(-7, 7)
        tree.add(l, r, v)
        for i in range(l, r + 1):
            values[i] += v
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert tree.query(l, r) == sum(values[l:r + 1])
    assert tree.get(len(values) - 1) == sum(values)


def test_range_fenwick_errors():
    tree = RangeFenwickTree(3)
    assert tree.query(2, 1) == 0
    with pytest.raises(ValueError):
        tree.add(2, 1, 5)
    with pytest.raises(IndexError):
        tree.add(0, 4, 5)