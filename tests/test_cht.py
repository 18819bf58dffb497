import random

import pytest

from algokit.cht import Line, LineContainer


def test_line_value():
    assert Line(3, -2).value(4) == 3 * 4 - 2


def test_single_line_minimum():
    lc = LineContainer()
    lc.add(2, 5)
    assert lc.query(10) == 2 * 10 + 5
    assert lc.query(-3) == 2 * -3 + 5


def test_empty_query_raises():
    with pytest.raises(IndexError):
        LineContainer().query(0)


def test_parallel_lines_keep_best():
    lc = LineContainer()
    lc.add(1, 9)
    lc.add(1, 2)
    lc.add(1, 5)
    assert lc.query(4) == 4 + 2


@pytest.mark.parametrize("maximum", [False, True])
def test_matches_brute_force(maximum):
    rng = random.Random(11 if maximum else 3)
    lines = []
    lc = LineContainer(maximum=maximum)
    pick = max if maximum else min
    for _ in range(80):
        m, c = rng.randint(-30, 30), rng.randint(-100, 100)
        lines.append((m, c))
        lc.add(m, c)
        for x in (rng.randint(-50, 50) for _ in range(5)):
            assert lc.query(x) == pick(a * x + b for a, b in lines)


def test_redundant_lines_dropped():
    lc = LineContainer()
    lc.add(0, 0)
    lc.add(0, 10)
    assert len(lc) == 1