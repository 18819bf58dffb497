"""Subarray sums, longest palindromes and nearest greater/smaller elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence


def min_subarray_sum(nums: Iterable[int]) -> int:
    """Smallest sum of a non-empty contiguous subarray (Kadane)."""
    best: int | None = None
    current = 0
    for x in nums:
        current += x
        best = current if best is None else min(best, current)
        current = min(current, 0)
    if best is None:
        raise ValueError("empty sequence")
    return best


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    best: int | None = None
    current = 0
    for x in nums:
        current += x
        best = current if best is None else max(best, current)
        current = max(current, 0)
    if best is None:
        raise ValueError("empty sequence")
    return best


def longest_palindromic_substring(s: str) -> str:
    """The first longest palindromic substring of s (Manacher)."""
    start_mark, end_mark, gap = object(), object(), object()
    t: list[object] = [start_mark, gap]
    for ch in s:
        t += (ch, gap)
    t.append(end_mark)
    p = [0] * len(t)
    center = right = 0
    best_start = best_len = 0
    for i in range(1, len(t) - 1):
        if i < right:
            p[i] = min(right - i, p[2 * center - i])
        while t[i + p[i] + 1] == t[i - p[i] - 1]:
            p[i] += 1
        if i + p[i] > right:
            center, right = i, i + p[i]
        if p[i] > best_len:
            best_start, best_len = (i - p[i] - 1) // 2, p[i]
    return s[best_start:best_start + best_len]


def _nearest(
    nums: Sequence[int],
    order: Iterable[int],
    blocks: Callable[[int, int], bool],
    missing: int,
) -> list[int]:
    result = [missing] * len(nums)
    stack: list[int] = []
    for i in order:
        while stack and blocks(nums[stack[-1]], nums[i]):
            stack.pop()
        result[i] = stack[-1] if stack else missing
        stack.append(i)
    return result


def next_greater(nums: Sequence[int]) -> list[int]:
    """Index of the next strictly greater element for each position; len(nums) if none."""
    nums = list(nums)
    return _nearest(nums, reversed(range(len(nums))), operator.le, len(nums))


def prev_greater(nums: Sequence[int]) -> list[int]:
    """Index of the previous strictly greater element for each position; 0 if none."""
    nums = list(nums)
    return _nearest(nums, range(len(nums)), operator.le, 0)


def next_smaller(nums: Sequence[int]) -> list[int]:
    """Index of the next strictly smaller element for each position; len(nums) if none."""
    nums = list(nums)
    return _nearest(nums, reversed(range(len(nums))), operator.ge, len(nums))


def prev_smaller(nums: Sequence[int]) -> list[int]:
    """Index of the previous strictly smaller element for each position; 0 if none."""
    nums = list(nums)
    return _nearest(nums, range(len(nums)), operator.ge, 0)