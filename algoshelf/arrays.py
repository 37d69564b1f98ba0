"""Classic algorithms over lists of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from functools import reduce
from itertools import combinations, groupby
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two values summing to ``target``, found with a hash map.

    The pair with the smallest second index is returned; ``[]`` if none exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def two_sum_brute(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair (in index order) summing to ``target``; ``[]`` if none."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def _pair_sums(
    nums: Sequence[int], lo: int, hi: int, target: int
) -> Iterator[tuple[int, int]]:
    """Yield distinct value pairs from sorted ``nums[lo:hi + 1]`` summing to ``target``."""
    while lo < hi:
        total = nums[lo] + nums[hi]
        if total > target:
            hi -= 1
        elif total < target:
            lo += 1
        else:
            yield nums[lo], nums[hi]
            lo += 1
            hi -= 1
            while lo < hi and nums[lo] == nums[lo - 1]:
                lo += 1
            while lo < hi and nums[hi] == nums[hi + 1]:
                hi -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triples of values that sum to zero."""
    ordered = sorted(nums)
    last = len(ordered) - 1
    result = []
    for i, first in enumerate(ordered):
        if i and first == ordered[i - 1]:
            continue
        result.extend([first, b, c] for b, c in _pair_sums(ordered, i + 1, last, -first))
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruples of values that sum to ``target``."""
    ordered = sorted(nums)
    last = len(ordered) - 1
    result = []
    for i, first in enumerate(ordered):
        if i and first == ordered[i - 1]:
            continue
        for j in range(i + 1, len(ordered)):
            second = ordered[j]
            if j > i + 1 and second == ordered[j - 1]:
                continue
            rest = target - first - second
            result.extend(
                [first, second, c, d] for c, d in _pair_sums(ordered, j + 1, last, rest)
            )
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    profit = 0
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 not in values:
            length = 1
            while value + length in values:
                length += 1
            best = max(best, length)
    return best


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote: the value appearing more than half the time."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values appearing more than ``len(nums) // 3`` times, in the order they qualify."""
    limit = len(nums) // 3
    counts: Counter[int] = Counter()
    found: list[int] = []
    for value in nums:
        counts[value] += 1
        if counts[value] > limit and value not in found:
            found.append(value)
        if len(found) == 2:
            break
    return found


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    shift = k % len(nums)
    split = len(nums) - shift
    nums[:] = nums[split:] + nums[:split]


def remove_duplicates(nums: list[int]) -> int:
    """Compact repeated neighbours to the front in place; return the kept count."""
    if not nums:
        return 0
    write = 1
    for value in nums[1:]:
        if value != nums[write - 1]:
            nums[write] = value
            write += 1
    return write


def missing_number(nums: Sequence[int]) -> int:
    """The one value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max((len(list(run)) for key, run in groupby(nums) if key == 1), default=0)


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice (Kadane's algorithm)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous slices whose values sum to ``k``."""
    prefixes: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += prefixes[total - k]
        prefixes[total] += 1
    return count


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Return True when ``nums`` is a rotation of a non-decreasing sequence."""
    following = list(nums[1:]) + list(nums[:1])
    drops = sum(1 for a, b in zip(nums, following) if a > b)
    return drops <= 1


def sort_colors(nums: list[int]) -> None:
    """Sort the values of ``nums`` in place into ascending order."""
    nums.sort()