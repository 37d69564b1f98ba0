"""Binary-search algorithms over sorted, rotated and monotone problems."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from typing import Optional


def _lowest(low: int, high: int, ok: Callable[[int], bool]) -> Optional[int]:
    """Smallest value in ``low..high`` for which the monotone ``ok`` holds."""
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if ok(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _groups_needed(values: Sequence[int], capacity: int) -> int:
    """Contiguous groups needed when each group holds at most ``capacity``."""
    groups = 1
    load = 0
    for value in values:
        if load + value <= capacity:
            load += value
        else:
            groups += 1
            load = value
    return groups


def _min_capacity(values: Sequence[int], groups: int) -> int:
    if not values:
        raise ValueError("values must not be empty")
    answer = _lowest(
        max(values), sum(values), lambda cap: _groups_needed(values, cap) <= groups
    )
    if answer is None:
        raise ValueError("the values cannot be split into that many groups")
    return answer


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries all packages, in order, within ``days``."""
    return _min_capacity(weights, days)


def split_array(nums: Sequence[int], k: int) -> int:
    """Least possible largest sum when ``nums`` is cut into ``k`` contiguous parts."""
    return _min_capacity(nums, k)


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Least divisor whose rounded-up quotients sum to at most ``threshold``."""
    if not nums:
        raise ValueError("nums must not be empty")
    answer = _lowest(
        1,
        max(nums),
        lambda d: sum(_ceil_div(value, d) for value in nums) <= threshold,
    )
    if answer is None:
        raise ValueError("no divisor meets the threshold")
    return answer


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Least bananas-per-hour rate that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    answer = _lowest(
        1, max(piles), lambda rate: sum(_ceil_div(p, rate) for p in piles) <= h
    )
    if answer is None:
        raise ValueError("the piles cannot be finished in time")
    return answer


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Least day by which ``m`` bouquets of ``k`` adjacent flowers can be made; -1 if never."""
    if not bloom_day:
        raise ValueError("bloom_day must not be empty")

    def bouquets(day: int) -> int:
        made = 0
        run = 0
        for bloom in bloom_day:
            if bloom <= day:
                run += 1
            else:
                made += run // k
                run = 0
        return made + run // k

    answer = _lowest(min(bloom_day), max(bloom_day), lambda day: bouquets(day) >= m)
    return -1 if answer is None else answer


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    smallest = nums[0]
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] >= nums[low]:
            smallest = min(smallest, nums[low])
            low = mid + 1
        else:
            smallest = min(smallest, nums[mid])
            high = mid - 1
    return smallest


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of a value greater than its neighbours; -1 if the search finds none."""
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        before, here, after = nums[mid - 1], nums[mid], nums[mid + 1]
        if before < here > after:
            return mid
        if before > here > after:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The k-th positive integer missing from the ascending ``arr``."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return low + k


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[low]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Return True when ``target`` occurs in a rotated non-decreasing sequence."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[mid] <= nums[high]:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
        elif nums[low] <= target <= nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in ascending ``nums``; ``[-1, -1]`` if absent."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def _find(nums: Sequence[int], target: int) -> tuple[bool, int]:
    """Binary search returning (found, index or insertion point)."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True, mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return False, low


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or where it would be inserted."""
    return _find(nums, target)[1]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` within the values in ascending order, or -1."""
    found, index = _find(sorted(nums), target)
    return index if found else -1


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The value occurring once in a sorted sequence of otherwise paired values; -1 if not found."""
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid - 1] and nums[mid] != nums[mid + 1]:
            return nums[mid]
        if (mid % 2 == 1 and nums[mid - 1] == nums[mid]) or (
            mid % 2 == 0 and nums[mid] == nums[mid + 1]
        ):
            low = mid + 1
        else:
            high = mid - 1
    return -1


def my_sqrt(x: int) -> int:
    """Integer square root of ``x``, rounded down."""
    return math.isqrt(x)