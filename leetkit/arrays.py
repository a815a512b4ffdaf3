"""Array, sliding-window, hashing and binary-search problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from itertools import accumulate
from typing import Sequence


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions."""
    stack: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and stack and stack[-1] > 0 and asteroid < 0:
            top = stack[-1]
            if top < -asteroid:
                stack.pop()
            elif top == -asteroid:
                stack.pop()
                alive = False
            else:
                alive = False
        if alive:
            stack.append(asteroid)
    return stack


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area between two lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        if height[left] < height[right]:
            best = max(best, height[left] * (right - left))
            left += 1
        else:
            best = max(best, height[right] * (right - left))
            right -= 1
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left_sum = 0
    for index, num in enumerate(nums):
        if left_sum == total - left_sum - num:
            return index
        left_sum += num
    return -1


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Return True if some i < j < k has nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    first = second = float("inf")
    for num in nums:
        if num <= first:
            first = num
        elif num <= second:
            second = num
        else:
            return True
    return False


def largest_altitude(gain: Sequence[int]) -> int:
    """Return the highest altitude reached, starting from 0."""
    return max(accumulate(gain, initial=0))


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the maximum average of a contiguous window of length k."""
    if k > len(nums) or k <= 0:
        return 0.0
    window = sum(nums[:k])
    best = window
    for outgoing, incoming in zip(nums, nums[k:]):
        window += incoming - outgoing
        best = max(best, window)
    return best / k


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones when up to k zeros may be flipped."""
    left = 0
    zeros = 0
    best = 0
    for right, num in enumerate(nums):
        if num == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the longest run of ones after deleting exactly one element."""
    left = 0
    zeros = 0
    best = 0
    for right, num in enumerate(nums):
        if num == 0:
            zeros += 1
        while zeros > 1:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left)
    return best


def max_operations(nums: Sequence[int], k: int) -> int:
    """Return how many disjoint pairs summing to k can be removed."""
    waiting: Counter[int] = Counter()
    operations = 0
    for num in nums:
        complement = k - num
        if waiting[complement] > 0:
            operations += 1
            waiting[complement] -= 1
        else:
            waiting[num] += 1
    return operations


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each index, the product of every other element."""
    prefix = list(accumulate(nums[:-1], lambda a, b: a * b, initial=1)) if nums else []
    answer = list(prefix)
    suffix = 1
    for index in reversed(range(len(nums))):
        answer[index] *= suffix
        suffix *= nums[index]
    return answer


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Return True if every value occurs a distinct number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Return the distinct values only in nums1 and the distinct values only in nums2."""
    present1 = set(nums1)
    present2 = set(nums2)
    only1 = list(dict.fromkeys(v for v in nums1 if v not in present2))
    only2 = list(dict.fromkeys(v for v in nums2 if v not in present1))
    return [only1, only2]


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of (row, column) pairs that hold equal sequences."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))


def equal_pairs_hash(grid: Sequence[Sequence[int]]) -> int:
    """Count equal (row, column) pairs by comparing polynomial hashes."""

    def _hash(values: Sequence[int]) -> int:
        result = 0
        for value in values:
            result = result * 37 + value
        return result

    row_hashes = [_hash(row) for row in grid]
    col_hashes = Counter(_hash(column) for column in zip(*grid))
    return sum(col_hashes[h] for h in row_hashes)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the first index strictly greater than its neighbours, or 0."""
    last = len(nums) - 1
    for index, num in enumerate(nums):
        left_ok = index == 0 or num > nums[index - 1]
        right_ok = index == last or num > nums[index + 1]
        if left_ok and right_ok:
            return index
    return 0


def find_peak_element_binary(nums: Sequence[int]) -> int:
    """Return the index of a peak found by binary search."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return max(left, 0)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest eating speed that finishes all piles within h hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    left, right = 1, max(piles)
    result = right
    while left <= right:
        mid = (left + right) // 2
        hours = sum(-(-pile // mid) for pile in piles)
        if hours <= h:
            result = mid
            right = mid - 1
        else:
            left = mid + 1
    return result


def successful_pairs_brute_force(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """Count, for each spell, the potions whose product with it reaches success."""
    return [sum(1 for potion in potions if spell * potion >= success) for spell in spells]


def successful_pairs_binary(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """Count successful potions per spell by binary search over sorted potions."""
    ordered = sorted(potions)
    total = len(ordered)
    return [total - bisect_left(ordered, -(-success // spell)) for spell in spells]


def successful_pairs_prefix_sum(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """Count successful potions per spell using suffix counts over potion strengths."""
    strongest = max(potions, default=0)
    at_least = [0] * (strongest + 2)
    for potion in potions:
        at_least[potion] += 1
    for strength in range(strongest - 1, -1, -1):
        at_least[strength] += at_least[strength + 1]

    result = []
    for spell in spells:
        need = max(-(-success // spell), 0)
        result.append(at_least[need] if need <= strongest else 0)
    return result