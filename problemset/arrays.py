"""Array problems: k-sums, windows, medians, merging and range coverage."""

from __future__ import annotations

import heapq
from itertools import accumulate


def two_sum(nums, target):
    """Return indices [i, j] with nums[i] + nums[j] == target, or [] if there are none."""
    seen = {}
    for index, value in enumerate(nums):
        need = target - value
        if need in seen:
            return [seen[need], index]
        seen[value] = index
    return []


def three_sum(nums):
    """Return every distinct sorted triple of values that sums to zero."""
    return four_sum_like(sorted(nums), 0, 3)


def four_sum(nums, target):
    """Return every distinct sorted quadruple of values that sums to target."""
    return four_sum_like(sorted(nums), target, 4)


def four_sum_like(ordered, target, size):
    """Find distinct sorted tuples of the given size (at least 2) summing to target."""
    results = []

    def pairs(start, goal, prefix):
        lo, hi = start, len(ordered) - 1
        while lo < hi:
            total = ordered[lo] + ordered[hi]
            if total < goal:
                lo += 1
            elif total > goal:
                hi -= 1
            else:
                results.append(prefix + [ordered[lo], ordered[hi]])
                lo += 1
                hi -= 1
                while lo < hi and ordered[lo] == ordered[lo - 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi + 1]:
                    hi -= 1

    def search(start, goal, prefix, remaining):
        if remaining == 2:
            pairs(start, goal, prefix)
            return
        for index in range(start, len(ordered)):
            if index > start and ordered[index] == ordered[index - 1]:
                continue
            value = ordered[index]
            search(index + 1, goal - value, prefix + [value], remaining - 1)

    search(0, target, [], size)
    return results


def max_frequency(nums, k):
    """Return the largest count of equal values reachable with at most k unit increments."""
    ordered = sorted(nums)
    left = 0
    window_total = 0
    best = 0
    for right, value in enumerate(ordered):
        window_total += value
        if value * (right - left + 1) - window_total > k:
            window_total -= ordered[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def find_median_sorted_arrays(nums1, nums2):
    """Return the median of the two arrays taken together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of no values")
    half = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[half - 1] + merged[half]) / 2
    return float(merged[half])


def merge_sorted(nums1, m, nums2, n):
    """Replace nums1 in place with the sorted first m of nums1 and first n of nums2."""
    nums1[:] = heapq.merge(sorted(nums1[:m]), sorted(nums2[:n]))


def sort_colors(nums):
    """Sort a list of 0s, 1s and 2s in place with a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def is_zero_array(nums, queries):
    """Tell whether each position is covered by at least as many [l, r] queries as its value."""
    delta = [0] * (len(nums) + 1)
    for left, right in queries:
        delta[left] += 1
        delta[right + 1] -= 1
    return all(cover >= need for cover, need in zip(accumulate(delta), nums))


def max_removal(nums, queries):
    """Return how many [l, r] queries can be dropped while the rest still zero nums, or -1."""
    ordered = sorted(map(list, queries))
    candidates = []  # max-heap of right ends, stored negated
    chosen = []  # min-heap of right ends in use
    used = 0
    next_query = 0
    for position, need in enumerate(nums):
        while chosen and chosen[0] < position:
            heapq.heappop(chosen)
        while next_query < len(ordered) and ordered[next_query][0] <= position:
            heapq.heappush(candidates, -ordered[next_query][1])
            next_query += 1
        while len(chosen) < need and candidates and -candidates[0] >= position:
            heapq.heappush(chosen, -heapq.heappop(candidates))
            used += 1
        if len(chosen) < need:
            return -1
    return len(ordered) - used


def maximum_value_sum(nums, k, edges):
    """Return the largest sum after XOR-ing an even number of values with k.

    In a tree any even set of nodes can be reached by edge operations, so edges are not needed.
    """
    even, odd = 0, float("-inf")
    for value in nums:
        flipped = value ^ k
        even, odd = max(even + value, odd + flipped), max(odd + value, even + flipped)
    return even


def missing_number(arr):
    """Return the one number of 1..len(arr)+1 that arr lacks."""
    n = len(arr) + 1
    return n * (n + 1) // 2 - sum(arr)