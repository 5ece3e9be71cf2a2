"""
Floyd-Rivest selection.

For large ranges a virtual sample of size ~n^(2/3) is used to guess a much
narrower range around rank k, which is selected recursively first so that
the element left at index k is a good pivot for the real partition.
Typically needs noticeably fewer comparisons than quickselect.

Average time complexity: O(n).
"""


import math

from fast_selection.utils.validation import check_rank


SAMPLING_THRESHOLD = 600


def floyd_rivest(data, k):
    """Find the k-th smallest element (0-based) of data

    Works on a private copy, the input is never modified.
    See floyd_rivest_inplace for a copy-free version."""

    data = list(data)
    return floyd_rivest_inplace(data, k)


def floyd_rivest_inplace(data, k):
    """Find the k-th smallest element (0-based) of data

    Partially sorts data in place: afterwards data[k] holds the result,
    everything before it is <= and everything after it is >= the result.
    """

    k = check_rank(len(data), k)
    _floyd_rivest(data, 0, len(data) - 1, k)
    return data[k]


def sampling_bounds(left, right, k):
    """Estimate a sub-range of [left, right] that very likely contains rank k

    The estimate may miss; the partition that follows keeps the result
    correct either way."""

    n = right - left + 1
    i = k - left + 1
    z = math.log(n)
    s = 0.5 * math.exp(2 * z / 3)
    sd = 0.5 * math.sqrt(z * s * (n - s) / n) * _sign(i - n / 2)
    new_left = max(left, math.floor(k - i * s / n + sd))
    new_right = min(right, math.floor(k + (n - i) * s / n + sd))
    return new_left, new_right


def _floyd_rivest(data, left, right, k):
    while right > left:

        if right - left > SAMPLING_THRESHOLD:
            new_left, new_right = sampling_bounds(left, right, k)
            _floyd_rivest(data, new_left, new_right, k)

        j = _hoare_partition(data, left, right, k)

        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1


def _hoare_partition(data, left, right, k):
    """Partition [left, right] around the value at k, return its final index"""

    t = data[k]
    i = left
    j = right

    _swap(data, left, k)
    # after the first swap below data[left] <= t <= data[right], bounding both scans
    if data[right] > t:
        _swap(data, right, left)

    while i < j:
        _swap(data, i, j)
        i += 1
        j -= 1
        while data[i] < t:
            i += 1
        while data[j] > t:
            j -= 1

    if data[left] == t:
        _swap(data, left, j)
    else:
        j += 1
        _swap(data, j, right)

    return j


def _sign(x):
    return (x > 0) - (x < 0)


def _swap(data, a, b):
    data[a], data[b] = data[b], data[a]
