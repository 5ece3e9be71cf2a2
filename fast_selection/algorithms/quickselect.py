"""
Quickselect: random pivot, Lomuto partition, iterative shrink of the range
that brackets rank k.

Average time complexity: O(n). Worst case: O(n^2).
"""


from fast_selection.utils.random_sources import PythonRandomSource
from fast_selection.utils.validation import check_rank


def quickselect(data, k, random_source=None):
    """Find the k-th smallest element (0-based) of data

    Works on a private copy, the input is never modified.
    See quickselect_inplace for a copy-free version."""

    data = list(data)
    return quickselect_inplace(data, k, random_source)


def quickselect_inplace(data, k, random_source=None):
    """Find the k-th smallest element (0-based) of data

    Partially sorts data in place: afterwards data[k] holds the result,
    everything before it is <= and everything after it is >= the result.

    random_source is anything with a randint(low, high) method drawing from
    the inclusive range; a fresh unseeded PythonRandomSource is used if None.
    """

    k = check_rank(len(data), k)
    if random_source is None:
        random_source = PythonRandomSource()
    return _quickselect(data, 0, len(data) - 1, k, random_source)


def _quickselect(data, left, right, k, random_source):
    while left < right:
        pivot_index = _lomuto_partition(
            data, left, right, random_source.randint(left, right)
        )
        if k == pivot_index:
            break
        elif k < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
    return data[k]


def _lomuto_partition(data, left, right, pivot_index):
    pivot_value = data[pivot_index]
    data[pivot_index], data[right] = data[right], data[pivot_index]

    store_index = left
    for i in range(left, right):
        if data[i] < pivot_value:
            data[i], data[store_index] = data[store_index], data[i]
            store_index += 1

    data[store_index], data[right] = data[right], data[store_index]
    return store_index
