import numpy as np


def compute_speedups(result, reference='sort'):
    """Ratios of the reference time to every other timed entry

    Also compares floyd_rivest against quickselect when both were timed.
    A zero time (below timer resolution) yields nan."""

    times = result.times
    speedups = {}
    if reference in times:
        for name, t in times.items():
            if name != reference:
                speedups[f'{name} vs {reference}'] = _ratio(times[reference], t)
    if 'quickselect' in times and 'floyd_rivest' in times:
        speedups['floyd_rivest vs quickselect'] = _ratio(
            times['quickselect'], times['floyd_rivest']
        )
    return speedups


def timings_table(results, names):
    table = np.empty((len(results), 2 + len(names)))
    for row, result in enumerate(results):
        table[row, 0] = result.size
        table[row, 1] = result.k
        table[row, 2:] = [result.times.get(name, np.nan) for name in names]
    return table


def _ratio(numerator, denominator):
    if denominator <= 0:
        return np.nan
    return numerator / denominator
