"""
Times the selection algorithms against full sorting on the same data.

Purely illustrative: every timed call is also checked against the
full-sort answer, so a benchmark run doubles as a large randomized test.
"""


import logging
import time

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from fast_selection.utils.sorting import sort_kth


logger = logging.getLogger(__name__)


class SelectionMismatchError(AssertionError):

    def __init__(self, name, k, result, expected):
        super().__init__(
            f'{name} incorrect for k={k}: got {result!r}, expected {expected!r}'
        )
        self.name = name
        self.k = k
        self.result = result
        self.expected = expected


@dataclass
class BenchmarkResult:
    size: int
    k: int
    expected: object
    times: Dict[str, float] = field(default_factory=dict)


class Benchmark:

    def __init__(
            self, selectors, baselines: Optional[Dict[str, Callable]] = None,
            n_trials=5, timer=time.process_time,
    ):
        self._selectors = list(selectors)
        self._baselines = dict(baselines or {})
        self._n_trials = n_trials
        self._timer = timer

    def __call__(self, data, k=None) -> BenchmarkResult:
        if k is None:
            k = len(data) // 2
        result = BenchmarkResult(len(data), k, sort_kth(data, k))

        for selector in self._selectors:
            result.times[selector.name] = self._time(
                selector.name, selector, data, k, result.expected
            )
        for name, baseline in self._baselines.items():
            result.times[name] = self._time(
                name, baseline, data, k, result.expected
            )

        return result

    def _time(self, name, func, data, k, expected):
        elapsed = 0.
        for trial in range(self._n_trials):
            start = self._timer()
            value = func(data, k)
            trial_time = self._timer() - start
            if value != expected:
                raise SelectionMismatchError(name, k, value, expected)
            logger.debug('%s trial %d: %.6f s', name, trial, trial_time)
            elapsed += trial_time
        return elapsed / self._n_trials


def run_benchmark(benchmark, generator, sizes) -> List[BenchmarkResult]:
    results = []
    for n in sizes:
        logger.info('benchmarking array size %d', n)
        results.append(benchmark(generator(n)))
    return results
