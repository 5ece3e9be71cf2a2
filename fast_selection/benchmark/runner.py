import configparser
import logging
import os

import numpy as np

from fast_selection.algorithms.selectors import SelectorFactory
from fast_selection.benchmark.arrays import ArrayGeneratorFactory
from fast_selection.benchmark.harness import Benchmark, run_benchmark
from fast_selection.benchmark.report import format_result
from fast_selection.utils.measures import timings_table
from fast_selection.utils.random_sources import RandomSourceFactory
from fast_selection.utils.sorting import BaselineFactory
from fast_selection.utils.type_conversion import str_to_int_list
from fast_selection.utils.type_conversion import str_to_str_list


logger = logging.getLogger(__name__)


def create_benchmark(params: configparser.SectionProxy):
    seed = params.getint('seed', fallback=None)
    random_source = RandomSourceFactory().create(
        params.get('random_source', 'python'), seed
    )

    selectors = [
        SelectorFactory().create(name, random_source=random_source)
        for name in str_to_str_list(
            params.get('algorithms', 'quickselect,floyd_rivest'))
    ]
    baselines = {
        name: BaselineFactory().create(name)
        for name in str_to_str_list(params.get('baselines', 'sort'))
    }
    if not selectors and not baselines:
        raise ValueError('benchmark needs at least one algorithm or baseline')

    return Benchmark(
        selectors, baselines, n_trials=params.getint('n_trials', fallback=5)
    )


def run_from_params(params: configparser.SectionProxy):
    benchmark = create_benchmark(params)
    generator = ArrayGeneratorFactory().create(
        params.get('shape', 'random'),
        high=params.getint('high', fallback=None),
        seed=params.getint('seed', fallback=None),
    )

    results = run_benchmark(
        benchmark, generator, str_to_int_list(params.get('sizes'))
    )
    for result in results:
        print()
        for line in format_result(result):
            print(line)

    results_dir = params.get('results_dir', fallback=None)
    if results_dir is not None and results and os.path.isdir(results_dir):
        names = list(results[0].times)
        np.savetxt(
            os.path.join(results_dir, 'timings.txt'),
            timings_table(results, names),
            header=' '.join(['size', 'k'] + names)
        )
        logger.info('saved timings to %s', results_dir)

    return results
