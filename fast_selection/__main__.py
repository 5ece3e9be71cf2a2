import argparse
import logging
import sys

from fast_selection.algorithms.selectors import SelectorFactory
from fast_selection.benchmark.runner import run_from_params
from fast_selection.utils.initialization import backup_params
from fast_selection.utils.initialization import initialize_results_dir
from fast_selection.utils.initialization import load_params
from fast_selection.utils.random_sources import PythonRandomSource
from fast_selection.utils.type_conversion import str_to_number
from fast_selection.utils.validation import RankOutOfBoundsError


def build_parser():
    parser = argparse.ArgumentParser(prog='fast_selection')
    parser.add_argument('--log-level', default='WARNING')
    subparsers = parser.add_subparsers(dest='command', required=True)

    select = subparsers.add_parser(
        'select', help='print the k-th smallest (0-based) of VALUES'
    )
    select.add_argument(
        '--algorithm', default='floyd_rivest',
        choices=['quickselect', 'floyd_rivest']
    )
    select.add_argument('-k', '--k', type=int, required=True)
    select.add_argument('--inplace', action='store_true')
    select.add_argument(
        '--seed', type=int, default=None,
        help='pivot seed, quickselect only'
    )
    select.add_argument('values', nargs='*')

    benchmark = subparsers.add_parser(
        'benchmark', help='time selection against full sorting'
    )
    benchmark.add_argument('--config', default='config/benchmark.ini')
    benchmark.add_argument('--section', default='DEFAULT')

    return parser


def select(args):
    selector = SelectorFactory().create(
        args.algorithm, random_source=PythonRandomSource(args.seed)
    )
    data = [str_to_number(value) for value in args.values]
    try:
        if args.inplace:
            value = selector.select_inplace(data, args.k)
        else:
            value = selector(data, args.k)
    except RankOutOfBoundsError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2
    print(value)
    if args.inplace:
        print(' '.join(str(item) for item in data))
    return 0


def benchmark(args):
    params = load_params(args.config, args.section)
    initialize_results_dir(params.get('results_dir'))
    backup_params(params, params.get('results_dir'))
    run_from_params(params)
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if (
            args.command == 'select' and args.seed is not None
            and args.algorithm != 'quickselect'
    ):
        parser.error('--seed only applies to --algorithm quickselect')
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    if args.command == 'select':
        return select(args)
    return benchmark(args)


if __name__ == '__main__':
    sys.exit(main())
