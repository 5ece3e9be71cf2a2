import logging

from fast_selection.utils.initialization import read_params
from fast_selection.utils.initialization import initialize_results_dir
from fast_selection.utils.initialization import backup_params
from fast_selection.benchmark.runner import run_from_params


logging.basicConfig(level=logging.INFO)

DEFAULT_CONFIG_PATH = 'config/benchmark.ini'
params = read_params(DEFAULT_CONFIG_PATH)
initialize_results_dir(params.get('results_dir'))
backup_params(params, params.get('results_dir'))

run_from_params(params)
