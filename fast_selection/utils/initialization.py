import argparse
import logging
import os
import configparser

from datetime import datetime


logger = logging.getLogger(__name__)


def read_params(default_config_path, args=None):

    parser = argparse.ArgumentParser()
    parser.add_argument(
        '--config', default=default_config_path
    )
    parser.add_argument('--section', default='DEFAULT')
    args = parser.parse_args(args)

    return load_params(args.config, args.section)


def load_params(config_path, section='DEFAULT'):
    config = configparser.ConfigParser(
        interpolation=configparser.ExtendedInterpolation()
    )
    if not config.read(config_path):
        raise FileNotFoundError(f'config file not found: {config_path}')
    return config[section]


def initialize_results_dir(results_dir):
    if os.path.exists(results_dir):
        moved_to = _append_time_stamp(results_dir)
        os.rename(results_dir, moved_to)
        logger.info('moved previous results %s -> %s', results_dir, moved_to)
    os.makedirs(results_dir)
    logger.info('results dir: %s', results_dir)


def backup_params(params: configparser.SectionProxy, results_dir):
    config = configparser.ConfigParser(interpolation=None)
    config['DEFAULT'] = {key: params.get(key) for key in params}
    with open(
        os.path.join(results_dir, 'backup_config.ini'), 'w'
    ) as config_file:
        config.write(config_file)


def _append_time_stamp(results_dir):
    return results_dir + '_' + _format_time_stamp()


def _format_time_stamp():
    return '{:%Y-%m-%d-%H-%M-%S}'.format(datetime.now())
