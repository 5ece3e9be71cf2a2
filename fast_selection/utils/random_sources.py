import random

import numpy as np

from abc import ABC, abstractmethod
from sklearn.utils import check_random_state


def private_random_state(seed=None):
    """Like check_random_state, but None gives a fresh generator

    check_random_state(None) hands back numpy's global RandomState."""

    if seed is None:
        return np.random.RandomState()
    return check_random_state(seed)


class RandomSource(ABC):

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """ Draw a uniform integer from the inclusive range [low, high]
        """
        pass


class PythonRandomSource(RandomSource):

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def randint(self, low, high):
        return self._random.randint(low, high)


class NumpyRandomSource(RandomSource):

    def __init__(self, seed=None):
        self._random_state = private_random_state(seed)

    def randint(self, low, high):
        # RandomState.randint excludes the upper bound
        return int(self._random_state.randint(low, high + 1))


class RandomSourceFactory:

    def create(self, name, seed=None):
        if name == 'python':
            return PythonRandomSource(seed)
        elif name == 'numpy':
            return NumpyRandomSource(seed)
        else:
            raise ValueError(f'unsupported random source: {name}')
