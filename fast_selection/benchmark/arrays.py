from abc import ABC, abstractmethod

import numpy as np

from fast_selection.utils.random_sources import private_random_state


class ArrayGenerator(ABC):

    def __init__(self, high=None, seed=None):
        self._high = np.iinfo(np.int64).max if high is None else high
        self._random_state = private_random_state(seed)

    def __call__(self, n):
        return self._generate(n).tolist()

    @abstractmethod
    def _generate(self, n):
        pass

    def _uniform(self, n):
        return self._random_state.randint(0, self._high, size=n, dtype=np.int64)


class RandomArrayGenerator(ArrayGenerator):

    def _generate(self, n):
        return self._uniform(n)


class SortedArrayGenerator(ArrayGenerator):

    def _generate(self, n):
        return np.sort(self._uniform(n))


class ReversedArrayGenerator(SortedArrayGenerator):

    def _generate(self, n):
        return super()._generate(n)[::-1]


class ConstantArrayGenerator(ArrayGenerator):

    def _generate(self, n):
        return np.full(n, self._uniform(1)[0], dtype=np.int64)


class FewUniqueArrayGenerator(ArrayGenerator):

    N_UNIQUE = 10

    def _generate(self, n):
        return self._random_state.randint(0, self.N_UNIQUE, size=n, dtype=np.int64)


class ArrayGeneratorFactory:

    def create(self, shape, high=None, seed=None):
        if shape == 'random':
            return RandomArrayGenerator(high, seed)
        elif shape == 'sorted':
            return SortedArrayGenerator(high, seed)
        elif shape == 'reversed':
            return ReversedArrayGenerator(high, seed)
        elif shape == 'constant':
            return ConstantArrayGenerator(high, seed)
        elif shape == 'few_unique':
            return FewUniqueArrayGenerator(high, seed)
        else:
            raise ValueError(f'unsupported array shape: {shape}')
