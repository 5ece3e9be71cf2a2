from abc import ABC, abstractmethod

from fast_selection.algorithms.quickselect import quickselect_inplace
from fast_selection.algorithms.floyd_rivest import floyd_rivest_inplace


class Selector(ABC):

    def __call__(self, data, k):
        data = list(data)
        return self.select_inplace(data, k)

    @abstractmethod
    def select_inplace(self, data, k):
        pass

    @property
    @abstractmethod
    def name(self):
        pass


class QuickselectSelector(Selector):

    def __init__(self, random_source=None):
        self._random_source = random_source

    def select_inplace(self, data, k):
        return quickselect_inplace(data, k, self._random_source)

    @property
    def name(self):
        return 'quickselect'


class FloydRivestSelector(Selector):

    def select_inplace(self, data, k):
        return floyd_rivest_inplace(data, k)

    @property
    def name(self):
        return 'floyd_rivest'


class SelectorFactory:

    def create(self, name, random_source=None):
        if name == 'quickselect':
            return QuickselectSelector(random_source)
        elif name == 'floyd_rivest':
            return FloydRivestSelector()
        else:
            raise ValueError(f'unsupported selection algorithm: {name}')
