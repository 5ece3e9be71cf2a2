import numpy as np

from fast_selection.utils.validation import check_rank


def sort_kth(data, k):
    k = check_rank(len(data), k)
    return sorted(data)[k]


def numpy_kth(a, k):
    k = check_rank(len(a), k)
    return np.partition(np.asarray(a), k)[k]


def torch_kth(a, k):
    """torch.kthvalue counts from 1 and only accepts tensors"""
    import torch

    k = check_rank(len(a), k)
    return torch.as_tensor(np.asarray(a)).kthvalue(k + 1)[0].item()


class BaselineFactory:

    def create(self, name):
        if name == 'sort':
            return sort_kth
        elif name == 'numpy':
            return numpy_kth
        elif name == 'torch':
            return torch_kth
        else:
            raise ValueError(f'unsupported baseline: {name}')
