import numbers


class RankOutOfBoundsError(IndexError):

    def __init__(self, k, n):
        super().__init__(f'k out of bounds: k={k}, n={n}')
        self.k = k
        self.n = n


def check_rank(n: int, k) -> int:
    """Validate a 0-based rank against a collection of length n

    Returns k as a plain int so that numpy integers can be used as indices."""

    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise TypeError(f'k must be an integer, got {type(k).__name__}')
    if k < 0 or k >= n:
        raise RankOutOfBoundsError(k, n)
    return int(k)
