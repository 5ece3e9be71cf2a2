from __future__ import annotations

import random

import pytest

from fast_selection.algorithms.floyd_rivest import floyd_rivest, floyd_rivest_inplace
from fast_selection.algorithms.quickselect import quickselect, quickselect_inplace
from fast_selection.utils.random_sources import PythonRandomSource


def _quickselect_seeded(data, k):
    return quickselect(data, k, PythonRandomSource(0))


def _quickselect_inplace_seeded(data, k):
    return quickselect_inplace(data, k, PythonRandomSource(0))


COPY_OPERATIONS = {
    "quickselect": _quickselect_seeded,
    "floyd_rivest": floyd_rivest,
}

INPLACE_OPERATIONS = {
    "quickselect_inplace": _quickselect_inplace_seeded,
    "floyd_rivest_inplace": floyd_rivest_inplace,
}

ALL_OPERATIONS = {**COPY_OPERATIONS, **INPLACE_OPERATIONS}


@pytest.fixture(params=list(COPY_OPERATIONS), ids=list(COPY_OPERATIONS))
def copy_select(request):
    return COPY_OPERATIONS[request.param]


@pytest.fixture(params=list(INPLACE_OPERATIONS), ids=list(INPLACE_OPERATIONS))
def inplace_select(request):
    return INPLACE_OPERATIONS[request.param]


@pytest.fixture(params=list(ALL_OPERATIONS), ids=list(ALL_OPERATIONS))
def select(request):
    return ALL_OPERATIONS[request.param]


def random_ints(n: int, high: int, seed: int) -> list[int]:
    rng = random.Random(seed)
    return [rng.randint(0, high) for _ in range(n)]


def assert_partitioned(data, k: int) -> None:
    for i in range(k):
        assert data[i] <= data[k], f"data[{i}]={data[i]} > data[{k}]={data[k]}"
    for i in range(k + 1, len(data)):
        assert data[i] >= data[k], f"data[{i}]={data[i]} < data[{k}]={data[k]}"
