from __future__ import annotations

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

import sexpr
from benchmarks.inputs import DEEP, LARGE, MEDIUM, NESTED, SMALL

_PARAMS = [
    pytest.param(SMALL,  1000, id="small"),
    pytest.param(MEDIUM, 1000, id="medium"),
    pytest.param(LARGE,   100, id="large"),
    pytest.param(DEEP,    100, id="deep"),
    pytest.param(NESTED,   10, id="nested"),
]


@pytest.mark.parametrize("data,iterations", _PARAMS)
def test_parse(benchmark: BenchmarkFixture, data: bytes, iterations: int) -> None:
    benchmark.pedantic(sexpr.parse, args=(data,), iterations=iterations, rounds=100)


def test_try_parse_failure(benchmark: BenchmarkFixture) -> None:
    truncated = LARGE[:-1]
    benchmark(sexpr.try_parse, truncated)
