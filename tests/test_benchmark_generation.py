import math

import pytest

from benchmark_generation import percentile, run_benchmark


@pytest.mark.parametrize(
    "values,pct,expected",
    [
        ([1.0, 2.0, 3.0, 4.0, 5.0], 50.0, 3.0),
        ([1.0, 2.0, 3.0, 4.0], 50.0, 2.5),
        ([4.0, 1.0], 0.0, 1.0),
        ([4.0, 1.0], 100.0, 4.0),
    ],
)
def test_percentile_interpolates_between_ranks(values, pct, expected):
    assert percentile(values, pct) == pytest.approx(expected)


def test_percentile_of_empty_list_is_nan():
    assert math.isnan(percentile([], 50.0))


def test_run_benchmark_is_reproducible_and_violation_free():
    first = run_benchmark(3, 42, 10, 10, 25.0)
    second = run_benchmark(3, 42, 10, 10, 25.0)

    assert [run.seed for run in first] == [run.seed for run in second]
    assert [run.attempts for run in first] == [run.attempts for run in second]
    for run in first:
        assert run.violations == []
        assert run.empty_cells <= 25
        assert run.total_rooms == 100 - run.empty_cells
        assert 0.0 <= run.variant_rejection_rate < 1.0
