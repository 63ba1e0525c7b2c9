"""Tests for the backend comparison."""

import logging

import pytest

from todostore.compare import PHASES, ComparisonResult, compare_backend, format_comparison, run_comparison


@pytest.mark.asyncio
async def test_run_comparison_times_every_phase(tmp_path):
    results = await run_comparison(tmp_path / "bench", count=5)

    assert [r.backend for r in results] == ["sqlite", "zodb"]
    for result in results:
        assert result.count == 5
        assert set(result.timings) == set(PHASES)
        assert all(seconds >= 0 for seconds in result.timings.values())
        assert result.total == pytest.approx(sum(result.timings.values()))


@pytest.mark.asyncio
async def test_compare_leaves_store_empty(tmp_path):
    await compare_backend("sqlite", tmp_path / "c.db", count=3)
    # Second run on the same file starts from a cleared store
    result = await compare_backend("sqlite", tmp_path / "c.db", count=3)

    assert result.count == 3


@pytest.mark.asyncio
async def test_compare_single_backend(tmp_path):
    results = await run_comparison(tmp_path, count=2, backends=["zodb"])

    assert [r.backend for r in results] == ["zodb"]
    assert (tmp_path / "compare.fs").exists()


def test_format_comparison():
    results = [
        ComparisonResult(
            backend="sqlite",
            count=10,
            timings={"insert": 0.010, "query": 0.001, "update": 0.020, "delete": 0.005},
        ),
        ComparisonResult(
            backend="zodb",
            count=10,
            timings={"insert": 0.030, "query": 0.002, "update": 0.040, "delete": 0.010},
        ),
    ]

    table = format_comparison(results)
    lines = table.splitlines()

    assert lines[0].split() == ["backend", "insert", "query", "update", "delete", "total"]
    assert lines[2].split() == ["sqlite", "10.0", "1.0", "20.0", "5.0", "36.0"]
    assert lines[3].split()[0] == "zodb"
    assert lines[-1] == "(10 todos per backend, times in ms)"


@pytest.mark.asyncio
async def test_comparison_log_records_carry_backend(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="todostore"):
        await run_comparison(tmp_path, count=1)

    compared = [r for r in caplog.records if r.getMessage().startswith("Compared ")]
    assert [r.backend for r in compared] == ["sqlite", "zodb"]

    inserted = {r.backend for r in caplog.records if r.getMessage().startswith("Inserted todo")}
    assert inserted == {"sqlite", "zodb"}
