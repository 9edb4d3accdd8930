"""Tests for run statistics and their JSON store."""

import json

import pytest

from tribody.simulation import REASON_USER, RunEnded
from tribody.stats import JsonStatsStore, RunStats


def test_run_stats_record():
    stats = RunStats(current_run_start=0.0)
    stats.record(RunEnded(12.0), now=12.0)
    stats.record(RunEnded(4.0, REASON_USER), now=16.0)
    assert stats.total_runs == 2
    assert stats.longest_run == 12.0
    assert stats.current_run_start == 16.0
    assert stats.current_run_elapsed(now=19.5) == 3.5


def test_store_persists_and_reloads(tmp_path, clock):
    path = tmp_path / "nested" / "stats.json"
    store = JsonStatsStore(str(path), clock=clock)
    store.record(RunEnded(8.0))
    store.record(RunEnded(20.5))
    store.record(RunEnded(3.0))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"total_runs": 3, "longest_run": 20.5}

    reloaded = JsonStatsStore(str(path), clock=clock)
    snap = reloaded.snapshot()
    assert snap.total_runs == 3
    assert snap.longest_run == 20.5


def test_current_run_elapsed_restarts_on_record(tmp_path, clock):
    store = JsonStatsStore(str(tmp_path / "s.json"), clock=clock)
    clock.advance(7.0)
    assert store.current_run_elapsed() == 7.0
    store.record(RunEnded(7.0))
    clock.advance(1.5)
    assert store.current_run_elapsed() == 1.5


def test_malformed_file_starts_empty(tmp_path, clock):
    path = tmp_path / "stats.json"
    path.write_text('{"total_runs": "many", "longest_run": 3}', encoding="utf-8")
    assert JsonStatsStore(str(path), clock=clock).snapshot().total_runs == 0
    path.write_text("garbage", encoding="utf-8")
    assert JsonStatsStore(str(path), clock=clock).snapshot().longest_run == 0.0


def test_store_without_path_keeps_memory_only(tmp_path, clock):
    store = JsonStatsStore(None, clock=clock)
    store.record(RunEnded(2.0))
    assert store.snapshot().total_runs == 1
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("payload", [
    '{"total_runs": NaN, "longest_run": 3}',
    '{"total_runs": Infinity, "longest_run": 3}',
    '{"total_runs": 2, "longest_run": 1e400}',
])
def test_non_finite_numbers_start_empty(tmp_path, clock, payload):
    path = tmp_path / "stats.json"
    path.write_text(payload, encoding="utf-8")
    snap = JsonStatsStore(str(path), clock=clock).snapshot()
    assert snap.total_runs == 0
    assert snap.longest_run == 0.0


def test_record_uses_given_run_start(tmp_path, clock):
    store = JsonStatsStore(str(tmp_path / "s.json"), clock=clock)
    store.start_run(90.0)
    assert store.current_run_elapsed() == 10.0
    store.record(RunEnded(4.0), run_started=95.0)
    assert store.snapshot().current_run_start == 95.0
