#!/usr/bin/env python3
"""
Run statistics: how many runs have finished and how long the longest one lasted.

The simulation only emits RunEnded events; this module is the sink that counts
them and persists the totals to a small JSON file:

{
  "total_runs": 12,
  "longest_run": 48.3
}
"""
import json
import logging
import math
import os
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .simulation import RunEnded
from .utils import read_json, try_float

logger = logging.getLogger(__name__)

DEFAULT_STATS_PATH = os.path.join(os.path.expanduser("~"), ".tribody", "stats.json")


@dataclass
class RunStats:
    total_runs: int = 0
    longest_run: float = 0.0
    current_run_start: float = 0.0

    def record(self, event: RunEnded, now: float) -> None:
        self.total_runs += 1
        self.longest_run = max(self.longest_run, event.duration_seconds)
        self.current_run_start = now

    def current_run_elapsed(self, now: float) -> float:
        return max(0.0, now - self.current_run_start)


class JsonStatsStore:
    """
    Thread-safe RunStats persisted to a JSON file.

    The renderer thread records events and the UI thread reads snapshots, so all
    access goes through the lock.
    """

    def __init__(self, path: Optional[str] = DEFAULT_STATS_PATH, clock: Callable[[], float] = time.monotonic):
        self.path = path
        self.clock = clock
        self.lock = threading.Lock()
        self.stats = self.load()

    def load(self) -> RunStats:
        stats = RunStats(current_run_start=self.clock())
        if not self.path:
            return stats
        data = read_json(self.path) or {}
        runs = try_float(data.get("total_runs", 0))
        longest = try_float(data.get("longest_run", 0.0))
        if runs is None or longest is None or not (math.isfinite(runs) and math.isfinite(longest)):
            logger.warning("Ignoring malformed stats in %s", self.path)
            return stats
        stats.total_runs = max(0, int(runs))
        stats.longest_run = max(0.0, longest)
        return stats

    def save(self) -> None:
        if not self.path:
            return
        with self.lock:
            data = {"total_runs": self.stats.total_runs, "longest_run": self.stats.longest_run}
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as exc:
            logger.warning("Could not save stats to %s: %s", self.path, exc)

    def start_run(self, started: float) -> None:
        """Align the current run's start with the simulation's own run timestamp."""
        with self.lock:
            self.stats.current_run_start = started

    def record(self, event: RunEnded, run_started: Optional[float] = None) -> None:
        """Count a finished run; run_started is the next run's start, else now."""
        with self.lock:
            self.stats.record(event, self.clock() if run_started is None else run_started)
            runs = self.stats.total_runs
        logger.debug("Recorded run #%d (%s, %.2fs)", runs, event.reason, event.duration_seconds)
        self.save()

    def snapshot(self) -> RunStats:
        with self.lock:
            return RunStats(self.stats.total_runs, self.stats.longest_run, self.stats.current_run_start)

    def current_run_elapsed(self) -> float:
        with self.lock:
            return self.stats.current_run_elapsed(self.clock())
