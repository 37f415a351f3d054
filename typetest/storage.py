"""Persistent storage of typing test results in a JSON file."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

DEFAULT_RESULTS_FILE = "results.json"


class ResultStore:
    """Keeps the accuracy and WPM of every run in a JSON document.

    The document is an object holding two parallel lists, ``"accuracy"``
    and ``"wpm"``. Queries return ``-1`` when no results file exists yet.
    """

    def __init__(self, path: str | Path = DEFAULT_RESULTS_FILE) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any] | None:
        try:
            with self.path.open(encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError:
            return None

    def record(self, accuracy: float, wpm: float) -> None:
        """Append one run's accuracy and WPM to the results file."""
        data = self._load() or {}
        data.setdefault("accuracy", []).append(accuracy)
        data.setdefault("wpm", []).append(wpm)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=4)

    def num_runs(self) -> int:
        """Number of recorded runs, or -1 if there is no results file."""
        data = self._load()
        if data is None:
            return -1
        return len(data.get("wpm") or [])

    def _average(self, key: str) -> float:
        data = self._load()
        if data is None:
            return -1
        runs = len(data.get("wpm") or [])
        total = sum(data.get(key) or [])
        if runs == 0:
            return math.nan
        return total / runs

    def average_accuracy(self) -> float:
        """Mean accuracy over all runs, or -1 if there is no results file."""
        return self._average("accuracy")

    def average_wpm(self) -> float:
        """Mean WPM over all runs, or -1 if there is no results file."""
        return self._average("wpm")