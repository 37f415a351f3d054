import json
import math

import pytest

from typetest.storage import ResultStore


@pytest.fixture
def store(tmp_path):
    return ResultStore(tmp_path / "results.json")


def test_missing_file_reports_minus_one(store):
    assert store.num_runs() == -1
    assert store.average_accuracy() == -1
    assert store.average_wpm() == -1


def test_record_creates_file_with_lists(store):
    store.record(95.5, 42.0)
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == {"accuracy": [95.5], "wpm": [42.0]}


def test_file_is_indented_by_four(store):
    store.record(50.0, 30.0)
    text = store.path.read_text(encoding="utf-8")
    assert '\n    "accuracy"' in text


def test_num_runs_counts_records(store):
    for _ in range(3):
        store.record(90.0, 60.0)
    assert store.num_runs() == 3


def test_single_run_average_round_trips(store):
    store.record(87.25, 51.5)
    assert store.average_accuracy() == pytest.approx(87.25)
    assert store.average_wpm() == pytest.approx(51.5)


def test_average_of_two_runs(store):
    store.record(90.0, 60.0)
    store.record(70.0, 60.0)
    assert store.average_accuracy() == pytest.approx(80.0)
    assert store.average_wpm() == pytest.approx(60.0)


def test_existing_keys_are_preserved(store):
    store.path.write_text(json.dumps({"accuracy": [10.0], "wpm": [20.0], "note": "x"}))
    store.record(30.0, 40.0)
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["note"] == "x"
    assert data["accuracy"] == [10.0, 30.0]
    assert data["wpm"] == [20.0, 40.0]


def test_empty_document_gives_nan_average(store):
    store.path.write_text("{}")
    assert store.num_runs() == 0
    assert math.isnan(store.average_accuracy())