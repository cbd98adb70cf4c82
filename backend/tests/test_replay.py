"""
Tests for replay.py - saving and loading simulation history.
"""

import json
import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from replay import load_replay, save_replay, serialize_history
from simulation import SnakeSimulation


def _history():
    sim = SnakeSimulation(seed=4)
    sim.set_food([(8, 9)])
    sim.record_history()
    for _ in range(3):
        sim.run_tick()
    return sim.history


def test_serialize_history_is_json_friendly():
    """Serialized ticks use lists for locations."""
    data = serialize_history(_history())
    assert data[1]["snake_positions"] == [[8, 9], [8, 8], [8, 7]]
    json.dumps(data)


def test_save_and_load(tmp_path):
    """A saved replay loads back with the same ticks and metadata."""
    history = _history()
    path = str(tmp_path / "replays" / "run.json")

    save_replay(history, path, {"seed": 4})
    metadata, ticks = load_replay(path)

    assert metadata == {"seed": 4}
    assert len(ticks) == len(history)
    assert ticks[-1].snake_positions == history[-1].snake_positions
    assert ticks[1].tail_end == (8, 7)


def test_load_missing_file_raises(tmp_path):
    """Missing files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_replay(str(tmp_path / "nope.json"))


def test_load_non_replay_raises(tmp_path):
    """JSON without ticks is rejected."""
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"rounds": []}))
    with pytest.raises(ValueError):
        load_replay(str(path))


def test_replay_keeps_segment_ids(tmp_path):
    """A grown segment keeps its id in snapshots and through a saved replay."""
    history = _history()
    assert history[0].segment_ids == [0, 1]
    assert history[1].segment_ids == [0, 1, 2]

    path = str(tmp_path / "ids.json")
    save_replay(history, path)
    _, ticks = load_replay(path)
    assert ticks[-1].segment_ids == [0, 1, 2]
