"""Tests for simulator.py — headless auto-play simulation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from simulator import simulate, simulate_batch
from game_engine import JUMP_THRESHOLD, WINDOW_LANES


class TestSimulate:
    def test_simulate_basic(self):
        """Simulation completes and survives past the first burst."""
        result = simulate(seed=42)
        assert result["alive_time"] > JUMP_THRESHOLD
        assert result["seed"] == 42
        assert result["score"] >= 0

    def test_simulate_deterministic(self):
        """Same seed = same session."""
        r1 = simulate(seed=123)
        r2 = simulate(seed=123)
        assert r1["alive_time"] == r2["alive_time"]
        assert r1["score"] == r2["score"]
        assert r1["frames"] == r2["frames"]

    def test_simulate_returns_frames(self):
        result = simulate(seed=42)
        assert isinstance(result["frames"], list)
        assert len(result["frames"]) == result["alive_time"]

        frame = result["frames"][0]
        for key in ("cat", "lanes", "score", "best", "state", "message", "tick"):
            assert key in frame
        assert len(frame["lanes"]) == WINDOW_LANES

    def test_last_frame_is_final_state(self):
        result = simulate(seed=5)
        last = result["frames"][-1]
        assert last["tick"] == result["alive_time"]
        if last["state"] == "over":
            assert last["message"] in ("new_record", "game_over")

    def test_max_ticks_cap(self):
        result = simulate(seed=1, max_ticks=10)
        assert result["alive_time"] == 10
        assert result["frames"][-1]["state"] == "playing"

    def test_record_every(self):
        result = simulate(seed=1, max_ticks=10, record_every=5)
        assert [f["tick"] for f in result["frames"]] == [5, 10]

    def test_record_every_keeps_final_tick(self):
        """The last tick is recorded even off the sampling grid."""
        result = simulate(seed=1, max_ticks=12, record_every=5)
        assert [f["tick"] for f in result["frames"]] == [5, 10, 12]
        assert result["frames"][-1]["tick"] == result["alive_time"]

    def test_simulate_batch_drops_frames(self):
        runs = simulate_batch([1, 2, 3], max_ticks=50)
        assert [r["seed"] for r in runs] == [1, 2, 3]
        assert all("frames" not in r for r in runs)
