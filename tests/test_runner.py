"""Tests for runcat.simulation.runner — batch simulation and aggregation."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from runcat.config.loader import load_settings
from runcat.core.results import load_result_json
from runcat.simulation.runner import _chunked, run_simulations, save_summary, summarize


def _runs():
    return [
        {"alive_time": 100, "score": 2, "seed": 1},
        {"alive_time": 300, "score": 6, "seed": 2},
    ]


class TestSummarize:
    def test_stats(self):
        summary = summarize(_runs())
        assert summary["n_runs"] == 2
        assert summary["avg_alive"] == pytest.approx(200.0)
        assert summary["std_alive"] == pytest.approx(100.0)
        assert summary["min_alive"] == 100
        assert summary["max_alive"] == 300
        assert summary["avg_score"] == pytest.approx(4.0)
        assert summary["max_score"] == 6
        assert isinstance(summary["max_score"], int)

    def test_save_summary(self, tmp_path):
        path = save_summary(tmp_path / "sim.json", summarize(_runs()))
        data = load_result_json(path)
        assert data["schema_version"] == 1
        assert data["alive_times"] == [100, 300]
        assert data["scores"] == [2, 6]
        assert data["seeds"] == [1, 2]
        assert "runs" not in data


class TestChunked:
    def test_chunks(self):
        assert list(_chunked([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]

    def test_bad_size(self):
        with pytest.raises(ValueError):
            list(_chunked([1], 0))


class TestRunSimulations:
    def test_single_worker(self):
        settings = load_settings(ensure_dirs=False).with_overrides(max_ticks=60, batch_size=2)
        results = run_simulations(settings, seeds=[4, 5, 6], workers=1)
        assert results["n_runs"] == 3
        assert [r["seed"] for r in results["runs"]] == [4, 5, 6]
        assert all(r["alive_time"] <= 60 for r in results["runs"])

    def test_seeded_sample_is_reproducible(self):
        settings = load_settings(seed=9, ensure_dirs=False).with_overrides(max_ticks=30)
        r1 = run_simulations(settings, n_sims=2, workers=1)
        r2 = run_simulations(settings, n_sims=2, workers=1)
        assert [r["seed"] for r in r1["runs"]] == [r["seed"] for r in r2["runs"]]
