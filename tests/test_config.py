"""Tests for settings loading and CLI argument parsing."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import config
from runcat.config.loader import load_settings
from runcat.core.doctor import run_doctor
from runcat.ui.cli.main import build_parser


class TestSettings:
    def test_defaults_follow_legacy_config(self):
        settings = load_settings(ensure_dirs=False)
        assert settings.tick_ms == config.TICK_MS == 100
        assert settings.autoplay is config.AUTOPLAY
        assert settings.paths.best_score_json == config.BEST_SCORE_JSON
        assert settings.seed is None

    def test_overrides(self):
        settings = load_settings(autoplay=True, seed=7, theme="dark", ensure_dirs=False)
        assert settings.autoplay is True
        assert settings.seed == 7
        assert settings.theme == "dark"

    def test_with_overrides_returns_copy(self):
        settings = load_settings(ensure_dirs=False)
        other = settings.with_overrides(max_ticks=5)
        assert other.max_ticks == 5
        assert settings.max_ticks == config.MAX_TICKS

    def test_frozen(self):
        settings = load_settings(ensure_dirs=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.autoplay = True

    def test_doctor_reports_checks(self):
        checks = run_doctor(load_settings(ensure_dirs=False))
        names = {c.name for c in checks}
        assert {"theme", "tick_ms", "pygame", "numpy"} <= names


class TestCli:
    def test_play_flags(self):
        args = build_parser().parse_args(["play", "--autoplay", "--seed", "3", "--theme", "dark"])
        assert args.autoplay is True
        assert args.seed == 3
        assert args.theme == "dark"

    def test_play_defaults_defer_to_config(self):
        args = build_parser().parse_args(["play"])
        assert args.autoplay is None
        assert args.theme is None

    def test_simulate_flags(self):
        args = build_parser().parse_args(["simulate", "--sims", "4", "--max-ticks", "200", "--workers", "1"])
        assert (args.sims, args.max_ticks, args.workers) == (4, 200, 1)

    def test_best_reset(self):
        args = build_parser().parse_args(["best", "--reset"])
        assert args.reset is True

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
