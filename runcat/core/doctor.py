from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from runcat.config.schema import Settings


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(Check("theme", settings.theme in {"light", "dark"}, f"theme={settings.theme}"))
    checks.append(Check("tick_ms", settings.tick_ms > 0, f"tick={settings.tick_ms}ms"))
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation statistics"))
    checks.append(Check("pytest", _has_module("pytest"), "optional for running tests"))

    paths = settings.paths
    checks.append(Check("data_dir", paths.data_dir.exists(), str(paths.data_dir)))
    checks.append(Check("results_dir", paths.results_dir.exists(), str(paths.results_dir)))
    checks.append(Check("best_score", True, f"{paths.best_score_json} ({'present' if paths.best_score_json.exists() else 'not yet written'})"))
    return checks
