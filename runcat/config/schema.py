from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

Theme = Literal["light", "dark"]


@dataclass(frozen=True)
class Paths:
    project_dir: Path
    data_dir: Path
    results_dir: Path

    best_score_json: Path
    sim_results_json: Path

    def ensure_dirs(self) -> None:
        for p in (self.data_dir, self.results_dir):
            p.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Settings:
    paths: Paths

    autoplay: bool
    seed: int | None
    theme: str
    window_size: tuple[int, int]
    tick_ms: int

    sims_per_run: int
    sim_workers: int
    batch_size: int
    max_ticks: int

    def with_overrides(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)
