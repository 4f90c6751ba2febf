from __future__ import annotations

from pathlib import Path

import config as legacy_config

from .schema import Paths, Settings


def from_legacy_config() -> Settings:
    project_dir = Path(getattr(legacy_config, "PROJECT_DIR", Path(__file__).resolve().parents[2]))
    paths = Paths(
        project_dir=project_dir,
        data_dir=Path(legacy_config.DATA_DIR),
        results_dir=Path(legacy_config.RESULTS_DIR),
        best_score_json=Path(legacy_config.BEST_SCORE_JSON),
        sim_results_json=Path(legacy_config.SIM_RESULTS_JSON),
    )
    return Settings(
        paths=paths,
        autoplay=bool(getattr(legacy_config, "AUTOPLAY", False)),
        seed=None,
        theme=str(getattr(legacy_config, "THEME", "light")),
        window_size=tuple(getattr(legacy_config, "WINDOW_SIZE", (600, 250))),
        tick_ms=int(getattr(legacy_config, "TICK_MS", 100)),
        sims_per_run=int(getattr(legacy_config, "SIMS_PER_RUN", 20)),
        sim_workers=int(getattr(legacy_config, "SIM_WORKERS", 2)),
        batch_size=int(getattr(legacy_config, "BATCH_SIZE", 10)),
        max_ticks=int(getattr(legacy_config, "MAX_TICKS", 6_000)),
    )
