from __future__ import annotations

from runcat.config.loader import load_settings
from runcat.core.doctor import run_doctor
from runcat.core.results import load_result_json
from runcat.core.scores import JsonScoreStore


def cmd_play(args):
    settings = load_settings(autoplay=args.autoplay, seed=args.seed, theme=args.theme)
    from runcat.ui.app_game import main as run_game

    run_game(settings)


def cmd_simulate(args):
    from runcat.simulation.runner import run_and_save

    settings = load_settings(seed=args.seed)
    if args.max_ticks is not None:
        settings = settings.with_overrides(max_ticks=args.max_ticks)
    run_and_save(settings, n_sims=args.sims, workers=args.workers)


def cmd_report(args):
    settings = load_settings()
    path = settings.paths.sim_results_json
    if not path.exists():
        print(f"[report] Missing simulation results: {path}")
        return
    data = load_result_json(path)
    print(f"\nSIMULATION ({path})")
    print(f"  schema_version: {data.get('schema_version', 'n/a')}")
    for key in ("n_runs", "avg_alive", "std_alive", "min_alive", "max_alive", "avg_score", "std_score", "max_score"):
        if key in data:
            print(f"  {key}: {data[key]}")


def cmd_best(args):
    settings = load_settings()
    store = JsonScoreStore(settings.paths.best_score_json)
    if args.reset:
        store.reset()
        print(f"[best] Reset best score ({store.path})")
        return
    print(f"[best] {store.load()}")


def cmd_doctor(args):
    settings = load_settings()
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")


def cmd_replay(args):
    settings = load_settings(seed=args.seed, theme=args.theme)
    from runcat.ui.replay.viewer import run_viewer

    run_viewer(settings, seed=args.run_seed)
