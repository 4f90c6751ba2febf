from __future__ import annotations

"""Parallel auto-play simulation runner."""

import multiprocessing
import random
import time
from itertools import islice
from pathlib import Path
from typing import Any

import numpy as np

from runcat.config.schema import Settings
from runcat.core.results import save_result_json


def _run_seed_batch(args):
    """Worker function: play one chunk of seeds."""
    from simulator import simulate_batch

    seeds, max_ticks = args
    return simulate_batch(seeds, max_ticks=max_ticks)


def _chunked(items, chunk_size):
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    it = iter(items)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


def summarize(runs: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate survival and score statistics over finished runs."""
    alive_times = np.array([r["alive_time"] for r in runs], dtype=float)
    scores = np.array([r["score"] for r in runs], dtype=float)
    return {
        "n_runs": len(runs),
        "avg_alive": float(np.mean(alive_times)),
        "std_alive": float(np.std(alive_times)),
        "min_alive": int(np.min(alive_times)),
        "max_alive": int(np.max(alive_times)),
        "avg_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "max_score": int(np.max(scores)),
        "runs": runs,
    }


def run_simulations(
    settings: Settings,
    *,
    n_sims: int | None = None,
    batch_size: int | None = None,
    seeds: list[int] | None = None,
    workers: int | None = None,
) -> dict[str, Any]:
    """Run repeated auto-play sessions over a process pool and aggregate metrics."""
    if seeds is None:
        n_sims = n_sims or settings.sims_per_run
        seeds = random.Random(settings.seed).sample(range(100_000), n_sims)
    n_sims = len(seeds)
    batch_size = batch_size or settings.batch_size
    workers = workers or settings.sim_workers

    all_runs: list[dict[str, Any]] = []
    n_batches = (n_sims + batch_size - 1) // batch_size

    for batch_idx in range(n_batches):
        batch_seeds = seeds[batch_idx * batch_size:(batch_idx + 1) * batch_size]

        worker_count = max(1, min(len(batch_seeds), workers))
        seeds_per_worker = max(1, (len(batch_seeds) + worker_count - 1) // worker_count)
        args_list = [
            (seed_chunk, settings.max_ticks)
            for seed_chunk in _chunked(batch_seeds, seeds_per_worker)
        ]

        if worker_count == 1:
            batch_results = [_run_seed_batch(a) for a in args_list]
        else:
            with multiprocessing.Pool(processes=worker_count) as pool:
                batch_results = pool.map(_run_seed_batch, args_list)

        for worker_runs in batch_results:
            all_runs.extend(worker_runs)

        avg_so_far = sum(r["alive_time"] for r in all_runs) / len(all_runs)
        print(
            f"  Batch {batch_idx + 1}/{n_batches} complete "
            f"({len(all_runs)}/{n_sims} sims, running avg: {avg_so_far:.0f} ticks)"
        )

    return summarize(all_runs)


def save_summary(path: Path, results: dict[str, Any]) -> Path:
    summary = {k: v for k, v in results.items() if k != "runs"}
    summary["alive_times"] = [r["alive_time"] for r in results.get("runs", [])]
    summary["scores"] = [r["score"] for r in results.get("runs", [])]
    summary["seeds"] = [r["seed"] for r in results.get("runs", [])]
    return save_result_json(path, summary)


def run_and_save(settings: Settings, **kwargs) -> dict[str, Any]:
    """Run a batch, print a short report and save the summary JSON."""
    print("\n" + "=" * 50)
    print("SIMULATION: auto-play sessions")
    print("=" * 50)
    start = time.time()
    results = run_simulations(settings, **kwargs)
    print(f"  Time: {time.time() - start:.1f}s")

    path = save_summary(settings.paths.sim_results_json, results)
    tick_s = settings.tick_ms / 1000
    print(
        f"  avg alive = {results['avg_alive']:.0f} ticks ({results['avg_alive'] * tick_s:.1f}s), "
        f"avg score = {results['avg_score']:.2f} (+/- {results['std_score']:.2f}), "
        f"best = {results['max_score']}"
    )
    print(f"  Summary saved: {path}")
    return results
