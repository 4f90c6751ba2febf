#!/usr/bin/env python3
"""Headless game simulator — plays one auto-play session, records replay data."""

from game_engine import GameSession, SessionState, TICK_MS

# Safety limit: stop if a session exceeds this many ticks (~10 minutes at 100ms)
MAX_TICKS = 6_000


def simulate(seed=0, max_ticks=MAX_TICKS, record_every=1):
    """
    Run one headless auto-play session.

    Args:
        seed: random seed for deterministic replay
        max_ticks: hard stop for sessions that never end
        record_every: keep every n-th tick in the replay

    Returns:
        dict: {
            'alive_time': int (ticks survived),
            'score': int (obstacles cleared),
            'seed': int,
            'frames': list of frame dicts for replay
        }

    Each frame dict is ``Snapshot.encode()`` plus a ``tick`` key.
    """
    session = GameSession(seed=seed, autoplay=True)
    session.start()
    frames = []
    ticks = 0

    while session.state is SessionState.PLAYING and ticks < max_ticks:
        snap = session.tick()
        ticks += 1
        last = ticks == max_ticks or snap.state is not SessionState.PLAYING
        if ticks % record_every == 0 or last:
            state = snap.encode()
            state["tick"] = ticks
            frames.append(state)

    return {
        "alive_time": ticks,
        "score": session.score,
        "seed": seed,
        "frames": frames,
    }


def simulate_batch(seeds, max_ticks=MAX_TICKS):
    """Run multiple simulations sequentially, dropping replay frames.

    Used by the batch runner in worker processes.
    """
    results = []
    for seed in seeds:
        result = simulate(seed, max_ticks=max_ticks)
        result.pop("frames")
        results.append(result)
    return results


if __name__ == "__main__":
    result = simulate(seed=42)
    print(f"Alive time: {result['alive_time']} ticks ({result['alive_time'] * TICK_MS / 1000:.1f} sec)")
    print(f"Score: {result['score']}")
    print(f"Frames recorded: {len(result['frames'])}")
