#!/usr/bin/env python3
from __future__ import annotations
"""
RunCat replay viewer — watch recorded auto-play sessions.

SPACE pauses, RIGHT / N jumps to the next seed, UP / DOWN change speed,
ESC quits.

Requirements:
    pip install pygame
"""

import random
import sys

import pygame

from game_engine import Snapshot
from runcat.config.schema import Settings
from runcat.ui.render import draw_scene
from simulator import simulate

FPS = 30
AUTO_ADVANCE_DELAY = 45  # frames (1.5 seconds at 30fps)


class ReplayState:
    """Cursor over the recorded frames of one simulated run."""

    def __init__(self, seed, max_ticks):
        self.max_ticks = max_ticks
        self.speed = 1
        self.paused = False
        self.start_run(seed)

    def start_run(self, seed):
        self.seed = seed
        self.result = simulate(seed, max_ticks=self.max_ticks)
        self.frames = [Snapshot.decode(f) for f in self.result["frames"]]
        self.idx = 0
        self.end_wait = 0

    @property
    def current(self) -> Snapshot:
        return self.frames[min(self.idx, len(self.frames) - 1)]

    @property
    def finished(self) -> bool:
        return self.idx >= len(self.frames) - 1

    def advance(self, ticks):
        """Move the cursor ``ticks`` frames on; returns True when the run should roll over."""
        if self.paused:
            return False
        if not self.finished:
            self.idx = min(self.idx + ticks * self.speed, len(self.frames) - 1)
            return False
        self.end_wait += 1
        return self.end_wait >= AUTO_ADVANCE_DELAY


def run_viewer(settings: Settings, seed=None):
    rng = random.Random(settings.seed)
    seed = seed if seed is not None else rng.randrange(100_000)

    pygame.init()
    screen = pygame.display.set_mode(settings.window_size)
    pygame.display.set_caption("RunCat Replay")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 16)
    fonts = {
        "score": pygame.font.SysFont("Consolas", 20),
        "message": pygame.font.SysFont("Segoe UI", 26, bold=True),
    }

    replay = ReplayState(seed, settings.max_ticks)
    print(f"[replay] seed {replay.seed}: {replay.result['alive_time']} ticks, score {replay.result['score']}")
    tick_acc = 0.0
    blink = 0

    while True:
        clock.tick(FPS)
        blink += 1

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == pygame.K_SPACE:
                    replay.paused = not replay.paused
                if event.key in (pygame.K_RIGHT, pygame.K_n):
                    replay.start_run(rng.randrange(100_000))
                if event.key == pygame.K_UP:
                    replay.speed = min(8, replay.speed * 2)
                if event.key == pygame.K_DOWN:
                    replay.speed = max(1, replay.speed // 2)

        # One recorded tick every tick_ms, independent of the draw rate
        tick_acc += (1000 / FPS) / settings.tick_ms
        step = int(tick_acc)
        tick_acc -= step
        if replay.advance(step):
            replay.start_run(rng.randrange(100_000))
            print(f"[replay] seed {replay.seed}: {replay.result['alive_time']} ticks, score {replay.result['score']}")

        draw_scene(screen, replay.current, fonts, theme=settings.theme, blink=blink)
        hud = font.render(
            f"seed {replay.seed}  tick {replay.idx + 1}/{len(replay.frames)}  x{replay.speed}"
            + ("  [paused]" if replay.paused else ""),
            True, (90, 90, 90),
        )
        screen.blit(hud, (12, 12))
        pygame.display.flip()
