#!/usr/bin/env python3
from __future__ import annotations
"""
RunCat Endless — jump over the sprouts.
SPACE starts a run and jumps; ESC quits.

Requirements:
    pip install pygame
"""

import sys

import pygame

from game_engine import GameSession
from runcat.config.schema import Settings
from runcat.core.scores import JsonScoreStore
from runcat.ui.render import draw_scene

FPS = 30
TICK_EVENT = pygame.USEREVENT + 1


def _load_fonts():
    try:
        return {
            "score": pygame.font.SysFont("Consolas", 20),
            "message": pygame.font.SysFont("Segoe UI", 26, bold=True),
        }
    except Exception:
        return {
            "score": pygame.font.SysFont(None, 20),
            "message": pygame.font.SysFont(None, 26, bold=True),
        }


# ─────────────────────────────────────────
# Main
# ─────────────────────────────────────────

def main(settings: Settings):
    pygame.init()
    screen = pygame.display.set_mode(settings.window_size)
    pygame.display.set_caption("RunCat Endless")
    clock = pygame.time.Clock()
    fonts = _load_fonts()

    store = JsonScoreStore(settings.paths.best_score_json)
    session = GameSession(store=store, seed=settings.seed, autoplay=settings.autoplay)
    snap = session.snapshot()
    blink = 0

    print(f"[play] best score {snap.best_score} | autoplay={settings.autoplay} | tick={settings.tick_ms}ms")
    pygame.time.set_timer(TICK_EVENT, settings.tick_ms)
    pygame.key.set_repeat(0, 0)

    while True:
        clock.tick(FPS)
        blink += 1

        # ── Events ──────────────────────
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == pygame.K_SPACE:
                    session.press()
            if event.type == TICK_EVENT:
                prev = snap.state
                snap = session.tick()
                if snap.state is not prev and snap.message is not None:
                    print(f"[play] {snap.message.value}: score {snap.score}, best {snap.best_score}")

        # ── Draw ────────────────────────
        draw_scene(screen, session.snapshot(), fonts, theme=settings.theme, blink=blink)
        pygame.display.flip()
