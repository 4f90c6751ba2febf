from __future__ import annotations

"""Shared pygame rendering primitives for the RunCat Endless window."""

import pygame

from game_engine import Action, LaneContent, Message, SessionState, WINDOW_LANES

LANE_W, LANE_H = 30, 50
GROUND_Y = 200
CAT_RECT = (120, 130, 120, 100)

# Jump height (px) per jumping frame
JUMP_HEIGHTS = [0, 8, 16, 24, 32, 40, 48, 48, 44, 20]

PALETTES = {
    "light": {"bg": (220, 220, 220), "fg": (20, 20, 20), "accent": (40, 140, 60)},
    "dark": {"bg": (128, 128, 128), "fg": (245, 245, 245), "accent": (150, 230, 160)},
}
C_OVERLAY = (0, 0, 0, 77)


def palette(theme: str) -> dict:
    return PALETTES.get(theme, PALETTES["light"])


def draw_lane(surf, i, lane, colors):
    """Draw one lane tile at slot ``i`` along the ground."""
    x = i * LANE_W
    fg = colors["fg"]
    if lane is LaneContent.FLAT:
        pygame.draw.line(surf, fg, (x, GROUND_Y + 10), (x + LANE_W, GROUND_Y + 10), 2)
    elif lane is LaneContent.HILL:
        pygame.draw.lines(surf, fg, False,
                          [(x, GROUND_Y + 10), (x + LANE_W // 2, GROUND_Y + 4), (x + LANE_W, GROUND_Y + 10)], 2)
    elif lane is LaneContent.CRATER:
        pygame.draw.lines(surf, fg, False,
                          [(x, GROUND_Y + 10), (x + LANE_W // 2, GROUND_Y + 16), (x + LANE_W, GROUND_Y + 10)], 2)
    else:
        # Sprout: ground line plus a stem with two leaves
        pygame.draw.line(surf, fg, (x, GROUND_Y + 10), (x + LANE_W, GROUND_Y + 10), 2)
        cx = x + LANE_W // 2
        pygame.draw.line(surf, colors["accent"], (cx, GROUND_Y + 10), (cx, GROUND_Y - 14), 3)
        pygame.draw.ellipse(surf, colors["accent"], (cx - 12, GROUND_Y - 14, 12, 7))
        pygame.draw.ellipse(surf, colors["accent"], (cx, GROUND_Y - 20, 12, 7))


def draw_cat(surf, character, colors):
    """Draw the cat for the given animation frame inside ``CAT_RECT``."""
    rx, ry, rw, rh = CAT_RECT
    fg = colors["fg"]
    lift = JUMP_HEIGHTS[character.frame] if character.action is Action.JUMPING else 0
    base_y = ry + rh - 20 - lift

    body = pygame.Rect(rx + 30, base_y - 28, 60, 24)
    pygame.draw.ellipse(surf, fg, body)
    pygame.draw.circle(surf, fg, (rx + 96, base_y - 34), 13)
    pygame.draw.polygon(surf, fg, [(rx + 88, base_y - 44), (rx + 92, base_y - 56), (rx + 98, base_y - 46)])
    pygame.draw.polygon(surf, fg, [(rx + 100, base_y - 46), (rx + 106, base_y - 56), (rx + 108, base_y - 42)])
    pygame.draw.line(surf, fg, (rx + 32, base_y - 20), (rx + 10, base_y - 36 + 4 * (character.frame % 3)), 4)

    # Legs swing with the frame; tucked while airborne
    if lift:
        for lx in (rx + 40, rx + 52, rx + 72, rx + 84):
            pygame.draw.line(surf, fg, (lx, base_y - 6), (lx + 6, base_y + 2), 4)
    else:
        swing = (character.frame - 2) * 3
        for i, lx in enumerate((rx + 40, rx + 52, rx + 72, rx + 84)):
            dx = swing if i % 2 == 0 else -swing
            pygame.draw.line(surf, fg, (lx, base_y - 6), (lx + dx, base_y + 16), 4)


def draw_scene(screen, snap, fonts, theme="light", blink=0):
    """Draw a full frame for one session snapshot."""
    colors = palette(theme)
    width, height = screen.get_size()
    screen.fill(colors["bg"])

    best = fonts["score"].render(f"High Score: {snap.best_score}", True, colors["fg"])
    screen.blit(best, (width - 20 - best.get_width(), 12))
    score = fonts["score"].render(f"Score: {snap.score}", True, colors["fg"])
    screen.blit(score, (width - 20 - score.get_width(), 42))

    for i, lane in enumerate(snap.window[:WINDOW_LANES]):
        draw_lane(screen, i, lane, colors)

    draw_cat(screen, snap.character, colors)

    if snap.state is not SessionState.PLAYING:
        dim = pygame.Surface((width, height), pygame.SRCALPHA)
        dim.fill(C_OVERLAY)
        screen.blit(dim, (0, 0))

        lines = []
        if snap.message is Message.NEW_RECORD:
            lines.append("NEW RECORD!!")
        elif snap.message is Message.GAME_OVER:
            lines.append("GAME OVER")
        if blink % 20 < 14:
            lines.append("Press SPACE to play")

        y = height // 2 - 20 * len(lines)
        for text in lines:
            t = fonts["message"].render(text, True, colors["fg"])
            screen.blit(t, (width // 2 - t.get_width() // 2, y))
            y += 40
