"""Ground, ramp, bullseye target and truck."""
from __future__ import annotations

import pygame

from ui.constants import (
    DIRT,
    FLAME,
    GRASS,
    HUB,
    HUD_H,
    RAMP_EDGE,
    RAMP_FILL,
    RAMP_STRIPE,
    RAMP_W,
    RAMP_X,
    RAMP_Y,
    SCENE_H,
    SCENE_W,
    SKY_BOTTOM,
    SKY_TOP,
    TARGET_DOT,
    TARGET_RED,
    TARGET_WHITE,
    TIRE,
    TRUCK_BODY,
    TRUCK_CAB,
    TRUCK_EDGE,
    WINDOW,
)


def _to_screen(x: float, y: float) -> tuple[int, int]:
    return int(round(x)), int(round(y)) + HUD_H


def draw_sky(surface: pygame.Surface) -> None:
    """Vertical gradient over the whole window."""
    height = surface.get_height()
    for row in range(height):
        t = row / max(1, height - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
        pygame.draw.line(surface, color, (0, row), (SCENE_W, row))


def draw_ground(surface: pygame.Surface, ground_y: float) -> None:
    _, top = _to_screen(0, ground_y)
    pygame.draw.rect(surface, GRASS, (0, top, SCENE_W, 50))
    pygame.draw.rect(surface, DIRT, (0, top + 50, SCENE_W, HUD_H + SCENE_H - top - 50))


def draw_ramp(surface: pygame.Surface, ground_y: float) -> None:
    points = [
        _to_screen(RAMP_X, ground_y),
        _to_screen(RAMP_X + RAMP_W, ground_y),
        _to_screen(RAMP_X + RAMP_W, RAMP_Y),
    ]
    pygame.draw.polygon(surface, RAMP_FILL, points)
    pygame.draw.polygon(surface, RAMP_EDGE, points, 3)
    # Dashed guide stripe up the ramp face
    x1, y1 = _to_screen(RAMP_X + 10, ground_y - 10)
    x2, y2 = _to_screen(RAMP_X + RAMP_W - 10, RAMP_Y + 10)
    dashes = 8
    for i in range(0, dashes, 2):
        a = (x1 + (x2 - x1) * i / dashes, y1 + (y2 - y1) * i / dashes)
        b = (x1 + (x2 - x1) * (i + 1) / dashes, y1 + (y2 - y1) * (i + 1) / dashes)
        pygame.draw.line(surface, RAMP_STRIPE, a, b, 3)


def draw_target(
    surface: pygame.Surface,
    font: pygame.font.Font,
    goal_x: float,
    goal_y: float,
) -> None:
    center = _to_screen(goal_x, goal_y)
    for radius, color in ((45, TARGET_RED), (30, TARGET_WHITE), (15, TARGET_RED), (6, TARGET_DOT)):
        pygame.draw.circle(surface, color, center, radius)
    label = font.render("TARGET", True, TARGET_RED)
    surface.blit(label, label.get_rect(center=(center[0], center[1] + 70)))


def draw_truck(surface: pygame.Surface, x: float, y: float) -> None:
    """Truck anchored at its axle line, as in scene coordinates."""
    cx, cy = _to_screen(x, y)
    body = pygame.Rect(cx - 30, cy - 25, 60, 30)
    cab = pygame.Rect(cx - 25, cy - 35, 35, 15)
    pygame.draw.rect(surface, TRUCK_BODY, body, border_radius=5)
    pygame.draw.rect(surface, TRUCK_EDGE, body, 3, border_radius=5)
    pygame.draw.rect(surface, TRUCK_CAB, cab, border_radius=3)
    pygame.draw.rect(surface, TRUCK_EDGE, cab, 2, border_radius=3)
    for wx in (-20, -5):
        pygame.draw.rect(surface, WINDOW, (cx + wx, cy - 32, 12, 10))
    pygame.draw.line(surface, FLAME, (cx - 28, cy - 18), (cx + 2, cy - 18), 3)
    for wheel_x in (-20, 20):
        pygame.draw.circle(surface, TIRE, (cx + wheel_x, cy + 5), 15)
        pygame.draw.circle(surface, HUB, (cx + wheel_x, cy + 5), 8)
