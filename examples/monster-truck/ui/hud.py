"""Title, status line, level counter, power meter and learn panel."""
from __future__ import annotations

import pygame

from ui.constants import (
    LEARN_LINES,
    METER_BG,
    METER_H,
    METER_HIGH,
    METER_LOW,
    METER_MID,
    METER_W,
    PANEL_BG,
    SCREEN_H,
    SCREEN_W,
    STATUS_MESSAGES,
    TEXT_COLOR,
    TITLE_COLOR,
)


def draw_header(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    font: pygame.font.Font,
    state: str,
) -> None:
    title = title_font.render("Monster Truck Jump!", True, TITLE_COLOR)
    surface.blit(title, title.get_rect(center=(SCREEN_W // 2, 28)))
    status = font.render(STATUS_MESSAGES.get(state, ""), True, TEXT_COLOR)
    surface.blit(status, status.get_rect(center=(SCREEN_W // 2, 62)))


def draw_counter(
    surface: pygame.Surface,
    font: pygame.font.Font,
    level: int,
    attempts: int,
    last_distance: float | None,
) -> None:
    """Level / attempts box in the top-right corner."""
    text = f"Level: {level} | Attempts: {attempts}"
    label = font.render(text, True, TEXT_COLOR)
    rect = label.get_rect(topright=(SCREEN_W - 16, 84))
    pygame.draw.rect(surface, PANEL_BG, rect.inflate(16, 10), border_radius=8)
    surface.blit(label, rect)
    if last_distance is not None:
        miss = font.render(f"Last: {last_distance:.0f} from target", True, TEXT_COLOR)
        surface.blit(miss, miss.get_rect(topright=(SCREEN_W - 16, rect.bottom + 10)))


def draw_power_meter(
    surface: pygame.Surface,
    font: pygame.font.Font,
    power: int,
    max_power: int,
) -> None:
    x = (SCREEN_W - METER_W) // 2
    y = 86
    label = font.render(f"Power: {round(power)}%", True, TEXT_COLOR)
    surface.blit(label, (x - label.get_width() - 12, y + (METER_H - label.get_height()) // 2))

    frame = pygame.Rect(x, y, METER_W, METER_H)
    pygame.draw.rect(surface, METER_BG, frame, border_radius=METER_H // 2)
    fraction = power / max_power
    if fraction > 0:
        if fraction < 0.4:
            color = METER_LOW
        elif fraction < 0.75:
            color = METER_MID
        else:
            color = METER_HIGH
        fill = pygame.Rect(x, y, max(METER_H, int(METER_W * fraction)), METER_H)
        pygame.draw.rect(surface, color, fill, border_radius=METER_H // 2)
    pygame.draw.rect(surface, TEXT_COLOR, frame, 3, border_radius=METER_H // 2)


def draw_learn_panel(surface: pygame.Surface, font: pygame.font.Font) -> None:
    line_h = font.get_linesize()
    height = line_h * len(LEARN_LINES) + 16
    panel = pygame.Rect(16, SCREEN_H - height - 16, 290, height)
    pygame.draw.rect(surface, PANEL_BG, panel, border_radius=10)
    for i, line in enumerate(LEARN_LINES):
        surface.blit(font.render(line, True, TEXT_COLOR), (panel.x + 10, panel.y + 8 + i * line_h))
