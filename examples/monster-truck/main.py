"""Monster Truck Jump — hold to charge, release to launch.

Drives a truck_jump LaunchSimulator at a fixed tick rate and draws it.

Controls:
  Space   Hold to build power, release to jump
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from truck_jump import GameState, LaunchSimulator
from truck_jump.constants import DEFAULT_FPS, GROUND_Y, MAX_POWER
from ui.constants import FPS, SCREEN_H, SCREEN_W
from ui.hud import draw_counter, draw_header, draw_learn_panel, draw_power_meter
from ui.scene import draw_ground, draw_ramp, draw_sky, draw_target, draw_truck

logger = logging.getLogger("monster_truck")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Monster Truck Jump — truck_jump demo")
    p.add_argument("--fps", type=int, default=DEFAULT_FPS,
                   help=f"Simulation frames per second (default: {DEFAULT_FPS})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Monster Truck Jump")
    clock = pygame.time.Clock()
    title_font = pygame.font.SysFont("arial", 36, bold=True)
    font = pygame.font.SysFont("arial", 20, bold=True)

    sim = LaunchSimulator(fps=args.fps)
    sim.on_transition(
        lambda old, new: logger.debug("transition %s -> %s", old.value, new.value)
    )

    tick_interval = 1.0 / sim.fps
    accumulator = 0.0
    running = True

    with sim:
        while running:
            dt = clock.tick(FPS) / 1000.0
            accumulator += dt

            # --- Events ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        sim.start_charge()
                elif event.type == pygame.KEYUP and event.key == pygame.K_SPACE:
                    sim.stop_charge()

            # --- Tick ---
            while accumulator >= tick_interval:
                sim.step()
                accumulator -= tick_interval

            # --- Render ---
            draw_sky(screen)
            draw_ground(screen, GROUND_Y)
            draw_ramp(screen, GROUND_Y)
            goal_x, goal_y = sim.goal_position
            draw_target(screen, font, goal_x, goal_y)
            truck_x, truck_y = sim.truck_position
            draw_truck(screen, truck_x, truck_y)

            draw_header(screen, title_font, font, sim.state.value)
            landing = sim.last_landing
            draw_counter(
                screen, font, sim.level, sim.attempts,
                landing.distance if landing is not None else None,
            )
            if sim.state in (GameState.READY, GameState.CHARGING):
                draw_power_meter(screen, font, sim.power, MAX_POWER)
            draw_learn_panel(screen, font)

            pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
