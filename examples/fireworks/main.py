"""Skyburst: click Fire! and watch the sky.

Exercises skyburst, skyburst-physics, skyburst-signal and skyburst-pyro.

Controls:
  Click Fire!   Launch a burst of 6-10 rockets
  Space         Same as Fire!
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from skyburst import FrameScheduler
from skyburst_pyro import Show, randint

from ui.banner import CompletionBanner
from ui.button import Button
from ui.canvas import PygameCanvas
from ui.constants import BURST_RANGE, FPS, HEIGHT, TEXT_DIM, TITLE, WIDTH

logger = logging.getLogger("skyburst.demo")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Skyburst interactive fireworks")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--width", type=int, default=WIDTH, help=f"Window width (default: {WIDTH})")
    p.add_argument("--height", type=int, default=HEIGHT, help=f"Window height (default: {HEIGHT})")
    p.add_argument("--pixel-ratio", type=float, default=None,
                   help="Override the device pixel ratio (capped at 2)")
    p.add_argument("--autolaunch", type=int, default=0, metavar="N",
                   help="Launch N rockets on startup (default: 0)")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.width = max(320, args.width)
    args.height = max(240, args.height)
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("sans", 26, bold=True)

    canvas = PygameCanvas(window, pixel_ratio=args.pixel_ratio)
    banner = CompletionBanner(big_font)
    scheduler = FrameScheduler()
    show = Show(canvas, banner, scheduler, seed=args.seed)
    logger.info("seed %d", show.engine.seed)

    button = Button("Fire!")
    button.place(window.get_size())

    stats = {"bursts": 0, "explosions": 0}

    def _on_burst(signal: str, data: dict) -> None:
        stats["bursts"] += 1

    def _on_explode(signal: str, data: dict) -> None:
        stats["explosions"] += 1
        logger.debug("firework %d burst into %d sparks", data["entity"], data["particles"])

    show.bus.subscribe("burst_launched", _on_burst)
    show.bus.subscribe("firework_exploded", _on_explode)

    def fire() -> None:
        show.launch_burst(randint(show.engine.random, *BURST_RANGE))

    if args.autolaunch > 0:
        show.launch_burst(args.autolaunch)

    running = True
    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    fire()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if button.contains(event.pos):
                    fire()
            elif event.type == pygame.VIDEORESIZE:
                window = pygame.display.get_surface()
                canvas.attach(window)
                show.resize()
                button.place(window.get_size())

        # --- Frame ---
        scheduler.dispatch(pygame.time.get_ticks() / 1000.0)

        # --- Draw ---
        canvas.present()
        button.draw(window, font)
        banner.draw(window)

        hud = (
            f"Rockets: {len(show.fireworks())}   Bursts: {stats['bursts']}   "
            f"Explosions: {stats['explosions']}   FPS: {pg_clock.get_fps():.0f}"
        )
        window.blit(font.render(hud, True, TEXT_DIM), (10, 8))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
