"""DIGI-CAT - A terminal-styled virtual pet.

Keep the cat fed and happy by typing commands. Hunger and happiness drain
over time; when either runs out the cat dies.

Controls:
  Type        Enter a command (feed, pet, dance)
  Enter       Submit the command
  Backspace   Delete a character
  R           Restart (after game over)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from digicat import CANONICAL, REDUCED, Session
from ui.constants import BG_COLOR, FPS, LINE_H, PAD, SCREEN_H, SCREEN_W, TITLE_H
from ui.panels import draw_cat, draw_message, draw_prompt, draw_stats, draw_title

MAX_INPUT = 24


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="DIGI-CAT virtual pet")
    p.add_argument("--seed", type=int, default=None, help="Random seed for blink timing")
    p.add_argument("--reduced", action="store_true",
                   help="Dance-less variant with faster decay")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = Session(config=REDUCED if args.reduced else CANONICAL, seed=args.seed)
    buffer = ""

    def _on_restart(signal: str, data: dict) -> None:
        nonlocal buffer
        buffer = ""

    session.bus.subscribe("restart", _on_restart)
    session.start()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("DIGI-CAT")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 15)

    running = True
    while running:
        dt_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif session.is_game_over:
                    if event.key == pygame.K_r:
                        session.restart()

                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    session.submit_command(buffer)
                    # The prompt clears on every submission, valid or not.
                    buffer = ""

                elif event.key == pygame.K_BACKSPACE:
                    buffer = buffer[:-1]

                elif event.unicode and event.unicode.isprintable():
                    if len(buffer) < MAX_INPUT:
                        buffer += event.unicode

        # --- Tick ---
        session.advance(dt_ms)

        # --- Render ---
        display = session.display_state()
        screen.fill(BG_COLOR)
        draw_title(screen, font)
        y = draw_stats(screen, font, display, TITLE_H + PAD)
        y = draw_cat(screen, font, display, y + PAD // 2)
        y = draw_message(screen, font, display, y + PAD // 2)
        draw_prompt(screen, font, display, buffer, session.config.commands, y + LINE_H)

        pygame.display.flip()

    session.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
