"""Stat bars, cat art, message line and command prompt."""
from __future__ import annotations

import pygame

from digicat import DisplayState
from ui.constants import (
    BAR_LABEL_W,
    GAME_OVER_COLOR,
    LINE_H,
    MESSAGE_COLOR,
    PAD,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
    TITLE_BG,
    TITLE_H,
)
from ui.frames import FRAMES


def render_bar(value: int, max_value: int) -> str:
    return "[" + "X" * value + " " * (max_value - value) + "]"


def draw_title(surface: pygame.Surface, font: pygame.font.Font) -> None:
    pygame.draw.rect(surface, TITLE_BG, (0, 0, SCREEN_W, TITLE_H))
    surface.blit(font.render("DIGI-CAT", True, TEXT_COLOR), (PAD, 6))


def draw_stats(
    surface: pygame.Surface, font: pygame.font.Font, display: DisplayState, y: int
) -> int:
    """Draw both bars starting at *y*; return the next free y."""
    rows = (("Hunger:", display.hunger_bar), ("Happiness:", display.happiness_bar))
    for label, value in rows:
        surface.blit(font.render(label, True, TEXT_COLOR), (PAD, y))
        bar = render_bar(value, display.max_value)
        surface.blit(font.render(bar, True, TEXT_COLOR), (PAD + BAR_LABEL_W, y))
        y += LINE_H
    return y


def draw_cat(
    surface: pygame.Surface, font: pygame.font.Font, display: DisplayState, y: int
) -> int:
    for line in FRAMES[display.frame].splitlines():
        surface.blit(font.render(line, True, TEXT_COLOR), (PAD * 3, y))
        y += LINE_H - 4
    return y


def draw_message(
    surface: pygame.Surface, font: pygame.font.Font, display: DisplayState, y: int
) -> int:
    if display.message:
        color = GAME_OVER_COLOR if display.is_game_over else MESSAGE_COLOR
        surface.blit(font.render(display.message, True, color), (PAD, y))
    return y + LINE_H


def draw_prompt(
    surface: pygame.Surface,
    font: pygame.font.Font,
    display: DisplayState,
    buffer: str,
    commands: tuple[str, ...],
    y: int,
) -> None:
    if display.is_game_over:
        surface.blit(font.render("Game Over", True, GAME_OVER_COLOR), (PAD, y))
        y += LINE_H
        surface.blit(font.render("Press R to restart", True, TEXT_DIM), (PAD, y))
    else:
        surface.blit(
            font.render(f"Enter command: {buffer}_", True, TEXT_COLOR), (PAD, y)
        )
    y += LINE_H + 4
    help_text = "Commands: " + " ".join(f"<{c}>" for c in commands)
    surface.blit(font.render(help_text, True, TEXT_DIM), (PAD, y))
