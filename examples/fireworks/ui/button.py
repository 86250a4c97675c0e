"""The Fire! button."""
from __future__ import annotations

import pygame

from ui.constants import (
    BUTTON_BG,
    BUTTON_BORDER,
    BUTTON_H,
    BUTTON_HOVER,
    BUTTON_MARGIN,
    BUTTON_W,
    TEXT_COLOR,
)


class Button:
    def __init__(self, label: str) -> None:
        self.label = label
        self.rect = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)

    def place(self, window_size: tuple[int, int]) -> None:
        """Pin to the bottom-right corner."""
        w, h = window_size
        self.rect.bottomright = (w - BUTTON_MARGIN, h - BUTTON_MARGIN)

    def contains(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, window: pygame.Surface, font: pygame.font.Font) -> None:
        hover = self.contains(pygame.mouse.get_pos())
        pygame.draw.rect(window, BUTTON_HOVER if hover else BUTTON_BG, self.rect, border_radius=8)
        pygame.draw.rect(window, BUTTON_BORDER, self.rect, 1, border_radius=8)
        label = font.render(self.label, True, TEXT_COLOR)
        window.blit(label, label.get_rect(center=self.rect.center))
