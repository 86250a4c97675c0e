"""Completion banner shown when the sky goes quiet."""
from __future__ import annotations

import pygame

from ui.constants import BANNER_BG, MESSAGE_TEXT, TEXT_COLOR


class CompletionBanner:
    """Implements the show's Message protocol; drawn on top of the canvas."""

    def __init__(self, font: pygame.font.Font, text: str = MESSAGE_TEXT) -> None:
        self.font = font
        self.text = text
        self.visible = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def draw(self, window: pygame.Surface) -> None:
        if not self.visible:
            return
        label = self.font.render(self.text, True, TEXT_COLOR)
        box = label.get_rect().inflate(48, 28)
        box.center = window.get_rect().center
        plate = pygame.Surface(box.size, pygame.SRCALPHA)
        pygame.draw.rect(plate, BANNER_BG, plate.get_rect(), border_radius=12)
        window.blit(plate, box.topleft)
        window.blit(label, label.get_rect(center=box.center))
