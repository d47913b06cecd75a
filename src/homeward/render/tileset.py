# src/homeward/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from .palette import ICONS, Theme

KINDS = ("wall", "path", "goal", "player")

class Tileset:
    """
    Tiny cached builder:
      - One square pygame.Surface per cell kind, sized tile_size
      - Flat theme colours, or glyphs from ICONS when use_icons is set
      - Player is a disc of radius tile/3 on a transparent surface
    """
    def __init__(self, tile_size: int, theme: Theme, use_icons: bool = False, font=None):
        self.tile_size = tile_size
        self.theme = theme
        self.use_icons = use_icons
        self.font = font or pygame.font.SysFont(None, max(10, int(tile_size * 0.8)))

    @lru_cache(maxsize=16)
    def get(self, kind: str) -> pygame.Surface:
        if kind not in KINDS:
            raise ValueError(f"unknown tile kind: {kind!r}")
        size = self.tile_size
        img = pygame.Surface((size, size), pygame.SRCALPHA)

        if kind == "path":
            img.fill(self.theme.path)
            return img

        colour = getattr(self.theme, kind)
        if self.use_icons:
            txt = self.font.render(ICONS[kind], True, colour)
            img.blit(txt, txt.get_rect(center=(size // 2, size // 2)))
        elif kind == "player":
            pygame.draw.circle(img, colour, (size // 2, size // 2), max(1, size // 3))
        else:
            img.fill(colour)
        return img
