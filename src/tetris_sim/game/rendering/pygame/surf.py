# src/tetris_sim/game/rendering/pygame/surf.py
from __future__ import annotations

from typing import Dict, Tuple

import pygame

Color = Tuple[int, int, int]

_BEVEL_LIGHT = 60
_BEVEL_DARK = 70


def _shade(color: Color, delta: int) -> Color:
    return (
        max(0, min(255, int(color[0]) + delta)),
        max(0, min(255, int(color[1]) + delta)),
        max(0, min(255, int(color[2]) + delta)),
    )


class SurfaceCache:
    """
    Per-renderer cache of block tiles and HUD text.

    Block tiles are keyed by (size, rgb, alpha). Text is keyed by
    (font, text, rgb); score values change rarely, so a frame usually hits.
    """

    def __init__(self, *, max_text: int = 256) -> None:
        self._blocks: Dict[Tuple[int, Color, int], pygame.Surface] = {}
        self._text: Dict[Tuple[int, str, Color], pygame.Surface] = {}
        self.max_text = int(max_text)

    def cell(self, *, size: int, color: Color, alpha: int = 255) -> pygame.Surface:
        key = (int(size), tuple(int(v) for v in color), int(alpha))
        surf = self._blocks.get(key)
        if surf is None:
            surf = self._make_block(size=int(size), color=key[1], alpha=int(alpha))
            self._blocks[key] = surf
        return surf

    @staticmethod
    def _make_block(*, size: int, color: Color, alpha: int) -> pygame.Surface:
        surf = pygame.Surface((size, size), flags=pygame.SRCALPHA)
        surf.fill((*color, alpha))
        if size >= 6:
            edge = max(1, size // 8)
            light = (*_shade(color, _BEVEL_LIGHT), alpha)
            dark = (*_shade(color, -_BEVEL_DARK), alpha)
            pygame.draw.rect(surf, light, pygame.Rect(0, 0, size, edge))
            pygame.draw.rect(surf, light, pygame.Rect(0, 0, edge, size))
            pygame.draw.rect(surf, dark, pygame.Rect(0, size - edge, size, edge))
            pygame.draw.rect(surf, dark, pygame.Rect(size - edge, 0, edge, size))
        return surf

    def text(self, *, font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
        key = (id(font), str(text), tuple(int(v) for v in color))
        surf = self._text.get(key)
        if surf is None:
            if len(self._text) >= self.max_text:
                self._text.clear()
            surf = font.render(str(text), True, key[2])
            self._text[key] = surf
        return surf


def blit_text(
        *,
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[int, int],
        color: Color,
        cache: SurfaceCache | None = None,
) -> pygame.Rect:
    img = cache.text(font=font, text=text, color=color) if cache is not None else font.render(text, True, color)
    return screen.blit(img, pos)
