"""
Sprite batch: collects per-frame draw submissions onto a target surface.
"""

from __future__ import annotations
import logging
import pygame

logger = logging.getLogger(__name__)


class SpriteBatch:
    """
    Thin frame bracket around Surface.blit.

    Usage:
        batch = SpriteBatch(screen)
        batch.begin()
        batch.draw(image, rect)
        batch.end()
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self.drawing = False
        # Draw calls issued in the frame currently open
        self._calls = 0
        # Draw calls issued in the last completed frame
        self.render_calls = 0

    def begin(self) -> None:
        if self.drawing:
            raise RuntimeError("SpriteBatch.end must be called before begin")
        self.drawing = True
        self._calls = 0

    def draw(self, image: pygame.Surface, rect: pygame.Rect) -> None:
        if not self.drawing:
            raise RuntimeError("SpriteBatch.begin must be called before draw")
        self.target.blit(image, rect)
        self._calls += 1

    def end(self) -> None:
        if not self.drawing:
            raise RuntimeError("SpriteBatch.begin must be called before end")
        self.drawing = False
        self.render_calls = self._calls
        logger.debug("Batch flushed %d draw calls", self.render_calls)
