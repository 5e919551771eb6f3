"""
Texture cache shared by drawers.
"""

from __future__ import annotations
import os
import logging
import pygame
from typing import Dict, Tuple

from .config import ASSETS_DIR, SOLID_TEXTURE_SIZE

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)


class AssetManager:
    """
    Loads each texture once and hands out the same Surface afterwards.

    Usage:
        mgr = AssetManager()
        tex = mgr.load("ship.png")
        ...
        mgr.shutdown()
    """

    def __init__(self, root: str = ASSETS_DIR) -> None:
        self.root = root
        self._textures: Dict[str, pygame.Surface] = {}
        self._solids: Dict[Tuple[Tuple[int, ...], Tuple[int, int]], pygame.Surface] = {}

    def resolve(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        return os.path.join(self.root, path)

    def contains(self, path: str) -> bool:
        return path in self._textures

    def load(self, path: str) -> pygame.Surface:
        """Load the texture at path, or return the cached copy."""
        if path is None:
            raise ValueError("Texture path must be provided")
        if path in self._textures:
            return self._textures[path]
        full_path = self.resolve(path)
        if not os.path.exists(full_path):
            logger.error("Texture not found: %s", full_path)
            raise FileNotFoundError(f"Texture not found: {full_path}")
        img = pygame.image.load(full_path)
        # convert_alpha needs a display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        self._textures[path] = img
        logger.debug("Loaded texture %s (%dx%d)", path, *img.get_size())
        return img

    def get(self, path: str) -> pygame.Surface:
        return self._textures[path]

    def solid(
        self, color=WHITE, size: Tuple[int, int] = SOLID_TEXTURE_SIZE
    ) -> pygame.Surface:
        """Return a cached texture filled with a single colour."""
        key = (tuple(pygame.Color(color)), tuple(size))
        surf = self._solids.get(key)
        if surf is None:
            surf = pygame.Surface(size, pygame.SRCALPHA)
            surf.fill(color)
            self._solids[key] = surf
        return surf

    def unload(self, path: str) -> None:
        del self._textures[path]
        logger.debug("Unloaded texture %s", path)

    def shutdown(self) -> None:
        """Drop every cached texture."""
        count = len(self._textures) + len(self._solids)
        self._textures.clear()
        self._solids.clear()
        logger.debug("Released %d textures", count)


# Shared cache used when drawers are given a path instead of a Surface
assets = AssetManager()
