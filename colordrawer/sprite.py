"""
Textured quad primitive built on pygame surfaces.
"""

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING, Optional

from .config import DEFAULT_SPRITE_COLOR

if TYPE_CHECKING:
    from .batch import SpriteBatch


class Sprite:
    """
    A positioned, sized, rotatable and tintable quad over a pygame Surface.
    Attributes:
        x, y (float): Screen position of the unrotated quad's top-left corner.
        width, height (float): Quad size in pixels; negative values flip the axis.
        origin_x, origin_y (float): Rotation pivot, local to the top-left corner.
        rotation (float): Angle in degrees, counter-clockwise on screen.
        color (pygame.Color): Multiplier applied to every texel.
    """

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture
        self.x = 0.0
        self.y = 0.0
        tw, th = texture.get_size()
        self.width = float(tw)
        self.height = float(th)
        # Pivot defaults to the quad centre
        self.origin_x = self.width / 2.0
        self.origin_y = self.height / 2.0
        self.rotation = 0.0
        self.color = pygame.Color(DEFAULT_SPRITE_COLOR)
        self._image: Optional[pygame.Surface] = None
        self._center_offset = pygame.math.Vector2()

    def set_x(self, x: float) -> None:
        self.x = x

    def set_y(self, y: float) -> None:
        self.y = y

    def set_position(self, x: float, y: float) -> None:
        self.set_x(x)
        self.set_y(y)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._image = None

    def set_origin(self, origin_x: float, origin_y: float) -> None:
        self.origin_x = origin_x
        self.origin_y = origin_y
        self._image = None

    def set_rotation(self, degrees: float) -> None:
        self.rotation = degrees
        self._image = None

    def set_color(self, color) -> None:
        self.color = pygame.Color(color)
        self._image = None

    def _rebuild(self) -> None:
        w = int(round(abs(self.width)))
        h = int(round(abs(self.height)))
        if w == 0 or h == 0:
            self._image = pygame.Surface((0, 0), pygame.SRCALPHA)
            self._center_offset = pygame.math.Vector2()
            return
        surf = pygame.transform.scale(self.texture, (w, h))
        if self.width < 0 or self.height < 0:
            surf = pygame.transform.flip(surf, self.width < 0, self.height < 0)
        if self.color != pygame.Color(DEFAULT_SPRITE_COLOR):
            surf.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
        if self.rotation % 360:
            surf = pygame.transform.rotate(surf, self.rotation)
        self._image = surf
        # Centre of the quad relative to the pivot, rotated with the image.
        # Screen y grows downward, hence the negated angle.
        offset = pygame.math.Vector2(w / 2.0 - self.origin_x, h / 2.0 - self.origin_y)
        self._center_offset = offset.rotate(-self.rotation)

    @property
    def image(self) -> pygame.Surface:
        """Texture scaled, tinted and rotated; rebuilt only when invalidated."""
        if self._image is None:
            self._rebuild()
        return self._image

    @property
    def rect(self) -> pygame.Rect:
        image = self.image
        cx = self.x + self.origin_x + self._center_offset.x
        cy = self.y + self.origin_y + self._center_offset.y
        return image.get_rect(center=(round(cx), round(cy)))

    def draw(self, batch: SpriteBatch) -> None:
        """Submit the rendered quad to the batch."""
        batch.draw(self.image, self.rect)
