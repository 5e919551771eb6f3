"""
ColorDrawer: a single tinted, rotatable quad anchored to its game object,
and ColorDrawerBuilder, the fluent configuration used to create one.
"""

from __future__ import annotations
import logging
import pygame
from typing import TYPE_CHECKING, Optional, Union

from .assets import assets
from .config import DEFAULT_TRANSPARENCY
from .drawer import Drawer, DrawerBuilder
from .sprite import Sprite

if TYPE_CHECKING:
    from .renderer import Renderer

logger = logging.getLogger(__name__)

TextureSource = Union[None, str, pygame.Surface]


def _resolve_texture(texture: TextureSource) -> pygame.Surface:
    if texture is None:
        return assets.solid()
    if isinstance(texture, str):
        return assets.load(texture)
    return texture


class ColorDrawer(Drawer):
    """
    Draws one quad at the owning object's position plus an offset.

    Every setter returns the drawer so calls can be chained, and all of them
    except set_tint_color skip the sprite when the value is unchanged.
    The texture defaults to a shared solid white one, so the tint alone
    decides the quad's colour.
    """

    def __init__(
        self,
        renderer: Renderer,
        name: str,
        texture: TextureSource = None,
        use_real_delta_time: bool = True,
    ) -> None:
        super().__init__(renderer, name, use_real_delta_time)
        self.size = pygame.math.Vector2()
        self.position_offset = pygame.math.Vector2()
        self.origin = pygame.math.Vector2()
        self.rotation_degrees = 0.0
        self.tint_color: Optional[pygame.Color] = None
        # Stored only; the sprite's alpha is not touched
        self.transparency = DEFAULT_TRANSPARENCY
        self.sprite = Sprite(_resolve_texture(texture))

    def draw(self, delta: float) -> None:
        position = self.renderer.object.position
        target_x = position.x + self.position_offset.x
        target_y = position.y + self.position_offset.y
        if self.sprite.x != target_x:
            self.sprite.set_x(target_x)
        if self.sprite.y != target_y:
            self.sprite.set_y(target_y)
        self.sprite.draw(self.renderer.object.get_scene_layer().batch)

    def is_out_of_bounds(self) -> bool:
        return False

    def dispose(self) -> None:
        # Texture belongs to the asset cache
        pass

    def set_tint_color(self, color) -> ColorDrawer:
        self.tint_color = pygame.Color(color)
        self.sprite.set_color(self.tint_color)
        return self

    def set_size(self, x: float, y: float) -> ColorDrawer:
        if self.size.x == x and self.size.y == y:
            return self
        self.size.update(x, y)
        self.sprite.set_size(x, y)
        return self

    def set_size_and_center(self, x: float, y: float) -> ColorDrawer:
        return self.set_size(x, y).set_offset_position(-x / 2.0, -y / 2.0)

    def set_offset_position(self, x: float, y: float) -> ColorDrawer:
        if self.position_offset.x == x and self.position_offset.y == y:
            return self
        self.position_offset.update(x, y)
        return self

    def set_origin(self, x: float, y: float) -> ColorDrawer:
        if self.origin.x == x and self.origin.y == y:
            return self
        self.origin.update(x, y)
        self.sprite.set_origin(x, y)
        return self

    def set_rotation(self, degrees: float, forced: bool = False) -> ColorDrawer:
        if self.rotation_degrees == degrees and not forced:
            return self
        self.rotation_degrees = degrees
        self.sprite.set_rotation(degrees)
        return self

    def set_transparency(self, transparency: float) -> ColorDrawer:
        if self.transparency == transparency:
            return self
        self.transparency = transparency
        return self


class ColorDrawerBuilder(DrawerBuilder):
    """
    Collects ColorDrawer settings before the drawer exists.

    Usage:
        builder = ColorDrawerBuilder().set_size_and_center(10, 20).set_color("red")
        drawer = renderer.add_drawer("body", builder)
    """

    def __init__(self, texture: TextureSource = None) -> None:
        super().__init__(use_real_delta_time=True)
        self.texture = texture
        self.size_x = 0.0
        self.size_y = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.origin_x = 0.0
        self.origin_y = 0.0
        self.rotation_degrees = 0.0
        self.tint_color = None
        self.transparency: Optional[float] = None

    def build(self, name: str) -> ColorDrawer:
        drawer = ColorDrawer(
            self.renderer, name, self.texture, self.use_real_delta_time
        )
        if self.size_x != 0 and self.size_y != 0:
            drawer.set_size(self.size_x, self.size_y)
        drawer.set_offset_position(self.offset_x, self.offset_y)
        drawer.set_origin(self.origin_x, self.origin_y)
        if self.tint_color is not None:
            drawer.set_tint_color(self.tint_color)
        drawer.set_rotation(self.rotation_degrees, False)
        if self.transparency is not None:
            drawer.set_transparency(self.transparency)
        logger.debug("Built ColorDrawer %r", name)
        return drawer

    def set_size(self, x: float, y: float) -> ColorDrawerBuilder:
        self.size_x = x
        self.size_y = y
        return self

    def set_size_and_center(self, x: float, y: float) -> ColorDrawerBuilder:
        return self.set_size(x, y).set_offset_position(-x / 2.0, -y / 2.0)

    def set_offset_position(self, x: float, y: float) -> ColorDrawerBuilder:
        self.offset_x = x
        self.offset_y = y
        return self

    def set_origin(self, x: float, y: float) -> ColorDrawerBuilder:
        # TODO: y lands in offset_y, so origin_y is never set from here.
        # Kept as-is until it is confirmed which field callers expect.
        self.origin_x = x
        self.offset_y = y
        return self

    def set_rotation(self, degrees: float) -> ColorDrawerBuilder:
        self.rotation_degrees = degrees
        return self

    def set_color(self, color) -> ColorDrawerBuilder:
        self.tint_color = color
        return self

    def set_transparency(self, transparency: float) -> ColorDrawerBuilder:
        self.transparency = transparency
        return self
