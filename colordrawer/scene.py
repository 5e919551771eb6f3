"""
Scene graph: layers that own a sprite batch, and the game objects drawn on them.
"""

from __future__ import annotations
import logging
import itertools
import pygame
from typing import TYPE_CHECKING, Dict, List, Optional

from .batch import SpriteBatch

if TYPE_CHECKING:
    from .renderer import Renderer

logger = logging.getLogger(__name__)

_object_ids = itertools.count(1)


class GameObject:
    """
    Anything placed in a scene layer.
    Attributes:
        name (str): Identifier used in log output.
        position (pygame.math.Vector2): World position.
        renderer: Optional Renderer component, set by Renderer itself.
    """

    def __init__(
        self,
        layer: SceneLayer,
        x: float = 0.0,
        y: float = 0.0,
        name: Optional[str] = None,
    ) -> None:
        self.name = name or f"object-{next(_object_ids)}"
        self.position = pygame.math.Vector2(x, y)
        self.renderer: Optional[Renderer] = None
        self.destroyed = False
        self._layer = layer
        layer.add_object(self)

    def get_scene_layer(self) -> SceneLayer:
        return self._layer

    def destroy(self) -> None:
        """Detach from the layer and dispose every drawer. Repeat calls do nothing."""
        if self.destroyed:
            return
        self.destroyed = True
        self._layer.remove_object(self)
        if self.renderer is not None:
            self.renderer.dispose()
            self.renderer = None

    def __repr__(self):
        return f"<GameObject {self.name} x={self.position.x:.2f} y={self.position.y:.2f}>"


class SceneLayer:
    """A draw layer: one batch, one rendering area, objects in draw order."""

    def __init__(
        self,
        name: str,
        target: pygame.Surface,
        rendering_area: Optional[pygame.Rect] = None,
    ) -> None:
        self.name = name
        self.batch = SpriteBatch(target)
        self.rendering_area = rendering_area or target.get_rect()
        self.objects: List[GameObject] = []

    def add_object(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def remove_object(self, obj: GameObject) -> None:
        self.objects.remove(obj)

    def render(self, delta: float, raw_delta: Optional[float] = None) -> None:
        self.batch.begin()
        try:
            for obj in list(self.objects):
                if obj.renderer is not None:
                    obj.renderer.render(delta, raw_delta)
        finally:
            self.batch.end()


class Scene:
    """Ordered collection of named layers."""

    def __init__(self) -> None:
        self._layers: Dict[str, SceneLayer] = {}

    def add_layer(
        self,
        name: str,
        target: pygame.Surface,
        rendering_area: Optional[pygame.Rect] = None,
    ) -> SceneLayer:
        if name in self._layers:
            logger.error("Scene layer %r already exists", name)
            raise ValueError(f"Scene layer already exists: {name}")
        layer = SceneLayer(name, target, rendering_area)
        self._layers[name] = layer
        return layer

    def get_layer(self, name: str) -> SceneLayer:
        return self._layers[name]

    @property
    def layers(self) -> List[SceneLayer]:
        return list(self._layers.values())

    def render(self, delta: float, raw_delta: Optional[float] = None) -> None:
        """Render every layer in insertion order."""
        for layer in self._layers.values():
            layer.render(delta, raw_delta)
