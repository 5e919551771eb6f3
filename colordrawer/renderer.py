"""
Renderer component: hosts the named drawers of one game object.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Type

if TYPE_CHECKING:
    from .drawer import Drawer, DrawerBuilder
    from .scene import GameObject

logger = logging.getLogger(__name__)


class Renderer:
    """
    Owns the drawers of a game object and draws them in order.
    Drawers are drawn in insertion order unless moved with place_at_start
    or place_at_end.
    """

    def __init__(self, game_object: GameObject) -> None:
        self.object = game_object
        self._drawers: Dict[str, Drawer] = {}
        game_object.renderer = self

    def add_drawer(self, name: str, builder: DrawerBuilder) -> Drawer:
        """Bind the builder to this renderer, build and store the drawer."""
        if name in self._drawers:
            logger.error("Drawer %r already exists on %s", name, self.object.name)
            raise ValueError(f"Drawer already exists: {name}")
        builder.renderer = self
        drawer = builder.build(name)
        drawer.renderer = self
        self._drawers[name] = drawer
        logger.debug("Added drawer %r to %s", name, self.object.name)
        return drawer

    def place_at_start(self, name: str) -> None:
        """Move the named drawer so it is drawn first."""
        drawer = self._drawers.pop(name)
        self._drawers = {name: drawer, **self._drawers}

    def place_at_end(self, name: str) -> None:
        """Move the named drawer so it is drawn last."""
        self._drawers[name] = self._drawers.pop(name)

    def get_drawer(
        self, name: str, drawer_cls: Optional[Type[Drawer]] = None
    ) -> Optional[Drawer]:
        """
        Return the named drawer, or None if there is none.
        When drawer_cls is given, the drawer must be exactly that class.
        """
        drawer = self._drawers.get(name)
        if drawer is None or drawer_cls is None:
            return drawer
        if type(drawer) is not drawer_cls:
            logger.error(
                "Drawer %r is a %s, not a %s",
                name,
                type(drawer).__name__,
                drawer_cls.__name__,
            )
            raise TypeError(
                f"Drawer {name} is a {type(drawer).__name__}, "
                f"not a {drawer_cls.__name__}"
            )
        return drawer

    def has_drawer(self, name: str) -> bool:
        return name in self._drawers

    def remove_drawer(self, name: str) -> bool:
        """Dispose and drop the named drawer. Returns False if it was not found."""
        drawer = self._drawers.pop(name, None)
        if drawer is None:
            return False
        drawer.dispose()
        logger.debug("Removed drawer %r from %s", name, self.object.name)
        return True

    def set_drawers_enabled(self, enabled: bool) -> None:
        for drawer in self._drawers.values():
            drawer.enabled = enabled

    def __iter__(self) -> Iterator[Drawer]:
        return iter(self._drawers.values())

    def __len__(self) -> int:
        return len(self._drawers)

    def render(self, delta: float, raw_delta: Optional[float] = None) -> None:
        """Draw every drawer; raw_delta goes to drawers that asked for it."""
        if raw_delta is None:
            raw_delta = delta
        for drawer in list(self._drawers.values()):
            drawer.draw_internal(raw_delta if drawer.use_real_delta_time else delta)

    def dispose(self) -> None:
        for drawer in self._drawers.values():
            drawer.dispose()
        self._drawers.clear()
