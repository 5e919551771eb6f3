"""
Base classes for drawers and the builders that create them.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .renderer import Renderer


class Drawer(ABC):
    """
    Draws one visual element of a game object every frame.
    Drawers are normally created through Renderer.add_drawer with a builder.
    Attributes:
        renderer: Renderer component the drawer is attached to.
        name (str): Key the drawer is stored under in its renderer.
        enabled (bool): Disabled drawers are skipped by draw_internal.
        use_real_delta_time (bool): Ask the renderer for the unscaled delta.
    """

    def __init__(
        self, renderer: Renderer, name: str, use_real_delta_time: bool = False
    ) -> None:
        self.renderer = renderer
        self.name = name
        self.enabled = True
        self.use_real_delta_time = use_real_delta_time

    def draw_internal(self, delta: float) -> None:
        """Draw unless disabled or outside the rendering area."""
        if self.enabled and not self.is_out_of_bounds():
            self.draw(delta)

    @abstractmethod
    def draw(self, delta: float) -> None:
        """Render a single frame; delta is the time since the last one."""

    @abstractmethod
    def is_out_of_bounds(self) -> bool:
        """Return True if the drawer has nothing visible to render."""

    @abstractmethod
    def dispose(self) -> None:
        """Release whatever the drawer owns. Called on removal."""


class DrawerBuilder(ABC):
    """Accumulates drawer settings; Renderer.add_drawer binds it and builds."""

    def __init__(self, use_real_delta_time: bool = False) -> None:
        self.renderer: Optional[Renderer] = None
        self.use_real_delta_time = use_real_delta_time

    def set_use_real_time(self, use_real_time: bool) -> DrawerBuilder:
        """Have the built drawer receive the unscaled delta time."""
        self.use_real_delta_time = use_real_time
        return self

    @abstractmethod
    def build(self, name: str) -> Drawer:
        ...
