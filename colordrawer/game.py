from __future__ import annotations
import logging
import random
import pygame
from typing import Dict, List, Optional

from .color_drawer import ColorDrawer, ColorDrawerBuilder
from .renderer import Renderer
from .scene import GameObject, Scene
from .assets import assets
from .config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FPS,
    WINDOW_TITLE,
    CLEAR_COLOR,
    DEFAULT_LAYER_NAME,
    DEMO_QUAD_COUNT,
    DEMO_QUAD_SIZE,
    DEMO_QUAD_SPEED,
    DEMO_SPIN_SPEED,
    DEMO_TINTS,
)
from .input_handler import InputHandler

logger = logging.getLogger(__name__)


class Game:
    """Demo loop: tinted quads bouncing around the window while spinning."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.rng = rng or random.Random()
        self.scene = Scene()
        self.layer = self.scene.add_layer(DEFAULT_LAYER_NAME, self.screen)
        self.quads: List[GameObject] = []
        self.velocities: Dict[str, pygame.math.Vector2] = {}
        for i in range(DEMO_QUAD_COUNT):
            self.quads.append(self._spawn_quad(i))
        self.input = InputHandler()
        self.paused = False
        self.running = True
        logger.info("Spawned %d quads", len(self.quads))

    def _spawn_quad(self, index: int) -> GameObject:
        half = DEMO_QUAD_SIZE / 2.0
        obj = GameObject(
            self.layer,
            x=self.rng.uniform(half, self.screen_width - half),
            y=self.rng.uniform(half, self.screen_height - half),
            name=f"quad-{index}",
        )
        builder = (
            ColorDrawerBuilder()
            .set_size_and_center(DEMO_QUAD_SIZE, DEMO_QUAD_SIZE)
            .set_color(DEMO_TINTS[index % len(DEMO_TINTS)])
            .set_rotation(self.rng.uniform(0.0, 360.0))
        )
        drawer = Renderer(obj).add_drawer("body", builder)
        # Spin about the quad centre
        drawer.set_origin(half, half)
        velocity = pygame.math.Vector2(DEMO_QUAD_SPEED, 0).rotate(
            self.rng.uniform(0.0, 360.0)
        )
        self.velocities[obj.name] = velocity
        return obj

    def handle_events(self) -> None:
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        if self.input.pause_pressed():
            self.paused = not self.paused
            logger.info("Paused" if self.paused else "Resumed")

    def update(self, dt: float) -> None:
        """Move quads, bounce them off the window edges and spin them."""
        if self.paused:
            return
        half = DEMO_QUAD_SIZE / 2.0
        for obj in self.quads:
            velocity = self.velocities[obj.name]
            obj.position += velocity * dt
            # Reflect off the window edges
            if obj.position.x < half or obj.position.x > self.screen_width - half:
                velocity.x = -velocity.x
                obj.position.x = max(half, min(self.screen_width - half, obj.position.x))
            if obj.position.y < half or obj.position.y > self.screen_height - half:
                velocity.y = -velocity.y
                obj.position.y = max(half, min(self.screen_height - half, obj.position.y))
            drawer: ColorDrawer = obj.renderer.get_drawer("body")
            drawer.set_rotation((drawer.rotation_degrees + DEMO_SPIN_SPEED * dt) % 360.0)

    def render(self, dt: float) -> None:
        """Clear the target and render the scene."""
        self.screen.fill(CLEAR_COLOR)
        # Paused frames still render, but with no elapsed game time
        self.scene.render(0.0 if self.paused else dt, dt)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        while self.running:
            # Cap the frame rate and compute delta time in seconds
            dt = self.clock.tick(self.fps) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render(dt)
        for obj in list(self.quads):
            obj.destroy()
        assets.shutdown()
        pygame.quit()
