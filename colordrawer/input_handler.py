"""
Input handling abstraction to decouple Pygame input from the demo loop.
"""

from __future__ import annotations
import pygame


class InputHandler:
    """
    Processes Pygame events once per frame and exposes the actions the
    demo cares about.
    """

    def __init__(self) -> None:
        self._quit = False
        # Toggle pause state (P key)
        self._pause = False

    def process_events(self) -> None:
        """Poll Pygame events and update quit/pause flags for this frame."""
        self._quit = False
        self._pause = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit = True
                elif event.key == pygame.K_p:
                    self._pause = True

    def should_quit(self) -> bool:
        return self._quit

    def pause_pressed(self) -> bool:
        return self._pause
