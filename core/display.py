"""
Display and screen management.

Handles pygame display setup and configuration.
"""

import pygame

import showlog
from .errors import BackendInitFailure


class DisplayManager:
    """Manages the pygame display and screen."""

    def __init__(self, width: int, height: int, title: str = "Piano",
                 fullscreen: bool = False, show_cursor: bool = True):
        """
        Initialize the display manager.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            title: Window caption
            fullscreen: Whether to use fullscreen mode
            show_cursor: Whether the mouse cursor stays visible
        """
        self.width = width
        self.height = height
        self.title = title
        self.fullscreen = fullscreen
        self.show_cursor = show_cursor
        self.screen = None

    def initialize(self) -> pygame.Surface:
        """
        Initialize pygame video and create the window surface.

        Returns:
            The pygame screen surface

        Raises:
            BackendInitFailure: if no window can be created
        """
        try:
            pygame.display.init()
            flags = pygame.FULLSCREEN if self.fullscreen else 0
            self.screen = pygame.display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            raise BackendInitFailure("display", str(exc)) from exc

        pygame.display.set_caption(self.title)
        pygame.mouse.set_visible(self.show_cursor)
        showlog.info(f"[DISPLAY] Window {self.width}x{self.height} ready (driver={pygame.display.get_driver()})")
        return self.screen

    def cleanup(self):
        """Close the window."""
        if pygame.display.get_init():
            pygame.display.quit()
        self.screen = None
