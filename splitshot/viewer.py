"""A window that shows a background image under a custom icon."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

import pygame

DEFAULT_TITLE = "Background and Icon"
DEFAULT_SIZE = (800, 600)
DEFAULT_ICON = "images/C-logo.png"
DEFAULT_BACKGROUND = "images/background.png"
FRAME_DELAY_MS = 16


class ViewerError(RuntimeError):
    """Raised when the window or its images cannot be set up."""


class Viewer:
    """Window, icon and stretched background image, with a simple event loop."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        size: tuple[int, int] = DEFAULT_SIZE,
        icon_path: str = DEFAULT_ICON,
        background_path: str = DEFAULT_BACKGROUND,
    ):
        self.screen: Optional[pygame.Surface] = None
        self.background: Optional[pygame.Surface] = None
        self.is_running = False
        self._closed = False
        try:
            self._setup(title, tuple(size), icon_path, background_path)
        except ViewerError:
            self.close()
            raise
        self.is_running = True

    def _setup(self, title, size, icon_path, background_path) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise ViewerError(f"Error initializing display: {exc}") from exc
        try:
            self.screen = pygame.display.set_mode(size)
        except pygame.error as exc:
            raise ViewerError(f"Error creating Window: {exc}") from exc
        pygame.display.set_caption(title)

        try:
            icon = pygame.image.load(icon_path)
        except (pygame.error, OSError) as exc:
            raise ViewerError(f"Error loading Surface: {exc}") from exc
        try:
            pygame.display.set_icon(icon)
        except pygame.error as exc:
            raise ViewerError(f"Error setting Window Icon: {exc}") from exc

        try:
            image = pygame.image.load(background_path).convert()
        except (pygame.error, OSError) as exc:
            raise ViewerError(f"Error loading Texture: {exc}") from exc
        self.background = pygame.transform.scale(image, self.screen.get_size())

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Stop on a quit request or an Escape press; return whether still running."""
        for event in events:
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.is_running = False
        return self.is_running

    def draw(self) -> None:
        """Clear the window and show the background stretched over it."""
        self.screen.fill((0, 0, 0))
        self.screen.blit(self.background, (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        """Handle events and redraw about sixty times a second until stopped."""
        while self.is_running:
            self.handle_events(pygame.event.get())
            self.draw()
            pygame.time.delay(FRAME_DELAY_MS)

    def close(self) -> None:
        """Release the images and the window; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.is_running = False
        self.background = None
        self.screen = None
        pygame.display.quit()
        pygame.quit()
        print("All Clean!")

    def __enter__(self) -> "Viewer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the background window until it is closed."""
    parser = argparse.ArgumentParser(description="Show a background image in a window.")
    parser.add_argument("--title", default=DEFAULT_TITLE)
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE[0])
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE[1])
    parser.add_argument("--icon", default=DEFAULT_ICON)
    parser.add_argument("--background", default=DEFAULT_BACKGROUND)
    args = parser.parse_args(argv)
    try:
        viewer = Viewer(args.title, (args.width, args.height), args.icon, args.background)
    except ViewerError as exc:
        print(exc, file=sys.stderr)
        return 1
    with viewer:
        viewer.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())