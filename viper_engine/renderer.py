"""Window creation and simple 2D drawing on a pygame display."""

import pygame


class RendererError(RuntimeError):
    """Raised when the display cannot be set up or used."""


class Renderer:
    """Owns one window and draws points, lines and fills in a current colour."""

    def __init__(self):
        self._surface = None
        self._color = (0, 0, 0, 255)

    def initialize(self):
        """Start the video subsystem."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RendererError(f"SDL_Init Error: {exc}") from exc

    def shutdown(self):
        """Close the window and stop the video subsystem."""
        self._surface = None
        pygame.display.quit()

    def create_window(self, name, width, height):
        """Open a window of the given title and size."""
        try:
            self._surface = pygame.display.set_mode((width, height))
        except (pygame.error, ValueError, TypeError) as exc:
            self._surface = None
            pygame.display.quit()
            raise RendererError(f"SDL_CreateWindow Error: {exc}") from exc
        pygame.display.set_caption(name)

    @property
    def surface(self):
        """The window's drawing surface."""
        return self._target()

    def _target(self):
        if self._surface is None:
            raise RendererError("no window has been created")
        return self._surface

    def clear(self):
        """Fill the whole window with the current colour."""
        self._target().fill(self._color)

    def present(self):
        """Show everything drawn since the last present."""
        self._target()
        pygame.display.flip()

    def set_color(self, r, g, b, a=255):
        """Set the colour used by later drawing calls."""
        for component in (r, g, b, a):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        self._color = (int(r), int(g), int(b), int(a))

    def draw_line(self, x1, y1, x2, y2):
        pygame.draw.line(self._target(), self._color, (x1, y1), (x2, y2))

    def draw_point(self, x, y):
        self._target().set_at((int(x), int(y)), self._color)