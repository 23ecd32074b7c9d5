"""In-memory framebuffer screen and drawable windows for the robot display."""

from __future__ import annotations

import abc
import logging
from contextlib import suppress
from enum import IntEnum

from .bitmaps import ImageFormat, glyph_for

logger = logging.getLogger(__name__)

# Width of a glyph cell used to decide when text wraps to the next line.
_WRAP_MARGIN = 8


class DisplayColor(IntEnum):
    """32-bit pixel colours understood by the display."""

    BLACK = 0x00000000
    DARK = 0x78787878
    LIGHT = 0xB4B4B4B4
    WHITE = 0xFFFFFFFF
    RED = 0xFF000000
    GREEN = 0x00FF0000
    BLUE = 0x0000FF00
    YELLOW = 0xFFFF0000
    CYAN = 0x00FFFF00
    MAGENTA = 0xFF00FF00
    ORANGE = 0xFFA50000
    PURPLE = 0x80008000
    BROWN = 0xA52A2A00
    PINK = 0xFFC0CB00
    TRAFFIC_RED = 0xC1121C00
    TRAFFIC_GREEN = 0x00A74A00


class OutOfBoundsError(ValueError):
    """Raised when a drawing operation starts or ends outside the window."""


class Screen:
    """A rectangular grid of 32-bit pixels, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [int(DisplayColor.WHITE)] * (width * height)

    @property
    def pixels(self) -> tuple[int, ...]:
        """A snapshot of every pixel, row by row."""
        return tuple(self._pixels)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the screen are ignored with a warning."""
        if not self._contains(x, y):
            logger.warning("Tried to draw pixel outside of screen at x: %d y: %d", x, y)
            return
        self._pixels[y * self.width + x] = int(color)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of the pixel at ``x``, ``y``."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside of {self.width}x{self.height} screen")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Paint the whole screen white."""
        self.fill_screen(DisplayColor.WHITE)

    def fill_screen(self, color: int) -> None:
        """Paint the whole screen in one colour."""
        self._pixels = [int(color)] * (self.width * self.height)


class Window(Screen, abc.ABC):
    """A named drawable area placed at a start position on the display."""

    def __init__(self, name: str, width: int, height: int, x: int, y: int) -> None:
        super().__init__(width, height)
        self.name = name
        self.start_x = x
        self.start_y = y
        self.fill(DisplayColor.WHITE)

    @abc.abstractmethod
    def update(self) -> None:
        """Redraw the content of the window."""

    def _check_start(self, x0: int, y0: int) -> None:
        if not self._contains(x0, y0):
            raise OutOfBoundsError(f"start point ({x0}, {y0}) outside of window {self.name!r}")

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line from (x0, y0) to (x1, y1) with Bresenham's algorithm."""
        self._check_start(x0, y0)
        if x0 == x1:
            self.draw_vertical_line(x0, y0, y1, color)
            return
        if y0 == y1:
            self.draw_horizontal_line(x0, y0, x1, color)
            return

        dx, dy = x1 - x0, y1 - y0
        step_x = -1 if dx < 0 else 1
        step_y = -1 if dy < 0 else 1
        dx, dy = abs(dx) << 1, abs(dy) << 1

        self.draw_pixel(x0, y0, color)
        if dx > dy:
            fraction = dy - (dx >> 1)
            while x0 != x1:
                if fraction >= 0:
                    y0 += step_y
                    fraction -= dx
                x0 += step_x
                fraction += dy
                self.draw_pixel(x0, y0, color)
        else:
            fraction = dx - (dy >> 1)
            while y0 != y1:
                if fraction >= 0:
                    x0 += step_x
                    fraction -= dy
                y0 += step_y
                fraction += dx
                self.draw_pixel(x0, y0, color)

    def draw_vertical_line(self, x0: int, y0: int, y1: int, color: int) -> None:
        """Draw from y0 down to y1 inclusive in column x0; nothing if y1 < y0."""
        self._check_start(x0, y0)
        if not 0 <= y1 < self.height:
            raise OutOfBoundsError(f"end row {y1} outside of window {self.name!r}")
        for y in range(y0, y1 + 1):
            self.draw_pixel(x0, y, color)

    def draw_horizontal_line(self, x0: int, y0: int, x1: int, color: int) -> None:
        """Draw from x0 right to x1 inclusive in row y0; nothing if x1 < x0."""
        self._check_start(x0, y0)
        if not 0 <= x1 < self.width:
            raise OutOfBoundsError(f"end column {x1} outside of window {self.name!r}")
        for x in range(x0, x1 + 1):
            self.draw_pixel(x, y0, color)

    def draw_rectangle(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw an axis-aligned rectangle between two corners."""
        self._check_start(x0, y0)
        if not self._contains(x1, y1):
            raise OutOfBoundsError(f"corner ({x1}, {y1}) outside of window {self.name!r}")
        self.draw_line(x0, y0, x1, y0, color)
        self.draw_line(x0, y0, x0, y1, color)
        self.draw_line(x1, y0, x1, y1, color)
        self.draw_line(x0, y1, x1, y1, color)
        logger.debug("Drew rectangle with color %s", color)

    def _draw_outline(self, points: list[tuple[int, int]], color: int) -> None:
        # Edges that start outside the window are skipped, the rest are drawn.
        for (ax, ay), (bx, by) in zip(points, points[1:] + points[:1]):
            with suppress(OutOfBoundsError):
                self.draw_line(ax, ay, bx, by, color)

    def draw_quad(self, x0: int, y0: int, x1: int, y1: int,
                  x2: int, y2: int, x3: int, y3: int, color: int) -> None:
        """Draw a closed outline through four points, e.g. a rotated rectangle."""
        self._draw_outline([(x0, y0), (x1, y1), (x2, y2), (x3, y3)], color)

    def draw_circle(self, x0: int, y0: int, radius: int, color: int) -> None:
        """Draw a circle outline with the midpoint algorithm."""
        x, y, err = radius, 0, 0
        while x >= y:
            for px, py in (
                (x0 + x, y0 + y), (x0 + y, y0 + x), (x0 - y, y0 + x), (x0 - x, y0 + y),
                (x0 - x, y0 - y), (x0 - y, y0 - x), (x0 + y, y0 - x), (x0 + x, y0 - y),
            ):
                self.draw_pixel(px, py, color)
            if err <= 0:
                y += 1
                err += 2 * y + 1
            if err > 0:
                x -= 1
                err -= 2 * x + 1

    def draw_triangle(self, x0: int, y0: int, x1: int, y1: int,
                      x2: int, y2: int, color: int) -> None:
        """Draw a triangle outline through three points."""
        self._draw_outline([(x0, y0), (x1, y1), (x2, y2)], color)

    def draw_text(self, x: int, y: int, text: str, color: int) -> None:
        """Draw lower-case text with the keyboard font, wrapping at the right edge.

        Characters missing from the font are skipped. Glyphs are always drawn
        black on white, whatever ``color`` is given.
        """
        xpos, ypos = x, y
        for char in text:
            try:
                glyph = glyph_for(char)
            except (KeyError, ValueError):
                logger.warning("Character not found in font: %r", char)
                continue
            if xpos + _WRAP_MARGIN >= self.width:
                xpos = x
                ypos += glyph.height + 1
            self.draw_bitmap(xpos, ypos, glyph)
            xpos += glyph.width + 1

    def draw_bitmap(self, x: int, y: int, bitmap: ImageFormat) -> None:
        """Draw a 1-bit bitmap with its top-left corner at ``x``, ``y``."""
        for row in range(bitmap.height):
            for col in range(bitmap.width):
                color = DisplayColor.BLACK if bitmap.is_set(col, row) else DisplayColor.WHITE
                self.draw_pixel(x + col, y + row, color)

    def fill(self, color: int) -> None:
        """Paint the whole window in one colour."""
        self.fill_screen(color)
        logger.debug("Filled window with color: %s", color)