"""Frame buffer and drawing primitives for an SSD1306 128x64 OLED over I2C."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Protocol

from .font import FIRST_CHAR, LAST_CHAR, glyph

WIDTH = 128
HEIGHT = 64
PAGES = HEIGHT // 8
ADDRESS = 0x3C

_COMMAND_PREFIX = 0x00
_DATA_PREFIX = 0x40

_INIT_SEQUENCE = (
    0xAE,        # display off
    0xD5, 0x80,  # clock divide ratio
    0xA8, 0x3F,  # multiplex ratio: 64 lines
    0xD3, 0x00,  # display offset
    0x40,        # start line 0
    0x8D, 0x14,  # charge pump on
    0x20, 0x00,  # horizontal addressing
    0xA1,        # segment re-map
    0xC8,        # COM scan direction reversed
    0xDA, 0x12,  # COM pins configuration
    0x81, 0x7F,  # contrast
    0xD9, 0xF1,  # pre-charge period
    0xDB, 0x40,  # VCOMH deselect level
    0xA4,        # follow RAM content
    0xA6,        # normal (non-inverted)
    0xAF,        # display on
)

_SHUTDOWN_SEQUENCE = (
    0xAE,        # display off
    0x8D, 0x10,  # charge pump off
)


class I2CBus(Protocol):
    """Anything that can write a block of bytes to an I2C device."""

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` to the device at ``address``."""


def _c_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    return int(math.fmod(value, modulus))


def _wrapped_span(start: int, end: int, size: int) -> list[int]:
    """Positions from ``start`` stepping with wrap-around until past ``end``."""
    stop = _c_mod(end + 1, size)

    def walk() -> Iterator[int]:
        value = start
        for _ in range(abs(start) + size + 1):
            if value == stop:
                return
            yield value
            value = _c_mod(value + 1, size)
        raise ValueError(f"span from {start} never reaches {end}")

    return list(walk())


class Display:
    """An SSD1306 display with an in-memory frame buffer."""

    def __init__(self, bus: I2CBus) -> None:
        self.bus = bus
        self.buffer = bytearray(WIDTH * HEIGHT // 8)
        self.initialized = False

    def _send_command(self, command: int) -> None:
        self.bus.write(ADDRESS, bytes((_COMMAND_PREFIX, command)))

    def init(self) -> None:
        """Configure the controller and blank the buffer; a no-op if already done."""
        if self.initialized:
            return
        for command in _INIT_SEQUENCE:
            self._send_command(command)
        self.clear()
        self.initialized = True

    def update(self) -> None:
        """Send the whole frame buffer to the display, one page at a time."""
        for page in range(PAGES):
            self._send_command(0xB0 + page)
            self._send_command(0x00)
            self._send_command(0x10)
            row = self.buffer[page * WIDTH:(page + 1) * WIDTH]
            self.bus.write(ADDRESS, bytes((_DATA_PREFIX,)) + bytes(row))

    def clear(self) -> None:
        """Blank the frame buffer."""
        self.buffer[:] = bytes(len(self.buffer))

    def shutdown(self) -> None:
        """Blank the screen and power down the panel."""
        self.clear()
        self.update()
        for command in _SHUTDOWN_SEQUENCE:
            self._send_command(command)
        self.initialized = False

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")
        return bool(self.buffer[x + (y // 8) * WIDTH] & (1 << (y % 8)))

    def draw_pixel(self, x: int, y: int, on: bool) -> None:
        """Set or clear one pixel; points off the screen are ignored."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return
        index = x + (y // 8) * WIDTH
        mask = 1 << (y % 8)
        if on:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, on: bool) -> None:
        """Draw a line with Bresenham's algorithm."""
        dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
        dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
        err = dx + dy
        while True:
            self.draw_pixel(x0, y0, on)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_char(self, x: int, y: int, char: str, on: bool) -> None:
        """Draw one character; characters without a glyph are skipped."""
        if not FIRST_CHAR <= ord(char) <= LAST_CHAR:
            return
        for col, line in enumerate(glyph(char)):
            for row in range(8):
                if line & (1 << row):
                    self.draw_pixel(x + col, y + row, on)

    def draw_string(self, x: int, y: int, text: str, on: bool) -> None:
        """Draw text left to right, stopping at the first character that would not fit."""
        for char in text:
            if x + 8 > WIDTH:
                break
            self.draw_char(x, y, char, on)
            x += 8

    def draw_rectangle(
        self, x0: int, y0: int, x1: int, y1: int, filled: bool, on: bool
    ) -> None:
        """Draw a rectangle; coordinates wrap around the screen edges.

        Raises ValueError for a filled rectangle whose wrapped span never closes.
        """
        x0 = _c_mod(x0 + WIDTH, WIDTH)
        y0 = _c_mod(y0 + HEIGHT, HEIGHT)
        x1 = _c_mod(x1 + WIDTH, WIDTH)
        y1 = _c_mod(y1 + HEIGHT, HEIGHT)

        if filled:
            rows = _wrapped_span(y0, y1, HEIGHT)
            columns = _wrapped_span(x0, x1, WIDTH) if rows else []
            for y in rows:
                for x in columns:
                    self.draw_pixel(x, y, on)
        else:
            self.draw_line(x0, y0, x1, y0, on)
            self.draw_line(x0, y1, x1, y1, on)
            self.draw_line(x0, y0, x0, y1, on)
            self.draw_line(x1, y0, x1, y1, on)

    def draw_circle(
        self, xc: int, yc: int, radius: int, filled: bool, on: bool
    ) -> None:
        """Draw a circle with the midpoint algorithm."""
        x, y = 0, radius
        d = 1 - radius
        while y >= x:
            if filled:
                for i in range(xc - x, xc + x + 1):
                    self.draw_pixel(i, yc + y, on)
                    self.draw_pixel(i, yc - y, on)
                for i in range(xc - y, xc + y + 1):
                    self.draw_pixel(i, yc + x, on)
                    self.draw_pixel(i, yc - x, on)
            else:
                for px, py in (
                    (xc + x, yc + y), (xc - x, yc + y),
                    (xc + x, yc - y), (xc - x, yc - y),
                    (xc + y, yc + x), (xc - y, yc + x),
                    (xc + y, yc - x), (xc - y, yc - x),
                ):
                    self.draw_pixel(px, py, on)
            x += 1
            if d < 0:
                d += 2 * x + 1
            else:
                y -= 1
                d += 2 * (x - y) + 1

    def draw_bitmap(
        self,
        x: int,
        y: int,
        bitmap: Sequence[int],
        width: int,
        height: int,
        rotation: int,
        on: bool,
    ) -> None:
        """Draw a page-ordered bitmap, rotated by ``rotation`` quarter turns clockwise.

        Rotation values other than 1, 2 and 3 draw the bitmap unrotated.
        """
        for i in range(width):
            for j in range(height):
                if rotation == 1:
                    dst_x, dst_y = x + j, y + (width - 1 - i)
                elif rotation == 2:
                    dst_x, dst_y = x + (width - 1 - i), y + (height - 1 - j)
                elif rotation == 3:
                    dst_x, dst_y = x + (height - 1 - j), y + i
                else:
                    dst_x, dst_y = x + i, y + j

                if 0 <= dst_x < WIDTH and 0 <= dst_y < HEIGHT:
                    byte = bitmap[(j // 8) * width + i]
                    if byte & (1 << (j % 8)):
                        self.draw_pixel(dst_x, dst_y, on)