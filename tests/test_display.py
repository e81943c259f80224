import pytest

from picospectrum.display import HEIGHT, WIDTH, Display
from picospectrum.font import glyph


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def display(bus):
    return Display(bus)


def lit_pixels(display):
    return {
        (x, y)
        for x in range(WIDTH)
        for y in range(HEIGHT)
        if display.get_pixel(x, y)
    }


def test_init_sends_commands_to_ssd1306_address(display, bus):
    display.init()
    assert display.initialized
    assert all(address == 0x3C for address, _ in bus.writes)
    assert all(data[0] == 0x00 and len(data) == 2 for _, data in bus.writes)
    assert bus.writes[0][1] == bytes((0x00, 0xAE))
    assert bus.writes[-1][1] == bytes((0x00, 0xAF))


def test_init_twice_sends_nothing_more(display, bus):
    display.init()
    first = list(bus.writes)
    assert len(first) == 25
    display.init()
    assert display.initialized is True
    assert bus.writes == first


def test_init_clears_buffer(display):
    display.draw_pixel(3, 3, True)
    assert display.get_pixel(3, 3)
    display.init()
    assert display.get_pixel(3, 3) is False or display.get_pixel(3, 3) == 0
    assert lit_pixels(display) == set()


def test_shutdown_blanks_and_powers_off(display, bus):
    display.init()
    display.draw_pixel(10, 10, True)
    bus.writes.clear()
    display.shutdown()
    assert not display.initialized
    assert not any(display.buffer)
    commands = [data for _, data in bus.writes if data[0] == 0x00]
    assert commands[-3:] == [bytes((0, 0xAE)), bytes((0, 0x8D)), bytes((0, 0x10))]


def test_pixel_set_and_clear(display):
    display.draw_pixel(5, 17, True)
    assert display.get_pixel(5, 17)
    assert lit_pixels(display) == {(5, 17)}
    display.draw_pixel(5, 17, False)
    assert not display.get_pixel(5, 17)
    assert not any(display.buffer)


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
def test_off_screen_pixel_is_ignored(display, point):
    display.draw_pixel(*point, True)
    assert lit_pixels(display) == set()
    assert bytes(display.buffer) == bytes(WIDTH * HEIGHT // 8)


def test_get_pixel_off_screen_raises(display):
    with pytest.raises(IndexError):
        display.get_pixel(WIDTH, 0)


def test_clear(display):
    display.draw_line(0, 0, 127, 63, True)
    assert display.get_pixel(127, 63)
    display.clear()
    assert lit_pixels(display) == set()
    assert bytes(display.buffer) == bytes(WIDTH * HEIGHT // 8)


def test_horizontal_line(display):
    display.draw_line(2, 12, 20, 12, True)
    assert lit_pixels(display) == {(x, 12) for x in range(2, 21)}


def test_line_is_symmetric_in_direction(bus):
    forward = Display(bus)
    backward = Display(bus)
    forward.draw_line(0, 0, 7, 0, True)
    backward.draw_line(7, 0, 0, 0, True)
    assert forward.buffer == backward.buffer


def test_diagonal_line_endpoints(display):
    display.draw_line(3, 4, 40, 30, True)
    pixels = lit_pixels(display)
    assert (3, 4) in pixels and (40, 30) in pixels
    assert len({x for x, _ in pixels}) == 38


def test_char_matches_glyph(display):
    display.draw_char(10, 20, "A", True)
    expected = {
        (10 + col, 20 + row)
        for col, line in enumerate(glyph("A"))
        for row in range(8)
        if line & (1 << row)
    }
    assert lit_pixels(display) == expected


def test_char_without_glyph_draws_nothing(display):
    display.draw_char(0, 0, "\n", True)
    assert lit_pixels(display) == set()
    assert bytes(display.buffer) == bytes(WIDTH * HEIGHT // 8)


def test_string_stops_at_right_edge(bus):
    text = Display(bus)
    single = Display(bus)
    text.draw_string(120, 0, "AB", True)
    single.draw_char(120, 0, "A", True)
    assert text.buffer == single.buffer


def test_string_places_characters_eight_apart(bus):
    text = Display(bus)
    chars = Display(bus)
    text.draw_string(0, 0, "Hz", True)
    chars.draw_char(0, 0, "H", True)
    chars.draw_char(8, 0, "z", True)
    assert text.buffer == chars.buffer


def test_filled_rectangle(display):
    display.draw_rectangle(10, 20, 14, 22, True, True)
    assert lit_pixels(display) == {(x, y) for x in range(10, 15) for y in range(20, 23)}


def test_outline_rectangle(display):
    display.draw_rectangle(10, 20, 14, 22, False, True)
    pixels = lit_pixels(display)
    assert (12, 21) not in pixels
    assert {(10, 20), (14, 20), (10, 22), (14, 22)} <= pixels


def test_rectangle_wraps_negative_coordinates(bus):
    wrapped = Display(bus)
    plain = Display(bus)
    wrapped.draw_rectangle(-2, 0, -1, 1, True, True)
    plain.draw_rectangle(WIDTH - 2, 0, WIDTH - 1, 1, True, True)
    assert wrapped.buffer == plain.buffer
    assert lit_pixels(wrapped) == {(x, y) for x in (WIDTH - 2, WIDTH - 1) for y in (0, 1)}


def test_filled_rectangle_that_never_closes_raises(display):
    with pytest.raises(ValueError):
        display.draw_rectangle(0, -70, 0, -75, True, True)


def test_circle_outline_is_symmetric(display):
    display.draw_circle(64, 32, 10, False, True)
    pixels = lit_pixels(display)
    assert {(74, 32), (54, 32), (64, 42), (64, 22)} <= pixels
    assert all((128 - x, y) in pixels and (x, 64 - y) in pixels for x, y in pixels)
    assert (64, 32) not in pixels


def test_filled_circle_contains_outline(bus):
    outline = Display(bus)
    filled = Display(bus)
    outline.draw_circle(30, 30, 8, False, True)
    filled.draw_circle(30, 30, 8, True, True)
    assert lit_pixels(outline) <= lit_pixels(filled)
    assert filled.get_pixel(30, 30)


def test_bitmap_unrotated(display):
    display.draw_bitmap(4, 5, bytes((0x01, 0x02)), 2, 2, 0, True)
    assert lit_pixels(display) == {(4, 5), (5, 6)}


def test_bitmap_clipped_at_edge(display):
    display.draw_bitmap(WIDTH - 1, 0, bytes((0x01, 0x01)), 2, 1, 0, True)
    assert lit_pixels(display) == {(WIDTH - 1, 0)}