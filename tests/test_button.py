import pytest

from picospectrum.button import (
    BUTTON_A_PIN,
    BUTTON_B_PIN,
    BUTTON_JOYSTICK_PIN,
    DEBOUNCE_MS,
    ButtonEvent,
    Buttons,
)


class FakeClock:
    def __init__(self, now_us):
        self.now_us = now_us

    def __call__(self):
        return self.now_us


@pytest.fixture
def clock():
    return FakeClock(10_000_000)


def test_starts_with_no_event(clock):
    assert Buttons(clock).event is ButtonEvent.NONE


@pytest.mark.parametrize(
    "pin, expected",
    [
        (BUTTON_A_PIN, ButtonEvent.A),
        (BUTTON_B_PIN, ButtonEvent.B),
        (BUTTON_JOYSTICK_PIN, ButtonEvent.JOYSTICK),
    ],
)
def test_press_records_event(clock, pin, expected):
    buttons = Buttons(clock)
    buttons.on_falling_edge(pin)
    assert buttons.event is expected


def test_unknown_pin_is_ignored(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_JOYSTICK_PIN + 1)
    assert buttons.event is ButtonEvent.NONE


def test_clear_event(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_A_PIN)
    buttons.clear_event()
    assert buttons.event is ButtonEvent.NONE


def test_bounce_within_window_is_ignored(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_A_PIN)
    buttons.clear_event()
    clock.now_us += DEBOUNCE_MS * 1000 - 1
    buttons.on_falling_edge(BUTTON_A_PIN)
    assert buttons.event is ButtonEvent.NONE


def test_press_after_window_is_accepted(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_A_PIN)
    buttons.clear_event()
    clock.now_us += DEBOUNCE_MS * 1000
    buttons.on_falling_edge(BUTTON_A_PIN)
    assert buttons.event is ButtonEvent.A


def test_debounce_is_per_pin(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_A_PIN)
    clock.now_us += 1
    buttons.on_falling_edge(BUTTON_B_PIN)
    assert buttons.event is ButtonEvent.B


def test_press_right_after_time_zero_is_ignored():
    clock = FakeClock(DEBOUNCE_MS * 1000 - 1)
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_A_PIN)
    assert buttons.event is ButtonEvent.NONE


def test_later_press_replaces_earlier(clock):
    buttons = Buttons(clock)
    buttons.on_falling_edge(BUTTON_B_PIN)
    clock.now_us += 1
    buttons.on_falling_edge(BUTTON_JOYSTICK_PIN)
    assert buttons.event is ButtonEvent.JOYSTICK