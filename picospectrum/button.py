"""Debounced push-button events for the A, B and joystick buttons."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable

BUTTON_A_PIN = 5
BUTTON_B_PIN = 6
BUTTON_JOYSTICK_PIN = 22

DEBOUNCE_MS = 200
_DEBOUNCE_US = DEBOUNCE_MS * 1000


class ButtonEvent(enum.Enum):
    """The most recent button press."""

    NONE = enum.auto()
    A = enum.auto()
    B = enum.auto()
    JOYSTICK = enum.auto()


_PIN_EVENTS = {
    BUTTON_A_PIN: ButtonEvent.A,
    BUTTON_B_PIN: ButtonEvent.B,
    BUTTON_JOYSTICK_PIN: ButtonEvent.JOYSTICK,
}


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class Buttons:
    """Tracks the latest debounced button press.

    ``clock`` returns the current time in microseconds. Presses arriving
    within the debounce window of the previous accepted press on the same
    pin are ignored; the window starts counting from time zero.
    """

    def __init__(self, clock: Callable[[], int] = _monotonic_us) -> None:
        self._clock = clock
        self._last_press = dict.fromkeys(_PIN_EVENTS, 0)
        self.event = ButtonEvent.NONE

    def on_falling_edge(self, pin: int) -> None:
        """Handle a falling edge on ``pin``; unknown pins are ignored."""
        action = _PIN_EVENTS.get(pin)
        if action is None:
            return
        now = self._clock()
        if now - self._last_press[pin] < _DEBOUNCE_US:
            return
        self._last_press[pin] = now
        self.event = action

    def clear_event(self) -> None:
        """Forget the latest press."""
        self.event = ButtonEvent.NONE