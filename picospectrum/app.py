"""Screens and main loop of the frequency detector: peak, spectrum and tuner."""

from __future__ import annotations

import enum
import math
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .button import ButtonEvent, Buttons
from .display import HEIGHT, WIDTH, Display
from .fft_analyzer import FFTAnalyzer

NOTE_NAMES = ("A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#")
REFERENCE_A4_HZ = 440.0
TUNER_MIN_FREQUENCY_HZ = 20.0
SPECTRUM_SILENCE_THRESHOLD = 10.0
_MAX_BAR_HEIGHT = HEIGHT - 14
_REBOOT_PAUSE_S = 0.25


class DisplayMode(enum.Enum):
    """The screen currently shown."""

    PEAK_FREQUENCY = 0
    SPECTRUM_ANALYZER = 1
    CHROMATIC_TUNER = 2

    def next(self) -> DisplayMode:
        members = list(DisplayMode)
        return members[(members.index(self) + 1) % len(members)]


@dataclass(frozen=True)
class Note:
    """The nearest equal-tempered note and the deviation from it in cents."""

    name: str
    cents: int


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def note_for_frequency(frequency: float) -> Note:
    """Nearest note to ``frequency`` (A4 = 440 Hz) and its offset in cents."""
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")
    note_index = _round_half_away(12 * math.log2(frequency / REFERENCE_A4_HZ))
    ideal = REFERENCE_A4_HZ * 2.0 ** (note_index / 12.0)
    cents = _round_half_away(1200 * math.log2(frequency / ideal))
    return Note(NOTE_NAMES[note_index % 12], cents)


def _draw_title(display: Display, title: str) -> None:
    display.draw_string(2, 2, title, True)
    display.draw_line(0, 12, WIDTH - 1, 12, True)


def draw_peak_mode(display: Display, peak_freq: float) -> None:
    """Show the peak frequency as text."""
    _draw_title(display, "Frequencia")
    display.draw_string(10, 30, f"{peak_freq:.2f} Hz", True)


def draw_spectrum_mode(display: Display, magnitudes: Sequence[float]) -> None:
    """Draw one log-scaled bar per column, normalised to the loudest bin."""
    _draw_title(display, "Espectro")

    count = len(magnitudes)
    max_magnitude = max((m for m in magnitudes[1:] if m > 0.0), default=0.0)
    if max_magnitude < SPECTRUM_SILENCE_THRESHOLD:
        return

    log_max = math.log10(max_magnitude + 1.0)
    for column in range(WIDTH):
        start_bin = max((column * count) // WIDTH, 1)
        end_bin = ((column + 1) * count) // WIDTH
        if end_bin <= start_bin:
            end_bin = start_bin + 1

        average = sum(magnitudes[start_bin:min(end_bin, count)]) / (end_bin - start_bin)
        bar_height = int(math.log10(average + 1.0) / log_max * _MAX_BAR_HEIGHT)
        bar_height = min(max(bar_height, 0), _MAX_BAR_HEIGHT)

        display.draw_line(column, HEIGHT - 1, column, HEIGHT - 1 - bar_height, True)


def draw_tuner_mode(display: Display, peak_freq: float) -> None:
    """Show the nearest note and a needle offset by the deviation in cents."""
    _draw_title(display, "Afinador")

    if peak_freq < TUNER_MIN_FREQUENCY_HZ:
        display.draw_string(40, 30, "--.--", True)
        return

    note = note_for_frequency(peak_freq)
    display.draw_string(10, 25, f"Nota: {note.name}", True)

    center_x = WIDTH // 2
    indicator = center_x + int(note.cents / 2)  # one pixel per two cents
    indicator = min(max(indicator, 5), WIDTH - 5)

    display.draw_line(center_x, 45, center_x, 55, True)
    display.draw_rectangle(indicator - 2, 48, indicator + 2, 52, True, True)


class FrequencyDetector:
    """Ties display, buttons and analyser together into the running instrument.

    Button A cycles the screen, B freezes or resumes analysis, and the
    joystick blanks the display and calls ``reboot``. The caller paces
    successive calls to ``step``.
    """

    def __init__(
        self,
        display: Display,
        buttons: Buttons,
        analyzer: FFTAnalyzer,
        reboot: Callable[[], None],
    ) -> None:
        self.display = display
        self.buttons = buttons
        self.analyzer = analyzer
        self.reboot = reboot
        self.mode = DisplayMode.PEAK_FREQUENCY
        self.hold = False

        display.init()
        display.clear()
        display.draw_string(30, 20, "Analisador", True)
        display.draw_string(40, 35, "de Audio", True)
        display.update()

    def handle_event(self, event: ButtonEvent) -> None:
        """Act on one button press."""
        if event is ButtonEvent.A:
            self.mode = self.mode.next()
        elif event is ButtonEvent.B:
            self.hold = not self.hold
        elif event is ButtonEvent.JOYSTICK:
            self.display.clear()
            self.display.draw_string(10, 30, "Reiniciando...", True)
            self.display.update()
            time.sleep(_REBOOT_PAUSE_S)
            self.display.shutdown()
            time.sleep(_REBOOT_PAUSE_S)
            self.reboot()

    def render(self) -> None:
        """Redraw the current screen and send it to the display."""
        peak_freq = self.analyzer.peak_frequency()
        self.display.clear()

        if self.mode is DisplayMode.PEAK_FREQUENCY:
            draw_peak_mode(self.display, peak_freq)
        elif self.mode is DisplayMode.SPECTRUM_ANALYZER:
            draw_spectrum_mode(self.display, self.analyzer.magnitudes)
        else:
            draw_tuner_mode(self.display, peak_freq)

        if self.hold:
            self.display.draw_string(WIDTH - 24, 2, "[H]", True)

        self.display.update()

    def step(self) -> None:
        """One pass of the main loop: buttons, analysis, drawing."""
        event = self.buttons.event
        if event is not ButtonEvent.NONE:
            self.handle_event(event)
            self.buttons.clear_event()

        if not self.hold:
            self.analyzer.run_analysis()

        self.render()