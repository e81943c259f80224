# picospectrum

A small audio frequency detector made of three parts:

- an FFT analyzer. It takes a block of samples, removes the DC offset,
  applies a Hann window, runs a radix-2 FFT and reports the peak frequency.
- a frame buffer for a 128x64 monochrome OLED that uses the SSD1306 command
  set. It draws pixels, lines, rectangles, circles, bitmaps and text in an
  8x8 font.
- an application with three screens: peak frequency, spectrum analyzer and
  chromatic tuner. Three debounced buttons control it.

The package has no runtime dependencies. You supply the objects that
reach the hardware, so the same code can run against a real bus, a
simulator or a test double.

## The display

`picospectrum.display.Display` holds a 1024-byte frame buffer in memory
and sends it over an I2C bus when asked. The bus is any object with a
`write(address, data)` method. `picospectrum.display.I2CBus` is a protocol
that describes this interface. The display is addressed at `0x3C`.

```python
from picospectrum.display import Display


class RecordingBus:
    def __init__(self):
        self.frames = []

    def write(self, address, data):
        self.frames.append((address, bytes(data)))


display = Display(RecordingBus())
display.init()
display.draw_string(2, 2, "Espectro", True)
display.draw_line(0, 12, 127, 12, True)
display.draw_circle(64, 40, 10, False, True)
display.update()

assert display.get_pixel(0, 12)
```

### Setup and output

- `init()` sends the configuration sequence and clears the buffer. It does
  nothing if the display is already initialised.
- `update()` writes the buffer page by page. There are eight pages of 128
  bytes each.
- `clear()` blanks the buffer.
- `shutdown()` clears the buffer and sends the blank frame, then turns the
  panel and its charge pump off.

### Drawing

- `draw_pixel`, `draw_line` (Bresenham), `draw_circle` (midpoint, outlined
  or filled) and `draw_bitmap` ignore pixels that fall off the screen.
- `draw_bitmap` takes bitmaps in page order. Its `rotation` argument
  counts quarter turns (1, 2 or 3); any other value draws the bitmap
  unrotated.
- `draw_rectangle` wraps its corner coordinates around the screen edges.
  A filled rectangle whose wrapped span never closes raises `ValueError`.
- `draw_char` skips characters outside 0x20-0x7F.
- `draw_string` advances 8 pixels per character. It stops before a
  character that would run past the right edge.

### Reading pixels

`get_pixel(x, y)` reports whether a pixel is lit. It raises `IndexError`
for coordinates off the screen.

## Glyphs

`picospectrum.font.glyph(char)` returns the eight column bytes of the
built-in 8x8 font for characters 0x20-0x7F. Bit 0 of each byte is the top
row. It raises `ValueError` for any other character.

## Buttons

`picospectrum.button.Buttons` turns falling edges on the A (pin 5),
B (pin 6) and joystick (pin 22) pins into `ButtonEvent` values. These are
`NONE`, `A`, `B` and `JOYSTICK`.

- Feed it edges with `on_falling_edge(pin)`. Edges on other pins are
  ignored.
- Read the latest press from its `event` attribute.
- Reset `event` with `clear_event()`.

Debouncing:

- A press is ignored if it comes within 200 ms of the last accepted press
  of the same button.
- The window also counts from time zero, so presses in the first 200 ms
  are ignored.
- The constructor takes `clock`, a callable that returns microseconds. It
  defaults to a monotonic clock.

## The analyzer

`picospectrum.fft_analyzer.FFTAnalyzer(sampler, n_samples=1024,
sampling_frequency=1000)` computes the magnitude spectrum of one block of
samples. `n_samples` must be a power of two of at least 2, and
`sampling_frequency` must be positive.

- `analyze(samples)` works on readings you already have. It needs exactly
  `n_samples` of them and stores the first-half magnitudes in
  `magnitudes`.
- `run_analysis()` first calls `sampler(n_samples)` to get the readings,
  then analyses them.
- `peak_frequency()` converts the strongest bin to Hz, ignoring the DC
  bin.

The building blocks can also be used on their own:

- `fft_in_place(data)` transforms a mutable sequence of complex values
  whose length is a power of two.
- `magnitudes(spectrum)` returns the absolute values of the first half of
  a spectrum.

## The application

`picospectrum.app.FrequencyDetector(display, buttons, analyzer, reboot)`
ties the parts together. When it is constructed, it initialises the
display and shows a welcome screen.

Each call to `step()` does three things:

1. It handles the pending button event and clears it.
2. It runs an analysis, unless analysis is held.
3. It calls `render()`, which draws the current screen and sends it to the
   display.

The buttons act as follows:

- **A** cycles through the `DisplayMode` screens: `PEAK_FREQUENCY`,
  `SPECTRUM_ANALYZER` and `CHROMATIC_TUNER`.
- **B** freezes or resumes the analysis. A `[H]` marker is shown while it
  is held.
- **Joystick** shows a restart message, pauses, shuts the display down,
  pauses again and calls `reboot`.

You can also draw the screens directly:

- `draw_peak_mode(display, peak_freq)` shows the frequency with two
  decimals.
- `draw_spectrum_mode(display, magnitudes)` draws one log-scaled bar per
  column. The bars are normalised to the loudest bin. Nothing is drawn
  below a magnitude of 10.
- `draw_tuner_mode(display, peak_freq)` shows the nearest note and a
  needle at one pixel per two cents. Below 20 Hz it shows `--.--`.

`note_for_frequency(frequency)` returns a `Note` with the note `name` and
the deviation in `cents`, relative to A4 = 440 Hz in equal temperament.
It raises `ValueError` for frequencies that are not positive.

## What it does not do

The package does not read an ADC, drive GPIO interrupts or talk to an I2C
peripheral itself. Those come from the sampler, the caller of
`on_falling_edge` and the bus object that you provide.

There is no command-line program and no built-in main loop. You call
`FrequencyDetector.step()` repeatedly and decide how often to call it.