"""Audio frequency detection: FFT analysis, a 128x64 OLED frame buffer, debounced buttons and peak, spectrum and tuner screens."""

__version__ = "0.1.0"