"""Sampling, windowing and radix-2 FFT peak-frequency analysis."""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence, Sequence

N_SAMPLES = 1024
SAMPLING_FREQUENCY_HZ = 1000
SAMPLING_INTERVAL_US = 1_000_000 // SAMPLING_FREQUENCY_HZ

ADC_CHANNEL = 2
ADC_PIN = 26 + ADC_CHANNEL

Sampler = Callable[[int], Sequence[float]]


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def fft_in_place(data: MutableSequence[complex]) -> None:
    """Replace ``data`` by its discrete Fourier transform (iterative Cooley-Tukey).

    The length must be a power of two; lengths 0 and 1 are left unchanged.
    """
    n = len(data)
    if n <= 1:
        return
    if not _is_power_of_two(n):
        raise ValueError(f"FFT length must be a power of two, got {n}")

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            data[i], data[j] = data[j], data[i]

    length = 2
    while length <= n:
        angle = 2 * math.pi / length
        wlen = complex(math.cos(angle), -math.sin(angle))
        half = length // 2
        for start in range(0, n, length):
            w = complex(1.0, 0.0)
            for k in range(start, start + half):
                u = data[k]
                v = data[k + half] * w
                data[k] = u + v
                data[k + half] = u - v
                w *= wlen
        length <<= 1


def magnitudes(spectrum: Sequence[complex]) -> list[float]:
    """Magnitudes of the first half of an FFT result."""
    return [abs(value) for value in spectrum[: len(spectrum) // 2]]


class FFTAnalyzer:
    """Finds the dominant frequency in blocks of ADC samples.

    ``sampler`` is called with a sample count and returns that many readings
    taken at ``sampling_frequency`` Hz.
    """

    def __init__(
        self,
        sampler: Sampler,
        n_samples: int = N_SAMPLES,
        sampling_frequency: float = SAMPLING_FREQUENCY_HZ,
    ) -> None:
        if n_samples < 2 or not _is_power_of_two(n_samples):
            raise ValueError(
                f"sample count must be a power of two of at least 2, got {n_samples}"
            )
        if sampling_frequency <= 0:
            raise ValueError("sampling frequency must be positive")
        self.sampler = sampler
        self.n_samples = n_samples
        self.sampling_frequency = sampling_frequency
        self.magnitudes = [0.0] * (n_samples // 2)

    def analyze(self, samples: Sequence[float]) -> list[float]:
        """Remove DC, apply a Hann window, transform and keep the magnitudes."""
        values = [float(sample) for sample in samples]
        n = self.n_samples
        if len(values) != n:
            raise ValueError(f"expected {n} samples, got {len(values)}")

        dc_offset = sum(values) / n
        buffer = [
            complex((value - dc_offset) * 0.5 * (1.0 - math.cos(2.0 * math.pi * i / (n - 1))))
            for i, value in enumerate(values)
        ]
        fft_in_place(buffer)
        self.magnitudes = magnitudes(buffer)
        return self.magnitudes

    def run_analysis(self) -> list[float]:
        """Acquire one block from the sampler and analyse it."""
        return self.analyze(self.sampler(self.n_samples))

    def peak_frequency(self) -> float:
        """Frequency in Hz of the strongest bin, ignoring the DC bin."""
        max_magnitude = 0.0
        max_index = 0
        for index, magnitude in enumerate(self.magnitudes[1:], start=1):
            if magnitude > max_magnitude:
                max_magnitude = magnitude
                max_index = index
        return max_index * self.sampling_frequency / self.n_samples