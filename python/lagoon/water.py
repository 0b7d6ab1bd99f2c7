# python/lagoon/water.py
# Wave field evaluator: height and color of the animated water surface at (x, z, t).
# CPU twin of the GLSL in shaders.py; pure numpy, no shared state, safe to call per vertex.
# RELEVANT FILES:python/lagoon/shaders.py,python/lagoon/geometry.py,tests/test_water_field.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from .colors import mix_colors
from .config import MAX_SMALL_WAVE_ITERATIONS, RippleConfig, WaveConfig

ArrayLike = Union[np.ndarray, float]


@dataclass(frozen=True)
class WaveSample:
    """Evaluator output for one point or a whole grid."""

    elevation: np.ndarray
    mix: np.ndarray
    color: np.ndarray


def _check_iterations(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise ValueError(f"small_wave_iterations must be a non-negative integer, got {n!r}")
    if n > MAX_SMALL_WAVE_ITERATIONS:
        raise ValueError(
            f"small_wave_iterations must be at most {MAX_SMALL_WAVE_ITERATIONS}, got {n!r}"
        )
    return int(n)


def big_wave(x: ArrayLike, z: ArrayLike, t: float, config: WaveConfig) -> np.ndarray:
    """Product of two travelling sines scaled by ``big_wave_elevation``."""
    fx, fz = config.big_wave_frequency
    phase = float(t) * config.big_wave_speed
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    return np.sin(x * fx + phase) * np.sin(z * fz + phase) * config.big_wave_elevation


def small_waves(x: ArrayLike, z: ArrayLike, t: float, config: WaveConfig) -> np.ndarray:
    """Octave sum of rectified sine products.

    Octave ``i`` runs at ``small_wave_frequency * 2**i`` with amplitude
    ``small_wave_elevation / 2**i``; every octave shares the phase
    ``t * small_wave_speed``. The sum is non-negative and bounded by
    ``small_wave_elevation * (2 - 2**(1 - n))``.
    """
    n = _check_iterations(config.small_wave_iterations)
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    phase = float(t) * config.small_wave_speed
    total = np.zeros(np.broadcast(x, z).shape, dtype=np.float64)
    freq = config.small_wave_frequency
    amp = config.small_wave_elevation
    for _ in range(n):
        total += np.abs(np.sin(x * freq + phase) * np.sin(z * freq + phase)) * amp
        freq *= 2.0
        amp *= 0.5
    return total


def wave_elevation(x: ArrayLike, z: ArrayLike, t: float, config: WaveConfig) -> np.ndarray:
    """Big wave plus ``small_wave_sign`` times the small-wave octave sum."""
    return big_wave(x, z, t, config) + config.small_wave_sign * small_waves(x, z, t, config)


def ripple_displacement(x: ArrayLike, z: ArrayLike, t: float, config: RippleConfig) -> np.ndarray:
    """Radial sine travelling outward from the origin."""
    dist = np.hypot(np.asarray(x, dtype=np.float64), np.asarray(z, dtype=np.float64))
    return np.sin(dist * config.scale_factor + float(t) * config.wave_speed) * config.wave_amplitude


def color_mix_factor(value: ArrayLike, offset: float, multiplier: float) -> np.ndarray:
    """``clamp((value - offset) * multiplier, 0, 1)``; scalar in, numpy scalar out."""
    v = np.asarray(value, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        f = (v - offset) * multiplier
    # NaN (inf * 0) collapses to the near color.
    return np.clip(np.nan_to_num(f, nan=0.0), 0.0, 1.0)[()]


def evaluate_waves(x: ArrayLike, z: ArrayLike, t: float, config: WaveConfig) -> WaveSample:
    elevation = wave_elevation(x, z, t, config)
    mix = color_mix_factor(elevation, config.color_offset, config.color_multiplier)
    return WaveSample(elevation, mix, mix_colors(config.color_near, config.color_far, mix))


def evaluate_ripple(x: ArrayLike, z: ArrayLike, t: float, config: RippleConfig) -> WaveSample:
    elevation = ripple_displacement(x, z, t, config)
    # Depth coloring depends on distance only, not on the current height.
    dist = np.hypot(np.asarray(x, dtype=np.float64), np.asarray(z, dtype=np.float64))
    mix = color_mix_factor(dist / config.texture_size, config.color_offset, config.color_multiplier)
    return WaveSample(elevation, mix, mix_colors(config.color_near, config.color_far, mix))


def evaluate_surface(x: ArrayLike, z: ArrayLike, t: float, config: Union[WaveConfig, RippleConfig]) -> WaveSample:
    """Evaluate whichever water variant ``config`` describes."""
    if isinstance(config, WaveConfig):
        return evaluate_waves(x, z, t, config)
    if isinstance(config, RippleConfig):
        return evaluate_ripple(x, z, t, config)
    raise TypeError(f"Unsupported water config: {type(config).__name__}")


__all__ = [
    "WaveSample",
    "big_wave",
    "small_waves",
    "wave_elevation",
    "ripple_displacement",
    "color_mix_factor",
    "evaluate_waves",
    "evaluate_ripple",
    "evaluate_surface",
]
