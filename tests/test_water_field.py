# tests/test_water_field.py
# Unit tests for the wave field evaluator: determinism, periodicity, bounds, color clamp
# RELEVANT FILES: python/lagoon/water.py, python/lagoon/config.py

import math

import numpy as np
import pytest

from lagoon.config import MAX_SMALL_WAVE_ITERATIONS, RippleConfig, WaveConfig
from lagoon.water import (
    big_wave,
    color_mix_factor,
    evaluate_ripple,
    evaluate_surface,
    evaluate_waves,
    ripple_displacement,
    small_waves,
    wave_elevation,
)


def _reference_config() -> WaveConfig:
    return WaveConfig(
        big_wave_elevation=0.05,
        big_wave_frequency=(1.0, 1.5),
        big_wave_speed=0.7,
        small_wave_elevation=0.3,
        small_wave_frequency=1.0,
        small_wave_speed=0.3,
        small_wave_iterations=3,
    )


def _grid(n: int = 41, extent: float = 20.0):
    xs = np.linspace(-extent, extent, n)
    return np.meshgrid(xs, xs)


def test_origin_at_time_zero_is_flat():
    cfg = _reference_config()
    assert float(wave_elevation(0.0, 0.0, 0.0, cfg)) == 0.0


def test_pinned_value_off_origin():
    cfg = _reference_config()
    x, z, t = 0.5, 0.25, 1.0
    big = math.sin(0.5 * 1.0 + 0.7) * math.sin(0.25 * 1.5 + 0.7) * 0.05
    small = 0.0
    for i in range(3):
        f = 2.0 ** i
        small += abs(math.sin(x * f + 0.3) * math.sin(z * f + 0.3)) * 0.3 / 2.0 ** i
    expected = big - small
    assert float(wave_elevation(x, z, t, cfg)) == pytest.approx(expected, abs=1e-12)


def test_deterministic_for_same_inputs():
    cfg = _reference_config()
    x, z = _grid()
    a = wave_elevation(x, z, 3.7, cfg)
    b = wave_elevation(x, z, 3.7, cfg)
    assert np.array_equal(a, b)


def test_scalar_and_grid_agree():
    cfg = _reference_config()
    x, z = _grid(9)
    grid = wave_elevation(x, z, 2.0, cfg)
    assert grid.shape == x.shape
    assert float(wave_elevation(x[3, 4], z[3, 4], 2.0, cfg)) == pytest.approx(grid[3, 4])


def test_big_wave_periodic_in_time():
    cfg = _reference_config()
    x, z = _grid()
    period = 2.0 * math.pi / cfg.big_wave_speed
    np.testing.assert_allclose(big_wave(x, z, 1.3, cfg), big_wave(x, z, 1.3 + period, cfg), atol=1e-9)


def test_small_waves_periodic_in_time():
    cfg = _reference_config()
    x, z = _grid()
    period = 2.0 * math.pi / cfg.small_wave_speed
    np.testing.assert_allclose(small_waves(x, z, 0.4, cfg), small_waves(x, z, 0.4 + period, cfg), atol=1e-9)


def test_ripple_periodic_in_time():
    cfg = RippleConfig(wave_speed=1.05)
    x, z = _grid()
    period = 2.0 * math.pi / 1.05
    np.testing.assert_allclose(
        ripple_displacement(x, z, 0.9, cfg), ripple_displacement(x, z, 0.9 + period, cfg), atol=1e-9
    )


@pytest.mark.parametrize("iterations", [0, 1, 3, 5, 8])
def test_elevation_bounded_by_amplitudes(iterations):
    cfg = _reference_config()
    cfg.small_wave_iterations = iterations
    x, z = _grid(61, 50.0)
    bound = cfg.max_amplitude()
    for t in (0.0, 1.1, 7.5, 123.4):
        assert np.all(np.abs(wave_elevation(x, z, t, cfg)) <= bound + 1e-12)


def test_small_wave_sign_flips_contribution():
    cfg = _reference_config()
    flipped = _reference_config()
    flipped.small_wave_sign = 1.0
    x, z = _grid(11)
    diff = wave_elevation(x, z, 2.0, flipped) - wave_elevation(x, z, 2.0, cfg)
    np.testing.assert_allclose(diff, 2.0 * small_waves(x, z, 2.0, cfg), atol=1e-12)


def test_zero_iterations_leaves_only_big_wave():
    cfg = _reference_config()
    cfg.small_wave_iterations = 0
    x, z = _grid(11)
    np.testing.assert_array_equal(wave_elevation(x, z, 1.0, cfg), big_wave(x, z, 1.0, cfg))


@pytest.mark.parametrize("bad", [-1, 2.5, True, "3", MAX_SMALL_WAVE_ITERATIONS + 1, 1000])
def test_invalid_iterations_rejected(bad):
    cfg = _reference_config()
    cfg.small_wave_iterations = bad
    with pytest.raises(ValueError):
        small_waves(0.0, 0.0, 0.0, cfg)


def test_elevation_rejects_unbounded_iterations_without_validate():
    cfg = WaveConfig(small_wave_iterations=1000)
    with pytest.raises(ValueError):
        wave_elevation(0.5, 0.5, 1.0, cfg)


def test_color_mix_clamped_for_extreme_inputs():
    values = np.array([-1e9, -1.0, 0.1, 0.5, 1e9, np.inf, -np.inf])
    mix = color_mix_factor(values, 0.1, 1.3)
    assert np.all(mix >= 0.0) and np.all(mix <= 1.0)
    assert mix[2] == 0.0
    assert mix[3] == pytest.approx(0.52)
    assert mix[4] == 1.0


def test_color_mix_zero_multiplier_with_infinite_elevation():
    assert float(color_mix_factor(np.inf, 0.0, 0.0)) == 0.0


def test_color_mix_scalar_input_gives_numpy_scalar():
    mix = color_mix_factor(0.5, 0.1, 1.3)
    assert isinstance(mix, np.float64)
    assert mix == pytest.approx(0.52)


def test_wave_color_interpolates_palette():
    cfg = _reference_config()
    cfg.color_near = (0.0, 0.0, 0.0)
    cfg.color_far = (1.0, 0.5, 0.25)
    sample = evaluate_waves(np.array([0.0, 1.0]), np.array([0.0, 2.0]), 0.5, cfg)
    assert sample.color.shape == (2, 3)
    np.testing.assert_allclose(sample.color, sample.mix[:, None] * np.array([1.0, 0.5, 0.25]))


def test_ripple_color_independent_of_elevation():
    cfg = RippleConfig(texture_size=10.0, color_offset=0.0, color_multiplier=1.0)
    a = evaluate_ripple(3.0, 4.0, 0.0, cfg)
    b = evaluate_ripple(3.0, 4.0, 2.7, cfg)
    assert float(a.mix) == pytest.approx(0.5)
    np.testing.assert_allclose(a.color, b.color)
    assert float(a.elevation) != pytest.approx(float(b.elevation))


def test_ripple_radially_symmetric():
    cfg = RippleConfig()
    theta = np.linspace(0.0, 2.0 * math.pi, 16)
    r = 7.3
    d = ripple_displacement(r * np.cos(theta), r * np.sin(theta), 1.2, cfg)
    np.testing.assert_allclose(d, d[0], atol=1e-12)


def test_evaluate_surface_dispatch():
    assert evaluate_surface(1.0, 1.0, 1.0, WaveConfig()).color.shape == (3,)
    assert evaluate_surface(1.0, 1.0, 1.0, RippleConfig()).color.shape == (3,)
    with pytest.raises(TypeError):
        evaluate_surface(1.0, 1.0, 1.0, object())


@pytest.mark.slow
def test_full_resolution_plane_evaluates():
    from lagoon.geometry import plane_grid

    x, z = plane_grid(100.0, 100.0, 512, 512)
    elev = wave_elevation(x, z, 10.0, _reference_config())
    assert elev.shape == (513, 513)
    assert np.isfinite(elev).all()
