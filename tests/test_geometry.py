# tests/test_geometry.py
# Unit tests for water surface grids and their displacement
# RELEVANT FILES: python/lagoon/geometry.py, python/lagoon/water.py

import numpy as np
import pytest

from lagoon.config import RippleConfig, WaveConfig
from lagoon.geometry import build_surface_mesh, disc_grid, displace_grid, plane_grid, plane_indices
from lagoon.water import wave_elevation


def test_plane_grid_shape_and_extent():
    x, z = plane_grid(100.0, 50.0, 4, 2)
    assert x.shape == (3, 5)
    assert x.min() == -50.0 and x.max() == 50.0
    assert z.min() == -25.0 and z.max() == 25.0


def test_plane_grid_rejects_bad_input():
    with pytest.raises(ValueError):
        plane_grid(0.0, 1.0)
    with pytest.raises(ValueError):
        plane_grid(1.0, 1.0, 0, 1)


def test_disc_grid_radius_and_count():
    x, z = disc_grid(10.0, segments=256, rings=8)
    assert x.shape == (1 + 8 * 256,)
    r = np.hypot(x, z)
    assert r[0] == 0.0
    assert r.max() == pytest.approx(10.0)


def test_plane_indices_in_range():
    tris = plane_indices(3, 2)
    assert tris.shape == (2 * 3 * 2, 3)
    assert tris.max() == (3 + 1) * (2 + 1) - 1
    assert tris.dtype == np.uint32


def test_displace_grid_adds_base_height():
    cfg = WaveConfig()
    x, z = plane_grid(10.0, 10.0, 8, 8)
    pos = displace_grid(x, z, 1.5, cfg, base_height=1.3)
    assert pos.shape == (81, 3)
    np.testing.assert_allclose(pos[:, 1], 1.3 + wave_elevation(x, z, 1.5, cfg).ravel())
    np.testing.assert_array_equal(pos[:, 0], x.ravel())


def test_build_surface_mesh_for_ripple():
    mesh = build_surface_mesh(0.5, RippleConfig(), segments=16)
    assert mesh.vertex_count == 17 * 17
    assert mesh.triangle_count == 2 * 16 * 16
    assert mesh.colors.shape == (mesh.vertex_count, 3)
    assert np.all((mesh.colors >= 0.0) & (mesh.colors <= 1.0))
