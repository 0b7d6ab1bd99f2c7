# python/lagoon/geometry.py
# Vertex grids for the water surface and their displacement by the wave evaluator
# Exists so hosts without a GPU (tests, previews) can build the same surface the shader draws
# RELEVANT FILES:python/lagoon/water.py,python/lagoon/preview.py,tests/test_geometry.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .config import RippleConfig, WaveConfig
from .water import evaluate_surface


@dataclass
class SurfaceMesh:
    """Displaced water surface: positions, per-vertex colors and triangle indices."""

    positions: np.ndarray
    colors: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0])


def plane_grid(
    width: float = 100.0,
    depth: float = 100.0,
    segments_x: int = 512,
    segments_z: int = 512,
) -> Tuple[np.ndarray, np.ndarray]:
    """Vertex coordinates of a subdivided plane lying on XZ, centred at the origin.

    Returns ``(x, z)`` arrays of shape ``(segments_z + 1, segments_x + 1)``.
    """
    if width <= 0.0 or depth <= 0.0:
        raise ValueError("width and depth must be positive")
    if segments_x < 1 or segments_z < 1:
        raise ValueError("segment counts must be >= 1")
    xs = np.linspace(-width / 2.0, width / 2.0, int(segments_x) + 1)
    zs = np.linspace(-depth / 2.0, depth / 2.0, int(segments_z) + 1)
    x, z = np.meshgrid(xs, zs)
    return x, z


def disc_grid(radius: float = 50.0, segments: int = 256, rings: int = 64) -> Tuple[np.ndarray, np.ndarray]:
    """Vertex coordinates of a disc: centre vertex followed by ``rings`` rings of ``segments`` vertices.

    Returns flat ``(x, z)`` arrays of length ``1 + rings * segments``.
    """
    if radius <= 0.0:
        raise ValueError("radius must be positive")
    if segments < 3:
        raise ValueError("segments must be >= 3")
    if rings < 1:
        raise ValueError("rings must be >= 1")
    theta = np.linspace(0.0, 2.0 * math.pi, int(segments), endpoint=False)
    r = np.linspace(radius / rings, radius, int(rings))
    rr, tt = np.meshgrid(r, theta, indexing="ij")
    x = np.concatenate(([0.0], (rr * np.cos(tt)).ravel()))
    z = np.concatenate(([0.0], (rr * np.sin(tt)).ravel()))
    return x, z


def plane_indices(segments_x: int, segments_z: int) -> np.ndarray:
    """Triangle indices (two per quad) for a grid built by :func:`plane_grid`."""
    cols = int(segments_x) + 1
    i, j = np.meshgrid(np.arange(int(segments_z)), np.arange(int(segments_x)), indexing="ij")
    a = (i * cols + j).ravel()
    b = a + 1
    c = a + cols
    d = c + 1
    tris = np.concatenate([np.stack([a, c, b], axis=1), np.stack([b, c, d], axis=1)])
    return tris.astype(np.uint32)


def displace_grid(
    x: np.ndarray,
    z: np.ndarray,
    t: float,
    config: Union[WaveConfig, RippleConfig],
    base_height: float = 1.3,
) -> np.ndarray:
    """Return ``(N, 3)`` positions with ``y = base_height + elevation``."""
    sample = evaluate_surface(x, z, t, config)
    xs = np.asarray(x, dtype=np.float64).ravel()
    zs = np.asarray(z, dtype=np.float64).ravel()
    ys = base_height + np.asarray(sample.elevation).ravel()
    return np.stack([xs, ys, zs], axis=1)


def build_surface_mesh(
    t: float,
    config: Union[WaveConfig, RippleConfig],
    *,
    width: float = 100.0,
    depth: float = 100.0,
    segments: int = 64,
    base_height: float = 1.3,
) -> SurfaceMesh:
    """Displaced, colored plane mesh at time ``t``."""
    x, z = plane_grid(width, depth, segments, segments)
    sample = evaluate_surface(x, z, t, config)
    positions = np.stack(
        [x.ravel(), base_height + np.asarray(sample.elevation).ravel(), z.ravel()], axis=1
    ).astype(np.float32)
    colors = np.asarray(sample.color, dtype=np.float32).reshape(-1, 3)
    return SurfaceMesh(positions=positions, colors=colors, indices=plane_indices(segments, segments))


__all__ = [
    "SurfaceMesh",
    "plane_grid",
    "disc_grid",
    "plane_indices",
    "displace_grid",
    "build_surface_mesh",
]
