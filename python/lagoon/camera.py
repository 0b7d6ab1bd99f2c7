# python/lagoon/camera.py
# Perspective camera state, viewport resizing and pointer picking
# Orbit controls themselves belong to the host; this module only hands them their limits
# RELEVANT FILES:python/lagoon/config.py,python/lagoon/controller.py,tests/test_camera.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .config import CameraConfig


@dataclass(frozen=True)
class Ray:
    origin: np.ndarray
    direction: np.ndarray


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int
    pixel_ratio: float

    @property
    def aspect(self) -> float:
        return self.width / self.height


def _normalize(v: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    if n < 1e-12:
        raise ValueError("cannot normalize a zero-length vector")
    return v / n


class CameraRig:
    """Camera position, aspect and the orbit limits handed to the host controls."""

    def __init__(self, config: Optional[CameraConfig] = None, width: int = 1280, height: int = 720,
                 device_pixel_ratio: float = 1.0):
        self.config = config or CameraConfig()
        self.position = np.asarray(self.config.position, dtype=np.float64)
        self.target = np.asarray(self.config.target, dtype=np.float64)
        self.up = np.array([0.0, 1.0, 0.0])
        self.viewport = self._make_viewport(width, height, device_pixel_ratio)

    @property
    def aspect(self) -> float:
        return self.viewport.aspect

    def _make_viewport(self, width: int, height: int, device_pixel_ratio: float) -> Viewport:
        w = int(width)
        h = int(height)
        if w <= 0 or h <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        if device_pixel_ratio <= 0.0:
            raise ValueError("device_pixel_ratio must be positive")
        return Viewport(w, h, min(float(device_pixel_ratio), self.config.max_pixel_ratio))

    def resize(self, width: int, height: int, device_pixel_ratio: float = 1.0) -> Viewport:
        """Recompute aspect and pixel ratio for a new viewport size."""
        self.viewport = self._make_viewport(width, height, device_pixel_ratio)
        return self.viewport

    def control_settings(self) -> Dict[str, Any]:
        """Damped-orbit limits in the form the host controls expect."""
        cfg = self.config
        return {
            "enable_damping": cfg.enable_damping,
            "enable_pan": cfg.enable_pan,
            "min_polar_angle": cfg.min_polar_angle,
            "max_polar_angle": cfg.max_polar_angle,
            "min_distance": cfg.min_distance,
            "max_distance": cfg.max_distance,
            "target": tuple(float(v) for v in self.target),
        }

    def pointer_to_ndc(self, px: float, py: float) -> Tuple[float, float]:
        """Pixel coordinates (origin top-left) to normalized device coordinates."""
        vp = self.viewport
        return (px / vp.width) * 2.0 - 1.0, -(py / vp.height) * 2.0 + 1.0

    def ray_from_ndc(self, ndc_x: float, ndc_y: float) -> Ray:
        forward = _normalize(self.target - self.position)
        right = _normalize(np.cross(forward, self.up))
        up = np.cross(right, forward)
        half = math.tan(math.radians(self.config.fov_deg) / 2.0)
        direction = forward + right * (ndc_x * half * self.aspect) + up * (ndc_y * half)
        return Ray(self.position.copy(), _normalize(direction))

    def ray_from_pointer(self, px: float, py: float) -> Ray:
        return self.ray_from_ndc(*self.pointer_to_ndc(px, py))


def ray_hits_sphere(ray: Ray, center: Sequence[float], radius: float) -> bool:
    """True when ``ray`` intersects the sphere in front of its origin."""
    oc = ray.origin - np.asarray(center, dtype=np.float64)
    b = float(np.dot(oc, ray.direction))
    c = float(np.dot(oc, oc)) - radius * radius
    disc = b * b - c
    if disc < 0.0:
        return False
    root = math.sqrt(disc)
    return (-b + root) >= 0.0


__all__ = [
    "Ray",
    "Viewport",
    "CameraRig",
    "ray_hits_sphere",
]
