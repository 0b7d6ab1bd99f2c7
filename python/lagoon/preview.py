# python/lagoon/preview.py
# Top-down CPU snapshot of the water color field
# - Deterministic RGB arrays for snapshot tests
# - Deterministic PNG writer for stable hashing
# RELEVANT FILES: python/lagoon/water.py, python/lagoon/geometry.py

from __future__ import annotations

import os
from typing import Union

import numpy as np

from .config import RippleConfig, WaveConfig
from .geometry import plane_grid
from .water import evaluate_surface


def render_color_field(
    config: Union[WaveConfig, RippleConfig],
    t: float,
    width: int = 256,
    height: int = 256,
    extent: float = 20.0,
) -> np.ndarray:
    """Evaluate the water color over a ``extent`` x ``extent`` square seen from above.

    Returns an ``(height, width, 3)`` float32 array in [0, 1].
    """
    w = int(width)
    h = int(height)
    if w <= 0 or h <= 0:
        raise ValueError("width and height must be positive")
    if extent <= 0.0:
        raise ValueError("extent must be positive")
    x, z = plane_grid(extent, extent, max(w - 1, 1), max(h - 1, 1))
    sample = evaluate_surface(x[:h, :w], z[:h, :w], t, config)
    return np.clip(np.asarray(sample.color, dtype=np.float32), 0.0, 1.0)


def save_png(path: Union[str, "os.PathLike[str]"], rgb: np.ndarray) -> None:
    """Save an RGB array as PNG with deterministic bytes."""
    try:
        from PIL import Image
    except Exception as exc:  # pragma: no cover - optional dependency
        raise ImportError("Pillow is required for save_png()") from exc

    if not isinstance(rgb, np.ndarray) or rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError("rgb must be numpy array with shape (H,W,3)")

    if rgb.dtype == np.uint8:
        arr = rgb
    else:
        arr = (np.clip(rgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)

    img = Image.fromarray(np.ascontiguousarray(arr))
    img.save(path, format="PNG", optimize=False, compress_level=6)


__all__ = [
    "render_color_field",
    "save_png",
]
