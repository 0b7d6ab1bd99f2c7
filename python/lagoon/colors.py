"""Color conversion and mixing utilities for the water and sky palettes."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

RGB = Tuple[float, float, float]
ColorLike = Union[str, Sequence[float]]


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple (0-255 range).

    Args:
        hex_color: Color in hex format, e.g. '#1d368d' or '1d368d'

    Returns:
        Tuple of (R, G, B) values in 0-255 range

    Raises:
        ValueError: if hex color format is invalid
    """
    value = hex_color.strip().lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return (
            int(value[0:2], 16),
            int(value[2:4], 16),
            int(value[4:6], 16),
        )
    except ValueError as exc:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from exc


def rgb_to_normalized(rgb: Tuple[int, int, int]) -> RGB:
    """Convert RGB (0-255) to normalized (0.0-1.0) values."""
    return (rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Convert a normalized RGB triple back to '#rrggbb'."""
    r, g, b = (int(round(min(max(float(c), 0.0), 1.0) * 255.0)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_rgb(color: ColorLike, label: str = "color") -> RGB:
    """Accept '#rrggbb' or a sequence of three floats in [0, 1]."""
    if isinstance(color, str):
        return rgb_to_normalized(hex_to_rgb(color))
    if isinstance(color, (list, tuple, np.ndarray)) and len(color) == 3:
        out = (float(color[0]), float(color[1]), float(color[2]))
        if any(c < 0.0 or c > 1.0 for c in out):
            raise ValueError(f"{label} channels must be within [0, 1]")
        return out
    raise ValueError(f"{label} must be a hex string or a sequence of three floats")


def mix_colors(near: Sequence[float], far: Sequence[float], factor) -> np.ndarray:
    """Linear interpolation ``near -> far`` by ``factor`` (scalar or array).

    The result has shape ``factor.shape + (3,)``.
    """
    a = np.asarray(near, dtype=np.float64)
    b = np.asarray(far, dtype=np.float64)
    f = np.asarray(factor, dtype=np.float64)[..., None]
    return a + (b - a) * f
