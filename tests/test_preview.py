# tests/test_preview.py
# Snapshot tests for the top-down water color preview
# RELEVANT FILES: python/lagoon/preview.py, python/lagoon/water.py

import numpy as np
import pytest

from lagoon.config import RippleConfig, WaveConfig
from lagoon.preview import render_color_field, save_png


def test_color_field_shape_and_range():
    rgb = render_color_field(WaveConfig(), 1.0, width=32, height=16)
    assert rgb.shape == (16, 32, 3)
    assert rgb.dtype == np.float32
    assert rgb.min() >= 0.0 and rgb.max() <= 1.0


def test_color_field_is_reproducible():
    a = render_color_field(WaveConfig(), 4.2, width=24, height=24)
    b = render_color_field(WaveConfig(), 4.2, width=24, height=24)
    np.testing.assert_array_equal(a, b)


def test_ripple_field_far_corner_uses_far_color():
    cfg = RippleConfig(texture_size=1.0, color_near=(0.0, 0.0, 0.0), color_far=(1.0, 1.0, 1.0))
    rgb = render_color_field(cfg, 0.0, width=9, height=9, extent=20.0)
    np.testing.assert_allclose(rgb[0, 0], 1.0)


def test_render_rejects_bad_size():
    with pytest.raises(ValueError):
        render_color_field(WaveConfig(), 0.0, width=0)


def test_save_png_deterministic(tmp_path):
    pytest.importorskip("PIL")
    rgb = render_color_field(WaveConfig(), 0.5, width=16, height=8)
    p1 = tmp_path / "a.png"
    p2 = tmp_path / "b.png"
    save_png(p1, rgb)
    save_png(p2, rgb)
    assert p1.read_bytes() == p2.read_bytes()

    from PIL import Image

    with Image.open(p1) as img:
        assert img.size == (16, 8)
        assert img.mode == "RGB"
