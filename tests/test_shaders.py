# tests/test_shaders.py
# Tests for the shader uniform table and GLSL source selection
# RELEVANT FILES: python/lagoon/shaders.py, python/lagoon/config.py

import pytest

from lagoon.config import load_scene_config
from lagoon.shaders import UNIFORM_NAMES, build_uniforms, shader_sources


def test_uniform_names_preserved():
    assert len(UNIFORM_NAMES) == 15
    assert UNIFORM_NAMES[0] == "uTime"
    assert "uSmallWavesIterations" in UNIFORM_NAMES
    assert "uTextureSize" in UNIFORM_NAMES


def test_build_uniforms_types():
    cfg = load_scene_config("island_full")
    uniforms = build_uniforms(cfg, 2.5)
    assert tuple(uniforms) == UNIFORM_NAMES
    assert uniforms["uTime"] == 2.5
    assert uniforms["uBigWavesFrequency"] == (1.0, 1.5)
    assert isinstance(uniforms["uSmallWavesIterations"], int)
    assert len(uniforms["uColorNear"]) == 3


def test_colors_follow_active_variant():
    cfg = load_scene_config("ripple_disc", {"texture_size": 4.0})
    cfg.ripple.color_near = (1.0, 0.0, 0.0)
    uniforms = build_uniforms(cfg, 0.0)
    assert uniforms["uColorNear"] == (1.0, 0.0, 0.0)
    assert uniforms["uTextureSize"] == 4.0


@pytest.mark.parametrize("variant", ["waves", "ripple"])
def test_shader_sources_declare_their_uniforms(variant):
    vertex, fragment = shader_sources(variant)
    assert "void main()" in vertex and "void main()" in fragment
    assert "uniform float uTime;" in vertex
    assert "uniform vec3 uColorNear;" in fragment


def test_wave_shader_bakes_sign_and_bound():
    vertex, _ = shader_sources("waves", small_wave_sign=1.0)
    assert "#define SMALL_WAVE_SIGN 1.0" in vertex
    assert "#define MAX_SMALL_WAVE_ITERATIONS 8" in vertex
    assert "{" in vertex and "{{" not in vertex


def test_unknown_variant_raises():
    with pytest.raises(ValueError):
        shader_sources("lava")
