# python/lagoon/shaders.py
# GLSL sources and uniform table for the water material
# The math here mirrors python/lagoon/water.py; keep the two in sync
# RELEVANT FILES:python/lagoon/water.py,python/lagoon/controller.py,tests/test_shaders.py

from __future__ import annotations

from typing import Any, Dict, Tuple

from .config import MAX_SMALL_WAVE_ITERATIONS, VARIANT_RIPPLE, VARIANT_WAVES, SceneVariantConfig

UNIFORM_NAMES: Tuple[str, ...] = (
    "uTime",
    "uBigWavesElevation",
    "uBigWavesFrequency",
    "uBigWavesSpeed",
    "uSmallWavesElevation",
    "uSmallWavesFrequency",
    "uSmallWavesSpeed",
    "uSmallWavesIterations",
    "uColorOffset",
    "uColorMultiplier",
    "uColorNear",
    "uColorFar",
    "uWaveSpeed",
    "uWaveAmplitude",
    "uTextureSize",
)

WAVE_VERTEX_SHADER = '''
#define MAX_SMALL_WAVE_ITERATIONS {max_iterations}
#define SMALL_WAVE_SIGN {small_wave_sign}

uniform mat4 projectionMatrix;
uniform mat4 viewMatrix;
uniform mat4 modelMatrix;

uniform float uTime;
uniform float uBigWavesElevation;
uniform vec2 uBigWavesFrequency;
uniform float uBigWavesSpeed;
uniform float uSmallWavesElevation;
uniform float uSmallWavesFrequency;
uniform float uSmallWavesSpeed;
uniform float uSmallWavesIterations;

attribute vec3 position;

varying float vElevation;

void main()
{{
    vec4 modelPosition = modelMatrix * vec4(position, 1.0);

    float phase = uTime * uBigWavesSpeed;
    float elevation = sin(modelPosition.x * uBigWavesFrequency.x + phase) *
                      sin(modelPosition.z * uBigWavesFrequency.y + phase) *
                      uBigWavesElevation;

    float smallPhase = uTime * uSmallWavesSpeed;
    float freq = uSmallWavesFrequency;
    float amp = uSmallWavesElevation;
    float smallTotal = 0.0;
    for(int i = 0; i < MAX_SMALL_WAVE_ITERATIONS; i++)
    {{
        if(float(i) >= uSmallWavesIterations) break;
        smallTotal += abs(sin(modelPosition.x * freq + smallPhase) *
                          sin(modelPosition.z * freq + smallPhase)) * amp;
        freq *= 2.0;
        amp *= 0.5;
    }}
    elevation += SMALL_WAVE_SIGN * smallTotal;

    modelPosition.y += elevation;
    gl_Position = projectionMatrix * viewMatrix * modelPosition;
    vElevation = elevation;
}}
'''

WAVE_FRAGMENT_SHADER = '''
precision mediump float;

uniform vec3 uColorNear;
uniform vec3 uColorFar;
uniform float uColorOffset;
uniform float uColorMultiplier;

varying float vElevation;

void main()
{
    float mixStrength = clamp((vElevation - uColorOffset) * uColorMultiplier, 0.0, 1.0);
    gl_FragColor = vec4(mix(uColorNear, uColorFar, mixStrength), 1.0);
}
'''

RIPPLE_VERTEX_SHADER = '''
uniform mat4 projectionMatrix;
uniform mat4 viewMatrix;
uniform mat4 modelMatrix;

uniform float uTime;
uniform float uWaveSpeed;
uniform float uWaveAmplitude;
uniform float uTextureSize;

attribute vec3 position;

varying float vDistance;

void main()
{
    vec4 modelPosition = modelMatrix * vec4(position, 1.0);
    float dist = length(modelPosition.xz);
    float scaleFactor = 6.283185307179586 / uTextureSize;
    modelPosition.y += sin(dist * scaleFactor + uTime * uWaveSpeed) * uWaveAmplitude;
    gl_Position = projectionMatrix * viewMatrix * modelPosition;
    vDistance = dist / uTextureSize;
}
'''

RIPPLE_FRAGMENT_SHADER = '''
precision mediump float;

uniform vec3 uColorNear;
uniform vec3 uColorFar;
uniform float uColorOffset;
uniform float uColorMultiplier;

varying float vDistance;

void main()
{
    float mixStrength = clamp((vDistance - uColorOffset) * uColorMultiplier, 0.0, 1.0);
    gl_FragColor = vec4(mix(uColorNear, uColorFar, mixStrength), 1.0);
}
'''


def shader_sources(variant: str, small_wave_sign: float = -1.0) -> Tuple[str, str]:
    """Return ``(vertex, fragment)`` GLSL for a water variant."""
    if variant == VARIANT_WAVES:
        vertex = WAVE_VERTEX_SHADER.format(
            max_iterations=MAX_SMALL_WAVE_ITERATIONS,
            small_wave_sign=f"{float(small_wave_sign):.1f}",
        )
        return vertex, WAVE_FRAGMENT_SHADER
    if variant == VARIANT_RIPPLE:
        return RIPPLE_VERTEX_SHADER, RIPPLE_FRAGMENT_SHADER
    raise ValueError(f"Unknown water variant: {variant!r}")


def build_uniforms(config: SceneVariantConfig, elapsed: float) -> Dict[str, Any]:
    """Uniform values for the current frame, keyed by ``UNIFORM_NAMES``.

    Colors come from the active variant so palette changes show up on
    whichever material is drawn.
    """
    waves = config.waves
    ripple = config.ripple
    water = config.water
    return {
        "uTime": float(elapsed),
        "uBigWavesElevation": float(waves.big_wave_elevation),
        "uBigWavesFrequency": (float(waves.big_wave_frequency[0]), float(waves.big_wave_frequency[1])),
        "uBigWavesSpeed": float(waves.big_wave_speed),
        "uSmallWavesElevation": float(waves.small_wave_elevation),
        "uSmallWavesFrequency": float(waves.small_wave_frequency),
        "uSmallWavesSpeed": float(waves.small_wave_speed),
        "uSmallWavesIterations": int(waves.small_wave_iterations),
        "uColorOffset": float(water.color_offset),
        "uColorMultiplier": float(water.color_multiplier),
        "uColorNear": tuple(float(c) for c in water.color_near),
        "uColorFar": tuple(float(c) for c in water.color_far),
        "uWaveSpeed": float(ripple.wave_speed),
        "uWaveAmplitude": float(ripple.wave_amplitude),
        "uTextureSize": float(ripple.texture_size),
    }
