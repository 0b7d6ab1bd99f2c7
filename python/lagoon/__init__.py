# python/lagoon/__init__.py
# Public Python API for the lagoon island-scene core
# Exists to re-export the wave evaluator, scene configuration and animation controller
# RELEVANT FILES: python/lagoon/water.py, python/lagoon/controller.py, tests/test_controller.py

__version__ = "0.3.0"

from .config import (
    MAX_SMALL_WAVE_ITERATIONS,
    CameraConfig,
    CloudConfig,
    RippleConfig,
    SceneVariantConfig,
    ThemePalette,
    WaveConfig,
    load_scene_config,
)
from .water import WaveSample, evaluate_surface, wave_elevation, ripple_displacement, color_mix_factor
from .animation import AnimationClock, CloudMotion, CloudMotionState, CloudPhase
from .assets import AssetHandle, AssetRegistry
from .audio import AudioMixer
from .controller import FrameUpdate, SceneAnimationController, SceneState, ThemeState
from . import presets

__all__ = [
    "__version__",
    "MAX_SMALL_WAVE_ITERATIONS",
    "CameraConfig",
    "CloudConfig",
    "RippleConfig",
    "SceneVariantConfig",
    "ThemePalette",
    "WaveConfig",
    "load_scene_config",
    "WaveSample",
    "evaluate_surface",
    "wave_elevation",
    "ripple_displacement",
    "color_mix_factor",
    "AnimationClock",
    "CloudMotion",
    "CloudMotionState",
    "CloudPhase",
    "AssetHandle",
    "AssetRegistry",
    "AudioMixer",
    "FrameUpdate",
    "SceneAnimationController",
    "SceneState",
    "ThemeState",
    "presets",
]
