"""
python/lagoon/presets.py
Named island-scene presets.

Each preset returns a plain dict compatible with
python/lagoon/config.py::SceneVariantConfig.from_mapping(). The demo scene
went through several revisions that differ only in which water variant,
extras and audio tracks are wired in; the presets below capture those
revisions so one controller can drive any of them.

Example
-------
>>> from lagoon import presets
>>> from lagoon.config import load_scene_config
>>> cfg = load_scene_config(presets.get("island_full"))
>>> cfg.waves_track
'waves'
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, List


def _normalize_name(name: str) -> str:
    return "".join(c for c in str(name).strip().lower() if c not in {"-", "_", " ", "."})


# -----------------------------------------------------------------------------
# Preset definitions (schema-aligned with python/lagoon/config.py)
# -----------------------------------------------------------------------------

def raging_sea() -> Dict[str, Any]:
    """Bare water study: multi-octave waves, baked island, no cloud or audio."""
    return {
        "name": "raging_sea",
        "variant": "waves",
        "waves": {
            "big_wave_elevation": 0.05,
            "big_wave_frequency": [1.0, 1.5],
            "big_wave_speed": 0.7,
            "small_wave_elevation": 0.3,
            "small_wave_frequency": 1.0,
            "small_wave_speed": 0.3,
            "small_wave_iterations": 3,
            "color_near": "#1d368d",
            "color_far": "#008ae6",
            "color_offset": 0.1,
            "color_multiplier": 1.3,
        },
        "cloud": None,
        "has_stars": False,
        "audio_tracks": [],
        "waves_track": None,
        "click_sound": None,
    }


def island_day() -> Dict[str, Any]:
    """Island with drifting cloud, day/night toggle and two ambience tracks."""
    cfg = raging_sea()
    cfg.update({
        "name": "island_day",
        "cloud": {
            "start_position": [-2.0, 6.0, -5.0],
            "default_rotation": math.pi / 6.0,
        },
        "has_stars": True,
        "hide_cloud_at_night": False,
        "audio_tracks": ["day_ambience", "night_ambience"],
        "click_sound": "cloud_click",
    })
    return cfg


def island_full() -> Dict[str, Any]:
    """Richest revision: cloud hidden at night, starfield, independent waves track."""
    cfg = island_day()
    cfg.update({
        "name": "island_full",
        "hide_cloud_at_night": True,
        "audio_tracks": ["day_ambience", "night_ambience", "waves"],
        "waves_track": "waves",
    })
    return cfg


def ripple_disc() -> Dict[str, Any]:
    """Later revision: single radial ripple on a 256-segment disc."""
    cfg = island_full()
    cfg.update({
        "name": "ripple_disc",
        "variant": "ripple",
        "ripple": {
            "wave_speed": 1.05,
            "wave_amplitude": 0.05,
            "texture_size": 10.0,
            "color_near": "#1d368d",
            "color_far": "#008ae6",
            "color_offset": 0.0,
            "color_multiplier": 1.0,
        },
    })
    return cfg


_PRESETS: Dict[str, Callable[[], Dict[str, Any]]] = {
    "ragingsea": raging_sea,
    "islandday": island_day,
    "islandfull": island_full,
    "rippledisc": ripple_disc,
}

_CANONICAL: Dict[str, str] = {
    "ragingsea": "raging_sea",
    "islandday": "island_day",
    "islandfull": "island_full",
    "rippledisc": "ripple_disc",
}


def available() -> List[str]:
    """Return canonical preset names."""
    return [_CANONICAL[k] for k in _PRESETS]


def get(name: str) -> Dict[str, Any]:
    """Return a fresh preset mapping by name (case/underscore/dash-insensitive)."""
    key = _normalize_name(name)
    if key not in _PRESETS:
        raise ValueError(f"Unknown preset: {name!r}. Available: {', '.join(available())}")
    return _PRESETS[key]()


__all__ = [
    "available",
    "get",
    "raging_sea",
    "island_day",
    "island_full",
    "ripple_disc",
]
