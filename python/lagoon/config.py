# python/lagoon/config.py
# Scene configuration dataclasses for the water surface, cloud, camera and themes
# Exists to validate every tunable value once, before it reaches the evaluator or controller
# RELEVANT FILES: python/lagoon/presets.py, python/lagoon/water.py, tests/test_config.py
from __future__ import annotations

import copy
import json
import logging
import math
import warnings
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .colors import RGB, to_rgb

logger = logging.getLogger(__name__)

ConfigSource = Union["SceneVariantConfig", Mapping[str, Any], str, Path, None]

# Upper bound on small-wave octaves; each octave is one more sine product per vertex.
MAX_SMALL_WAVE_ITERATIONS = 8

VARIANT_WAVES = "waves"
VARIANT_RIPPLE = "ripple"

_VARIANTS: Dict[str, str] = {
    "waves": VARIANT_WAVES,
    "multioctave": VARIANT_WAVES,
    "a": VARIANT_WAVES,
    "ripple": VARIANT_RIPPLE,
    "radial": VARIANT_RIPPLE,
    "b": VARIANT_RIPPLE,
}

# Normalized key -> field name. Accepts snake_case, camelCase and shader uniform names.
_WAVE_KEYS: Dict[str, str] = {
    "bigwaveelevation": "big_wave_elevation",
    "ubigwaveselevation": "big_wave_elevation",
    "bigwavefrequency": "big_wave_frequency",
    "ubigwavesfrequency": "big_wave_frequency",
    "bigwavespeed": "big_wave_speed",
    "ubigwavesspeed": "big_wave_speed",
    "smallwaveelevation": "small_wave_elevation",
    "usmallwaveselevation": "small_wave_elevation",
    "smallwavefrequency": "small_wave_frequency",
    "usmallwavesfrequency": "small_wave_frequency",
    "smallwavespeed": "small_wave_speed",
    "usmallwavesspeed": "small_wave_speed",
    "smallwaveiterations": "small_wave_iterations",
    "usmallwavesiterations": "small_wave_iterations",
    "smallwavesign": "small_wave_sign",
    "colornear": "color_near",
    "ucolornear": "color_near",
    "udepthcolor": "color_near",
    "depthcolor": "color_near",
    "colorfar": "color_far",
    "ucolorfar": "color_far",
    "usurfacecolor": "color_far",
    "surfacecolor": "color_far",
    "coloroffset": "color_offset",
    "ucoloroffset": "color_offset",
    "colormultiplier": "color_multiplier",
    "ucolormultiplier": "color_multiplier",
}

_RIPPLE_KEYS: Dict[str, str] = {
    "wavespeed": "wave_speed",
    "uwavespeed": "wave_speed",
    "waveamplitude": "wave_amplitude",
    "uwaveamplitude": "wave_amplitude",
    "texturesize": "texture_size",
    "utexturesize": "texture_size",
    "colornear": "color_near",
    "ucolornear": "color_near",
    "colorfar": "color_far",
    "ucolorfar": "color_far",
    "coloroffset": "color_offset",
    "ucoloroffset": "color_offset",
    "colormultiplier": "color_multiplier",
    "ucolormultiplier": "color_multiplier",
}


def _normalize_key(value: Any) -> str:
    return "".join(
        c
        for c in str(value).strip().lower()
        if c not in {"-", "_", " ", "."}
    )


def _normalize_choice(value: Any, mapping: Mapping[str, str], label: str) -> str:
    key = _normalize_key(value)
    if key not in mapping:
        raise ValueError(f"Unknown {label}: {value!r}")
    return mapping[key]


def _to_float2(value: Any, label: str) -> Tuple[float, float]:
    if isinstance(value, Mapping) and "x" in value and "y" in value:
        return (float(value["x"]), float(value["y"]))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ValueError(f"{label} must be a sequence of two numeric values")


def _to_float3(value: Any, label: str) -> Tuple[float, float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return (float(value[0]), float(value[1]), float(value[2]))
    raise ValueError(f"{label} must be a sequence of three numeric values")


def _to_iterations(value: Any) -> Any:
    # Integral floats (JSON "3.0") are accepted; anything else is left for validate() to reject.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_finite(label: str, value: float) -> None:
    if not math.isfinite(float(value)):
        raise ValueError(f"{label} must be finite")


def _remap(data: Mapping[str, Any], keys: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in data.items():
        name = keys.get(_normalize_key(key))
        if name is not None:
            out[name] = value
    return out


@dataclass
class WaveConfig:
    """Multi-octave wave surface parameters (big wave minus fractal small waves)."""

    big_wave_elevation: float = 0.05
    big_wave_frequency: Tuple[float, float] = (1.0, 1.5)
    big_wave_speed: float = 0.7
    small_wave_elevation: float = 0.3
    small_wave_frequency: float = 1.0
    small_wave_speed: float = 0.3
    small_wave_iterations: int = 3
    small_wave_sign: float = -1.0
    color_near: RGB = field(default_factory=lambda: to_rgb("#1d368d"))
    color_far: RGB = field(default_factory=lambda: to_rgb("#008ae6"))
    color_offset: float = 0.1
    color_multiplier: float = 1.3

    def to_dict(self) -> dict:
        return {
            "big_wave_elevation": self.big_wave_elevation,
            "big_wave_frequency": list(self.big_wave_frequency),
            "big_wave_speed": self.big_wave_speed,
            "small_wave_elevation": self.small_wave_elevation,
            "small_wave_frequency": self.small_wave_frequency,
            "small_wave_speed": self.small_wave_speed,
            "small_wave_iterations": self.small_wave_iterations,
            "small_wave_sign": self.small_wave_sign,
            "color_near": list(self.color_near),
            "color_far": list(self.color_far),
            "color_offset": self.color_offset,
            "color_multiplier": self.color_multiplier,
        }

    def validate(self, label: str = "waves") -> None:
        n = self.small_wave_iterations
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"{label}.small_wave_iterations must be an integer, got {n!r}")
        if not (0 <= n <= MAX_SMALL_WAVE_ITERATIONS):
            raise ValueError(
                f"{label}.small_wave_iterations must be within [0, {MAX_SMALL_WAVE_ITERATIONS}], got {n}"
            )
        if self.small_wave_sign not in (-1.0, 1.0):
            raise ValueError(f"{label}.small_wave_sign must be -1 or +1")
        if self.big_wave_elevation < 0.0:
            raise ValueError(f"{label}.big_wave_elevation must be non-negative")
        if self.small_wave_elevation < 0.0:
            raise ValueError(f"{label}.small_wave_elevation must be non-negative")
        for name in ("big_wave_speed", "small_wave_frequency", "small_wave_speed",
                     "color_offset", "color_multiplier"):
            _check_finite(f"{label}.{name}", getattr(self, name))
        for value in self.big_wave_frequency:
            _check_finite(f"{label}.big_wave_frequency", value)

    def clamped(self) -> "WaveConfig":
        """Return a copy with the octave count forced into ``[0, MAX_SMALL_WAVE_ITERATIONS]``."""
        raw = self.small_wave_iterations
        try:
            value = float(raw)
        except (TypeError, ValueError):
            value = 0.0
        n = int(math.floor(value)) if math.isfinite(value) else 0
        n = max(0, min(MAX_SMALL_WAVE_ITERATIONS, n))
        if n != raw or isinstance(raw, bool):
            warnings.warn(f"small_wave_iterations {raw!r} clamped to {n}", stacklevel=2)
        return replace(self, small_wave_iterations=n)

    def max_amplitude(self) -> float:
        """Upper bound on ``|elevation|`` for this configuration."""
        n = int(self.small_wave_iterations)
        small = self.small_wave_elevation * (2.0 - 2.0 ** (1 - n)) if n > 0 else 0.0
        return self.big_wave_elevation + small

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["WaveConfig"] = None) -> "WaveConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        values = _remap(data, _WAVE_KEYS)
        if "big_wave_elevation" in values:
            base.big_wave_elevation = float(values["big_wave_elevation"])
        if "big_wave_frequency" in values:
            base.big_wave_frequency = _to_float2(values["big_wave_frequency"], "big_wave_frequency")
        if "big_wave_speed" in values:
            base.big_wave_speed = float(values["big_wave_speed"])
        if "small_wave_elevation" in values:
            base.small_wave_elevation = float(values["small_wave_elevation"])
        if "small_wave_frequency" in values:
            base.small_wave_frequency = float(values["small_wave_frequency"])
        if "small_wave_speed" in values:
            base.small_wave_speed = float(values["small_wave_speed"])
        if "small_wave_iterations" in values:
            base.small_wave_iterations = _to_iterations(values["small_wave_iterations"])
        if "small_wave_sign" in values:
            base.small_wave_sign = float(values["small_wave_sign"])
        if "color_near" in values:
            base.color_near = to_rgb(values["color_near"], "color_near")
        if "color_far" in values:
            base.color_far = to_rgb(values["color_far"], "color_far")
        if "color_offset" in values:
            base.color_offset = float(values["color_offset"])
        if "color_multiplier" in values:
            base.color_multiplier = float(values["color_multiplier"])
        return base


@dataclass
class RippleConfig:
    """Radial ripple parameters: one sine wave travelling outward from the origin."""

    wave_speed: float = 1.05
    wave_amplitude: float = 0.05
    texture_size: float = 10.0
    color_near: RGB = field(default_factory=lambda: to_rgb("#1d368d"))
    color_far: RGB = field(default_factory=lambda: to_rgb("#008ae6"))
    color_offset: float = 0.0
    color_multiplier: float = 1.0

    @property
    def scale_factor(self) -> float:
        """Spatial frequency: one full wavelength every ``texture_size`` units."""
        return 2.0 * math.pi / self.texture_size

    def to_dict(self) -> dict:
        return {
            "wave_speed": self.wave_speed,
            "wave_amplitude": self.wave_amplitude,
            "texture_size": self.texture_size,
            "color_near": list(self.color_near),
            "color_far": list(self.color_far),
            "color_offset": self.color_offset,
            "color_multiplier": self.color_multiplier,
        }

    def validate(self, label: str = "ripple") -> None:
        if not (self.texture_size > 0.0) or not math.isfinite(self.texture_size):
            raise ValueError(f"{label}.texture_size must be positive")
        if self.wave_amplitude < 0.0:
            raise ValueError(f"{label}.wave_amplitude must be non-negative")
        for name in ("wave_speed", "wave_amplitude", "color_offset", "color_multiplier"):
            _check_finite(f"{label}.{name}", getattr(self, name))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["RippleConfig"] = None) -> "RippleConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        values = _remap(data, _RIPPLE_KEYS)
        if "wave_speed" in values:
            base.wave_speed = float(values["wave_speed"])
        if "wave_amplitude" in values:
            base.wave_amplitude = float(values["wave_amplitude"])
        if "texture_size" in values:
            base.texture_size = float(values["texture_size"])
        if "color_near" in values:
            base.color_near = to_rgb(values["color_near"], "color_near")
        if "color_far" in values:
            base.color_far = to_rgb(values["color_far"], "color_far")
        if "color_offset" in values:
            base.color_offset = float(values["color_offset"])
        if "color_multiplier" in values:
            base.color_multiplier = float(values["color_multiplier"])
        return base


@dataclass
class CloudConfig:
    """Scripted cloud motion: click-triggered drift plus continuous bobbing."""

    start_position: Tuple[float, float, float] = (-2.0, 6.0, -5.0)
    step: float = 0.3
    forward_threshold: float = 100.0
    reset_x: float = -100.0
    idle_threshold: float = -2.0
    default_rotation: float = math.pi / 6.0
    facing_rotation: float = -math.pi / 2.0
    bob_amplitude: float = 0.3
    bob_speed: float = 1.0
    base_scale: float = 1.0
    breath_amplitude: float = 0.05
    breath_speed: float = 0.8
    pick_radius: float = 2.5

    def to_dict(self) -> dict:
        return {
            "start_position": list(self.start_position),
            "step": self.step,
            "forward_threshold": self.forward_threshold,
            "reset_x": self.reset_x,
            "idle_threshold": self.idle_threshold,
            "default_rotation": self.default_rotation,
            "facing_rotation": self.facing_rotation,
            "bob_amplitude": self.bob_amplitude,
            "bob_speed": self.bob_speed,
            "base_scale": self.base_scale,
            "breath_amplitude": self.breath_amplitude,
            "breath_speed": self.breath_speed,
            "pick_radius": self.pick_radius,
        }

    def validate(self, label: str = "cloud") -> None:
        if self.step <= 0.0:
            raise ValueError(f"{label}.step must be positive")
        if not (self.reset_x < self.idle_threshold < self.forward_threshold):
            raise ValueError(f"{label} thresholds must satisfy reset_x < idle_threshold < forward_threshold")
        if self.base_scale <= 0.0:
            raise ValueError(f"{label}.base_scale must be positive")
        if self.breath_amplitude < 0.0 or self.breath_amplitude >= self.base_scale:
            raise ValueError(f"{label}.breath_amplitude must be within [0, base_scale)")
        if self.pick_radius <= 0.0:
            raise ValueError(f"{label}.pick_radius must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["CloudConfig"] = None) -> "CloudConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "start_position" in data:
            base.start_position = _to_float3(data["start_position"], "cloud.start_position")
        for name in ("step", "forward_threshold", "reset_x", "idle_threshold", "default_rotation",
                     "facing_rotation", "bob_amplitude", "bob_speed", "base_scale",
                     "breath_amplitude", "breath_speed", "pick_radius"):
            if name in data:
                setattr(base, name, float(data[name]))
        return base


@dataclass
class CameraConfig:
    """Perspective camera and damped-orbit limits."""

    fov_deg: float = 45.0
    near: float = 0.1
    far: float = 1000.0
    position: Tuple[float, float, float] = (-2.0, 9.0, 15.0)
    target: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    min_polar_angle: float = math.pi / 3.0
    max_polar_angle: float = math.pi / 3.0
    min_distance: float = 5.0
    max_distance: float = 40.0
    enable_pan: bool = False
    enable_damping: bool = True
    max_pixel_ratio: float = 2.0

    def to_dict(self) -> dict:
        return {
            "fov_deg": self.fov_deg,
            "near": self.near,
            "far": self.far,
            "position": list(self.position),
            "target": list(self.target),
            "min_polar_angle": self.min_polar_angle,
            "max_polar_angle": self.max_polar_angle,
            "min_distance": self.min_distance,
            "max_distance": self.max_distance,
            "enable_pan": self.enable_pan,
            "enable_damping": self.enable_damping,
            "max_pixel_ratio": self.max_pixel_ratio,
        }

    def validate(self, label: str = "camera") -> None:
        if not (0.0 < self.fov_deg < 180.0):
            raise ValueError(f"{label}.fov_deg must be within (0, 180)")
        if not (0.0 < self.near < self.far):
            raise ValueError(f"{label} requires 0 < near < far")
        if not (0.0 <= self.min_polar_angle <= self.max_polar_angle <= math.pi):
            raise ValueError(f"{label} polar angles must satisfy 0 <= min <= max <= pi")
        if not (0.0 < self.min_distance <= self.max_distance):
            raise ValueError(f"{label} requires 0 < min_distance <= max_distance")
        if self.max_pixel_ratio <= 0.0:
            raise ValueError(f"{label}.max_pixel_ratio must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["CameraConfig"] = None) -> "CameraConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "position" in data:
            base.position = _to_float3(data["position"], "camera.position")
        if "target" in data:
            base.target = _to_float3(data["target"], "camera.target")
        for name in ("fov_deg", "near", "far", "min_polar_angle", "max_polar_angle",
                     "min_distance", "max_distance", "max_pixel_ratio"):
            if name in data:
                setattr(base, name, float(data[name]))
        if "enable_pan" in data:
            base.enable_pan = bool(data["enable_pan"])
        if "enable_damping" in data:
            base.enable_damping = bool(data["enable_damping"])
        return base


@dataclass
class ThemePalette:
    """Colors, baked texture and ambience track for one time of day."""

    color_near: RGB
    color_far: RGB
    sky_color: RGB
    baked_texture: str
    ambience_track: str

    def to_dict(self) -> dict:
        return {
            "color_near": list(self.color_near),
            "color_far": list(self.color_far),
            "sky_color": list(self.sky_color),
            "baked_texture": self.baked_texture,
            "ambience_track": self.ambience_track,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: "ThemePalette") -> "ThemePalette":
        base = copy.deepcopy(default)
        if "color_near" in data:
            base.color_near = to_rgb(data["color_near"], "color_near")
        if "color_far" in data:
            base.color_far = to_rgb(data["color_far"], "color_far")
        if "sky_color" in data:
            base.sky_color = to_rgb(data["sky_color"], "sky_color")
        if "baked_texture" in data:
            base.baked_texture = str(data["baked_texture"])
        if "ambience_track" in data:
            base.ambience_track = str(data["ambience_track"])
        return base


def day_palette() -> ThemePalette:
    return ThemePalette(
        color_near=to_rgb("#1d368d"),
        color_far=to_rgb("#008ae6"),
        sky_color=to_rgb("#87ceeb"),
        baked_texture="baked_day",
        ambience_track="day_ambience",
    )


def night_palette() -> ThemePalette:
    return ThemePalette(
        color_near=to_rgb("#0b1533"),
        color_far=to_rgb("#1a3a6b"),
        sky_color=to_rgb("#0a0e1f"),
        baked_texture="baked_night",
        ambience_track="night_ambience",
    )


@dataclass
class SceneVariantConfig:
    """One island scene: which water variant, which extras, which palettes."""

    name: str = "custom"
    variant: str = VARIANT_WAVES
    waves: WaveConfig = field(default_factory=WaveConfig)
    ripple: RippleConfig = field(default_factory=RippleConfig)
    cloud: Optional[CloudConfig] = field(default_factory=CloudConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    day: ThemePalette = field(default_factory=day_palette)
    night: ThemePalette = field(default_factory=night_palette)
    has_stars: bool = True
    hide_cloud_at_night: bool = False
    audio_tracks: Tuple[str, ...] = ("day_ambience", "night_ambience")
    waves_track: Optional[str] = None
    click_sound: Optional[str] = "cloud_click"
    water_base_height: float = 1.3

    @property
    def water(self) -> Union[WaveConfig, RippleConfig]:
        """The water parameters for the active variant."""
        return self.waves if self.variant == VARIANT_WAVES else self.ripple

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "variant": self.variant,
            "waves": self.waves.to_dict(),
            "ripple": self.ripple.to_dict(),
            "cloud": self.cloud.to_dict() if self.cloud is not None else None,
            "camera": self.camera.to_dict(),
            "day": self.day.to_dict(),
            "night": self.night.to_dict(),
            "has_stars": self.has_stars,
            "hide_cloud_at_night": self.hide_cloud_at_night,
            "audio_tracks": list(self.audio_tracks),
            "waves_track": self.waves_track,
            "click_sound": self.click_sound,
            "water_base_height": self.water_base_height,
        }

    def copy(self) -> "SceneVariantConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        if self.variant not in (VARIANT_WAVES, VARIANT_RIPPLE):
            raise ValueError(f"Unknown water variant: {self.variant!r}")
        self.waves.validate("waves")
        self.ripple.validate("ripple")
        if self.cloud is not None:
            self.cloud.validate("cloud")
        self.camera.validate("camera")
        tracks = set(self.audio_tracks)
        for palette, label in ((self.day, "day"), (self.night, "night")):
            if tracks and palette.ambience_track not in tracks:
                raise ValueError(f"{label}.ambience_track {palette.ambience_track!r} is not in audio_tracks")
        if self.day.ambience_track == self.night.ambience_track and tracks:
            raise ValueError("day and night ambience tracks must differ")
        if self.waves_track is not None and self.waves_track in (self.day.ambience_track, self.night.ambience_track):
            raise ValueError("waves_track must be independent of the ambience tracks")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["SceneVariantConfig"] = None) -> "SceneVariantConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "name" in data:
            base.name = str(data["name"])
        if "variant" in data:
            base.variant = _normalize_choice(data["variant"], _VARIANTS, "water variant")
        for key, section in (("waves", WaveConfig), ("ripple", RippleConfig), ("camera", CameraConfig)):
            if key in data:
                if not isinstance(data[key], Mapping):
                    raise TypeError(f"{key} must be a mapping")
                setattr(base, key, section.from_mapping(data[key], getattr(base, key)))
        if "cloud" in data:
            if data["cloud"] is None:
                base.cloud = None
            elif isinstance(data["cloud"], Mapping):
                base.cloud = CloudConfig.from_mapping(data["cloud"], base.cloud)
            else:
                raise TypeError("cloud must be a mapping or None")
        for key in ("day", "night"):
            if key in data:
                if not isinstance(data[key], Mapping):
                    raise TypeError(f"{key} must be a mapping")
                setattr(base, key, ThemePalette.from_mapping(data[key], getattr(base, key)))
        # Water colors given without a day palette become the day palette.
        water_key = "waves" if base.variant == VARIANT_WAVES else "ripple"
        if "day" not in data and isinstance(data.get(water_key), Mapping):
            given = _remap(data[water_key], _WAVE_KEYS if water_key == "waves" else _RIPPLE_KEYS)
            if "color_near" in given:
                base.day.color_near = base.water.color_near
            if "color_far" in given:
                base.day.color_far = base.water.color_far
        if "has_stars" in data:
            base.has_stars = bool(data["has_stars"])
        if "hide_cloud_at_night" in data:
            base.hide_cloud_at_night = bool(data["hide_cloud_at_night"])
        if "audio_tracks" in data:
            raw = data["audio_tracks"]
            items = [raw] if isinstance(raw, str) else list(raw or [])
            base.audio_tracks = tuple(str(item) for item in items)
        if "waves_track" in data:
            base.waves_track = None if data["waves_track"] is None else str(data["waves_track"])
        if "click_sound" in data:
            base.click_sound = None if data["click_sound"] is None else str(data["click_sound"])
        if "water_base_height" in data:
            base.water_base_height = float(data["water_base_height"])
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        return json.loads(text)
    raise ValueError(f"Unsupported scene config file format: {path}")


def _build_override_mapping(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in overrides.items():
        norm = _normalize_key(key)
        matched = False
        if norm in _WAVE_KEYS:
            out.setdefault("waves", {})[key] = value
            matched = True
        if norm in _RIPPLE_KEYS:
            out.setdefault("ripple", {})[key] = value
            matched = True
        if matched:
            continue
        if key in {"variant", "name", "has_stars", "hide_cloud_at_night", "audio_tracks",
                   "waves_track", "click_sound", "water_base_height", "cloud"}:
            out[key] = value
        elif key in {"waves", "ripple", "camera", "day", "night"}:
            if not isinstance(value, Mapping):
                raise TypeError(f"{key} override must be a mapping")
            out.setdefault(key, {}).update(value)
        else:
            logger.warning("Ignoring unknown scene override %r", key)
    return out


def load_scene_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> SceneVariantConfig:
    """Build and validate a scene configuration.

    ``config`` may be a ``SceneVariantConfig``, a mapping, a JSON file path,
    a preset name, or ``None`` for the defaults. Flat ``overrides`` such as
    ``{"small_wave_iterations": 4}`` are merged on top.
    """
    if isinstance(config, SceneVariantConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = SceneVariantConfig.from_mapping(config)
    elif isinstance(config, Path) or (isinstance(config, str) and (config.endswith(".json") or Path(config).is_file())):
        cfg = SceneVariantConfig.from_mapping(_load_from_path(Path(config)))
        logger.info("Loaded scene config from %s", config)
    elif isinstance(config, str):
        from . import presets

        cfg = SceneVariantConfig.from_mapping(presets.get(config))
    elif config is None:
        cfg = SceneVariantConfig()
    else:
        raise TypeError("config must be SceneVariantConfig, mapping, path, preset name, or None")

    if overrides:
        merged = _build_override_mapping(overrides)
        if merged:
            cfg = SceneVariantConfig.from_mapping(merged, cfg)
    cfg.validate()
    return cfg
