# python/lagoon/controller.py
# Per-frame scene updater and UI event handlers for the island scene
# One controller parameterized by SceneVariantConfig replaces the per-revision scene scripts
# RELEVANT FILES:python/lagoon/animation.py,python/lagoon/audio.py,python/lagoon/shaders.py,tests/test_controller.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .animation import AnimationClock, CloudMotion
from .assets import AssetRegistry
from .audio import AudioMixer
from .camera import CameraRig, Viewport, ray_hits_sphere
from .colors import RGB
from .config import SceneVariantConfig, ThemePalette, load_scene_config
from .debug import DebugPanelBinding
from .shaders import build_uniforms

logger = logging.getLogger(__name__)

MODEL_ASSET = "model"


@dataclass
class ThemeState:
    is_night: bool = False
    # Browsers refuse autoplay, so scenes start muted until the first click.
    muted: bool = True


@dataclass
class SceneState:
    """Everything the host reads back after a tick or an event."""

    config: SceneVariantConfig
    theme: ThemeState = field(default_factory=ThemeState)
    clock: AnimationClock = field(default_factory=AnimationClock)
    cloud: Optional[CloudMotion] = None
    assets: AssetRegistry = field(default_factory=AssetRegistry)
    sky_color: RGB = (0.0, 0.0, 0.0)
    active_texture: str = ""
    stars_visible: bool = False
    cloud_visible: bool = True
    texture_needs_update: bool = False
    uniforms: Dict[str, Any] = field(default_factory=dict)

    @property
    def palette(self) -> ThemePalette:
        return self.config.night if self.theme.is_night else self.config.day


@dataclass(frozen=True)
class FrameUpdate:
    elapsed: float
    uniforms: Dict[str, Any]
    cloud: Optional[dict]
    is_night: bool
    muted: bool


class SceneAnimationController:
    """Advances the scene once per frame and reacts to UI events.

    ``renderer`` is any object exposing ``set_output_size(width, height)`` and
    ``set_device_pixel_ratio(ratio)``; ``audio_backend`` is passed to
    :class:`AudioMixer`. Both may be ``None`` for headless use.
    """

    def __init__(
        self,
        config: Any = None,
        *,
        renderer: Optional[Any] = None,
        audio_backend: Optional[Any] = None,
        clock: Optional[AnimationClock] = None,
        width: int = 1280,
        height: int = 720,
        device_pixel_ratio: float = 1.0,
    ):
        cfg = load_scene_config(config)
        self.renderer = renderer
        self.state = SceneState(config=cfg, clock=clock or AnimationClock())
        self.state.cloud = CloudMotion(cfg.cloud) if cfg.cloud is not None else None

        assets = self.state.assets
        assets.register(MODEL_ASSET)
        assets.register(cfg.day.baked_texture)
        assets.register(cfg.night.baked_texture)
        for key in cfg.audio_tracks:
            assets.register(key)
        if cfg.click_sound is not None:
            assets.register(cfg.click_sound)

        self.mixer = AudioMixer(cfg.audio_tracks, backend=audio_backend)
        self.camera = CameraRig(cfg.camera, width, height, device_pixel_ratio)
        self.debug = DebugPanelBinding(cfg.waves)
        self.debug.subscribe(self._on_debug_change)

        self._apply_theme()
        self.state.texture_needs_update = False
        self.state.uniforms = build_uniforms(cfg, self.state.clock.elapsed)
        logger.info("Scene %r ready (variant=%s)", cfg.name, cfg.variant)

    @property
    def config(self) -> SceneVariantConfig:
        return self.state.config

    # ------------------------------------------------------------------
    # Per-frame
    # ------------------------------------------------------------------

    def tick(self, elapsed: Optional[float] = None) -> FrameUpdate:
        """Advance to ``elapsed`` seconds (or sample the clock) and update state."""
        st = self.state
        now = st.clock.sample() if elapsed is None else st.clock.advance(elapsed)

        st.uniforms = build_uniforms(st.config, now)

        cloud_snapshot = None
        if self._cloud_ready():
            st.cloud.update(now)
            cloud_snapshot = st.cloud.state.snapshot()

        return FrameUpdate(
            elapsed=now,
            uniforms=st.uniforms,
            cloud=cloud_snapshot,
            is_night=st.theme.is_night,
            muted=st.theme.muted,
        )

    def _cloud_ready(self) -> bool:
        return self.state.cloud is not None and self.state.assets.is_ready(MODEL_ASSET)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def click(self, hit: bool) -> bool:
        """Feed a picking result; returns True when the cloud started moving."""
        st = self.state
        if not self._cloud_ready() or not st.cloud_visible:
            return False
        started = st.cloud.on_click(hit)
        if started and not st.theme.muted and st.config.click_sound is not None:
            self.mixer.play_one_shot(st.config.click_sound)
        return started

    def pointer_click(self, px: float, py: float) -> bool:
        """Pick the cloud under a pointer position in viewport pixels."""
        if not self._cloud_ready():
            return False
        cloud = self.state.cloud
        ray = self.camera.ray_from_pointer(px, py)
        hit = ray_hits_sphere(ray, cloud.state.position, cloud.config.pick_radius * cloud.state.scale)
        return self.click(hit)

    def toggle_theme(self) -> bool:
        """Flip day/night; returns the new ``is_night``."""
        st = self.state
        st.theme.is_night = not st.theme.is_night
        self._apply_theme()
        self._sync_audio()
        logger.info("Theme switched to %s", "night" if st.theme.is_night else "day")
        return st.theme.is_night

    def toggle_mute(self) -> bool:
        """Flip mute; returns the new ``muted``."""
        st = self.state
        st.theme.muted = not st.theme.muted
        self._sync_audio()
        logger.info("Audio %s", "muted" if st.theme.muted else "unmuted")
        return st.theme.muted

    def resize(self, width: int, height: int, device_pixel_ratio: float = 1.0) -> Viewport:
        viewport = self.camera.resize(width, height, device_pixel_ratio)
        if self.renderer is not None:
            self.renderer.set_output_size(viewport.width, viewport.height)
            self.renderer.set_device_pixel_ratio(viewport.pixel_ratio)
        logger.debug("Viewport %dx%d @%.2f", viewport.width, viewport.height, viewport.pixel_ratio)
        return viewport

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_theme(self) -> None:
        st = self.state
        palette = st.palette
        water = st.config.water
        water.color_near = palette.color_near
        water.color_far = palette.color_far
        st.sky_color = palette.sky_color
        st.active_texture = palette.baked_texture
        st.stars_visible = st.theme.is_night and st.config.has_stars
        st.cloud_visible = not (st.theme.is_night and st.config.hide_cloud_at_night)
        st.texture_needs_update = True
        st.uniforms = build_uniforms(st.config, st.clock.elapsed)

    def _sync_audio(self) -> None:
        st = self.state
        self.mixer.sync(
            muted=st.theme.muted,
            is_night=st.theme.is_night,
            day_track=st.config.day.ambience_track,
            night_track=st.config.night.ambience_track,
            waves_track=st.config.waves_track,
        )

    def _on_debug_change(self, name: str, value: Any) -> None:
        self.state.uniforms = build_uniforms(self.state.config, self.state.clock.elapsed)
