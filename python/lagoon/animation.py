# python/lagoon/animation.py
"""
Frame-driven animation state for the island scene.

Provides:
    AnimationClock      - Monotonic elapsed-time source sampled once per frame
    CloudPhase          - Idle / MovingForward / MovingBack
    CloudMotionState    - Position, rotation and scale of the cloud
    CloudMotion         - Click-triggered drift state machine plus bobbing

Example:
    >>> from lagoon.animation import CloudMotion
    >>> from lagoon.config import CloudConfig
    >>> motion = CloudMotion(CloudConfig())
    >>> motion.on_click(hit=True)
    True
    >>> motion.update(elapsed=0.016)
    >>> motion.state.phase
    <CloudPhase.MOVING_FORWARD: 'moving_forward'>
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .config import CloudConfig

logger = logging.getLogger(__name__)


class AnimationClock:
    """Elapsed seconds since start; never decreases."""

    def __init__(self, time_source: Optional[Callable[[], float]] = None):
        self._time_source = time_source or time.perf_counter
        self._start = self._time_source()
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def sample(self) -> float:
        """Read the time source and advance to it."""
        return self.advance(self._time_source() - self._start)

    def advance(self, elapsed: float) -> float:
        """Move to ``elapsed`` seconds; earlier values are ignored."""
        elapsed = float(elapsed)
        if not math.isfinite(elapsed):
            raise ValueError(f"elapsed must be finite, got {elapsed!r}")
        if elapsed < self._elapsed:
            logger.debug("Ignoring clock rewind %.4f -> %.4f", self._elapsed, elapsed)
            return self._elapsed
        self._elapsed = elapsed
        return self._elapsed

    def tick(self, dt: float) -> float:
        """Add a non-negative delta in seconds."""
        if dt < 0.0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        return self.advance(self._elapsed + float(dt))

    def __repr__(self) -> str:
        return f"AnimationClock(elapsed={self._elapsed:.3f}s)"


class CloudPhase(Enum):
    IDLE = "idle"
    MOVING_FORWARD = "moving_forward"
    MOVING_BACK = "moving_back"


@dataclass
class CloudMotionState:
    """Mutable transform of the cloud plus its motion flags."""

    position: List[float] = field(default_factory=lambda: [-2.0, 6.0, -5.0])
    is_moving_forward: bool = False
    is_moving_back: bool = False
    rotation_y: float = math.pi / 6.0
    scale: float = 1.0

    @property
    def phase(self) -> CloudPhase:
        if self.is_moving_forward:
            return CloudPhase.MOVING_FORWARD
        if self.is_moving_back:
            return CloudPhase.MOVING_BACK
        return CloudPhase.IDLE

    def snapshot(self) -> dict:
        return {
            "position": tuple(self.position),
            "rotation_y": self.rotation_y,
            "scale": self.scale,
            "phase": self.phase.value,
        }


class CloudMotion:
    """Drives a :class:`CloudMotionState` one frame at a time.

    A click that hits the cloud while it is idle sends it drifting along +x.
    Past ``forward_threshold`` it wraps to ``reset_x`` and keeps drifting back
    towards its resting spot; once beyond ``idle_threshold`` it turns back to
    ``default_rotation`` and stops. Bobbing and breathing run in every phase.
    """

    def __init__(self, config: Optional[CloudConfig] = None):
        self.config = config or CloudConfig()
        self.state = CloudMotionState(
            position=list(self.config.start_position),
            rotation_y=self.config.default_rotation,
            scale=self.config.base_scale,
        )

    @property
    def phase(self) -> CloudPhase:
        return self.state.phase

    def on_click(self, hit: bool) -> bool:
        """Start the drift if ``hit`` and idle. Returns True when the drift started."""
        if not hit or self.state.phase is not CloudPhase.IDLE:
            return False
        self.state.is_moving_forward = True
        self.state.rotation_y = self.config.facing_rotation
        logger.debug("Cloud clicked; drifting forward from x=%.2f", self.state.position[0])
        return True

    def update(self, elapsed: float) -> None:
        cfg = self.config
        st = self.state
        if st.is_moving_forward:
            st.position[0] += cfg.step
            if st.position[0] > cfg.forward_threshold:
                st.position[0] = cfg.reset_x
                st.is_moving_forward = False
                st.is_moving_back = True
                logger.debug("Cloud wrapped to x=%.1f", cfg.reset_x)
        elif st.is_moving_back:
            st.position[0] += cfg.step
            if st.position[0] > cfg.idle_threshold:
                st.rotation_y = cfg.default_rotation
                st.is_moving_back = False
                logger.debug("Cloud back at rest x=%.2f", st.position[0])

        st.position[1] = cfg.start_position[1] + cfg.bob_amplitude * math.sin(elapsed * cfg.bob_speed)
        st.scale = cfg.base_scale + cfg.breath_amplitude * math.cos(elapsed * cfg.breath_speed)

    def __repr__(self) -> str:
        x = self.state.position[0]
        return f"CloudMotion(phase={self.state.phase.value}, x={x:.2f})"


__all__ = [
    "AnimationClock",
    "CloudPhase",
    "CloudMotionState",
    "CloudMotion",
]
