"""Live-editable bindings between a debug panel and ``WaveConfig`` fields.

The panel itself (sliders, color pickers) is the host's business. This module
owns the declared ranges, clamps and snaps incoming values, writes them into
the config, and notifies observers so uniforms can be refreshed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .colors import rgb_to_hex, to_rgb
from .config import WaveConfig

logger = logging.getLogger(__name__)

Observer = Callable[[str, Any], None]


@dataclass(frozen=True)
class ParamRange:
    minimum: float
    maximum: float
    step: float

    def apply(self, value: float) -> float:
        v = min(max(float(value), self.minimum), self.maximum)
        snapped = self.minimum + round((v - self.minimum) / self.step) * self.step
        decimals = max(0, -int(math.floor(math.log10(self.step))))
        return round(min(snapped, self.maximum), decimals)


# control name -> (config field, component index or None, range)
DEFAULT_RANGES: Dict[str, Tuple[str, Optional[int], ParamRange]] = {
    "big_wave_elevation": ("big_wave_elevation", None, ParamRange(0.0, 2.0, 0.01)),
    "big_wave_frequency_x": ("big_wave_frequency", 0, ParamRange(0.0, 10.0, 0.01)),
    "big_wave_frequency_y": ("big_wave_frequency", 1, ParamRange(0.0, 10.0, 0.01)),
    "big_wave_speed": ("big_wave_speed", None, ParamRange(0.0, 4.0, 0.01)),
    "small_wave_elevation": ("small_wave_elevation", None, ParamRange(0.0, 1.0, 0.01)),
    "small_wave_frequency": ("small_wave_frequency", None, ParamRange(0.0, 20.0, 0.01)),
    "small_wave_speed": ("small_wave_speed", None, ParamRange(0.0, 4.0, 0.01)),
    "small_wave_iterations": ("small_wave_iterations", None, ParamRange(0.0, 5.0, 1.0)),
    "color_offset": ("color_offset", None, ParamRange(0.0, 1.0, 0.001)),
    "color_multiplier": ("color_multiplier", None, ParamRange(0.0, 10.0, 0.001)),
}

COLOR_CONTROLS = ("color_near", "color_far")


class DebugPanelBinding:
    """Two-way binding over one ``WaveConfig`` instance."""

    def __init__(self, config: WaveConfig, ranges: Optional[Dict[str, Tuple[str, Optional[int], ParamRange]]] = None):
        self.config = config
        self.ranges = dict(DEFAULT_RANGES if ranges is None else ranges)
        self.visible = False
        self._observers: List[Observer] = []

    def controls(self) -> List[str]:
        return list(self.ranges) + list(COLOR_CONTROLS)

    def get(self, name: str) -> Any:
        if name in COLOR_CONTROLS:
            return rgb_to_hex(getattr(self.config, name))
        field_name, index, _ = self._lookup(name)
        value = getattr(self.config, field_name)
        return value[index] if index is not None else value

    def set(self, name: str, value: Any) -> Any:
        """Write a panel value into the config and return what was stored."""
        if name in COLOR_CONTROLS:
            stored: Any = to_rgb(value, name)
            setattr(self.config, name, stored)
        else:
            field_name, index, rng = self._lookup(name)
            stored = rng.apply(value)
            if field_name == "small_wave_iterations":
                stored = int(stored)
            if index is not None:
                current = list(getattr(self.config, field_name))
                current[index] = stored
                setattr(self.config, field_name, tuple(current))
            else:
                setattr(self.config, field_name, stored)
            if stored != value:
                logger.debug("Debug control %s: %r stored as %r", name, value, stored)
        self._notify(name, stored)
        return stored

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer(name, value)``; returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def _lookup(self, name: str) -> Tuple[str, Optional[int], ParamRange]:
        if name not in self.ranges:
            raise KeyError(f"Unknown debug control: {name!r}")
        return self.ranges[name]

    def _notify(self, name: str, value: Any) -> None:
        for observer in list(self._observers):
            observer(name, value)


__all__ = [
    "ParamRange",
    "DEFAULT_RANGES",
    "COLOR_CONTROLS",
    "DebugPanelBinding",
]
