# python/lagoon/assets.py
# Future-like handles for textures, the island model and audio buffers
# Loader callbacks resolve a handle once; the frame loop only ever polls `ready`
# RELEVANT FILES:python/lagoon/controller.py,python/lagoon/audio.py,tests/test_assets.py

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

_MISSING = object()


class AssetHandle:
    """One asynchronous load result.

    ``resolve`` and ``fail`` may be called from a loader thread; ``ready``
    and ``value`` may be read from the frame loop at any time.
    """

    def __init__(self, key: str, path: Optional[str] = None):
        self.key = key
        self.path = path
        self._lock = threading.Lock()
        self._value: Any = _MISSING
        self._error: Optional[BaseException] = None
        self._callbacks: List[Callable[[Any], None]] = []

    @property
    def ready(self) -> bool:
        with self._lock:
            return self._value is not _MISSING

    @property
    def failed(self) -> bool:
        with self._lock:
            return self._error is not None

    @property
    def error(self) -> Optional[BaseException]:
        with self._lock:
            return self._error

    @property
    def value(self) -> Any:
        with self._lock:
            if self._value is _MISSING:
                raise LookupError(f"asset {self.key!r} is not ready")
            return self._value

    def get(self, default: Any = None) -> Any:
        with self._lock:
            return default if self._value is _MISSING else self._value

    def resolve(self, value: Any) -> None:
        with self._lock:
            if self._value is not _MISSING:
                raise RuntimeError(f"asset {self.key!r} already resolved")
            if self._error is not None:
                raise RuntimeError(f"asset {self.key!r} already failed")
            self._value = value
            callbacks, self._callbacks = self._callbacks, []
        logger.debug("Asset %r ready", self.key)
        for callback in callbacks:
            callback(value)

    def fail(self, error: BaseException) -> None:
        """Record a load failure; the handle stays not-ready for good."""
        with self._lock:
            if self._value is not _MISSING:
                raise RuntimeError(f"asset {self.key!r} already resolved")
            self._error = error
            self._callbacks = []
        logger.warning("Asset %r (%s) failed to load: %s", self.key, self.path, error)

    def on_ready(self, callback: Callable[[Any], None]) -> None:
        """Call ``callback(value)`` once resolved (immediately if already ready)."""
        with self._lock:
            if self._value is _MISSING:
                if self._error is None:
                    self._callbacks.append(callback)
                return
            value = self._value
        callback(value)

    def __repr__(self) -> str:
        status = "ready" if self.ready else ("failed" if self.failed else "pending")
        return f"AssetHandle({self.key!r}, {status})"


class AssetRegistry:
    """Named asset handles for one scene."""

    def __init__(self, keys: Iterable[str] = ()):
        self._handles: Dict[str, AssetHandle] = {}
        for key in keys:
            self.register(key)

    def register(self, key: str, path: Optional[str] = None) -> AssetHandle:
        if key in self._handles:
            return self._handles[key]
        handle = AssetHandle(key, path)
        self._handles[key] = handle
        return handle

    def handle(self, key: str) -> AssetHandle:
        if key not in self._handles:
            raise KeyError(f"Unknown asset: {key!r}")
        return self._handles[key]

    def __contains__(self, key: object) -> bool:
        return key in self._handles

    def keys(self) -> List[str]:
        return list(self._handles)

    def is_ready(self, key: str) -> bool:
        handle = self._handles.get(key)
        return handle is not None and handle.ready

    def get(self, key: str, default: Any = None) -> Any:
        handle = self._handles.get(key)
        return default if handle is None else handle.get(default)

    def pending(self) -> List[str]:
        return [k for k, h in self._handles.items() if not h.ready]


__all__ = [
    "AssetHandle",
    "AssetRegistry",
]
