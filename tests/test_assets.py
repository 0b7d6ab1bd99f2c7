# tests/test_assets.py
# Unit tests for asset handles: single resolution, failure, cross-thread completion
# RELEVANT FILES: python/lagoon/assets.py

import threading

import pytest

from lagoon.assets import AssetHandle, AssetRegistry


def test_pending_handle_is_not_ready():
    handle = AssetHandle("model", "island.glb")
    assert handle.ready is False
    assert handle.get("fallback") == "fallback"
    with pytest.raises(LookupError):
        handle.value


def test_resolve_once():
    handle = AssetHandle("model")
    handle.resolve("scene")
    assert handle.ready and handle.value == "scene"
    with pytest.raises(RuntimeError):
        handle.resolve("again")


def test_failed_handle_stays_not_ready():
    handle = AssetHandle("baked_day", "baked.jpg")
    handle.fail(IOError("404"))
    assert handle.failed
    assert handle.ready is False
    assert isinstance(handle.error, IOError)
    with pytest.raises(RuntimeError):
        handle.resolve("late")


def test_on_ready_callbacks():
    handle = AssetHandle("model")
    seen = []
    handle.on_ready(seen.append)
    handle.resolve(42)
    handle.on_ready(seen.append)
    assert seen == [42, 42]


def test_resolve_from_loader_thread():
    handle = AssetHandle("model")
    worker = threading.Thread(target=handle.resolve, args=("scene",))
    worker.start()
    worker.join(timeout=5.0)
    assert handle.ready and handle.value == "scene"


def test_registry_lookup():
    registry = AssetRegistry(["model", "baked_day"])
    assert registry.pending() == ["model", "baked_day"]
    registry.handle("model").resolve("scene")
    assert registry.is_ready("model")
    assert not registry.is_ready("unknown")
    assert registry.get("baked_day", "none") == "none"
    assert registry.register("model") is registry.handle("model")
    with pytest.raises(KeyError):
        registry.handle("unknown")
