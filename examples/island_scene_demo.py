#!/usr/bin/env python3
"""Island Scene Demo - headless host loop for the water and cloud animation.

Drives SceneAnimationController the way a render loop would: one tick per
frame at a fixed frame rate, with a scripted cloud click and day/night and
mute toggles along the way. Prints a short log of the cloud's journey and can
save a top-down color snapshot of the water.

Usage:
    # Default preset, 60 seconds at 60 fps
    python examples/island_scene_demo.py

    # Ripple variant, save a snapshot of the last frame
    python examples/island_scene_demo.py --preset ripple_disc --snapshot water.png

    # Tweak the waves
    python examples/island_scene_demo.py --set small_wave_iterations=5 --set big_wave_elevation=0.2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from lagoon import SceneAnimationController, load_scene_config, presets
from lagoon.controller import MODEL_ASSET
from lagoon.preview import render_color_field, save_png


def _parse_override(text: str):
    key, sep, raw = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Headless island scene loop")
    parser.add_argument("--preset", default="island_full", choices=presets.available())
    parser.add_argument("--config", type=Path, help="JSON scene config (overrides --preset)")
    parser.add_argument("--set", dest="overrides", action="append", type=_parse_override, default=[],
                        help="Override a scene field, e.g. small_wave_iterations=4")
    parser.add_argument("--seconds", type=float, default=60.0)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--click-at", type=float, default=1.0, help="Seconds before the cloud is clicked")
    parser.add_argument("--snapshot", type=Path, help="Save a top-down PNG of the water at the end")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    source = args.config if args.config is not None else args.preset
    cfg = load_scene_config(source, dict(args.overrides))
    ctrl = SceneAnimationController(cfg)

    # Stand-in for the model loader finishing.
    ctrl.state.assets.handle(MODEL_ASSET).resolve({"name": "island"})
    ctrl.toggle_mute()

    frames = int(args.seconds * args.fps)
    clicked = False
    last_phase = None
    update = None
    for frame in range(frames):
        elapsed = frame / args.fps
        if not clicked and elapsed >= args.click_at:
            clicked = ctrl.click(hit=True)
        if frame == frames // 2:
            ctrl.toggle_theme()
        update = ctrl.tick(elapsed)
        if update.cloud is not None and update.cloud["phase"] != last_phase:
            last_phase = update.cloud["phase"]
            print(f"t={elapsed:6.2f}s cloud {last_phase:<15} x={update.cloud['position'][0]:8.2f}")

    if update is not None:
        print(f"final uTime={update.uniforms['uTime']:.2f} night={update.is_night} "
              f"playing={sorted(ctrl.mixer.playing())}")

    if args.snapshot is not None:
        rgb = render_color_field(ctrl.config.water, ctrl.state.clock.elapsed)
        save_png(args.snapshot, rgb)
        print(f"Saved {args.snapshot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
