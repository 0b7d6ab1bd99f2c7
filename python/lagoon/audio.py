# python/lagoon/audio.py
# Looping ambience tracks and one-shot effects for the island scene
# Tracks which loops should be playing; actual decoding/playback is left to a backend
# RELEVANT FILES:python/lagoon/controller.py,tests/test_audio.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass
class AudioTrack:
    """A named looping track and whether it is currently playing."""

    key: str
    loop: bool = True
    volume: float = 1.0
    playing: bool = False


class AudioMixer:
    """Set of looping tracks with day/night exclusivity.

    ``backend`` is any object with ``play(key, loop=...)`` and ``stop(key)``;
    ``None`` keeps the mixer headless (state only).
    """

    def __init__(self, tracks: Iterable[str] = (), backend: Optional[Any] = None):
        self.backend = backend
        self.tracks: Dict[str, AudioTrack] = {key: AudioTrack(key) for key in tracks}
        self.one_shots: List[str] = []

    def is_playing(self, key: str) -> bool:
        track = self.tracks.get(key)
        return track is not None and track.playing

    def playing(self) -> Set[str]:
        return {k for k, t in self.tracks.items() if t.playing}

    def play(self, key: str) -> None:
        track = self.tracks.get(key)
        if track is None:
            raise KeyError(f"Unknown audio track: {key!r}")
        if track.playing:
            return
        track.playing = True
        if self.backend is not None:
            self.backend.play(key, loop=track.loop)
        logger.debug("Audio play %s", key)

    def stop(self, key: str) -> None:
        track = self.tracks.get(key)
        if track is None or not track.playing:
            return
        track.playing = False
        if self.backend is not None:
            self.backend.stop(key)
        logger.debug("Audio stop %s", key)

    def stop_all(self) -> None:
        for key in list(self.tracks):
            self.stop(key)

    def play_one_shot(self, key: str) -> None:
        self.one_shots.append(key)
        if self.backend is not None:
            self.backend.play(key, loop=False)
        logger.debug("Audio one-shot %s", key)

    def sync(
        self,
        *,
        muted: bool,
        is_night: bool,
        day_track: str,
        night_track: str,
        waves_track: Optional[str] = None,
    ) -> None:
        """Bring the loops in line with the mute and theme flags.

        Muted: everything stops. Unmuted: exactly one ambience track (the one
        matching ``is_night``) plus the independent waves track if present.
        """
        if muted:
            self.stop_all()
            return
        active, inactive = (night_track, day_track) if is_night else (day_track, night_track)
        # Stop first so the two ambience loops never overlap.
        if inactive in self.tracks:
            self.stop(inactive)
        if active in self.tracks:
            self.play(active)
        if waves_track is not None and waves_track in self.tracks:
            self.play(waves_track)


__all__ = [
    "AudioTrack",
    "AudioMixer",
]
