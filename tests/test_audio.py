# tests/test_audio.py
# Unit tests for the audio mixer: mute handling and ambience exclusivity
# RELEVANT FILES: python/lagoon/audio.py

import pytest

from lagoon.audio import AudioMixer

TRACKS = ("day_ambience", "night_ambience", "waves")


def _sync(mixer, *, muted, is_night, waves=True):
    mixer.sync(
        muted=muted,
        is_night=is_night,
        day_track="day_ambience",
        night_track="night_ambience",
        waves_track="waves" if waves else None,
    )


@pytest.mark.parametrize("is_night", [False, True])
def test_unmuted_plays_exactly_one_ambience(is_night):
    mixer = AudioMixer(TRACKS)
    _sync(mixer, muted=False, is_night=is_night)
    expected = "night_ambience" if is_night else "day_ambience"
    assert mixer.playing() == {expected, "waves"}


def test_night_never_overlaps_day():
    mixer = AudioMixer(TRACKS)
    _sync(mixer, muted=False, is_night=False)
    for is_night in (True, False, True, True):
        _sync(mixer, muted=False, is_night=is_night)
        assert not (mixer.is_playing("day_ambience") and mixer.is_playing("night_ambience"))


def test_mute_stops_everything():
    mixer = AudioMixer(TRACKS)
    _sync(mixer, muted=False, is_night=True)
    _sync(mixer, muted=True, is_night=True)
    assert mixer.playing() == set()


def test_waves_track_optional():
    mixer = AudioMixer(("day_ambience", "night_ambience"))
    _sync(mixer, muted=False, is_night=False, waves=False)
    assert mixer.playing() == {"day_ambience"}


def test_play_unknown_track_raises():
    with pytest.raises(KeyError):
        AudioMixer(TRACKS).play("thunder")


def test_backend_receives_loop_flag():
    calls = []

    class Backend:
        def play(self, key, loop=True):
            calls.append((key, loop))

        def stop(self, key):
            calls.append((key, None))

    mixer = AudioMixer(TRACKS, backend=Backend())
    mixer.play("waves")
    mixer.play("waves")
    mixer.play_one_shot("cloud_click")
    mixer.stop("waves")
    assert calls == [("waves", True), ("cloud_click", False), ("waves", None)]
