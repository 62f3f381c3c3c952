"""Tests for playback state transitions."""

import pytest

from src.videoplayer.errors import AlreadyPausedError, NoneActiveError, NotPausedError
from src.videoplayer.playback import PlaybackState


@pytest.fixture
def state():
    return PlaybackState()


def test_initial_state(state):
    assert state.current() is None
    assert not state.is_playing


def test_play(state):
    """Test playing a video with nothing active."""
    assert state.play("v1") is None
    assert state.current() == ("v1", True)


def test_play_stops_active_video(state):
    """Test that playing replaces and reports the active video."""
    state.play("v1")
    assert state.play("v2") == "v1"
    assert state.current() == ("v2", True)


def test_play_while_paused(state):
    state.play("v1")
    state.pause()
    assert state.play("v2") == "v1"
    assert state.current() == ("v2", True)


def test_stop(state):
    state.play("v1")
    assert state.stop() == "v1"
    assert state.current() is None
    assert not state.is_playing


def test_stop_nothing_active(state):
    with pytest.raises(NoneActiveError):
        state.stop()


def test_pause_and_resume(state):
    state.play("v1")
    assert state.pause() == "v1"
    assert state.current() == ("v1", False)
    assert state.resume() == "v1"
    assert state.current() == ("v1", True)


def test_pause_twice(state):
    state.play("v1")
    state.pause()
    with pytest.raises(AlreadyPausedError):
        state.pause()
    assert state.current() == ("v1", False)


def test_pause_nothing_active(state):
    with pytest.raises(NoneActiveError):
        state.pause()


def test_resume_while_playing(state):
    state.play("v1")
    with pytest.raises(NotPausedError):
        state.resume()


def test_resume_nothing_active(state):
    with pytest.raises(NoneActiveError):
        state.resume()
