"""Tests for prompt commands."""

from unittest.mock import MagicMock

import pytest

from src.videoplayer.commands import COMMANDS, PlayerCommand
from src.videoplayer.commands.library import FlagVideoCommand, SearchVideosCommand
from src.videoplayer.commands.playback import PlayCommand, StopCommand
from src.videoplayer.commands.playlists import AddToPlaylistCommand
from src.videoplayer.errors import ErrorKind
from src.videoplayer.session import SessionEngine


def test_registry_names():
    """Test that every prompt command is registered under its name."""
    assert set(COMMANDS) == {
        "NUMBER_OF_VIDEOS",
        "SHOW_ALL_VIDEOS",
        "PLAY",
        "PLAY_RANDOM",
        "STOP",
        "PAUSE",
        "CONTINUE",
        "SHOW_PLAYING",
        "CREATE_PLAYLIST",
        "ADD_TO_PLAYLIST",
        "REMOVE_FROM_PLAYLIST",
        "CLEAR_PLAYLIST",
        "DELETE_PLAYLIST",
        "SHOW_PLAYLIST",
        "SHOW_ALL_PLAYLISTS",
        "SEARCH_VIDEOS",
        "SEARCH_VIDEOS_WITH_TAG",
        "FLAG_VIDEO",
        "ALLOW_VIDEO",
    }
    for command in COMMANDS.values():
        assert issubclass(command, PlayerCommand)
        assert command.help


def test_validate_accepts_expected_arguments(engine):
    cmd = StopCommand(engine)
    assert cmd.engine is engine
    cmd.validate([])


def test_validate_argument_count(engine):
    with pytest.raises(ValueError, match="Usage: PLAY <video_id>"):
        PlayCommand(engine).run([])
    with pytest.raises(ValueError, match="Usage: PLAY <video_id>"):
        PlayCommand(engine).run(["v1", "v2"])
    with pytest.raises(ValueError, match="Usage: STOP"):
        StopCommand(engine).run(["extra"])


def test_base_run_not_implemented(engine):
    with pytest.raises(NotImplementedError):
        PlayerCommand(engine).run()


def test_run_delegates_to_engine():
    engine = MagicMock(spec=SessionEngine)
    AddToPlaylistCommand(engine).run(["Pets", "v1"])
    engine.add_to_playlist.assert_called_once_with("Pets", "v1")


def test_play_command(engine):
    result = PlayCommand(engine).run(["v1"])
    assert result.ok
    assert engine.playback.current() == ("v1", True)


def test_flag_command_joins_reason(engine):
    result = FlagVideoCommand(engine).run(["v1", "not", "cute"])
    assert result.payload["reason"] == "not cute"


def test_flag_command_without_reason(engine):
    result = FlagVideoCommand(engine).run(["v1"])
    assert result.ok
    assert result.payload["reason"] is None


def test_search_command_reports_empty(engine):
    result = SearchVideosCommand(engine).run(["zebra"])
    assert result.kind is ErrorKind.EMPTY_RESULT
