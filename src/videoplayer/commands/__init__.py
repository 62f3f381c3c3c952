"""Command module initialization."""

from typing import Dict, Type

from .base import PlayerCommand
from .library import (
    AllowVideoCommand,
    FlagVideoCommand,
    NumberOfVideosCommand,
    SearchVideosCommand,
    SearchVideosWithTagCommand,
    ShowAllVideosCommand,
)
from .playback import (
    ContinueCommand,
    PauseCommand,
    PlayCommand,
    PlayRandomCommand,
    ShowPlayingCommand,
    StopCommand,
)
from .playlists import (
    AddToPlaylistCommand,
    ClearPlaylistCommand,
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    RemoveFromPlaylistCommand,
    ShowAllPlaylistsCommand,
    ShowPlaylistCommand,
)

COMMANDS: Dict[str, Type[PlayerCommand]] = {
    command.name: command
    for command in (
        NumberOfVideosCommand,
        ShowAllVideosCommand,
        PlayCommand,
        PlayRandomCommand,
        StopCommand,
        PauseCommand,
        ContinueCommand,
        ShowPlayingCommand,
        CreatePlaylistCommand,
        AddToPlaylistCommand,
        RemoveFromPlaylistCommand,
        ClearPlaylistCommand,
        DeletePlaylistCommand,
        ShowPlaylistCommand,
        ShowAllPlaylistsCommand,
        SearchVideosCommand,
        SearchVideosWithTagCommand,
        FlagVideoCommand,
        AllowVideoCommand,
    )
}

__all__ = ["COMMANDS", "PlayerCommand"]
