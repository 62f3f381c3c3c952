"""Playlist commands."""

from typing import List

from ..models import CommandResult
from .base import PlayerCommand


class CreatePlaylistCommand(PlayerCommand):
    name = "CREATE_PLAYLIST"
    help = "Create a new (empty) playlist with the provided name."
    usage = "CREATE_PLAYLIST <playlist_name>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.create_playlist(args[0])


class AddToPlaylistCommand(PlayerCommand):
    name = "ADD_TO_PLAYLIST"
    help = "Adds the requested video to the playlist."
    usage = "ADD_TO_PLAYLIST <playlist_name> <video_id>"
    min_args = max_args = 2

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.add_to_playlist(args[0], args[1])


class RemoveFromPlaylistCommand(PlayerCommand):
    name = "REMOVE_FROM_PLAYLIST"
    help = "Removes the specified video from the specified playlist"
    usage = "REMOVE_FROM_PLAYLIST <playlist_name> <video_id>"
    min_args = max_args = 2

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.remove_from_playlist(args[0], args[1])


class ClearPlaylistCommand(PlayerCommand):
    name = "CLEAR_PLAYLIST"
    help = "Removes all videos from the playlist."
    usage = "CLEAR_PLAYLIST <playlist_name>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.clear_playlist(args[0])


class DeletePlaylistCommand(PlayerCommand):
    name = "DELETE_PLAYLIST"
    help = "Deletes the playlist."
    usage = "DELETE_PLAYLIST <playlist_name>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.delete_playlist(args[0])


class ShowPlaylistCommand(PlayerCommand):
    name = "SHOW_PLAYLIST"
    help = "List all videos in this playlist."
    usage = "SHOW_PLAYLIST <playlist_name>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.show_playlist(args[0])


class ShowAllPlaylistsCommand(PlayerCommand):
    name = "SHOW_ALL_PLAYLISTS"
    help = "Display all the available playlists."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.show_all_playlists()
