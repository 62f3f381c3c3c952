"""Named playlists of catalog videos."""

from typing import Dict, List

from .catalog import VideoCatalog
from .errors import (
    AlreadyInPlaylistError,
    NotInPlaylistError,
    PlaylistAlreadyExistsError,
    PlaylistNotFoundError,
    VideoFlaggedError,
)
from .flags import FlagRegistry
from .logging_config import get_logger

logger = get_logger(__name__)


def playlist_key(name: str) -> str:
    """Return the case-insensitive identifier for a playlist name."""
    return name.lower()


class Playlist:
    """An ordered playlist without duplicate videos."""

    def __init__(self, name: str):
        self.name = name
        self.video_ids: List[str] = []

    @property
    def playlist_id(self) -> str:
        return playlist_key(self.name)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self.video_ids

    def __len__(self) -> int:
        return len(self.video_ids)


class PlaylistStore:
    """Playlists keyed by lowercased name, kept in creation order.

    Methods other than ``create`` take the playlist identifier, which is the
    lowercased name (see ``playlist_key``).
    """

    def __init__(self, catalog: VideoCatalog, flags: FlagRegistry):
        """Initialize store.

        Args:
            catalog: Catalog used to validate video identifiers
            flags: Registry consulted before adding videos
        """
        self.catalog = catalog
        self.flags = flags
        self._playlists: Dict[str, Playlist] = {}

    def _get(self, playlist_id: str) -> Playlist:
        playlist = self._playlists.get(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(playlist_id)
        return playlist

    def create(self, name: str) -> Playlist:
        """Create an empty playlist.

        Raises:
            PlaylistAlreadyExistsError: If a playlist with the same name, ignoring case, exists
        """
        playlist_id = playlist_key(name)
        if playlist_id in self._playlists:
            raise PlaylistAlreadyExistsError(playlist_id)
        playlist = Playlist(name)
        self._playlists[playlist_id] = playlist
        logger.debug("Created playlist %s", name)
        return playlist

    def add_video(self, playlist_id: str, video_id: str) -> None:
        """Append a video to a playlist.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
            VideoFlaggedError: If the video is flagged
            VideoNotFoundError: If the video is not in the catalog
            AlreadyInPlaylistError: If the playlist already holds the video
        """
        playlist = self._get(playlist_id)
        if self.flags.is_flagged(video_id):
            raise VideoFlaggedError(video_id, self.flags.reason(video_id))
        self.catalog.lookup(video_id)
        if video_id in playlist:
            raise AlreadyInPlaylistError(playlist_id, video_id)

        playlist.video_ids.append(video_id)
        logger.debug("Added %s to playlist %s", video_id, playlist_id)

    def remove_video(self, playlist_id: str, video_id: str) -> None:
        """Remove a video from a playlist.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
            VideoNotFoundError: If the video is not in the catalog
            NotInPlaylistError: If the playlist does not hold the video
        """
        playlist = self._get(playlist_id)
        self.catalog.lookup(video_id)
        if video_id not in playlist:
            raise NotInPlaylistError(playlist_id, video_id)

        playlist.video_ids.remove(video_id)
        logger.debug("Removed %s from playlist %s", video_id, playlist_id)

    def clear(self, playlist_id: str) -> None:
        playlist = self._get(playlist_id)
        playlist.video_ids.clear()
        logger.debug("Cleared playlist %s", playlist_id)

    def delete(self, playlist_id: str) -> Playlist:
        playlist = self._get(playlist_id)
        del self._playlists[playlist_id]
        logger.debug("Deleted playlist %s", playlist_id)
        return playlist

    def list(self) -> List[str]:
        """Return playlist display names, newest first."""
        return [playlist.name for playlist in reversed(list(self._playlists.values()))]

    def get(self, playlist_id: str) -> List[str]:
        """Return the video identifiers of a playlist in insertion order.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
        """
        return list(self._get(playlist_id).video_ids)

    def __contains__(self, playlist_id: object) -> bool:
        return playlist_id in self._playlists

    def __len__(self) -> int:
        return len(self._playlists)
