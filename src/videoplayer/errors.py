"""Error handling utilities."""

from enum import Enum
from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


class ErrorKind(Enum):
    """Kinds of rejected commands reported back to the caller."""

    NOT_FOUND = "not_found"
    FLAGGED = "flagged"
    ALREADY_FLAGGED = "already_flagged"
    NOT_FLAGGED = "not_flagged"
    PLAYLIST_NOT_FOUND = "playlist_not_found"
    PLAYLIST_ALREADY_EXISTS = "playlist_already_exists"
    ALREADY_IN_PLAYLIST = "already_in_playlist"
    NOT_IN_PLAYLIST = "not_in_playlist"
    NONE_ACTIVE = "none_active"
    ALREADY_PAUSED = "already_paused"
    NOT_PAUSED = "not_paused"
    EMPTY_RESULT = "empty_result"


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error("%s: %s", context, str(error))
    else:
        logger.error(str(error))


class VideoPlayerError(Exception):
    """Base class for rejected session operations."""

    kind: ErrorKind

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.details = details


class VideoNotFoundError(VideoPlayerError):
    """Error raised when a video identifier is not in the catalog."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} does not exist", video_id=video_id)
        self.video_id = video_id


class VideoFlaggedError(VideoPlayerError):
    """Error raised when an operation targets a flagged video."""

    kind = ErrorKind.FLAGGED

    def __init__(self, video_id: str, reason: Optional[str] = None):
        super().__init__(
            f"Video {video_id} is currently flagged", video_id=video_id, reason=reason
        )
        self.video_id = video_id
        self.reason = reason


class AlreadyFlaggedError(VideoPlayerError):
    """Error raised when flagging a video that is already flagged."""

    kind = ErrorKind.ALREADY_FLAGGED

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} is already flagged", video_id=video_id)
        self.video_id = video_id


class NotFlaggedError(VideoPlayerError):
    """Error raised when allowing a video that is not flagged."""

    kind = ErrorKind.NOT_FLAGGED

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} is not flagged", video_id=video_id)
        self.video_id = video_id


class PlaylistNotFoundError(VideoPlayerError):
    """Error raised when a playlist is not found."""

    kind = ErrorKind.PLAYLIST_NOT_FOUND

    def __init__(self, playlist_id: str):
        super().__init__(f"Playlist {playlist_id} does not exist", playlist_id=playlist_id)
        self.playlist_id = playlist_id


class PlaylistAlreadyExistsError(VideoPlayerError):
    """Error raised when a playlist name collides with an existing one."""

    kind = ErrorKind.PLAYLIST_ALREADY_EXISTS

    def __init__(self, playlist_id: str):
        super().__init__(f"Playlist {playlist_id} already exists", playlist_id=playlist_id)
        self.playlist_id = playlist_id


class AlreadyInPlaylistError(VideoPlayerError):
    """Error raised when adding a video a playlist already holds."""

    kind = ErrorKind.ALREADY_IN_PLAYLIST

    def __init__(self, playlist_id: str, video_id: str):
        super().__init__(
            f"Video {video_id} already in playlist {playlist_id}",
            playlist_id=playlist_id,
            video_id=video_id,
        )


class NotInPlaylistError(VideoPlayerError):
    """Error raised when removing a video a playlist does not hold."""

    kind = ErrorKind.NOT_IN_PLAYLIST

    def __init__(self, playlist_id: str, video_id: str):
        super().__init__(
            f"Video {video_id} is not in playlist {playlist_id}",
            playlist_id=playlist_id,
            video_id=video_id,
        )


class NoneActiveError(VideoPlayerError):
    """Error raised when no video is playing or paused."""

    kind = ErrorKind.NONE_ACTIVE

    def __init__(self):
        super().__init__("No video is currently playing")


class AlreadyPausedError(VideoPlayerError):
    """Error raised when pausing a paused video."""

    kind = ErrorKind.ALREADY_PAUSED

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} already paused", video_id=video_id)
        self.video_id = video_id


class NotPausedError(VideoPlayerError):
    """Error raised when continuing a video that is playing."""

    kind = ErrorKind.NOT_PAUSED

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} is not paused", video_id=video_id)
        self.video_id = video_id


class EmptyResultError(VideoPlayerError):
    """Error raised when a search or random pick finds nothing eligible."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, term: Optional[str] = None):
        super().__init__("No videos available", term=term)
        self.term = term


class CatalogError(Exception):
    """Error raised when a video catalog cannot be loaded."""

    pass
