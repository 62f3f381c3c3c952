"""Playback state for a single active video."""

from typing import Optional, Tuple

from .errors import AlreadyPausedError, NoneActiveError, NotPausedError
from .logging_config import get_logger

logger = get_logger(__name__)


class PlaybackState:
    """Tracks the active video and whether it is playing or paused.

    ``is_playing`` is only ever True while ``active_video_id`` is set.
    """

    def __init__(self) -> None:
        self.active_video_id: Optional[str] = None
        self.is_playing = False

    def play(self, video_id: str) -> Optional[str]:
        """Make a video the active one, stopping any video already active.

        Args:
            video_id: Identifier of the video to play

        Returns:
            Identifier of the video that was implicitly stopped, if any
        """
        stopped = None
        if self.active_video_id is not None:
            stopped = self.stop()
        self.active_video_id = video_id
        self.is_playing = True
        logger.debug("Playing %s", video_id)
        return stopped

    def stop(self) -> str:
        """Stop the active video.

        Returns:
            Identifier of the stopped video

        Raises:
            NoneActiveError: If no video is active
        """
        if self.active_video_id is None:
            raise NoneActiveError()
        stopped = self.active_video_id
        self.active_video_id = None
        self.is_playing = False
        logger.debug("Stopped %s", stopped)
        return stopped

    def pause(self) -> str:
        """Pause the active video.

        Raises:
            NoneActiveError: If no video is active
            AlreadyPausedError: If the active video is already paused
        """
        if self.active_video_id is None:
            raise NoneActiveError()
        if not self.is_playing:
            raise AlreadyPausedError(self.active_video_id)
        self.is_playing = False
        logger.debug("Paused %s", self.active_video_id)
        return self.active_video_id

    def resume(self) -> str:
        """Continue the paused active video.

        Raises:
            NoneActiveError: If no video is active
            NotPausedError: If the active video is playing
        """
        if self.active_video_id is None:
            raise NoneActiveError()
        if self.is_playing:
            raise NotPausedError(self.active_video_id)
        self.is_playing = True
        logger.debug("Continued %s", self.active_video_id)
        return self.active_video_id

    def current(self) -> Optional[Tuple[str, bool]]:
        if self.active_video_id is None:
            return None
        return self.active_video_id, self.is_playing
