"""Moderation flags for catalog videos."""

from typing import Dict, Optional

from .catalog import VideoCatalog
from .errors import AlreadyFlaggedError, NotFlaggedError
from .logging_config import get_logger

logger = get_logger(__name__)


class FlagRegistry:
    """Flagged video identifiers and the reason each was flagged."""

    def __init__(self, catalog: VideoCatalog):
        """Initialize registry.

        Args:
            catalog: Catalog used to validate video identifiers
        """
        self.catalog = catalog
        self._flags: Dict[str, Optional[str]] = {}

    def flag(self, video_id: str, reason: Optional[str] = None) -> Optional[str]:
        """Flag a video.

        Args:
            video_id: Identifier of the video to flag
            reason: Why the video is flagged; empty means not supplied

        Returns:
            The stored reason, None when not supplied

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            AlreadyFlaggedError: If the video is already flagged
        """
        self.catalog.lookup(video_id)
        if video_id in self._flags:
            raise AlreadyFlaggedError(video_id)

        stored = reason or None
        self._flags[video_id] = stored
        logger.debug("Flagged %s (reason: %s)", video_id, stored)
        return stored

    def allow(self, video_id: str) -> None:
        """Remove the flag from a video.

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            NotFlaggedError: If the video is not flagged
        """
        self.catalog.lookup(video_id)
        if video_id not in self._flags:
            raise NotFlaggedError(video_id)
        del self._flags[video_id]
        logger.debug("Allowed %s", video_id)

    def is_flagged(self, video_id: str) -> bool:
        return video_id in self._flags

    def reason(self, video_id: str) -> Optional[str]:
        return self._flags.get(video_id)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._flags

    def __len__(self) -> int:
        return len(self._flags)
