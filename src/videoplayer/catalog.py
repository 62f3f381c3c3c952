"""Read-only video catalog."""

from typing import Dict, Iterable, List, Optional

from .errors import CatalogError, VideoNotFoundError
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)


def parse_catalog_line(line: str, line_number: int = 0) -> Optional[Video]:
    """Parse one catalog line of the form ``title | video_id | tag1, tag2``.

    Args:
        line: Raw line from a catalog file
        line_number: Line number used in error messages

    Returns:
        The parsed video, or None for a blank line

    Raises:
        CatalogError: If the line has no video identifier
    """
    if not line.strip():
        return None

    columns = [column.strip() for column in line.split("|")]
    if len(columns) < 2 or not columns[1]:
        raise CatalogError(f"Line {line_number}: expected 'title | video_id | tags'")

    title, video_id = columns[0], columns[1]
    tags = ()
    if len(columns) > 2 and columns[2]:
        tags = tuple(tag.strip() for tag in columns[2].split(",") if tag.strip())
    return Video(video_id=video_id, title=title, tags=tags)


class VideoCatalog:
    """Fixed library of videos, enumerable in load order."""

    def __init__(self, videos: Iterable[Video] = ()):
        """Initialize catalog.

        Args:
            videos: Videos to load

        Raises:
            CatalogError: If two videos share an identifier
        """
        self._videos: Dict[str, Video] = {}
        for video in videos:
            if video.video_id in self._videos:
                raise CatalogError(f"Duplicate video id: {video.video_id}")
            self._videos[video.video_id] = video

    @classmethod
    def from_file(cls, path: str) -> "VideoCatalog":
        """Load a catalog from a text file, one video per line.

        Args:
            path: Path to the catalog file

        Returns:
            The loaded catalog

        Raises:
            CatalogError: If the file is malformed or unreadable
        """
        videos: List[Video] = []
        seen = set()
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, 1):
                    video = parse_catalog_line(line, line_number)
                    if video is None:
                        continue
                    if video.video_id in seen:
                        raise CatalogError(
                            f"Line {line_number}: duplicate video id {video.video_id}"
                        )
                    seen.add(video.video_id)
                    videos.append(video)
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e

        logger.info("Loaded %d videos from %s", len(videos), path)
        return cls(videos)

    def get(self, video_id: str) -> Optional[Video]:
        return self._videos.get(video_id)

    def lookup(self, video_id: str) -> Video:
        """Get a video by identifier.

        Raises:
            VideoNotFoundError: If the identifier is unknown
        """
        video = self._videos.get(video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return video

    def list_all(self) -> List[Video]:
        return list(self._videos.values())

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._videos

    def __len__(self) -> int:
        return len(self._videos)
