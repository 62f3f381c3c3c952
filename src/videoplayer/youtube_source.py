"""Build a video catalog from a YouTube playlist."""

import re
from typing import Dict, List

from .catalog import VideoCatalog
from .config import PAGE_SIZE
from .errors import CatalogError
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)


def parse_playlist_url(playlist_str: str) -> str:
    """Extract playlist ID from a YouTube playlist URL or return the raw ID.

    Raises:
        ValueError if the input is neither a playlist URL nor an ID
    """
    url_match = re.search(r"[?&]list=([^&]+)", playlist_str)
    if url_match:
        return url_match.group(1)
    if re.match(r"^[A-Za-z0-9_-]+$", playlist_str):
        return playlist_str
    raise ValueError(f"Invalid playlist: {playlist_str}")


class YouTubeCatalogSource:
    """Reads playlist contents and video metadata from the YouTube Data API."""

    def __init__(self, youtube):
        """Initialize source.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def get_playlist_video_ids(self, playlist_id: str) -> List[str]:
        """Get the video IDs of a playlist, in playlist order, without duplicates.

        Args:
            playlist_id: ID of playlist to read

        Returns:
            List of video IDs

        Raises:
            CatalogError: If the playlist is not found or the request fails
        """
        video_ids: List[str] = []
        page_token = None

        while True:
            try:
                request = self.youtube.playlistItems().list(
                    part="snippet",
                    playlistId=playlist_id,
                    maxResults=PAGE_SIZE,
                    pageToken=page_token,
                )
                response = request.execute()
            except Exception as e:
                if "playlistNotFound" in str(e):
                    raise CatalogError(f"Playlist {playlist_id} not found") from e
                raise CatalogError("Failed to get playlist videos") from e

            for item in response.get("items", []):
                video_id = item["snippet"]["resourceId"]["videoId"]
                if video_id not in video_ids:
                    video_ids.append(video_id)

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        return video_ids

    def get_videos(self, video_ids: List[str]) -> List[Video]:
        """Get title and tags for videos, in the order given.

        Videos the API does not return (private or deleted) are skipped.

        Args:
            video_ids: IDs of videos to look up

        Returns:
            List of videos

        Raises:
            CatalogError: If a request fails
        """
        found: Dict[str, Video] = {}

        for start in range(0, len(video_ids), PAGE_SIZE):
            batch = video_ids[start : start + PAGE_SIZE]
            try:
                response = (
                    self.youtube.videos()
                    .list(part="snippet", id=",".join(batch), maxResults=PAGE_SIZE)
                    .execute()
                )
            except Exception as e:
                raise CatalogError("Failed to get video details") from e

            for item in response.get("items", []):
                snippet = item["snippet"]
                found[item["id"]] = Video(
                    video_id=item["id"],
                    title=snippet["title"],
                    tags=tuple(snippet.get("tags", [])),
                )

        videos = []
        for video_id in video_ids:
            if video_id in found:
                videos.append(found[video_id])
            else:
                logger.warning("Skipping unavailable video %s", video_id)
        return videos

    def load_catalog(self, playlist_id: str) -> VideoCatalog:
        videos = self.get_videos(self.get_playlist_video_ids(playlist_id))
        logger.info("Loaded %d videos from playlist %s", len(videos), playlist_id)
        return VideoCatalog(videos)


def load_playlist_catalog(youtube, playlist_id: str) -> VideoCatalog:
    """Build a catalog from the videos of a YouTube playlist.

    Args:
        youtube: YouTube API client
        playlist_id: ID of playlist to import

    Returns:
        Catalog holding the playlist's available videos

    Raises:
        CatalogError: If the playlist cannot be read
    """
    return YouTubeCatalogSource(youtube).load_catalog(playlist_id)
