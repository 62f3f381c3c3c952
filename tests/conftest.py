"""Common test fixtures and utilities."""

from typing import List, Sequence
from unittest.mock import MagicMock

import pytest

from src.videoplayer.catalog import VideoCatalog
from src.videoplayer.models import Video
from src.videoplayer.session import SessionEngine


class CannedSelection:
    """Selection provider that answers from a fixed list of responses."""

    def __init__(self, *answers: str):
        self.answers: List[str] = list(answers)
        self.calls: List[tuple] = []

    def __call__(self, term: str, results: Sequence[Video]) -> str:
        self.calls.append((term, list(results)))
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def videos() -> List[Video]:
    """Two-video library used throughout the scenarios."""
    return [
        Video("v1", "Amazing Cats", ("cat", "animal")),
        Video("v2", "Funny Dogs", ("dog", "animal")),
    ]


@pytest.fixture
def catalog(videos) -> VideoCatalog:
    return VideoCatalog(videos)


@pytest.fixture
def library() -> VideoCatalog:
    """Larger library, in deliberately unsorted order."""
    return VideoCatalog(
        [
            Video("funny_dogs_video_id", "Funny Dogs", ("#dog", "#animal")),
            Video("amazing_cats_video_id", "Amazing Cats", ("#cat", "#animal")),
            Video("another_cat_video_id", "Another Cat Video", ("#cat", "#animal")),
            Video("life_at_google_video_id", "Life at Google", ("#google", "#career")),
            Video("nothing_video_id", "Video about nothing"),
        ]
    )


@pytest.fixture
def selection() -> CannedSelection:
    return CannedSelection()


@pytest.fixture
def canned():
    """Factory for selection providers with preset answers."""
    return CannedSelection


@pytest.fixture
def engine(catalog, selection) -> SessionEngine:
    return SessionEngine(catalog, selection_provider=selection)


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock client returning a two-video playlist
    """
    mock = MagicMock()

    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": "item1", "snippet": {"resourceId": {"videoId": "vid1"}, "title": "Video 1"}},
            {"id": "item2", "snippet": {"resourceId": {"videoId": "vid2"}, "title": "Video 2"}},
        ]
    }

    mock.videos.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": "vid1", "snippet": {"title": "Video 1", "tags": ["music", "live"]}},
            {"id": "vid2", "snippet": {"title": "Video 2"}},
        ]
    }

    return mock
