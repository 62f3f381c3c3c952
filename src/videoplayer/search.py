"""Search over the unflagged part of the catalog."""

from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .catalog import VideoCatalog
from .flags import FlagRegistry
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)

# Called with the search term and the numbered results; returns the user's answer.
SelectionProvider = Callable[[str, Sequence[Video]], str]


def title_field(video: Video) -> str:
    return video.title


def tag_field(video: Video) -> str:
    return video.tag_string


class SearchField(Enum):
    """Which part of a video a search term is matched against."""

    TITLE = "title"
    TAG = "tag"

    def extract(self, video: Video) -> str:
        if self is SearchField.TAG:
            return tag_field(video)
        return title_field(video)


def numbered(results: Sequence[Video]) -> Iterator[Tuple[int, Video]]:
    """Yield results with their 1-based display index."""
    for index, video in enumerate(results, 1):
        yield index, video


def parse_selection(answer: Optional[str], result_count: int) -> Optional[int]:
    """Turn a selection answer into a 0-based result position.

    Anything that is not a number between 1 and ``result_count`` means no.

    Args:
        answer: Raw line typed by the user
        result_count: Number of results offered

    Returns:
        Position of the chosen result, or None
    """
    if answer is None:
        return None
    try:
        choice = int(answer.strip())
    except ValueError:
        return None
    if 1 <= choice <= result_count:
        return choice - 1
    return None


class SearchEngine:
    """Filters, matches and orders catalog videos."""

    def __init__(self, catalog: VideoCatalog, flags: FlagRegistry):
        self.catalog = catalog
        self.flags = flags

    def visible_videos(self) -> List[Video]:
        """Return unflagged videos in catalog order."""
        return [v for v in self.catalog.list_all() if not self.flags.is_flagged(v.video_id)]

    def search(self, term: str, field: SearchField = SearchField.TITLE) -> List[Video]:
        """Find unflagged videos whose field contains the term, ignoring case.

        Args:
            term: Substring to look for
            field: Field the term is matched against

        Returns:
            Matching videos sorted by title
        """
        needle = term.lower()
        matches = [v for v in self.visible_videos() if needle in field.extract(v).lower()]
        # sorted() is stable, so equal titles keep catalog order
        results = sorted(matches, key=lambda v: v.title)
        logger.debug("Search %s=%r matched %d videos", field.value, term, len(results))
        return results

    def select(
        self, term: str, results: Sequence[Video], provider: SelectionProvider
    ) -> Optional[Video]:
        """Ask the selection provider to pick one of the results.

        Returns:
            The chosen video, or None when the answer is not a valid choice
        """
        answer = provider(term, results)
        position = parse_selection(answer, len(results))
        if position is None:
            logger.debug("Selection %r declined", answer)
            return None
        return results[position]
