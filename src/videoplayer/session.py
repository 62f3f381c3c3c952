"""Session engine wiring playback, flags, playlists and search together."""

import functools
import inspect
import random
from typing import Any, Callable, Optional

from .catalog import VideoCatalog
from .errors import EmptyResultError, VideoFlaggedError, VideoPlayerError
from .flags import FlagRegistry
from .logging_config import get_logger
from .models import CommandResult, Video, VideoListing
from .playback import PlaybackState
from .playlists import PlaylistStore, playlist_key
from .search import SearchEngine, SearchField, SelectionProvider

logger = get_logger(__name__)


def reports(command: str) -> Callable[[Callable[..., CommandResult]], Callable[..., CommandResult]]:
    """Decorator turning domain errors raised by a command into error results.

    The failure payload carries the error details and the command's own
    arguments, plus the catalog entry for any ``video_id`` involved.

    Args:
        command: Name reported in the CommandResult
    """

    def decorator(func: Callable[..., CommandResult]) -> Callable[..., CommandResult]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self: "SessionEngine", *args: Any, **kwargs: Any) -> CommandResult:
            try:
                return func(self, *args, **kwargs)
            except VideoPlayerError as e:
                logger.debug("%s rejected (%s): %s", command, e.kind.value, str(e))
                bound = signature.bind(self, *args, **kwargs)
                bound.apply_defaults()
                arguments = {k: v for k, v in bound.arguments.items() if k != "self"}
                result = CommandResult.failure(command, e, **arguments)
                video = self.catalog.get(result.payload.get("video_id") or "")
                if video is not None:
                    result.payload.setdefault("video", video)
                return result

        return wrapper

    return decorator


class SessionEngine:
    """One user session over a fixed catalog.

    Every public method is one user-facing command and returns a
    CommandResult; rejected commands never raise.
    """

    def __init__(
        self,
        catalog: VideoCatalog,
        selection_provider: Optional[SelectionProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize session.

        Args:
            catalog: Videos available in this session
            selection_provider: Asked to pick a search result; None declines every search
            rng: Random source for play_random
        """
        self.catalog = catalog
        self.selection_provider = selection_provider
        self.rng = rng or random.Random()
        self.playback = PlaybackState()
        self.flags = FlagRegistry(catalog)
        self.playlists = PlaylistStore(catalog, self.flags)
        self.searcher = SearchEngine(catalog, self.flags)

    def listing(self, video: Video) -> VideoListing:
        return VideoListing(
            video=video,
            flagged=self.flags.is_flagged(video.video_id),
            flag_reason=self.flags.reason(video.video_id),
        )

    # Library

    def count(self) -> CommandResult:
        return CommandResult.success("count", count=len(self.catalog))

    def list_videos(self) -> CommandResult:
        videos = sorted(self.catalog.list_all(), key=lambda v: v.title)
        return CommandResult.success("list", videos=[self.listing(v) for v in videos])

    # Playback

    @reports("play")
    def play(self, video_id: str) -> CommandResult:
        video = self.catalog.lookup(video_id)
        if self.flags.is_flagged(video_id):
            raise VideoFlaggedError(video_id, self.flags.reason(video_id))

        stopped_id = self.playback.play(video_id)
        stopped = self.catalog.get(stopped_id) if stopped_id else None
        return CommandResult.success("play", video=video, stopped=stopped)

    @reports("play_random")
    def play_random(self) -> CommandResult:
        candidates = self.searcher.visible_videos()
        if not candidates:
            raise EmptyResultError()
        video = self.rng.choice(candidates)
        result = self.play(video.video_id)
        result.command = "play_random"
        return result

    @reports("stop")
    def stop(self) -> CommandResult:
        video_id = self.playback.stop()
        return CommandResult.success("stop", video=self.catalog.get(video_id))

    @reports("pause")
    def pause(self) -> CommandResult:
        video_id = self.playback.pause()
        return CommandResult.success("pause", video=self.catalog.get(video_id))

    @reports("resume")
    def resume(self) -> CommandResult:
        video_id = self.playback.resume()
        return CommandResult.success("resume", video=self.catalog.get(video_id))

    def show_playing(self) -> CommandResult:
        current = self.playback.current()
        if current is None:
            return CommandResult.success("show_playing", video=None, paused=False)
        video_id, is_playing = current
        listing = self.listing(self.catalog.lookup(video_id))
        return CommandResult.success("show_playing", video=listing, paused=not is_playing)

    # Playlists

    @reports("create_playlist")
    def create_playlist(self, playlist_name: str) -> CommandResult:
        self.playlists.create(playlist_name)
        return CommandResult.success("create_playlist", playlist_name=playlist_name)

    @reports("add_to_playlist")
    def add_to_playlist(self, playlist_name: str, video_id: str) -> CommandResult:
        self.playlists.add_video(playlist_key(playlist_name), video_id)
        return CommandResult.success(
            "add_to_playlist", playlist_name=playlist_name, video=self.catalog.lookup(video_id)
        )

    def show_all_playlists(self) -> CommandResult:
        return CommandResult.success("show_all_playlists", playlists=self.playlists.list())

    @reports("show_playlist")
    def show_playlist(self, playlist_name: str) -> CommandResult:
        video_ids = self.playlists.get(playlist_key(playlist_name))
        videos = [self.listing(self.catalog.lookup(video_id)) for video_id in video_ids]
        return CommandResult.success("show_playlist", playlist_name=playlist_name, videos=videos)

    @reports("remove_from_playlist")
    def remove_from_playlist(self, playlist_name: str, video_id: str) -> CommandResult:
        self.playlists.remove_video(playlist_key(playlist_name), video_id)
        return CommandResult.success(
            "remove_from_playlist",
            playlist_name=playlist_name,
            video=self.catalog.lookup(video_id),
        )

    @reports("clear_playlist")
    def clear_playlist(self, playlist_name: str) -> CommandResult:
        self.playlists.clear(playlist_key(playlist_name))
        return CommandResult.success("clear_playlist", playlist_name=playlist_name)

    @reports("delete_playlist")
    def delete_playlist(self, playlist_name: str) -> CommandResult:
        self.playlists.delete(playlist_key(playlist_name))
        return CommandResult.success("delete_playlist", playlist_name=playlist_name)

    # Search

    def _search(self, command: str, term: str, field: SearchField) -> CommandResult:
        results = self.searcher.search(term, field)
        if not results:
            raise EmptyResultError(term)

        selected = None
        playback = None
        if self.selection_provider is not None:
            selected = self.searcher.select(term, results, self.selection_provider)
        if selected is not None:
            playback = self.play(selected.video_id)

        return CommandResult.success(
            command,
            term=term,
            field=field,
            results=[self.listing(v) for v in results],
            selected=selected,
            playback=playback,
        )

    @reports("search_videos")
    def search_videos(self, term: str) -> CommandResult:
        return self._search("search_videos", term, SearchField.TITLE)

    @reports("search_videos_with_tag")
    def search_videos_with_tag(self, term: str) -> CommandResult:
        return self._search("search_videos_with_tag", term, SearchField.TAG)

    # Moderation

    @reports("flag_video")
    def flag_video(self, video_id: str, reason: Optional[str] = None) -> CommandResult:
        video = self.catalog.lookup(video_id)
        stored = self.flags.flag(video_id, reason)

        stopped = None
        if self.playback.active_video_id == video_id:
            self.playback.stop()
            stopped = video
        return CommandResult.success("flag_video", video=video, reason=stored, stopped=stopped)

    @reports("allow_video")
    def allow_video(self, video_id: str) -> CommandResult:
        self.flags.allow(video_id)
        return CommandResult.success("allow_video", video=self.catalog.lookup(video_id))
