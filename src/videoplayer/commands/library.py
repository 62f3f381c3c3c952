"""Library, search and moderation commands."""

from typing import List

from ..models import CommandResult
from .base import PlayerCommand


class NumberOfVideosCommand(PlayerCommand):
    name = "NUMBER_OF_VIDEOS"
    help = "Shows how many videos are in the library."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.count()


class ShowAllVideosCommand(PlayerCommand):
    name = "SHOW_ALL_VIDEOS"
    help = "Lists all videos from the library."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.list_videos()


class SearchVideosCommand(PlayerCommand):
    name = "SEARCH_VIDEOS"
    help = "Display all the videos whose titles contain the search_term."
    usage = "SEARCH_VIDEOS <search_term>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.search_videos(args[0])


class SearchVideosWithTagCommand(PlayerCommand):
    name = "SEARCH_VIDEOS_WITH_TAG"
    help = "Display all videos whose tags contains the provided tag."
    usage = "SEARCH_VIDEOS_WITH_TAG <tag_name>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.search_videos_with_tag(args[0])


class FlagVideoCommand(PlayerCommand):
    name = "FLAG_VIDEO"
    help = "Mark a video as flagged."
    usage = "FLAG_VIDEO <video_id> [flag_reason]"
    min_args = 1
    max_args = None

    def _run(self, args: List[str]) -> CommandResult:
        reason = " ".join(args[1:]) or None
        return self.engine.flag_video(args[0], reason)


class AllowVideoCommand(PlayerCommand):
    name = "ALLOW_VIDEO"
    help = "Removes a flag from a video."
    usage = "ALLOW_VIDEO <video_id>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.allow_video(args[0])
