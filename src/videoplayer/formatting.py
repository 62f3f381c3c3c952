"""Text rendering of command results."""

from typing import Callable, Dict, List, Optional, Sequence, Union

from .errors import ErrorKind
from .models import CommandResult, Video, VideoListing
from .search import numbered

NOT_SUPPLIED = "Not supplied"

SELECTION_PROMPT = [
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
]


def format_reason(reason: Optional[str]) -> str:
    return reason or NOT_SUPPLIED


def format_video_details(entry: Union[Video, VideoListing]) -> str:
    """Format a video as ``Title (id) [tags]``, annotated when flagged."""
    if isinstance(entry, VideoListing):
        video, flagged, reason = entry.video, entry.flagged, entry.flag_reason
    else:
        video, flagged, reason = entry, False, None

    details = f"{video.title} ({video.video_id}) [{video.tag_string}]"
    if flagged:
        details += f" - FLAGGED (reason: {format_reason(reason)})"
    return details


def format_search_results(term: str, results: Sequence[Union[Video, VideoListing]]) -> List[str]:
    lines = [f"Here are the results for {term}:"]
    for index, entry in numbered(results):
        lines.append(f"  {index}) {format_video_details(entry)}")
    return lines + SELECTION_PROMPT


def _title(payload: Dict) -> str:
    video = payload.get("video")
    if isinstance(video, VideoListing):
        video = video.video
    return video.title if video is not None else payload.get("video_id", "")


def _stopped(payload: Dict) -> List[str]:
    stopped = payload.get("stopped")
    return [f"Stopping video: {stopped.title}"] if stopped is not None else []


def _count(result: CommandResult) -> List[str]:
    return [f"{result.payload['count']} videos in the library"]


def _list(result: CommandResult) -> List[str]:
    lines = ["Here's a list of all available videos:"]
    lines.extend(f"  {format_video_details(v)}" for v in result.payload["videos"])
    return lines


def _play(result: CommandResult) -> List[str]:
    if result.ok:
        return _stopped(result.payload) + [f"Playing video: {_title(result.payload)}"]
    if result.kind is ErrorKind.EMPTY_RESULT:
        return ["No videos available"]
    if result.kind is ErrorKind.FLAGGED:
        reason = format_reason(result.payload.get("reason"))
        return [f"Cannot play video: Video is currently flagged (reason: {reason})"]
    return ["Cannot play video: Video does not exist"]


def _stop(result: CommandResult) -> List[str]:
    if result.ok:
        return [f"Stopping video: {_title(result.payload)}"]
    return ["Cannot stop video: No video is currently playing"]


def _pause(result: CommandResult) -> List[str]:
    if result.ok:
        return [f"Pausing video: {_title(result.payload)}"]
    if result.kind is ErrorKind.ALREADY_PAUSED:
        return [f"Video already paused: {_title(result.payload)}"]
    return ["Cannot pause video: No video is currently playing"]


def _resume(result: CommandResult) -> List[str]:
    if result.ok:
        return [f"Continuing video: {_title(result.payload)}"]
    if result.kind is ErrorKind.NOT_PAUSED:
        return ["Cannot continue video: Video is not paused"]
    return ["Cannot continue video: No video is currently playing"]


def _show_playing(result: CommandResult) -> List[str]:
    listing = result.payload.get("video")
    if listing is None:
        return ["No video is currently playing"]
    details = format_video_details(listing)
    if result.payload.get("paused"):
        details += " - PAUSED"
    return [f"Currently playing: {details}"]


def _create_playlist(result: CommandResult) -> List[str]:
    if result.ok:
        return [f"Successfully created new playlist: {result.payload['playlist_name']}"]
    return ["Cannot create playlist: A playlist with the same name already exists"]


_PLAYLIST_VIDEO_ERRORS = {
    ErrorKind.PLAYLIST_NOT_FOUND: "Playlist does not exist",
    ErrorKind.NOT_FOUND: "Video does not exist",
    ErrorKind.ALREADY_IN_PLAYLIST: "Video already added",
    ErrorKind.NOT_IN_PLAYLIST: "Video is not in playlist",
}


def _playlist_video_error(result: CommandResult) -> str:
    if result.kind is ErrorKind.FLAGGED:
        reason = format_reason(result.payload.get("reason"))
        return f"Video is currently flagged (reason: {reason})"
    return _PLAYLIST_VIDEO_ERRORS[result.kind]


def _add_to_playlist(result: CommandResult) -> List[str]:
    name = result.payload["playlist_name"]
    if result.ok:
        return [f"Added video to {name}: {_title(result.payload)}"]
    return [f"Cannot add video to {name}: {_playlist_video_error(result)}"]


def _remove_from_playlist(result: CommandResult) -> List[str]:
    name = result.payload["playlist_name"]
    if result.ok:
        return [f"Removed video from {name}: {_title(result.payload)}"]
    return [f"Cannot remove video from {name}: {_playlist_video_error(result)}"]


def _show_all_playlists(result: CommandResult) -> List[str]:
    names = result.payload["playlists"]
    if not names:
        return ["No playlists exist yet"]
    return ["Showing all playlists:"] + list(names)


def _show_playlist(result: CommandResult) -> List[str]:
    name = result.payload["playlist_name"]
    if not result.ok:
        return [f"Cannot show playlist {name}: Playlist does not exist"]
    lines = [f"Showing playlist: {name}"]
    videos = result.payload["videos"]
    if not videos:
        return lines + ["   No videos here yet"]
    return lines + [f"   {format_video_details(v)}" for v in videos]


def _clear_playlist(result: CommandResult) -> List[str]:
    name = result.payload["playlist_name"]
    if result.ok:
        return [f"Successfully removed all videos from {name}"]
    return [f"Cannot clear playlist {name}: Playlist does not exist"]


def _delete_playlist(result: CommandResult) -> List[str]:
    name = result.payload["playlist_name"]
    if result.ok:
        return [f"Deleted playlist: {name}"]
    return [f"Cannot delete playlist {name}: Playlist does not exist"]


def _search(result: CommandResult) -> List[str]:
    # The numbered results were shown by the selection provider before it asked.
    if not result.ok:
        return [f"No search results for {result.payload['term']}"]
    playback = result.payload.get("playback")
    return render(playback) if playback is not None else []


def _flag_video(result: CommandResult) -> List[str]:
    if result.ok:
        reason = format_reason(result.payload.get("reason"))
        return _stopped(result.payload) + [
            f"Successfully flagged video: {_title(result.payload)} (reason: {reason})"
        ]
    if result.kind is ErrorKind.ALREADY_FLAGGED:
        return ["Cannot flag video: Video is already flagged"]
    return ["Cannot flag video: Video does not exist"]


def _allow_video(result: CommandResult) -> List[str]:
    if result.ok:
        return [f"Successfully removed flag from video: {_title(result.payload)}"]
    if result.kind is ErrorKind.NOT_FLAGGED:
        return ["Cannot remove flag from video: Video is not flagged"]
    return ["Cannot remove flag from video: Video does not exist"]


RENDERERS: Dict[str, Callable[[CommandResult], List[str]]] = {
    "count": _count,
    "list": _list,
    "play": _play,
    "play_random": _play,
    "stop": _stop,
    "pause": _pause,
    "resume": _resume,
    "show_playing": _show_playing,
    "create_playlist": _create_playlist,
    "add_to_playlist": _add_to_playlist,
    "show_all_playlists": _show_all_playlists,
    "show_playlist": _show_playlist,
    "remove_from_playlist": _remove_from_playlist,
    "clear_playlist": _clear_playlist,
    "delete_playlist": _delete_playlist,
    "search_videos": _search,
    "search_videos_with_tag": _search,
    "flag_video": _flag_video,
    "allow_video": _allow_video,
}


def render(result: CommandResult) -> List[str]:
    """Render a command result as output lines.

    Args:
        result: Result returned by a SessionEngine command

    Returns:
        Lines to show the user

    Raises:
        KeyError: If the command has no renderer
    """
    return RENDERERS[result.command](result)
