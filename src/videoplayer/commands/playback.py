"""Playback commands."""

from typing import List

from ..models import CommandResult
from .base import PlayerCommand


class PlayCommand(PlayerCommand):
    name = "PLAY"
    help = "Play the specified video."
    usage = "PLAY <video_id>"
    min_args = max_args = 1

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.play(args[0])


class PlayRandomCommand(PlayerCommand):
    name = "PLAY_RANDOM"
    help = "Play a random video."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.play_random()


class StopCommand(PlayerCommand):
    name = "STOP"
    help = "Stop the current video."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.stop()


class PauseCommand(PlayerCommand):
    name = "PAUSE"
    help = "Pause the current video."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.pause()


class ContinueCommand(PlayerCommand):
    name = "CONTINUE"
    help = "Resume the current paused video."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.resume()


class ShowPlayingCommand(PlayerCommand):
    name = "SHOW_PLAYING"
    help = "Display the title, video_id, video tags and paused status of the video that is currently playing (or paused)."

    def _run(self, args: List[str]) -> CommandResult:
        return self.engine.show_playing()
