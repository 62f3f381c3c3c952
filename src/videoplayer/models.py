"""Data classes shared across the session engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import ErrorKind, VideoPlayerError


@dataclass(frozen=True)
class Video:
    """A catalog entry. Immutable once loaded."""

    video_id: str
    title: str
    tags: Tuple[str, ...] = ()

    @property
    def tag_string(self) -> str:
        return " ".join(self.tags)


@dataclass(frozen=True)
class VideoListing:
    """A video as shown to the user, with its moderation state."""

    video: Video
    flagged: bool = False
    flag_reason: Optional[str] = None


class Outcome(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class CommandResult:
    """Structured result of one session command.

    Attributes:
        command: Name of the command that produced the result
        outcome: Whether the command succeeded
        kind: Error kind for rejected commands, None on success
        payload: Command data needed to report the outcome
    """

    command: str
    outcome: Outcome
    kind: Optional[ErrorKind] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def success(cls, command: str, **payload: Any) -> "CommandResult":
        return cls(command=command, outcome=Outcome.SUCCESS, payload=payload)

    @classmethod
    def failure(cls, command: str, error: VideoPlayerError, **payload: Any) -> "CommandResult":
        data = dict(error.details)
        data.update(payload)
        return cls(command=command, outcome=Outcome.ERROR, kind=error.kind, payload=data)
