"""Base command class for session operations."""

from typing import List, Optional, Sequence

from ..logging_config import get_logger
from ..models import CommandResult
from ..session import SessionEngine

# Get logger for this module
logger = get_logger(__name__)


class PlayerCommand:
    """Base class for commands typed at the video player prompt."""

    name = ""
    help = ""
    usage = ""
    min_args = 0
    max_args: Optional[int] = 0

    def __init__(self, engine: SessionEngine):
        """Initialize command.

        Args:
            engine: Session the command operates on
        """
        self.engine = engine
        self._logger = logger

    def validate(self, args: Sequence[str]) -> None:
        """Validate command arguments.

        Raises:
            ValueError: If the argument count is wrong
        """
        if len(args) < self.min_args or (self.max_args is not None and len(args) > self.max_args):
            raise ValueError(f"Usage: {self.usage or self.name}")

    def run(self, args: Sequence[str] = ()) -> CommandResult:
        """Run the command.

        Args:
            args: Words typed after the command name

        Returns:
            CommandResult: Outcome reported by the session

        Raises:
            ValueError: If arguments are invalid
        """
        args = list(args)
        self.validate(args)
        self._logger.debug("Running %s %s", self.name, args)
        return self._run(args)

    def _run(self, args: List[str]) -> CommandResult:
        """Internal run implementation."""
        raise NotImplementedError
