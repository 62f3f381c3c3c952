"""Command-line interface for the video player."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import auth, config
from .catalog import VideoCatalog
from .commands import COMMANDS
from .errors import CatalogError, log_error
from .formatting import format_search_results, render
from .logging_config import configure_logging, get_logger
from .models import Video
from .session import SessionEngine
from .youtube_source import load_playlist_catalog, parse_playlist_url

logger = get_logger(__name__)

PROMPT = "YT> "
WELCOME = (
    "Hello and welcome to YouTube, what would you like to do?\n"
    "Enter HELP for list of available commands or EXIT to terminate."
)
GOODBYE = "YouTube has now terminated its execution. Thank you and goodbye!"
UNKNOWN = "Please enter a valid command, type HELP for a list of available commands."


def console_selection(term: str, results: Sequence[Video]) -> str:
    """Show numbered search results and read the user's choice from stdin."""
    for line in format_search_results(term, results):
        print(line)
    try:
        return input()
    except EOFError:
        return ""


def help_text() -> str:
    lines = ["Available commands:"]
    for command in COMMANDS.values():
        lines.append(f"    {command.usage or command.name} - {command.help}")
    lines.append("    HELP - Displays help.")
    lines.append("    EXIT - Terminates the program execution.")
    return "\n".join(lines)


def execute_line(engine: SessionEngine, line: str) -> bool:
    """Execute one line typed at the prompt.

    Args:
        engine: Session to run the command against
        line: Raw input line

    Returns:
        bool: False when the user asked to exit, True otherwise
    """
    words = line.split()
    if not words:
        return True

    name = words[0].upper()
    if name == "EXIT":
        print(GOODBYE)
        return False
    if name == "HELP":
        print(help_text())
        return True

    command_class = COMMANDS.get(name)
    if command_class is None:
        print(UNKNOWN)
        return True

    try:
        result = command_class(engine).run(words[1:])
    except ValueError as e:
        print(str(e))
        return True

    for output in render(result):
        print(output)
    return True


def run_loop(engine: SessionEngine) -> None:
    """Read commands from stdin until EXIT or end of input."""
    print(WELCOME)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if not execute_line(engine, line):
            break


def load_catalog(args: argparse.Namespace) -> Optional[VideoCatalog]:
    """Load the catalog named on the command line.

    Returns:
        The catalog, or None if it could not be loaded
    """
    try:
        if args.youtube_playlist:
            youtube = auth.get_youtube_service()
            if not youtube:
                logger.error("Failed to get YouTube service")
                return None
            return load_playlist_catalog(youtube, parse_playlist_url(args.youtube_playlist))
        return VideoCatalog.from_file(args.catalog)
    except (CatalogError, ValueError) as e:
        log_error(e, "Failed to load catalog")
        return None


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="In-memory video library player")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--catalog",
        default=config.CATALOG_FILE,
        help="Catalog file with one 'title | video_id | tags' line per video",
    )
    parser.add_argument(
        "--youtube-playlist",
        help="Load the catalog from a YouTube playlist ID or URL instead of a file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(logging.DEBUG if args.debug else config.LOG_LEVEL)

    catalog = load_catalog(args)
    if catalog is None:
        return 1

    engine = SessionEngine(catalog, selection_provider=console_selection)
    try:
        run_loop(engine)
    except KeyboardInterrupt:
        print()
        print(GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
