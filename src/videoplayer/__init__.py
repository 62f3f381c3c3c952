"""In-memory video library player."""

__version__ = "0.1.0"

# Import all public components
from .catalog import VideoCatalog
from .cli import main
from .commands import COMMANDS, PlayerCommand
from .errors import CatalogError, ErrorKind, VideoPlayerError
from .flags import FlagRegistry
from .formatting import render
from .logging_config import configure_logging, get_logger
from .models import CommandResult, Outcome, Video, VideoListing
from .playback import PlaybackState
from .playlists import PlaylistStore
from .search import SearchEngine, SearchField
from .session import SessionEngine
from .youtube_source import load_playlist_catalog

# Import config variables
from .config import (  # noqa: F401
    CATALOG_FILE,
    LOG_LEVEL,
    YOUTUBE_SCOPES,
    CLIENT_SECRETS_FILE,
    CREDENTIALS_DIR,
    TOKEN_FILE,
)

# Configure logging
configure_logging(LOG_LEVEL)

# Get logger for this module
logger = get_logger(__name__)
