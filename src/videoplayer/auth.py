"""YouTube API authentication handling."""

import os
import pickle
from typing import Optional
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from . import config
from .errors import log_error
from .logging_config import get_logger

logger = get_logger(__name__)


def get_youtube_service() -> Optional[object]:
    """
    Get a YouTube Data API service object.
    Uses YOUTUBE_API_KEY when set, otherwise OAuth client secrets.
    Returns None if authentication fails.
    """
    if config.YOUTUBE_API_KEY:
        try:
            return build("youtube", "v3", developerKey=config.YOUTUBE_API_KEY)
        except Exception as e:
            log_error(e, "Failed to build YouTube service")
            return None

    if not config.CLIENT_SECRETS_FILE:
        logger.error("Neither YOUTUBE_API_KEY nor GOOGLE_CLIENT_SECRETS_FILE is set")
        return None

    creds = None

    # Load existing credentials if available
    if os.path.exists(config.TOKEN_FILE):
        with open(config.TOKEN_FILE, "rb") as token:
            creds = pickle.load(token)

    # If there are no (valid) credentials available, let the user log in
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            try:
                flow = InstalledAppFlow.from_client_secrets_file(
                    config.CLIENT_SECRETS_FILE, config.YOUTUBE_SCOPES
                )
                creds = flow.run_local_server(port=0)
            except Exception as e:
                log_error(e, "Authentication failed")
                return None

        # Save the credentials for the next run
        os.makedirs(os.path.dirname(config.TOKEN_FILE), exist_ok=True)
        with open(config.TOKEN_FILE, "wb") as token:
            pickle.dump(creds, token)

    try:
        return build("youtube", "v3", credentials=creds)
    except Exception as e:
        log_error(e, "Failed to build YouTube service")
        return None
