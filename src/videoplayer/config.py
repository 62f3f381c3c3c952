"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Catalog Settings
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CATALOG_FILE = os.path.join(PACKAGE_DIR, "data", "videos.txt")
CATALOG_FILE = os.getenv("VIDEOPLAYER_CATALOG_FILE", DEFAULT_CATALOG_FILE)

# Logging Settings
LOG_LEVEL = os.getenv("VIDEOPLAYER_LOG_LEVEL", "WARNING")

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")
CREDENTIALS_DIR = os.getenv("CREDENTIALS_DIR", os.path.join(DATA_DIR, "credentials"))

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
CLIENT_SECRETS_FILE = os.getenv("GOOGLE_CLIENT_SECRETS_FILE")
TOKEN_FILE = os.path.join(CREDENTIALS_DIR, "token.pickle")
PAGE_SIZE = 50  # Maximum results per YouTube Data API request
