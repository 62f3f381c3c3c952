"""Tests for the auth module."""

import os
from unittest.mock import MagicMock, patch, mock_open

import pytest
from google.oauth2.credentials import Credentials

from src.videoplayer.auth import get_youtube_service
from src.videoplayer import config


@pytest.fixture
def mock_credentials():
    """Create mock credentials."""
    creds = MagicMock(spec=Credentials)
    creds.valid = True
    creds.expired = False
    creds.refresh_token = True
    return creds


@pytest.fixture(autouse=True)
def oauth_config():
    """Configure OAuth client secrets and no API key."""
    with patch.object(config, "YOUTUBE_API_KEY", None), patch.object(
        config, "CLIENT_SECRETS_FILE", "client_secrets.json"
    ):
        yield


@patch("src.videoplayer.auth.build")
def test_get_youtube_service_api_key(mock_build):
    """Test that an API key skips the OAuth flow."""
    with patch.object(config, "YOUTUBE_API_KEY", "key123"):
        assert get_youtube_service() == mock_build.return_value
    mock_build.assert_called_once_with("youtube", "v3", developerKey="key123")


@patch("src.videoplayer.auth.log_error")
@patch("src.videoplayer.auth.build", side_effect=Exception("Build failed"))
def test_get_youtube_service_api_key_build_error(mock_build, mock_log_error):
    with patch.object(config, "YOUTUBE_API_KEY", "key123"):
        assert get_youtube_service() is None
    mock_log_error.assert_called_once_with(mock_build.side_effect, "Failed to build YouTube service")


def test_get_youtube_service_no_credentials_configured():
    """Test service creation when neither key nor secrets file is set."""
    with patch.object(config, "CLIENT_SECRETS_FILE", None):
        assert get_youtube_service() is None


@patch("src.videoplayer.auth.build")
@patch("os.path.exists", return_value=True)
@patch("builtins.open", new_callable=mock_open)
@patch("pickle.load")
def test_get_youtube_service_existing_valid_creds(
    mock_pickle_load, mock_file, mock_exists, mock_build, mock_credentials
):
    """Test service creation with existing valid credentials."""
    mock_pickle_load.return_value = mock_credentials

    service = get_youtube_service()

    assert service == mock_build.return_value
    mock_build.assert_called_once_with("youtube", "v3", credentials=mock_credentials)


@patch("src.videoplayer.auth.build")
@patch("os.path.exists", return_value=True)
@patch("os.makedirs")
@patch("builtins.open", new_callable=mock_open)
@patch("pickle.load")
@patch("pickle.dump")
def test_get_youtube_service_refresh_expired_creds(
    mock_pickle_dump,
    mock_pickle_load,
    mock_file,
    mock_makedirs,
    mock_exists,
    mock_build,
    mock_credentials,
):
    """Test service creation with expired credentials that can be refreshed."""
    mock_credentials.valid = False
    mock_credentials.expired = True
    mock_pickle_load.return_value = mock_credentials

    service = get_youtube_service()

    assert service == mock_build.return_value
    mock_credentials.refresh.assert_called_once()
    mock_pickle_dump.assert_called_once()


@patch("src.videoplayer.auth.build")
@patch("src.videoplayer.auth.InstalledAppFlow.from_client_secrets_file")
@patch("os.path.exists")
@patch("os.makedirs")
@patch("builtins.open", new_callable=mock_open)
@patch("pickle.dump")
def test_get_youtube_service_new_auth_flow(
    mock_pickle_dump,
    mock_file,
    mock_makedirs,
    mock_exists,
    mock_flow,
    mock_build,
    mock_credentials,
):
    """Test service creation runs the OAuth flow and caches the token."""
    mock_exists.side_effect = lambda path: path != config.TOKEN_FILE
    mock_flow.return_value.run_local_server.return_value = mock_credentials

    service = get_youtube_service()

    assert service == mock_build.return_value
    mock_flow.assert_called_once_with("client_secrets.json", config.YOUTUBE_SCOPES)
    mock_makedirs.assert_called_once_with(os.path.dirname(config.TOKEN_FILE), exist_ok=True)
    mock_pickle_dump.assert_called_once()


@patch("src.videoplayer.auth.log_error")
@patch("src.videoplayer.auth.build")
@patch("src.videoplayer.auth.InstalledAppFlow.from_client_secrets_file")
@patch("os.path.exists", return_value=False)
def test_get_youtube_service_auth_flow_error(mock_exists, mock_flow, mock_build, mock_log_error):
    """Test service creation when authentication flow fails."""
    mock_flow.side_effect = Exception("Auth failed")

    assert get_youtube_service() is None
    mock_build.assert_not_called()
    mock_log_error.assert_called_once_with(mock_flow.side_effect, "Authentication failed")


def test_scopes_are_read_only():
    assert config.YOUTUBE_SCOPES == ["https://www.googleapis.com/auth/youtube.readonly"]
