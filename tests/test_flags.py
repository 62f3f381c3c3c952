"""Tests for the flag registry."""

import pytest

from src.videoplayer.errors import AlreadyFlaggedError, NotFlaggedError, VideoNotFoundError
from src.videoplayer.flags import FlagRegistry


@pytest.fixture
def flags(catalog):
    return FlagRegistry(catalog)


def test_flag_with_reason(flags):
    assert flags.flag("v2", "not cute") == "not cute"
    assert flags.is_flagged("v2")
    assert flags.reason("v2") == "not cute"


def test_flag_without_reason(flags):
    """Test that an empty reason is stored as not supplied."""
    assert flags.flag("v1", "") is None
    assert flags.is_flagged("v1")
    assert flags.reason("v1") is None


def test_flag_unknown_video(flags):
    with pytest.raises(VideoNotFoundError):
        flags.flag("missing", "spam")
    assert len(flags) == 0


def test_flag_twice(flags):
    flags.flag("v1")
    with pytest.raises(AlreadyFlaggedError):
        flags.flag("v1", "again")
    assert flags.reason("v1") is None


def test_allow(flags):
    flags.flag("v1", "spam")
    flags.allow("v1")
    assert not flags.is_flagged("v1")


def test_allow_unflagged(flags):
    with pytest.raises(NotFlaggedError):
        flags.allow("v1")


def test_allow_unknown_video(flags):
    with pytest.raises(VideoNotFoundError):
        flags.allow("missing")


def test_flag_allow_flag_round_trip(flags):
    """Test that allowing a video leaves no trace of the first flag."""
    flags.flag("v1", "reason")
    flags.allow("v1")
    assert flags.flag("v1", "reason2") == "reason2"
    assert flags.reason("v1") == "reason2"
