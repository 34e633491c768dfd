"""Core types, status derivation and synchronization."""

from matchday.core.exceptions import MatchdayError, MatchNotFoundError, StaleMatchError
from matchday.core.status import get_match_status, parse_timestamp, utc_now
from matchday.core.sync import sync_match_status
from matchday.core.types import Match, MatchStatus, StatusPersister

__all__ = [
    "Match",
    "MatchNotFoundError",
    "MatchStatus",
    "MatchdayError",
    "StaleMatchError",
    "StatusPersister",
    "get_match_status",
    "parse_timestamp",
    "sync_match_status",
    "utc_now",
]
