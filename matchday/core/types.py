"""Core data types for Matchday.

Match records are frozen dataclasses; a status change produces a new record
via dataclasses.replace() rather than mutating a shared one.
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class MatchStatus(str, Enum):
    """Match lifecycle states, in temporal order."""

    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"


@dataclass(frozen=True)
class Match:
    """A time-bounded match.

    start_time/end_time are kept as received (datetime or ISO string) so that
    a malformed value survives until derivation decides what to do with it.
    """

    start_time: datetime | str
    end_time: datetime | str | None
    status: MatchStatus

    id: int | None = None
    sport: str = ""
    home_team: str = ""
    away_team: str = ""
    home_score: int = 0
    away_score: int = 0
    created_at: str | None = None

    def __post_init__(self):
        # Accept wire values ("scheduled") as well as enum members
        object.__setattr__(self, "status", MatchStatus(self.status))


class StatusPersister(Protocol):
    """Port that durably stores a new status for one match."""

    def __call__(self, status: MatchStatus) -> Awaitable[None]: ...
