"""Pydantic models for API request/response validation."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator, model_validator

from matchday.core import Match, MatchStatus


class MatchCreate(BaseModel):
    """Match creation request."""

    sport: str = Field(..., min_length=1)
    home_team: str = Field(..., min_length=1)
    away_team: str = Field(..., min_length=1)
    start_time: datetime
    end_time: datetime | None = None
    home_score: int = Field(default=0, ge=0)
    away_score: int = Field(default=0, ge=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def ensure_utc(cls, v: datetime | None) -> datetime | None:
        """Naive timestamps are taken as UTC."""
        if v is None:
            return None
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def end_after_start(self) -> "MatchCreate":
        if self.end_time is not None and self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class MatchResponse(BaseModel):
    """Match as returned by the API."""

    id: int
    sport: str
    home_team: str
    away_team: str
    status: MatchStatus
    start_time: str
    end_time: str | None = None
    home_score: int = 0
    away_score: int = 0
    created_at: str | None = None

    @classmethod
    def from_match(cls, match: Match) -> "MatchResponse":
        return cls(
            id=match.id,
            sport=match.sport,
            home_team=match.home_team,
            away_team=match.away_team,
            status=match.status,
            start_time=_as_text(match.start_time),
            end_time=_as_text(match.end_time) if match.end_time is not None else None,
            home_score=match.home_score,
            away_score=match.away_score,
            created_at=match.created_at,
        )


class MatchSyncResponse(BaseModel):
    """Result of a status sync."""

    match: MatchResponse
    previous_status: MatchStatus
    changed: bool


def _as_text(value: datetime | str) -> str:
    return value.isoformat() if isinstance(value, datetime) else str(value)
