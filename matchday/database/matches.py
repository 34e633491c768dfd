"""Match database operations.

CRUD for the matches table, plus the status writer used by the synchronizer.
"""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime
from sqlite3 import Connection, Row

from fastapi.concurrency import run_in_threadpool

from matchday.core import Match, MatchNotFoundError, MatchStatus, StaleMatchError, StatusPersister
from matchday.database.connection import get_db

logger = logging.getLogger(__name__)


def _to_db_time(value: datetime | str | None) -> str | None:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _row_to_match(row: Row) -> Match:
    return Match(
        id=row["id"],
        sport=row["sport"],
        home_team=row["home_team"],
        away_team=row["away_team"],
        status=MatchStatus(row["status"]),
        start_time=row["start_time"],
        end_time=row["end_time"],
        home_score=row["home_score"],
        away_score=row["away_score"],
        created_at=row["created_at"],
    )


def create_match(
    conn: Connection,
    sport: str,
    home_team: str,
    away_team: str,
    start_time: datetime | str,
    status: MatchStatus,
    end_time: datetime | str | None = None,
    home_score: int = 0,
    away_score: int = 0,
) -> Match:
    """Insert a match.

    Args:
        conn: Database connection
        sport: Sport name
        home_team: Home team name
        away_team: Away team name
        start_time: Start time (datetime or ISO string)
        status: Initial status
        end_time: End time, or None for an open-ended match
        home_score: Initial home score
        away_score: Initial away score

    Returns:
        The stored match
    """
    cursor = conn.execute(
        """
        INSERT INTO matches (
            sport, home_team, away_team, status,
            start_time, end_time, home_score, away_score
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            sport,
            home_team,
            away_team,
            MatchStatus(status).value,
            _to_db_time(start_time),
            _to_db_time(end_time),
            home_score,
            away_score,
        ),
    )
    match = get_match(conn, cursor.lastrowid)
    logger.debug(f"Created match {match.id}: {home_team} vs {away_team} ({match.status.value})")
    return match


def get_match(conn: Connection, match_id: int) -> Match | None:
    """Get a match by ID.

    Returns:
        Match or None if not found
    """
    cursor = conn.execute("SELECT * FROM matches WHERE id = ?", (match_id,))
    row = cursor.fetchone()
    return _row_to_match(row) if row else None


def list_matches(conn: Connection, limit: int = 50) -> list[Match]:
    """List matches, newest first."""
    cursor = conn.execute(
        "SELECT * FROM matches ORDER BY created_at DESC, id DESC LIMIT ?",
        (limit,),
    )
    return [_row_to_match(row) for row in cursor.fetchall()]


def update_match_status(
    conn: Connection,
    match_id: int,
    new_status: MatchStatus,
    expected_status: MatchStatus,
) -> None:
    """Write a new status if the stored one is still expected_status.

    Args:
        conn: Database connection
        match_id: Match ID
        new_status: Status to store
        expected_status: Status the caller read before deciding to write

    Raises:
        MatchNotFoundError: No match with this ID
        StaleMatchError: The stored status changed since the caller read it
    """
    cursor = conn.execute(
        "UPDATE matches SET status = ? WHERE id = ? AND status = ?",
        (MatchStatus(new_status).value, match_id, MatchStatus(expected_status).value),
    )
    if cursor.rowcount == 1:
        conn.commit()
        return

    row = conn.execute("SELECT status FROM matches WHERE id = ?", (match_id,)).fetchone()
    if row is None:
        raise MatchNotFoundError(match_id)
    raise StaleMatchError(match_id, MatchStatus(expected_status).value, row["status"])


def status_persister(
    match: Match,
    db_factory: Callable[[], AbstractContextManager[Connection]] = get_db,
) -> StatusPersister:
    """Build the persist port for one match snapshot.

    Each write opens its own connection in a worker thread so the event loop
    never blocks on SQLite. The write is conditioned on the snapshot's status,
    so a concurrent writer that already moved the match on causes
    StaleMatchError.

    Args:
        match: Snapshot the caller read
        db_factory: Context manager factory yielding a connection
    """

    def write(status: MatchStatus) -> None:
        with db_factory() as conn:
            update_match_status(conn, match.id, status, match.status)

    async def persist(status: MatchStatus) -> None:
        await run_in_threadpool(write, status)

    return persist
