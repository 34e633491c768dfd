"""Tests for the matches table operations."""

import asyncio
from datetime import datetime, timezone

import pytest

from matchday.core import MatchNotFoundError, MatchStatus, StaleMatchError, sync_match_status
from matchday.database import (
    create_match,
    get_db,
    get_match,
    init_db,
    list_matches,
    reset_db,
    status_persister,
    update_match_status,
)


def _create(conn, status=MatchStatus.SCHEDULED, end_time="2024-01-01T02:00:00+00:00", **kwargs):
    return create_match(
        conn,
        sport=kwargs.pop("sport", "football"),
        home_team=kwargs.pop("home_team", "Arsenal"),
        away_team=kwargs.pop("away_team", "Chelsea"),
        start_time=kwargs.pop("start_time", "2024-01-01T00:00:00+00:00"),
        end_time=end_time,
        status=status,
        **kwargs,
    )


class TestMatchCrud:
    def test_create_and_get(self, conn):
        created = _create(conn, home_score=1)

        fetched = get_match(conn, created.id)
        assert fetched == created
        assert fetched.status == MatchStatus.SCHEDULED
        assert fetched.home_score == 1
        assert fetched.away_score == 0
        assert fetched.created_at is not None

    def test_create_stores_datetimes_as_iso(self, conn):
        start = datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc)
        match = _create(conn, start_time=start, end_time=None)

        assert match.start_time == "2024-06-01T18:00:00+00:00"
        assert match.end_time is None

    def test_get_missing_returns_none(self, conn):
        assert get_match(conn, 9999) is None

    def test_list_is_newest_first_and_limited(self, conn):
        ids = [_create(conn, home_team=f"Team {i}").id for i in range(5)]

        listed = list_matches(conn, limit=3)
        assert [m.id for m in listed] == ids[::-1][:3]

    def test_init_db_is_idempotent(self, db_path, conn):
        _create(conn)
        conn.commit()
        init_db(db_path)
        assert len(list_matches(conn)) == 1


class TestUpdateMatchStatus:
    def test_update_when_expected_matches(self, conn):
        match = _create(conn)

        update_match_status(conn, match.id, MatchStatus.LIVE, MatchStatus.SCHEDULED)

        assert get_match(conn, match.id).status == MatchStatus.LIVE

    def test_stale_expected_status_is_refused(self, conn):
        match = _create(conn)
        update_match_status(conn, match.id, MatchStatus.LIVE, MatchStatus.SCHEDULED)

        with pytest.raises(StaleMatchError) as exc_info:
            update_match_status(conn, match.id, MatchStatus.FINISHED, MatchStatus.SCHEDULED)

        assert exc_info.value.actual == "live"
        assert get_match(conn, match.id).status == MatchStatus.LIVE

    def test_missing_match(self, conn):
        with pytest.raises(MatchNotFoundError):
            update_match_status(conn, 424242, MatchStatus.LIVE, MatchStatus.SCHEDULED)


class TestStatusPersister:
    def test_sync_writes_through_persister(self, conn):
        match = _create(conn)
        conn.commit()
        clock = lambda: datetime(2024, 1, 1, 3, 0, tzinfo=timezone.utc)  # noqa: E731

        synced = asyncio.run(sync_match_status(match, status_persister(match), clock=clock))

        assert synced.status == MatchStatus.FINISHED
        assert get_match(conn, match.id).status == MatchStatus.FINISHED

    def test_uses_given_db_factory(self, db_path, conn):
        match = _create(conn)
        conn.commit()
        opened = []

        def db_factory():
            opened.append(db_path)
            return get_db(db_path)

        persist = status_persister(match, db_factory=db_factory)
        asyncio.run(persist(MatchStatus.LIVE))

        assert opened == [db_path]
        assert get_match(conn, match.id).status == MatchStatus.LIVE

    def test_concurrent_writers_on_same_snapshot(self, conn):
        """Second writer working from the same stale snapshot is rejected."""
        match = _create(conn)
        conn.commit()
        clock = lambda: datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)  # noqa: E731

        asyncio.run(sync_match_status(match, status_persister(match), clock=clock))
        with pytest.raises(StaleMatchError):
            asyncio.run(sync_match_status(match, status_persister(match), clock=clock))

        assert get_match(conn, match.id).status == MatchStatus.LIVE


class TestResetDb:
    def test_reset_drops_existing_rows(self, db_path):
        with get_db(db_path) as conn:
            _create(conn)

        reset_db(db_path)

        with get_db(db_path) as conn:
            assert list_matches(conn) == []

    def test_reset_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "fresh.db"

        reset_db(path)

        assert path.exists()
        with get_db(path) as conn:
            assert list_matches(conn) == []
