"""Match status synchronization.

Reconciles the stored status of a match with the derived one, writing only
when they differ.

The synchronizer assumes one writer per match. Two concurrent calls on the
same snapshot can both decide to write; the SQLite persister guards against
that with a compare-and-swap on the previous status (see
matchday.database.matches.update_match_status).
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from matchday.core.status import get_match_status, utc_now
from matchday.core.types import Match, StatusPersister

logger = logging.getLogger(__name__)


async def sync_match_status(
    match: Match,
    persist: StatusPersister,
    *,
    clock: Callable[[], datetime] = utc_now,
) -> Match:
    """Bring a match's status in line with the current time.

    Args:
        match: Snapshot of the stored match
        persist: Async callable that durably stores a new status
        clock: Source of the current time

    Returns:
        The same record if nothing changed, otherwise a new record carrying
        the persisted status. If persist raises, the error propagates and no
        new record is produced.
    """
    next_status = get_match_status(match.start_time, match.end_time, clock())

    if next_status is None:
        logger.debug(f"Match {match.id}: unparseable start time {match.start_time!r}")
        return match

    if next_status == match.status:
        return match

    await persist(next_status)
    logger.info(f"Match {match.id}: {match.status.value} -> {next_status.value}")
    return replace(match, status=next_status)
