"""Match status derivation.

Status is a pure function of (start_time, end_time, now):

    now <  start                 -> scheduled
    now >= start, now >= end     -> finished
    otherwise                    -> live

The start boundary is exclusive for "scheduled" and the end boundary is
inclusive for "finished". A start time that cannot be parsed gives None
(indeterminate); an end time that cannot be parsed is treated as absent.
"""

from datetime import datetime, timezone

from matchday.core.types import MatchStatus


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: object) -> datetime | None:
    """Parse a timestamp into an aware UTC datetime.

    Args:
        value: datetime or ISO-8601 string. Naive values are taken as UTC.

    Returns:
        Aware UTC datetime, or None if the value is missing or malformed
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        # Valid local time whose UTC equivalent is outside datetime's range
        return None


def get_match_status(
    start_time: datetime | str,
    end_time: datetime | str | None = None,
    now: datetime | None = None,
) -> MatchStatus | None:
    """Derive the status of a match at a reference time.

    Args:
        start_time: Match start (datetime or ISO string)
        end_time: Match end, or None for an open-ended match
        now: Reference time. Defaults to the current UTC time.

    Returns:
        MatchStatus, or None if start_time cannot be parsed
    """
    start = parse_timestamp(start_time)
    if start is None:
        return None

    ref = parse_timestamp(now) if now is not None else utc_now()
    if ref is None:
        raise ValueError(f"Invalid reference time: {now!r}")

    if ref < start:
        return MatchStatus.SCHEDULED

    end = parse_timestamp(end_time) if end_time is not None else None
    if end is not None and ref >= end:
        return MatchStatus.FINISHED

    return MatchStatus.LIVE
