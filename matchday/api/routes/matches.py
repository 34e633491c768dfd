"""Matches API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.concurrency import run_in_threadpool

from matchday.api.models import MatchCreate, MatchResponse, MatchSyncResponse
from matchday.api.websocket import MatchEvent, WebSocketHub
from matchday.core import (
    Match,
    MatchNotFoundError,
    StaleMatchError,
    get_match_status,
    sync_match_status,
)
from matchday.database import create_match, get_db, get_match, list_matches, status_persister

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_LIMIT = 100


async def _broadcast(request: Request, event_type: str, match: MatchResponse) -> None:
    hub: WebSocketHub | None = getattr(request.app.state, "ws_hub", None)
    if hub is None:
        return
    await hub.broadcast(MatchEvent(type=event_type, data=match.model_dump(mode="json")))


def _insert_match(body: MatchCreate) -> Match:
    initial_status = get_match_status(body.start_time, body.end_time)
    with get_db() as conn:
        return create_match(
            conn,
            sport=body.sport,
            home_team=body.home_team,
            away_team=body.away_team,
            start_time=body.start_time,
            end_time=body.end_time,
            status=initial_status,
            home_score=body.home_score,
            away_score=body.away_score,
        )


def _load_match(match_id: int) -> Match | None:
    with get_db() as conn:
        return get_match(conn, match_id)


@router.get("/matches", response_model=list[MatchResponse])
def list_matches_endpoint(limit: int = Query(default=50, ge=1, le=MAX_LIMIT)):
    """List matches, newest first."""
    with get_db() as conn:
        return [MatchResponse.from_match(m) for m in list_matches(conn, limit)]


@router.post("/matches", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
async def create_match_endpoint(body: MatchCreate, request: Request):
    """Create a match.

    The initial status is derived from start/end time at request time.
    """
    match = await run_in_threadpool(_insert_match, body)

    response = MatchResponse.from_match(match)
    logger.info(f"Match {match.id} created ({match.status.value})")
    await _broadcast(request, "match_created", response)
    return response


@router.get("/matches/{match_id}", response_model=MatchResponse)
def get_match_endpoint(match_id: int):
    """Get a match by ID."""
    match = _load_match(match_id)
    if match is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Match not found")
    return MatchResponse.from_match(match)


@router.post("/matches/{match_id}/sync", response_model=MatchSyncResponse)
async def sync_match_endpoint(match_id: int, request: Request):
    """Reconcile a match's stored status with the current time.

    Writes only when the derived status differs from the stored one.
    """
    match = await run_in_threadpool(_load_match, match_id)
    if match is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Match not found")

    try:
        synced = await sync_match_status(match, status_persister(match))
    except MatchNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Match not found"
        ) from None
    except StaleMatchError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None

    changed = synced.status != match.status
    response = MatchResponse.from_match(synced)
    if changed:
        await _broadcast(request, "match_updated", response)

    return MatchSyncResponse(match=response, previous_status=match.status, changed=changed)
