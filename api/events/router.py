"""
Event and ticket listing endpoints.

`/events` and `/optimized-events` serve the same cursor-paginated listing.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query

from core import db
from core.errors import error_response

from . import service
from .repository import EventsRepository, TicketsRepository

router = APIRouter()


def get_events_repository(pool: asyncpg.Pool = Depends(db.get_pool)) -> EventsRepository:
    return EventsRepository(pool)


def get_tickets_repository(pool: asyncpg.Pool = Depends(db.get_pool)) -> TicketsRepository:
    return TicketsRepository(pool)


@router.get("/events")
@router.get("/optimized-events")
async def list_events(
    limit: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    repository: EventsRepository = Depends(get_events_repository),
):
    result = await service.list_events(repository, raw_limit=limit, cursor=cursor)
    if not result.is_ok:
        return error_response(result.error)
    return {"events": result.value.items, "nextCursor": result.value.next_cursor}


@router.get("/optimized-events/{event_id}/tickets")
async def list_tickets(
    event_id: str,
    limit: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    repository: TicketsRepository = Depends(get_tickets_repository),
):
    result = await service.list_tickets(
        repository,
        raw_event_id=event_id,
        raw_limit=limit,
        cursor=cursor,
    )
    if not result.is_ok:
        return error_response(result.error)
    return {"tickets": result.value.items, "nextCursor": result.value.next_cursor}
