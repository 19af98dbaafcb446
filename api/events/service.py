"""
Listing business logic: parameter checks, then exactly one store call.
"""

from __future__ import annotations

import logging

from core.errors import Result, StorageFailure, ValidationFailure
from core.pagination import Page, parse_bigint, parse_limit

from .repository import EventsRepository, TicketsRepository

logger = logging.getLogger(__name__)

INVALID_LIMIT_MESSAGE = "Invalid limit parameter"
INVALID_PARAMETERS_MESSAGE = "Invalid parameters"


async def list_events(
    repository: EventsRepository,
    *,
    raw_limit: str | None = None,
    cursor: str | None = None,
) -> Result[Page]:
    limit = parse_limit(raw_limit, error_message=INVALID_LIMIT_MESSAGE)
    if not limit.is_ok:
        return limit

    try:
        page = await repository.list_page(limit=limit.value, cursor=cursor)
    except Exception:
        logger.exception("events_list_failed limit=%s cursor=%r", limit.value, cursor)
        return Result.failure(StorageFailure())
    return Result.success(page)


async def list_tickets(
    repository: TicketsRepository,
    *,
    raw_event_id: str,
    raw_limit: str | None = None,
    cursor: str | None = None,
) -> Result[Page]:
    event_id = parse_bigint(raw_event_id)
    limit = parse_limit(raw_limit, error_message=INVALID_PARAMETERS_MESSAGE)
    if event_id is None or event_id < 1 or not limit.is_ok:
        return Result.failure(ValidationFailure(INVALID_PARAMETERS_MESSAGE))

    try:
        page = await repository.list_page(event_id=event_id, limit=limit.value, cursor=cursor)
    except Exception:
        logger.exception("tickets_list_failed event_id=%s limit=%s cursor=%r", event_id, limit.value, cursor)
        return Result.failure(StorageFailure())
    return Result.success(page)
