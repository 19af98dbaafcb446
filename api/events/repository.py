"""
Events and tickets persistence (raw SQL, read-only).

Both tables are owned elsewhere; this module only pages through them.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.pagination import Page, parse_cursor, window


class EventsRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_page(self, *, limit: int, cursor: str | None = None) -> Page:
        """
        One page of events, newest `date` first, ties broken by `id` descending.

        The cursor is the id of the last event already seen. It is resolved
        to that event's (date, id) so the next page continues in the same
        composite order. An unknown id starts over from the first page.
        """
        rows = await db.fetch_all(
            self._pool,
            """
            WITH anchor AS (
                SELECT date, id
                FROM events
                WHERE id = $2::bigint
            )
            SELECT e.id,
                   e.name,
                   e.date,
                   e.location,
                   e.description,
                   e.created_at AS "createdAt",
                   e.updated_at AS "updatedAt"
            FROM events e
            WHERE NOT EXISTS (SELECT 1 FROM anchor)
               OR (e.date, e.id) < (SELECT date, id FROM anchor)
            ORDER BY e.date DESC, e.id DESC
            LIMIT $1
            """,
            limit + 1,
            parse_cursor(cursor),
        )
        return window(rows, limit)


class TicketsRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_page(self, *, event_id: int, limit: int, cursor: str | None = None) -> Page:
        """
        One page of an event's tickets in ascending `id` order.
        """
        rows = await db.fetch_all(
            self._pool,
            """
            SELECT id,
                   event_id AS "eventId",
                   type,
                   status,
                   price,
                   created_at AS "createdAt",
                   updated_at AS "updatedAt"
            FROM tickets
            WHERE event_id = $1::bigint
              AND ($3::bigint IS NULL OR id > $3)
            ORDER BY id ASC
            LIMIT $2
            """,
            event_id,
            limit + 1,
            parse_cursor(cursor),
        )
        return window(rows, limit)
