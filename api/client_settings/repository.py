"""
Client settings persistence (raw SQL over a JSONB document column).
"""

from __future__ import annotations

import asyncpg

from core import db

from .schemas import ClientSettings

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS client_settings (
    client_id BIGINT PRIMARY KEY,
    settings JSONB NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


async def ensure_schema(pool: asyncpg.Pool) -> None:
    await db.execute(pool, CREATE_TABLE_SQL)


class ClientSettingsRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def get_by_client_id(self, client_id: int) -> ClientSettings | None:
        row = await db.fetch_one(
            self._pool,
            """
            SELECT settings
            FROM client_settings
            WHERE client_id = $1
            """,
            client_id,
        )
        if row is None:
            return None
        return ClientSettings.model_validate({**row["settings"], "clientId": client_id})

    async def upsert(self, client_id: int, settings: ClientSettings) -> ClientSettings:
        """
        Replace the whole document for `client_id`, inserting it if missing.

        Returns `settings` as written; the row is not read back.
        """
        await db.execute(
            self._pool,
            """
            INSERT INTO client_settings (client_id, settings)
            VALUES ($1, $2)
            ON CONFLICT (client_id) DO UPDATE
            SET settings = EXCLUDED.settings,
                updated_at = now()
            """,
            client_id,
            settings.to_document(),
        )
        return settings
