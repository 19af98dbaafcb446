"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created by the FastAPI lifespan (see `api/main.py`) and stored on
`app.state.pool`. Repositories receive it through `get_pool` instead of
reaching for a module-level handle.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import json
from typing import Any

import asyncpg
from fastapi import Request

from . import config


async def _init_connection(conn: asyncpg.Connection) -> None:
    # JSONB columns round-trip as Python dicts/lists.
    await conn.set_type_codec(
        "jsonb",
        encoder=json.dumps,
        decoder=json.loads,
        schema="pg_catalog",
    )


async def create_pool() -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=config.db_pool_min_size(),
        max_size=config.db_pool_max_size(),
        command_timeout=config.db_command_timeout_s(),
        init=_init_connection,
    )


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await pool.execute(sql, *args)
