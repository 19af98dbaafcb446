"""
Client settings API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends

from core import db
from core.errors import error_response

from . import service
from .repository import ClientSettingsRepository

router = APIRouter(prefix="/client-settings")


def get_client_settings_repository(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> ClientSettingsRepository:
    return ClientSettingsRepository(pool)


@router.get("/{client_id}")
async def read_client_settings(
    client_id: str,
    repository: ClientSettingsRepository = Depends(get_client_settings_repository),
):
    result = await service.get_client_settings(repository, client_id)
    if not result.is_ok:
        return error_response(result.error)
    return result.value.to_document()


@router.put("/{client_id}")
async def write_client_settings(
    client_id: str,
    payload: Any = Body(default=None),
    repository: ClientSettingsRepository = Depends(get_client_settings_repository),
):
    result = await service.update_client_settings(repository, client_id, payload)
    if not result.is_ok:
        return error_response(result.error)
    return result.value.to_document()
