"""
Client settings business logic.

Scope:
- lazy creation of the default document on first read
- full-document replace on write
- mapping of storage errors to an opaque failure
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import Result, StorageFailure

from . import validation
from .repository import ClientSettingsRepository
from .schemas import ClientSettings, default_client_settings

logger = logging.getLogger(__name__)


async def get_client_settings(
    repository: ClientSettingsRepository,
    raw_client_id: Any,
) -> Result[ClientSettings]:
    parsed = validation.validate_client_id(raw_client_id)
    if not parsed.is_ok:
        return parsed
    client_id = parsed.value

    try:
        settings = await repository.get_by_client_id(client_id)
        if settings is None:
            logger.info("client_settings_defaulted client_id=%s", client_id)
            settings = await repository.upsert(client_id, default_client_settings(client_id))
    except Exception:
        logger.exception("client_settings_read_failed client_id=%s", client_id)
        return Result.failure(StorageFailure())

    return Result.success(settings)


async def update_client_settings(
    repository: ClientSettingsRepository,
    raw_client_id: Any,
    payload: Any,
) -> Result[ClientSettings]:
    parsed = validation.validate_client_id(raw_client_id)
    if not parsed.is_ok:
        return parsed
    client_id = parsed.value

    validated = validation.validate_client_settings(payload, client_id)
    if not validated.is_ok:
        return validated

    try:
        settings = await repository.upsert(client_id, validated.value)
    except Exception:
        logger.exception("client_settings_upsert_failed client_id=%s", client_id)
        return Result.failure(StorageFailure())

    return Result.success(settings)
