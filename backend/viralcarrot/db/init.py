# viralcarrot/db/init.py
# Mongo connection helpers (motor), opened on startup / closed on shutdown

from __future__ import annotations
import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from viralcarrot.core.config import settings

log = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


async def init_db() -> AsyncIOMotorDatabase:
    # called once at startup; ping fails fast if the server isn't ready
    global _client, _db
    if _db is not None:
        return _db

    client = AsyncIOMotorClient(settings.MONGO_URI, serverSelectionTimeoutMS=2000)
    db = client[settings.MONGO_DB]
    try:
        await db.command("ping")
    except Exception:
        client.close()
        raise
    _client, _db = client, db
    return _db


async def init_db_with_retries(retries: int | None = None, delay: float = 1.0) -> AsyncIOMotorDatabase | None:
    retries = settings.MONGO_INIT_RETRIES if retries is None else retries
    for i in range(retries):
        try:
            db = await init_db()
            log.info("db ready (%s/%s)", settings.MONGO_URI, settings.MONGO_DB)
            return db
        except Exception as e:
            log.warning("db init retry %d/%d: %s", i + 1, retries, e)
            await asyncio.sleep(delay)
    log.error("db init failed after %d retries; community features disabled", retries)
    return None


def get_db() -> AsyncIOMotorDatabase:
    # routes use this handle; raises until init_db() succeeded
    if _db is None:
        raise RuntimeError("MongoDB is not initialized yet.")
    return _db


async def close_db() -> None:
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
