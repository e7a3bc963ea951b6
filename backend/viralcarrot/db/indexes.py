# viralcarrot/db/indexes.py
# Collection indexes, ensured once at startup

from pymongo import ASCENDING, DESCENDING

from viralcarrot.db.init import get_db
from viralcarrot.services.community import COLLECTION


async def ensure_user_recipe_indexes(db):
    col = db[COLLECTION]
    await col.create_index("id", unique=True)
    await col.create_index([("createdBy", ASCENDING), ("createdAt", DESCENDING)])
    # trending / community search
    await col.create_index([("status", ASCENDING), ("isPublic", ASCENDING), ("createdAt", DESCENDING)])


async def ensure_indexes():
    db = get_db()
    await ensure_user_recipe_indexes(db)
