"""
Appstore database configuration.
Stores applications and their users.

Structure:
- apps: Application documents with embedded rights
- users: User documents
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

DB_NAME = "appstore"


class Collections:
    """Collection names in the appstore database."""
    APPS = "apps"
    USERS = "users"
    
    # Index definitions for each collection
    INDEXES = {
        "apps": [
            {"keys": [("id", 1)], "unique": True},
        ],
        "users": [
            {"keys": [("id", 1)], "unique": True},
        ],
    }


async def create_appstore_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for appstore collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
